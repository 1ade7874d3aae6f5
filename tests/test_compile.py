from pathlib import Path


def test_compile():
    import astrocoords
    import astrocoords._base
    import astrocoords._types
    import astrocoords.calc
    import astrocoords.conversion
    import astrocoords.coordinates
    import astrocoords.utils.functions
    import astrocoords.utils.logging

    version_file = Path(__file__).resolve().parents[1] / 'VERSION'
    assert astrocoords.__version__ == version_file.read_text().strip()
