"""
Exposes the version of astrocoords
"""

from importlib.metadata import PackageNotFoundError, version
from pathlib import Path

try:
    __version__ = version("astrocoords")
except PackageNotFoundError:
    # Running from a source checkout; setup.py reads the same file
    __version__ = (Path(__file__).resolve().parents[1] / "VERSION").read_text().strip()

__all__ = ["__version__"]
