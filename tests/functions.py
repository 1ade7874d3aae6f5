from pytest import approx

from astrocoords import BoundedAngularPair


def assert_pairs_equal(p1: BoundedAngularPair, p2: BoundedAngularPair, abs_tol=1e-7):
    """
    Asserts that two coordinates are of the same type and equal within a specified
    absolute tolerance.

    Args:
        p1: The first coordinate
        p2: The second coordinate
        abs_tol: The absolute tolerance for floating point comparison.
    """
    try:
        assert type(p1) is type(p2)
        assert p1.value1 == approx(p2.value1, abs=abs_tol)
        assert p1.value2 == approx(p2.value2, abs=abs_tol)
    except AssertionError as e:
        print(p1)
        print(p2)
        raise e


def wrap_distance(a: float, b: float, width: float) -> float:
    """The shortest distance between two values on a circle of the given width"""
    diff = (a - b) % width
    return min(diff, width - diff)
