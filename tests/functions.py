import math

import numpy as np
from pytest import approx

from geocameras.coordinates import GeodeticPosition


def angle_difference(a: float, b: float) -> float:
    """Smallest absolute difference between two angles, in radians"""
    return abs(math.atan2(math.sin(a - b), math.cos(a - b)))


def assert_angles_equal(actual: float, expected: float, abs_tol=1e-9):
    """
    Asserts that two angles in radians are equal modulo 2*pi, so that -pi and pi
    compare equal.
    """
    assert angle_difference(actual, expected) == approx(0., abs=abs_tol), (actual, expected)


def assert_positions_equal(p1: GeodeticPosition, p2: GeodeticPosition, abs_tol=1e-7, height_tol=1e-3):
    """
    Asserts that two geodetic positions are equal within tolerance.

    Args:
        p1: The first GeodeticPosition
        p2: The second GeodeticPosition
        abs_tol: Tolerance for longitude and latitude, in degrees.
                 Default is 1e-7 (approx 1.1cm at the equator).
        height_tol: Tolerance for height, in meters
    """
    try:
        assert p1.longitude == approx(p2.longitude, abs=abs_tol)
        assert p1.latitude == approx(p2.latitude, abs=abs_tol)
        assert p1.height == approx(p2.height, abs=height_tol)
    except AssertionError as e:
        print(p1)
        print(p2)
        raise e


def assert_all_nan(values):
    assert all(np.isnan(x) for x in values), values
