"""
Constants declarations for geocameras
"""

__all__ = [
    'Ellipsoid', 'WGS84', 'WGS84_A', 'WGS84_B', 'WGS84_E2', 'WGS84_EP2', 'WGS84_F',
    'NADIR_THRESHOLD', 'HPR_CONVENTIONS', 'EAST_RADIANS', 'EAST_DEGREES', 'NORTH_DEGREES',
    'ECEF_FRAME',
]

from typing import NamedTuple


class Ellipsoid(NamedTuple):
    """Reference ellipsoid defined by its semi-major axis and flattening"""
    a: float
    f: float

    @property
    def b(self) -> float:
        """Semi-minor axis (meters)"""
        return self.a * (1 - self.f)

    @property
    def e2(self) -> float:
        """First eccentricity squared"""
        return 1 - (self.b / self.a) ** 2

    @property
    def ep2(self) -> float:
        """Second eccentricity squared"""
        return (self.a ** 2 - self.b ** 2) / self.b ** 2


# WGS84 Ellipsoid Constants
WGS84 = Ellipsoid(a=6378137.0, f=1 / 298.257223563)
WGS84_A = WGS84.a  # Major axis (meters)
WGS84_F = WGS84.f  # Flattening
WGS84_B = WGS84.b
WGS84_E2 = WGS84.e2
WGS84_EP2 = WGS84.ep2

# Vertical component of the body forward axis (cos 60 deg) above which
# heading/pitch/roll extraction switches to the alternate branch
NADIR_THRESHOLD = 0.5

# Orientation convention labels understood by downstream viewers
EAST_RADIANS = 'east-radians'
EAST_DEGREES = 'east-degrees'
NORTH_DEGREES = 'north-degrees'
HPR_CONVENTIONS = (NORTH_DEGREES, EAST_DEGREES)

ECEF_FRAME = 'ecef'
