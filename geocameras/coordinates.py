"""
Position value types: geodetic (WGS84), Earth-centered Earth-fixed, and local
East-North-Up offsets
"""

__all__ = ['EcefPosition', 'GeodeticPosition', 'LocalOffset']

from typing import Dict, Tuple, Union


class GeodeticPosition:
    """
    A WGS84 geodetic position. Unlike a map coordinate, longitude and latitude are
    stored exactly as given; nothing is wrapped to [-180, 180) or [-90, 90].

    Args:
        longitude:
            Longitude, in degrees

        latitude:
            Latitude, in degrees

        height:
            (Default 0.0) Height above the WGS84 ellipsoid, in meters
    """

    def __init__(
        self,
        longitude: Union[float, int, str],
        latitude: Union[float, int, str],
        height: Union[float, int, str] = 0.0,
    ):
        self.longitude = float(longitude)
        self.latitude = float(latitude)
        self.height = float(height)

    def __eq__(self, other):
        if not isinstance(other, GeodeticPosition):
            return False

        return self.to_float() == other.to_float()

    def __hash__(self):
        return hash(self.to_float())

    def __repr__(self):
        return f'<GeodeticPosition({self.longitude}, {self.latitude}, {self.height})>'

    def to_dict(self) -> Dict[str, float]:
        """Converts the position to a dict of longitude, latitude, height"""
        return {'longitude': self.longitude, 'latitude': self.latitude, 'height': self.height}

    def to_float(self) -> Tuple[float, float, float]:
        """Converts the position to a tuple of (longitude, latitude, height)"""
        return self.longitude, self.latitude, self.height


class EcefPosition:
    """Cartesian position in meters, origin at Earth's center, Z through the north pole"""

    def __init__(self, x: float, y: float, z: float):
        self.x = float(x)
        self.y = float(y)
        self.z = float(z)

    def __eq__(self, other):
        if not isinstance(other, EcefPosition):
            return False

        return self.to_float() == other.to_float()

    def __hash__(self):
        return hash(self.to_float())

    def __repr__(self):
        return f'<EcefPosition({self.x}, {self.y}, {self.z})>'

    def to_float(self) -> Tuple[float, float, float]:
        """Converts the position to a tuple of (x, y, z)"""
        return self.x, self.y, self.z


class LocalOffset:
    """
    An East-North-Up offset, in meters, from some origin. Carries no origin of its
    own; see geocameras.tangent_plane.
    """

    def __init__(self, east: float, north: float, up: float = 0.0):
        self.east = float(east)
        self.north = float(north)
        self.up = float(up)

    def __eq__(self, other):
        if not isinstance(other, LocalOffset):
            return False

        return self.to_float() == other.to_float()

    def __hash__(self):
        return hash(self.to_float())

    def __repr__(self):
        return f'<LocalOffset({self.east}, {self.north}, {self.up})>'

    def to_float(self) -> Tuple[float, float, float]:
        """Converts the offset to a tuple of (east, north, up)"""
        return self.east, self.north, self.up
