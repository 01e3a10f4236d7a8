"""
Local East-North-Up tangent plane conversions. A project expressed in local
coordinates is anchored at a geodetic origin; offsets are rotated into ECEF with the
tangent-plane basis at that origin.
"""

__all__ = ['enu_to_ecef_rotation', 'geodetic_to_local_enu', 'local_enu_to_geodetic']

import numpy as np

from geocameras.coordinates import GeodeticPosition, LocalOffset
from geocameras.ellipsoid import ecef_to_lla, lla_to_ecef


def enu_to_ecef_rotation(longitude: float, latitude: float) -> np.ndarray:
    """
    Build the rotation from the local ENU frame at (longitude, latitude) to ECEF.

    The columns of the returned matrix are the East, North and Up unit vectors
    expressed in ECEF; its transpose rotates ECEF vectors into ENU.

    Args:
        longitude:
            Longitude of the tangent point, in degrees

        latitude:
            Latitude of the tangent point, in degrees

    Returns:
        3x3 rotation matrix
    """
    lon, lat = np.radians(longitude), np.radians(latitude)
    sin_lon, cos_lon = np.sin(lon), np.cos(lon)
    sin_lat, cos_lat = np.sin(lat), np.cos(lat)

    east = [-sin_lon, cos_lon, 0.]
    north = [-sin_lat * cos_lon, -sin_lat * sin_lon, cos_lat]
    up = [cos_lat * cos_lon, cos_lat * sin_lon, sin_lat]

    return np.array([east, north, up], dtype=np.float64).T


def local_enu_to_geodetic(offset: LocalOffset, origin: GeodeticPosition) -> GeodeticPosition:
    """
    Convert an ENU offset from a geodetic origin into a geodetic position.

    Args:
        offset:
            The East/North/Up offset, in meters

        origin:
            The geodetic position the offset is measured from

    Returns:
        GeodeticPosition
    """
    origin_ecef = np.array(lla_to_ecef(*origin.to_float()).to_float())
    rotation = enu_to_ecef_rotation(origin.longitude, origin.latitude)

    x, y, z = origin_ecef + rotation @ np.array(offset.to_float())
    return ecef_to_lla(x, y, z)


def geodetic_to_local_enu(position: GeodeticPosition, origin: GeodeticPosition) -> LocalOffset:
    """
    Express a geodetic position as an ENU offset from a geodetic origin. Inverse of
    local_enu_to_geodetic().

    Args:
        position:
            The geodetic position to convert

        origin:
            The geodetic position the offset is measured from

    Returns:
        LocalOffset
    """
    delta = (
        np.array(lla_to_ecef(*position.to_float()).to_float())
        - np.array(lla_to_ecef(*origin.to_float()).to_float())
    )
    rotation = enu_to_ecef_rotation(origin.longitude, origin.latitude)

    return LocalOffset(*(rotation.T @ delta))
