"""
Conversions between WGS84 geodetic coordinates and Earth-centered Earth-fixed (ECEF)
Cartesian coordinates.

Both conversions are closed-form. They are evaluated with numpy so that NaN or infinite
inputs propagate through to the outputs instead of raising.
"""

__all__ = ['ecef_to_lla', 'ecef_to_lla_exact', 'lla_to_ecef']

import numpy as np

from geocameras._const import WGS84, Ellipsoid
from geocameras.coordinates import EcefPosition, GeodeticPosition
from geocameras.utils.logging import warn_once

# Latitude (degrees) beyond which the closed-form inversion loses accuracy
_POLAR_LATITUDE = 89.9


def lla_to_ecef(
    longitude: float,
    latitude: float,
    height: float = 0.0,
    ellipsoid: Ellipsoid = WGS84,
) -> EcefPosition:
    """
    Convert a geodetic position to ECEF.

    Args:
        longitude:
            Longitude, in degrees

        latitude:
            Latitude, in degrees

        height:
            (Default 0.0) Ellipsoidal height, in meters

        ellipsoid:
            (Default WGS84) The reference ellipsoid

    Returns:
        EcefPosition
    """
    lon = np.radians(longitude)
    lat = np.radians(latitude)
    sin_lat = np.sin(lat)

    # Radius of curvature in the prime vertical
    n = ellipsoid.a / np.sqrt(1 - ellipsoid.e2 * sin_lat ** 2)

    return EcefPosition(
        (n + height) * np.cos(lat) * np.cos(lon),
        (n + height) * np.cos(lat) * np.sin(lon),
        (n * (1 - ellipsoid.e2) + height) * sin_lat,
    )


def ecef_to_lla(x: float, y: float, z: float, ellipsoid: Ellipsoid = WGS84) -> GeodeticPosition:
    """
    Convert an ECEF position to geodetic coordinates using Bowring's closed-form
    approximation (a single step, no iteration).

    The result is sub-millimeter accurate for terrestrial heights, but the height term
    divides by cos(latitude) and therefore degrades towards the poles. A warning is
    logged (once) when a result lands within 0.1 degree of a pole; use
    ecef_to_lla_exact() where polar accuracy matters.

    Args:
        x, y, z:
            ECEF coordinates, in meters

        ellipsoid:
            (Default WGS84) The reference ellipsoid

    Returns:
        GeodeticPosition
    """
    a, b = ellipsoid.a, ellipsoid.b
    lon = np.arctan2(y, x)
    p = np.sqrt(x ** 2 + y ** 2)

    # Parametric latitude
    theta = np.arctan2(z * a, p * b)
    lat = np.arctan2(
        z + ellipsoid.ep2 * b * np.sin(theta) ** 3,
        p - ellipsoid.e2 * a * np.cos(theta) ** 3,
    )

    n = a / np.sqrt(1 - ellipsoid.e2 * np.sin(lat) ** 2)
    height = p / np.cos(lat) - n

    lat_deg = np.degrees(lat)
    if abs(lat_deg) > _POLAR_LATITUDE:
        warn_once(
            'Converting a near-polar ECEF position; closed-form heights are unreliable '
            'within 0.1 degrees of a pole. (this warning will not repeat)'
        )

    return GeodeticPosition(np.degrees(lon), lat_deg, height)


def ecef_to_lla_exact(x: float, y: float, z: float) -> GeodeticPosition:
    """
    Convert an ECEF position to WGS84 geodetic coordinates using PROJ, which is exact
    everywhere including at the poles. Requires the optional pyproj dependency
    (pip install geocameras[proj]).

    Args:
        x, y, z:
            ECEF coordinates, in meters

    Returns:
        GeodeticPosition
    """
    from pyproj import Transformer  # pylint: disable=import-outside-toplevel
    transformer = Transformer.from_crs('EPSG:4978', 'EPSG:4979', always_xy=True)
    lon, lat, height = transformer.transform(x, y, z)

    return GeodeticPosition(lon, lat, height)
