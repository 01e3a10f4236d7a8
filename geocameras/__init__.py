
import sys

from geocameras._version import __version__  # noqa: F401
from geocameras.utils.logging import LOGGER
from geocameras.coordinates import EcefPosition, GeodeticPosition, LocalOffset
from geocameras.ellipsoid import ecef_to_lla, lla_to_ecef
from geocameras.tangent_plane import local_enu_to_geodetic
from geocameras.orientation import EulerOpk, HeadingPitchRoll, opk_to_hpr
from geocameras.quaternion import Quaternion, opk_to_ecef_quaternion
from geocameras.cameras import CameraPose, CameraRow, convert_camera, convert_cameras
from geocameras.utils.conditional_imports import ConditionalPackageInterceptor


ConditionalPackageInterceptor.permit_packages(
    {
        'pyproj': 'geocameras[proj]',
    }
)
sys.meta_path.append(ConditionalPackageInterceptor)  # type: ignore

__all__ = [
    'CameraPose',
    'CameraRow',
    'EcefPosition',
    'EulerOpk',
    'GeodeticPosition',
    'HeadingPitchRoll',
    'LocalOffset',
    'Quaternion',
    'convert_camera',
    'convert_cameras',
    'ecef_to_lla',
    'lla_to_ecef',
    'local_enu_to_geodetic',
    'opk_to_ecef_quaternion',
    'opk_to_hpr',
    'LOGGER',
]
