"""
Camera attitude as a unit quaternion in the Earth-centered Earth-fixed frame.

The body-to-ECEF matrix is composed as

    R = ENU->ECEF(lon, lat) @ Rz(kappa) @ Ry(phi) @ Rx(omega) @ diag(1, 1, -1)

and converted to a quaternion with the four-case trace method, which always divides
by the largest of the four candidate denominators.

The Z flip gives R a determinant of -1, so R is a reflection rather than a rotation.
The quaternion is the trace-method reading of that improper matrix: it is always a
unit quaternion, but converting it back does not reproduce R.
"""

__all__ = [
    'Quaternion', 'opk_to_ecef_quaternion', 'opk_to_ecef_rotation',
    'rotation_matrix_to_quaternion', 'try_opk_to_ecef_quaternion',
]

from typing import Dict, Optional, Tuple, Union

import numpy as np

from geocameras._const import ECEF_FRAME
from geocameras.orientation import EulerOpk
from geocameras.rotations import CAMERA_TO_GLOBE_BODY
from geocameras.tangent_plane import enu_to_ecef_rotation
from geocameras.utils.logging import LOGGER


class Quaternion:
    """
    A rotation quaternion, stored scalar-last as (x, y, z, w).

    Args:
        x, y, z:
            The vector part

        w:
            The scalar part

        frame:
            (Optional) Name of the frame the quaternion rotates into, e.g. 'ecef'
    """
    kind = 'quaternion'

    def __init__(self, x: float, y: float, z: float, w: float, frame: Optional[str] = None):
        self.x = float(x)
        self.y = float(y)
        self.z = float(z)
        self.w = float(w)
        self.frame = frame

    def __eq__(self, other):
        if not isinstance(other, Quaternion):
            return False

        return self.to_float() == other.to_float() and self.frame == other.frame

    def __hash__(self):
        return hash((*self.to_float(), self.frame))

    def __repr__(self):
        return f'<Quaternion({self.x}, {self.y}, {self.z}, {self.w})>'

    @property
    def norm(self) -> float:
        """Euclidean norm of the four components"""
        return float(np.linalg.norm(self.to_float()))

    def to_rotation_matrix(self) -> np.ndarray:
        """
        Convert to a 3x3 rotation matrix. The quaternion is normalized first, so the
        result is always a proper rotation.
        """
        x, y, z, w = np.array(self.to_float()) / self.norm
        return np.array([
            [1 - 2 * (y * y + z * z), 2 * (x * y - z * w), 2 * (x * z + y * w)],
            [2 * (x * y + z * w), 1 - 2 * (x * x + z * z), 2 * (y * z - x * w)],
            [2 * (x * z - y * w), 2 * (y * z + x * w), 1 - 2 * (x * x + y * y)],
        ])

    def to_dict(self) -> Dict[str, Union[float, str, None]]:
        return {'x': self.x, 'y': self.y, 'z': self.z, 'w': self.w, 'frame': self.frame}

    def to_float(self) -> Tuple[float, float, float, float]:
        """Converts the quaternion to a tuple of (x, y, z, w)"""
        return self.x, self.y, self.z, self.w


def rotation_matrix_to_quaternion(matrix: np.ndarray, frame: Optional[str] = None) -> Quaternion:
    """
    Extract a unit quaternion from a 3x3 rotation matrix.

    If the extracted components have a zero (or NaN) norm they are returned
    un-normalized rather than divided by zero.

    Args:
        matrix:
            A 3x3 rotation matrix

        frame:
            (Optional) Frame label attached to the result

    Returns:
        Quaternion
    """
    m = np.asarray(matrix, dtype=np.float64)
    if m.shape != (3, 3):
        raise ValueError(f'Expected a 3x3 rotation matrix, received shape {m.shape}')

    trace = m[0, 0] + m[1, 1] + m[2, 2]
    if trace > 0:
        s = np.sqrt(trace + 1.) * 2
        w = 0.25 * s
        x = (m[2, 1] - m[1, 2]) / s
        y = (m[0, 2] - m[2, 0]) / s
        z = (m[1, 0] - m[0, 1]) / s
    elif m[0, 0] > m[1, 1] and m[0, 0] > m[2, 2]:
        s = np.sqrt(1. + m[0, 0] - m[1, 1] - m[2, 2]) * 2
        w = (m[2, 1] - m[1, 2]) / s
        x = 0.25 * s
        y = (m[0, 1] + m[1, 0]) / s
        z = (m[0, 2] + m[2, 0]) / s
    elif m[1, 1] > m[2, 2]:
        s = np.sqrt(1. + m[1, 1] - m[0, 0] - m[2, 2]) * 2
        w = (m[0, 2] - m[2, 0]) / s
        x = (m[0, 1] + m[1, 0]) / s
        y = 0.25 * s
        z = (m[1, 2] + m[2, 1]) / s
    else:
        s = np.sqrt(1. + m[2, 2] - m[0, 0] - m[1, 1]) * 2
        w = (m[1, 0] - m[0, 1]) / s
        x = (m[0, 2] + m[2, 0]) / s
        y = (m[1, 2] + m[2, 1]) / s
        z = 0.25 * s

    components = np.array([x, y, z, w])
    norm = np.linalg.norm(components)
    if norm > 0:
        components = components / norm

    return Quaternion(*components, frame=frame)


def opk_to_ecef_rotation(opk: EulerOpk, longitude: float, latitude: float) -> np.ndarray:
    """
    Build the camera body-to-ECEF matrix for a camera at (longitude, latitude).
    The camera Z axis is flipped, so the result has a determinant of -1 and the
    camera looks along its -Z column.

    Args:
        opk:
            The photogrammetric angles, in degrees, relative to local ENU

        longitude:
            Camera longitude, in degrees

        latitude:
            Camera latitude, in degrees

    Returns:
        3x3 matrix
    """
    body_to_enu = opk.rotation_matrix() @ CAMERA_TO_GLOBE_BODY
    return enu_to_ecef_rotation(longitude, latitude) @ body_to_enu


def opk_to_ecef_quaternion(opk: EulerOpk, longitude: float, latitude: float) -> Quaternion:
    """
    Convert Omega-Phi-Kappa angles at a geodetic location to an ECEF-frame quaternion.

    The quaternion is the trace-method reading of the improper matrix returned by
    opk_to_ecef_rotation(). It is a unit quaternion, but its rotation matrix does not
    reproduce that matrix, and its axes do not in general carry the viewing direction.
    Use opk_to_ecef_rotation() where the exact attitude is needed.

    Args:
        opk:
            The photogrammetric angles, in degrees, relative to local ENU

        longitude:
            Camera longitude, in degrees

        latitude:
            Camera latitude, in degrees

    Returns:
        Quaternion tagged with the 'ecef' frame
    """
    return rotation_matrix_to_quaternion(
        opk_to_ecef_rotation(opk, longitude, latitude),
        frame=ECEF_FRAME
    )


def try_opk_to_ecef_quaternion(
    opk: EulerOpk,
    longitude: float,
    latitude: float
) -> Optional[Quaternion]:
    """
    Same as opk_to_ecef_quaternion(), but never raises: a failure to build the
    rotation is logged at debug level and reported as None (no quaternion available).
    """
    try:
        return opk_to_ecef_quaternion(opk, longitude, latitude)
    except (ArithmeticError, TypeError, ValueError) as exc:
        LOGGER.debug('No quaternion produced for %r at (%s, %s): %s', opk, longitude, latitude, exc)
        return None
