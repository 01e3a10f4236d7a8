"""
Rotation matrix building blocks shared by the orientation and quaternion converters.

Conventions:
    - Right-handed elementary rotations, angles in radians
    - Omega-Phi-Kappa composes as R = Rz(kappa) @ Ry(phi) @ Rx(omega), mapping
      photogrammetric camera axes (X right, Y down, Z forward) into the local
      East-North-Up frame
"""

__all__ = [
    'CAMERA_TO_GLOBE_BODY', 'CAMERA_TO_VIEWER_BODY', 'is_rotation_matrix',
    'opk_rotation_matrix', 'rotation_x', 'rotation_y', 'rotation_z', 'wrap_angle',
]

import numpy as np

# Camera axes (X right, Y down, Z forward) to heading/pitch/roll body axes
# (X forward, Y right, Z up). A permutation with one sign flip; det = -1.
CAMERA_TO_VIEWER_BODY = np.array([
    [0, 0, 1],
    [1, 0, 0],
    [0, -1, 0],
], dtype=np.float64)
CAMERA_TO_VIEWER_BODY.setflags(write=False)

# Camera axes to the body axes the ECEF quaternion is expressed in: Z flipped only.
CAMERA_TO_GLOBE_BODY = np.diag([1., 1., -1.])
CAMERA_TO_GLOBE_BODY.setflags(write=False)


def rotation_x(angle: float) -> np.ndarray:
    """Rotation about the X axis by `angle` radians"""
    c, s = np.cos(angle), np.sin(angle)
    return np.array([
        [1, 0, 0],
        [0, c, -s],
        [0, s, c],
    ], dtype=np.float64)


def rotation_y(angle: float) -> np.ndarray:
    """Rotation about the Y axis by `angle` radians"""
    c, s = np.cos(angle), np.sin(angle)
    return np.array([
        [c, 0, s],
        [0, 1, 0],
        [-s, 0, c],
    ], dtype=np.float64)


def rotation_z(angle: float) -> np.ndarray:
    """Rotation about the Z axis by `angle` radians"""
    c, s = np.cos(angle), np.sin(angle)
    return np.array([
        [c, -s, 0],
        [s, c, 0],
        [0, 0, 1],
    ], dtype=np.float64)


def opk_rotation_matrix(omega: float, phi: float, kappa: float) -> np.ndarray:
    """
    Compute the camera-to-world rotation for photogrammetric Omega-Phi-Kappa angles.

    Args:
        omega:
            Rotation about X, in degrees

        phi:
            Rotation about Y, in degrees

        kappa:
            Rotation about Z, in degrees

    Returns:
        3x3 rotation matrix, Rz(kappa) @ Ry(phi) @ Rx(omega)
    """
    return (
        rotation_z(np.radians(kappa))
        @ rotation_y(np.radians(phi))
        @ rotation_x(np.radians(omega))
    )


def wrap_angle(angle: float) -> float:
    """Wraps an angle in radians to [-pi, pi]"""
    return float(np.arctan2(np.sin(angle), np.cos(angle)))


def is_rotation_matrix(matrix: np.ndarray, tol: float = 1e-6) -> bool:
    """
    Test whether a matrix is a proper rotation, i.e. orthogonal with determinant +1.
    Reflections (determinant -1) such as the body-axis remaps are rejected.

    Args:
        matrix:
            The matrix to test

        tol:
            (Default 1e-6) Numerical tolerance

    Returns:
        bool
    """
    matrix = np.asarray(matrix, dtype=np.float64)
    if matrix.shape != (3, 3):
        return False

    if not np.allclose(matrix @ matrix.T, np.eye(3), atol=tol):
        return False

    return bool(np.isclose(np.linalg.det(matrix), 1.0, atol=tol))
