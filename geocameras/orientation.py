"""
Conversion of photogrammetric Omega-Phi-Kappa angles into the heading/pitch/roll
convention used by globe viewers.

The viewer convention is labelled 'east-radians': heading is measured clockwise
from local East, pitch is the elevation of the body forward axis, and all three angles
are in radians. Given a body-to-ENU matrix R (X forward, Y right, Z up):

    heading = -atan2(R[1, 0], R[0, 0])
    pitch   =  asin(R[2, 0])
    roll    =  atan2(R[2, 1], R[2, 2])

Where the forward axis points more than 30 degrees above the horizon (R[2, 0] > 0.5)
the primary branch is numerically ill-conditioned in heading, and the alternate triple
(heading + pi, -pitch, roll + pi) is reported instead, with heading and roll wrapped to
[-pi, pi].
"""

__all__ = ['EulerOpk', 'HeadingPitchRoll', 'opk_to_hpr']

import math
from typing import Dict, Tuple, Union

import numpy as np

from geocameras._const import EAST_RADIANS, NADIR_THRESHOLD
from geocameras.rotations import CAMERA_TO_VIEWER_BODY, opk_rotation_matrix, wrap_angle


class EulerOpk:
    """
    Photogrammetric exterior orientation angles, in degrees.

    Args:
        omega:
            Rotation about the camera X axis, in degrees

        phi:
            Rotation about the camera Y axis, in degrees

        kappa:
            Rotation about the camera Z axis, in degrees
    """
    kind = 'opk'

    def __init__(
        self,
        omega: Union[float, int, str],
        phi: Union[float, int, str],
        kappa: Union[float, int, str],
    ):
        self.omega = float(omega)
        self.phi = float(phi)
        self.kappa = float(kappa)

    def __eq__(self, other):
        if not isinstance(other, EulerOpk):
            return False

        return self.to_float() == other.to_float()

    def __hash__(self):
        return hash(self.to_float())

    def __repr__(self):
        return f'<EulerOpk({self.omega}, {self.phi}, {self.kappa})>'

    def rotation_matrix(self) -> np.ndarray:
        """The camera-to-ENU rotation, Rz(kappa) @ Ry(phi) @ Rx(omega)"""
        return opk_rotation_matrix(self.omega, self.phi, self.kappa)

    def to_dict(self) -> Dict[str, float]:
        return {'omega': self.omega, 'phi': self.phi, 'kappa': self.kappa}

    def to_float(self) -> Tuple[float, float, float]:
        """Converts the angles to a tuple of (omega, phi, kappa)"""
        return self.omega, self.phi, self.kappa


class HeadingPitchRoll:
    """
    Viewer orientation angles in radians, in the 'east-radians' convention.

    Args:
        heading:
            Heading, clockwise from East, in radians

        pitch:
            Pitch, in radians, within [-pi/2, pi/2]

        roll:
            Roll, in radians
    """
    kind = 'hpr'
    units = 'radians'
    convention = EAST_RADIANS

    def __init__(self, heading: float, pitch: float, roll: float):
        self.heading = float(heading)
        self.pitch = float(pitch)
        self.roll = float(roll)

    def __eq__(self, other):
        if not isinstance(other, HeadingPitchRoll):
            return False

        return self.to_float() == other.to_float()

    def __hash__(self):
        return hash(self.to_float())

    def __repr__(self):
        return f'<HeadingPitchRoll({self.heading}, {self.pitch}, {self.roll} {self.units})>'

    def forward_vector(self) -> np.ndarray:
        """
        The body forward axis in local ENU implied by these angles, i.e. the first
        column of the body-to-ENU matrix they were extracted from.

        Angles produced by the alternate (near-nadir) branch describe the opposite
        direction; the caller is expected to know which branch applies.

        Returns:
            Unit vector (east, north, up)
        """
        cos_pitch = math.cos(self.pitch)
        return np.array([
            cos_pitch * math.cos(self.heading),
            -cos_pitch * math.sin(self.heading),
            math.sin(self.pitch),
        ])

    def to_degrees(self) -> Tuple[float, float, float]:
        """Converts the angles to a tuple of (heading, pitch, roll) in degrees"""
        return math.degrees(self.heading), math.degrees(self.pitch), math.degrees(self.roll)

    def to_dict(self) -> Dict[str, Union[float, str]]:
        return {
            'heading': self.heading,
            'pitch': self.pitch,
            'roll': self.roll,
            'convention': self.convention,
        }

    def to_float(self) -> Tuple[float, float, float]:
        """Converts the angles to a tuple of (heading, pitch, roll)"""
        return self.heading, self.pitch, self.roll


def opk_to_hpr(opk: EulerOpk) -> HeadingPitchRoll:
    """
    Convert Omega-Phi-Kappa angles to viewer heading/pitch/roll.

    Args:
        opk:
            The photogrammetric angles, in degrees

    Returns:
        HeadingPitchRoll, in radians
    """
    # Adding 0.0 folds -0.0 into 0.0, keeping atan2 deterministic for axis-aligned input
    body = opk.rotation_matrix() @ CAMERA_TO_VIEWER_BODY.T + 0.0

    heading = -np.arctan2(body[1, 0], body[0, 0])
    pitch = np.arcsin(np.clip(body[2, 0], -1., 1.))
    roll = np.arctan2(body[2, 1], body[2, 2])

    if body[2, 0] > NADIR_THRESHOLD:
        heading = wrap_angle(heading + np.pi)
        pitch = -pitch
        roll = wrap_angle(roll + np.pi)

    return HeadingPitchRoll(heading, pitch, roll)
