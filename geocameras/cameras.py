"""
Per-camera conversion of structure-from-motion export rows into globe-ready poses.

A row carries a position, either geodetic (longitude, latitude, height) or local
(east, north, up relative to a project origin), and three orientation angles. When the
export's orientation columns are omega/phi/kappa the angles are converted to viewer
heading/pitch/roll and an ECEF quaternion; otherwise they are passed through untouched
with a convention label, since generic heading/pitch/roll columns carry no rotation
order that could be converted reliably.
"""

__all__ = [
    'CameraPose', 'CameraRow', 'OpkOrientation', 'Orientation', 'PassthroughOrientation',
    'convert_camera', 'convert_cameras', 'get_default_hpr_convention',
    'resolve_orientation_kind', 'set_default_hpr_convention',
]

from typing import Any, Dict, Iterable, List, Literal, Optional, Sequence, Union

from pydantic import validate_call

from geocameras._const import HPR_CONVENTIONS, NORTH_DEGREES
from geocameras.coordinates import GeodeticPosition, LocalOffset
from geocameras.orientation import EulerOpk, HeadingPitchRoll, opk_to_hpr
from geocameras.quaternion import Quaternion, try_opk_to_ecef_quaternion
from geocameras.tangent_plane import local_enu_to_geodetic
from geocameras.utils.logging import warn_once

# Accepted column names for each orientation angle, in order of the row fields
_HEADING_COLUMNS = ('heading', 'yaw', 'kappa')
_PITCH_COLUMNS = ('pitch', 'phi')
_ROLL_COLUMNS = ('roll', 'omega')

_DEFAULT_HPR_CONVENTION = NORTH_DEGREES


def _normalize_column(column: str) -> str:
    return column.strip().lstrip('#').lower()


def resolve_orientation_kind(columns: Sequence[str]) -> Literal['opk', 'hpr']:
    """
    Decide whether an export's orientation columns are photogrammetric.

    Column names are compared case-insensitively, ignoring surrounding whitespace and
    a leading '#'. The first matching column is used for each angle.

    Args:
        columns:
            The header of the export

    Returns:
        'opk' if the angles resolve to kappa, phi and omega; otherwise 'hpr'
    """
    normalized = [_normalize_column(x) for x in columns]
    resolved = []
    for accepted in (_HEADING_COLUMNS, _PITCH_COLUMNS, _ROLL_COLUMNS):
        match = next((x for x in normalized if x in accepted), None)
        if match is None:
            raise ValueError(
                f'Missing orientation column; expected one of {", ".join(accepted)}'
            )
        resolved.append(match)

    return 'opk' if resolved == ['kappa', 'phi', 'omega'] else 'hpr'


def set_default_hpr_convention(convention: Literal['north-degrees', 'east-degrees']):
    """
    Set the convention label attached to passed-through heading/pitch/roll angles when
    convert_camera() is not given one explicitly.

    Args:
        convention: 'north-degrees' or 'east-degrees'
    """
    global _DEFAULT_HPR_CONVENTION

    if convention not in HPR_CONVENTIONS:
        raise ValueError(f"Unknown convention '{convention}'. Options: {list(HPR_CONVENTIONS)}")

    _DEFAULT_HPR_CONVENTION = convention


def get_default_hpr_convention() -> str:
    """The convention label currently attached to passed-through angles"""
    return _DEFAULT_HPR_CONVENTION


class CameraRow:
    """
    A single camera record from a structure-from-motion export.

    Values are validated on construction, so numeric strings straight from a CSV
    reader are accepted. For photogrammetric exports the angle columns map as
    kappa -> heading, phi -> pitch and omega -> roll.

    Args:
        name:
            The camera (image) name

        x, y, alt:
            Longitude/latitude/height (degrees, degrees, meters), or east/north/up
            (meters) for projects in local coordinates

        heading, pitch, roll:
            Orientation angles, in degrees

        orientation_kind:
            (Default 'hpr') 'opk' when the angles are omega/phi/kappa
    """

    @validate_call
    def __init__(
        self,
        name: str,
        x: float,
        y: float,
        alt: float,
        heading: float,
        pitch: float,
        roll: float,
        orientation_kind: Literal['opk', 'hpr'] = 'hpr',
    ):
        self.name = name
        self.x, self.y, self.alt = x, y, alt
        self.heading, self.pitch, self.roll = heading, pitch, roll
        self.orientation_kind = orientation_kind

    def __repr__(self):
        return f'<CameraRow {self.name} ({self.orientation_kind})>'

    @property
    def opk(self) -> EulerOpk:
        """The row's angles as omega/phi/kappa"""
        if self.orientation_kind != 'opk':
            raise ValueError(f'Camera {self.name} does not carry omega/phi/kappa angles.')

        return EulerOpk(self.roll, self.pitch, self.heading)


class OpkOrientation:
    """
    Orientation of a photogrammetric camera: the source angles, echoed for
    traceability, along with whichever converted forms are available.

    Args:
        opk:
            The source angles

        hpr:
            (Optional) Viewer heading/pitch/roll, in radians

        quaternion:
            (Optional) ECEF-frame attitude; None when it could not be computed
    """
    kind = 'opk'

    def __init__(
        self,
        opk: EulerOpk,
        hpr: Optional[HeadingPitchRoll] = None,
        quaternion: Optional[Quaternion] = None,
    ):
        self.opk = opk
        self.hpr = hpr
        self.quaternion = quaternion

    def __repr__(self):
        return f'<OpkOrientation({self.opk!r}, {self.hpr!r}, {self.quaternion!r})>'

    def to_dict(self) -> Dict[str, Any]:
        out: Dict[str, Any] = {'kind': self.kind, 'opk': self.opk.to_dict()}
        if self.hpr is not None:
            out['hpr'] = self.hpr.to_dict()
        out['quaternion'] = self.quaternion.to_dict() if self.quaternion else None
        return out


class PassthroughOrientation:
    """
    Heading/pitch/roll degrees copied from the source row without conversion.

    Args:
        heading, pitch, roll:
            The source angles, in degrees

        convention:
            'north-degrees' or 'east-degrees'
    """
    kind = 'hpr'

    def __init__(self, heading: float, pitch: float, roll: float, convention: str):
        if convention not in HPR_CONVENTIONS:
            raise ValueError(
                f"Unknown convention '{convention}'. Options: {list(HPR_CONVENTIONS)}"
            )

        self.heading, self.pitch, self.roll = heading, pitch, roll
        self.convention = convention

    def __repr__(self):
        return (
            f'<PassthroughOrientation({self.heading}, {self.pitch}, {self.roll} '
            f'{self.convention})>'
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            'kind': self.kind,
            'heading': self.heading,
            'pitch': self.pitch,
            'roll': self.roll,
            'convention': self.convention,
        }


Orientation = Union[OpkOrientation, PassthroughOrientation]


class CameraPose:
    """A converted camera: name, geodetic position and tagged orientation"""

    def __init__(self, name: str, position: GeodeticPosition, orientation: Orientation):
        self.name = name
        self.position = position
        self.orientation = orientation

    def __repr__(self):
        return f'<CameraPose {self.name} {self.position!r} {self.orientation!r}>'

    def to_dict(self) -> Dict[str, Any]:
        """Plain-python representation, ready for serialization"""
        return {
            'name': self.name,
            'position': self.position.to_dict(),
            'orientation': self.orientation.to_dict(),
        }


def convert_camera(
    row: CameraRow,
    origin: Optional[GeodeticPosition] = None,
    include_hpr: bool = True,
    hpr_convention: Optional[str] = None,
) -> CameraPose:
    """
    Convert one export row into a camera pose.

    Args:
        row:
            The source row

        origin:
            (Optional) Project origin. When given, the row's x/y/alt are treated as
            east/north/up meters from it; otherwise as longitude/latitude/height.

        include_hpr:
            (Default True) Whether photogrammetric rows also report viewer
            heading/pitch/roll

        hpr_convention:
            (Optional) Convention label for passed-through angles; defaults to the
            value set by set_default_hpr_convention()

    Returns:
        CameraPose
    """
    if origin is not None:
        position = local_enu_to_geodetic(LocalOffset(row.x, row.y, row.alt), origin)
    else:
        position = GeodeticPosition(row.x, row.y, row.alt)

    orientation: Orientation
    if row.orientation_kind == 'opk':
        opk = row.opk
        orientation = OpkOrientation(
            opk,
            hpr=opk_to_hpr(opk) if include_hpr else None,
            quaternion=try_opk_to_ecef_quaternion(opk, position.longitude, position.latitude),
        )
    else:
        convention = hpr_convention or _DEFAULT_HPR_CONVENTION
        warn_once(
            'Orientation columns are not omega/phi/kappa; heading/pitch/roll are exported '
            f'unconverted and labelled {convention}. (this warning will not repeat)'
        )
        orientation = PassthroughOrientation(row.heading, row.pitch, row.roll, convention)

    return CameraPose(row.name, position, orientation)


def convert_cameras(rows: Iterable[CameraRow], **kwargs) -> List[CameraPose]:
    """
    Convert a batch of export rows. Rows are independent of each other.

    Keyword Args:
        Passed through to convert_camera()

    Returns:
        List[CameraPose], in input order
    """
    return [convert_camera(row, **kwargs) for row in rows]
