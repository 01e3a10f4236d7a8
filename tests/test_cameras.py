import math

import pytest
from pytest import approx

from geocameras.cameras import *
from geocameras.coordinates import GeodeticPosition
from geocameras.orientation import EulerOpk, opk_to_hpr
from geocameras.quaternion import opk_to_ecef_quaternion
from geocameras.utils.logging import reset_warnings

from tests.functions import assert_positions_equal


@pytest.fixture
def opk_row():
    return CameraRow('IMG_0001.jpg', 8.54, 47.37, 410., 30., -80., 5., orientation_kind='opk')


@pytest.fixture
def hpr_row():
    return CameraRow('IMG_0002.jpg', 8.54, 47.37, 410., 120., -10., 2.)


@pytest.fixture
def default_convention():
    yield
    set_default_hpr_convention('north-degrees')


def test_resolve_orientation_kind():
    assert resolve_orientation_kind(['#name', 'x', 'y', 'alt', 'kappa', 'phi', 'omega']) == 'opk'
    assert resolve_orientation_kind([' #Name ', 'X', 'Y', 'Z', ' Kappa', 'PHI', '#omega']) == 'opk'
    assert resolve_orientation_kind(['name', 'lon', 'lat', 'h', 'heading', 'pitch', 'roll']) == 'hpr'

    # A partially photogrammetric header carries no rotation order guarantee
    assert resolve_orientation_kind(['name', 'x', 'y', 'z', 'yaw', 'phi', 'omega']) == 'hpr'

    with pytest.raises(ValueError):
        resolve_orientation_kind(['name', 'x', 'y', 'z', 'kappa', 'phi'])


def test_camera_row():
    row = CameraRow('a', '1.5', '2', 3, '4.25', '-5', '6')
    assert (row.x, row.y, row.alt) == (1.5, 2., 3.)
    assert (row.heading, row.pitch, row.roll) == (4.25, -5., 6.)
    assert row.orientation_kind == 'hpr'
    assert repr(row) == '<CameraRow a (hpr)>'


def test_camera_row_validation():
    with pytest.raises(ValueError):
        CameraRow('a', 'not a number', 2., 3., 4., 5., 6.)

    with pytest.raises(ValueError):
        CameraRow('a', 1., 2., 3., 4., 5., 6., orientation_kind='quaternion')


def test_camera_row_opk(opk_row, hpr_row):
    # kappa -> heading, phi -> pitch, omega -> roll
    assert opk_row.opk == EulerOpk(5., -80., 30.)

    with pytest.raises(ValueError):
        _ = hpr_row.opk


def test_convert_camera_geodetic_opk(opk_row):
    pose = convert_camera(opk_row)
    assert pose.name == 'IMG_0001.jpg'
    assert pose.position == GeodeticPosition(8.54, 47.37, 410.)

    orientation = pose.orientation
    assert isinstance(orientation, OpkOrientation)
    assert orientation.kind == 'opk'
    assert orientation.opk == EulerOpk(5., -80., 30.)
    assert orientation.hpr == opk_to_hpr(EulerOpk(5., -80., 30.))
    assert orientation.quaternion == opk_to_ecef_quaternion(EulerOpk(5., -80., 30.), 8.54, 47.37)
    assert orientation.quaternion.frame == 'ecef'


def test_convert_camera_without_hpr(opk_row):
    pose = convert_camera(opk_row, include_hpr=False)
    assert pose.orientation.hpr is None
    assert pose.orientation.quaternion is not None
    assert 'hpr' not in pose.to_dict()['orientation']


def test_convert_camera_local(opk_row):
    row = CameraRow('local', 111319.49, 0., 0., 0., 0., 0., orientation_kind='opk')
    pose = convert_camera(row, origin=GeodeticPosition(0., 0., 0.))
    assert pose.position.longitude == approx(1., abs=1e-3)
    assert pose.position.latitude == approx(0., abs=1e-9)

    # Quaternion uses the converted position
    assert pose.orientation.quaternion == opk_to_ecef_quaternion(
        EulerOpk(0., 0., 0.), pose.position.longitude, pose.position.latitude
    )

    origin = GeodeticPosition(8.54, 47.37, 410.)
    row = CameraRow('origin', 0., 0., 0., 0., 0., 0.)
    assert_positions_equal(convert_camera(row, origin=origin).position, origin)


def test_convert_camera_passthrough(hpr_row, caplog):
    reset_warnings()
    pose = convert_camera(hpr_row)

    orientation = pose.orientation
    assert isinstance(orientation, PassthroughOrientation)
    assert orientation.kind == 'hpr'
    assert (orientation.heading, orientation.pitch, orientation.roll) == (120., -10., 2.)
    assert orientation.convention == 'north-degrees'
    assert 'unconverted' in caplog.text

    pose = convert_camera(hpr_row, hpr_convention='east-degrees')
    assert pose.orientation.convention == 'east-degrees'


def test_default_hpr_convention(hpr_row, default_convention):
    assert get_default_hpr_convention() == 'north-degrees'

    set_default_hpr_convention('east-degrees')
    assert get_default_hpr_convention() == 'east-degrees'
    assert convert_camera(hpr_row).orientation.convention == 'east-degrees'

    with pytest.raises(ValueError):
        set_default_hpr_convention('south-gradians')


def test_passthrough_convention_validation():
    with pytest.raises(ValueError):
        PassthroughOrientation(1., 2., 3., 'east-radians')


def test_quaternion_failure_is_not_fatal(opk_row, monkeypatch):
    def _raise(*args):
        raise FloatingPointError('overflow')

    monkeypatch.setattr('geocameras.quaternion.opk_to_ecef_rotation', _raise)
    pose = convert_camera(opk_row)
    assert pose.orientation.quaternion is None
    assert pose.orientation.hpr is not None
    assert pose.to_dict()['orientation']['quaternion'] is None


def test_to_dict(opk_row, hpr_row):
    out = convert_camera(opk_row).to_dict()
    assert out['name'] == 'IMG_0001.jpg'
    assert out['position'] == {'longitude': 8.54, 'latitude': 47.37, 'height': 410.}
    assert out['orientation']['kind'] == 'opk'
    assert out['orientation']['opk'] == {'omega': 5., 'phi': -80., 'kappa': 30.}
    assert out['orientation']['hpr']['convention'] == 'east-radians'
    assert out['orientation']['quaternion']['frame'] == 'ecef'
    assert math.isclose(
        sum(out['orientation']['quaternion'][k] ** 2 for k in 'xyzw'), 1.
    )

    assert convert_camera(hpr_row).to_dict()['orientation'] == {
        'kind': 'hpr',
        'heading': 120.,
        'pitch': -10.,
        'roll': 2.,
        'convention': 'north-degrees',
    }


def test_convert_cameras(opk_row, hpr_row):
    poses = convert_cameras([opk_row, hpr_row], include_hpr=False)
    assert [x.name for x in poses] == ['IMG_0001.jpg', 'IMG_0002.jpg']
    assert poses[0].orientation.hpr is None
    assert poses[1].orientation.kind == 'hpr'

    assert convert_cameras([]) == []
