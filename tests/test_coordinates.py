
from geocameras.coordinates import EcefPosition, GeodeticPosition, LocalOffset


def test_geodetic_position_init():
    p = GeodeticPosition(1., 2., 3.)
    assert p.longitude == 1.
    assert p.latitude == 2.
    assert p.height == 3.

    p = GeodeticPosition('1.5', '2.5')
    assert p.to_float() == (1.5, 2.5, 0.)

    # No wrapping or clamping
    assert GeodeticPosition(190., 95., -10.).to_float() == (190., 95., -10.)


def test_geodetic_position_eq():
    assert GeodeticPosition(0., 1., 2.) == GeodeticPosition(0., 1., 2.)
    assert GeodeticPosition(0., 1., 2.) != GeodeticPosition(0., 1., 3.)
    assert GeodeticPosition(0., 1., 2.) != (0., 1., 2.)
    assert GeodeticPosition(0., 1., 2.) != EcefPosition(0., 1., 2.)


def test_geodetic_position_hash():
    positions = [
        GeodeticPosition(0., 0.),
        GeodeticPosition(0., 0.),
        GeodeticPosition(1., 1.),
    ]
    assert len(set(positions)) == 2


def test_geodetic_position_repr():
    assert repr(GeodeticPosition(0., 1., 2.)) == '<GeodeticPosition(0.0, 1.0, 2.0)>'


def test_geodetic_position_to_dict():
    assert GeodeticPosition(0., 1., 2.).to_dict() == {
        'longitude': 0., 'latitude': 1., 'height': 2.
    }


def test_ecef_position():
    p = EcefPosition(1, 2, 3)
    assert p.to_float() == (1., 2., 3.)
    assert p == EcefPosition(1., 2., 3.)
    assert p != LocalOffset(1., 2., 3.)
    assert repr(p) == '<EcefPosition(1.0, 2.0, 3.0)>'
    assert len({p, EcefPosition(1., 2., 3.)}) == 1


def test_local_offset():
    o = LocalOffset(1, 2)
    assert o.to_float() == (1., 2., 0.)
    assert o == LocalOffset(1., 2., 0.)
    assert o != LocalOffset(1., 2., 1.)
    assert repr(o) == '<LocalOffset(1.0, 2.0, 0.0)>'
