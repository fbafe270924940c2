import copy
import math

import numpy as np
import pytest

from hepvec import config as cfg
from hepvec.diagnostics import BadIndexWarning, DivisionByZeroWarning, ZeroVectorWarning
from hepvec.vector import X_HAT, Y_HAT, Z_HAT, Vector3, get_tolerance


def test_create_vector3():
    v = Vector3(1, 2, 3)
    assert v.x == 1.0
    assert v.y == 2.0
    assert v.z == 3.0
    assert isinstance(v.x, float)


def test_default_is_zero_vector():
    assert Vector3() == Vector3(0.0, 0.0, 0.0)


def test_copy_is_independent():
    v = Vector3(1, 2, 3)
    w = v.copy()
    w.rotate_z(1.0)
    assert v == Vector3(1, 2, 3)
    assert copy.copy(v) == v
    assert copy.copy(v) is not v


def test_set():
    v = Vector3()
    v.set(4, 5, 6)
    assert v.to_tuple() == (4.0, 5.0, 6.0)


def test_unhashable():
    with pytest.raises(TypeError):
        hash(Vector3(1, 2, 3))


# ----------------------------------------------------------------------
# Component access
# ----------------------------------------------------------------------
def test_index_read():
    v = Vector3(7, 8, 9)
    assert (v[0], v[1], v[2]) == (7.0, 8.0, 9.0)
    assert list(v) == [7.0, 8.0, 9.0]
    assert len(v) == 3


def test_bad_index_read_warns_and_returns_zero():
    v = Vector3(7, 8, 9)
    with pytest.warns(BadIndexWarning, match=r"bad index \(5\)"):
        assert v[5] == 0.0


def test_negative_index_is_bad():
    with pytest.warns(BadIndexWarning):
        assert Vector3(7, 8, 9)[-1] == 0.0


def test_index_write():
    v = Vector3()
    v[0] = 1
    v[2] = 3
    assert v == Vector3(1, 0, 3)


def test_bad_index_write_is_noop():
    v = Vector3(1, 2, 3)
    with pytest.warns(BadIndexWarning, match=r"bad index \(5\)"):
        v[5] = 42.0
    assert v == Vector3(1, 2, 3)


def test_set_component_reports_success():
    v = Vector3(1, 2, 3)
    assert v.set_component(1, -2.0) is True
    with pytest.warns(BadIndexWarning):
        assert v.set_component(3, 99.0) is False
    assert v == Vector3(1, -2, 3)


# ----------------------------------------------------------------------
# Arithmetic
# ----------------------------------------------------------------------
def test_addition_and_subtraction():
    v1 = Vector3(1, 2, 3)
    v2 = Vector3(4, 5, 6)
    assert v1 + v2 == Vector3(5, 7, 9)
    assert v2 - v1 == Vector3(3, 3, 3)
    assert -v1 == Vector3(-1, -2, -3)


def test_in_place_arithmetic_keeps_identity():
    v = Vector3(1, 2, 3)
    ref = v
    v += Vector3(1, 1, 1)
    v -= Vector3(0, 0, 1)
    v *= 2
    v /= 4
    assert v is ref
    assert v == Vector3(1.0, 1.5, 1.5)


def test_scalar_multiplication():
    v = Vector3(1, 2, 3)
    assert v * 2 == Vector3(2, 4, 6)
    assert 3 * v == Vector3(3, 6, 9)


def test_scalar_division():
    assert Vector3(2, 4, 8) / 2 == Vector3(1, 2, 4)


def test_vector_operand_not_supported():
    with pytest.raises(TypeError):
        Vector3(1, 2, 3) * Vector3(1, 2, 3)
    with pytest.raises(TypeError):
        Vector3(1, 2, 3) + 1.0


def test_divide_by_zero_warns_once_and_gives_ieee_values():
    v = Vector3(1, 0, -1)
    with pytest.warns(DivisionByZeroWarning, match="divide vector by 0") as record:
        w = v / 0
    assert len(record) == 1
    assert w.x == math.inf
    assert math.isnan(w.y)
    assert w.z == -math.inf
    assert v == Vector3(1, 0, -1)


def test_in_place_divide_by_zero():
    v = Vector3(2, 0, 0)
    with pytest.warns(DivisionByZeroWarning, match="/= 0") as record:
        v /= 0.0
    assert len(record) == 1
    assert math.isinf(v.x)
    assert math.isnan(v.y)


def test_dot_and_cross():
    v1 = Vector3(1, 2, 3)
    v2 = Vector3(4, 5, 6)
    assert v1.dot(v2) == 32
    assert v1.cross(v2) == Vector3(-3, 6, -3)
    assert X_HAT.cross(Y_HAT) == Z_HAT


# ----------------------------------------------------------------------
# Magnitude
# ----------------------------------------------------------------------
def test_mag():
    v = Vector3(3, 4, 12)
    assert v.mag2() == 169
    assert v.mag() == 13
    assert v.perp() == 5


@pytest.mark.parametrize("new_mag", [0.5, 1.0, 7.25, 1e6])
def test_set_mag_keeps_direction(new_mag):
    v = Vector3(1, -2, 3)
    before = v.unit()
    v.set_mag(new_mag)
    assert v.mag() == pytest.approx(new_mag)
    assert np.allclose(v.unit().to_numpy(), before.to_numpy())


def test_set_mag_of_zero_vector():
    v = Vector3()
    with pytest.warns(ZeroVectorWarning, match="zero vector can't be stretched"):
        v.set_mag(3.0)
    assert v == Vector3(0, 0, 0)


def test_set_perp():
    v = Vector3(3, 4, 7)
    v.set_perp(10)
    assert v.perp() == pytest.approx(10)
    assert v.z == 7


def test_unit():
    assert np.allclose(Vector3(3, 4, 0).unit().to_numpy(), [0.6, 0.8, 0.0])
    assert Vector3().unit() == Vector3()


@pytest.mark.parametrize("v", [Vector3(1, 2, 3), Vector3(3, 2, 1), Vector3(2, 1, 3), Vector3(0, 0, 1)])
def test_orthogonal(v):
    o = v.orthogonal()
    assert v.dot(o) == 0
    assert o.mag2() > 0


# ----------------------------------------------------------------------
# Rotations
# ----------------------------------------------------------------------
def test_axis_rotations():
    assert np.allclose(Vector3(0, 1, 0).rotate_x(math.pi / 2).to_numpy(), [0, 0, 1])
    assert np.allclose(Vector3(0, 0, 1).rotate_y(math.pi / 2).to_numpy(), [1, 0, 0])
    assert np.allclose(Vector3(1, 0, 0).rotate_z(math.pi / 2).to_numpy(), [0, 1, 0])


def test_rotation_returns_self():
    v = Vector3(1, 2, 3)
    assert v.rotate_x(0.1).rotate_y(0.2).rotate_z(0.3) is v


@pytest.mark.parametrize("phi", [-7.0, -1.0, 0.0, 0.3, math.pi, 12.5])
def test_rotate_z_inverse(phi):
    v = Vector3(1.5, -2.0, 0.25)
    w = v.copy().rotate_z(-phi).rotate_z(phi)
    assert np.allclose(w.to_numpy(), v.to_numpy())


@pytest.mark.parametrize("phi", [-2.0, 0.7, 4.0])
def test_rotations_preserve_magnitude(phi):
    v = Vector3(1.5, -2.0, 0.25)
    for rot in ("rotate_x", "rotate_y", "rotate_z"):
        w = getattr(v.copy(), rot)(phi)
        assert w.mag() == pytest.approx(v.mag())


def test_rotation_by_infinite_angle_gives_nan():
    v = Vector3(1, 2, 3).rotate_z(math.inf)
    assert math.isnan(v.x)
    assert math.isnan(v.y)
    assert v.z == 3.0
    w = Vector3(1, 2, 3).rotate_x(-math.inf)
    assert w.x == 1.0
    assert math.isnan(w.y)
    assert math.isnan(w.z)


def test_rotate_uz_identity():
    v = Vector3(1.5, -2.0, 0.25)
    assert v.copy().rotate_uz(Vector3(0, 0, 1)) == v


def test_rotate_uz_flip():
    v = Vector3(1.5, -2.0, 0.25)
    assert v.copy().rotate_uz(Vector3(0, 0, -1)) == Vector3(-1.5, -2.0, -0.25)


def test_rotate_uz_maps_z_axis_onto_target():
    u = Vector3(1, 2, 2).unit()
    assert np.allclose(Z_HAT.copy().rotate_uz(u).to_numpy(), u.to_numpy())
    v = Vector3(0.3, -0.4, 2.0)
    assert v.copy().rotate_uz(u).mag() == pytest.approx(v.mag())


def test_rotate_about_axis_matches_rotate_z():
    v = Vector3(1.5, -2.0, 0.25)
    a = v.copy().rotate(0.8, Vector3(0, 0, 5))
    b = v.copy().rotate_z(0.8)
    assert np.allclose(a.to_numpy(), b.to_numpy())


def test_rotate_about_zero_axis():
    v = Vector3(1, 2, 3)
    with pytest.warns(ZeroVectorWarning, match="zero axis"):
        v.rotate(1.0, Vector3())
    assert v == Vector3(1, 2, 3)


def test_transform():
    c, s = math.cos(0.5), math.sin(0.5)
    rz = np.array([[c, -s, 0.0], [s, c, 0.0], [0.0, 0.0, 1.0]])
    v = Vector3(1, 2, 3)
    assert np.allclose(v.copy().transform(rz).to_numpy(), v.copy().rotate_z(0.5).to_numpy())
    with pytest.raises(ValueError):
        v.transform(np.eye(2))


# ----------------------------------------------------------------------
# Proximity
# ----------------------------------------------------------------------
def test_tolerance():
    assert get_tolerance() == cfg.TOLERANCE
    assert cfg.TOLERANCE == pytest.approx(100 * 2.22045e-16)


def test_is_near():
    v = Vector3(1, 2, 3)
    assert v.is_near(v)
    assert v.is_near(v * (1 + 1e-15))
    assert not v.is_near(v * 1.001)
    assert v.is_near(v * 1.001, epsilon=0.01)


def test_how_near():
    v = Vector3(1, 2, 3)
    assert v.how_near(v) == 0
    assert Vector3().how_near(Vector3()) == 0
    assert Vector3(1, 0, 0).how_near(Vector3(-1, 0, 0)) == 1
    assert Vector3(1, 0, 0).how_near(Vector3(0, 1, 0)) == 1
    assert Vector3(1, 0, 0).how_near(Vector3(1.1, 0, 0)) == pytest.approx(math.sqrt(0.01 / 1.1))


def test_parallel_and_orthogonal():
    a = Vector3(1, 0, 0)
    assert a.is_parallel(Vector3(2, 0, 0))
    assert a.how_parallel(Vector3(-3, 0, 0)) == 0
    assert a.how_parallel(Y_HAT) == 1
    assert not a.is_parallel(Vector3(1, 1, 0))
    assert a.is_orthogonal(Vector3(0, 4, 5))
    assert a.how_orthogonal(Y_HAT) == 0
    assert a.how_orthogonal(Vector3(1, 0.1, 0)) == 1
    assert not a.is_orthogonal(Vector3(1, 1, 0))
    assert Vector3().is_parallel(Vector3())


# ----------------------------------------------------------------------
# Conversion helpers
# ----------------------------------------------------------------------
def test_numpy_round_trip():
    v = Vector3(1, 2, 3)
    arr = v.to_numpy()
    assert arr.dtype == float
    assert Vector3.from_numpy(arr) == v
    assert Vector3.from_numpy([4, 5, 6]) == Vector3(4, 5, 6)
    with pytest.raises(ValueError):
        Vector3.from_numpy([1, 2])


def test_str_format():
    assert str(Vector3(1, 2.5, -3)) == "(1.0,2.5,-3.0)"
    assert repr(Vector3(1, 2, 3)) == "Vector3(1.0, 2.0, 3.0)"


@pytest.mark.parametrize("v", [Vector3(0.1, 1 / 3, -1e-300), Vector3(1e308, -0.0, 2.0 ** -52)])
def test_text_round_trip_is_exact(v):
    assert Vector3.from_str(str(v)) == v


def test_from_str_whitespace_separated():
    assert Vector3.from_str("1 2.5\t-3") == Vector3(1, 2.5, -3)
    assert Vector3.from_str("  (4, 5, 6) ") == Vector3(4, 5, 6)


@pytest.mark.parametrize("text", ["", "1 2", "1 2 3 4", "(a,b,c)"])
def test_from_str_rejects_malformed_text(text):
    with pytest.raises(ValueError):
        Vector3.from_str(text)


def test_unit_axes():
    assert X_HAT == Vector3(1, 0, 0)
    assert Y_HAT == Vector3(0, 1, 0)
    assert Z_HAT == Vector3(0, 0, 1)
