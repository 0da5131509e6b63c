import math
import numpy as np
import pytest
from ntkvec.core.errors import ZeroLengthVectorError
from ntkvec.utils.vectors import Vector3

PAIRS = [
    (Vector3(1, 0, 0), Vector3(0, 1, 0)),
    (Vector3(1.5, -2, 3), Vector3(-4, 0.5, 2)),
    (Vector3(0, 0, 0), Vector3(7, 8, 9)),
]


def test_factories():
    assert Vector3() == Vector3(0, 0, 0)
    assert Vector3.zero() == Vector3(0, 0, 0)
    assert Vector3.unit_x() == Vector3(1, 0, 0)
    assert Vector3.unit_y() == Vector3(0, 1, 0)
    assert Vector3.unit_z() == Vector3(0, 0, 1)
    assert not hasattr(Vector3, "from_angle")


def test_arithmetic_scalar_and_vector():
    v = Vector3(1, 2, 3)
    w = Vector3(4, 5, 6)
    assert v.add(1) == Vector3(2, 3, 4)
    assert v.add(w) == Vector3(5, 7, 9)
    assert w.subtract(v) == Vector3(3, 3, 3)
    assert w.subtract(1) == Vector3(3, 4, 5)
    assert v.multiply(2) == Vector3(2, 4, 6)
    assert v.multiply(w) == Vector3(4, 10, 18)
    assert w.divide(2) == Vector3(2, 2.5, 3)
    assert w.divide(Vector3(4, 5, 6)) == Vector3(1, 1, 1)
    # operands untouched
    assert v == Vector3(1, 2, 3)
    assert w == Vector3(4, 5, 6)


def test_divide_by_zero_follows_ieee():
    result = Vector3(1, -1, 0).divide(0)
    assert result.x == math.inf
    assert result.y == -math.inf
    assert math.isnan(result.z)


@pytest.mark.parametrize("a, b", PAIRS)
def test_zero_is_additive_identity(a, b):
    assert a.add(0) == a
    assert b.subtract(0) == b


def test_self_methods_return_receiver_and_mutate():
    v = Vector3(1, 2, 3)
    assert v.add_self(Vector3(1, 1, 1)) is v
    assert v == Vector3(2, 3, 4)
    assert v.subtract_self(2) is v
    assert v == Vector3(0, 1, 2)
    assert v.multiply_self(Vector3(5, 5, 2)) is v
    assert v == Vector3(0, 5, 4)
    assert v.divide_self(Vector3(1, 5, 2)) is v
    assert v == Vector3(0, 1, 2)
    assert v.scale_self(0.5) is v
    assert v == Vector3(0, 0.5, 1)


def test_dot_and_lengths():
    v = Vector3(2, 3, 6)
    assert v.dot(Vector3(1, 1, 1)) == 11
    assert v.length() == pytest.approx(7.0)
    assert v.length_squared() == 49


def test_normalize():
    v = Vector3(2, 3, 6)
    assert v.normalize().length() == pytest.approx(1.0)
    assert np.allclose(v.normalize().to_array(), [2 / 7, 3 / 7, 6 / 7])
    assert v == Vector3(2, 3, 6)
    assert v.normalize_self() is v
    assert v.length() == pytest.approx(1.0)


def test_normalize_zero_raises():
    with pytest.raises(ZeroLengthVectorError):
        Vector3(0, 0, 0).normalize()
    with pytest.raises(ZeroLengthVectorError):
        Vector3.zero().normalize_self()


def test_cross_unit_axes():
    assert Vector3(1, 0, 0).cross(Vector3(0, 1, 0)) == Vector3(0, 0, 1)
    assert Vector3.unit_y().cross(Vector3.unit_z()) == Vector3.unit_x()
    assert Vector3.unit_z().cross(Vector3.unit_x()) == Vector3.unit_y()


@pytest.mark.parametrize("a, b", PAIRS)
def test_cross_anticommutes(a, b):
    assert a.cross(b) == b.cross(a).scale(-1)


@pytest.mark.parametrize("a, b", PAIRS)
def test_cross_is_orthogonal(a, b):
    c = a.cross(b)
    assert c.dot(a) == pytest.approx(0.0, abs=1e-9)
    assert c.dot(b) == pytest.approx(0.0, abs=1e-9)


def test_cross_self_uses_original_components():
    a = Vector3(1.5, -2, 3)
    b = Vector3(-4, 0.5, 2)
    expected = a.cross(b)
    assert a.cross_self(b) is a
    assert a == expected


def test_cross_self_with_itself_is_zero():
    a = Vector3(1.5, -2, 3)
    assert a.cross_self(a) is a
    assert a == Vector3.zero()


def test_lerp():
    a = Vector3(0, 2, 4)
    b = Vector3(10, -2, 8)
    assert a.lerp(b, 0) == a
    assert a.lerp(b, 1) == b
    assert a.lerp(b, 0.5) == Vector3(5, 0, 6)
    assert a.lerp(b, 1.5) == Vector3(15, -4, 10)
    assert a.lerp_self(b, 0.25) is a
    assert a == Vector3(2.5, 1, 5)


def test_distances():
    a = Vector3(1, 2, 3)
    b = Vector3(4, 6, 3)
    assert a.distance_to(b) == pytest.approx(5.0)
    assert a.distance_squared_to(b) == 25


def test_project_onto():
    assert Vector3(3, 4, 5).project_onto(Vector3(0, 0, 2)) == Vector3(0, 0, 5)
    with pytest.raises(ZeroLengthVectorError):
        Vector3(1, 2, 3).project_onto(Vector3.zero())


def test_clone_and_conversions():
    v = Vector3(1, 2.5, -3)
    c = v.clone()
    assert c == v and c is not v
    assert v.to_array() == [1, 2.5, -3]
    assert v.to_tuple() == (1, 2.5, -3)
    assert np.array_equal(v.to_numpy(), np.array([1.0, 2.5, -3.0]))
    assert Vector3.from_array([1, 2.5, -3]) == v
    with pytest.raises(ValueError):
        Vector3.from_array([1, 2])


def test_string_format():
    assert str(Vector3(1, 2, 3)) == "(1, 2, 3)"
    assert str(Vector3(0.5, 0, -1.5)) == "(0.5, 0, -1.5)"
    assert repr(Vector3(1, 2, 3)) == "Vector3(1, 2, 3)"


def test_operators():
    a = Vector3(1, 2, 3)
    assert a + 1 == Vector3(2, 3, 4)
    assert a - a == Vector3.zero()
    assert 3 * a == a * 3 == Vector3(3, 6, 9)
    assert a / 2 == Vector3(0.5, 1, 1.5)
    assert -a == Vector3(-1, -2, -3)

    b = a
    b *= Vector3(2, 2, 2)
    assert b is a
    assert a == Vector3(2, 4, 6)
