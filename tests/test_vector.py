import math

import pytest

from rtmath.vector import Vector, to_rad


def assert_close(a: Vector, b: Vector) -> None:
    assert a.x == pytest.approx(b.x)
    assert a.y == pytest.approx(b.y)
    assert a.z == pytest.approx(b.z)
    assert a.w == pytest.approx(b.w)


A = Vector(1.5, -2.0, 3.25, 1.0)
B = Vector(-0.5, 4.0, 2.0, 1.0)


def test_add_then_subtract_round_trip():
    assert_close((A + B) - B, A)


def test_add_is_commutative_and_keeps_w():
    assert A + B == B + A
    assert (A + B).w == A.w + B.w


def test_sub_self_is_zero():
    assert A - A == Vector(0.0, 0.0, 0.0, 0.0)


def test_neg_drops_w():
    n = -A
    assert (n.x, n.y, n.z) == (-A.x, -A.y, -A.z)
    assert n.w == 0.0


def test_dot_ignores_w():
    assert A.dot(B) == Vector(A.x, A.y, A.z, 7.0).dot(B)
    assert A.dot(A) == pytest.approx(A.modulus() ** 2)


def test_cross_of_axes():
    x = Vector(1, 0, 0)
    y = Vector(0, 1, 0)
    z = Vector(0, 0, 1)
    assert x.cross(y) == z
    assert y.cross(x) == -z


def test_cross_is_orthogonal():
    c = A.cross(B)
    assert c.dot(A) == pytest.approx(0.0, abs=1e-9)
    assert c.dot(B) == pytest.approx(0.0, abs=1e-9)
    assert c.w == 0.0


def test_scale_and_div_are_inverse():
    assert_close(A.scale(3.0).div(3.0), Vector(A.x, A.y, A.z, 0.0))


def test_mul_by_ones_keeps_components():
    ones = Vector(1.0, 1.0, 1.0, 5.0)
    assert A.mul(ones) == Vector(A.x, A.y, A.z, 0.0)


def test_modulus_of_scaled_vector():
    assert A.scale(-2.0).modulus() == pytest.approx(2.0 * A.modulus())


def test_unit_has_length_one_and_same_direction():
    u = A.unit()
    assert u.modulus() == pytest.approx(1.0)
    assert u.dot(A) == pytest.approx(A.modulus())
    assert u.w == 0.0


def test_unit_of_zero_raises():
    with pytest.raises(ZeroDivisionError):
        Vector(0.0, 0.0, 0.0).unit()


def test_reflect_on_floor():
    r = Vector(1.0, -1.0, 0.0).reflect(Vector(0.0, 5.0, 0.0))
    assert_close(r, Vector(1.0, 1.0, 0.0).unit())


def test_reflect_preserves_length_and_angle():
    n = Vector(0.3, 0.9, -0.2)
    r = A.reflect(n)
    assert r.modulus() == pytest.approx(1.0)
    assert r.dot(n.unit()) == pytest.approx(-A.unit().dot(n.unit()))


def test_to_rad():
    assert to_rad(180.0) == pytest.approx(math.pi)
    assert to_rad(-90.0) == pytest.approx(-math.pi / 2)
    assert to_rad(0.0) == 0.0