import math

import pytest

from underescape.geometry import Point, Rect, Vector2


def test_default_vector_is_zero():
    assert Vector2() == Vector2(0.0, 0.0)


def test_length_matches_dot_with_self():
    v = Vector2(3.0, -7.5)
    assert v.length() == pytest.approx(math.sqrt(v.dot(v)))


def test_length_of_pythagorean_vector():
    assert Vector2(3.0, 4.0).length() == pytest.approx(5.0)


@pytest.mark.parametrize("x,y", [(3.0, 4.0), (-2.0, 0.5), (0.0, 9.0)])
def test_normalized_has_unit_length_and_same_direction(x, y):
    v = Vector2(x, y)
    n = v.normalized()
    assert n.length() == pytest.approx(1.0)
    assert v.cross(n) == pytest.approx(0.0)
    assert v.dot(n) > 0


def test_normalized_does_not_modify_original():
    v = Vector2(3.0, 4.0)
    v.normalized()
    assert v == Vector2(3.0, 4.0)


def test_normalize_zero_vector_raises():
    with pytest.raises(ZeroDivisionError):
        Vector2().normalized()


def test_dot_is_symmetric():
    a = Vector2(1.5, -2.0)
    b = Vector2(4.0, 3.0)
    assert a.dot(b) == pytest.approx(b.dot(a))


def test_cross_is_antisymmetric_and_zero_with_self():
    a = Vector2(1.5, -2.0)
    b = Vector2(4.0, 3.0)
    assert a.cross(b) == pytest.approx(-b.cross(a))
    assert a.cross(a) == pytest.approx(0.0)


@pytest.mark.parametrize("angle", [0.3, math.pi / 2, -1.2, math.pi])
def test_rotation_preserves_length(angle):
    v = Vector2(2.0, -5.0)
    assert v.rotated(angle).length() == pytest.approx(v.length())


def test_rotation_round_trip():
    v = Vector2(2.0, -5.0)
    back = v.rotated(0.7).rotated(-0.7)
    assert back.x == pytest.approx(v.x)
    assert back.y == pytest.approx(v.y)


def test_quarter_turn_is_perpendicular():
    v = Vector2(2.0, -5.0)
    r = v.rotated(math.pi / 2)
    assert v.dot(r) == pytest.approx(0.0, abs=1e-9)
    assert v.cross(r) > 0


def test_rotation_by_zero_is_identity():
    v = Vector2(2.0, -5.0)
    assert v.rotated(0.0) == v


def test_add_and_sub_are_inverse():
    a = Vector2(1.25, 8.0)
    b = Vector2(-3.5, 2.0)
    assert (a + b) - b == a


def test_add_is_commutative():
    a = Vector2(1.25, 8.0)
    b = Vector2(-3.5, 2.0)
    assert a + b == b + a


def test_negation_cancels():
    v = Vector2(1.25, -8.0)
    assert v + (-v) == Vector2()
    assert -(-v) == v


def test_unary_plus_returns_equal_copy():
    v = Vector2(1.25, -8.0)
    p = +v
    assert p == v
    p.x = 99.0
    assert v.x == 1.25


def test_scalar_multiplication_commutes():
    v = Vector2(1.5, -2.0)
    assert v * 3.0 == 3.0 * v
    assert v * 2 == v + v


def test_scalar_multiplication_scales_length():
    v = Vector2(1.5, -2.0)
    assert (v * 4.0).length() == pytest.approx(4.0 * v.length())


def test_componentwise_multiplication():
    assert Vector2(2.0, 3.0) * Vector2(4.0, 5.0) == Vector2(8.0, 15.0)


def test_componentwise_multiplication_with_one_is_identity():
    v = Vector2(2.0, -3.0)
    assert v * Vector2(1.0, 1.0) == v


def test_invalid_operand_raises_type_error():
    with pytest.raises(TypeError):
        Vector2(1.0, 1.0) + 1.0
    with pytest.raises(TypeError):
        Vector2(1.0, 1.0) * "x"


def test_vector_unpacks():
    x, y = Vector2(6.0, 7.0)
    assert (x, y) == (6.0, 7.0)


def test_point_defaults_and_fields():
    assert Point() == Point(0, 0)
    p = Point(10, 20)
    assert (p.x, p.y) == (10, 20)


def test_rect_width_and_height_of_gauge_rect():
    rect = Rect(left=0, top=0, right=200, bottom=30)
    assert rect.width == 200
    assert rect.height == 30


def test_rect_extent_is_translation_invariant():
    a = Rect(0, 0, 64, 32)
    b = Rect(a.left + 11, a.top + 7, a.right + 11, a.bottom + 7)
    assert (b.width, b.height) == (a.width, a.height)


def test_empty_rect_has_zero_size():
    rect = Rect()
    assert rect.width == 0
    assert rect.height == 0