import math

from vrscene.geometry import Color, Pos, Pos2D, Vector3


def test_color_holds_channels():
    color = Color(255, 10, 20, 128)
    assert (color.r, color.g, color.b, color.a) == (255, 10, 20, 128)


def test_zero_vector_normalizes_to_zero():
    assert Vector3(0, 0, 0).normalized() == Vector3(0.0, 0.0, 0.0)


def test_normalized_has_unit_length():
    v = Vector3(3.0, -7.0, 2.5).normalized()
    assert math.isclose(math.sqrt(v.x**2 + v.y**2 + v.z**2), 1.0)


def test_normalized_preserves_direction():
    original = Vector3(2.0, 4.0, -6.0)
    v = original.normalized()
    assert math.isclose(v.x / v.y, original.x / original.y)
    assert math.isclose(v.z / v.y, original.z / original.y)
    assert v.x > 0 and v.z < 0


def test_axis_vector_normalizes_to_unit_axis():
    assert Vector3(0.0, 0.0, 9.0).normalized() == Vector3(0.0, 0.0, 1.0)


def test_pos_defaults_to_no_rotation():
    pos = Pos(1.0, 2.0, 3.0)
    assert (pos.yaw, pos.pitch, pos.roll) == (0.0, 0.0, 0.0)


def test_pos_without_rotation_normalizes_to_zero():
    assert Pos(1.0, 2.0, 3.0).normalized_rotation() == Vector3(0.0, 0.0, 0.0)


def test_pos_normalized_rotation_matches_vector():
    pos = Pos(0.0, 0.0, 0.0, yaw=5.0, pitch=5.0, roll=5.0)
    expected = Vector3(5.0, 5.0, 5.0).normalized()
    result = pos.normalized_rotation()
    assert math.isclose(result.x, expected.x)
    assert math.isclose(result.x, result.y)
    assert math.isclose(result.y, result.z)


def test_pos_is_mutable():
    pos = Pos(0.0, 0.0, 0.0)
    pos.x = 4.5
    pos.yaw = 90.0
    assert pos.x == 4.5
    assert pos.yaw == 90.0


def test_distance_classic_triangle():
    assert Pos2D(0, 0).distance_to(Pos2D(3, 4)) == 5.0


def test_distance_is_symmetric():
    a, b = Pos2D(-12, 7), Pos2D(30, -2)
    assert a.distance_to(b) == b.distance_to(a)


def test_distance_to_self_is_zero():
    p = Pos2D(17, -3)
    assert p.distance_to(p) == 0.0