import pytest

from surface_cli_renderer.point import Point, Rotation, Shape


def test_point_is_immutable():
    p = Point(1, 2, 3, '@')
    with pytest.raises(AttributeError):
        p.x = 5.0


def test_point_coordinates_are_floats_and_iterable():
    p = Point(1, 2, 3, '@')
    assert list(p) == [1.0, 2.0, 3.0]
    assert p[2] == 3.0
    with pytest.raises(IndexError):
        p[3]


def test_translated_keeps_glyph():
    p = Point(1, 2, 3, '@').translated(1, -2, 10)
    assert p == Point(2, 0, 13, '@')


def test_rotation_accumulates_without_wraparound():
    r = Rotation()
    for _ in range(200):
        r.advance(3.0, 1.0, 1.0)
    assert r == Rotation(600.0, 200.0, 200.0)


def test_shape_translated_copies_rotation():
    shape = Shape([Point(0, 0, 0, 'a')], Rotation(10, 20, 30))
    moved = shape.translated(0, 0, 5)
    assert moved.points == [Point(0, 0, 5, 'a')]
    assert moved.rotation == shape.rotation
    assert moved.rotation is not shape.rotation
    assert shape.points == [Point(0, 0, 0, 'a')]
