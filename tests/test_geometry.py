import pytest

from wastekit.geometry import Point, Rect


def test_rect_width_and_height():
    rc = Rect(3, 4, 13, 24)
    assert rc.width() == 13 - 3
    assert rc.height() == 24 - 4


def test_rect_zero_is_not_valid():
    assert Rect().is_valid() is False
    assert Rect(0, 0, 0, 0).is_valid() is False


@pytest.mark.parametrize("rc", [Rect(1, 0, 0, 0), Rect(0, 1, 0, 0), Rect(0, 0, 1, 0), Rect(0, 0, 0, 1)])
def test_rect_any_nonzero_is_valid(rc):
    assert rc.is_valid() is True


def test_rect_shrink_moves_edges_inwards():
    rc = Rect(0, 0, 10, 20).shrink(1, 2)
    assert rc == Rect(1, 2, 9, 18)
    assert rc.width() == 10 - 2 * 1
    assert rc.height() == 20 - 2 * 2


def test_rect_shrink_negative_grows():
    rc = Rect(5, 5, 10, 10)
    assert rc.shrink(-1, -1).shrink(1, 1) == rc


def test_point_in_rect_includes_edges():
    rc = Rect(0, 0, 10, 10)
    assert Point(0, 0).in_rect(rc)
    assert Point(10, 10).in_rect(rc)
    assert Point(5, 5).in_rect(rc)
    assert not Point(11, 5).in_rect(rc)
    assert not Point(5, -1).in_rect(rc)


def test_point_in_triangle_both_orientations():
    p1, p2, p3 = Point(0, 0), Point(10, 0), Point(0, 10)
    inside = Point(2, 2)
    assert inside.in_triangle(p1, p2, p3)
    assert inside.in_triangle(p3, p2, p1)


def test_point_outside_triangle():
    p1, p2, p3 = Point(0, 0), Point(10, 0), Point(0, 10)
    outside = Point(9, 9)
    assert not outside.in_triangle(p1, p2, p3)
    assert not outside.in_triangle(p3, p2, p1)


def test_point_vertex_counts_as_inside():
    p1, p2, p3 = Point(0, 0), Point(10, 0), Point(0, 10)
    assert p2.in_triangle(p1, p2, p3)