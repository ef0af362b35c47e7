import pytest

from quadsim.geometry import Rect


def test_right_and_bottom_follow_size():
    r = Rect(1.5, 2.5, 3.0, 4.0)
    assert r.right == pytest.approx(r.left + r.width)
    assert r.bottom == pytest.approx(r.top + r.height)


def test_overlapping_rects_intersect_both_ways():
    a = Rect(0, 0, 10, 10)
    b = Rect(5, 5, 10, 10)
    assert a.intersects(b)
    assert b.intersects(a)


def test_touching_edges_do_not_intersect():
    a = Rect(0, 0, 10, 10)
    b = Rect(10, 0, 10, 10)
    assert not a.intersects(b)
    assert not b.intersects(a)


def test_disjoint_rects_do_not_intersect():
    assert not Rect(0, 0, 1, 1).intersects(Rect(50, 50, 1, 1))


def test_zero_size_rect_never_intersects():
    assert not Rect(5, 5, 0, 0).intersects(Rect(0, 0, 10, 10))


def test_contained_rect_intersects():
    assert Rect(0, 0, 100, 100).intersects(Rect(10, 10, 1, 1))


def test_negative_size_is_normalised():
    assert Rect(10, 10, -10, -10).intersects(Rect(2, 2, 2, 2))


def test_contains_edges():
    r = Rect(0, 0, 10, 10)
    assert r.contains(0, 0)
    assert r.contains(5, 9.5)
    assert not r.contains(10, 5)
    assert not r.contains(5, 10)
    assert not r.contains(-0.1, 5)


def test_rects_compare_by_value():
    assert Rect(1, 2, 3, 4) == Rect(1.0, 2.0, 3.0, 4.0)
    assert not Rect(1, 2, 3, 4) == Rect(1, 2, 3, 5)