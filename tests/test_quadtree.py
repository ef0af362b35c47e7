import pygame
import pytest

from quadsim.geometry import Rect
from quadsim.particle import Particle
from quadsim.quadtree import YELLOW, QuadTree

ROOT = Rect(0, 0, 100, 100)


def make(x, y, r=1.0):
    return Particle(r, position=(float(x), float(y)))


def test_below_capacity_no_subdivision():
    tree = QuadTree(ROOT, 4)
    for i in range(4):
        tree.insert(make(10 + i * 10, 10))
    assert list(tree.boundaries()) == [ROOT]


def test_over_capacity_subdivides_into_quadrants():
    tree = QuadTree(ROOT, 4)
    for i in range(5):
        tree.insert(make(10 + i * 10, 10))
    rects = list(tree.boundaries())
    assert len(rects) == 5
    assert rects[0] == ROOT
    children = rects[1:]
    assert sum(r.width * r.height for r in children) == pytest.approx(ROOT.width * ROOT.height)
    assert children[1].left == ROOT.left and children[1].top == ROOT.top
    for r in children:
        assert r.width == pytest.approx(ROOT.width / 2)
        assert r.height == pytest.approx(ROOT.height / 2)
        assert ROOT.contains(r.left, r.top)


def test_search_finds_inserted_and_not_others():
    tree = QuadTree(ROOT, 2)
    inside = [make(5 * i, 5 * i) for i in range(1, 8)]
    for p in inside:
        tree.insert(p)
    assert all(tree.search(p) for p in inside)
    assert not tree.search(make(90, 3))


def test_outside_objects_are_ignored():
    tree = QuadTree(ROOT, 4)
    far = make(500, 500)
    tree.insert(far)
    assert not tree.search(far)


def test_query_excludes_self_and_finds_neighbours():
    tree = QuadTree(ROOT, 1)
    a = make(50, 50, 2)
    b = make(51, 51, 2)
    c = make(10, 10, 2)
    for p in (a, b, c):
        tree.insert(p)
    found = tree.query(a.bounds())
    assert b in found
    assert a not in found
    assert c not in found


def test_query_has_no_duplicates_when_stored_in_several_nodes():
    tree = QuadTree(ROOT, 1)
    filler = make(5, 5)
    tree.insert(filler)
    straddler = make(48, 48, 4)
    tree.insert(straddler)
    found = tree.query(Rect(0, 0, 100, 100))
    assert found.count(straddler) == 1
    assert len(found) == len({id(p) for p in found})


def test_query_outside_returns_empty():
    tree = QuadTree(ROOT, 4)
    tree.insert(make(10, 10))
    assert tree.query(Rect(200, 200, 10, 10)) == []


def test_reset_clears_everything():
    tree = QuadTree(ROOT, 1)
    particles = [make(10 * i, 10 * i) for i in range(1, 6)]
    for p in particles:
        tree.insert(p)
    tree.reset()
    assert list(tree.boundaries()) == [ROOT]
    assert not any(tree.search(p) for p in particles)


def test_set_data_replaces_tree():
    tree = QuadTree(ROOT, 4)
    p = make(10, 10)
    tree.insert(p)
    other = Rect(0, 0, 50, 50)
    tree.set_data(other, 4)
    assert list(tree.boundaries()) == [other]
    assert not tree.search(p)


def test_equals_by_bounds_and_position():
    tree = QuadTree(ROOT, 4)
    assert tree.equals(make(3, 4, 2), make(3, 4, 2))
    assert not tree.equals(make(3, 4, 2), make(3, 4, 3))
    assert not tree.equals(make(3, 4), make(4, 4))


def test_invalid_capacity():
    with pytest.raises(ValueError):
        QuadTree(ROOT, 0)


def test_empty_tree_operations_raise():
    tree = QuadTree()
    assert list(tree.boundaries()) == []
    with pytest.raises(RuntimeError):
        tree.insert(make(1, 1))
    with pytest.raises(RuntimeError):
        tree.query(ROOT)
    with pytest.raises(RuntimeError):
        tree.search(make(1, 1))


def test_draw_outlines_root():
    surface = pygame.Surface((120, 120))
    surface.fill((0, 0, 0))
    tree = QuadTree(ROOT, 4)
    tree.draw(surface)
    assert tuple(surface.get_at((0, 0)))[:3] == YELLOW
    assert tuple(surface.get_at((50, 50)))[:3] == (0, 0, 0)