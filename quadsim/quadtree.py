"""A region quadtree that stores objects by their bounding boxes."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import Any

import pygame

from quadsim.geometry import Rect

YELLOW = (255, 255, 0)


@dataclass
class _Node:
    boundary: Rect
    capacity: int
    objects: list[Any] = field(default_factory=list)
    children: tuple[_Node, _Node, _Node, _Node] | None = None

    def subdivide(self) -> None:
        b = self.boundary
        half_w = b.width / 2
        half_h = b.height / 2
        mid_x = (b.left + b.right) / 2
        mid_y = (b.top + b.bottom) / 2
        self.children = (
            _Node(Rect(mid_x, b.top, half_w, half_h), self.capacity),  # north east
            _Node(Rect(b.left, b.top, half_w, half_h), self.capacity),  # north west
            _Node(Rect(mid_x, mid_y, half_w, half_h), self.capacity),  # south east
            _Node(Rect(b.left, mid_y, half_w, half_h), self.capacity),  # south west
        )


def _walk(node: _Node) -> Iterator[_Node]:
    """Yield nodes in pre-order: a node, then its NE, NW, SE, SW subtrees."""
    stack = [node]
    while stack:
        current = stack.pop()
        yield current
        if current.children is not None:
            stack.extend(reversed(current.children))


class QuadTree:
    """Stores objects that provide ``bounds()`` and ``position``."""

    def __init__(self, boundary: Rect | None = None, capacity: int = 4) -> None:
        self._root: _Node | None = None
        if boundary is not None:
            self.set_data(boundary, capacity)

    def set_data(self, boundary: Rect, capacity: int) -> None:
        """Replace the tree with an empty one covering ``boundary``."""
        if capacity < 1:
            raise ValueError("capacity must be at least 1")
        self._root = _Node(boundary, capacity)

    def _require_root(self) -> _Node:
        if self._root is None:
            raise RuntimeError("quadtree has no boundary; call set_data first")
        return self._root

    def reset(self) -> None:
        """Remove all objects and all subdivisions, keeping the boundary."""
        if self._root is None:
            return
        self._root.objects.clear()
        self._root.children = None

    def insert(self, obj: Any) -> None:
        """Insert an object into every node whose boundary it overlaps."""
        bounds = obj.bounds()
        stack = [self._require_root()]
        while stack:
            node = stack.pop()
            if not node.boundary.intersects(bounds):
                continue
            if len(node.objects) < node.capacity:
                node.objects.append(obj)
                continue
            if node.children is None:
                node.subdivide()
            stack.extend(reversed(node.children))

    def query(self, area: Rect) -> list[Any]:
        """Return distinct objects overlapping ``area``, excluding ones whose bounds equal it."""
        found: list[Any] = []
        for node in self._walk_intersecting(area):
            for obj in node.objects:
                bounds = obj.bounds()
                if not area.intersects(bounds) or area == bounds:
                    continue
                if not any(self.equals(obj, other) for other in found):
                    found.append(obj)
        return found

    def _walk_intersecting(self, area: Rect) -> Iterator[_Node]:
        stack = [self._require_root()]
        while stack:
            node = stack.pop()
            if not node.boundary.intersects(area):
                continue
            yield node
            if node.children is not None:
                stack.extend(reversed(node.children))

    def search(self, obj: Any) -> bool:
        """Return True if an equal object is stored anywhere in the tree."""
        return any(
            self.equals(obj, stored)
            for node in _walk(self._require_root())
            for stored in node.objects
        )

    def equals(self, a: Any, b: Any) -> bool:
        """Objects are equal when their bounds and positions match."""
        return a.bounds() == b.bounds() and a.position == b.position

    def boundaries(self) -> Iterator[Rect]:
        """Yield the boundary of every node, root first."""
        if self._root is None:
            return
        for node in _walk(self._root):
            yield node.boundary

    def draw(self, surface: pygame.Surface) -> None:
        """Outline every node's boundary on ``surface`` in yellow."""
        for rect in self.boundaries():
            corners = [
                (rect.left, rect.top),
                (rect.right, rect.top),
                (rect.right, rect.bottom),
                (rect.left, rect.bottom),
            ]
            pygame.draw.lines(surface, YELLOW, True, corners)