"""Breadth-first shortest paths on a walkable grid."""

from __future__ import annotations

from collections import deque
from typing import Protocol

from tankgrid.types import Point

_STEPS = (Point(1, 0), Point(-1, 0), Point(0, 1), Point(0, -1))


class WalkableGrid(Protocol):
    def is_walkable(self, p: Point) -> bool: ...


def find_path(grid: WalkableGrid, start: Point, goal: Point) -> list[Point]:
    """Return the cells from ``start`` to ``goal`` inclusive, or [] if unreachable.

    A goal equal to the start yields an empty path.
    """
    frontier = deque([start])
    visited = {start}
    came_from: dict[Point, Point] = {}

    while frontier:
        current = frontier.popleft()
        if current == goal:
            break
        for step in _STEPS:
            nxt = current + step
            if not grid.is_walkable(nxt) or nxt in visited:
                continue
            visited.add(nxt)
            came_from[nxt] = current
            frontier.append(nxt)

    if goal not in came_from:
        return []

    path = [goal]
    cur = goal
    while cur != start:
        cur = came_from[cur]
        path.append(cur)
    path.reverse()
    return path