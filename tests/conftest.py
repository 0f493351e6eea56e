"""
Pytest configuration and shared fixtures.

This file is automatically loaded by pytest and provides
fixtures available to all test files.
"""

from collections import deque

import pytest

from gridsearch.algorithms.types import Coord


def bfs_distances(rows, columns, start, walls):
    """Reference hop counts from ``start`` avoiding ``walls`` (4-connected)."""
    walls = {Coord.coerce(w) for w in walls}
    start = Coord.coerce(start)
    dist = {start: 0}
    q = deque([start])
    while q:
        cur = q.popleft()
        for dr, dc in ((-1, 0), (1, 0), (0, -1), (0, 1)):
            nxt = Coord(cur.row + dr, cur.column + dc)
            if not (0 <= nxt.row < rows and 0 <= nxt.column < columns):
                continue
            if nxt in walls or nxt in dist:
                continue
            dist[nxt] = dist[cur] + 1
            q.append(nxt)
    return dist


@pytest.fixture
def reference_distances():
    """Return the BFS reference used to check search results."""
    return bfs_distances


@pytest.fixture
def maze() -> dict:
    """A 6x7 grid with a winding wall layout and a reachable target."""
    walls = [
        (0, 2), (1, 2), (2, 2), (3, 2),
        (2, 4), (3, 4), (4, 4), (5, 4),
        (1, 5), (1, 6),
    ]
    return {
        "rows": 6,
        "columns": 7,
        "start": (0, 0),
        "target": (0, 6),
        "walls": walls,
    }


@pytest.fixture
def split_grid() -> dict:
    """A 3x3 grid whose middle row is fully walled off."""
    return {
        "rows": 3,
        "columns": 3,
        "start": (0, 0),
        "target": (2, 0),
        "walls": [(1, 0), (1, 1), (1, 2)],
    }
