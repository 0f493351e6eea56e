from __future__ import annotations

import heapq
import logging
from itertools import count
from math import inf

from ..types import (
    AlgorithmSpec,
    Coord,
    Grid,
    RunOptions,
    SearchAlgorithm,
    SearchResult,
    frontier_cells,
)

logger = logging.getLogger(__name__)

ALGORITHM = AlgorithmSpec(
    id=SearchAlgorithm.DIJKSTRA.value,
    name="Dijkstra",
    description="Shortest path over unit-cost orthogonal steps.",
)


def run(grid: Grid, start: Coord, target: Coord, options: RunOptions) -> SearchResult:
    if start == target:
        return SearchResult(steps_to_find=0)

    budget = inf if options.max_visited is None else options.max_visited
    seq = count()

    grid[start].distance = 0.0
    # (distance, insertion order, coord); insertion order breaks ties.
    pq: list[tuple[float, int, Coord]] = [(0.0, next(seq), start)]

    visited_out = []
    steps = -1

    while pq and len(visited_out) < budget:
        d, _, cur = heapq.heappop(pq)
        cell = grid[cur]
        if cell.is_visited or d != cell.distance:
            continue
        if cell.is_wall:
            continue
        if d == inf:
            logger.warning("dijkstra trapped at %s", cur.id)
            break

        cell.is_visited = True
        visited_out.append(cell)
        if cur == target:
            steps = grid.hops_to(cur)
            break

        for nxt in grid.unvisited_neighbors(cur):
            if nxt.is_wall:
                continue
            nd = d + 1
            if nd < nxt.distance:
                nxt.distance = nd
                nxt.previous = cur
                heapq.heappush(pq, (nd, next(seq), nxt.coord))

    live = [c for dist, _, c in sorted(pq) if dist == grid[c].distance]
    return SearchResult(
        visited=visited_out,
        pending=frontier_cells(grid, live),
        steps_to_find=steps,
        expanded=len(visited_out),
    )
