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
    id=SearchAlgorithm.ASTAR.value,
    name="A*",
    description="Best-first search ordered by straight-line distance to the target.",
)


def run(grid: Grid, start: Coord, target: Coord, options: RunOptions) -> SearchResult:
    if start == target:
        return SearchResult(steps_to_find=0)

    budget = inf if options.max_visited is None else options.max_visited
    seq = count()

    # Cells are ranked by their heuristic alone; accumulated path cost is
    # never added in, so this behaves as greedy best-first search.
    h = grid.heuristic_table(target)

    grid[start].distance = h[start.row][start.column]
    pq: list[tuple[float, int, Coord]] = [(grid[start].distance, next(seq), start)]

    visited_out = []
    steps = -1

    while pq and len(visited_out) < budget:
        d, _, cur = heapq.heappop(pq)
        cell = grid[cur]
        if cell.is_visited:
            continue
        if cell.is_wall:
            continue
        if d == inf:
            logger.warning("astar trapped at %s", cur.id)
            break

        cell.is_visited = True
        visited_out.append(cell)
        if cur == target:
            steps = grid.hops_to(cur)
            break

        for nxt in grid.unvisited_neighbors(cur):
            if nxt.is_wall:
                continue
            # Rediscovery re-points the predecessor; the older heap entry is
            # dropped once the cell is visited.
            nxt.distance = h[nxt.row][nxt.column]
            nxt.previous = cur
            heapq.heappush(pq, (nxt.distance, next(seq), nxt.coord))

    return SearchResult(
        visited=visited_out,
        pending=frontier_cells(grid, [c for _, _, c in sorted(pq)]),
        steps_to_find=steps,
        expanded=len(visited_out),
    )
