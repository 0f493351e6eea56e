from __future__ import annotations

import logging
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
    id=SearchAlgorithm.DFS.value,
    name="DFS",
    description="Depth-first search (explores, does not guarantee shortest paths).",
)


def run(grid: Grid, start: Coord, target: Coord, options: RunOptions) -> SearchResult:
    if start == target:
        return SearchResult(steps_to_find=0)

    budget = inf if options.max_visited is None else options.max_visited

    grid[start].distance = 0.0
    stack = [start]

    visited_out = []
    steps = -1

    while stack and len(visited_out) < budget:
        cur = stack.pop()
        cell = grid[cur]
        # A cell pushed twice leaves a stale copy lower in the stack.
        if cell.is_visited:
            continue
        if cell.is_wall:
            continue
        if cell.distance == inf:
            logger.warning("dfs trapped at %s", cur.id)
            break

        cell.is_visited = True
        visited_out.append(cell)
        if cur == target:
            steps = grid.hops_to(cur)
            break

        # unvisited_neighbors yields in a fixed order; DFS behavior depends on that order.
        for nxt in grid.unvisited_neighbors(cur):
            if nxt.is_wall:
                continue
            nxt.distance = cell.distance + 1
            nxt.previous = cur
            stack.append(nxt.coord)

    return SearchResult(
        visited=visited_out,
        pending=frontier_cells(grid, reversed(stack)),
        steps_to_find=steps,
        expanded=len(visited_out),
    )
