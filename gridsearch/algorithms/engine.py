from __future__ import annotations

import logging
from typing import Dict, Iterable, Optional, Union

from .loader import LoadedAlgorithm, load_plugins
from .types import (
    Coord,
    CoordLike,
    RunOptions,
    SearchAlgorithm,
    SearchResult,
    build_grid,
    reconstruct_path,
)

logger = logging.getLogger(__name__)

REGISTRY = load_plugins()


def resolve_algorithm(algorithm: Union[SearchAlgorithm, str]) -> SearchAlgorithm:
    try:
        return SearchAlgorithm(algorithm)
    except ValueError:
        known = ", ".join(a.value for a in SearchAlgorithm)
        raise ValueError(f"Unknown algorithm: {algorithm!r} (expected one of {known})") from None


def run(
    rows: int,
    columns: int,
    start: CoordLike,
    target: CoordLike,
    walls: Iterable[CoordLike] = (),
    algorithm: Union[SearchAlgorithm, str] = SearchAlgorithm.DIJKSTRA,
    budget: Optional[int] = None,
    registry: Optional[Dict[SearchAlgorithm, LoadedAlgorithm]] = None,
) -> SearchResult:
    """Build a grid, search it with ``algorithm`` and attach the shortest path.

    ``budget`` caps how many cells may be visited; ``None`` means unbounded.
    The grid is private to this call, so every run starts from clean state.
    """
    key = resolve_algorithm(algorithm)
    registry = REGISTRY if registry is None else registry
    algo = registry.get(key)
    if algo is None:
        raise ValueError(f"No plugin registered for algorithm: {key.value}")
    if budget is not None and budget <= 0:
        raise ValueError(f"budget must be positive or None, got {budget}")

    start = Coord.coerce(start)
    target = Coord.coerce(target)
    grid = build_grid(rows, columns, start, target, walls)

    result = algo.run(grid, start, target, RunOptions(max_visited=budget))

    result.path = reconstruct_path(grid.view(), target)
    for cell in result.path:
        cell.is_on_shortest_path = True
    for cell in result.pending:
        cell.is_on_queue = True

    if result.found:
        logger.debug(
            "%s %dx%d: target %s found in %d steps after %d expansions",
            key.value, rows, columns, target.id, result.steps_to_find, result.expanded,
        )
    else:
        logger.debug(
            "%s %dx%d: target %s not reached after %d expansions",
            key.value, rows, columns, target.id, result.expanded,
        )
    return result
