from __future__ import annotations

import importlib
import logging
import pkgutil
from dataclasses import dataclass
from typing import Callable, Dict, List

from .types import AlgorithmSpec, Coord, Grid, RunOptions, SearchAlgorithm, SearchResult

logger = logging.getLogger(__name__)


@dataclass
class LoadedAlgorithm:
    spec: AlgorithmSpec
    run: Callable[[Grid, Coord, Coord, RunOptions], SearchResult]


def load_plugins() -> Dict[SearchAlgorithm, LoadedAlgorithm]:
    """Discover and import all algorithms from gridsearch/algorithms/plugins.

    Each plugin module must define:
      - ALGORITHM: AlgorithmSpec, whose id is a SearchAlgorithm value
      - run(grid: Grid, start: Coord, target: Coord, options: RunOptions) -> SearchResult

    Returns
    -------
    dict mapping SearchAlgorithm -> LoadedAlgorithm
    """

    registry: Dict[SearchAlgorithm, LoadedAlgorithm] = {}

    package_name = __package__ + '.plugins'
    package = importlib.import_module(package_name)

    for m in pkgutil.iter_modules(package.__path__):
        if m.name.startswith('_'):
            continue
        module = importlib.import_module(f"{package_name}.{m.name}")
        spec = getattr(module, 'ALGORITHM', None)
        run_fn = getattr(module, 'run', None)
        if spec is None or run_fn is None:
            continue
        if not isinstance(spec, AlgorithmSpec):
            raise TypeError(f"Plugin {m.name} ALGORITHM must be AlgorithmSpec")
        try:
            key = SearchAlgorithm(spec.id)
        except ValueError:
            raise ValueError(f"Plugin {m.name} has unknown algorithm id: {spec.id}") from None
        if key in registry:
            raise ValueError(f"Duplicate algorithm id: {spec.id}")
        registry[key] = LoadedAlgorithm(spec=spec, run=run_fn)
        logger.debug("registered algorithm plugin %s (%s)", spec.id, module.__name__)

    return registry


def list_algorithms(registry: Dict[SearchAlgorithm, LoadedAlgorithm]) -> List[AlgorithmSpec]:
    return [registry[k].spec for k in sorted(registry, key=lambda k: k.value)]
