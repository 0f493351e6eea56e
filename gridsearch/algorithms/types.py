from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from math import hypot, inf
from typing import Iterable, Iterator, List, NamedTuple, Optional, Sequence, Union


class SearchAlgorithm(str, Enum):
    """Closed set of strategies the engine can dispatch to."""

    DIJKSTRA = "dijkstra"
    ASTAR = "astar"
    DFS = "dfs"


@dataclass(frozen=True)
class AlgorithmSpec:
    """Metadata for an algorithm plugin."""

    id: str
    name: str
    description: str = ""


class Coord(NamedTuple):
    """A (row, column) grid position.

    The external identity of a cell is the string ``n:<row>:<col>``; ``id``
    and ``from_id`` convert between the two.
    """

    row: int
    column: int

    @property
    def id(self) -> str:
        return f"n:{self.row}:{self.column}"

    @classmethod
    def from_id(cls, cell_id: str) -> "Coord":
        parts = cell_id.split(":")
        if len(parts) != 3 or parts[0] != "n":
            raise ValueError(f"Malformed cell id: {cell_id!r}")
        try:
            return cls(int(parts[1]), int(parts[2]))
        except ValueError:
            raise ValueError(f"Malformed cell id: {cell_id!r}") from None

    @classmethod
    def coerce(cls, value: Union["Coord", str, Sequence[int]]) -> "Coord":
        if isinstance(value, Coord):
            return value
        if isinstance(value, str):
            return cls.from_id(value)
        try:
            row, column = value
        except (TypeError, ValueError):
            raise ValueError(f"Expected a (row, column) pair, got {value!r}") from None
        for v in (row, column):
            if isinstance(v, bool) or not isinstance(v, int):
                raise ValueError(f"Coordinates must be integers, got {value!r}")
        return cls(row, column)


CoordLike = Union[Coord, str, Sequence[int]]


@dataclass
class Cell:
    row: int
    column: int
    is_start: bool = False
    is_finish: bool = False
    is_wall: bool = False
    is_visited: bool = False
    distance: float = inf
    previous: Optional[Coord] = None
    # Rendering flags, filled in by the engine once a run is over.
    is_on_shortest_path: bool = False
    is_on_queue: bool = False

    @property
    def coord(self) -> Coord:
        return Coord(self.row, self.column)

    @property
    def id(self) -> str:
        return self.coord.id


@dataclass
class RunOptions:
    # None means unbounded.
    max_visited: Optional[int] = None


class Grid:
    """A rows x columns matrix of cells that a single search run mutates.

    Notes
    -----
    - Cells are indexed by ``Coord`` (or any ``(row, column)`` pair).
    - Movement for the search strategies is 4-connected; ``neighbors8`` is
      an enumeration helper only.
    - A grid carries visitation state, so build a fresh one for every run.
    """

    def __init__(self, cells: List[List[Cell]]):
        if not cells or not cells[0]:
            raise ValueError("Grid must have at least one row and one column")
        self.cells = cells
        self.rows = len(cells)
        self.columns = len(cells[0])

    def __getitem__(self, coord: Sequence[int]) -> Cell:
        row, column = coord
        return self.cells[row][column]

    def __iter__(self) -> Iterator[Cell]:
        for row in self.cells:
            yield from row

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Grid):
            return NotImplemented
        return self.cells == other.cells

    def __repr__(self) -> str:
        return f"Grid(rows={self.rows}, columns={self.columns})"

    def in_bounds(self, row: int, column: int) -> bool:
        return 0 <= row < self.rows and 0 <= column < self.columns

    def neighbors(self, coord: Sequence[int]) -> List[Cell]:
        """Orthogonal neighbours in up, down, left, right order."""
        row, column = coord
        out: List[Cell] = []
        for dr, dc in ((-1, 0), (1, 0), (0, -1), (0, 1)):
            r = row + dr
            c = column + dc
            if self.in_bounds(r, c):
                out.append(self.cells[r][c])
        return out

    def unvisited_neighbors(self, coord: Sequence[int]) -> List[Cell]:
        return [n for n in self.neighbors(coord) if not n.is_visited]

    def neighbors8(self, coord: Sequence[int]) -> List[Cell]:
        """All in-bounds neighbours including diagonals.

        Not used by the search strategies, which move orthogonally only.
        """
        row, column = coord
        out: List[Cell] = []
        for dr in (-1, 0, 1):
            for dc in (-1, 0, 1):
                if dr == 0 and dc == 0:
                    continue
                r = row + dr
                c = column + dc
                if self.in_bounds(r, c):
                    out.append(self.cells[r][c])
        return out

    def heuristic_table(self, target: Sequence[int]) -> List[List[float]]:
        """Straight-line distance from every cell to ``target``."""
        t_row, t_col = target
        return [
            [hypot(r - t_row, c - t_col) for c in range(self.columns)]
            for r in range(self.rows)
        ]

    def hops_to(self, coord: Sequence[int]) -> int:
        """Number of predecessor links between ``coord`` and the start of its chain."""
        hops = 0
        cur = self[coord].previous
        while cur is not None:
            hops += 1
            cur = self[cur].previous
        return hops

    def view(self) -> "GridView":
        return GridView(self)


class GridView:
    """Read-only access to a grid after its search has finished."""

    __slots__ = ("_grid",)

    def __init__(self, grid: Grid):
        self._grid = grid

    @property
    def rows(self) -> int:
        return self._grid.rows

    @property
    def columns(self) -> int:
        return self._grid.columns

    def __getitem__(self, coord: Sequence[int]) -> Cell:
        return self._grid[coord]

    def __iter__(self) -> Iterator[Cell]:
        return iter(self._grid)


@dataclass
class SearchResult:
    visited: List[Cell] = field(default_factory=list)
    pending: List[Cell] = field(default_factory=list)
    steps_to_find: int = -1
    expanded: int = 0
    path: List[Cell] = field(default_factory=list)

    @property
    def found(self) -> bool:
        return self.steps_to_find >= 0


def _check_in_bounds(name: str, coord: Coord, rows: int, columns: int) -> None:
    if not (0 <= coord.row < rows and 0 <= coord.column < columns):
        raise ValueError(
            f"{name} {tuple(coord)} out of bounds for a {rows}x{columns} grid"
        )


def build_grid(
    rows: int,
    columns: int,
    start: CoordLike,
    target: CoordLike,
    walls: Iterable[CoordLike] = (),
) -> Grid:
    """Allocate a fresh grid with start, finish and wall flags set.

    Walls that coincide with the start or target are left as given.
    """
    if rows < 1 or columns < 1:
        raise ValueError(f"Grid dimensions must be >= 1, got {rows}x{columns}")
    start = Coord.coerce(start)
    target = Coord.coerce(target)
    _check_in_bounds("start", start, rows, columns)
    _check_in_bounds("target", target, rows, columns)

    wall_set = set()
    for w in walls:
        wc = Coord.coerce(w)
        _check_in_bounds("wall", wc, rows, columns)
        wall_set.add(wc)

    cells = [
        [
            Cell(
                row=r,
                column=c,
                is_start=(r, c) == start,
                is_finish=(r, c) == target,
                is_wall=(r, c) in wall_set,
            )
            for c in range(columns)
        ]
        for r in range(rows)
    ]
    return Grid(cells)


def reconstruct_path(view: GridView, target: CoordLike) -> List[Cell]:
    """Cells from start to target, following ``previous`` links backwards.

    Returns [] when the target was never reached or its chain does not lead
    back to the start cell.
    """
    finish = view[Coord.coerce(target)]
    if finish.is_start:
        return [finish]
    if not finish.is_visited:
        return []
    out: List[Cell] = []
    cur: Optional[Cell] = finish
    while cur is not None:
        out.append(cur)
        cur = view[cur.previous] if cur.previous is not None else None
    out.reverse()
    if not out[0].is_start:
        return []
    return out


def frontier_cells(grid: Grid, coords: Iterable[Coord]) -> List[Cell]:
    """Unvisited cells for ``coords`` in the given order, first occurrence wins."""
    seen = set()
    out: List[Cell] = []
    for coord in coords:
        cell = grid[coord]
        if cell.is_visited or coord in seen:
            continue
        seen.add(coord)
        out.append(cell)
    return out
