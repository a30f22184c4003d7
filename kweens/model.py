from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import List, Sequence, Tuple

from .config import MAX_SIZE, MIN_SIZE

Cell = Tuple[int, int]
LabelGrid = List[List[int]]

DIRS4 = [(1, 0), (-1, 0), (0, 1), (0, -1)]
DIAGONALS = [(-1, -1), (-1, 1), (1, -1), (1, 1)]


class CellState(str, Enum):
    EMPTY = "empty"
    QUEEN = "queen"
    X = "x"
    DOT = "dot"
    FORBIDDEN = "forbidden"


Board = List[List[CellState]]


def in_bounds(r, c, N):
    return 0 <= r < N and 0 <= c < N


def check_size(n: int) -> None:
    if not isinstance(n, int) or not (MIN_SIZE <= n <= MAX_SIZE):
        raise ValueError(f"Board size must be an int in {MIN_SIZE}..{MAX_SIZE}, got {n!r}")


def copy_grid(grid: Sequence[Sequence[int]]) -> LabelGrid:
    return [list(row) for row in grid]


def labels_of(grid: Sequence[Sequence[int]]) -> List[int]:
    """Sorted distinct labels present in the grid."""
    return sorted({v for row in grid for v in row})


def signature(grid: Sequence[Sequence[int]]) -> str:
    return f"{len(grid)}_" + "/".join(",".join(str(v) for v in row) for row in grid)


@dataclass(frozen=True)
class Puzzle:
    """A fixed region layout handed to a play session.

    ``regions`` is stored as a tuple of tuples so a Puzzle can't be changed
    once built; pass lists in, get tuples back.
    """
    id: str
    name: str
    size: int
    regions: Tuple[Tuple[int, ...], ...]

    def __post_init__(self):
        check_size(self.size)
        rows = tuple(tuple(int(v) for v in row) for row in self.regions)
        if len(rows) != self.size or any(len(row) != self.size for row in rows):
            raise ValueError(f"Puzzle {self.id}: regions must be {self.size}x{self.size}")
        for row in rows:
            for v in row:
                if not (0 <= v < self.size):
                    raise ValueError(f"Puzzle {self.id}: label {v} outside 0..{self.size - 1}")
        count = len(labels_of(rows))
        if count != self.size:
            raise ValueError(f"Puzzle {self.id}: needs exactly {self.size} regions, got {count}")
        object.__setattr__(self, "regions", rows)

    def label_grid(self) -> LabelGrid:
        return copy_grid(self.regions)

    def with_regions(self, regions, *, id: str | None = None, name: str | None = None) -> "Puzzle":
        return Puzzle(
            id=self.id if id is None else id,
            name=self.name if name is None else name,
            size=self.size,
            regions=regions,
        )

    @property
    def signature(self) -> str:
        return signature(self.regions)


def make_puzzle(regions, *, id: str, name: str | None = None) -> Puzzle:
    n = len(regions)
    return Puzzle(id=id, name=name or f"{n}x{n} Puzzle", size=n, regions=regions)
