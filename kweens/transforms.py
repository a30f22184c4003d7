from __future__ import annotations

import logging
import random
from typing import Callable, List, Optional, Sequence, Tuple

from .connectivity import grid_is_connected
from .model import LabelGrid, Puzzle, labels_of
from .rng import SeededRandom
from .solver import is_solvable

logger = logging.getLogger("kweens_transforms")

Grid = Sequence[Sequence[int]]


# ============================================================
# Grid transforms (all return new grids)
# ============================================================
def flip_horizontal(grid: Grid) -> LabelGrid:
    return [list(reversed(row)) for row in grid]


def flip_vertical(grid: Grid) -> LabelGrid:
    return [list(row) for row in reversed(grid)]


def transpose(grid: Grid) -> LabelGrid:
    n = len(grid)
    return [[grid[r][c] for r in range(n)] for c in range(n)]


def rotate_90(grid: Grid) -> LabelGrid:
    """Clockwise quarter turn."""
    n = len(grid)
    out = [[0] * n for _ in range(n)]
    for r in range(n):
        for c in range(n):
            out[c][n - 1 - r] = grid[r][c]
    return out


def rotate_180(grid: Grid) -> LabelGrid:
    return flip_horizontal(flip_vertical(grid))


def rotate_270(grid: Grid) -> LabelGrid:
    return rotate_90(rotate_180(grid))


def shift_columns(grid: Grid, k: int) -> LabelGrid:
    """Cyclic shift of every row ``k`` cells to the right.

    Unlike the symmetries above this can break regions apart.
    """
    n = len(grid)
    k %= n
    return [list(row[n - k:]) + list(row[:n - k]) for row in grid]


def relabel(grid: Grid, rng: Optional[Callable[[], float]] = None) -> LabelGrid:
    """Shuffles which number each region carries."""
    rand = rng or random.random
    ids = labels_of(grid)
    shuffled = list(ids)
    for i in range(len(shuffled) - 1, 0, -1):
        j = int(rand() * (i + 1))
        shuffled[i], shuffled[j] = shuffled[j], shuffled[i]
    mapping = dict(zip(ids, shuffled))
    return [[mapping[v] for v in row] for row in grid]


# ============================================================
# Variations
# ============================================================
SINGLE_TRANSFORMS = ["relabel", "flip_h", "flip_v", "rotate_90", "rotate_180", "rotate_270", "transpose", "shift_1"]

COMBO_TRANSFORMS = [
    ("relabel", "flip_h"),
    ("relabel", "flip_v"),
    ("flip_h", "flip_v"),
    ("relabel", "rotate_180"),
    ("flip_h", "transpose"),
]

TRANSFORM_TITLES = {
    "relabel": "Region ID shuffle",
    "flip_h": "Horizontal flip",
    "flip_v": "Vertical flip",
    "rotate_90": "90 degree rotation",
    "rotate_180": "180 degree rotation",
    "rotate_270": "270 degree rotation",
    "transpose": "Transpose",
    "shift_1": "Column shift",
}


def apply_transform(name: str, grid: Grid, rng: Optional[Callable[[], float]] = None) -> LabelGrid:
    if name == "relabel":
        return relabel(grid, rng)
    if name == "flip_h":
        return flip_horizontal(grid)
    if name == "flip_v":
        return flip_vertical(grid)
    if name == "rotate_90":
        return rotate_90(grid)
    if name == "rotate_180":
        return rotate_180(grid)
    if name == "rotate_270":
        return rotate_270(grid)
    if name == "transpose":
        return transpose(grid)
    if name == "shift_1":
        return shift_columns(grid, 1)
    raise ValueError(f"Unknown transform: {name}")


def accept_layout(grid: LabelGrid, puzzle_id: str) -> bool:
    """Re-checks a derived layout: n labels, connected regions, solvable."""
    n = len(grid)
    if len(labels_of(grid)) != n:
        return False
    if not grid_is_connected(grid):
        return False
    return is_solvable(Puzzle(id=puzzle_id, name=puzzle_id, size=n, regions=grid))


def derive_variations(
    puzzle: Puzzle,
    rng: Optional[Callable[[], float]] = None,
    *,
    start_id: int = 1,
    chains: Sequence[Tuple[str, ...]] | None = None,
) -> List[Puzzle]:
    """New puzzles made by transforming ``puzzle``.

    Every transform chain is applied to the base layout and kept only if
    the result passes ``accept_layout``. Ids continue from ``start_id``.
    """
    rand = rng or SeededRandom.wide(start_id)
    if chains is None:
        chains = [(name,) for name in SINGLE_TRANSFORMS] + list(COMBO_TRANSFORMS)

    n = puzzle.size
    out: List[Puzzle] = []
    next_id = start_id
    for chain in chains:
        grid = puzzle.label_grid()
        for name in chain:
            grid = apply_transform(name, grid, rand)

        title = " + ".join(TRANSFORM_TITLES[name] for name in chain)
        if not accept_layout(grid, puzzle.id):
            logger.debug("%s broke %s, skipping", title, puzzle.id)
            continue

        out.append(Puzzle(
            id=f"puzzle-{next_id:03d}",
            name=f"Daily Puzzle #{next_id} - {n}x{n} ({title})",
            size=n,
            regions=grid,
        ))
        next_id += 1
    return out
