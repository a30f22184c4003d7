from __future__ import annotations

import logging
from typing import List, Optional, Set

from .board import has_won, placement_board
from .model import Cell, Puzzle

logger = logging.getLogger("kweens_solver")


class _NodeLimit(Exception):
    pass


def diagonal_touch(r1, c1, r2, c2):
    return abs(r1 - r2) == 1 and abs(c1 - c2) == 1


# ============================================================
# Backtracking (one queen per row)
# ============================================================
def find_solution(puzzle: Puzzle, *, max_nodes: Optional[int] = None) -> Optional[List[Cell]]:
    """Returns one winning placement as a list of (row, col), or None.

    Rows are filled top to bottom; a column is tried only if it is unused,
    its region is unused and it doesn't diagonally touch a placed queen.
    A full placement is only accepted once ``has_won`` agrees.

    ``max_nodes`` caps the number of placements tried; hitting the cap is
    logged and reported as no solution.
    """
    N = puzzle.size
    regions = puzzle.regions
    used_cols: Set[int] = set()
    used_regions: Set[int] = set()
    placed: List[Cell] = []
    nodes = 0

    def valid_partial(r, c):
        if c in used_cols or regions[r][c] in used_regions:
            return False
        for rr, cc in placed:
            if diagonal_touch(rr, cc, r, c):
                return False
        return True

    def backtrack(r):
        nonlocal nodes
        if r == N:
            return has_won(placement_board(N, placed), puzzle)
        for c in range(N):
            if not valid_partial(r, c):
                continue
            nodes += 1
            if max_nodes is not None and nodes > max_nodes:
                raise _NodeLimit()
            placed.append((r, c))
            used_cols.add(c)
            used_regions.add(regions[r][c])
            if backtrack(r + 1):
                return True
            placed.pop()
            used_cols.discard(c)
            used_regions.discard(regions[r][c])
        return False

    try:
        found = backtrack(0)
    except _NodeLimit:
        logger.warning("Search for %s stopped after %d nodes", puzzle.id, max_nodes)
        return None

    return list(placed) if found else None


def is_solvable(puzzle: Puzzle, *, max_nodes: Optional[int] = None) -> bool:
    return find_solution(puzzle, max_nodes=max_nodes) is not None
