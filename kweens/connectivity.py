from __future__ import annotations

import logging
from collections import deque
from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Sequence, Set

from .model import DIRS4, Cell, LabelGrid, Puzzle, copy_grid, in_bounds, labels_of

logger = logging.getLogger("kweens_connectivity")


# ============================================================
# Checks
# ============================================================
def region_cells(grid: Sequence[Sequence[int]], label: int) -> List[Cell]:
    N = len(grid)
    return [(r, c) for r in range(N) for c in range(N) if grid[r][c] == label]


def _flood(grid: Sequence[Sequence[int]], start: Cell, label: int, seen: Set[Cell]) -> List[Cell]:
    N = len(grid)
    comp = [start]
    seen.add(start)
    q = deque([start])
    while q:
        r, c = q.popleft()
        for dr, dc in DIRS4:
            rr, cc = r + dr, c + dc
            if in_bounds(rr, cc, N) and (rr, cc) not in seen and grid[rr][cc] == label:
                seen.add((rr, cc))
                comp.append((rr, cc))
                q.append((rr, cc))
    return comp


def is_connected(grid: Sequence[Sequence[int]], label: int) -> bool:
    """True if every cell holding ``label`` is 4-reachable from any other.

    A label with zero or one cell counts as connected.
    """
    cells = region_cells(grid, label)
    if len(cells) <= 1:
        return True
    return len(_flood(grid, cells[0], label, set())) == len(cells)


def components(grid: Sequence[Sequence[int]], label: int) -> List[List[Cell]]:
    """Connected components of ``label``, in row-major order of their first cell."""
    seen: Set[Cell] = set()
    comps: List[List[Cell]] = []
    for cell in region_cells(grid, label):
        if cell not in seen:
            comps.append(_flood(grid, cell, label, seen))
    return comps


def disconnected_labels(grid: Sequence[Sequence[int]]) -> List[int]:
    return [label for label in labels_of(grid) if not is_connected(grid, label)]


def grid_is_connected(grid: Sequence[Sequence[int]]) -> bool:
    return not disconnected_labels(grid)


def validate(puzzle: Puzzle) -> bool:
    bad = disconnected_labels(puzzle.regions)
    if bad:
        logger.debug("Puzzle %s has disconnected regions %s", puzzle.id, bad)
        return False
    return True


# ============================================================
# Repair
# ============================================================
def _stepped_path(start: Cell, end: Cell) -> List[Cell]:
    """Cells from ``start`` (exclusive) to ``end``: columns first, then rows."""
    r, c = start
    er, ec = end
    path: List[Cell] = []
    while c != ec:
        c += 1 if c < ec else -1
        path.append((r, c))
    while r != er:
        r += 1 if r < er else -1
        path.append((r, c))
    return path


def _pairs_by_distance(a: Iterable[Cell], b: Iterable[Cell]) -> List[tuple[Cell, Cell]]:
    b = list(b)
    pairs = [((r1, c1), (r2, c2)) for r1, c1 in a for r2, c2 in b]
    pairs.sort(key=lambda p: abs(p[0][0] - p[1][0]) + abs(p[0][1] - p[1][1]))
    return pairs


def _wipes_a_label(grid: LabelGrid, path: List[Cell], label: int) -> bool:
    counts: Dict[int, int] = {}
    for row in grid:
        for v in row:
            counts[v] = counts.get(v, 0) + 1
    for r, c in path:
        v = grid[r][c]
        if v != label:
            counts[v] -= 1
            if counts[v] == 0:
                return True
    return False


def connect_label(grid: LabelGrid, label: int) -> bool:
    """Stitch every component of ``label`` onto the first one, in place.

    Uses the closest pair of cells between the two components and paints the
    stepped path between them. Path cells change label, so other regions
    may lose cells (never all of them). Returns True if anything changed.
    """
    comps = components(grid, label)
    if len(comps) <= 1:
        return False
    changed = False
    base = list(comps[0])
    for comp in comps[1:]:
        for a, b in _pairs_by_distance(base, comp):
            path = _stepped_path(a, b)
            if _wipes_a_label(grid, path, label):
                continue
            for r, c in path:
                grid[r][c] = label
            base.extend(path)
            base.extend(comp)
            changed = True
            break
    return changed


def _main_components(grid: LabelGrid) -> Set[Cell]:
    keep: Set[Cell] = set()
    for label in labels_of(grid):
        comps = components(grid, label)
        keep.update(max(comps, key=len))
    return keep


def absorb_strays(grid: LabelGrid) -> None:
    """Hand every cell outside its label's largest component to a
    neighbouring label's largest component, in place.

    Main components only grow, so no label disappears.
    """
    N = len(grid)
    while True:
        main = _main_components(grid)
        if len(main) == N * N:
            return
        moved = False
        for r in range(N):
            for c in range(N):
                if (r, c) in main:
                    continue
                for dr, dc in DIRS4:
                    rr, cc = r + dr, c + dc
                    if in_bounds(rr, cc, N) and (rr, cc) in main:
                        grid[r][c] = grid[rr][cc]
                        main.add((r, c))
                        moved = True
                        break
        if not moved:
            return


def repair_grid(grid: Sequence[Sequence[int]]) -> LabelGrid:
    fixed = copy_grid(grid)
    for label in labels_of(fixed):
        if not is_connected(fixed, label):
            logger.debug("Fixing disconnected region %s", label)
            connect_label(fixed, label)
    if not grid_is_connected(fixed):
        # Stitching cut through other regions; fold the leftovers in.
        logger.debug("Stitching left %s disconnected, absorbing strays", disconnected_labels(fixed))
        absorb_strays(fixed)
    return fixed


def repair(puzzle: Puzzle) -> Puzzle:
    """Returns a copy of ``puzzle`` with its disconnected regions stitched.

    A stitch can cut through another region; whatever it strands is folded
    into a neighbour, so the result always passes ``validate`` and keeps the
    same set of labels.
    """
    if validate(puzzle):
        return puzzle
    logger.info("Fixing connectivity issues in %s", puzzle.id)
    return puzzle.with_regions(repair_grid(puzzle.regions))


# ============================================================
# Reporting
# ============================================================
@dataclass
class ConnectivityReport:
    total_puzzles: int = 0
    connected_puzzles: int = 0
    issues: Dict[str, List[int]] = field(default_factory=dict)

    @property
    def disconnected_puzzles(self) -> int:
        return self.total_puzzles - self.connected_puzzles


def validate_puzzle_set(puzzles: Iterable[Puzzle]) -> ConnectivityReport:
    report = ConnectivityReport()
    for puzzle in puzzles:
        report.total_puzzles += 1
        bad = disconnected_labels(puzzle.regions)
        if bad:
            report.issues[puzzle.id] = bad
        else:
            report.connected_puzzles += 1
    return report
