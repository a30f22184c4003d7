from __future__ import annotations

from typing import Dict, Iterable, List

from .model import DIAGONALS, Board, Cell, CellState, Puzzle, check_size, in_bounds


# ============================================================
# Board helpers
# ============================================================
def create_empty_board(n: int) -> Board:
    check_size(n)
    return [[CellState.EMPTY for _ in range(n)] for _ in range(n)]


def clone_board(board: Board) -> Board:
    return [list(row) for row in board]


def placement_board(n: int, cells: Iterable[Cell]) -> Board:
    """Empty board with a queen on each of ``cells``."""
    board = create_empty_board(n)
    for r, c in cells:
        if not in_bounds(r, c, n):
            raise ValueError(f"Cell {(r, c)} is outside a {n}x{n} board")
        board[r][c] = CellState.QUEEN
    return board


def count_queens(board: Board) -> int:
    return sum(1 for row in board for v in row if v == CellState.QUEEN)


def queen_cells(board: Board) -> List[Cell]:
    return [(r, c) for r, row in enumerate(board) for c, v in enumerate(row) if v == CellState.QUEEN]


def _check_board(board: Board, puzzle: Puzzle) -> None:
    n = puzzle.size
    if len(board) != n or any(len(row) != n for row in board):
        raise ValueError(f"Board does not match {n}x{n} puzzle {puzzle.id}")


def _check_cell(puzzle: Puzzle, r: int, c: int) -> None:
    if not in_bounds(r, c, puzzle.size):
        raise ValueError(f"Cell {(r, c)} is outside puzzle {puzzle.id}")


# ============================================================
# Conflicts + win
# ============================================================
def is_diagonal_touch(board: Board, r: int, c: int) -> bool:
    """True if a queen sits on one of the four cells diagonally touching (r, c)."""
    n = len(board)
    for dr, dc in DIAGONALS:
        rr, cc = r + dr, c + dc
        if in_bounds(rr, cc, n) and board[rr][cc] == CellState.QUEEN:
            return True
    return False


def compute_conflicts(board: Board, puzzle: Puzzle) -> List[List[bool]]:
    _check_board(board, puzzle)
    n = puzzle.size
    regions = puzzle.regions
    conflicts = [[False] * n for _ in range(n)]
    qs = queen_cells(board)

    row = [0] * n
    col = [0] * n
    reg: Dict[int, int] = {}
    for r, c in qs:
        row[r] += 1
        col[c] += 1
        rid = regions[r][c]
        reg[rid] = reg.get(rid, 0) + 1

    for r, c in qs:
        if row[r] > 1 or col[c] > 1 or reg[regions[r][c]] > 1:
            conflicts[r][c] = True
        elif is_diagonal_touch(board, r, c):
            conflicts[r][c] = True

    return conflicts


def has_won(board: Board, puzzle: Puzzle) -> bool:
    _check_board(board, puzzle)
    n = puzzle.size
    if count_queens(board) != n:
        return False

    rows = [0] * n
    cols = [0] * n
    regs: Dict[int, int] = {}
    for r, c in queen_cells(board):
        rows[r] += 1
        cols[c] += 1
        rid = puzzle.regions[r][c]
        regs[rid] = regs.get(rid, 0) + 1

    if not all(v == 1 for v in rows) or not all(v == 1 for v in cols):
        return False
    if not all(v == 1 for v in regs.values()):
        return False

    # Counts above already imply most of this; the conflict grid is the
    # authority on diagonal touches.
    return not any(any(row) for row in compute_conflicts(board, puzzle))


# ============================================================
# Forbidden overlay
# ============================================================
def calculate_forbidden_positions(board: Board, puzzle: Puzzle) -> Board:
    """Copy of ``board`` with every empty cell a queen rules out set to forbidden.

    Only ``empty`` cells are written; user marks are left alone.
    """
    _check_board(board, puzzle)
    n = puzzle.size
    regions = puzzle.regions
    result = clone_board(board)

    def forbid(r, c):
        if result[r][c] == CellState.EMPTY:
            result[r][c] = CellState.FORBIDDEN

    for qr, qc in queen_cells(board):
        for i in range(n):
            if i != qc:
                forbid(qr, i)
            if i != qr:
                forbid(i, qc)

        for dr, dc in DIAGONALS:
            r, c = qr + dr, qc + dc
            if in_bounds(r, c, n):
                forbid(r, c)

        rid = regions[qr][qc]
        for r in range(n):
            for c in range(n):
                if regions[r][c] == rid:
                    forbid(r, c)

    return result


# ============================================================
# Player input
# ============================================================
TAP_CYCLE = {
    CellState.EMPTY: CellState.X,
    CellState.X: CellState.QUEEN,
    CellState.QUEEN: CellState.EMPTY,
}

LONG_PRESS_TOGGLE = {
    CellState.EMPTY: CellState.DOT,
    CellState.DOT: CellState.EMPTY,
}


def _is_forbidden(board: Board, puzzle: Puzzle, r: int, c: int) -> bool:
    if board[r][c] == CellState.FORBIDDEN:
        return True
    return calculate_forbidden_positions(board, puzzle)[r][c] == CellState.FORBIDDEN


def tap(board: Board, puzzle: Puzzle, r: int, c: int) -> Board:
    """Returns the board after a tap on (r, c).

    Cycles empty -> x -> queen -> empty; anything else (a dot) goes back to
    empty. Tapping a forbidden cell changes nothing.
    """
    _check_board(board, puzzle)
    _check_cell(puzzle, r, c)
    nxt = clone_board(board)
    if _is_forbidden(board, puzzle, r, c):
        return nxt
    nxt[r][c] = TAP_CYCLE.get(board[r][c], CellState.EMPTY)
    return nxt


def long_press(board: Board, puzzle: Puzzle, r: int, c: int) -> Board:
    """Toggles empty <-> dot; every other state, and forbidden cells, stay put."""
    _check_board(board, puzzle)
    _check_cell(puzzle, r, c)
    nxt = clone_board(board)
    if _is_forbidden(board, puzzle, r, c):
        return nxt
    nxt[r][c] = LONG_PRESS_TOGGLE.get(board[r][c], board[r][c])
    return nxt
