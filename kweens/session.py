from __future__ import annotations

from typing import List

from .board import (
    calculate_forbidden_positions,
    compute_conflicts,
    count_queens,
    create_empty_board,
    has_won,
    long_press,
    tap,
)
from .model import Board, Puzzle


class GameSession:
    """One puzzle and the board being played on it.

    The puzzle never changes; ``reset`` only throws the board away.
    """

    def __init__(self, puzzle: Puzzle):
        self.puzzle = puzzle
        self.board: Board = create_empty_board(puzzle.size)

    @property
    def size(self) -> int:
        return self.puzzle.size

    def tap(self, r: int, c: int) -> None:
        self.board = tap(self.board, self.puzzle, r, c)

    def long_press(self, r: int, c: int) -> None:
        self.board = long_press(self.board, self.puzzle, r, c)

    def reset(self) -> None:
        self.board = create_empty_board(self.puzzle.size)

    @property
    def queens(self) -> int:
        return count_queens(self.board)

    @property
    def conflicts(self) -> List[List[bool]]:
        return compute_conflicts(self.board, self.puzzle)

    @property
    def forbidden(self) -> Board:
        return calculate_forbidden_positions(self.board, self.puzzle)

    @property
    def won(self) -> bool:
        return has_won(self.board, self.puzzle)
