"""Kweens: region generation, solving and play rules for the queens puzzle."""

from .board import (
    calculate_forbidden_positions,
    clone_board,
    compute_conflicts,
    count_queens,
    create_empty_board,
    has_won,
    is_diagonal_touch,
    long_press,
    placement_board,
    tap,
)
from .catalog import (
    DAILY_PUZZLES,
    STARTER_PUZZLES,
    PuzzleCatalog,
    build_catalog,
    daily_seed,
    day_index,
    generated_daily_puzzle,
    get_daily_puzzle,
    get_puzzle_for_day,
)
from .connectivity import ConnectivityReport, components, is_connected, repair, validate, validate_puzzle_set
from .model import CellState, Puzzle
from .regions import generate_regions
from .rng import SeededRandom
from .session import GameSession
from .solver import find_solution, is_solvable
from .transforms import derive_variations

__all__ = [
    "CellState", "Puzzle", "SeededRandom", "GameSession",
    "generate_regions",
    "is_connected", "components", "validate", "repair", "validate_puzzle_set", "ConnectivityReport",
    "find_solution", "is_solvable",
    "create_empty_board", "clone_board", "count_queens", "placement_board", "is_diagonal_touch",
    "compute_conflicts", "has_won", "calculate_forbidden_positions", "tap", "long_press",
    "derive_variations",
    "DAILY_PUZZLES", "STARTER_PUZZLES", "PuzzleCatalog", "build_catalog",
    "day_index", "get_puzzle_for_day", "get_daily_puzzle", "daily_seed", "generated_daily_puzzle",
]
