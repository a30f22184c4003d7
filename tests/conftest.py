import pytest

from kweens.catalog import DAILY_PUZZLES, STARTER_PUZZLES

# One known winning column per row for every shipped puzzle.
WITNESS_COLUMNS = {
    "puzzle-001": [0, 3, 1, 4, 2],
    "puzzle-002": [0, 3, 1, 4, 2],
    "puzzle-003": [2, 4, 1, 3, 0],
    "puzzle-004": [0, 3, 1, 4, 2],
    "puzzle-005": [1, 3, 5, 0, 2, 4],
    "puzzle-006": [2, 5, 1, 4, 0, 3],
    "puzzle-007": [1, 3, 5, 0, 2, 4, 6],
    "puzzle-008": [3, 0, 4, 1, 5, 2, 6],
    "puzzle-009": [2, 5, 1, 4, 7, 0, 3, 6],
    "puzzle-010": [1, 3, 5, 7, 0, 2, 4, 6],
    "puzzle-011": [2, 5, 8, 1, 4, 7, 0, 3, 6],
    "puzzle-012": [1, 3, 5, 7, 0, 2, 4, 6, 8],
    "q6a": [1, 3, 5, 0, 2, 4],
    "q6b": [1, 4, 2, 5, 3, 0],
    "q4a": [1, 3, 0, 2],
}


def witness_cells(puzzle_id):
    return [(r, c) for r, c in enumerate(WITNESS_COLUMNS[puzzle_id])]


@pytest.fixture
def shipped_puzzles():
    return list(DAILY_PUZZLES) + list(STARTER_PUZZLES)


@pytest.fixture
def five():
    """puzzle-001, the first 5x5 daily layout."""
    return DAILY_PUZZLES[0]


@pytest.fixture
def witness():
    return witness_cells
