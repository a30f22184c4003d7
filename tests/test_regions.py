import pytest

from kweens.connectivity import grid_is_connected
from kweens.model import labels_of, make_puzzle
from kweens.patterns import FALLBACK_PATTERNS, diagonal_stripe
from kweens.regions import (
    fallback_regions,
    flood_fill,
    generate_regions,
    layout_problem,
    normalize_labels,
    smooth,
)
from kweens.solver import is_solvable

SEEDS = [1, 2, 3, 42, 2024]


class TestGenerateRegions:
    """Random partitioning into n regions"""

    @pytest.mark.parametrize("n", range(4, 10))
    def test_labels_are_exactly_0_to_n_minus_1(self, n):
        for seed in SEEDS:
            grid = generate_regions(n, seed)
            assert len(grid) == n
            assert all(len(row) == n for row in grid)
            assert labels_of(grid) == list(range(n))

    @pytest.mark.parametrize("n", range(4, 10))
    def test_generated_regions_are_connected(self, n):
        """Anything except the last-resort stripe is 4-connected"""
        for seed in SEEDS:
            grid = generate_regions(n, seed)
            if grid == fallback_regions(n) and n not in FALLBACK_PATTERNS:
                continue
            assert grid_is_connected(grid), f"n={n} seed={seed}"

    def test_same_seed_same_grid(self):
        assert generate_regions(7, 99) == generate_regions(7, 99)

    def test_unseeded_still_valid(self):
        grid = generate_regions(6)
        assert labels_of(grid) == list(range(6))

    @pytest.mark.parametrize("n", [3, 10, 0])
    def test_unsupported_size(self, n):
        with pytest.raises(ValueError):
            generate_regions(n, 1)

    @pytest.mark.parametrize("n", [5, 6, 7])
    def test_require_solvable(self, n):
        for seed in (1, 2):
            grid = generate_regions(n, seed, require_solvable=True)
            assert labels_of(grid) == list(range(n))
            assert is_solvable(make_puzzle(grid, id="t"))


class TestFallbacks:
    """What happens when every attempt is used up"""

    def test_hand_pattern_for_small_sizes(self):
        for n in (4, 5, 6):
            assert generate_regions(n, 1, max_attempts=0) == FALLBACK_PATTERNS[n]

    def test_stripe_for_large_sizes(self):
        assert generate_regions(8, 1, max_attempts=0) == diagonal_stripe(8)

    def test_stripe_is_not_connected(self):
        assert not grid_is_connected(diagonal_stripe(7))

    @pytest.mark.parametrize("n", range(4, 10))
    def test_strict_fallback_is_solvable(self, n):
        grid = generate_regions(n, 1, require_solvable=True, max_attempts=0)
        assert grid_is_connected(grid)
        assert is_solvable(make_puzzle(grid, id="fallback"))


class TestGrowthSteps:
    """flood fill, rejection, smoothing, normalisation"""

    def test_flood_fill_labels_every_cell(self):
        seeds = [(0, 0, 0), (0, 3, 1), (3, 0, 2), (3, 3, 3)]
        grid = flood_fill(4, seeds)
        assert all(v in (0, 1, 2, 3) for row in grid for v in row)
        for r, c, rid in seeds:
            assert grid[r][c] == rid
        assert grid_is_connected(grid)

    def test_rejects_wrong_region_count(self):
        assert layout_problem([[0] * 4 for _ in range(4)], 4) == "wrong region count"

    def test_rejects_full_row(self):
        grid = [[0, 0, 0, 0], [1, 1, 2, 2], [1, 1, 2, 2], [3, 3, 3, 3]]
        assert layout_problem(grid, 4).startswith("region fills row")

    def test_rejects_oversized_region(self):
        grid = [[0, 0, 0, 1], [0, 0, 0, 2], [0, 0, 0, 3], [1, 2, 3, 3]]
        assert layout_problem(grid, 4) == "region larger than half the board"

    def test_accepts_hand_pattern(self):
        assert layout_problem(FALLBACK_PATTERNS[4], 4) is None

    def test_smooth_moves_isolated_cell(self):
        grid = [[0, 0, 1, 1], [0, 0, 1, 1], [2, 2, 0, 3], [2, 2, 3, 3]]
        out = smooth(grid, 4)
        assert out[2][2] == 2
        assert out[0] == grid[0]
        assert grid[2][2] == 0

    def test_smooth_keeps_single_cell_region(self):
        grid = [[0, 0, 1, 1], [0, 2, 1, 1], [0, 0, 3, 3], [0, 0, 3, 3]]
        assert smooth(grid, 4)[1][1] == 2

    def test_normalize_keeps_order(self):
        assert normalize_labels([[5, 5], [2, 9]]) == [[1, 1], [0, 2]]
