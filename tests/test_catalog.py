import dataclasses
import datetime

import pytest

from kweens.catalog import (
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
from kweens.connectivity import validate
from kweens.model import labels_of
from kweens.solver import is_solvable


class TestStaticPuzzles:
    """Shipped daily and starter puzzles"""

    def test_daily_ids_and_sizes(self):
        assert [p.id for p in DAILY_PUZZLES] == [f"puzzle-{i:03d}" for i in range(1, 13)]
        assert {p.size for p in DAILY_PUZZLES} == {5, 6, 7, 8, 9}

    def test_every_puzzle_has_n_labels(self, shipped_puzzles):
        for puzzle in shipped_puzzles:
            assert labels_of(puzzle.regions) == list(range(puzzle.size)), puzzle.id

    def test_starter_includes_mini(self):
        assert any(p.size == 4 for p in STARTER_PUZZLES)

    def test_puzzles_are_frozen(self):
        with pytest.raises(dataclasses.FrozenInstanceError):
            DAILY_PUZZLES[0].size = 6


class TestDailySelection:
    """Day-of-year rotation"""

    def test_index_wraps(self):
        n = len(DAILY_PUZZLES)
        assert get_puzzle_for_day(0) is DAILY_PUZZLES[0]
        assert get_puzzle_for_day(n) is DAILY_PUZZLES[0]
        assert get_puzzle_for_day(n + 3) is DAILY_PUZZLES[3]

    def test_day_index(self):
        assert day_index(datetime.date(2024, 1, 1)) == 0
        assert day_index(datetime.date(2024, 12, 31)) == 365
        assert day_index(datetime.date(2025, 2, 1)) == 31

    def test_daily_puzzle_for_date(self):
        assert get_daily_puzzle(datetime.date(2024, 1, 2)) is DAILY_PUZZLES[1]

    def test_today(self):
        assert get_daily_puzzle() in DAILY_PUZZLES


class TestPuzzleCatalog:
    """Caller-owned, duplicate-free puzzle sets"""

    def test_add_dedupes_by_layout(self):
        base = DAILY_PUZZLES[0]
        catalog = PuzzleCatalog()
        assert catalog.add(base)
        assert not catalog.add(base.with_regions(base.regions, id="other"))
        assert len(catalog) == 1
        assert base in catalog

    def test_catalogs_do_not_share_state(self):
        a = PuzzleCatalog(DAILY_PUZZLES)
        b = PuzzleCatalog()
        assert len(a) == 12
        assert len(b) == 0
        assert b.add(DAILY_PUZZLES[0])

    def test_reset(self):
        catalog = PuzzleCatalog(DAILY_PUZZLES)
        catalog.reset()
        assert len(catalog) == 0
        assert catalog.add(DAILY_PUZZLES[0])

    def test_puzzle_for_day(self):
        catalog = PuzzleCatalog(DAILY_PUZZLES[:3])
        assert catalog.puzzle_for_day(4) is DAILY_PUZZLES[1]
        with pytest.raises(ValueError):
            PuzzleCatalog().puzzle_for_day(0)

    def test_sizes(self):
        assert PuzzleCatalog(DAILY_PUZZLES).sizes() == {5: 4, 6: 2, 7: 2, 8: 2, 9: 2}

    def test_generate_unique(self):
        catalog = PuzzleCatalog()
        first = catalog.generate_unique(5, 1)
        assert first is not None
        assert first.id == "generated-5x5-1"
        assert first in catalog
        assert is_solvable(first)
        # same seed, one attempt: the layout is already known
        assert catalog.generate_unique(5, 1, max_attempts=1) is None

    def test_add_variations(self):
        catalog = PuzzleCatalog([DAILY_PUZZLES[0]])
        added = catalog.add_variations(DAILY_PUZZLES[0])
        assert added
        assert len(catalog) == 1 + len(added)
        assert len({p.signature for p in catalog}) == len(catalog)

    def test_shuffled_renumbers(self):
        catalog = PuzzleCatalog(DAILY_PUZZLES)
        shuffled = catalog.shuffled(7)
        assert [p.id for p in shuffled] == [f"puzzle-{i:03d}" for i in range(1, 13)]
        assert {p.signature for p in shuffled} == {p.signature for p in catalog}
        assert [p.signature for p in shuffled] == [p.signature for p in catalog.shuffled(7)]


class TestBuildCatalog:
    """Hybrid generated + derived catalog"""

    def test_unknown_mode(self):
        with pytest.raises(ValueError):
            build_catalog("reckless")

    def test_small_conservative_catalog(self):
        catalog = build_catalog("conservative", per_size=4, sizes=(5, 6))
        assert 1 <= len(catalog) <= 8
        assert set(catalog.sizes()) <= {5, 6}
        for puzzle in catalog:
            assert validate(puzzle)
            assert is_solvable(puzzle)

    def test_balanced_includes_generated(self):
        catalog = build_catalog("balanced", per_size=4, sizes=(5,))
        assert len(catalog) <= 4
        assert all(p.size == 5 for p in catalog)
        assert len({p.signature for p in catalog}) == len(catalog)

    def test_deterministic(self):
        a = build_catalog("conservative", per_size=3, sizes=(5,))
        b = build_catalog("conservative", per_size=3, sizes=(5,))
        assert [p.signature for p in a] == [p.signature for p in b]


class TestDateSeededDaily:
    """The day's puzzle grown from the calendar date"""

    def test_seed_uses_zero_based_month(self):
        assert daily_seed(datetime.date(2024, 11, 15)) == 20241015
        assert daily_seed(datetime.date(2024, 1, 1)) == 20240001

    def test_same_date_same_puzzle(self):
        day = datetime.date(2025, 3, 7)
        assert generated_daily_puzzle(day) == generated_daily_puzzle(day)

    def test_known_date(self):
        puzzle = generated_daily_puzzle(datetime.date(2024, 11, 15))
        assert puzzle.id == "daily-2024-10-15"
        assert puzzle.name == "Daily 11/15/2024 - 5x5"
        assert puzzle.size == 5
        assert puzzle.regions == (
            (0, 0, 0, 4, 4),
            (2, 2, 2, 4, 4),
            (2, 2, 4, 4, 4),
            (2, 2, 3, 3, 1),
            (2, 3, 3, 3, 1),
        )

    def test_size_follows_seed(self):
        for day in (datetime.date(2024, 11, 16), datetime.date(2024, 11, 17), datetime.date(2025, 6, 30)):
            puzzle = generated_daily_puzzle(day)
            assert puzzle.size == 5 + daily_seed(day) % 5
            assert labels_of(puzzle.regions) == list(range(puzzle.size))

    def test_today(self):
        assert generated_daily_puzzle().id.startswith("daily-")


class TestCatalogAccess:
    """Indexing and the puzzles snapshot"""

    def test_indexing(self):
        catalog = PuzzleCatalog(DAILY_PUZZLES)
        assert catalog[0] is DAILY_PUZZLES[0]
        assert catalog[-1] is DAILY_PUZZLES[-1]
        with pytest.raises(IndexError):
            catalog[len(DAILY_PUZZLES)]

    def test_puzzles_is_a_copy(self):
        catalog = PuzzleCatalog(DAILY_PUZZLES[:2])
        snapshot = catalog.puzzles
        snapshot.clear()
        assert len(catalog) == 2
        assert catalog.puzzles == list(DAILY_PUZZLES[:2])


class TestFreshMode:
    """Generated-only catalogs never fall back to variations"""

    def test_fresh_catalog_is_generated(self):
        catalog = build_catalog("fresh", per_size=2, sizes=(5,))
        assert len(catalog) == 2
        assert catalog.sizes() == {5: 2}

    def test_no_fallback_when_generation_fails(self, monkeypatch):
        monkeypatch.setattr(PuzzleCatalog, "generate_unique", lambda self, *args, **kwargs: None)
        assert len(build_catalog("fresh", per_size=2, sizes=(5,))) == 0

    def test_fallback_fills_with_variations(self, monkeypatch):
        monkeypatch.setattr(PuzzleCatalog, "generate_unique", lambda self, *args, **kwargs: None)
        catalog = build_catalog("balanced", per_size=4, sizes=(5,))
        assert 1 <= len(catalog) <= 4
