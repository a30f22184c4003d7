from __future__ import annotations

import datetime
import logging
from typing import Callable, Dict, Iterable, Iterator, List, Optional, Set

from .config import (
    CATALOG_MODES,
    CATALOG_PER_SIZE,
    CATALOG_SHUFFLE_SEED,
    DAILY_SIZES,
    PLAY_SIZES,
    UNIQUE_MAX_ATTEMPTS,
)
from .model import Puzzle, check_size, signature
from .patterns import STARTER_LAYOUTS, VERIFIED_LAYOUTS
from .regions import generate_regions
from .rng import SeededRandom
from .transforms import derive_variations

logger = logging.getLogger("kweens_catalog")


def _daily_name(number: int, size: int) -> str:
    return f"Daily Puzzle #{number} - {size}x{size}"


DAILY_PUZZLES = tuple(
    Puzzle(id=f"puzzle-{i:03d}", name=_daily_name(i, len(layout)), size=len(layout), regions=layout)
    for i, layout in enumerate(VERIFIED_LAYOUTS, start=1)
)

STARTER_PUZZLES = tuple(
    Puzzle(id=pid, name=name, size=len(layout), regions=layout)
    for pid, name, layout in STARTER_LAYOUTS
)


# ============================================================
# Daily selection
# ============================================================
def day_index(today: Optional[datetime.date] = None) -> int:
    """Zero-based day of the year in local time."""
    today = today or datetime.date.today()
    return today.timetuple().tm_yday - 1


def get_puzzle_for_day(day: int) -> Puzzle:
    return DAILY_PUZZLES[day % len(DAILY_PUZZLES)]


def get_daily_puzzle(today: Optional[datetime.date] = None) -> Puzzle:
    return get_puzzle_for_day(day_index(today))


def daily_seed(today: Optional[datetime.date] = None) -> int:
    """year * 10000 + zero-based month * 100 + day."""
    today = today or datetime.date.today()
    return today.year * 10000 + (today.month - 1) * 100 + today.day


def generated_daily_puzzle(today: Optional[datetime.date] = None) -> Puzzle:
    """The day's puzzle grown from a date seed.

    Every device computes the same layout for the same local date; the size
    cycles through ``DAILY_SIZES`` with the seed.
    """
    today = today or datetime.date.today()
    seed = daily_seed(today)
    size = DAILY_SIZES[seed % len(DAILY_SIZES)]
    regions = generate_regions(size, seed)
    logger.info("Daily puzzle for %s: %dx%d from seed %d", today.isoformat(), size, size, seed)
    return Puzzle(
        id=f"daily-{today.year}-{today.month - 1}-{today.day}",
        name=f"Daily {today.month}/{today.day}/{today.year} - {size}x{size}",
        size=size,
        regions=regions,
    )


# ============================================================
# Caller-owned catalog
# ============================================================
class PuzzleCatalog:
    """An ordered, duplicate-free set of puzzles.

    Layouts already added are remembered by signature, so two catalogs never
    share state and a fresh one starts clean.
    """

    def __init__(self, puzzles: Iterable[Puzzle] = ()):
        self._puzzles: List[Puzzle] = []
        self._signatures: Set[str] = set()
        for puzzle in puzzles:
            self.add(puzzle)

    def __len__(self) -> int:
        return len(self._puzzles)

    def __iter__(self) -> Iterator[Puzzle]:
        return iter(self._puzzles)

    def __getitem__(self, index: int) -> Puzzle:
        return self._puzzles[index]

    def __contains__(self, puzzle: Puzzle) -> bool:
        return puzzle.signature in self._signatures

    @property
    def puzzles(self) -> List[Puzzle]:
        return list(self._puzzles)

    def reset(self) -> None:
        self._puzzles.clear()
        self._signatures.clear()

    def add(self, puzzle: Puzzle) -> bool:
        """Adds ``puzzle`` unless its layout is already present."""
        sig = puzzle.signature
        if sig in self._signatures:
            return False
        self._signatures.add(sig)
        self._puzzles.append(puzzle)
        return True

    def puzzle_for_day(self, day: int) -> Puzzle:
        if not self._puzzles:
            raise ValueError("Catalog is empty")
        return self._puzzles[day % len(self._puzzles)]

    def sizes(self) -> Dict[int, int]:
        counts: Dict[int, int] = {}
        for puzzle in self._puzzles:
            counts[puzzle.size] = counts.get(puzzle.size, 0) + 1
        return counts

    def generate_unique(self, size: int, seed: int, *, max_attempts: int = UNIQUE_MAX_ATTEMPTS) -> Optional[Puzzle]:
        """Generates a solvable layout not yet in the catalog and adds it.

        Seeds ``seed``, ``seed + 1``, ... are tried in turn; returns None if
        every attempt repeats a known layout.
        """
        check_size(size)
        for attempt in range(max_attempts):
            s = seed + attempt
            grid = generate_regions(size, s, require_solvable=True)
            if signature(grid) in self._signatures:
                continue
            puzzle = Puzzle(
                id=f"generated-{size}x{size}-{s}",
                name=f"Generated {size}x{size} Puzzle",
                size=size,
                regions=grid,
            )
            self.add(puzzle)
            return puzzle
        logger.info("No new %dx%d layout after %d attempts from seed %d", size, size, max_attempts, seed)
        return None

    def add_variations(self, base: Puzzle, rng: Optional[Callable[[], float]] = None) -> List[Puzzle]:
        added = []
        for puzzle in derive_variations(base, rng, start_id=len(self._puzzles) + 1):
            if self.add(puzzle):
                added.append(puzzle)
        return added

    def shuffled(self, seed: int = CATALOG_SHUFFLE_SEED) -> "PuzzleCatalog":
        """Deterministic reorder, renumbered puzzle-001, puzzle-002, ..."""
        order = list(self._puzzles)
        SeededRandom.wide(seed).shuffle(order)
        return PuzzleCatalog(
            p.with_regions(p.regions, id=f"puzzle-{i:03d}", name=_daily_name(i, p.size))
            for i, p in enumerate(order, start=1)
        )


# ============================================================
# Hybrid catalog
# ============================================================
def build_catalog(
    mode: str = "balanced",
    *,
    per_size: int = CATALOG_PER_SIZE,
    sizes: Iterable[int] = PLAY_SIZES,
    seed: int = 0,
) -> PuzzleCatalog:
    """Mixes freshly generated puzzles with variations of the verified bases.

    ``mode`` picks the generated share from ``CATALOG_MODES``. Each size gets
    at most ``per_size`` puzzles; if the bases run out of distinct variations
    the size ends up with fewer. The result is shuffled with a fixed seed so
    the same call always gives the same catalog.
    """
    if mode not in CATALOG_MODES:
        raise ValueError(f"Unknown catalog mode: {mode}")
    cfg = CATALOG_MODES[mode]

    pool = PuzzleCatalog()
    for size in sizes:
        check_size(size)
        unique_count = per_size * cfg["unique_percentage"] // 100
        made = 0

        for i in range(unique_count):
            if pool.generate_unique(size, seed + size * 10000 + i * 7, max_attempts=cfg["max_attempts"]):
                made += 1

        if made < unique_count and not cfg["fallback_to_variations"]:
            logger.info("Size %d: %d of %d generated, no variation fallback", size, made, unique_count)
            continue

        bases = [p for p in DAILY_PUZZLES if p.size == size]
        rng = SeededRandom.wide(seed + size)
        for base in bases:
            if made >= per_size:
                break
            if pool.add(base):
                made += 1
            for puzzle in derive_variations(base, rng, start_id=len(pool) + 1):
                if made >= per_size:
                    break
                if pool.add(puzzle):
                    made += 1

        logger.info("Size %dx%d: %d puzzles (%d%% generated)", size, size, made, cfg["unique_percentage"])

    return pool.shuffled()
