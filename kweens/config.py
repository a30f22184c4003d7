"""Engine and front-end settings."""

# Supported board sizes. Generated and daily puzzles use PLAY_SIZES; 4x4
# only exists in the fixed starter sample.
MIN_SIZE = 4
MAX_SIZE = 9
PLAY_SIZES = (5, 6, 7, 8, 9)

# ---------------- Generation ----------------
MAX_ATTEMPTS = 10

# Search cap for the solvability check while gating freshly generated
# grids. Catalog puzzles are checked without a cap.
GATE_NODE_LIMIT = 250_000

# Attempts for signature-unique generation inside a catalog.
UNIQUE_MAX_ATTEMPTS = 200

# ---------------- Catalog ----------------
# Date-seeded daily puzzles span these sizes.
DAILY_SIZES = PLAY_SIZES

CATALOG_SHUFFLE_SEED = 12345
CATALOG_PER_SIZE = 40

# Hybrid catalog: share of freshly generated puzzles vs. derived
# variations of the verified bases.
CATALOG_MODES = {
    "conservative": {"unique_percentage": 10, "fallback_to_variations": True, "max_attempts": 50},
    "balanced":     {"unique_percentage": 30, "fallback_to_variations": True, "max_attempts": 100},
    "innovative":   {"unique_percentage": 60, "fallback_to_variations": True, "max_attempts": 200},
    # Generated only; a size that runs out of new layouts stays short.
    "fresh":        {"unique_percentage": 100, "fallback_to_variations": False, "max_attempts": 200},
}

# ---------------- Front-end ----------------
FPS = 60
PAD = 24
TOP_BAR = 110
GRID_BORDER = 1
REGION_BORDER = 4
CELL_PX = {5: 86, 6: 76, 7: 68, 8: 60, 9: 54}
