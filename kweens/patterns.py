"""Hand-authored region layouts.

Every layout here has exactly N connected regions and at least one winning
placement. ``FALLBACK_PATTERNS`` back the generator when random growth keeps
failing; ``VERIFIED_LAYOUTS`` are the bases of the daily catalog.
"""

FALLBACK_PATTERNS = {
    4: [
        [0, 0, 1, 1],
        [0, 0, 1, 1],
        [2, 2, 3, 1],
        [2, 3, 3, 3],
    ],
    5: [
        [0, 0, 1, 1, 2],
        [0, 0, 1, 1, 2],
        [3, 3, 1, 1, 2],
        [3, 3, 4, 4, 4],
        [3, 3, 4, 4, 4],
    ],
    6: [
        [0, 0, 1, 1, 2, 2],
        [0, 0, 1, 1, 2, 2],
        [3, 3, 1, 1, 2, 2],
        [3, 3, 4, 4, 5, 5],
        [3, 3, 4, 4, 5, 5],
        [3, 3, 4, 4, 5, 5],
    ],
}

STARTER_LAYOUTS = [
    ("q6a", "Starter 6x6 A", FALLBACK_PATTERNS[6]),
    ("q6b", "Starter 6x6 B", [
        [0, 0, 0, 1, 1, 1],
        [0, 0, 2, 2, 1, 1],
        [3, 3, 2, 2, 4, 4],
        [3, 3, 2, 2, 4, 4],
        [3, 3, 5, 5, 4, 4],
        [3, 3, 5, 5, 5, 5],
    ]),
    ("q4a", "Mini 4x4", FALLBACK_PATTERNS[4]),
]

VERIFIED_LAYOUTS = [
    # 5x5
    [
        [0, 0, 1, 1, 1],
        [0, 0, 1, 1, 2],
        [3, 3, 3, 2, 2],
        [3, 4, 4, 4, 2],
        [3, 3, 4, 4, 4],
    ],
    [
        [0, 0, 1, 1, 1],
        [0, 2, 2, 1, 3],
        [0, 2, 4, 4, 3],
        [2, 2, 2, 4, 3],
        [2, 4, 4, 4, 3],
    ],
    [
        [0, 0, 0, 1, 1],
        [0, 2, 3, 3, 1],
        [2, 2, 2, 3, 1],
        [2, 4, 4, 3, 3],
        [4, 4, 4, 4, 3],
    ],
    [
        [0, 0, 1, 1, 2],
        [0, 3, 3, 1, 2],
        [3, 3, 1, 1, 2],
        [3, 4, 4, 2, 2],
        [4, 4, 4, 4, 2],
    ],
    # 6x6
    [
        [0, 0, 0, 1, 1, 1],
        [0, 2, 2, 1, 3, 3],
        [0, 2, 4, 4, 4, 3],
        [2, 2, 2, 4, 5, 5],
        [2, 4, 4, 4, 4, 5],
        [4, 4, 5, 5, 5, 5],
    ],
    [
        [0, 0, 0, 0, 1, 1],
        [2, 2, 0, 1, 1, 1],
        [2, 2, 2, 3, 3, 1],
        [4, 2, 3, 3, 3, 3],
        [4, 4, 5, 5, 3, 3],
        [4, 5, 5, 5, 5, 3],
    ],
    # 7x7
    [
        [0, 0, 0, 1, 1, 1, 1],
        [0, 0, 1, 1, 2, 2, 2],
        [3, 0, 0, 1, 1, 2, 2],
        [3, 3, 4, 4, 1, 2, 2],
        [3, 4, 4, 5, 5, 5, 2],
        [3, 3, 4, 5, 5, 6, 6],
        [3, 3, 4, 4, 5, 6, 6],
    ],
    [
        [1, 1, 0, 0, 0, 2, 2],
        [1, 1, 0, 0, 2, 2, 2],
        [1, 3, 3, 0, 2, 4, 4],
        [3, 3, 3, 5, 2, 4, 4],
        [3, 5, 5, 5, 4, 4, 6],
        [5, 5, 5, 6, 6, 6, 6],
        [5, 5, 6, 6, 6, 6, 6],
    ],
    # 8x8
    [
        [0, 0, 0, 0, 1, 1, 1, 1],
        [2, 0, 0, 1, 1, 1, 4, 4],
        [2, 2, 0, 3, 3, 1, 4, 4],
        [2, 2, 3, 3, 3, 3, 4, 4],
        [5, 2, 6, 6, 3, 4, 4, 4],
        [5, 5, 6, 6, 6, 7, 7, 4],
        [5, 5, 5, 6, 6, 7, 7, 7],
        [5, 5, 6, 6, 7, 7, 7, 7],
    ],
    [
        [0, 0, 0, 1, 1, 1, 2, 2],
        [0, 0, 1, 1, 2, 2, 2, 2],
        [0, 1, 1, 3, 3, 2, 3, 3],
        [4, 4, 1, 3, 3, 3, 3, 3],
        [4, 4, 5, 5, 6, 6, 3, 3],
        [4, 5, 5, 5, 6, 6, 6, 7],
        [4, 4, 5, 6, 6, 7, 7, 7],
        [4, 4, 5, 6, 7, 7, 7, 7],
    ],
    # 9x9
    [
        [0, 0, 0, 0, 1, 1, 1, 2, 2],
        [0, 0, 0, 1, 1, 1, 2, 2, 2],
        [3, 3, 0, 1, 4, 4, 2, 2, 2],
        [3, 3, 3, 4, 4, 4, 5, 5, 2],
        [6, 3, 4, 4, 4, 5, 5, 5, 5],
        [6, 6, 7, 7, 4, 5, 5, 5, 5],
        [6, 6, 6, 7, 7, 7, 8, 8, 5],
        [6, 6, 7, 7, 7, 8, 8, 8, 8],
        [6, 6, 6, 7, 8, 8, 8, 8, 8],
    ],
    [
        [0, 0, 0, 1, 1, 2, 2, 2, 2],
        [0, 0, 1, 1, 1, 2, 3, 3, 3],
        [0, 0, 1, 2, 2, 2, 3, 3, 3],
        [4, 0, 1, 1, 2, 3, 3, 3, 3],
        [4, 4, 5, 5, 6, 6, 6, 3, 7],
        [4, 5, 5, 5, 6, 6, 7, 7, 7],
        [4, 4, 5, 6, 6, 7, 7, 8, 8],
        [4, 4, 5, 6, 7, 7, 7, 8, 8],
        [4, 4, 5, 6, 6, 7, 8, 8, 8],
    ],
]


def diagonal_stripe(n: int):
    """Last-resort layout: label = (r + c) mod n.

    Always has exactly n labels, but its regions are diagonal chains, not
    4-connected, and it has no solution for even n.
    """
    return [[(r + c) % n for c in range(n)] for r in range(n)]
