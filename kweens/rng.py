from __future__ import annotations

from typing import MutableSequence, Sequence, TypeVar

T = TypeVar("T")


class SeededRandom:
    """Linear congruential stream so the same seed gives the same puzzle
    on every device.

    The defaults are the small 9301/49297/233280 generator used for region
    generation; ``SeededRandom.wide(seed)`` gives the 32-bit generator used
    for catalog shuffles and relabelling.
    """

    def __init__(self, seed: int, a: int = 9301, c: int = 49297, m: int = 233280):
        self.a = a
        self.c = c
        self.m = m
        self.seed = int(seed) % m

    @classmethod
    def wide(cls, seed: int) -> "SeededRandom":
        return cls(seed, a=1664525, c=1013904223, m=2 ** 32)

    def next(self) -> float:
        self.seed = (self.seed * self.a + self.c) % self.m
        return self.seed / self.m

    # Same call shape as random.random so either can be passed around.
    def __call__(self) -> float:
        return self.next()

    def randrange(self, n: int) -> int:
        return int(self.next() * n)

    def choice(self, seq: Sequence[T]) -> T:
        return seq[self.randrange(len(seq))]

    def shuffle(self, items: MutableSequence[T]) -> None:
        for i in range(len(items) - 1, 0, -1):
            j = int(self.next() * (i + 1))
            items[i], items[j] = items[j], items[i]

