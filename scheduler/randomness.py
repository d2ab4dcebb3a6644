"""
Injectable source of uniform random choices.

Production code uses `random.Random`; tests can pass a seeded instance or a
`FixedSequenceRandom` to make a scheduling run fully reproducible.
"""

import random
from typing import Iterable, List, Optional, Protocol, Sequence, TypeVar

T = TypeVar("T")


class RandomSource(Protocol):
    def randrange(self, stop: int) -> int:
        """Uniform integer in [0, stop)."""
        ...


class FixedSequenceRandom:
    """
    Replays a fixed list of integers, cycling when exhausted.
    Each value is reduced modulo the requested range.
    """

    def __init__(self, values: Iterable[int]):
        self.values: List[int] = list(values)
        if not self.values:
            raise ValueError("FixedSequenceRandom needs at least one value")
        self.calls = 0

    def randrange(self, stop: int) -> int:
        if stop <= 0:
            raise ValueError("empty range for randrange()")
        value = self.values[self.calls % len(self.values)]
        self.calls += 1
        return value % stop


def default_source(rng: Optional[RandomSource] = None) -> RandomSource:
    return rng if rng is not None else random.Random()


def pick(rng: RandomSource, items: Sequence[T]) -> T:
    """Uniformly pick one element of a non-empty sequence."""
    return items[rng.randrange(len(items))]
