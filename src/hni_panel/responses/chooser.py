from __future__ import annotations

import random
from typing import Protocol


class IndexChooser(Protocol):
    def choose(self, n: int) -> int: ...


class RandomIndexChooser:
    """Uniform choice backed by :class:`random.Random`; pass *seed* for repeatable runs."""

    def __init__(self, seed: int | None = None, rng: random.Random | None = None) -> None:
        self.rng = rng or random.Random(seed)

    def choose(self, n: int) -> int:
        if n <= 0:
            raise ValueError("cannot choose from an empty sequence")
        return self.rng.randrange(n)
