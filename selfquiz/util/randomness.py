from __future__ import annotations

"""Randomness helpers for seeding and session ordering."""

import os
import random
from typing import List, Optional, Sequence, TypeVar

T = TypeVar("T")


def seed_if_needed() -> None:
    """Seed the global RNG if SEED env var is set."""
    seed = os.environ.get("SEED")
    if seed is not None:
        try:
            s = int(seed)
        except ValueError:
            return
        random.seed(s)


def make_rng(seed: Optional[int] = None) -> random.Random:
    """Return a private RNG; unseeded instances draw from the global one."""
    if seed is None:
        return random.Random(random.getrandbits(64))
    return random.Random(int(seed))


def shuffled(items: Sequence[T], rng: Optional[random.Random] = None) -> List[T]:
    """Uniformly random permutation of `items` as a new list.

    `random.Random.shuffle` is a Fisher-Yates shuffle, so every ordering is
    equally likely. The input is never mutated.
    """
    out = list(items)
    (rng or random).shuffle(out)
    return out
