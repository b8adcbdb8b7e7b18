"""Seeded random stream and weighted selection.

The stream is mulberry32 with every intermediate folded to unsigned 32 bits,
so a seed yields the same floats as the browser build of the game.
"""
from __future__ import annotations

from typing import Callable, Sequence, TypeVar

MASK32 = 0xFFFFFFFF
_INCREMENT = 0x6D2B79F5
_TWO_POW_32 = 4294967296

T = TypeVar("T")


def _imul(a: int, b: int) -> int:
    return (a * b) & MASK32


class SequenceGenerator:
    """Deterministic ``[0, 1)`` float stream built from a 32-bit seed.

    Instances share no state; call the instance (or ``next()``) for the next value.
    """

    __slots__ = ("seed", "_state")

    def __init__(self, seed: int):
        self.seed = int(seed) & MASK32
        self._state = self.seed

    def next(self) -> float:
        self._state = (self._state + _INCREMENT) & MASK32
        t = self._state
        r = _imul(t ^ (t >> 15), t | 1)
        r ^= (r + _imul(r ^ (r >> 7), r | 61)) & MASK32
        return ((r ^ (r >> 14)) & MASK32) / _TWO_POW_32

    __call__ = next

    def __repr__(self) -> str:
        return f"SequenceGenerator(seed={self.seed})"


def pick_weighted(options: Sequence[T], sample: Callable[[], float]) -> T:
    """Pick one option with probability proportional to its ``weight`` attribute.

    Options are walked in order; the last one is returned if float rounding
    leaves the ticket positive after the final subtraction.
    """
    if not options:
        raise ValueError("pick_weighted requires at least one option")
    # Plain accumulation: sum() compensates rounding on newer interpreters.
    total = 0.0
    for opt in options:
        total += opt.weight
    ticket = sample() * total
    for opt in options:
        ticket -= opt.weight
        if ticket <= 0:
            return opt
    return options[-1]


__all__ = ["MASK32", "SequenceGenerator", "pick_weighted"]
