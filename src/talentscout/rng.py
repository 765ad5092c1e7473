"""Seeded Mulberry32 random stream shared by every simulation subsystem."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Generic, Sequence, TypeVar

T = TypeVar("T")

_MASK32 = 0xFFFFFFFF
_TWO_POW_32 = 4294967296


class RNGError(ValueError):
    """Base class for misuse of the random stream."""


class InvalidRangeError(RNGError):
    """Raised when a draw is requested over an impossible range."""


class EmptyInputError(RNGError):
    """Raised when selecting from an empty (or zero-weight) collection."""


@dataclass(slots=True, frozen=True)
class WeightedItem(Generic[T]):
    item: T
    weight: float


def _imul(a: int, b: int) -> int:
    return (a * b) & _MASK32


def hash_seed(seed: str) -> int:
    """Fold a string seed into a 32-bit starting state.

    Characters are folded as UTF-16 code units, so a character outside the
    Basic Multilingual Plane contributes its two surrogates.
    """
    data = seed.encode("utf-16-le", "surrogatepass")
    h = 0x12345678
    for i in range(0, len(data), 2):
        unit = data[i] | (data[i + 1] << 8)
        h = _imul(h ^ unit, 0x9E3779B9)
        h ^= h >> 16
    return h & _MASK32


class RNG:
    """Deterministic random stream.

    Every public method advances the internal state; the order of calls is the
    caller's and is never changed here, so a replay with the same seed and the
    same call sequence yields identical values.
    """

    def __init__(self, seed: str | int) -> None:
        self._seed = str(seed)
        self._state = hash_seed(self._seed)
        self._draws = 0
        # The first outputs correlate with small seeds.
        self._next()
        self._next()

    @classmethod
    def from_state(cls, seed: str | int, state: int, draws: int = 0) -> RNG:
        """Rebuild a stream at a previously captured position."""
        rng = cls.__new__(cls)
        rng._seed = str(seed)
        rng._state = state & _MASK32
        rng._draws = draws
        return rng

    @property
    def seed(self) -> str:
        return self._seed

    @property
    def state(self) -> int:
        return self._state

    @property
    def draws(self) -> int:
        """Number of uniform draws consumed since the seed was applied."""
        return self._draws

    def _next(self) -> float:
        self._state = (self._state + 0x6D2B79F5) & _MASK32
        z = self._state
        z = _imul(z ^ (z >> 15), z | 1)
        z ^= (z + _imul(z ^ (z >> 7), z | 61)) & _MASK32
        z = (z ^ (z >> 14)) & _MASK32
        return z / _TWO_POW_32

    def next_float(self) -> float:
        """Return a float in ``[0, 1)``."""
        self._draws += 1
        return self._next()

    def next_int(self, low: int, high: int) -> int:
        """Return an integer in ``[low, high]`` (both inclusive)."""
        if high < low:
            raise InvalidRangeError(f"next_int: low ({low}) must be <= high ({high})")
        return math.floor(self.next_float() * (high - low + 1)) + low

    def uniform(self, low: float, high: float) -> float:
        """Return a float in ``[low, high)``."""
        if high < low:
            raise InvalidRangeError(f"uniform: low ({low}) must be <= high ({high})")
        return self.next_float() * (high - low) + low

    def chance(self, probability: float) -> bool:
        """Return True with the given probability, clamped to ``[0, 1]``."""
        p = max(0.0, min(1.0, probability))
        return self.next_float() < p

    def pick(self, items: Sequence[T]) -> T:
        if not items:
            raise EmptyInputError("pick: items must not be empty")
        return items[self.next_int(0, len(items) - 1)]

    def pick_weighted(self, items: Sequence[WeightedItem[T]]) -> T:
        """Select an item with probability proportional to its weight.

        Consumes exactly one draw, scaled to the total weight, then walks the
        cumulative sum.
        """
        if not items:
            raise EmptyInputError("pick_weighted: items must not be empty")

        total = 0.0
        for entry in items:
            if entry.weight < 0:
                raise InvalidRangeError(f"pick_weighted: weight must be non-negative, got {entry.weight}")
            total += entry.weight
        if total <= 0:
            raise EmptyInputError("pick_weighted: total weight must be positive")

        threshold = self.next_float() * total
        for entry in items:
            if entry.weight == 0:
                continue
            threshold -= entry.weight
            if threshold < 0:
                return entry.item

        # Float rounding: fall back to the last item that can be selected.
        return next(entry.item for entry in reversed(items) if entry.weight > 0)

    def shuffle(self, items: Sequence[T]) -> list[T]:
        """Return a Fisher-Yates permutation of ``items`` without mutating it."""
        result = list(items)
        for i in range(len(result) - 1, 0, -1):
            j = self.next_int(0, i)
            result[i], result[j] = result[j], result[i]
        return result

    def gaussian(self, mean: float, stddev: float) -> float:
        """Box-Muller normal sample; consumes two draws."""
        u1 = max(self.next_float(), 1e-10)
        u2 = self.next_float()
        z = math.sqrt(-2.0 * math.log(u1)) * math.cos(2.0 * math.pi * u2)
        return mean + stddev * z

    def __repr__(self) -> str:
        return f"RNG(seed={self._seed!r}, draws={self._draws})"
