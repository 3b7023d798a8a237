"""Small deterministic pseudo-random generator used for outfit sampling."""

from __future__ import annotations

_MASK = 0xFFFFFFFF
_INCREMENT = 0x6D2B79F5


def _imul(a: int, b: int) -> int:
    return (a * b) & _MASK


class SeededRandom:
    """Mulberry-style 32-bit mixing generator.

    Not suitable for anything security related. Each instance owns its state,
    so two generators built from the same seed always yield the same sequence
    and never interfere with each other.
    """

    __slots__ = ("_state",)

    def __init__(self, seed: int) -> None:
        self._state = (seed + _INCREMENT) & _MASK

    @property
    def state(self) -> int:
        """Current 32-bit internal state."""

        return self._state

    def next(self) -> float:
        """Advance the state and return a float in ``[0, 1)``."""

        t = self._state
        t = _imul(t ^ (t >> 15), t | 1)
        t ^= (t + _imul(t ^ (t >> 7), t | 61)) & _MASK
        self._state = t
        return ((t ^ (t >> 14)) & _MASK) / 4294967296

    def index(self, length: int) -> int:
        """Return a uniform index into a sequence of ``length`` elements."""

        return int(self.next() * length)
