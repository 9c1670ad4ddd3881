"""
SFC32 deterministic pseudo-random generator.

Small fast counter generator with four 32-bit words of state. It is not
cryptographic; it exists so that a lab session seeded with one integer
replays exactly the same draws every time.

Each step:
    t = a + b
    a = b ^ (b >> 9)
    b = c + (c << 3)
    c = rotl(c, 21)
    d = d + 1
    t = t + d
    c = c + t
    return t / 2**32

All arithmetic is modulo 2**32.
"""

from __future__ import annotations

from typing import Any

import numpy as np
from numpy.typing import NDArray

from mathlab.core.validation import check_min_count

_MASK32 = 0xFFFFFFFF
_TWO_32 = 4294967296.0


class SFC32:
    """
    Seeded SFC32 stream producing floats in [0, 1).

    The generator is an exclusively-owned sequential resource: every call
    mutates the state in place. It is not thread safe.

    Args:
        a, b, c, d: Seed words. Any integer is accepted and reduced
            modulo 2**32.

    Example:
        >>> rng = SFC32.from_seed(12345)
        >>> u = rng.random()
    """

    __slots__ = ('_a', '_b', '_c', '_d')

    def __init__(self, a: int, b: int, c: int, d: int):
        self._a = int(a) & _MASK32
        self._b = int(b) & _MASK32
        self._c = int(c) & _MASK32
        self._d = int(d) & _MASK32

    @classmethod
    def from_seed(cls, seed: int) -> SFC32:
        """Session convention: the user seed in the first word, ones elsewhere."""
        return cls(seed, 1, 1, 1)

    @property
    def state(self) -> tuple[int, int, int, int]:
        """Current four state words."""
        return (self._a, self._b, self._c, self._d)

    def copy(self) -> SFC32:
        """Independent generator positioned at the same point of the stream."""
        return SFC32(*self.state)

    def next_u32(self) -> int:
        """Advance one step and return the raw 32-bit output."""
        a, b, c, d = self._a, self._b, self._c, self._d
        t = (a + b) & _MASK32
        a = b ^ (b >> 9)
        b = (c + (c << 3)) & _MASK32
        c = ((c << 21) | (c >> 11)) & _MASK32
        d = (d + 1) & _MASK32
        t = (t + d) & _MASK32
        c = (c + t) & _MASK32
        self._a, self._b, self._c, self._d = a, b, c, d
        return t

    def random(self) -> float:
        """Next float in [0, 1)."""
        return self.next_u32() / _TWO_32

    def random_array(self, n: int) -> NDArray[np.floating[Any]]:
        """Fill a 1D array with the next ``n`` draws, in stream order."""
        check_min_count(n, 0, 'n')
        out = np.empty(n, dtype=np.float64)
        for i in range(n):
            out[i] = self.random()
        return out

    def __repr__(self) -> str:
        return "SFC32(a={}, b={}, c={}, d={})".format(*self.state)
