"""A 32-bit Mersenne Twister generator producing the standard MT19937 sequence."""

from __future__ import annotations

_MASK = 0xFFFFFFFF
_N = 624
_M = 397
_MATRIX_A = 0x9908B0DF
_UPPER = 0x80000000
_LOWER = 0x7FFFFFFF


class MersenneTwister:
    """MT19937 engine: calling it yields the next 32-bit unsigned integer."""

    MAX = _MASK
    DEFAULT_SEED = 5489

    def __init__(self, seed: int = DEFAULT_SEED):
        self._state: list[int] = []
        self._index = _N
        self.seed(seed)

    def seed(self, seed: int) -> None:
        """Reset the state from a seed, taken modulo 2**32."""
        value = seed & _MASK
        state = [value]
        for i in range(1, _N):
            value = (1812433253 * (value ^ (value >> 30)) + i) & _MASK
            state.append(value)
        self._state = state
        self._index = _N

    def _twist(self) -> None:
        state = self._state
        for i in range(_N):
            y = (state[i] & _UPPER) | (state[(i + 1) % _N] & _LOWER)
            value = state[(i + _M) % _N] ^ (y >> 1)
            if y & 1:
                value ^= _MATRIX_A
            state[i] = value
        self._index = 0

    def __call__(self) -> int:
        if self._index >= _N:
            self._twist()
        y = self._state[self._index]
        self._index += 1
        y ^= y >> 11
        y ^= (y << 7) & 0x9D2C5680
        y ^= (y << 15) & 0xEFC60000
        y ^= y >> 18
        return y & _MASK

    def unit(self) -> float:
        """Next output scaled to the closed interval [0, 1]."""
        return self() / self.MAX