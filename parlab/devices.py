"""Single-process host execution backend: loops, random numbers and ranks."""

from __future__ import annotations

import math
from collections import deque
from dataclasses import dataclass, field
from typing import Callable

import numpy as np

RAND_MAX = 2147483647
_MASK32 = 0xFFFFFFFF


def _trunc_div(a: int, b: int) -> int:
    q = abs(a) // abs(b)
    return q if (a >= 0) == (b >= 0) else -q


class _CRandom:
    """Additive feedback generator compatible with the C library's rand()."""

    def __init__(self, seed: int = 1) -> None:
        self._window: deque[int] = deque(maxlen=31)
        self.seed(seed)

    def seed(self, seed: int) -> None:
        seed &= _MASK32
        if seed == 0:
            seed = 1
        word = seed - (1 << 32) if seed >= 1 << 31 else seed
        r = [word]
        for _ in range(30):
            hi = _trunc_div(word, 127773)
            lo = word - hi * 127773
            word = 16807 * lo - 2836 * hi
            if word < 0:
                word += 2147483647
            r.append(word)
        r.extend(r[:3])
        self._window = deque((v & _MASK32 for v in r[3:]), maxlen=31)
        for _ in range(310):
            self._next()

    def _next(self) -> int:
        value = (self._window[0] + self._window[-3]) & _MASK32
        self._window.append(value)
        return value

    def rand(self) -> int:
        return self._next() >> 1


def _uniform(rng: _CRandom) -> float:
    return float(np.float32(np.float32(rng.rand()) / np.float32(RAND_MAX)))


@dataclass
class HostDevice:
    """Runs loop bodies serially on the host as a single process."""

    rank: int = 0
    procs: int = 1
    node_rank: int = 0
    _rng: _CRandom = field(default_factory=_CRandom, init=False, repr=False)

    def parallel_for(self, loop_size: int, body: Callable[[int], None]) -> None:
        """Call ``body(i)`` for every ``i`` in ``range(loop_size)``."""
        for i in range(loop_size):
            body(i)

    def random_float(
        self, seed: int, seq: int, idx: int, mean: float, stdev: float
    ) -> float:
        """Return a normally distributed value via the Box-Muller transform.

        The generator is re-seeded with ``seed + seq`` (modulo 2**32) when
        ``idx`` is zero, so a sequence started at ``idx == 0`` is reproducible.
        """
        if idx == 0:
            self._rng.seed((seed & _MASK32) + (seq & _MASK32))
        u1 = _uniform(self._rng)
        u2 = _uniform(self._rng)
        factor = stdev * math.sqrt(-2.0 * math.log(u1)) if u1 > 0.0 else math.inf
        z0 = factor * math.cos(2.0 * math.pi * u2) + mean
        return float(np.float32(z0))

    def finalize(self, rank: int) -> None:
        """Report that the backend has shut down."""
        print(f"Rank {rank}, Host finalized.")