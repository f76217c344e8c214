"""Data-parallel kernels evaluated on the host over whole index ranges."""

from __future__ import annotations

from typing import Sequence, Union

import numpy as np

ArrayLike = Union[Sequence[float], np.ndarray]
Scalar = Union[float, np.ndarray]

#: Threads per block in the one-dimensional launches.
BLOCKSIZE = 256
#: Width of a wavefront; the non-divergent fill switches branch on this boundary.
WAVEFRONT = 64


def grid_size(n: int, blocksize: int = BLOCKSIZE) -> int:
    """Return the number of blocks of ``blocksize`` needed to cover ``n`` items."""
    if blocksize <= 0:
        raise ValueError("blocksize must be positive")
    if n < 0:
        raise ValueError("problem size must not be negative")
    return (n - 1 + blocksize) // blocksize


def saxpy(a: float, x: ArrayLike, y: ArrayLike) -> np.ndarray:
    """Return ``y + a * x`` in single precision; the inputs are left unchanged."""
    xs = np.asarray(x, dtype=np.float32)
    ys = np.asarray(y, dtype=np.float32)
    if xs.shape != ys.shape:
        raise ValueError(f"x and y differ in shape: {xs.shape} and {ys.shape}")
    return ys + np.float32(a) * xs


def copy2d(n: int, m: int, src: ArrayLike) -> np.ndarray:
    """Copy the ``n * m`` elements of a row-major ``m`` by ``n`` grid.

    Elements of ``src`` beyond the grid are not copied and read as zero in
    the result, which has the same length as ``src``.
    """
    if n < 0 or m < 0:
        raise ValueError("grid dimensions must not be negative")
    values = np.asarray(src, dtype=float).ravel()
    if values.size < n * m:
        raise ValueError(
            f"source holds {values.size} values, a {m}x{n} grid needs {n * m}"
        )
    target = np.zeros_like(values)
    target[: n * m] = values[: n * m]
    return target


def fill(n: int, a: float) -> np.ndarray:
    """Return an array of ``n`` values where element ``i`` is ``i * a``."""
    if n < 0:
        raise ValueError("problem size must not be negative")
    return np.arange(n, dtype=float) * a


def f_1(x: Scalar, a: float, nz: int) -> Scalar:
    """Apply ``R = a * R + x`` ``nz`` times, starting from ``R = x``."""
    result = x
    for _ in range(nz):
        result = a * result + x
    return result


def f_2(x: Scalar, a: float, nz: int) -> Scalar:
    """Apply ``R = x * R + a`` ``nz`` times, starting from ``R = 1``."""
    result = np.ones_like(x, dtype=float) if isinstance(x, np.ndarray) else 1.0
    for _ in range(nz):
        result = x * result + a
    return result


def _indices(n: int) -> np.ndarray:
    if n < 0:
        raise ValueError("problem size must not be negative")
    return np.arange(n, dtype=float)


def fill_divergent(n: int, a: float, nz: int) -> np.ndarray:
    """Fill even indices with ``f_1`` and odd indices with ``f_2``."""
    tid = _indices(n)
    even = np.arange(n) % 2 == 0
    return np.where(even, f_1(tid, a, nz), f_2(tid, a, nz))


def fill_nodivergent(n: int, a: float, nz: int) -> np.ndarray:
    """Fill alternate runs of 64 indices with ``f_1`` and ``f_2``."""
    tid = _indices(n)
    first = (np.arange(n) // WAVEFRONT) % 2 == 0
    return np.where(first, f_1(tid, a, nz), f_2(tid, a, nz))


def fill_noif(n: int, a: float, nz: int) -> np.ndarray:
    """Fill every index ``i`` with ``f_2(i / n)``."""
    tid = _indices(n)
    if n == 0:
        return tid
    return f_2(tid / n, a, nz)


def count_inside(x: ArrayLike, y: ArrayLike) -> int:
    """Count the points strictly inside the unit circle, in single precision."""
    xs = np.asarray(x, dtype=np.float32)
    ys = np.asarray(y, dtype=np.float32)
    if xs.shape != ys.shape:
        raise ValueError(f"x and y differ in shape: {xs.shape} and {ys.shape}")
    return int(np.count_nonzero(xs * xs + ys * ys < np.float32(1.0)))