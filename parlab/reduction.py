"""Loop bodies run serially or in blocks, and block-wise sum reductions."""

from __future__ import annotations

import argparse
import math
import sys
from typing import Callable, Optional, Sequence

#: Block size of the reduction; a multiple of the wavefront width.
REDUCTION_BLOCKSIZE = 64
#: Small block size used when every thread prints.
HELLO_BLOCKSIZE = 4
#: Default upper bound of the triangular number.
TRIANGULAR_N = 1000


def _check(loop_size: int, blocksize: Optional[int] = None) -> None:
    if loop_size < 0:
        raise ValueError("loop size must not be negative")
    if blocksize is not None and blocksize <= 0:
        raise ValueError("blocksize must be positive")


def run_serial(body: Callable[[int], object], loop_size: int) -> None:
    """Call ``body(i)`` for every ``i`` in ``range(loop_size)``."""
    _check(loop_size)
    for i in range(loop_size):
        body(i)


def run_blocked(
    body: Callable[[int], object], loop_size: int, blocksize: int = HELLO_BLOCKSIZE
) -> None:
    """Call ``body(i)`` once per in-range thread of a grid of blocks."""
    _check(loop_size, blocksize)
    blocks = (loop_size - 1 + blocksize) // blocksize
    for block in range(blocks):
        for thread in range(blocksize):
            i = block * blocksize + thread
            if i < loop_size:
                body(i)


def hello_from_thread(i: int, on_device: bool) -> str:
    """Return the greeting a thread gives from the device or from the host."""
    where = "GPU" if on_device else "CPU"
    return f"Hello from {where}! I'm thread number {i}"


def parallel_reduce_serial(loop_size: int, body: Callable[[int], int]) -> int:
    """Sum ``body(i)`` over ``range(loop_size)`` one index at a time."""
    _check(loop_size)
    total = 0
    for i in range(loop_size):
        total += body(i)
    return total


def parallel_reduce_blocked(
    loop_size: int, body: Callable[[int], int], blocksize: int = REDUCTION_BLOCKSIZE
) -> int:
    """Sum ``body(i)`` by first reducing each block, then adding block totals.

    Threads past ``loop_size`` contribute zero to their block.
    """
    _check(loop_size, blocksize)
    blocks = (loop_size - 1 + blocksize) // blocksize
    total = 0
    for block in range(blocks):
        start = block * blocksize
        aggregate = sum(
            body(idx) if idx < loop_size else 0
            for idx in range(start, start + blocksize)
        )
        total += aggregate
    return total


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Run loop bodies serially and in blocks, and compare reductions."
    )
    parser.add_argument(
        "--tn", type=int, default=TRIANGULAR_N,
        help="compute the sum of numbers from 0 up to this bound",
    )
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Print greetings from both execution modes and check a reduction."""
    args = _parser().parse_args(argv)
    if args.tn < 0:
        print("the bound must not be negative", file=sys.stderr)
        return 1

    run_serial(lambda i: print(hello_from_thread(i, False)), HELLO_BLOCKSIZE)
    run_blocked(
        lambda i: print(hello_from_thread(i, True)), HELLO_BLOCKSIZE, HELLO_BLOCKSIZE
    )
    pi = math.pi
    run_blocked(
        lambda i: print(f"i * pi = {i * pi:f} "), HELLO_BLOCKSIZE, HELLO_BLOCKSIZE
    )

    sum_blocked = parallel_reduce_blocked(args.tn, lambda i: i)
    sum_serial = parallel_reduce_serial(args.tn, lambda i: i)
    if sum_blocked == sum_serial:
        print(
            f"The results calculated by GPU = {sum_blocked} and "
            f"CPU = {sum_serial} match!"
        )
        return 0
    print(
        f"The results calculated by GPU = {sum_blocked} and "
        f"CPU = {sum_serial} do not match!"
    )
    return 1


if __name__ == "__main__":
    sys.exit(main())