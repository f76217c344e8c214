"""Command-line heat equation solver on a 2D grid."""

from __future__ import annotations

import sys
import time
from os import PathLike
from typing import Optional, Sequence, Union

from .core import evolve, stable_time_step
from .field import Field, generate_field
from .io import read_field, write_field

#: Default number of time steps.
NSTEPS = 500
#: Default grid dimensions.
DEFAULT_ROWS = 2000
DEFAULT_COLS = 2000
#: Default diffusion constant.
DIFFUSION = 0.5
#: Default interval between image snapshots.
IMAGE_INTERVAL = 1500
#: Average temperature after a run with the default arguments.
REFERENCE_AVERAGE = "59.281239"


def _parse_int(text: str, what: str) -> int:
    try:
        return int(text)
    except ValueError as exc:
        raise ValueError(f"invalid {what}: {text!r}") from exc


def initialize(args: Sequence[str]) -> tuple[Field, Field, int]:
    """Set up the current and previous fields and the number of steps.

    ``args`` may be empty (default grid), ``[file]``, ``[file, nsteps]`` or
    ``[rows, cols, nsteps]``.
    """
    nsteps = NSTEPS
    args = list(args)
    if len(args) == 0:
        current = generate_field(DEFAULT_ROWS, DEFAULT_COLS)
    elif len(args) == 1:
        current = read_field(args[0])
    elif len(args) == 2:
        current = read_field(args[0])
        nsteps = _parse_int(args[1], "number of steps")
    elif len(args) == 3:
        rows = _parse_int(args[0], "number of rows")
        cols = _parse_int(args[1], "number of columns")
        nsteps = _parse_int(args[2], "number of steps")
        current = generate_field(rows, cols)
    else:
        raise ValueError("Unsupported number of command line arguments")
    return current, current.copy(), nsteps


def simulate(
    current: Field,
    previous: Field,
    nsteps: int,
    a: float = DIFFUSION,
    image_interval: int = IMAGE_INTERVAL,
    directory: Union[str, PathLike] = ".",
) -> Field:
    """Run ``nsteps`` time steps and return the field holding the final state.

    A snapshot image is written every ``image_interval`` steps. Both fields
    are used as work buffers.
    """
    if image_interval <= 0:
        raise ValueError("image interval must be positive")
    dt = stable_time_step(current.dx, current.dy, a)
    for iteration in range(1, nsteps + 1):
        evolve(current, previous, a, dt)
        if iteration % image_interval == 0:
            write_field(current, iteration, directory)
        current, previous = previous, current
    return previous


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the solver from the command line; returns the exit status."""
    args = list(sys.argv[1:] if argv is None else argv)
    try:
        current, previous, nsteps = initialize(args)
    except (ValueError, OSError) as exc:
        print(exc, file=sys.stderr)
        return 1

    write_field(current, 0)
    print(f"Average temperature at start: {current.average():f}")

    start = time.perf_counter()
    final = simulate(current, previous, nsteps)
    elapsed = time.perf_counter() - start

    print(f"Iteration took {elapsed:.3f} seconds.")
    print(f"Average temperature: {final.average():f}")
    if not args:
        print(f"Reference value with default arguments: {REFERENCE_AVERAGE}")

    write_field(final, nsteps)
    return 0


if __name__ == "__main__":
    sys.exit(main())