"""Reading initial temperature fields and writing field snapshots as images."""

from __future__ import annotations

from os import PathLike
from pathlib import Path
from typing import Union

import numpy as np

from .field import Field
from .pngwriter import save_png

PathType = Union[str, PathLike]


def write_field(field: Field, iteration: int, directory: PathType = ".") -> Path:
    """Write the interior of ``field`` to ``heat_NNNN.png`` in ``directory``.

    Returns the path of the written image.
    """
    path = Path(directory) / f"heat_{iteration:04d}.png"
    save_png(field.inner(), field.nx, field.ny, path, "c")
    return path


def read_field(path: PathType) -> Field:
    """Read an initial field from a text file.

    The file starts with a header ``# nx ny`` followed by ``nx * ny``
    whitespace-separated values in row-major order. The ghost layers of the
    returned field repeat the outermost interior values.
    """
    with open(path, encoding="utf-8") as fh:
        text = fh.read()

    if not text.startswith("#"):
        raise ValueError("Error while reading the input file: missing '# nx ny' header")
    tokens = text[1:].split()
    try:
        nx, ny = int(tokens[0]), int(tokens[1])
    except (IndexError, ValueError) as exc:
        raise ValueError("Error while reading the input file: bad header") from exc
    if nx <= 0 or ny <= 0:
        raise ValueError("Error while reading the input file: dimensions must be positive")

    count = nx * ny
    values = tokens[2:2 + count]
    if len(values) < count:
        raise ValueError(
            f"Error while reading the input file: expected {count} values, "
            f"found {len(values)}"
        )
    try:
        grid = np.array([float(v) for v in values]).reshape(nx, ny)
    except ValueError as exc:
        raise ValueError("Error while reading the input file: bad value") from exc

    field = Field.zeros(nx, ny)
    data = field.data
    data[1:-1, 1:-1] = grid
    data[1:-1, 0] = grid[:, 0]
    data[1:-1, -1] = grid[:, -1]
    data[0, :] = data[1, :]
    data[-1, :] = data[-2, :]
    return field