"""Temperature field with one layer of ghost cells around the interior."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

import numpy as np

#: Fixed grid spacing in both directions.
DX = 0.01
DY = 0.01


@dataclass
class Field:
    """A 2D temperature field; ``data`` has shape ``(nx + 2, ny + 2)``."""

    nx: int
    ny: int
    data: np.ndarray
    nx_full: Optional[int] = None
    ny_full: Optional[int] = None
    dx: float = DX
    dy: float = DY

    def __post_init__(self) -> None:
        self.data = np.asarray(self.data, dtype=float)
        if self.data.shape != (self.nx + 2, self.ny + 2):
            raise ValueError(
                f"field data must have shape {(self.nx + 2, self.ny + 2)}, "
                f"got {self.data.shape}"
            )
        if self.nx_full is None:
            self.nx_full = self.nx
        if self.ny_full is None:
            self.ny_full = self.ny

    @classmethod
    def zeros(cls, nx: int, ny: int) -> "Field":
        """Return an all-zero field of interior size ``nx`` by ``ny``."""
        return cls(nx, ny, np.zeros((nx + 2, ny + 2)))

    def copy(self) -> "Field":
        """Return an independent copy of this field."""
        return Field(
            self.nx,
            self.ny,
            self.data.copy(),
            nx_full=self.nx_full,
            ny_full=self.ny_full,
            dx=self.dx,
            dy=self.dy,
        )

    def inner(self) -> np.ndarray:
        """Return a view of the interior values, without ghost layers."""
        return self.data[1:-1, 1:-1]

    def average(self) -> float:
        """Return the mean interior temperature over the global grid size."""
        return float(self.inner().sum()) / (self.nx_full * self.ny_full)


def generate_field(nx: int, ny: int) -> Field:
    """Build the default initial field: a cold disc in a warm plate.

    The disc has radius ``nx / 6`` and sits in the centre of the grid. The
    ghost layers hold fixed boundary temperatures.
    """
    if nx <= 0 or ny <= 0:
        raise ValueError("field dimensions must be positive")
    field = Field.zeros(nx, ny)
    radius = field.nx_full / 6.0
    i, j = np.ogrid[0:nx + 2, 0:ny + 2]
    dist_x = i - field.nx_full // 2 + 1
    dist_y = j - ny // 2 + 1
    inside = dist_x * dist_x + dist_y * dist_y < radius * radius
    data = np.where(inside, 5.0, 65.0)

    data[:, 0] = 20.0
    data[:, ny + 1] = 70.0
    data[0, :] = 85.0
    data[nx + 1, :] = 5.0
    field.data = data
    return field