"""Explicit time stepping of the 2D heat equation."""

from __future__ import annotations

from .field import Field


def evolve(curr: Field, prev: Field, a: float, dt: float) -> Field:
    """Advance ``prev`` by one step into ``curr`` using a five-point stencil.

    Only interior points of ``curr`` are written; its ghost layers are kept.
    Returns ``curr``.
    """
    if curr.data.shape != prev.data.shape:
        raise ValueError(
            f"field shapes differ: {curr.data.shape} and {prev.data.shape}"
        )
    p = prev.data
    dx2 = prev.dx * prev.dx
    dy2 = prev.dy * prev.dy
    centre = p[1:-1, 1:-1]
    curr.data[1:-1, 1:-1] = centre + a * dt * (
        (p[2:, 1:-1] - 2.0 * centre + p[:-2, 1:-1]) / dx2
        + (p[1:-1, 2:] - 2.0 * centre + p[1:-1, :-2]) / dy2
    )
    return curr


def stable_time_step(dx: float, dy: float, a: float) -> float:
    """Return the largest stable time step for grid spacing ``dx``, ``dy``."""
    dx2 = dx * dx
    dy2 = dy * dy
    return dx2 * dy2 / (2.0 * a * (dx2 + dy2))