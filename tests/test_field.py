import numpy as np
import pytest

from parlab.field import DX, DY, Field, generate_field


def test_zeros_shape_and_spacing():
    field = Field.zeros(3, 4)
    assert field.data.shape == (5, 6)
    assert not field.data.any()
    assert field.dx == DX == 0.01
    assert field.dy == DY == 0.01
    assert (field.nx_full, field.ny_full) == (3, 4)


def test_wrong_data_shape_raises():
    with pytest.raises(ValueError):
        Field(3, 3, np.zeros((3, 3)))


def test_inner_is_view_of_interior():
    field = Field.zeros(3, 4)
    inner = field.inner()
    assert inner.shape == (3, 4)
    inner[:] = 2.5
    assert field.data[1, 1] == 2.5
    assert field.data[0, 0] == 0.0
    assert field.data[4, 5] == 0.0


def test_average_ignores_ghost_layers():
    field = Field.zeros(4, 5)
    field.data[:] = 100.0
    field.inner()[:] = 7.0
    assert field.average() == pytest.approx(7.0)


def test_average_uses_global_dimensions():
    field = Field(2, 3, np.ones((4, 5)), nx_full=4, ny_full=3)
    assert field.average() == pytest.approx(0.5)


def test_copy_is_independent():
    field = generate_field(6, 6)
    clone = field.copy()
    assert np.array_equal(clone.data, field.data)
    clone.data[2, 2] = -1.0
    assert field.data[2, 2] != -1.0
    assert (clone.nx, clone.ny, clone.dx) == (field.nx, field.ny, field.dx)


def test_generate_field_boundaries():
    nx, ny = 12, 10
    field = generate_field(nx, ny)
    assert field.data.shape == (nx + 2, ny + 2)
    assert field.data[0, :].tolist() == [85.0] * (ny + 2)
    assert field.data[nx + 1, :].tolist() == [5.0] * (ny + 2)
    assert field.data[1:nx + 1, 0].tolist() == [20.0] * nx
    assert field.data[1:nx + 1, ny + 1].tolist() == [70.0] * nx


def test_generate_field_disc_and_background():
    nx, ny = 12, 12
    field = generate_field(nx, ny)
    assert field.data[nx // 2 - 1, ny // 2 - 1] == 5.0
    assert field.data[1, 1] == 65.0
    assert set(np.unique(field.inner())) <= {5.0, 65.0}


def test_generate_field_disc_is_symmetric():
    field = generate_field(18, 18)
    disc = field.data[1:-1, 1:-1] == 5.0
    centre = 18 // 2 - 1
    assert disc[centre - 1, centre - 1]
    assert np.count_nonzero(disc) > 0
    assert np.array_equal(disc[centre - 1 - 2, :], disc[centre - 1 + 2, :])


def test_generate_field_rejects_empty():
    with pytest.raises(ValueError):
        generate_field(0, 5)