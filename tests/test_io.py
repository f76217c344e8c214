import struct

import numpy as np
import pytest

from parlab.field import Field, generate_field
from parlab.io import read_field, write_field


def _write_input(path, nx, ny, values):
    lines = [f"# {nx} {ny}"]
    for row in values:
        lines.append(" ".join(str(v) for v in row))
    path.write_text("\n".join(lines) + "\n")


def test_write_field_names_file_by_iteration(tmp_path):
    field = generate_field(6, 8)
    path = write_field(field, 7, tmp_path)
    assert path.name == "heat_0007.png"
    assert path.exists()


def test_write_field_png_dimensions(tmp_path):
    field = generate_field(6, 8)
    path = write_field(field, 0, tmp_path)
    raw = path.read_bytes()
    assert raw[:8] == b"\x89PNG\r\n\x1a\n"
    width, height = struct.unpack(">II", raw[16:24])
    assert (width, height) == (8, 6)


def test_read_field_interior(tmp_path):
    values = np.arange(12, dtype=float).reshape(3, 4)
    path = tmp_path / "init.dat"
    _write_input(path, 3, 4, values)
    field = read_field(path)
    assert (field.nx, field.ny) == (3, 4)
    np.testing.assert_array_equal(field.inner(), values)


def test_read_field_ghost_layers_repeat_edges(tmp_path):
    values = np.arange(12, dtype=float).reshape(3, 4) * 1.5
    path = tmp_path / "init.dat"
    _write_input(path, 3, 4, values)
    data = read_field(path).data
    np.testing.assert_array_equal(data[1:-1, 0], values[:, 0])
    np.testing.assert_array_equal(data[1:-1, -1], values[:, -1])
    np.testing.assert_array_equal(data[0], data[1])
    np.testing.assert_array_equal(data[-1], data[-2])


def test_read_field_average_matches_values(tmp_path):
    values = np.linspace(0.0, 100.0, 20).reshape(4, 5)
    path = tmp_path / "init.dat"
    _write_input(path, 4, 5, values)
    assert read_field(path).average() == pytest.approx(values.mean())


def test_read_field_header_without_space(tmp_path):
    path = tmp_path / "init.dat"
    path.write_text("#2 2\n1 2\n3 4\n")
    field = read_field(path)
    np.testing.assert_array_equal(field.inner(), [[1.0, 2.0], [3.0, 4.0]])


def test_read_field_missing_header(tmp_path):
    path = tmp_path / "init.dat"
    path.write_text("1 2 3 4\n")
    with pytest.raises(ValueError):
        read_field(path)


def test_read_field_too_few_values(tmp_path):
    path = tmp_path / "init.dat"
    path.write_text("# 2 3\n1 2 3\n")
    with pytest.raises(ValueError):
        read_field(path)


def test_read_field_bad_header(tmp_path):
    path = tmp_path / "init.dat"
    path.write_text("# x y\n")
    with pytest.raises(ValueError):
        read_field(path)


def test_read_result_is_field(tmp_path):
    path = tmp_path / "init.dat"
    path.write_text("# 1 1\n42\n")
    field = read_field(path)
    assert isinstance(field, Field) and field.data.shape == (3, 3)
    assert np.all(field.data == 42.0)