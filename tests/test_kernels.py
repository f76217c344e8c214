import numpy as np
import pytest

from parlab.kernels import (
    copy2d,
    count_inside,
    f_1,
    f_2,
    fill,
    fill_divergent,
    fill_noif,
    fill_nodivergent,
    grid_size,
    saxpy,
)


@pytest.mark.parametrize("n", [1, 255, 256, 257, 10000])
@pytest.mark.parametrize("blocksize", [4, 64, 256])
def test_grid_size_covers_problem_exactly(n, blocksize):
    blocks = grid_size(n, blocksize)
    assert blocks * blocksize >= n
    assert (blocks - 1) * blocksize < n


def test_grid_size_single_block():
    assert grid_size(1, 256) == 1


def test_grid_size_rejects_bad_blocksize():
    with pytest.raises(ValueError):
        grid_size(10, 0)


def test_saxpy_small_example():
    result = saxpy(2.0, [1.0, 2.0], [0.0, 0.0])
    assert result.tolist() == [2.0, 4.0]
    assert result.dtype == np.float32


def test_saxpy_zero_scale_returns_y():
    y = np.cos(np.arange(50)) * 1.1
    result = saxpy(0.0, np.sin(np.arange(50)), y)
    assert np.array_equal(result, y.astype(np.float32))


def test_saxpy_leaves_inputs_unchanged():
    x = np.ones(5, dtype=np.float32)
    y = np.zeros(5, dtype=np.float32)
    result = saxpy(3.4, x, y)
    assert np.array_equal(result, np.full(5, 3.4, dtype=np.float32))
    assert y.tolist() == [0.0] * 5
    assert x.tolist() == [1.0] * 5


def test_saxpy_shape_mismatch():
    with pytest.raises(ValueError):
        saxpy(1.0, [1.0, 2.0], [1.0])


def test_copy2d_copies_whole_grid():
    n, m = 600, 400
    src = np.arange(n * m) / 1000.0
    result = copy2d(n, m, src)
    assert np.array_equal(result, src)
    assert result is not src


def test_copy2d_leaves_tail_zero():
    src = np.arange(1, 11, dtype=float)
    result = copy2d(2, 3, src)
    assert np.array_equal(result[:6], src[:6])
    assert np.all(result[6:] == 0.0)


def test_copy2d_too_small_source():
    with pytest.raises(ValueError):
        copy2d(3, 3, [1.0, 2.0])


def test_fill_is_index_times_scale():
    x = fill(10000, 3.0)
    assert x.shape == (10000,)
    assert x[0] == 0.0
    assert np.all(np.diff(x) == 3.0)


def test_f_1_without_iterations_returns_x():
    assert f_1(7.5, 0.1, 0) == 7.5


def test_f_1_with_zero_scale_stays_at_x():
    assert f_1(4.0, 0.0, 5) == 4.0


def test_f_2_without_iterations_returns_one():
    assert f_2(7.5, 0.1, 0) == 1.0


def test_f_2_at_zero_is_a():
    assert f_2(0.0, 0.25, 6) == 0.25


@pytest.mark.parametrize("nz", [0, 1, 3, 8])
def test_f_2_recurrence(nz):
    x, a = 1.5, 0.1
    assert f_2(x, a, nz + 1) == pytest.approx(x * f_2(x, a, nz) + a)


def test_f_1_array_matches_scalars():
    xs = np.array([0.0, 1.0, 2.5])
    values = f_1(xs, 0.1, 4)
    for x, v in zip(xs, values):
        assert v == pytest.approx(f_1(float(x), 0.1, 4))


def test_fill_divergent_alternates_functions():
    result = fill_divergent(10, 0.1, 3)
    for i, value in enumerate(result):
        expected = f_1(float(i), 0.1, 3) if i % 2 == 0 else f_2(float(i), 0.1, 3)
        assert value == pytest.approx(expected)


def test_fill_nodivergent_switches_every_wavefront():
    result = fill_nodivergent(200, 0.1, 2)
    assert result[10] == pytest.approx(f_1(10.0, 0.1, 2))
    assert result[70] == pytest.approx(f_2(70.0, 0.1, 2))
    assert result[130] == pytest.approx(f_1(130.0, 0.1, 2))


def test_fill_noif_uses_scaled_index():
    n = 16
    result = fill_noif(n, 0.1, 4)
    assert result[0] == pytest.approx(f_2(0.0, 0.1, 4))
    assert result[8] == pytest.approx(f_2(0.5, 0.1, 4))


def test_count_inside_excludes_boundary():
    assert count_inside([0.0, 0.5, 1.0, 2.0], [0.0, 0.5, 0.0, 2.0]) == 2


def test_count_inside_bounded_by_count():
    rng = np.random.default_rng(1)
    x = rng.random(1000)
    y = rng.random(1000)
    inside = count_inside(x, y)
    assert 0 <= inside <= 1000
    assert count_inside(x * 0.0, y * 0.0) == 1000


def test_count_inside_shape_mismatch():
    with pytest.raises(ValueError):
        count_inside([0.1], [0.1, 0.2])