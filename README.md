# parlab

Small scientific programs built around data-parallel ideas, all running in
a single process on the host with NumPy:

- a 2D heat equation solver with a five-point stencil and PNG snapshots;
- a Monte Carlo study of Bessel's correction for the sample variance;
- block-and-thread style kernels (saxpy, 2D copy, fills, circle counting)
  and a blocked sum reduction.

## Install

    pip install .

## Heat equation

    parlab-heat                  # 2000 x 2000 grid, 500 steps
    parlab-heat input.dat        # initial field read from a file
    parlab-heat input.dat 1000   # file and number of steps
    parlab-heat 800 800 200      # rows, columns and number of steps

The solver prints the average temperature at the start and at the end and
the time the iteration took. Images named `heat_NNNN.png` are written to the
current directory at the start, every 1500 steps and at the end.

The input file starts with a header `# <rows> <cols>` followed by the
values, whitespace separated, row by row. The ghost layers around the
field repeat the outermost values read.

Without a file, the initial field is a cold disc (5 degrees) of radius
rows / 6 in a 65 degree plate, with fixed boundaries of 85 (top),
5 (bottom), 20 (left) and 70 (right) degrees.

From Python:

    from parlab.field import generate_field
    from parlab.core import evolve, stable_time_step
    from parlab.heat import simulate

    current = generate_field(200, 200)
    previous = current.copy()
    dt = stable_time_step(current.dx, current.dy, 0.5)
    evolve(current, previous, 0.5, dt)
    print(current.average())

    final = simulate(current, previous, nsteps=100, directory="out")

`parlab.field.Field` holds the grid with its ghost layers (`data`), its
interior view (`inner()`) and the mean interior temperature (`average()`).
`parlab.io.read_field` and `parlab.io.write_field` read an input file and
write a PNG snapshot; `parlab.pngwriter.save_png` renders any grid of values
with the heat colormap, 0 to 100 degrees spanning the scale, colder values
in blue and hotter ones in red.

## Bessel's correction

    parlab-bessel
    parlab-bessel --seed 42 --iterations 100 --population 1000 --sample 50

For each of 40 correction terms beta between -2 and 2, the variance of a
sample is estimated as `sum / (sample - beta)` and compared with the
variance of the whole population. The command prints the first three random
values drawn, then the root-mean-square error of the standard deviation and
variance estimates for each beta, and the elapsed time in milliseconds.
Without `--seed`, a random seed is taken from the operating system. The
defaults (10000 iterations over a population of 10000) take a long time;
smaller sizes are set with the options.

`parlab.bessel.run_experiment(seed, ...)` runs the same study and returns
`(beta, rmse_stdev, rmse_var)` tuples. The random numbers come from
`parlab.devices.HostDevice.random_float`, a Box-Muller transform over a
generator that is re-seeded with `seed + seq` at index zero, so the same
seed gives the same results.

## Kernels

`parlab.kernels` evaluates, over whole arrays:

- `saxpy(a, x, y)`: `y + a * x` in single precision;
- `copy2d(n, m, src)`: copy of a row-major `m` by `n` grid;
- `fill(n, a)`: element `i` is `i * a`;
- `fill_divergent`, `fill_nodivergent`, `fill_noif`: fills built from the
  recurrences `f_1` and `f_2`, switching between them on even and odd
  indices, on runs of 64 indices, or not at all;
- `count_inside(x, y)`: number of points strictly inside the unit circle;
- `grid_size(n, blocksize)`: number of blocks needed to cover `n` items.

## Reduction

    parlab-reduction
    parlab-reduction --tn 5000

Prints a greeting from each of four threads run serially and in blocks,
the values `i * pi`, and then sums the numbers below the bound (1000 by
default) both serially and block by block, reporting whether the results
match. The functions `run_serial`, `run_blocked`, `parallel_reduce_serial`
and `parallel_reduce_blocked` in `parlab.reduction` do the same for any
loop body.

## What it does not do

Everything runs in one process on the CPU. There is no distribution of the
heat equation grid or the variance study across several processes or
nodes, and no execution on accelerator devices; the block-and-thread
structure of the kernels and reductions is evaluated on the host only.

## Tests

    pip install .[test]
    pytest