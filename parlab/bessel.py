"""Monte Carlo study of Bessel's correction for sample variance."""

from __future__ import annotations

import argparse
import math
import random
import sys
import time
from typing import Optional, Sequence

import numpy as np

from .devices import HostDevice

N_ITER = 10000
N_POPU = 10000
N_SAMPLE = 50
N_BETA = 40
RANGE_BETA = 4.0
MEAN = 100.0
STDEV = 15.0


def run_experiment(
    seed: int,
    n_iter: int = N_ITER,
    n_popu: int = N_POPU,
    n_sample: int = N_SAMPLE,
    n_beta: int = N_BETA,
    range_beta: float = RANGE_BETA,
) -> list[tuple[float, float, float]]:
    """Estimate the error of the sample variance for a range of corrections.

    Each iteration draws a normal population; the variance of its first
    ``n_sample`` members is estimated as ``sum / (n_sample - beta)``. Returns
    ``(beta, rmse_stdev, rmse_var)`` for each of the ``n_beta`` tested betas.
    """
    for name, value in (
        ("n_iter", n_iter),
        ("n_popu", n_popu),
        ("n_sample", n_sample),
        ("n_beta", n_beta),
    ):
        if value <= 0:
            raise ValueError(f"{name} must be positive")

    device = HostDevice()
    betas = np.arange(n_beta) * (range_beta / n_beta) - range_beta / 2.0
    mse_stdev = np.zeros(n_beta)
    mse_var = np.zeros(n_beta)

    def iteration(it: int) -> None:
        base = it * n_popu
        # Re-seeding at index zero makes a second draw identical, so one pass suffices.
        values = np.array(
            [device.random_float(seed, base + i, i, MEAN, STDEV) for i in range(n_popu)]
        )
        sample = values[:n_sample]
        p_mean = values.sum() / n_popu
        s_mean = sample.sum() / n_sample
        p_var = ((values - p_mean) ** 2).sum() / n_popu
        b_sum = ((sample - s_mean) ** 2).sum()
        with np.errstate(divide="ignore", invalid="ignore"):
            b_var = b_sum / (n_sample - betas)
            mse_stdev[:] += (math.sqrt(p_var) - np.sqrt(b_var)) ** 2
            mse_var[:] += (p_var - b_var) ** 2

    device.parallel_for(n_iter, iteration)

    total = device.procs * n_iter
    rmse_stdev = np.sqrt(mse_stdev / total)
    rmse_var = np.sqrt(mse_var / total)
    return [
        (float(b), float(s), float(v))
        for b, s, v in zip(betas, rmse_stdev, rmse_var)
    ]


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Compare variance estimators with different corrections."
    )
    parser.add_argument("--seed", type=int, default=None, help="master seed")
    parser.add_argument("--iterations", type=int, default=N_ITER)
    parser.add_argument("--population", type=int, default=N_POPU)
    parser.add_argument("--sample", type=int, default=N_SAMPLE)
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the experiment and print the error for each beta."""
    args = _parser().parse_args(argv)
    begin = time.monotonic()
    device = HostDevice()
    seed = args.seed
    if seed is None:
        seed = random.SystemRandom().randint(0, 0xFFFFFFFF)

    try:
        for i in range(min(3, args.population)):
            value = device.random_float(seed, i, i, MEAN, STDEV)
            print(f"Rank {device.rank}, rnd_val[{i}]: {value:.5f} ")
        results = run_experiment(
            seed, args.iterations, args.population, args.sample, N_BETA, RANGE_BETA
        )
    except ValueError as exc:
        print(exc, file=sys.stderr)
        return 1

    if device.rank == 0:
        for beta, rmse_stdev, rmse_var in results:
            print(
                f"Beta = {beta:.2f}: RMSE for stdev = {rmse_stdev:.5f} "
                f"and var = {rmse_var:.5f}"
            )

    device.finalize(device.rank)

    if device.rank == 0:
        elapsed_ms = int((time.monotonic() - begin) * 1000)
        print(f"{elapsed_ms}[ms]")
    return 0


if __name__ == "__main__":
    sys.exit(main())