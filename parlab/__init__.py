"""Heat equation solver, variance study, kernels and reductions run on the host."""

__version__ = "0.1.0"