[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "parlab"
version = "0.1.0"
description = "Heat equation solver, Monte Carlo variance study and data-parallel kernel examples run on the host"
requires-python = ">=3.10"
dependencies = ["numpy"]
keywords = ["heat equation", "stencil", "simulation", "parallel", "kernels", "monte carlo", "reduction"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Intended Audience :: Science/Research",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Scientific/Engineering :: Physics",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
parlab-heat = "parlab.heat:main"
parlab-bessel = "parlab.bessel:main"
parlab-reduction = "parlab.reduction:main"

[tool.hatch.build.targets.wheel]
packages = ["parlab"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
