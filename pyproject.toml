[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "latticeqft"
version = "0.0.1"
description = "Lattice gauge theory building blocks: gauge groups, adjoint fields, spinor algebra, a CG solver and an HMC step"
requires-python = ">=3.10"
keywords = ["lattice", "gauge theory", "hmc", "monte carlo", "physics", "su(n)"]
classifiers = [
    "Development Status :: 3 - Alpha",
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
dependencies = [
    "numpy",
    "pyyaml",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["latticeqft"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
