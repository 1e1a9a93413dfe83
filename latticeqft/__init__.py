"""Lattice gauge theory building blocks: gauge groups, adjoint and site fields, spinor algebra, CG solver, HMC step and YAML parameters."""

__version__ = "0.0.1"