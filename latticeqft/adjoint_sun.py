"""Adjoint (Lie-algebra) vectors of SU(N) and their maps to and from the group.

An adjoint vector of SU(N) is a real array of ``adjoint_dimension(N)``
components; group elements are ``N x N`` complex ``numpy`` arrays.
"""

from __future__ import annotations

import math
from typing import Protocol, Sequence, Union

import numpy as np

SQRT3INV = 0.5773502691896257645

ArrayLike = Union[Sequence[float], np.ndarray]


class NormalArraySource(Protocol):
    """Anything that draws arrays of normal floats, such as ``numpy.random.Generator``."""

    def normal(self, loc: float, scale: float, size: int) -> np.ndarray: ...


def adjoint_dimension(nc: int) -> int:
    """Number of real adjoint components for ``nc`` colours (U(1) has one)."""
    if nc < 1:
        raise ValueError(f"number of colours must be positive, got {nc}")
    return 1 if nc == 1 else nc * nc - 1


def _vector(a: ArrayLike) -> np.ndarray:
    vec = np.asarray(a, dtype=float)
    if vec.ndim != 1:
        raise ValueError("an adjoint vector must be one-dimensional")
    return vec


def flip_sign(a: ArrayLike) -> np.ndarray:
    """Return the adjoint vector with every component negated."""
    return -_vector(a)


def norm2(a: ArrayLike) -> float:
    """Squared Euclidean norm of an adjoint vector."""
    vec = _vector(a)
    return float(np.dot(vec, vec))


def random_adjoint(nc: int, rng: NormalArraySource) -> np.ndarray:
    """Draw an adjoint vector with independent standard normal components."""
    size = adjoint_dimension(nc)
    return np.asarray(rng.normal(0.0, 1.0, size=size), dtype=float).reshape(size)


def trace_t(matrix: ArrayLike) -> np.ndarray:
    """Project an N x N matrix onto the adjoint components (N = 1, 2, 3)."""
    m = np.asarray(matrix, dtype=complex)
    if m.ndim != 2 or m.shape[0] != m.shape[1]:
        raise ValueError(f"expected a square matrix, got shape {m.shape}")
    nc = m.shape[0]
    if nc == 1:
        return np.array([m[0, 0].imag])
    if nc == 2:
        return np.array(
            [2.0 * m[0, 1].imag, 2.0 * m[0, 1].real, 2.0 * m[0, 0].imag]
        )
    if nc == 3:
        return 0.5 * np.array(
            [
                -m[0, 1].imag - m[1, 0].imag,
                m[1, 0].real - m[0, 1].real,
                m[1, 1].imag - m[0, 0].imag,
                -m[0, 2].imag - m[2, 0].imag,
                m[2, 0].real - m[0, 2].real,
                -m[2, 1].imag - m[1, 2].imag,
                m[2, 1].real - m[1, 2].real,
                (-m[0, 0].imag - m[1, 1].imag + 2.0 * m[2, 2].imag) * SQRT3INV,
            ]
        )
    raise ValueError(f"trace_t is not defined for {nc} colours")


def expo_sun(a: ArrayLike) -> np.ndarray:
    """Exponentiate an adjoint vector of U(1) or SU(2) into a group matrix."""
    vec = _vector(a)
    if vec.size == 1:
        return np.array([[complex(math.cos(vec[0]), math.sin(vec[0]))]])
    if vec.size == 3:
        alpha = math.sqrt(norm2(vec))
        if alpha == 0.0:
            return np.eye(2, dtype=complex)
        u0, u1, u2 = vec / alpha
        s = math.sin(alpha)
        c = math.cos(alpha)
        c00 = complex(c, u2 * s)
        c01 = complex(u1 * s, u0 * s)
        return np.array(
            [[c00, c01], [complex(-c01.real, c01.imag), c00.conjugate()]]
        )
    raise ValueError(f"expo_sun is not defined for {vec.size} adjoint components")


def format_adjoint(a: ArrayLike, name: str = "SUNAdj:") -> str:
    """Render an adjoint vector as a labelled, one-component-per-line listing."""
    lines = [name]
    lines.extend(f"    [{i}] = ({x: .20f})" for i, x in enumerate(_vector(a)))
    return "\n".join(lines) + "\n"