"""Linear algebra on spinor fields.

A spinor field is a complex ``numpy`` array whose leading axes run over the
lattice sites and whose trailing axes hold the colour and spin components of
the spinor at each site.
"""

from __future__ import annotations

import math
from typing import Union

import numpy as np

SpinorLike = Union[np.ndarray, "list"]


def _field(a: SpinorLike) -> np.ndarray:
    return np.asarray(a, dtype=complex)


def _matching(a: SpinorLike, b: SpinorLike) -> tuple[np.ndarray, np.ndarray]:
    fa, fb = _field(a), _field(b)
    if fa.shape != fb.shape:
        raise ValueError(f"spinor fields differ in shape: {fa.shape} and {fb.shape}")
    return fa, fb


def spinor_dot_product(a: SpinorLike, b: SpinorLike) -> complex:
    """Inner product ``sum conj(a) * b`` over all sites and components."""
    fa, fb = _matching(a, b)
    return complex(np.vdot(fa, fb))


def spinor_norm_sq(a: SpinorLike) -> float:
    """Squared norm of a spinor field."""
    fa = _field(a)
    return float(np.sum(fa.real**2 + fa.imag**2))


def spinor_norm(a: SpinorLike) -> float:
    """Norm of a spinor field."""
    return math.sqrt(spinor_norm_sq(a))


def spinor_add_mul(a: SpinorLike, b: SpinorLike, alpha: complex) -> np.ndarray:
    """Return the new field ``a + alpha * b``."""
    fa, fb = _matching(a, b)
    return fa + complex(alpha) * fb


def spinor_sub_mul(a: SpinorLike, b: SpinorLike, alpha: complex) -> np.ndarray:
    """Return the new field ``a - alpha * b``."""
    return spinor_add_mul(a, b, -complex(alpha))