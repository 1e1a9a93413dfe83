"""Conjugate-gradient solver for linear systems on spinor fields."""

from __future__ import annotations

import logging
import math
from typing import Callable, Optional

import numpy as np

from latticeqft.spinor_linalg import (
    spinor_add_mul,
    spinor_dot_product,
    spinor_norm,
    spinor_sub_mul,
)

logger = logging.getLogger(__name__)

Operator = Callable[[np.ndarray], np.ndarray]


class CGSolver:
    """Solve ``A x = b`` for a Hermitian positive-definite operator ``A``.

    ``operator`` maps a spinor field to a spinor field of the same shape.
    When the true residual of the converged iterate is too large relative
    to the solution, the iteration is restarted from that iterate.
    """

    max_iterations = 10_000

    def __init__(self, b: np.ndarray, operator: Operator) -> None:
        self.b = np.array(b, dtype=complex)
        self.operator = operator
        self.x: Optional[np.ndarray] = None
        self.iterations = 0

    def _apply(self, field: np.ndarray) -> np.ndarray:
        return np.asarray(self.operator(field), dtype=complex)

    def _residual(self, x: np.ndarray) -> np.ndarray:
        return spinor_sub_mul(self.b, self._apply(x), 1.0)

    def _iterate(self, xk: np.ndarray, tol: float, budget: int) -> tuple[np.ndarray, int]:
        rk = self._residual(xk)
        pk = rk.copy()
        rk_norm = spinor_norm(rk)
        count = 0
        while rk_norm > tol:
            if count >= budget:
                raise RuntimeError(
                    f"CG solver did not converge within {self.max_iterations} iterations"
                )
            apk = self._apply(pk)
            rkrk = spinor_dot_product(rk, rk)
            alpha = rkrk / spinor_dot_product(pk, apk)
            xk = spinor_add_mul(xk, pk, alpha)
            rk = spinor_sub_mul(rk, apk, alpha)
            beta = spinor_dot_product(rk, rk) / rkrk
            pk = spinor_add_mul(rk, pk, beta)
            rk_norm = spinor_norm(rk)
            count += 1
            logger.debug("CG iteration %d: rk_norm = %.15f", count, rk_norm)
        return xk, count

    def solve(self, x0: np.ndarray, tol: float) -> np.ndarray:
        """Solve starting from ``x0``; the solution is returned and kept in ``x``."""
        xk = np.array(x0, dtype=complex)
        if xk.shape != self.b.shape:
            raise ValueError(
                f"initial guess has shape {xk.shape}, right-hand side {self.b.shape}"
            )
        total = 0
        while True:
            xk, count = self._iterate(xk, tol, self.max_iterations - total)
            total += count
            ex_res = spinor_norm(self._residual(xk))
            x_norm = spinor_norm(xk)
            if x_norm:
                relative = ex_res / x_norm
            else:
                relative = math.inf if ex_res else 0.0
            if abs(relative) <= tol:
                break
            logger.warning(
                "EX_res: %.20f, roundoff error, relaunching CG solver with new initial guess",
                ex_res,
            )
        logger.info("CG solver converged in %d iterations", total)
        self.iterations = total
        self.x = xk
        return xk