"""Hybrid Monte Carlo: momentum refresh, trajectory and Metropolis accept step."""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Any, Optional, Protocol

import numpy as np

from latticeqft.adjoint_field import AdjointField
from latticeqft.adjoint_sun import NormalArraySource
from latticeqft.params import IntegratorParams

logger = logging.getLogger(__name__)


class Monomial(Protocol):
    """A term of the Hamiltonian that contributes to the energy difference."""

    delta_h: float

    def heatbath(self, hamiltonian_field: HamiltonianField) -> None: ...

    def accept(self, hamiltonian_field: HamiltonianField) -> None: ...


class Integrator(Protocol):
    """Integrates the equations of motion over a trajectory of length ``tau``."""

    def integrate(self, tau: float, check_reversibility: bool) -> None: ...


class UnitSource(Protocol):
    """Draws floats uniform on ``[0, 1)``, such as ``random.Random``."""

    def random(self) -> float: ...


def restore_gauge_field(gauge_field: np.ndarray) -> None:
    """Project every link of a gauge field back onto its group, in place."""
    shape = gauge_field.shape
    if len(shape) < 2 or shape[-1] != shape[-2]:
        raise ValueError(f"links must be square matrices, got shape {shape}")
    nc = shape[-1]
    if nc == 1:
        gauge_field /= np.abs(gauge_field)
    elif nc == 2:
        norm = np.sqrt(np.sum(np.abs(gauge_field[..., 0, :]) ** 2, axis=-1))
        gauge_field /= norm[..., np.newaxis, np.newaxis]
    elif nc == 3:
        row0 = gauge_field[..., 0, :]
        row1 = gauge_field[..., 1, :]
        row0 = row0 / np.linalg.norm(row0, axis=-1)[..., np.newaxis]
        row1 = row1 / np.linalg.norm(row1, axis=-1)[..., np.newaxis]
        row2 = np.conj(np.cross(row0, row1))
        row1 = np.conj(np.cross(row2, row0))
        gauge_field[..., 0, :] = row0
        gauge_field[..., 1, :] = row1
        gauge_field[..., 2, :] = row2
    else:
        raise ValueError(f"cannot restore links with {nc} colours")


@dataclass
class HamiltonianField:
    """Gauge links together with their conjugate momenta."""

    gauge_field: np.ndarray
    adjoint_field: AdjointField

    def __post_init__(self) -> None:
        adj = self.adjoint_field
        expected = adj.dimensions + (adj.rank, adj.nc, adj.nc)
        if self.gauge_field.shape != expected:
            raise ValueError(
                f"gauge field has shape {self.gauge_field.shape}, expected {expected}"
            )

    def randomize_momentum(self, rng: NormalArraySource) -> None:
        """Draw fresh Gaussian momenta."""
        self.adjoint_field.randomize(rng)


class HMC:
    """Runs HMC steps over a set of monomials with a given integrator."""

    def __init__(
        self,
        params: IntegratorParams,
        hamiltonian_field: HamiltonianField,
        integrator: Integrator,
        rng: NormalArraySource,
        accept_rng: UnitSource,
    ) -> None:
        self.params = params
        self.hamiltonian_field = hamiltonian_field
        self.integrator = integrator
        self.rng = rng
        self.accept_rng = accept_rng
        self.monomials: list[Any] = []
        self.delta_h = 0.0
        self.delta_h_reversed: Optional[float] = None

    def add_monomial(self, monomial: Monomial) -> None:
        self.monomials.append(monomial)

    def _accept_all(self) -> float:
        total = 0.0
        for monomial in self.monomials:
            monomial.accept(self.hamiltonian_field)
            total += monomial.delta_h
            logger.debug("%s: delta_H %.20f", type(monomial).__name__, monomial.delta_h)
        return total

    def hmc_step(self, check_reversibility: bool = False) -> bool:
        """Run one trajectory and return whether it was accepted."""
        field = self.hamiltonian_field
        gauge = field.gauge_field
        field.randomize_momentum(self.rng)
        gauge_old = gauge.copy()
        for monomial in self.monomials:
            monomial.heatbath(field)
        self.integrator.integrate(self.params.tau, False)
        restore_gauge_field(gauge)

        self.delta_h = self._accept_all()
        accept = True
        if self.delta_h > 0.0 and self.accept_rng.random() > math.exp(-self.delta_h):
            accept = False

        if check_reversibility:
            gauge_save = gauge.copy()
            field.adjoint_field.flip_sign()
            self.integrator.integrate(self.params.tau, False)
            self.delta_h_reversed = self._accept_all()
            logger.info("reversed trajectory delta_H %.20f", self.delta_h_reversed)
            np.copyto(gauge, gauge_save)

        if not accept:
            np.copyto(gauge, gauge_old)
        return accept