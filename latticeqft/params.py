"""Parameter sets for hybrid Monte Carlo runs."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class HMCParams:
    """General lattice and gauge-field settings of an HMC simulation."""

    ndims: int = 4
    l0: int = 4
    l1: int = 4
    l2: int = 4
    l3: int = 4
    rng_delta: float = 1.0
    seed: int = 1234
    cold_start: bool = False
    nd: int = 4
    nc: int = 2

    @property
    def dimensions(self) -> tuple[int, ...]:
        """Lattice extents of the first ``ndims`` directions."""
        return (self.l0, self.l1, self.l2, self.l3)[: self.ndims]

    def describe(self) -> str:
        lines = [
            "HMC Parameters:",
            "General Parameters:",
            f"Ndims: {self.ndims}",
            f"L0: {self.l0}",
            f"L1: {self.l1}",
            f"L2: {self.l2}",
            f"L3: {self.l3}",
            f"coldStart: {str(self.cold_start).lower()}",
            f"rngDelta: {self.rng_delta:.3f}",
            f"seed: {self.seed}",
            "GaugeField Parameters:",
            f"Nd: {self.nd}",
            f"Nc: {self.nc}",
            "Wilson Action Parameters:",
        ]
        return "\n".join(lines) + "\n"


@dataclass
class GaugeMonomialParams:
    """Coupling and integration level of the gauge action."""

    beta: float = 1.0
    level: int = 1

    def describe(self) -> str:
        return (
            "Gauge Monomial Parameters:\n"
            f"  level: {self.level}\n"
            f"  beta: {self.beta:.10f}\n"
        )


@dataclass
class FermionMonomialParams:
    """Settings of the pseudo-fermion action."""

    level: int = 0
    fermion_type: str = "HWilson"
    solver: str = "CG"
    rep_dim: int = 4
    kappa: float = 0.1
    tol: float = 1e-8

    def describe(self) -> str:
        return (
            "Fermion Parameters:\n"
            f"  Level: {self.level}\n"
            f"  Fermion Type: {self.fermion_type}\n"
            f"  Solver: {self.solver}\n"
            f"  RepDim: {self.rep_dim}\n"
            f"  Kappa: {self.kappa:.20f}\n"
            f"  Tolerance: {self.tol:.20f}\n"
        )


@dataclass
class IntegratorMonomialParams:
    """One level of the molecular-dynamics integrator."""

    type: str = "Leapfrog"
    level: int = 0
    steps: int = 20


@dataclass
class IntegratorParams:
    """Trajectory length, number of HMC steps and the integrator levels."""

    tau: float = 0.01
    nsteps: int = 10
    monomials: list[IntegratorMonomialParams] = field(default_factory=list)

    def describe(self) -> str:
        lines = [
            "Integrator Parameters:",
            f"  tau: {self.tau:.3f}",
            f"  nsteps: {self.nsteps}",
        ]
        for monomial in self.monomials:
            lines.extend(
                [
                    "  Monomial:",
                    f"    Type: {monomial.type}",
                    f"    Level: {monomial.level}",
                    f"    Steps: {monomial.steps}",
                ]
            )
        return "\n".join(lines) + "\n"