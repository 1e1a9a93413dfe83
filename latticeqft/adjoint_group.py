"""Lie-algebra (adjoint) elements for SU(2) and U(1) and their exponentials."""

from __future__ import annotations

import cmath
import math
from dataclasses import dataclass
from numbers import Real
from typing import Iterable, Protocol

from latticeqft.gauge_group import SU2, U1


class NormalSource(Protocol):
    """Anything that draws normal floats, such as ``numpy.random.Generator``."""

    def normal(self, loc: float, scale: float) -> float: ...


@dataclass(frozen=True)
class AdjointSU2:
    """Three real components of an su(2) algebra element."""

    v: tuple[float, ...]

    def __post_init__(self) -> None:
        entries = tuple(float(x) for x in self.v)
        if len(entries) != 3:
            raise ValueError(f"AdjointSU2 needs 3 components, got {len(entries)}")
        object.__setattr__(self, "v", entries)

    @classmethod
    def from_group(cls, element: SU2) -> AdjointSU2:
        """Project an SU(2) element onto the algebra."""
        a, b = element.v[0], element.v[1]
        return cls((2.0 * b.imag, 2.0 * b.real, 2.0 * a.imag))

    @classmethod
    def random(cls, rng: NormalSource) -> AdjointSU2:
        return cls(float(rng.normal(0.0, 1.0)) for _ in range(3))

    def flip_sign(self) -> AdjointSU2:
        return AdjointSU2(-x for x in self.v)

    def norm2(self) -> float:
        return sum(x * x for x in self.v)

    def __getitem__(self, index: int) -> float:
        return self.v[index]

    def __add__(self, other: object) -> AdjointSU2:
        if not isinstance(other, AdjointSU2):
            return NotImplemented
        return AdjointSU2(a + b for a, b in zip(self.v, other.v))

    def __sub__(self, other: object) -> AdjointSU2:
        if not isinstance(other, AdjointSU2):
            return NotImplemented
        return AdjointSU2(a - b for a, b in zip(self.v, other.v))

    def __rmul__(self, scalar: object) -> AdjointSU2:
        if not isinstance(scalar, Real):
            return NotImplemented
        return AdjointSU2(float(scalar) * x for x in self.v)

    def exp(self) -> SU2:
        """Exponentiate into SU(2); the zero element maps to the identity."""
        alpha = math.sqrt(self.norm2())
        if alpha == 0.0:
            return SU2.identity()
        n0, n1, n2 = (x / alpha for x in self.v)
        salpha = math.sin(alpha)
        calpha = math.cos(alpha)
        return SU2(
            (
                complex(calpha, n2 * salpha),
                complex(n1 * salpha, n0 * salpha),
                complex(-n1 * salpha, n0 * salpha),
                complex(calpha, -n2 * salpha),
            )
        )


@dataclass(frozen=True)
class AdjointU1:
    """The single real component of a u(1) algebra element."""

    v: float

    def __post_init__(self) -> None:
        object.__setattr__(self, "v", float(self.v))

    @classmethod
    def from_group(cls, element: U1) -> AdjointU1:
        return cls(element.v.imag)

    @classmethod
    def random(cls, rng: NormalSource) -> AdjointU1:
        return cls(float(rng.normal(0.0, 1.0)))

    def flip_sign(self) -> AdjointU1:
        return AdjointU1(-self.v)

    def norm2(self) -> float:
        return self.v * self.v

    def __getitem__(self, index: int) -> float:
        # A single component: every index refers to it.
        return self.v

    def __add__(self, other: object) -> AdjointU1:
        if not isinstance(other, AdjointU1):
            return NotImplemented
        return AdjointU1(self.v + other.v)

    def __sub__(self, other: object) -> AdjointU1:
        if not isinstance(other, AdjointU1):
            return NotImplemented
        return AdjointU1(self.v - other.v)

    def __rmul__(self, scalar: object) -> AdjointU1:
        if not isinstance(scalar, Real):
            return NotImplemented
        return AdjointU1(float(scalar) * self.v)

    def exp(self) -> U1:
        return U1(cmath.exp(1j * self.v))


def _components(values: Iterable[float]) -> tuple[float, ...]:
    return tuple(float(x) for x in values)