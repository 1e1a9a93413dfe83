"""Gauge group elements: SU(3), SU(2) and U(1) link variables."""

from __future__ import annotations

import cmath
import math
from dataclasses import dataclass
from typing import Iterable, Protocol, Sequence, Union


class UniformSource(Protocol):
    """Anything that draws uniform floats, such as ``numpy.random.Generator``."""

    def uniform(self, low: float, high: float) -> float: ...


def _as_entries(values: Iterable[complex], count: int, name: str) -> tuple[complex, ...]:
    entries = tuple(complex(x) for x in values)
    if len(entries) != count:
        raise ValueError(f"{name} needs {count} entries, got {len(entries)}")
    return entries


def _conj_cross(a: Sequence[complex], b: Sequence[complex]) -> tuple[complex, complex, complex]:
    """Complex conjugate of the cross product ``a x b``."""
    return (
        (a[1] * b[2] - a[2] * b[1]).conjugate(),
        (a[2] * b[0] - a[0] * b[2]).conjugate(),
        (a[0] * b[1] - a[1] * b[0]).conjugate(),
    )


def _random_unit_vector(rng: UniformSource, delta: float) -> tuple[complex, complex, complex]:
    """Draw a normalised complex 3-vector with components from ``[0, delta)``."""
    while True:
        r = [float(rng.uniform(0.0, delta)) for _ in range(6)]
        norm = math.sqrt(sum(x * x for x in r))
        if 1.0 != 1.0 + norm:
            break
    fact = 1.0 / norm
    return (
        fact * complex(r[0], r[1]),
        fact * complex(r[2], r[3]),
        fact * complex(r[4], r[5]),
    )


@dataclass(frozen=True)
class SU3:
    """A 3x3 complex matrix stored row-major in nine entries."""

    v: tuple[complex, ...]

    def __post_init__(self) -> None:
        object.__setattr__(self, "v", _as_entries(self.v, 9, "SU3"))

    @classmethod
    def identity(cls) -> SU3:
        return cls((1, 0, 0, 0, 1, 0, 0, 0, 1))

    @classmethod
    def random(cls, rng: UniformSource, delta: float) -> SU3:
        """Draw a random SU(3) element by orthonormalising two random rows."""
        z1 = _random_unit_vector(rng, delta)
        while True:
            z2 = _random_unit_vector(rng, delta)
            overlap = sum(a.conjugate() * b for a, b in zip(z1, z2))
            z2 = tuple(b - overlap * a for a, b in zip(z1, z2))
            norm = math.sqrt(sum(abs(b) ** 2 for b in z2))
            if 1.0 != 1.0 + norm:
                break
        fact = 1.0 / norm
        z2 = tuple(b * fact for b in z2)
        z3 = _conj_cross(z1, z2)
        return cls(z1 + z2 + z3)

    def dagger(self) -> SU3:
        """Hermitian conjugate."""
        return SU3(self.v[3 * j + i].conjugate() for i in range(3) for j in range(3))

    def __add__(self, other: object) -> SU3:
        if not isinstance(other, SU3):
            return NotImplemented
        return SU3(a + b for a, b in zip(self.v, other.v))

    def __sub__(self, other: object) -> SU3:
        if not isinstance(other, SU3):
            return NotImplemented
        return SU3(a - b for a, b in zip(self.v, other.v))

    def __mul__(self, other: object) -> SU3:
        if not isinstance(other, SU3):
            return NotImplemented
        return SU3(
            sum(self.v[3 * i + k] * other.v[3 * k + j] for k in range(3))
            for i in range(3)
            for j in range(3)
        )

    def retrace(self) -> float:
        """Real part of the trace."""
        return (self.v[0] + self.v[4] + self.v[8]).real

    def restore_gauge(self) -> SU3:
        """Project back onto SU(3) by re-orthonormalising the rows."""
        row0 = self.v[0:3]
        row1 = self.v[3:6]
        n0 = math.sqrt(sum(abs(x) ** 2 for x in row0))
        n1 = math.sqrt(sum(abs(x) ** 2 for x in row1))
        row0 = tuple(x / n0 for x in row0)
        row1 = tuple(x / n1 for x in row1)
        row2 = _conj_cross(row0, row1)
        row1 = _conj_cross(row2, row0)
        return SU3(row0 + row1 + row2)

    def det(self) -> complex:
        v = self.v
        return (
            v[0] * (v[4] * v[8] - v[5] * v[7])
            - v[1] * (v[3] * v[8] - v[5] * v[6])
            + v[2] * (v[3] * v[7] - v[4] * v[6])
        )


@dataclass(frozen=True)
class SU2:
    """An SU(2) matrix ``[[a, b], [-conj(b), conj(a)]]`` stored as four entries."""

    v: tuple[complex, ...]

    def __post_init__(self) -> None:
        object.__setattr__(self, "v", _as_entries(self.v, 4, "SU2"))

    @classmethod
    def identity(cls) -> SU2:
        return cls((1, 0, 0, 1))

    @classmethod
    def random(cls, rng: UniformSource, delta: float) -> SU2:
        """Draw a rotation by an angle from ``[0, 2*pi*delta)`` about a random axis."""
        alpha = float(rng.uniform(0.0, delta * 2.0 * math.pi))
        u = float(rng.uniform(-1.0, 1.0))
        theta = float(rng.uniform(0.0, 2.0 * math.pi))
        salpha = math.sin(alpha)
        radial = math.sqrt(1.0 - u * u)
        n1 = radial * math.sin(theta)
        n2 = radial * math.cos(theta)
        a = complex(math.cos(alpha), u * salpha)
        b = complex(n1 * salpha, n2 * salpha)
        return cls((a, b, complex(-b.real, b.imag), a.conjugate()))

    def dagger(self) -> SU2:
        v = self.v
        return SU2((v[0].conjugate(), -v[1], -v[2], v[3].conjugate()))

    def __add__(self, other: object) -> SU2:
        if not isinstance(other, SU2):
            return NotImplemented
        return SU2(a + b for a, b in zip(self.v, other.v))

    def __sub__(self, other: object) -> SU2:
        if not isinstance(other, SU2):
            return NotImplemented
        return SU2(a - b for a, b in zip(self.v, other.v))

    def __mul__(self, other: object) -> SU2:
        if not isinstance(other, SU2):
            return NotImplemented
        x, y = self.v[0], self.v[1]
        p, q = other.v[0], other.v[1]
        a = x.real * p.real - x.imag * p.imag - y.real * q.real - y.imag * q.imag
        b = x.real * p.imag + x.imag * p.real + y.real * q.imag - y.imag * q.real
        c = x.real * q.real - x.imag * q.imag + y.real * p.real + y.imag * p.imag
        d = x.real * q.imag + x.imag * q.real - y.real * p.imag + y.imag * p.real
        return SU2((complex(a, b), complex(c, d), complex(-c, d), complex(a, -b)))

    def retrace(self) -> float:
        return 2.0 * self.v[0].real

    def restore_gauge(self) -> SU2:
        """Rescale so that the first row has unit norm."""
        norm = math.sqrt(abs(self.v[0]) ** 2 + abs(self.v[1]) ** 2)
        return SU2(x / norm for x in self.v)


@dataclass(frozen=True)
class U1:
    """A U(1) phase."""

    v: complex

    def __post_init__(self) -> None:
        object.__setattr__(self, "v", complex(self.v))

    @classmethod
    def identity(cls) -> U1:
        return cls(1.0)

    @classmethod
    def random(cls, rng: UniformSource, delta: float) -> U1:
        """Draw a phase with angle from ``[-delta*pi, delta*pi)``."""
        angle = float(rng.uniform(-delta * math.pi, delta * math.pi))
        return cls(cmath.exp(1j * angle))

    def dagger(self) -> U1:
        return U1(self.v.conjugate())

    def __add__(self, other: object) -> U1:
        if not isinstance(other, U1):
            return NotImplemented
        return U1(self.v + other.v)

    def __sub__(self, other: object) -> U1:
        if not isinstance(other, U1):
            return NotImplemented
        return U1(self.v - other.v)

    def __mul__(self, other: object) -> U1:
        if not isinstance(other, U1):
            return NotImplemented
        return U1(self.v * other.v)

    def retrace(self) -> float:
        return self.v.real

    def restore_gauge(self) -> U1:
        return U1(self.v / abs(self.v))


GroupElement = Union[SU3, SU2, U1]


def dagger(element: GroupElement) -> GroupElement:
    """Hermitian conjugate of any gauge group element."""
    return element.dagger()