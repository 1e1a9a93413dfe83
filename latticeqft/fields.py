"""Complex and real scalar fields on 2D, 3D and 4D lattices."""

from __future__ import annotations

from typing import Any, Sequence

import numpy as np


class _SiteField:
    """One number per lattice site, stored in a numpy array of the lattice shape."""

    _dtype: type = complex

    def __init__(self, dimensions: Sequence[int], init: Any = 0) -> None:
        dims = tuple(int(d) for d in dimensions)
        if len(dims) not in (2, 3, 4):
            raise ValueError(f"lattice rank must be 2, 3 or 4, got {len(dims)}")
        if any(d <= 0 for d in dims):
            raise ValueError(f"lattice extents must be positive, got {dims}")
        self.dimensions = dims
        self.data = np.full(dims, init, dtype=self._dtype)

    @property
    def rank(self) -> int:
        return len(self.dimensions)

    def _site(self, site: Any) -> tuple[int, ...]:
        if not isinstance(site, (tuple, list)) or len(site) != self.rank:
            raise KeyError(f"expected {self.rank} site indices, got {site!r}")
        return tuple(int(i) for i in site)

    def __getitem__(self, site: Any) -> Any:
        return self.data[self._site(site)].item()

    def __setitem__(self, site: Any, value: Any) -> None:
        self.data[self._site(site)] = value

    def sum(self) -> Any:
        return self.data.sum().item()


class ComplexField(_SiteField):
    """A complex number on every lattice site."""

    _dtype = complex

    def __init__(self, dimensions: Sequence[int], init: complex = 0j) -> None:
        super().__init__(dimensions, complex(init))

    def __getitem__(self, site: Any) -> complex:
        return complex(super().__getitem__(site))

    def __setitem__(self, site: Any, value: complex) -> None:
        super().__setitem__(site, complex(value))

    def sum(self) -> complex:
        """Sum over all sites."""
        return complex(super().sum())


class ScalarField(_SiteField):
    """A real number on every lattice site."""

    _dtype = float

    def __init__(self, dimensions: Sequence[int], init: float = 0.0) -> None:
        super().__init__(dimensions, float(init))

    def __getitem__(self, site: Any) -> float:
        return float(super().__getitem__(site))

    def __setitem__(self, site: Any, value: float) -> None:
        super().__setitem__(site, float(value))

    def sum(self) -> float:
        """Sum over all sites."""
        return float(super().sum())