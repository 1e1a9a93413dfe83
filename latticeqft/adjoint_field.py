"""Lattice fields of adjoint vectors, one per site and direction."""

from __future__ import annotations

from typing import Any, Optional, Sequence

import numpy as np

from latticeqft.adjoint_sun import NormalArraySource, adjoint_dimension


class AdjointField:
    """Momentum-like field: an adjoint vector on every link of a 2D, 3D or 4D lattice.

    The data array has shape ``dimensions + (rank, adjoint_dimension(nc))``.
    """

    def __init__(
        self,
        dimensions: Sequence[int],
        nc: int,
        init: Optional[Sequence[float]] = None,
    ) -> None:
        dims = tuple(int(d) for d in dimensions)
        if len(dims) not in (2, 3, 4):
            raise ValueError(f"lattice rank must be 2, 3 or 4, got {len(dims)}")
        if any(d <= 0 for d in dims):
            raise ValueError(f"lattice extents must be positive, got {dims}")
        self.dimensions = dims
        self.nc = nc
        self.adjoint_size = adjoint_dimension(nc)
        value = np.zeros(self.adjoint_size)
        if init is not None:
            value = np.asarray(init, dtype=float)
            if value.shape != (self.adjoint_size,):
                raise ValueError(
                    f"initial value needs {self.adjoint_size} components, "
                    f"got shape {value.shape}"
                )
        self.data = np.empty(dims + (len(dims), self.adjoint_size))
        self.data[...] = value

    @property
    def rank(self) -> int:
        return len(self.dimensions)

    def _index(self, key: Any) -> tuple[int, ...]:
        if (
            isinstance(key, tuple)
            and len(key) == 2
            and isinstance(key[0], (tuple, list))
        ):
            key = tuple(key[0]) + (key[1],)
        if not isinstance(key, tuple) or len(key) != self.rank + 1:
            raise KeyError(f"expected {self.rank} site indices and a direction")
        return tuple(int(k) for k in key)

    def __getitem__(self, key: Any) -> np.ndarray:
        """Return a copy of the adjoint vector at ``(site..., mu)``."""
        return self.data[self._index(key)].copy()

    def __setitem__(self, key: Any, value: Sequence[float]) -> None:
        vec = np.asarray(value, dtype=float)
        if vec.shape != (self.adjoint_size,):
            raise ValueError(
                f"value needs {self.adjoint_size} components, got shape {vec.shape}"
            )
        self.data[self._index(key)] = vec

    def randomize(self, rng: NormalArraySource) -> None:
        """Fill every component with an independent standard normal draw."""
        self.data[...] = np.asarray(
            rng.normal(0.0, 1.0, size=self.data.size), dtype=float
        ).reshape(self.data.shape)

    def flip_sign(self) -> None:
        """Negate every adjoint vector in place."""
        np.negative(self.data, out=self.data)

    def copy(self) -> AdjointField:
        duplicate = AdjointField(self.dimensions, self.nc)
        duplicate.data[...] = self.data
        return duplicate