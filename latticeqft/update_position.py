"""Molecular-dynamics update of gauge links by their conjugate momenta."""

from __future__ import annotations

import numpy as np

from latticeqft.adjoint_field import AdjointField
from latticeqft.adjoint_sun import expo_sun


class UpdatePositionGauge:
    """Advance every link as ``U <- exp(eps * P) U``.

    ``gauge_field`` is a complex array of shape
    ``dimensions + (rank, nc, nc)`` and is updated in place.
    """

    def __init__(self, gauge_field: np.ndarray, adjoint_field: AdjointField) -> None:
        if not isinstance(gauge_field, np.ndarray) or not np.iscomplexobj(gauge_field):
            raise TypeError("gauge field must be a complex numpy array")
        nc = adjoint_field.nc
        if nc not in (1, 2):
            raise ValueError(f"position update is not available for {nc} colours")
        expected = adjoint_field.dimensions + (adjoint_field.rank, nc, nc)
        if gauge_field.shape != expected:
            raise ValueError(
                f"gauge field has shape {gauge_field.shape}, expected {expected}"
            )
        self.gauge_field = gauge_field
        self.adjoint_field = adjoint_field
        self.eps = 0.0

    def update(self, step_size: float) -> None:
        """Move all links by ``step_size`` along their momenta."""
        self.eps = float(step_size)
        momenta = self.adjoint_field.data
        for link in np.ndindex(*self.gauge_field.shape[:-2]):
            self.gauge_field[link] = expo_sun(self.eps * momenta[link]) @ self.gauge_field[link]