"""Map displacement magnitudes onto a continuous colour gradient."""

from __future__ import annotations

import logging
from typing import Any, Tuple

import matplotlib
import numpy as np

logger = logging.getLogger(__name__)


class ColorScale:
    """
    Continuous colour mapping over a fixed value domain.

    The domain is bound per comparison to [0, max(delta)], so two
    comparisons are coloured independently. When the domain collapses
    (no movement at all) every value maps to the gradient's minimum colour.

    Parameters
    ----------
    vmin, vmax : float
        Value domain.
    cmap : str
        Name of a registered matplotlib colormap.
    """

    def __init__(self, vmin: float, vmax: float, cmap: str = "jet"):
        if vmax < vmin:
            raise ValueError(f"Invalid colour domain [{vmin}, {vmax}]")
        try:
            self._cmap = matplotlib.colormaps[cmap]
        except KeyError:
            raise ValueError(f"Unknown colormap '{cmap}'") from None
        self.vmin = float(vmin)
        self.vmax = float(vmax)
        self.cmap_name = cmap

    @classmethod
    def from_delta(cls, delta: Any, cmap: str = "jet") -> "ColorScale":
        """Bind a scale to [0, max(delta)] for one comparison."""
        data = np.asarray(delta, dtype=np.float64)
        vmax = float(np.max(data)) if data.size else 0.0
        if vmax == 0.0:
            logger.warning("No movement detected; colour scale is degenerate")
        return cls(0.0, vmax, cmap=cmap)

    @property
    def domain(self) -> Tuple[float, float]:
        return self.vmin, self.vmax

    @property
    def is_degenerate(self) -> bool:
        return self.vmax <= self.vmin

    @property
    def cmap(self):
        return self._cmap

    def normalize(self, values: Any) -> np.ndarray:
        """Scale values to [0, 1] over the domain, clipping outliers."""
        data = np.asarray(values, dtype=np.float64)
        if self.is_degenerate:
            return np.zeros_like(data)
        return np.clip((data - self.vmin) / (self.vmax - self.vmin), 0.0, 1.0)

    def to_rgba(self, values: Any) -> np.ndarray:
        """Return an (N, 4) RGBA array for the given values."""
        return self._cmap(self.normalize(values))

    def __repr__(self) -> str:
        return f"ColorScale(vmin={self.vmin}, vmax={self.vmax}, cmap='{self.cmap_name}')"
