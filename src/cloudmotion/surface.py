"""
Plotting surface abstraction and its matplotlib implementation.

Panels draw through the PlottingSurface interface only; MatplotlibSurface
is the concrete backend used by default. Region handles returned by
``create_figure`` are opaque to callers.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Sequence, Tuple, Union

import matplotlib.pyplot as plt
import numpy as np
from matplotlib.cm import ScalarMappable
from matplotlib.collections import LineCollection
from matplotlib.colors import Normalize
from matplotlib.gridspec import GridSpec
from mpl_toolkits.mplot3d.art3d import Line3DCollection

from .colorscale import ColorScale

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RegionSpec:
    """
    Placement of one region on the figure grid.

    Attributes
    ----------
    row, col : int
        Top-left grid cell.
    rowspan, colspan : int
        Number of grid cells covered.
    projection : str or None
        ``"3d"`` for a three-dimensional region, None for a flat one.
    """

    row: int
    col: int
    rowspan: int = 1
    colspan: int = 1
    projection: Optional[str] = None


class PlottingSurface(ABC):
    """Drawing capabilities the comparison panels rely on."""

    @abstractmethod
    def create_figure(
        self, figsize: Tuple[float, float], regions: Mapping[str, RegionSpec]
    ) -> Dict[str, Any]:
        """Create the figure and return a handle per named region."""

    @abstractmethod
    def scatter(
        self,
        region: Any,
        coords: Sequence[np.ndarray],
        *,
        color: Optional[str] = None,
        values: Optional[np.ndarray] = None,
        scale: Optional[ColorScale] = None,
        size: float = 20.0,
        alpha: float = 1.0,
        label: Optional[str] = None,
    ) -> None:
        """Draw point markers, uniformly coloured or coloured by values."""

    @abstractmethod
    def segments(
        self,
        region: Any,
        starts: np.ndarray,
        ends: np.ndarray,
        *,
        color: str = "black",
        alpha: float = 1.0,
        linewidth: float = 1.0,
    ) -> None:
        """Draw one line segment per row of starts/ends."""

    @abstractmethod
    def colorbar(self, region: Any, scale: ColorScale, label: str = "") -> None:
        """Attach a colorbar bound to the scale's domain."""

    @abstractmethod
    def histogram(
        self,
        region: Any,
        values: np.ndarray,
        bins: int,
        *,
        color: str = "steelblue",
        alpha: float = 1.0,
    ) -> Tuple[np.ndarray, np.ndarray]:
        """Draw a frequency histogram and return (counts, bin_edges)."""

    @abstractmethod
    def text(self, region: Any, x: float, y: float, text: str, *, fontsize: float = 10) -> None:
        """Place a text annotation at data coordinates."""

    @abstractmethod
    def set_labels(
        self,
        region: Any,
        *,
        title: Optional[str] = None,
        xlabel: Optional[str] = None,
        ylabel: Optional[str] = None,
        zlabel: Optional[str] = None,
    ) -> None:
        """Set title and axis labels."""

    @abstractmethod
    def legend(self, region: Any) -> None:
        """Show a legend of the labelled artists."""

    @abstractmethod
    def set_equal_aspect(self, region: Any) -> None:
        """Use the same scale on every axis of the region."""

    @abstractmethod
    def set_view(self, region: Any, elev: float, azim: float) -> None:
        """Set the viewing angle of a 3D region."""

    @abstractmethod
    def finalize(self) -> Any:
        """Lay out and return the rendered figure."""

    @abstractmethod
    def save(self, path: Union[str, Path], dpi: int = 150) -> Path:
        """Write the rendered figure to an image file."""


def _is_3d(ax) -> bool:
    return getattr(ax, "name", "") == "3d"


class MatplotlibSurface(PlottingSurface):
    """PlottingSurface backed by a pyplot figure and a GridSpec layout."""

    def __init__(self):
        self.figure = None

    def _require_figure(self) -> None:
        if self.figure is None:
            raise RuntimeError("Figure not created. Call create_figure() first.")

    def create_figure(self, figsize, regions):
        if not regions:
            raise ValueError("At least one region is required")
        nrows = max(spec.row + spec.rowspan for spec in regions.values())
        ncols = max(spec.col + spec.colspan for spec in regions.values())

        self.figure = plt.figure(figsize=figsize)
        grid = GridSpec(nrows, ncols, figure=self.figure)
        handles = {}
        for name, spec in regions.items():
            cell = grid[spec.row:spec.row + spec.rowspan, spec.col:spec.col + spec.colspan]
            handles[name] = self.figure.add_subplot(cell, projection=spec.projection)
        logger.debug(f"Created {nrows}x{ncols} figure with regions {list(handles)}")
        return handles

    def scatter(self, region, coords, *, color=None, values=None, scale=None,
                size=20.0, alpha=1.0, label=None):
        self._require_figure()
        if values is not None:
            if scale is None:
                raise ValueError("A ColorScale is required when colouring by values")
            c = scale.to_rgba(values)
        else:
            c = color
        if _is_3d(region):
            xs, ys, zs = coords
            region.scatter(xs, ys, zs, c=c, s=size, alpha=alpha, label=label, depthshade=False)
        else:
            xs, ys = coords
            region.scatter(xs, ys, c=c, s=size, alpha=alpha, label=label)

    def segments(self, region, starts, ends, *, color="black", alpha=1.0, linewidth=1.0):
        self._require_figure()
        segs = np.stack([np.asarray(starts), np.asarray(ends)], axis=1)
        if _is_3d(region):
            region.add_collection3d(
                Line3DCollection(segs, colors=color, alpha=alpha, linewidths=linewidth)
            )
        else:
            region.add_collection(
                LineCollection(segs, colors=color, alpha=alpha, linewidths=linewidth)
            )
            region.autoscale_view()

    def colorbar(self, region, scale, label=""):
        self._require_figure()
        vmin, vmax = scale.domain
        if scale.is_degenerate:
            # colorbar needs a non-empty range; every value still maps to the minimum colour
            vmax = vmin + 1.0
        mappable = ScalarMappable(norm=Normalize(vmin=vmin, vmax=vmax), cmap=scale.cmap)
        mappable.set_array(np.array([]))
        shrink = 0.6 if _is_3d(region) else 1.0
        self.figure.colorbar(mappable, ax=region, shrink=shrink, label=label)

    def histogram(self, region, values, bins, *, color="steelblue", alpha=1.0):
        self._require_figure()
        counts, edges, _ = region.hist(values, bins=bins, color=color, alpha=alpha, edgecolor="black")
        return np.asarray(counts), np.asarray(edges)

    def text(self, region, x, y, text, *, fontsize=10):
        self._require_figure()
        props = dict(boxstyle='round', facecolor='wheat', alpha=0.5)
        region.text(x, y, text, fontsize=fontsize, verticalalignment='top', bbox=props)

    def set_labels(self, region, *, title=None, xlabel=None, ylabel=None, zlabel=None):
        if title is not None:
            region.set_title(title)
        if xlabel is not None:
            region.set_xlabel(xlabel)
        if ylabel is not None:
            region.set_ylabel(ylabel)
        if zlabel is not None and _is_3d(region):
            region.set_zlabel(zlabel)

    def legend(self, region):
        region.legend(loc="upper right")

    def set_equal_aspect(self, region):
        if not _is_3d(region):
            region.set_aspect("equal", adjustable="datalim")
            return

        limits = np.array([region.get_xlim3d(), region.get_ylim3d(), region.get_zlim3d()])
        centers = limits.mean(axis=1)
        radius = float(np.max(limits[:, 1] - limits[:, 0])) / 2.0
        if radius == 0.0:
            radius = 0.5
        region.set_xlim3d(centers[0] - radius, centers[0] + radius)
        region.set_ylim3d(centers[1] - radius, centers[1] + radius)
        region.set_zlim3d(centers[2] - radius, centers[2] + radius)
        region.set_box_aspect((1, 1, 1))

    def set_view(self, region, elev, azim):
        if _is_3d(region):
            region.view_init(elev=elev, azim=azim)

    def finalize(self):
        self._require_figure()
        self.figure.tight_layout()
        return self.figure

    def save(self, path, dpi=150):
        self._require_figure()
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)
        self.figure.savefig(path, dpi=dpi, bbox_inches="tight")
        logger.info(f"Figure saved to {path}")
        return path
