"""
Panel renderers for the point cloud comparison figure.

Panels:
- OverviewPanel: 3D scatter of both states with connecting segments
- HistogramPanel: distribution of delta with a statistics text block
- TopViewPanel: 2D projection onto the two horizontal axes

Each panel reads a ComparisonData bundle by reference and draws into one
region of a PlottingSurface.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Optional

import numpy as np

from .colorscale import ColorScale
from .config import ReportConfig
from .pointcloud import PointCloud
from .pointcloudpair import DisplacementResult
from .summary import SummaryStatistics
from .surface import PlottingSurface

logger = logging.getLogger(__name__)


@dataclass(frozen=True, eq=False)
class ComparisonData:
    """Inputs and derived results of one comparison, shared by all panels."""

    before: PointCloud
    after: PointCloud
    displacement: DisplacementResult
    stats: SummaryStatistics
    scale: ColorScale

    @property
    def delta(self) -> np.ndarray:
        return self.displacement.delta


class PanelRenderer:
    """Base class for one panel of the comparison figure."""

    TITLE: str = ""

    def __init__(self, config: Optional[ReportConfig] = None):
        self.config = config if config is not None else ReportConfig()

    def render(self, surface: PlottingSurface, region: Any, data: ComparisonData) -> None:
        raise NotImplementedError

    def _draw_pair(self, surface: PlottingSurface, region: Any, data: ComparisonData, axes) -> None:
        """Draw before markers, delta-coloured after markers and segments on the given axes."""
        cfg = self.config
        before = [data.before.axis(a) for a in axes]
        after = [data.after.axis(a) for a in axes]

        surface.scatter(
            region, before,
            color=cfg.before_color, size=cfg.before_size, alpha=cfg.before_alpha,
            label="Before",
        )
        surface.scatter(
            region, after,
            values=data.delta, scale=data.scale, size=cfg.after_size, alpha=cfg.after_alpha,
            label="After",
        )
        surface.segments(
            region, np.column_stack(before), np.column_stack(after),
            color=cfg.segment_color, alpha=cfg.segment_alpha, linewidth=cfg.segment_linewidth,
        )
        surface.colorbar(region, data.scale, label=cfg.colorbar_label)


class OverviewPanel(PanelRenderer):
    """3D view of both states, segments joining each point to its displaced position."""

    TITLE = "Point Cloud Movement (3D)"

    def render(self, surface, region, data):
        self._draw_pair(surface, region, data, ("x", "y", "z"))
        surface.set_labels(region, title=self.TITLE, xlabel="X", ylabel="Y", zlabel="Z")
        surface.legend(region)
        surface.set_equal_aspect(region)
        surface.set_view(region, self.config.view_elev, self.config.view_azim)


class HistogramPanel(PanelRenderer):
    """Histogram of delta with mean, std, max and min annotated."""

    TITLE = "Distribution of Point Movements"

    def stats_text(self, stats: SummaryStatistics) -> str:
        d = self.config.stats_decimals
        return "\n".join((
            f"Mean: {stats.mean:.{d}f}",
            f"Std: {stats.std:.{d}f}",
            f"Max: {stats.max:.{d}f}",
            f"Min: {stats.min:.{d}f}",
        ))

    def render(self, surface, region, data):
        cfg = self.config
        counts, edges = surface.histogram(
            region, data.delta, cfg.bins, color=cfg.hist_color, alpha=cfg.hist_alpha,
        )
        # keep the text block inside the plotted range, below the tallest bin
        x = edges[0] + cfg.text_x_fraction * (edges[-1] - edges[0])
        y = cfg.text_y_fraction * float(np.max(counts))
        surface.text(region, x, y, self.stats_text(data.stats))
        surface.set_labels(region, title=self.TITLE, xlabel="Delta (distance moved)", ylabel="Frequency")


class TopViewPanel(PanelRenderer):
    """Projection of both states onto the horizontal plane."""

    TITLE = "Top View"

    def render(self, surface, region, data):
        h1, h2 = self.config.top_view_axes
        self._draw_pair(surface, region, data, (h1, h2))
        surface.set_labels(
            region,
            title=f"{self.TITLE} ({h1.upper()}-{h2.upper()} plane)",
            xlabel=h1.upper(),
            ylabel=h2.upper(),
        )
        surface.legend(region)
        surface.set_equal_aspect(region)
