"""
Point cloud movement comparison: analysis, figure and console report.

The pipeline runs one direction only:
1. Validate that the two clouds are index-paired and non-empty
2. Compute displacement vectors and delta magnitudes
3. Summarize delta and bind a colour scale to [0, max(delta)]
4. Render the 3D overview, histogram and top view into one figure
5. Print the fixed-format statistics report
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Optional

from .colorscale import ColorScale
from .config import ReportConfig
from .panels import ComparisonData, HistogramPanel, OverviewPanel, TopViewPanel
from .pointcloud import EmptyInput
from .pointcloudpair import PointCloudPair
from .summary import SummaryStatistics, summarize
from .surface import MatplotlibSurface, PlottingSurface, RegionSpec

logger = logging.getLogger(__name__)

REPORT_HEADER = "=== Point Cloud Movement Analysis ==="
REPORT_FOOTER = "=" * 36

# Overview takes the whole left column, i.e. half of the figure.
LAYOUT = {
    "overview": RegionSpec(row=0, col=0, rowspan=2, projection="3d"),
    "histogram": RegionSpec(row=0, col=1),
    "top_view": RegionSpec(row=1, col=1),
}


def format_report(stats: SummaryStatistics, decimals: int = 4) -> str:
    """Format the console statistics block."""
    d = decimals
    return "\n".join((
        REPORT_HEADER,
        f"Total points: {stats.count}",
        f"Mean delta: {stats.mean:.{d}f}",
        f"Median delta: {stats.median:.{d}f}",
        f"Std deviation: {stats.std:.{d}f}",
        f"Max delta: {stats.max:.{d}f}",
        f"Min delta: {stats.min:.{d}f}",
        REPORT_FOOTER,
    ))


class ComparisonReport:
    """
    Compare two index-paired point clouds and visualize how each point moved.

    Parameters
    ----------
    config : ReportConfig, optional
        Rendering and report options. Defaults to ``ReportConfig()``.
    surface_factory : callable, optional
        Zero-argument callable returning a fresh PlottingSurface for each
        rendering. Defaults to MatplotlibSurface.

    Notes
    -----
    Nothing is kept between calls; each run builds its own pair,
    statistics, colour scale and surface.
    """

    def __init__(
        self,
        config: Optional[ReportConfig] = None,
        surface_factory: Callable[[], PlottingSurface] = MatplotlibSurface,
    ):
        self.config = config if config is not None else ReportConfig()
        self.surface_factory = surface_factory
        self.panels = {
            "overview": OverviewPanel(self.config),
            "histogram": HistogramPanel(self.config),
            "top_view": TopViewPanel(self.config),
        }

    def analyze(self, before: Any, after: Any) -> ComparisonData:
        """
        Validate inputs and compute displacement, statistics and colour scale.

        Raises
        ------
        ShapeMismatch
            If the clouds differ in length on any axis.
        EmptyInput
            If the clouds contain no points.
        """
        pair = PointCloudPair(before, after)
        if len(pair) == 0:
            raise EmptyInput("Point clouds contain no points")

        logger.info(f"Comparing {len(pair)} point pairs")
        displacement = pair.compute_displacement()
        stats = summarize(displacement.delta)
        scale = ColorScale.from_delta(displacement.delta, cmap=self.config.cmap)
        logger.debug(f"Delta statistics: {stats}")

        return ComparisonData(
            before=pair.before,
            after=pair.after,
            displacement=displacement,
            stats=stats,
            scale=scale,
        )

    def render(self, data: ComparisonData) -> Any:
        """Draw the three panels into a new figure and return it."""
        surface = self.surface_factory()
        regions = surface.create_figure(self.config.figsize, LAYOUT)
        for name, panel in self.panels.items():
            logger.debug(f"Rendering {name} panel")
            panel.render(surface, regions[name], data)

        figure = surface.finalize()
        if self.config.save_path is not None:
            surface.save(self.config.save_path, dpi=self.config.dpi)
        return figure

    def run(self, before: Any, after: Any, verbose: bool = True) -> Any:
        """
        Analyze, render and report a comparison.

        Parameters
        ----------
        before, after : PointCloud or array-like (N, 3)
            Index-paired point clouds.
        verbose : bool
            Print the statistics report.

        Returns
        -------
        The rendered figure (a matplotlib Figure with the default surface).
        """
        data = self.analyze(before, after)
        figure = self.render(data)
        if verbose:
            print(format_report(data.stats, self.config.report_decimals))
        return figure


def compare_point_clouds(
    before: Any,
    after: Any,
    config: Optional[ReportConfig] = None,
    verbose: bool = True,
) -> Any:
    """Run a full comparison with a default ComparisonReport."""
    return ComparisonReport(config).run(before, after, verbose=verbose)
