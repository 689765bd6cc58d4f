"""Point cloud movement analysis and visualization.

This package provides tools for:
- Computing per-point displacement between two index-paired point clouds
- Summarizing displacement magnitudes statistically
- Rendering a 3D overview, a histogram and a top view of the movement
- Printing a fixed-format statistics report

Example usage:
    from cloudmotion import PointCloud, compare_point_clouds

    before = PointCloud.from_points([(0, 0, 0), (1, 0, 0)])
    after = PointCloud.from_points([(0, 0, 1), (1, 1, 0)])
    fig = compare_point_clouds(before, after)
"""

__version__ = "0.1.0"

# Data model
from .pointcloud import PointCloud, ShapeMismatch, EmptyInput
from .pointcloudpair import PointCloudPair, DisplacementResult, compute_delta

# Statistics and colour
from .summary import SummaryStatistics, summarize
from .colorscale import ColorScale

# Rendering
from .config import ReportConfig
from .surface import PlottingSurface, MatplotlibSurface, RegionSpec
from .panels import ComparisonData, OverviewPanel, HistogramPanel, TopViewPanel
from .report import ComparisonReport, compare_point_clouds, format_report

__all__ = [
    # Version
    "__version__",
    # Data model
    "PointCloud",
    "PointCloudPair",
    "DisplacementResult",
    "compute_delta",
    # Errors
    "ShapeMismatch",
    "EmptyInput",
    # Statistics
    "SummaryStatistics",
    "summarize",
    "ColorScale",
    # Rendering
    "ReportConfig",
    "PlottingSurface",
    "MatplotlibSurface",
    "RegionSpec",
    "ComparisonData",
    "OverviewPanel",
    "HistogramPanel",
    "TopViewPanel",
    # Report
    "ComparisonReport",
    "compare_point_clouds",
    "format_report",
]
