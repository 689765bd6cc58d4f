"""Rendering and report configuration."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Tuple, Union

from .pointcloud import AXES


@dataclass
class ReportConfig:
    """Configuration for the point cloud comparison figure and report"""

    # Figure
    figsize: Tuple[float, float] = (16.0, 10.0)
    cmap: str = "jet"
    colorbar_label: str = "Delta"

    # "before" markers: uniform colour, semi-transparent
    before_color: str = "gray"
    before_alpha: float = 0.3
    before_size: float = 20.0

    # "after" markers: coloured by delta, opaque
    after_alpha: float = 1.0
    after_size: float = 20.0

    # Connecting segments before[i] -> after[i]
    segment_color: str = "black"
    segment_alpha: float = 0.2
    segment_linewidth: float = 0.5

    # Histogram
    bins: int = 20
    hist_color: str = "steelblue"
    hist_alpha: float = 0.7
    stats_decimals: int = 3  # histogram text block
    text_x_fraction: float = 0.6  # of the bin range
    text_y_fraction: float = 0.8  # of the tallest bin

    # 3D overview
    view_elev: float = 20.0
    view_azim: float = 45.0

    # Top view: the two horizontal axes
    top_view_axes: Tuple[str, str] = ("x", "y")

    # Console report
    report_decimals: int = 4

    # Output
    save_path: Optional[Union[str, Path]] = None
    dpi: int = 150

    def __post_init__(self):
        if self.bins < 1:
            raise ValueError(f"bins must be >= 1, got {self.bins}")
        for name in ("before_alpha", "after_alpha", "segment_alpha", "hist_alpha"):
            value = getattr(self, name)
            if not 0.0 <= value <= 1.0:
                raise ValueError(f"{name} must be within [0, 1], got {value}")
        for name in ("text_x_fraction", "text_y_fraction"):
            value = getattr(self, name)
            if not 0.0 < value < 1.0:
                raise ValueError(f"{name} must be within (0, 1), got {value}")
        if len(self.figsize) != 2 or min(self.figsize) <= 0:
            raise ValueError(f"figsize must be two positive numbers, got {self.figsize}")
        axes = tuple(self.top_view_axes)
        if len(axes) != 2 or axes[0] == axes[1] or not set(axes) <= set(AXES):
            raise ValueError(
                f"top_view_axes must be two distinct names from {AXES}, got {self.top_view_axes}"
            )
        self.top_view_axes = axes
        if self.stats_decimals < 0 or self.report_decimals < 0:
            raise ValueError("Decimal places must be non-negative")
        if self.dpi <= 0:
            raise ValueError(f"dpi must be positive, got {self.dpi}")
