"""Tests for ReportConfig validation."""

import pytest

from cloudmotion.config import ReportConfig


class TestReportConfig:

    def test_defaults(self):
        cfg = ReportConfig()
        assert cfg.bins == 20
        assert cfg.stats_decimals == 3
        assert cfg.report_decimals == 4
        assert cfg.top_view_axes == ("x", "y")
        assert cfg.save_path is None

    def test_top_view_axes_normalized_to_tuple(self):
        assert ReportConfig(top_view_axes=["x", "z"]).top_view_axes == ("x", "z")

    @pytest.mark.parametrize("kwargs", [
        {"bins": 0},
        {"before_alpha": 1.5},
        {"segment_alpha": -0.1},
        {"text_x_fraction": 1.0},
        {"top_view_axes": ("x", "x")},
        {"top_view_axes": ("x", "w")},
        {"figsize": (0, 5)},
        {"dpi": 0},
        {"report_decimals": -1},
    ])
    def test_invalid_values_raise(self, kwargs):
        with pytest.raises(ValueError):
            ReportConfig(**kwargs)
