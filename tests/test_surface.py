"""Tests for the matplotlib plotting surface."""

import numpy as np
import pytest
from matplotlib.figure import Figure

from cloudmotion.colorscale import ColorScale
from cloudmotion.surface import MatplotlibSurface, RegionSpec


REGIONS = {
    "space": RegionSpec(row=0, col=0, rowspan=2, projection="3d"),
    "flat": RegionSpec(row=0, col=1),
    "other": RegionSpec(row=1, col=1),
}


@pytest.fixture
def surface():
    return MatplotlibSurface()


class TestMatplotlibSurface:

    def test_create_figure_builds_regions(self, surface):
        regions = surface.create_figure((8, 6), REGIONS)
        assert set(regions) == {"space", "flat", "other"}
        assert regions["space"].name == "3d"
        assert regions["flat"].name == "rectilinear"
        assert isinstance(surface.finalize(), Figure)

    def test_overview_region_spans_half_the_figure(self, surface):
        regions = surface.create_figure((8, 6), REGIONS)
        spec = regions["space"].get_subplotspec()
        assert spec.rowspan == range(0, 2)
        assert spec.colspan == range(0, 1)

    def test_drawing_before_figure_raises(self, surface):
        with pytest.raises(RuntimeError, match="create_figure"):
            surface.finalize()

    def test_scatter_by_values_requires_scale(self, surface):
        regions = surface.create_figure((8, 6), REGIONS)
        with pytest.raises(ValueError):
            surface.scatter(regions["flat"], [np.zeros(2), np.zeros(2)], values=np.zeros(2))

    def test_segments_added_as_collections(self, surface):
        regions = surface.create_figure((8, 6), REGIONS)
        starts = np.zeros((3, 2))
        ends = np.ones((3, 2))
        surface.segments(regions["flat"], starts, ends, alpha=0.2, linewidth=0.5)
        assert len(regions["flat"].collections) == 1
        assert len(regions["flat"].collections[0].get_segments()) == 3

    def test_degenerate_colorbar_does_not_fail(self, surface):
        regions = surface.create_figure((8, 6), REGIONS)
        scale = ColorScale(0.0, 0.0)
        surface.colorbar(regions["flat"], scale, label="Delta")
        surface.colorbar(regions["space"], scale, label="Delta")
        surface.finalize()

    def test_histogram_returns_counts_and_edges(self, surface):
        regions = surface.create_figure((8, 6), REGIONS)
        counts, edges = surface.histogram(regions["flat"], np.arange(10.0), bins=5)
        assert counts.sum() == 10
        assert len(edges) == 6

    def test_equal_aspect_3d_uses_cubic_limits(self, surface):
        regions = surface.create_figure((8, 6), REGIONS)
        ax = regions["space"]
        surface.scatter(ax, [np.array([0.0, 10.0]), np.array([0.0, 1.0]), np.array([0.0, 2.0])], color="gray")
        surface.set_equal_aspect(ax)
        spans = [np.diff(lim)[0] for lim in (ax.get_xlim3d(), ax.get_ylim3d(), ax.get_zlim3d())]
        assert spans[0] == pytest.approx(spans[1])
        assert spans[1] == pytest.approx(spans[2])

    def test_save_writes_file(self, surface, tmp_path):
        surface.create_figure((4, 3), {"flat": RegionSpec(row=0, col=0)})
        surface.finalize()
        out = surface.save(tmp_path / "nested" / "fig.png", dpi=50)
        assert out.exists()
        assert out.stat().st_size > 0
