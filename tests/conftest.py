"""
Shared test fixtures for the cloudmotion test suite.

Forces the non-interactive Agg backend before pyplot is imported anywhere,
closes figures after every test, and provides a recording PlottingSurface
so panels can be checked without inspecting matplotlib internals.
"""

import matplotlib

matplotlib.use("Agg")

import matplotlib.pyplot as plt  # noqa: E402
import numpy as np  # noqa: E402
import pytest  # noqa: E402

from cloudmotion.pointcloud import PointCloud  # noqa: E402
from cloudmotion.surface import PlottingSurface  # noqa: E402
from cloudmotion.synthetic import make_sample_pair  # noqa: E402


@pytest.fixture(autouse=True)
def close_figures():
    yield
    plt.close("all")


@pytest.fixture
def sample_pair():
    return make_sample_pair(50, seed=7)


@pytest.fixture
def unit_moves():
    before = PointCloud.from_points([(0, 0, 0), (1, 0, 0), (0, 1, 0)])
    after = PointCloud.from_points([(1, 0, 0), (1, 1, 0), (0, 1, 1)])
    return before, after


class RecordingSurface(PlottingSurface):
    """PlottingSurface that records every call instead of drawing."""

    def __init__(self):
        self.calls = []
        self.regions = {}

    def _record(self, method, region=None, **kwargs):
        self.calls.append((method, region, kwargs))

    def calls_for(self, method, region=None):
        return [
            kw for m, r, kw in self.calls
            if m == method and (region is None or r == region)
        ]

    def create_figure(self, figsize, regions):
        self._record("create_figure", figsize=figsize, regions=dict(regions))
        self.regions = {name: name for name in regions}
        return dict(self.regions)

    def scatter(self, region, coords, *, color=None, values=None, scale=None,
                size=20.0, alpha=1.0, label=None):
        self._record("scatter", region, coords=[np.asarray(c) for c in coords], color=color,
                     values=values, scale=scale, size=size, alpha=alpha, label=label)

    def segments(self, region, starts, ends, *, color="black", alpha=1.0, linewidth=1.0):
        self._record("segments", region, starts=np.asarray(starts), ends=np.asarray(ends),
                     color=color, alpha=alpha, linewidth=linewidth)

    def colorbar(self, region, scale, label=""):
        self._record("colorbar", region, scale=scale, label=label)

    def histogram(self, region, values, bins, *, color="steelblue", alpha=1.0):
        counts, edges = np.histogram(values, bins=bins)
        self._record("histogram", region, values=np.asarray(values), bins=bins)
        return counts, edges

    def text(self, region, x, y, text, *, fontsize=10):
        self._record("text", region, x=x, y=y, text=text)

    def set_labels(self, region, *, title=None, xlabel=None, ylabel=None, zlabel=None):
        self._record("set_labels", region, title=title, xlabel=xlabel, ylabel=ylabel, zlabel=zlabel)

    def legend(self, region):
        self._record("legend", region)

    def set_equal_aspect(self, region):
        self._record("set_equal_aspect", region)

    def set_view(self, region, elev, azim):
        self._record("set_view", region, elev=elev, azim=azim)

    def finalize(self):
        self._record("finalize")
        return self

    def save(self, path, dpi=150):
        self._record("save", path=path, dpi=dpi)
        return path


@pytest.fixture
def recording_surface():
    return RecordingSurface()
