"""Synthetic point cloud pairs for demos and tests."""

from __future__ import annotations

from typing import Optional, Sequence, Tuple

import numpy as np

from .pointcloud import PointCloud


def make_sample_pair(
    n_points: int = 100,
    *,
    seed: Optional[int] = None,
    spread: float = 10.0,
    noise: float = 0.5,
    drift: Sequence[float] = (0.0, 0.0, 0.0),
) -> Tuple[PointCloud, PointCloud]:
    """
    Generate a random "before" cloud and a displaced "after" cloud.

    Parameters
    ----------
    n_points : int
        Number of points in each cloud.
    seed : int | None
        RNG seed for reproducibility.
    spread : float
        Points are drawn uniformly from [0, spread) on every axis.
    noise : float
        Standard deviation of the per-point Gaussian displacement.
    drift : sequence of 3 floats
        Rigid offset added to every displaced point.
    """
    if n_points < 0:
        raise ValueError(f"n_points must be non-negative, got {n_points}")
    if noise < 0:
        raise ValueError(f"noise must be non-negative, got {noise}")
    offset = np.asarray(drift, dtype=float)
    if offset.shape != (3,):
        raise ValueError(f"drift must have three components, got {drift}")

    rng = np.random.default_rng(seed)
    before = rng.random((n_points, 3)) * spread
    after = before + rng.normal(0.0, noise, size=(n_points, 3)) + offset
    return PointCloud.from_points(before), PointCloud.from_points(after)
