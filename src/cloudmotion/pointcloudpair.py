"""
PointCloudPair for comparing two index-paired point clouds.

This module provides tools for:
- Validating that two point clouds correspond index by index
- Computing per-point displacement vectors (after - before)
- Computing per-point displacement magnitudes ("delta")
- Exporting the per-point comparison as a pandas DataFrame

Conventions:
- "before" is the reference state, "after" the displaced state
- Displacements are computed as after - before
- Index i in "before" corresponds to index i in "after"; no
  correspondence search is performed
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any

import numpy as np
import pandas as pd

from .pointcloud import AXES, PointCloud, ShapeMismatch

logger = logging.getLogger(__name__)


def _check_same_length(before: PointCloud, after: PointCloud) -> None:
    """Raise ShapeMismatch unless every axis of both clouds has the same length."""
    lengths = {
        f"{label}.{axis}": len(cloud.axis(axis))
        for label, cloud in (("before", before), ("after", after))
        for axis in AXES
    }
    if len(set(lengths.values())) != 1:
        raise ShapeMismatch(f"Point clouds differ in length: {lengths}")


def _displacement_vectors(before: PointCloud, after: PointCloud) -> np.ndarray:
    return np.column_stack((
        after.x - before.x,
        after.y - before.y,
        after.z - before.z,
    ))


def _magnitude(vectors: np.ndarray) -> np.ndarray:
    # hypot avoids under/overflow of the squared components
    return np.hypot(np.hypot(vectors[:, 0], vectors[:, 1]), vectors[:, 2])


def compute_delta(before: Any, after: Any) -> np.ndarray:
    """
    Compute the per-point displacement magnitude between two point clouds.

    Parameters
    ----------
    before, after : PointCloud or array-like (N, 3)
        Index-paired point clouds.

    Returns
    -------
    np.ndarray
        Euclidean distance ||after[i] - before[i]|| for every index, in
        input order.

    Raises
    ------
    ShapeMismatch
        If the two clouds differ in length on any axis.
    """
    return PointCloudPair(before, after).compute_displacement().delta


@dataclass(frozen=True, eq=False)
class DisplacementResult:
    """
    Per-point displacement between two point clouds.

    Attributes
    ----------
    vectors : np.ndarray
        (N, 3) component differences after - before. Read-only.
    delta : np.ndarray
        (N,) Euclidean norm of each vector. Read-only.
    """

    vectors: np.ndarray
    delta: np.ndarray

    def __post_init__(self):
        self.vectors.setflags(write=False)
        self.delta.setflags(write=False)

    def __len__(self) -> int:
        return len(self.delta)


class PointCloudPair:
    """
    Pair of index-aligned point clouds for displacement analysis.

    Attributes
    ----------
    before : PointCloud
        Reference state.
    after : PointCloud
        Displaced state.

    Notes
    -----
    Results are recomputed on every call; nothing derived from the clouds
    is cached on the pair.
    """

    def __init__(self, before: Any, after: Any):
        self.before = PointCloud.coerce(before)
        self.after = PointCloud.coerce(after)
        _check_same_length(self.before, self.after)

    def __len__(self) -> int:
        return len(self.before)

    def compute_displacement(self) -> DisplacementResult:
        """
        Compute displacement vectors and magnitudes for every index.

        Returns
        -------
        DisplacementResult
        """
        vectors = _displacement_vectors(self.before, self.after)
        delta = _magnitude(vectors)
        logger.debug(f"Computed displacement for {len(delta)} points")
        return DisplacementResult(vectors=vectors, delta=delta)

    def mean_shift(self) -> np.ndarray:
        """
        Signed mean displacement vector (systematic offset between states).

        Returns NaN components for an empty pair.
        """
        vectors = _displacement_vectors(self.before, self.after)
        if len(vectors) == 0:
            return np.full(3, np.nan)
        return vectors.mean(axis=0)

    def to_dataframe(self) -> pd.DataFrame:
        """
        Tabulate the comparison with one row per point index.

        Columns: x_before, y_before, z_before, x_after, y_after, z_after,
        dx, dy, dz, delta.
        """
        result = self.compute_displacement()
        columns = {}
        for label, cloud in (("before", self.before), ("after", self.after)):
            for axis in AXES:
                columns[f"{axis}_{label}"] = cloud.axis(axis)
        for i, axis in enumerate(AXES):
            columns[f"d{axis}"] = result.vectors[:, i]
        columns["delta"] = result.delta
        return pd.DataFrame(columns)
