"""Point cloud container for index-paired comparisons.

A PointCloud is an ordered set of N points stored as three parallel
coordinate arrays. Two clouds are compared index by index, so the only
structural requirement is that all axes share the same length.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Tuple

import numpy as np


AXES = ("x", "y", "z")


class ShapeMismatch(ValueError):
    """Raised when coordinate arrays or point clouds differ in length."""


class EmptyInput(ValueError):
    """Raised when a comparison is requested on zero points."""


@dataclass(init=False, eq=False)
class PointCloud:
    """
    Ordered collection of 3D points.

    Attributes
    ----------
    x, y, z : np.ndarray
        1-D float64 coordinate arrays of equal length.
    """

    x: np.ndarray
    y: np.ndarray
    z: np.ndarray

    def __init__(self, x: Any, y: Any, z: Any):
        columns = []
        for name, values in zip(AXES, (x, y, z)):
            arr = np.asarray(values, dtype=np.float64)
            if arr.ndim != 1:
                raise ShapeMismatch(
                    f"Axis '{name}' must be 1-D, got shape {arr.shape}"
                )
            columns.append(arr)

        lengths = {name: len(col) for name, col in zip(AXES, columns)}
        if len(set(lengths.values())) != 1:
            raise ShapeMismatch(f"Coordinate axes differ in length: {lengths}")

        self.x, self.y, self.z = columns

    @classmethod
    def from_points(cls, points: Any) -> "PointCloud":
        """
        Build a PointCloud from an (N, 3) array-like or a sequence of 3-tuples.

        Raises
        ------
        ShapeMismatch
            If the input is not shaped (N, 3).
        """
        arr = np.asarray(points, dtype=np.float64)
        if arr.size == 0:
            arr = arr.reshape(0, 3)
        if arr.ndim != 2 or arr.shape[1] != 3:
            raise ShapeMismatch(f"Expected points shaped (N, 3), got {arr.shape}")
        return cls(arr[:, 0], arr[:, 1], arr[:, 2])

    @classmethod
    def coerce(cls, obj: Any) -> "PointCloud":
        """Return obj unchanged if it is a PointCloud, else build one from points."""
        if isinstance(obj, cls):
            return obj
        return cls.from_points(obj)

    def __len__(self) -> int:
        return len(self.x)

    def axis(self, name: str) -> np.ndarray:
        if name not in AXES:
            raise ValueError(f"Unknown axis '{name}'. Use one of {AXES}.")
        return getattr(self, name)

    def as_array(self) -> np.ndarray:
        """Return an (N, 3) copy of the coordinates."""
        return np.column_stack((self.x, self.y, self.z))

    def bounds(self) -> Tuple[np.ndarray, np.ndarray]:
        """Per-axis (mins, maxs). Raises EmptyInput for an empty cloud."""
        if len(self) == 0:
            raise EmptyInput("Cannot compute bounds of an empty point cloud")
        arr = self.as_array()
        return arr.min(axis=0), arr.max(axis=0)
