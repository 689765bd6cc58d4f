"""Descriptive statistics of displacement magnitudes."""

from __future__ import annotations

import logging
from dataclasses import asdict, dataclass
from typing import Any, Dict

import numpy as np
import pandas as pd
from scipy import stats

from .pointcloud import EmptyInput

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SummaryStatistics:
    """
    Summary of a delta sequence.

    ``std`` is the sample standard deviation (N - 1 denominator) and is
    0.0 for a single value. ``nmad`` is the normalized median absolute
    deviation (1.4826 * MAD).
    """

    count: int
    mean: float
    median: float
    std: float
    min: float
    max: float
    q25: float
    q75: float
    iqr: float
    nmad: float

    def as_dict(self) -> Dict[str, Any]:
        return asdict(self)

    def to_dataframe(self) -> pd.DataFrame:
        """Return the statistics as a one-row DataFrame."""
        return pd.DataFrame([self.as_dict()])


def summarize(delta: Any) -> SummaryStatistics:
    """
    Compute descriptive statistics for a 1D array of displacement magnitudes.

    Parameters
    ----------
    delta : array-like
        Displacement magnitudes.

    Returns
    -------
    SummaryStatistics

    Raises
    ------
    EmptyInput
        If ``delta`` has no values.
    """
    data = np.asarray(delta, dtype=np.float64).ravel()
    if data.size == 0:
        raise EmptyInput("Cannot summarize an empty delta sequence")

    minimum = float(np.min(data))
    maximum = float(np.max(data))
    # summation rounding can push the mean of equal values past the max
    mean = float(np.clip(np.mean(data), minimum, maximum))
    median = float(np.median(data))

    if data.size > 1:
        std = float(np.std(data, ddof=1))
    else:
        logger.warning("Single delta value; standard deviation reported as 0")
        std = 0.0

    q25, q75 = np.percentile(data, [25, 75])
    nmad = float(stats.median_abs_deviation(data, scale="normal"))

    return SummaryStatistics(
        count=int(data.size),
        mean=mean,
        median=median,
        std=std,
        min=minimum,
        max=maximum,
        q25=float(q25),
        q75=float(q75),
        iqr=float(q75 - q25),
        nmad=nmad,
    )
