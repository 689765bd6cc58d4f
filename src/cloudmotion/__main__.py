"""
Demo: compare a synthetic point cloud pair.

Example:
    python -m cloudmotion --points 200 --seed 42 --save movement.png
"""

from __future__ import annotations

import argparse
import logging
from typing import Optional, Sequence

import matplotlib.pyplot as plt

from .config import ReportConfig
from .logging_config import setup_logging
from .report import ComparisonReport
from .synthetic import make_sample_pair

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="cloudmotion",
        description="Visualize per-point movement between two synthetic point clouds.",
    )
    parser.add_argument("--points", type=int, default=100, help="Number of points")
    parser.add_argument("--seed", type=int, default=None, help="RNG seed")
    parser.add_argument("--noise", type=float, default=0.5, help="Displacement noise (std)")
    parser.add_argument("--bins", type=int, default=20, help="Histogram bin count")
    parser.add_argument("--cmap", default="jet", help="Matplotlib colormap for delta")
    parser.add_argument("--save", default=None, help="Write the figure to this path")
    parser.add_argument("--no-show", action="store_true", help="Do not open a window")
    parser.add_argument(
        "--log-level",
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level",
    )
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(getattr(logging, args.log_level))

    config = ReportConfig(bins=args.bins, cmap=args.cmap, save_path=args.save)
    before, after = make_sample_pair(args.points, seed=args.seed, noise=args.noise)
    logger.info(f"Generated sample pair with {len(before)} points")

    figure = ComparisonReport(config).run(before, after)
    if args.no_show:
        plt.close(figure)
    else:
        plt.show()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
