"""Summary statistics of timing measurements and their CSV report."""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Sequence

import numpy as np

logger = logging.getLogger(__name__)

_HEADER = "Name;Mean;Variance;Standard Deviation;Number of Measurements;\n"


@dataclass(frozen=True)
class TimingStats:
    """Mean, population variance, standard deviation and count of measurements."""

    mean: float
    variance: float
    std_dev: float
    count: int


def summarize(values: Sequence[float]) -> TimingStats:
    """Summarise measurements; the sum is accumulated in single precision."""
    if not values:
        raise ValueError("cannot summarise an empty list of measurements")
    if len(values) == 1:
        return TimingStats(float(values[0]), 0.0, 0.0, 1)
    total = 0.0
    for value in values:
        total = float(np.float32(total + value))
    mean = total / len(values)
    variance = sum((mean - value) ** 2 for value in values) / len(values)
    return TimingStats(mean, variance, math.sqrt(variance), len(values))


def write_timing_report(
    times: Mapping[str, Sequence[float]],
    output_dir: str | Path,
    filename: str = "times.csv",
) -> Path:
    """Write one semicolon-separated row per timer, sorted by name, and return the path."""
    path = Path(output_dir) / filename
    with path.open("w", encoding="utf-8") as report:
        report.write(_HEADER)
        for name in sorted(times):
            stats = summarize(times[name])
            report.write(
                f"{name};{stats.mean:f};{stats.variance:f};{stats.std_dev:f};{stats.count}\n"
            )
    logger.info("Runtime saved to %s", path)
    return path