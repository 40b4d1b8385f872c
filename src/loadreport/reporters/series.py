from __future__ import annotations

from typing import Iterable

import numpy as np

from loadreport.durations import MILLISECOND, SECOND
from loadreport.results import Result


def format_float(value: float) -> str:
    if np.isnan(value):
        return "NaN"
    return np.format_float_positional(value, trim="-")


def elapsed_seconds(result: Result, first: Result) -> float:
    return (result.timestamp_ns - first.timestamp_ns) / SECOND


def latency_ms(result: Result) -> float:
    return result.latency_ns / MILLISECOND


def join_points(points: Iterable[Iterable[float]]) -> str:
    return ",".join("[" + ",".join(format_float(v) for v in point) + "]" for point in points)
