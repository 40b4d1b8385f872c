from __future__ import annotations

import logging
import math
from collections import Counter

import numpy as np

from loadreport.metrics.models import ByteMetrics, LatencyMetrics, Metrics
from loadreport.results import Results

logger = logging.getLogger(__name__)


def aggregate(results: Results) -> Metrics:
    """Reduce an ordered sequence of results into a single :class:`Metrics`.

    Percentiles use nearest-rank selection over every result, failed ones
    included: the value at sorted index ``ceil(q * n) - 1``. No interpolation.
    """
    n = len(results)
    if n == 0:
        logger.debug("Aggregating empty result set")
        return Metrics()

    first, last = results[0], results[-1]
    if last.timestamp_ns < first.timestamp_ns:
        logger.warning("Results are not ordered by timestamp; attack duration will be negative")

    latencies = np.sort(np.fromiter((r.latency_ns for r in results), dtype=np.int64, count=n))
    bytes_in = sum(r.bytes_in for r in results)
    bytes_out = sum(r.bytes_out for r in results)
    successes = sum(1 for r in results if r.ok)
    status_codes = Counter(str(r.status_code) for r in results)
    errors = sorted({r.error for r in results if r.error})

    metrics = Metrics(
        requests=n,
        duration_ns=last.timestamp_ns - first.timestamp_ns,
        wait_ns=last.latency_ns,
        latencies=LatencyMetrics(
            mean=sum(r.latency_ns for r in results) // n,
            p50=_nearest_rank(latencies, 0.50),
            p95=_nearest_rank(latencies, 0.95),
            p99=_nearest_rank(latencies, 0.99),
            max=int(latencies[-1]),
        ),
        bytes_in=ByteMetrics(total=bytes_in, mean=bytes_in / n),
        bytes_out=ByteMetrics(total=bytes_out, mean=bytes_out / n),
        success=successes / n,
        status_codes=dict(sorted(status_codes.items())),
        errors=tuple(errors),
    )
    logger.debug(
        "Aggregated %d results: success=%.4f, distinct errors=%d",
        n,
        metrics.success,
        len(errors),
    )
    return metrics


def _nearest_rank(sorted_values: np.ndarray, quantile: float) -> int:
    n = len(sorted_values)
    idx = min(n - 1, max(0, math.ceil(quantile * n) - 1))
    return int(sorted_values[idx])
