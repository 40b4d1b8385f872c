from __future__ import annotations

from loadreport.metrics.aggregator import aggregate
from loadreport.metrics.models import ByteMetrics, LatencyMetrics, Metrics

__all__ = ["ByteMetrics", "LatencyMetrics", "Metrics", "aggregate"]
