from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping


@dataclass(frozen=True, slots=True)
class LatencyMetrics:
    mean: int = 0
    p50: int = 0
    p95: int = 0
    p99: int = 0
    max: int = 0


@dataclass(frozen=True, slots=True)
class ByteMetrics:
    total: int = 0
    mean: float = 0.0


@dataclass(frozen=True, slots=True)
class Metrics:
    requests: int = 0
    duration_ns: int = 0
    wait_ns: int = 0
    latencies: LatencyMetrics = field(default_factory=LatencyMetrics)
    bytes_in: ByteMetrics = field(default_factory=ByteMetrics)
    bytes_out: ByteMetrics = field(default_factory=ByteMetrics)
    success: float = 0.0
    status_codes: Mapping[str, int] = field(default_factory=dict)
    errors: tuple[str, ...] = ()

    @property
    def total_ns(self) -> int:
        return self.duration_ns + self.wait_ns

    def to_dict(self) -> Mapping[str, Any]:
        return {
            "requests": self.requests,
            "duration": self.duration_ns,
            "wait": self.wait_ns,
            "latencies": {
                "mean": self.latencies.mean,
                "p50": self.latencies.p50,
                "p95": self.latencies.p95,
                "p99": self.latencies.p99,
                "max": self.latencies.max,
            },
            "bytes_in": {
                "total": self.bytes_in.total,
                "mean": self.bytes_in.mean,
            },
            "bytes_out": {
                "total": self.bytes_out.total,
                "mean": self.bytes_out.mean,
            },
            "success": self.success,
            "status_codes": {code: self.status_codes[code] for code in sorted(self.status_codes)},
            "errors": sorted(self.errors),
        }
