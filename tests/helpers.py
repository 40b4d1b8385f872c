from __future__ import annotations

from loadreport.durations import MILLISECOND, SECOND
from loadreport.results import Result

T0 = 1_700_000_000 * SECOND


def make_result(
    offset_ms: float,
    latency_ms: float,
    error: str = "",
    status_code: int = 200,
    bytes_in: int = 0,
    bytes_out: int = 0,
) -> Result:
    return Result(
        timestamp_ns=T0 + int(offset_ms * MILLISECOND),
        latency_ns=int(latency_ms * MILLISECOND),
        bytes_in=bytes_in,
        bytes_out=bytes_out,
        status_code=status_code,
        error=error,
    )
