from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Sequence

from loadreport.durations import format_duration
from loadreport.histogram import Buckets, histogram, parse_buckets, validate_buckets
from loadreport.reporters.tabular import align_columns
from loadreport.results import Results

logger = logging.getLogger(__name__)

BAR_WIDTH = 75


@dataclass(frozen=True, slots=True)
class HistogramReporter:
    buckets: Buckets

    def __post_init__(self) -> None:
        object.__setattr__(self, "buckets", validate_buckets(self.buckets))

    @classmethod
    def from_text(cls, text: str) -> HistogramReporter:
        return cls(parse_buckets(text))

    def report(self, results: Results) -> bytes:
        total = len(results)
        rows: list[Sequence[str]] = [["Bucket", "", "#", "%", "Histogram"]]
        for i, count in enumerate(histogram(self.buckets, results)):
            ratio = count / total if total else 0.0
            low, high = self._bounds(i)
            rows.append([f"[{low},", f"{high}]", str(count), f"{ratio * 100:.2f}%", "#" * int(ratio * BAR_WIDTH)])
        logger.debug("Rendered histogram of %d results over %d buckets", total, len(self.buckets))
        return align_columns(rows).encode("utf-8")

    def _bounds(self, i: int) -> tuple[str, str]:
        low = format_duration(self.buckets[i])
        if i + 1 >= len(self.buckets):
            return low, "+Inf"
        return low, format_duration(self.buckets[i + 1])
