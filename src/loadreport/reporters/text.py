from __future__ import annotations

import logging
from dataclasses import dataclass

from loadreport.durations import format_duration
from loadreport.metrics import Metrics, aggregate
from loadreport.reporters.tabular import align_columns
from loadreport.results import Results

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class TextReporter:
    def report(self, results: Results) -> bytes:
        metrics = aggregate(results)
        out = align_columns(_rows(metrics), padchar="\t") + "Error Set:\n"
        out += "".join(f"{err}\n" for err in metrics.errors)
        logger.debug("Rendered text report for %d results", metrics.requests)
        return out.encode("utf-8")


def _rows(m: Metrics) -> list[list[str]]:
    lat = m.latencies
    codes = "  ".join(f"{code}:{count}" for code, count in sorted(m.status_codes.items()))
    return [
        ["Requests", "[total]", str(m.requests)],
        [
            "Duration",
            "[total, attack, wait]",
            ", ".join(format_duration(d) for d in (m.total_ns, m.duration_ns, m.wait_ns)),
        ],
        [
            "Latencies",
            "[mean, 50, 95, 99, max]",
            ", ".join(format_duration(d) for d in (lat.mean, lat.p50, lat.p95, lat.p99, lat.max)),
        ],
        ["Bytes In", "[total, mean]", f"{m.bytes_in.total}, {m.bytes_in.mean:.2f}"],
        ["Bytes Out", "[total, mean]", f"{m.bytes_out.total}, {m.bytes_out.mean:.2f}"],
        ["Success", "[ratio]", f"{m.success * 100:.2f}%"],
        ["Status Codes", "[code:count]", codes],
    ]
