from __future__ import annotations

import logging
from dataclasses import dataclass

from loadreport.reporters.series import elapsed_seconds, join_points, latency_ms
from loadreport.reporters.templates import CHART_TEMPLATE
from loadreport.results import Results

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class ChartReporter:
    def report(self, results: Results) -> bytes:
        ok: list[tuple[float, float]] = []
        failed: list[tuple[float, float]] = []
        if results:
            first = results[0]
            for r in results:
                point = (elapsed_seconds(r, first), latency_ms(r))
                (ok if r.ok else failed).append(point)
        page = CHART_TEMPLATE.substitute(series_ok=join_points(ok), series_error=join_points(failed))
        logger.debug("Rendered chart with %d ok and %d failed points", len(ok), len(failed))
        return page.encode("utf-8")
