from __future__ import annotations

import functools
import logging
import math
from dataclasses import dataclass

from loadreport.reporters.series import elapsed_seconds, join_points, latency_ms
from loadreport.reporters.templates import PLOT_TEMPLATE
from loadreport.results import Results

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class PlotReporter:
    asset: str | None = None

    def report(self, results: Results) -> bytes:
        points = []
        if results:
            first = results[0]
            for r in results:
                ms = latency_ms(r)
                if r.ok:
                    points.append((elapsed_seconds(r, first), math.nan, ms))
                else:
                    points.append((elapsed_seconds(r, first), ms, math.nan))
        asset = self.asset if self.asset is not None else plotly_bundle()
        page = PLOT_TEMPLATE.substitute(asset=asset, series=join_points(points))
        logger.debug("Rendered plot of %d points (%d bytes)", len(points), len(page))
        return page.encode("utf-8")


@functools.cache
def plotly_bundle() -> str:
    from plotly.offline import get_plotlyjs

    return get_plotlyjs()
