from __future__ import annotations

from loadreport.reporters.base import Reporter
from loadreport.reporters.chart import ChartReporter
from loadreport.reporters.factory import reporter_for
from loadreport.reporters.histogram import HistogramReporter
from loadreport.reporters.json_report import JSONReporter
from loadreport.reporters.output import write_report
from loadreport.reporters.plot import PlotReporter
from loadreport.reporters.text import TextReporter

__all__ = [
    "ChartReporter",
    "HistogramReporter",
    "JSONReporter",
    "PlotReporter",
    "Reporter",
    "TextReporter",
    "reporter_for",
    "write_report",
]
