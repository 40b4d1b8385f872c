from __future__ import annotations

import logging

from loadreport.config import ReportConfig, ReporterType
from loadreport.errors import ConfigError, OutputError, ParseError, ReportError
from loadreport.histogram import format_buckets, histogram, parse_buckets
from loadreport.metrics import Metrics, aggregate
from loadreport.reporters import (
    ChartReporter,
    HistogramReporter,
    JSONReporter,
    PlotReporter,
    Reporter,
    TextReporter,
    reporter_for,
    write_report,
)
from loadreport.results import Result, Results

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "ChartReporter",
    "ConfigError",
    "HistogramReporter",
    "JSONReporter",
    "Metrics",
    "OutputError",
    "ParseError",
    "PlotReporter",
    "ReportConfig",
    "ReportError",
    "Reporter",
    "ReporterType",
    "Result",
    "Results",
    "TextReporter",
    "aggregate",
    "format_buckets",
    "histogram",
    "parse_buckets",
    "reporter_for",
    "write_report",
]
