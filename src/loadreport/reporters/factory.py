from __future__ import annotations

from loadreport.config import ReportConfig, ReporterType
from loadreport.errors import ConfigError
from loadreport.reporters.base import Reporter
from loadreport.reporters.chart import ChartReporter
from loadreport.reporters.histogram import HistogramReporter
from loadreport.reporters.json_report import JSONReporter
from loadreport.reporters.plot import PlotReporter
from loadreport.reporters.text import TextReporter


def reporter_for(config: ReportConfig) -> Reporter:
    if config.reporter_type is ReporterType.TEXT:
        return TextReporter()
    if config.reporter_type is ReporterType.JSON:
        return JSONReporter()
    if config.reporter_type is ReporterType.HISTOGRAM:
        return HistogramReporter(config.buckets)
    if config.reporter_type is ReporterType.PLOT:
        return PlotReporter(asset=config.plot_asset)
    if config.reporter_type is ReporterType.CHART:
        return ChartReporter()
    msg = f"Unsupported reporter type: {config.reporter_type}"
    raise ConfigError(msg)
