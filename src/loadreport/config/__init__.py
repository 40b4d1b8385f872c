from __future__ import annotations

from loadreport.config.models import ReportConfig, ReporterType

__all__ = ["ReportConfig", "ReporterType"]
