from __future__ import annotations

from loadreport.results.models import Result, Results

__all__ = ["Result", "Results"]
