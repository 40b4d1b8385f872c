from __future__ import annotations

from loadreport.histogram.buckets import Buckets, format_buckets, parse_buckets, validate_buckets
from loadreport.histogram.counts import histogram

__all__ = ["Buckets", "format_buckets", "histogram", "parse_buckets", "validate_buckets"]
