from __future__ import annotations

from typing import Protocol

from loadreport.results import Results


class Reporter(Protocol):
    def report(self, results: Results) -> bytes:
        ...
