from __future__ import annotations

import json
from dataclasses import dataclass

from loadreport.metrics import aggregate
from loadreport.results import Results


@dataclass(frozen=True, slots=True)
class JSONReporter:
    def report(self, results: Results) -> bytes:
        return json.dumps(aggregate(results).to_dict(), ensure_ascii=False).encode("utf-8")
