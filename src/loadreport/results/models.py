from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence


@dataclass(frozen=True, slots=True)
class Result:
    timestamp_ns: int
    latency_ns: int
    bytes_in: int = 0
    bytes_out: int = 0
    status_code: int = 0
    error: str = ""

    @property
    def ok(self) -> bool:
        return not self.error


Results = Sequence[Result]
