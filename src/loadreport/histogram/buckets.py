from __future__ import annotations

from typing import Sequence

from loadreport.durations import format_duration, parse_duration
from loadreport.errors import ConfigError, ParseError

Buckets = tuple[int, ...]


def parse_buckets(text: str) -> Buckets:
    value = text.strip()
    if len(value) < 2 or value[0] != "[" or value[-1] != "]":
        msg = f"bad buckets: {text}"
        raise ConfigError(msg)
    inner = value[1:-1].strip()
    if not inner:
        msg = f"bad buckets: {text}"
        raise ConfigError(msg)

    buckets: list[int] = []
    for token in inner.split(","):
        token = token.strip()
        try:
            buckets.append(parse_duration(token))
        except ParseError as exc:
            msg = f"bad bucket {token!r} in {text}: {exc}"
            raise ParseError(msg, token) from exc
    return validate_buckets(buckets)


def format_buckets(buckets: Sequence[int]) -> str:
    return "[" + ",".join(format_duration(b) for b in buckets) + "]"


def validate_buckets(buckets: Sequence[int]) -> Buckets:
    values = tuple(int(b) for b in buckets)
    if not values:
        msg = "bad buckets: at least one boundary is required"
        raise ConfigError(msg)
    for low, high in zip(values, values[1:]):
        if high <= low:
            msg = (
                "bad buckets: boundaries must be strictly increasing, "
                f"got {format_duration(low)} before {format_duration(high)}"
            )
            raise ConfigError(msg)
    return values
