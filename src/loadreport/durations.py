from __future__ import annotations

import re

from loadreport.errors import ParseError

NANOSECOND = 1
MICROSECOND = 1_000 * NANOSECOND
MILLISECOND = 1_000 * MICROSECOND
SECOND = 1_000 * MILLISECOND
MINUTE = 60 * SECOND
HOUR = 60 * MINUTE

_MAX_NS = 2**63 - 1

_UNITS: dict[str, int] = {
    "ns": NANOSECOND,
    "us": MICROSECOND,
    "µs": MICROSECOND,  # micro sign
    "μs": MICROSECOND,  # greek mu
    "ms": MILLISECOND,
    "s": SECOND,
    "m": MINUTE,
    "h": HOUR,
}

_GROUP = re.compile(r"(?P<whole>\d*)(?:\.(?P<frac>\d*))?(?P<unit>[^\d.]*)")


def parse_duration(text: str) -> int:
    s = text
    sign = 1
    if s[:1] in ("-", "+"):
        if s[0] == "-":
            sign = -1
        s = s[1:]
    if s == "0":
        return 0
    if not s:
        msg = f"invalid duration {text!r}"
        raise ParseError(msg, text)

    total = 0
    pos = 0
    while pos < len(s):
        match = _GROUP.match(s, pos)
        whole, frac, unit = match.group("whole"), match.group("frac"), match.group("unit")
        if not whole and not frac:
            msg = f"invalid duration {text!r}"
            raise ParseError(msg, text)
        if not unit:
            msg = f"missing unit in duration {text!r}"
            raise ParseError(msg, text)
        scale = _UNITS.get(unit)
        if scale is None:
            msg = f"unknown unit {unit!r} in duration {text!r}"
            raise ParseError(msg, text)
        total += int(whole or "0") * scale
        if frac:
            total += int(frac) * scale // 10 ** len(frac)
        pos = match.end()

    if total > _MAX_NS + (sign < 0):
        msg = f"invalid duration {text!r}: out of range"
        raise ParseError(msg, text)
    return sign * total


def format_duration(ns: int) -> str:
    if ns == 0:
        return "0s"
    sign = "-" if ns < 0 else ""
    u = abs(ns)

    if u < SECOND:
        if u < MICROSECOND:
            return f"{sign}{u}ns"
        if u < MILLISECOND:
            whole, frac = divmod(u, MICROSECOND)
            return f"{sign}{whole}{_fraction(frac, 3)}µs"
        whole, frac = divmod(u, MILLISECOND)
        return f"{sign}{whole}{_fraction(frac, 6)}ms"

    secs, frac = divmod(u, SECOND)
    text = f"{secs % 60}{_fraction(frac, 9)}s"
    minutes = secs // 60
    if minutes:
        hours, minutes = divmod(minutes, 60)
        text = f"{minutes}m{text}"
        if hours:
            text = f"{hours}h{text}"
    return sign + text


def _fraction(value: int, digits: int) -> str:
    if not value:
        return ""
    return "." + str(value).zfill(digits).rstrip("0")
