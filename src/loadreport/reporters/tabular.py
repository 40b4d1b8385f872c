from __future__ import annotations

from typing import Sequence


def align_columns(
    rows: Sequence[Sequence[str]],
    padding: int = 2,
    padchar: str = " ",
    tabwidth: int = 8,
) -> str:
    widths: list[int] = []
    for row in rows:
        for col, cell in enumerate(row[:-1]):
            if col == len(widths):
                widths.append(0)
            widths[col] = max(widths[col], len(cell) + padding)
    if padchar == "\t":
        widths = [-(-w // tabwidth) * tabwidth for w in widths]

    lines: list[str] = []
    for row in rows:
        parts: list[str] = []
        for col, cell in enumerate(row[:-1]):
            if padchar == "\t":
                parts.append(cell + "\t" * -(-(widths[col] - len(cell)) // tabwidth))
            else:
                parts.append(cell.ljust(widths[col], padchar))
        if row:
            parts.append(row[-1])
        lines.append("".join(parts) + "\n")
    return "".join(lines)
