from __future__ import annotations

import logging
from typing import BinaryIO

from loadreport.errors import OutputError
from loadreport.reporters.base import Reporter
from loadreport.results import Results

logger = logging.getLogger(__name__)


def write_report(reporter: Reporter, results: Results, out: BinaryIO) -> int:
    data = reporter.report(results)
    try:
        out.write(data)
        out.flush()
    except OSError as exc:
        msg = f"failed to write {type(reporter).__name__} output: {exc}"
        raise OutputError(msg) from exc
    logger.debug("Wrote %d bytes from %s", len(data), type(reporter).__name__)
    return len(data)
