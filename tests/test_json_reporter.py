from __future__ import annotations

import json

from loadreport.durations import MILLISECOND
from loadreport.reporters import JSONReporter

from helpers import make_result


def test_json_report_fields() -> None:
    results = [make_result(0, 10, bytes_in=10), make_result(250, 20, error="timeout", status_code=0)]
    doc = json.loads(JSONReporter().report(results))
    assert doc["requests"] == 2
    assert doc["duration"] == 250 * MILLISECOND
    assert doc["wait"] == 20 * MILLISECOND
    assert doc["latencies"] == {
        "mean": 15 * MILLISECOND,
        "p50": 10 * MILLISECOND,
        "p95": 20 * MILLISECOND,
        "p99": 20 * MILLISECOND,
        "max": 20 * MILLISECOND,
    }
    assert doc["bytes_in"] == {"total": 10, "mean": 5.0}
    assert doc["bytes_out"] == {"total": 0, "mean": 0.0}
    assert doc["success"] == 0.5
    assert doc["status_codes"] == {"0": 1, "200": 1}
    assert doc["errors"] == ["timeout"]


def test_json_durations_are_integers() -> None:
    doc = json.loads(JSONReporter().report([make_result(0, 1.5)]))
    assert isinstance(doc["wait"], int)
    assert isinstance(doc["latencies"]["mean"], int)


def test_json_report_of_no_results() -> None:
    doc = json.loads(JSONReporter().report([]))
    assert doc["requests"] == 0
    assert doc["success"] == 0
    assert doc["errors"] == []
    assert doc["status_codes"] == {}


def test_json_keeps_non_ascii_errors() -> None:
    output = JSONReporter().report([make_result(0, 1, error="délai dépassé")])
    assert "délai dépassé".encode("utf-8") in output
