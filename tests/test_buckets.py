from __future__ import annotations

import pytest
from hypothesis import given, strategies as st

from loadreport.durations import MILLISECOND
from loadreport.errors import ConfigError, ParseError
from loadreport.histogram import format_buckets, histogram, parse_buckets

from helpers import make_result


def test_parse_buckets_with_bare_zero() -> None:
    assert parse_buckets("[0,100ms,200ms]") == (0, 100 * MILLISECOND, 200 * MILLISECOND)


def test_parse_buckets_tolerates_spaces() -> None:
    assert parse_buckets(" [0, 1s] ") == (0, 1_000 * MILLISECOND)


def test_format_buckets() -> None:
    assert format_buckets((0, 100 * MILLISECOND, 200 * MILLISECOND)) == "[0s,100ms,200ms]"


@pytest.mark.parametrize("text", ["[]", "", "0,100ms", "[ ]", "["])
def test_empty_or_unbracketed_buckets_are_rejected(text: str) -> None:
    with pytest.raises(ConfigError, match="bad buckets"):
        parse_buckets(text)


def test_bad_token_reports_offending_token() -> None:
    with pytest.raises(ParseError) as excinfo:
        parse_buckets("[0,10xs,20ms]")
    assert excinfo.value.text == "10xs"
    assert isinstance(excinfo.value.__cause__, ParseError)


@pytest.mark.parametrize("text", ["[100ms,100ms]", "[200ms,100ms]"])
def test_non_increasing_buckets_are_rejected(text: str) -> None:
    with pytest.raises(ConfigError, match="strictly increasing"):
        parse_buckets(text)


@given(st.sets(st.integers(min_value=0, max_value=10**15), min_size=1, max_size=20))
def test_parse_format_round_trip(boundaries: set[int]) -> None:
    buckets = tuple(sorted(boundaries))
    assert parse_buckets(format_buckets(buckets)) == buckets


def test_histogram_counts_half_open_buckets() -> None:
    buckets = (0, 100 * MILLISECOND)
    results = [make_result(0, 50), make_result(10, 150), make_result(20, 50)]
    assert histogram(buckets, results) == [2, 1]


def test_boundary_latency_falls_in_upper_bucket() -> None:
    buckets = (0, 100 * MILLISECOND, 200 * MILLISECOND)
    results = [make_result(0, 100), make_result(1, 200), make_result(2, 199.999)]
    assert histogram(buckets, results) == [0, 2, 1]


def test_latency_below_first_bucket_is_clamped() -> None:
    buckets = (100 * MILLISECOND, 200 * MILLISECOND)
    assert histogram(buckets, [make_result(0, 5)]) == [1, 0]


def test_histogram_of_no_results() -> None:
    assert histogram((0, MILLISECOND), []) == [0, 0]


@given(
    latencies=st.lists(st.integers(min_value=0, max_value=5_000), min_size=1, max_size=200),
    boundaries=st.sets(st.integers(min_value=0, max_value=5_000), min_size=1, max_size=10),
)
def test_histogram_counts_every_result(latencies: list[int], boundaries: set[int]) -> None:
    results = [make_result(i, ms) for i, ms in enumerate(latencies)]
    buckets = tuple(sorted(b * MILLISECOND for b in boundaries))
    counts = histogram(buckets, results)
    assert len(counts) == len(buckets)
    assert sum(counts) == len(results)
