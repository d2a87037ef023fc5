from __future__ import annotations

from datetime import datetime, timezone

import pytest

from tabboard.services.detect_service import detect_keyword, extract_first_number, utc_timestamp

NOW = datetime(2024, 5, 1, 12, 30, 45, 123456, tzinfo=timezone.utc)


def test_graph_request_has_no_tab_count() -> None:
    result = detect_keyword("I need a graph like this:\ndate: 12/03/2021 distance: 3", now=NOW)

    assert result == {
        "key": "graph",
        "value": "Here is the graph in the preview!",
        "timestamp": "2024-05-01T12:30:45.123Z",
        "maindata": "date: 12/03/2021 distance: 3",
    }


def test_tab_request_reports_first_number() -> None:
    result = detect_keyword("tab 3 please")

    assert result["key"] == "tab"
    assert result["value"] == "Here are the tabs in the footer!"
    assert result["numberOfTabs"] == 3


def test_set_request_reports_first_number() -> None:
    result = detect_keyword("SET it to 12 then 4")

    assert result["key"] == "set"
    assert result["numberOfTabs"] == 12


def test_zero_is_not_reported() -> None:
    assert "numberOfTabs" not in detect_keyword("tab 0")


def test_number_ignored_for_other_keys() -> None:
    assert "numberOfTabs" not in detect_keyword("show 5 rows as text")


def test_dictionary_order_breaks_ties() -> None:
    # "table" contains "tab" and comes first in the dictionary
    assert detect_keyword("put it in a table, tab 2")["key"] == "table"
    assert detect_keyword("make a new set")["key"] == "set"


def test_no_match_returns_null_key() -> None:
    result = detect_keyword("hello there\nsecond\r\nthird", now=NOW)

    assert result == {"key": None, "timestamp": "2024-05-01T12:30:45.123Z", "maindata": "second\nthird"}


@pytest.mark.parametrize(
    "text,expected",
    [("abc", None), ("a1b22", 1), ("007 agents", 7), ("x ٣ 4", 4)],
)
def test_extract_first_number(text: str, expected) -> None:
    assert extract_first_number(text) == expected


def test_utc_timestamp_converts_to_utc() -> None:
    assert utc_timestamp(NOW).endswith("Z")
    assert utc_timestamp(NOW) == "2024-05-01T12:30:45.123Z"
