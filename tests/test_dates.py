# tests/test_dates.py

from __future__ import annotations

from datetime import date, datetime, timedelta, timezone

import pytest

from task_reminder.core.exceptions import ValidationError
from task_reminder.utils.dates import is_past, parse_deadline


@pytest.mark.parametrize(
    "value",
    [
        "2099-01-01",
        "2099-01-01T00:00:00",
        "2099-01-01T23:59:59.500",
        "2099-01-01T10:00:00.1",
        "2099-01-01 10:00",
        " 2099-01-01 ",
        "2099-1-1",
        "Jan 1, 2099",
        "01/01/2099",
    ],
)
def test_parse_deadline_takes_calendar_date(value: str) -> None:
    assert parse_deadline(value) == date(2099, 1, 1)


def test_parse_deadline_reads_slashed_dates_month_first() -> None:
    assert parse_deadline("01/02/2099") == date(2099, 1, 2)


def test_parse_deadline_converts_aware_values_to_local_time() -> None:
    value = "2099-06-15T12:00:00Z"
    expected = datetime(2099, 6, 15, 12, tzinfo=timezone.utc).astimezone().date()

    assert parse_deadline(value) == expected


@pytest.mark.parametrize("value", ["xyz", "2099-13-01", "   "])
def test_parse_deadline_rejects_garbage(value: str) -> None:
    with pytest.raises(ValidationError):
        parse_deadline(value)


def test_is_past_compares_dates_only() -> None:
    today = date(2030, 5, 10)

    assert is_past(date(2030, 5, 9), today=today)
    assert not is_past(date(2030, 5, 10), today=today)
    assert not is_past(date(2030, 5, 11), today=today)


def test_is_past_defaults_to_local_today() -> None:
    assert not is_past(date.today())
    assert is_past(date.today() - timedelta(days=1))
