from __future__ import annotations

from datetime import date, datetime, timedelta, timezone

import pytest

from src.trainee_attendance.trainee_attendance.common import datetime_utils
from src.trainee_attendance.trainee_attendance.common.datetime_utils import (
    date_key,
    iter_days,
    resolve_today,
    to_date,
)


@pytest.mark.parametrize(
    "value, expected",
    [
        ("2024-01-05", "2024-01-05"),
        ("2024-01-05T10:00:00.000Z", "2024-01-05"),
        ("2024-01-05T23:59:59.12Z", "2024-01-05"),
        ("2024-01-05T23:59:59.1234567+00:00", "2024-01-05"),
        ("2024-01-05T20:00:00.5-05:00", "2024-01-06"),
        ("2024-01-05T23:30:00-05:00", "2024-01-06"),
        ("2024-01-06T01:00:00+09:00", "2024-01-05"),
        (" 2024-02-29 ", "2024-02-29"),
        (date(2024, 1, 5), "2024-01-05"),
        (datetime(2024, 1, 5, 23, 59), "2024-01-05"),
        (datetime(2024, 1, 5, 23, 0, tzinfo=timezone(timedelta(hours=-3))), "2024-01-06"),
        (1704067200000, "2024-01-01"),
        (1704067200000.0 - 1, "2023-12-31"),
    ],
)
def test_date_key_uses_utc_calendar_day(value, expected):
    assert date_key(value) == expected


@pytest.mark.parametrize(
    "value",
    [None, "", "   ", "not a date", "2024-13-01", "2023-02-29", True, float("nan"), float("inf"), 1e30, object()],
)
def test_date_key_returns_none_for_unusable_input(value):
    assert date_key(value) is None


def test_to_date_keeps_plain_dates():
    assert to_date(date(2024, 3, 1)) == date(2024, 3, 1)


def test_iter_days_is_inclusive_and_crosses_month_end():
    days = list(iter_days(date(2024, 1, 30), date(2024, 2, 2)))

    assert [d.isoformat() for d in days] == ["2024-01-30", "2024-01-31", "2024-02-01", "2024-02-02"]


def test_iter_days_empty_when_start_after_end():
    assert list(iter_days(date(2024, 1, 2), date(2024, 1, 1))) == []


def test_resolve_today_prefers_injected_value(monkeypatch):
    monkeypatch.setattr(datetime_utils, "today_utc", lambda: date(2030, 1, 1))

    assert resolve_today("2024-01-05") == date(2024, 1, 5)
    assert resolve_today(None) == date(2030, 1, 1)
    assert resolve_today("garbage") == date(2030, 1, 1)
