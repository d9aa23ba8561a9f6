from __future__ import annotations

from types import SimpleNamespace

import pytest

from config import get_settings_module
from src.trainee_attendance.trainee_attendance.attendance.service import AttendanceSummaryService
from src.trainee_attendance.trainee_attendance.container import build_container
from src.trainee_attendance.trainee_attendance.core.exceptions import ValidationError
from src.trainee_attendance.trainee_attendance.main import create_services


@pytest.mark.parametrize(
    "env, expected",
    [
        ("production", "config.production"),
        ("PROD", "config.production"),
        ("testing", "config.testing"),
        ("anything", "config.development"),
    ],
)
def test_settings_module_follows_app_env(monkeypatch, env, expected):
    monkeypatch.setenv("APP_ENV", env)

    assert get_settings_module() == expected


def test_build_container_converts_raw_settings():
    settings = SimpleNamespace(LOOKBACK_DAYS="14", RECENT_RECORDS_LIMIT="0", CALENDAR_MONTHS=6)

    container = build_container(settings=settings)

    assert container.lookback_days == 14
    assert container.recent_limit == 0
    assert container.calendar_months == 6
    assert isinstance(container.summary_service, AttendanceSummaryService)


def test_build_container_uses_defaults_for_missing_settings():
    container = build_container(settings=SimpleNamespace())

    assert (container.lookback_days, container.recent_limit, container.calendar_months) == (30, 30, 12)


@pytest.mark.parametrize(
    "overrides",
    [
        {"LOOKBACK_DAYS": "0"},
        {"LOOKBACK_DAYS": "thirty"},
        {"RECENT_RECORDS_LIMIT": -1},
        {"CALENDAR_MONTHS": None},
        {"CALENDAR_MONTHS": True},
    ],
)
def test_build_container_rejects_invalid_settings(overrides):
    with pytest.raises(ValidationError):
        build_container(settings=SimpleNamespace(**overrides))


def test_create_services_loads_testing_settings(monkeypatch):
    monkeypatch.setenv("APP_ENV", "testing")

    container = create_services()

    assert container.recent_limit == 5
    summary = container.summary_service.build_summary(
        [{"date": "2024-01-01", "status": "present"}], "2024-01-01", today="2024-01-01"
    )
    assert summary.current_streak == 1
