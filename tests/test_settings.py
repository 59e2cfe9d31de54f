"""Tests for monitor settings."""

from zoneinfo import ZoneInfo

import pytest
from pydantic import ValidationError

from application_monitor.settings import MonitorSettings


@pytest.fixture
def clean_env(monkeypatch):
    for key in ("MONITOR_TIMEZONE", "MONITOR_LOCALE", "MONITOR_APPLIED_STATUS"):
        monkeypatch.delenv(key, raising=False)
    return monkeypatch


class TestMonitorSettings:
    def test_defaults(self):
        s = MonitorSettings()
        assert s.timezone is None
        assert s.tz is None
        assert s.locale == "en-GB"
        assert s.applied_status == "applied"

    def test_resolves_timezone(self):
        assert MonitorSettings(timezone="Europe/London").tz == ZoneInfo("Europe/London")

    def test_rejects_unknown_timezone(self):
        with pytest.raises(ValidationError):
            MonitorSettings(timezone="Mars/Olympus_Mons")

    def test_rejects_unknown_locale(self):
        with pytest.raises(ValidationError):
            MonitorSettings(locale="xx-XX")

    def test_lowercases_status(self):
        assert MonitorSettings(applied_status=" Applied ").applied_status == "applied"


class TestFromEnv:
    def test_reads_environment(self, clean_env):
        clean_env.setenv("MONITOR_TIMEZONE", "UTC")
        clean_env.setenv("MONITOR_LOCALE", "iso")
        s = MonitorSettings.from_env()
        assert s.timezone == "UTC"
        assert s.locale == "iso"

    def test_overrides_win(self, clean_env):
        clean_env.setenv("MONITOR_LOCALE", "iso")
        s = MonitorSettings.from_env(locale="en-US", timezone=None)
        assert s.locale == "en-US"
        assert s.timezone is None
