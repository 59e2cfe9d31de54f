from zoneinfo import ZoneInfo

import pytest

from application_monitor.models import JobRecord
from application_monitor.settings import MonitorSettings


@pytest.fixture
def utc():
    return ZoneInfo("UTC")


@pytest.fixture
def utc_settings():
    return MonitorSettings(timezone="UTC")


@pytest.fixture
def make_record():
    """Build a JobRecord from payload-style keyword arguments."""

    def _make(**payload):
        return JobRecord.from_raw(payload)

    return _make


@pytest.fixture
def monitor_records(make_record):
    """Three applied records for U1 plus one record for U2."""
    return [
        make_record(_id="a", userID="U1", jobTitle="Morning", currentStatus="Applied",
                    timeline=["applied"], updatedAt="10/03/2024, 9:00am"),
        make_record(_id="b", userID="U1", jobTitle="Evening", currentStatus="Applied",
                    timeline=["applied"], updatedAt="10/03/2024, 5:00pm"),
        make_record(_id="c", userID="U1", jobTitle="Next day", currentStatus="Applied",
                    timeline=["applied"], updatedAt="11/03/2024"),
        make_record(_id="d", userID="U2", jobTitle="Other client", currentStatus="Interviewing",
                    timeline=["applied", "interviewing"], updatedAt="12/03/2024"),
    ]
