"""Filter/sort pipeline.

Composes date normalization, status classification and client grouping into the
views the monitor shows for one client:
- the status census (and the order to display it in),
- every currently applied record, most recent first,
- the applied records whose date falls on a chosen calendar day.

The chosen day is always passed in; callers wanting "today" supply it.
"""

from __future__ import annotations

from datetime import date, tzinfo
from typing import Dict, Iterable, List, Optional, Sequence

from pydantic import BaseModel, Field

from .dates import format_date, format_datetime, record_instant, same_civil_day
from .indexer import ordered_statuses, owner_ids, records_for_owner, status_census
from .models import JobRecord
from .settings import MonitorSettings
from .status import APPLIED, is_applied_now

UNTITLED_PLACEHOLDER = "Untitled Role"
COMPANY_PLACEHOLDER = "Company"


def applied_records(
    records: Iterable[JobRecord],
    owner_id: Optional[str],
    reference: str = APPLIED,
) -> List[JobRecord]:
    """The owner's records that are currently active applications, in input order."""
    return [r for r in records_for_owner(records, owner_id) if is_applied_now(r, reference)]


def sort_by_recency(records: Sequence[JobRecord], tz: Optional[tzinfo] = None) -> List[JobRecord]:
    """Most recent first; records without a date count as epoch zero and go last.

    The sort is stable, so equal instants keep their input order.
    """

    def _key(r: JobRecord) -> float:
        instant = record_instant(r, tz)
        return instant.timestamp() if instant else 0.0

    return sorted(records, key=_key, reverse=True)


def filter_on_day(records: Iterable[JobRecord], day: Optional[date], tz: Optional[tzinfo] = None) -> List[JobRecord]:
    """Records whose canonical instant falls on `day` in local civil time."""
    if day is None:
        return []
    return [r for r in records if same_civil_day(record_instant(r, tz), day, tz)]


class RecordSummary(BaseModel):
    """One display row: placeholders already applied, timestamp already formatted."""

    key: str
    title: str
    company: str
    when: str


def summarize(record: JobRecord, settings: MonitorSettings, with_time: bool = False) -> RecordSummary:
    instant = record_instant(record, settings.tz)
    fmt = format_datetime if with_time else format_date
    return RecordSummary(
        key=record.key,
        title=record.title or UNTITLED_PLACEHOLDER,
        company=record.company_name or COMPANY_PLACEHOLDER,
        when=fmt(instant, settings.locale, settings.tz),
    )


class MonitorView(BaseModel):
    """Everything the display layer needs for one (client, day) selection."""

    owners: List[str] = Field(default_factory=list)
    owner_id: Optional[str] = None
    status_counts: Dict[str, int] = Field(default_factory=dict)
    status_order: List[str] = Field(default_factory=list)
    applied: List[JobRecord] = Field(default_factory=list)
    on_date: Optional[date] = None
    applied_on_date: List[JobRecord] = Field(default_factory=list)

    @property
    def applied_on_date_count(self) -> int:
        return len(self.applied_on_date)


def build_view(
    records: Sequence[JobRecord],
    owner_id: Optional[str] = None,
    on_date: Optional[date] = None,
    settings: Optional[MonitorSettings] = None,
) -> MonitorView:
    """Derive all views for `owner_id` (default: the first client seen) and `on_date`.

    An unknown owner yields empty views rather than an error.
    """
    settings = settings or MonitorSettings()
    tz = settings.tz
    owners = owner_ids(records)
    if owner_id is None and owners:
        owner_id = owners[0]

    counts = status_census(records_for_owner(records, owner_id))
    applied = sort_by_recency(applied_records(records, owner_id, settings.applied_status), tz)

    return MonitorView(
        owners=owners,
        owner_id=owner_id,
        status_counts=counts,
        status_order=ordered_statuses(counts),
        applied=applied,
        on_date=on_date,
        applied_on_date=filter_on_day(applied, on_date, tz),
    )
