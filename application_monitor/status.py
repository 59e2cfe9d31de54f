"""Status classification.

A record carries two independent status signals: the top-level `currentStatus`
label and the last event appended to its `timeline`. A record only counts as a
currently active application when both agree, so records whose label was
changed without a matching timeline event (or the reverse) are left out.
"""

from __future__ import annotations

from typing import Optional, Sequence, Union

from .models import JobRecord, PlainStatus, StructuredEvent

APPLIED = "applied"
UNKNOWN_STATUS = "unknown"


def timeline_status(entry: Union[PlainStatus, StructuredEvent]) -> Optional[str]:
    """Lowercased status of a timeline entry, whichever variant it is."""
    if isinstance(entry, PlainStatus):
        return entry.label.lower()
    if entry.status:
        return entry.status.lower()
    return None


def last_timeline_status(timeline: Sequence[Union[PlainStatus, StructuredEvent]]) -> Optional[str]:
    if not timeline:
        return None
    return timeline_status(timeline[-1])


def status_label(record: JobRecord) -> str:
    """Lowercased `currentStatus`, or "unknown" when the record has none."""
    return (record.current_status or "").lower() or UNKNOWN_STATUS


def is_applied_now(record: JobRecord, reference: str = APPLIED) -> bool:
    reference = reference.lower()
    current = (record.current_status or "").lower()
    return current == reference and last_timeline_status(record.timeline) == reference
