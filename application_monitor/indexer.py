"""Grouping by client and status counting.

Every function is a fresh reduction over the collection it is given; nothing is
maintained incrementally between calls.
"""

from __future__ import annotations

from typing import Dict, Iterable, List, Optional, Sequence

from .models import JobRecord
from .status import status_label
from .utils import uniq_preserve_order

# Display order of the status overview; other labels follow alphabetically.
COMMON_STATUS_ORDER = ["applied", "interviewing", "rejected", "offer", "hired", "on-hold"]


def owner_ids(records: Iterable[JobRecord]) -> List[str]:
    """Distinct owner ids in order of first occurrence."""
    return uniq_preserve_order(r.owner_id for r in records)


def records_for_owner(records: Iterable[JobRecord], owner_id: Optional[str]) -> List[JobRecord]:
    if not owner_id:
        return []
    return [r for r in records if r.owner_id == owner_id]


def partition_by_owner(records: Iterable[JobRecord]) -> Dict[str, List[JobRecord]]:
    """Split owned records into one list per owner; unowned records are dropped."""
    out: Dict[str, List[JobRecord]] = {}
    for r in records:
        if r.owner_id:
            out.setdefault(r.owner_id, []).append(r)
    return out


def status_census(records: Iterable[JobRecord]) -> Dict[str, int]:
    """Count records per lowercased status label ("unknown" when missing)."""
    counts: Dict[str, int] = {}
    for r in records:
        label = status_label(r)
        counts[label] = counts.get(label, 0) + 1
    return counts


def owner_status_census(records: Iterable[JobRecord], owner_id: Optional[str]) -> Dict[str, int]:
    return status_census(records_for_owner(records, owner_id))


def ordered_statuses(census: Dict[str, int], common: Sequence[str] = COMMON_STATUS_ORDER) -> List[str]:
    """Census labels in display order: known statuses first, then the rest sorted."""
    head = [s for s in common if census.get(s)]
    tail = sorted(s for s in census if s not in common)
    return head + tail
