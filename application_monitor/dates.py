"""Date normalization.

Tracking records carry dates in whatever shape the writer produced: native
timestamps, ISO strings, epoch numbers, or day-first locale strings such as
"10/03/2024, 5:00pm". Everything here resolves those into one canonical
instant (a timezone-aware datetime) or None, the absent marker. Nothing in this
module raises for a bad value.

`tz=None` everywhere means the system's local civil calendar.
"""

from __future__ import annotations

import logging
import re
from datetime import date, datetime, tzinfo
from typing import Any, Optional

from dateutil import parser as dtparse

logger = logging.getLogger(__name__)


# D/M/YYYY or D-M-YYYY with an optional "H:MM[:SS] [am|pm]" suffix.
LOCALE_DATE_RE = re.compile(
    r"^(\d{1,2})[/\-](\d{1,2})[/\-](\d{4})"
    r"(?:[,\s]+(\d{1,2}):(\d{2})(?::(\d{2}))?\s*(am|pm)?)?$",
    flags=re.IGNORECASE,
)

FOUR_DIGIT_YEAR_RE = re.compile(r"(?<!\d)\d{4}(?!\d)|^\d{8}")

# Fills fields a generic string leaves out, so the result never depends on the clock.
_GENERIC_DEFAULT = datetime(1970, 1, 1)

# Epoch numbers above this are milliseconds.
_EPOCH_MS_THRESHOLD = 1e12

DATE_FORMATS = {
    "en-GB": "%d/%m/%Y",
    "en-US": "%m/%d/%Y",
    "de-DE": "%d.%m.%Y",
    "iso": "%Y-%m-%d",
}

DATETIME_FORMATS = {
    "en-GB": "%d/%m/%Y, %H:%M:%S",
    "en-US": "%m/%d/%Y, %I:%M:%S %p",
    "de-DE": "%d.%m.%Y, %H:%M:%S",
    "iso": "%Y-%m-%d %H:%M:%S",
}

ABSENT_PLACEHOLDER = "—"


def _localize(naive: datetime, tz: Optional[tzinfo]) -> datetime:
    """Attach civil time `naive` to `tz` (or the system local zone)."""
    if tz is None:
        return naive.astimezone()
    return naive.replace(tzinfo=tz)


def _to_zone(value: datetime, tz: Optional[tzinfo]) -> Optional[datetime]:
    """Express `value` in `tz`; None when the shifted instant leaves the datetime range."""
    try:
        if value.tzinfo is None:
            return _localize(value, tz)
        return value.astimezone(tz)
    except (OverflowError, OSError, ValueError):
        logger.debug("Date %s cannot be expressed in the requested zone", value)
        return None


def _from_locale_match(m: re.Match, tz: Optional[tzinfo]) -> Optional[datetime]:
    day, month, year, hour, minute, second, meridiem = m.groups()
    h = int(hour or 0)
    if meridiem:
        is_pm = meridiem.lower() == "pm"
        if h == 12:
            h = 12 if is_pm else 0
        elif is_pm:
            h += 12
    try:
        naive = datetime(int(year), int(month), int(day), h, int(minute or 0), int(second or 0))
    except ValueError:
        logger.debug("Locale date %r has out-of-range components", m.group(0))
        return None
    return _to_zone(naive, tz)


def _parse_generic(text: str, tz: Optional[tzinfo]) -> Optional[datetime]:
    """ISO first, then dateutil; day-first unless the string leads with the year."""
    if not FOUR_DIGIT_YEAR_RE.search(text):
        logger.debug("Date %r has no four-digit year; treating as absent", text)
        return None
    try:
        return _to_zone(dtparse.isoparse(text), tz)
    except (ValueError, OverflowError):
        pass
    year_first = text[:4].isdigit()
    try:
        parsed = dtparse.parse(text, default=_GENERIC_DEFAULT, dayfirst=not year_first, yearfirst=year_first)
    except (ValueError, OverflowError):
        logger.debug("Unparseable date %r", text)
        return None
    return _to_zone(parsed, tz)


def _from_epoch(value: float, tz: Optional[tzinfo]) -> Optional[datetime]:
    try:
        ts = float(value)
        if ts > _EPOCH_MS_THRESHOLD:
            ts /= 1000.0
        return _to_zone(datetime.fromtimestamp(ts, tz), tz)
    except (OverflowError, OSError, ValueError):
        logger.debug("Epoch value %r out of range", value)
        return None


def parse_flexible_date(value: Any, tz: Optional[tzinfo] = None) -> Optional[datetime]:
    """Normalize a raw date value into an aware datetime in `tz`, or None.

    Day-first locale strings are matched explicitly before any generic parsing,
    since generic parsers read "10/03/2024" as October 3rd.
    """
    if isinstance(value, bool) or not value:
        return None

    if isinstance(value, datetime):
        return _to_zone(value, tz)
    if isinstance(value, date):
        return _to_zone(datetime(value.year, value.month, value.day), tz)
    if isinstance(value, (int, float)):
        return _from_epoch(value, tz)
    if not isinstance(value, str):
        return None

    text = value.strip()
    if not text:
        return None

    m = LOCALE_DATE_RE.match(text)
    if m:
        return _from_locale_match(m, tz)
    return _parse_generic(text, tz)


def record_instant(record: Any, tz: Optional[tzinfo] = None) -> Optional[datetime]:
    """Canonical instant of a record: `updatedAt`, falling back to `dateAdded`.

    The fallback also applies when `updatedAt` is present but unparseable; the
    tracking UI only consulted `dateAdded` when `updatedAt` was empty, and sorted
    on `updatedAt` alone.
    """
    return parse_flexible_date(record.updated_at, tz) or parse_flexible_date(record.date_added, tz)


def same_civil_day(instant: Optional[datetime], day: date, tz: Optional[tzinfo] = None) -> bool:
    """True when `instant` falls on calendar `day` in `tz`; time of day is ignored."""
    if instant is None:
        return False
    local = instant.astimezone(tz)
    return (local.year, local.month, local.day) == (day.year, day.month, day.day)


def format_date(instant: Optional[datetime], locale: str = "en-GB", tz: Optional[tzinfo] = None) -> str:
    if instant is None:
        return ABSENT_PLACEHOLDER
    return instant.astimezone(tz).strftime(DATE_FORMATS[locale])


def format_datetime(instant: Optional[datetime], locale: str = "en-GB", tz: Optional[tzinfo] = None) -> str:
    if instant is None:
        return ABSENT_PLACEHOLDER
    return instant.astimezone(tz).strftime(DATETIME_FORMATS[locale])
