"""Monitor configuration.

Settings are explicit values handed to the pipeline rather than ambient process
state: the civil timezone dates are interpreted in, the locale used to render
them, and the status label that marks an active application.
"""

from __future__ import annotations

import os
from datetime import tzinfo
from typing import Optional
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, field_validator

from .dates import DATE_FORMATS


class MonitorSettings(BaseModel):
    """Explicit locale/timezone/status configuration for one monitor run."""

    model_config = ConfigDict(frozen=True)

    timezone: Optional[str] = None
    locale: str = "en-GB"
    applied_status: str = "applied"

    @field_validator("timezone")
    @classmethod
    def _check_timezone(cls, value: Optional[str]) -> Optional[str]:
        if not value:
            return None
        try:
            ZoneInfo(value)
        except (ZoneInfoNotFoundError, ValueError) as exc:
            raise ValueError(f"unknown timezone: {value!r}") from exc
        return value

    @field_validator("locale")
    @classmethod
    def _check_locale(cls, value: str) -> str:
        if value not in DATE_FORMATS:
            raise ValueError(f"unsupported locale {value!r}; expected one of {sorted(DATE_FORMATS)}")
        return value

    @field_validator("applied_status")
    @classmethod
    def _lower_status(cls, value: str) -> str:
        value = value.strip().lower()
        if not value:
            raise ValueError("applied_status must not be empty")
        return value

    @property
    def tz(self) -> Optional[tzinfo]:
        """Resolved timezone; None means the system's local civil time."""
        return ZoneInfo(self.timezone) if self.timezone else None

    @classmethod
    def from_env(cls, **overrides: Optional[str]) -> "MonitorSettings":
        """Build settings from MONITOR_* environment variables (and a .env file).

        Keyword overrides that are not None take precedence over the environment.
        """
        load_dotenv()
        values = {
            "timezone": os.getenv("MONITOR_TIMEZONE"),
            "locale": os.getenv("MONITOR_LOCALE"),
            "applied_status": os.getenv("MONITOR_APPLIED_STATUS"),
        }
        values.update({k: v for k, v in overrides.items() if v is not None})
        return cls(**{k: v for k, v in values.items() if v is not None})
