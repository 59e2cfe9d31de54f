"""Data models for the application monitor.

Records arrive in the shape the tracking backend stores them (camelCase keys,
loosely typed values). The models below map that payload onto stable attribute
names and coerce every field leniently: validating a mapping never fails, so a
single odd record cannot break a whole view.

This file uses Pydantic v2.
"""

from __future__ import annotations

from typing import Annotated, Any, Dict, Literal, Optional, Tuple, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator


class PlainStatus(BaseModel):
    """A timeline entry stored as a bare status string."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["plain"] = "plain"
    label: str


class StructuredEvent(BaseModel):
    """A timeline entry stored as an object carrying a `status` field.

    `status` is None when the upstream object had no usable status.
    """

    model_config = ConfigDict(frozen=True)

    kind: Literal["event"] = "event"
    status: Optional[str] = None


TimelineEntry = Annotated[Union[PlainStatus, StructuredEvent], Field(discriminator="kind")]


def to_timeline_entry(value: Any) -> Union[PlainStatus, StructuredEvent]:
    """Wrap a raw timeline value in its tagged variant."""
    if isinstance(value, (PlainStatus, StructuredEvent)):
        return value
    if isinstance(value, str):
        return PlainStatus(label=value)
    if isinstance(value, dict):
        status = value.get("status")
        return StructuredEvent(status=str(status) if status else None)
    return StructuredEvent(status=None)


def _optional_text(value: Any, strip: bool = True) -> Optional[str]:
    if value is None or isinstance(value, (dict, list, tuple, set)):
        return None
    text = str(value)
    if strip:
        text = text.strip()
    return text or None


class JobRecord(BaseModel):
    """A single job application as tracked for one client.

    Date fields are kept raw; `dates.record_instant` derives the canonical
    instant on demand so the record itself never changes.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    record_id: Optional[str] = Field(default=None, alias="_id")
    job_id: Optional[str] = Field(default=None, alias="jobID")
    owner_id: Optional[str] = Field(default=None, alias="userID", description="Client the record belongs to.")

    title: Optional[str] = Field(default=None, alias="jobTitle")
    company_name: Optional[str] = Field(default=None, alias="companyName")
    job_link: Optional[str] = Field(default=None, alias="joblink")
    description: Any = Field(default=None, alias="jobDescription")

    current_status: Optional[str] = Field(default=None, alias="currentStatus")
    timeline: Tuple[TimelineEntry, ...] = ()

    updated_at: Any = Field(default=None, alias="updatedAt")
    date_added: Any = Field(default=None, alias="dateAdded")

    raw: Dict[str, Any] = Field(default_factory=dict, description="Original payload.")

    @field_validator("title", "company_name", mode="before")
    @classmethod
    def _coerce_display_text(cls, value: Any) -> Optional[str]:
        return _optional_text(value)

    # Ids and status are compared verbatim; padding is significant.
    @field_validator("record_id", "job_id", "owner_id", "job_link", "current_status", mode="before")
    @classmethod
    def _coerce_exact_text(cls, value: Any) -> Optional[str]:
        return _optional_text(value, strip=False)

    @field_validator("timeline", mode="before")
    @classmethod
    def _coerce_timeline(cls, value: Any) -> Tuple[Union[PlainStatus, StructuredEvent], ...]:
        if not isinstance(value, (list, tuple)):
            return ()
        return tuple(to_timeline_entry(v) for v in value)

    @classmethod
    def from_raw(cls, payload: Dict[str, Any]) -> "JobRecord":
        """Build a record from an upstream payload, keeping the payload in `raw`."""
        return cls.model_validate({**payload, "raw": dict(payload)})

    @property
    def key(self) -> str:
        """Identifier unique within a collection (owner + link when no id is stored)."""
        return self.record_id or self.job_id or f"{self.owner_id}-{self.job_link}"
