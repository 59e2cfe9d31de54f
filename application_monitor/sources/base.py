"""Base classes for record sources."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import List

from ..models import JobRecord


class RecordSourceError(Exception):
    """The source could not produce a record collection at all."""


class RecordSource(ABC):
    """Abstract base class for a supplier of job-application records."""

    name: str

    @abstractmethod
    def fetch(self) -> List[JobRecord]:
        """Return the current record collection (possibly empty)."""
        raise NotImplementedError
