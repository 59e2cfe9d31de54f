"""Snapshot file source.

Reads a JSON dump of the tracking backend's records. Two shapes are accepted:
the API envelope `{"jobDB": [...]}` and a bare list of records. Any other JSON
shape is treated as an empty collection; only an unreadable or non-JSON file is
an error.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, List, Union

from ..models import JobRecord
from .base import RecordSource, RecordSourceError

logger = logging.getLogger(__name__)


class SnapshotSource(RecordSource):
    """Load records from a JSON snapshot on disk."""

    name = "snapshot"
    envelope_key = "jobDB"

    def __init__(self, path: Union[str, Path]) -> None:
        self._path = Path(path).expanduser()

    def _extract_items(self, payload: Any) -> List[Any]:
        if isinstance(payload, dict):
            payload = payload.get(self.envelope_key)
        if not isinstance(payload, list):
            logger.warning("No record list found in %s; using an empty collection", self._path)
            return []
        return payload

    def fetch(self) -> List[JobRecord]:
        try:
            payload = json.loads(self._path.read_text(encoding="utf-8"))
        except OSError as exc:
            raise RecordSourceError(f"cannot read {self._path}: {exc}") from exc
        except (json.JSONDecodeError, UnicodeDecodeError) as exc:
            raise RecordSourceError(f"{self._path} is not valid UTF-8 JSON: {exc}") from exc

        out: List[JobRecord] = []
        for i, item in enumerate(self._extract_items(payload)):
            if not isinstance(item, dict):
                logger.warning("Skipping entry %d in %s: not an object", i, self._path)
                continue
            out.append(JobRecord.from_raw(item))

        logger.info("Loaded %d records from %s", len(out), self._path)
        return out
