"""Utility helpers shared across the monitor."""

from __future__ import annotations

from typing import Iterable, List, Optional


def uniq_preserve_order(items: Iterable[Optional[str]]) -> List[str]:
    """Deduplicate while preserving first-seen order; falsy items are dropped."""
    seen = set()
    out: List[str] = []
    for it in items:
        if not it or it in seen:
            continue
        seen.add(it)
        out.append(it)
    return out
