"""CLI entry point.

This script loads a snapshot of tracked job applications and prints the monitor
views for one client: the status overview, the applications made on a given
day, and every currently applied job.

Examples:
    python run_monitor.py --input jobs.json
    python run_monitor.py --input jobs.json --client U1 --date 2024-03-10
    python run_monitor.py --input jobs.json --timezone Europe/London --out view.json

Without --date, today's date (in the chosen timezone) is used.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from datetime import date, datetime
from pathlib import Path
from typing import List, Optional

from pydantic import ValidationError

from application_monitor.pipeline import MonitorView, build_view, summarize
from application_monitor.settings import MonitorSettings
from application_monitor.sources.base import RecordSourceError
from application_monitor.sources.snapshot import SnapshotSource


def _parse_day(value: str) -> date:
    try:
        return date.fromisoformat(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"expected YYYY-MM-DD, got {value!r}") from exc


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Show per-client application status from a record snapshot.")
    p.add_argument("--input", type=str, required=True, help="JSON snapshot ({'jobDB': [...]} or a list).")
    p.add_argument("--client", type=str, default=None, help="Client (owner) id; defaults to the first one found.")
    p.add_argument("--date", type=_parse_day, default=None, help="Day to list applications for (YYYY-MM-DD).")
    p.add_argument("--timezone", type=str, default=None, help="IANA timezone; defaults to MONITOR_TIMEZONE or local.")
    p.add_argument("--locale", type=str, default=None, help="Date display locale (en-GB, en-US, de-DE, iso).")
    p.add_argument("--status", type=str, default=None, help="Status label that marks an active application.")
    p.add_argument("--out", type=str, default=None, help="Optional path to write the view as JSON.")
    p.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging.")
    return p.parse_args(argv)


def print_view(view: MonitorView, settings: MonitorSettings) -> None:
    print("Clients: " + (", ".join(view.owners) or "(none)"))
    if view.owner_id is None:
        return

    print(f"\nJobs for {view.owner_id}")
    print("Status overview:")
    if not view.status_order:
        print("  No jobs for this client.")
    for label in view.status_order:
        print(f"  {label}: {view.status_counts[label]}")

    print(f"\nApplied on {view.on_date.isoformat()}: {view.applied_on_date_count}")
    if not view.applied_on_date:
        print("  No applied jobs for the selected date.")
    for r in view.applied_on_date:
        s = summarize(r, settings, with_time=True)
        print(f"  {s.title} | {s.company} | Updated: {s.when}")

    print(f"\nApplied ({len(view.applied)}):")
    for r in view.applied:
        s = summarize(r, settings)
        print(f"  {s.title} | {s.company} | {s.when}")


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(
        stream=sys.stderr,
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        settings = MonitorSettings.from_env(
            timezone=args.timezone, locale=args.locale, applied_status=args.status
        )
        records = SnapshotSource(args.input).fetch()
    except (ValidationError, RecordSourceError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    on_date = args.date or datetime.now(settings.tz).date()
    view = build_view(records, owner_id=args.client, on_date=on_date, settings=settings)
    print_view(view, settings)

    if args.out:
        out_path = Path(args.out).expanduser().resolve()
        out_path.parent.mkdir(parents=True, exist_ok=True)
        data = view.model_dump(mode="json", exclude={"applied": {"__all__": {"raw"}}, "applied_on_date": {"__all__": {"raw"}}})
        out_path.write_text(json.dumps(data, indent=2, ensure_ascii=False), encoding="utf-8")
        print(f"\nWrote view to: {out_path}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
