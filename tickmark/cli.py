from __future__ import annotations

import argparse
import json
import os
from typing import List, Optional, Tuple

from .due import is_overdue
from .errors import TickmarkError
from .labels import DEFAULT_LOCALE, get_locale
from .layout import calculate_date_range
from .model import VIEW_DAY, VIEW_MODES, DateRange
from .ticks import generate_ticks
from .util.axiskey import make_axis_key
from .util.timeparse import parse_date_yyyy_mm_dd
from .util.tz import DEFAULT_TZ, normalize_tz_name, resolve_tz


def _split_pair(raw: str, flag: str) -> Tuple[str, str]:
    parts = [p.strip() for p in str(raw).split(",")]
    if len(parts) != 2 or not all(parts):
        raise SystemExit(f"Invalid {flag} value: expected START,END, got {raw!r}")
    return parts[0], parts[1]


def _cmd_ticks(args: argparse.Namespace, tz_name: str) -> None:
    try:
        ticks = generate_ticks(args.start, args.end, args.mode, args.locale, tz=tz_name)
    except TickmarkError as e:
        raise SystemExit(f"Cannot generate ticks: {e}")

    if args.json:
        loc_name = get_locale(args.locale).name
        out = {
            "axis_key": make_axis_key(ticks[0].date, ticks[-1].date, args.mode, loc_name, tz_name),
            "tz": tz_name,
            "mode": args.mode,
            "locale": loc_name,
            "ticks": [t.to_dict() for t in ticks],
        }
        print(json.dumps(out, ensure_ascii=False, sort_keys=True))
        return

    for t in ticks:
        line = f"{t.date.isoformat()}\t{t.label}"
        if t.is_weekend:
            line += "\tWE"
        print(line)


def _cmd_overdue(args: argparse.Namespace, tz_name: str) -> None:
    try:
        res = is_overdue(args.due, args.now, tz_name, status=args.status)
    except TickmarkError as e:
        raise SystemExit(f"Cannot compare due date: {e}")
    print("true" if res else "false")


def _cmd_range(args: argparse.Namespace, tz_name: str) -> None:
    spans = [_split_pair(s, "--span") for s in (args.span or [])]
    previous = None
    if args.previous:
        p0, p1 = _split_pair(args.previous, "--previous")
        try:
            previous = DateRange(start=parse_date_yyyy_mm_dd(p0), end=parse_date_yyyy_mm_dd(p1))
        except ValueError as e:
            raise SystemExit(f"Invalid --previous value: {e}")
    try:
        rng = calculate_date_range(
            spans,
            args.now,
            tz_name,
            previous=previous,
            lead_days=int(args.lead_days),
            tail_days=int(args.tail_days),
            pad_days=int(args.pad_days),
        )
    except TickmarkError as e:
        raise SystemExit(f"Cannot compute date range: {e}")
    print(f"{rng.start.isoformat()} {rng.end.isoformat()}")


def main(argv: Optional[List[str]] = None) -> None:
    ap = argparse.ArgumentParser(
        prog="tickmark",
        description="Gantt timeline axis ticks and timezone-safe due-date checks.",
    )
    tz_help = f"Canonical timezone for calendar days (default: env TICKMARK_TZ or {DEFAULT_TZ!r})"
    ap.add_argument("--tz", default=os.getenv("TICKMARK_TZ", DEFAULT_TZ), help=tz_help)
    # --tz is also accepted after the subcommand; SUPPRESS keeps the root value when omitted there.
    tz_parent = argparse.ArgumentParser(add_help=False)
    tz_parent.add_argument("--tz", default=argparse.SUPPRESS, help=tz_help)
    sub = ap.add_subparsers(dest="command", required=True)

    ap_ticks = sub.add_parser("ticks", parents=[tz_parent], help="Print axis ticks between two instants")
    ap_ticks.add_argument("--start", required=True, help="Start instant with offset, e.g. 2025-11-20T00:00:00+09:00")
    ap_ticks.add_argument("--end", required=True, help="End instant with offset")
    ap_ticks.add_argument("--mode", default=VIEW_DAY, choices=VIEW_MODES, help="Tick granularity (default: day)")
    ap_ticks.add_argument(
        "--locale",
        default=os.getenv("TICKMARK_LOCALE", DEFAULT_LOCALE),
        help=f"Label locale (default: env TICKMARK_LOCALE or {DEFAULT_LOCALE!r})",
    )
    ap_ticks.add_argument("--json", action="store_true", help="Emit JSON instead of one line per tick")

    ap_due = sub.add_parser("overdue", parents=[tz_parent], help="Print true when the due day is before today")
    ap_due.add_argument("--due", required=True, help="Due instant with offset")
    ap_due.add_argument("--now", required=True, help="Reference instant with offset")
    ap_due.add_argument("--status", default=None, help="Task status; 'completed' is never overdue")

    ap_range = sub.add_parser("range", parents=[tz_parent], help="Print the default visible date range")
    ap_range.add_argument("--now", required=True, help="Reference instant with offset")
    ap_range.add_argument("--span", action="append", default=None, help="Task span START,END (repeatable)")
    ap_range.add_argument("--previous", default=None, help="Previous range YYYY-MM-DD,YYYY-MM-DD; never shrunk")
    ap_range.add_argument("--lead-days", type=int, default=20, help="Days shown before today (default: 20)")
    ap_range.add_argument("--tail-days", type=int, default=100, help="Days shown after today (default: 100)")
    ap_range.add_argument("--pad-days", type=int, default=7, help="Padding around out-of-window tasks (default: 7)")

    args = ap.parse_args(argv)

    tz_name = normalize_tz_name(args.tz)
    try:
        resolve_tz(tz_name)
    except ValueError as e:
        raise SystemExit(f"Invalid --tz value: {e}")

    if args.command == "ticks":
        _cmd_ticks(args, tz_name)
    elif args.command == "overdue":
        _cmd_overdue(args, tz_name)
    else:
        _cmd_range(args, tz_name)


if __name__ == "__main__":
    main()
