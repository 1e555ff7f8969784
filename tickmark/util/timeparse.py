# tickmark/util/timeparse.py
from __future__ import annotations

import datetime as dt
import re
from typing import Union

from tickmark.errors import AmbiguousInstantError
from .tz import EPOCH

TW_UTC_RE = re.compile(r"^(\d{8})T(\d{6})Z$")  # e.g. 20251124T000000Z

InstantLike = Union[int, dt.datetime, str]


def _aware_to_ms(d: dt.datetime) -> int:
    return (d - EPOCH) // dt.timedelta(milliseconds=1)


def parse_instant_str(s: str) -> int:
    """Parse an absolute timestamp string into epoch ms.

    Accepted:
      - ISO-8601 with an explicit offset: "2025-11-24T00:00:00+09:00"
      - ISO-8601 with a "Z" suffix: "2025-11-23T15:00:00Z"
      - Taskwarrior compact UTC: "20251123T150000Z"

    Strings without an offset are rejected: resolving them would need the
    executing machine's local timezone.
    """
    ss = str(s).strip()
    if not ss:
        raise AmbiguousInstantError("Empty timestamp")

    m = TW_UTC_RE.match(ss)
    if m:
        ymd = m.group(1)
        hms = m.group(2)
        try:
            aware = dt.datetime(
                int(ymd[0:4]), int(ymd[4:6]), int(ymd[6:8]),
                int(hms[0:2]), int(hms[2:4]), int(hms[4:6]),
                tzinfo=dt.timezone.utc,
            )
        except ValueError as ex:
            raise AmbiguousInstantError(f"Invalid timestamp: {ss!r}") from ex
        return _aware_to_ms(aware)

    if ss.endswith(("Z", "z")):
        ss = ss[:-1] + "+00:00"
    try:
        d = dt.datetime.fromisoformat(ss)
    except ValueError as ex:
        raise AmbiguousInstantError(f"Invalid timestamp: {s!r}") from ex
    if d.tzinfo is None or d.utcoffset() is None:
        raise AmbiguousInstantError(f"Timestamp has no UTC offset: {s!r}")
    return _aware_to_ms(d)


def to_epoch_ms(value: InstantLike) -> int:
    """Coerce an instant-like value (epoch ms, aware datetime, offset string) to epoch ms."""
    # bool is an int subclass; True is not a timestamp.
    if isinstance(value, bool):
        raise AmbiguousInstantError(f"Not an instant: {value!r}")
    if isinstance(value, int):
        return value
    if isinstance(value, dt.datetime):
        if value.tzinfo is None or value.utcoffset() is None:
            raise AmbiguousInstantError(f"Naive datetime has no UTC offset: {value.isoformat()}")
        return _aware_to_ms(value)
    if isinstance(value, str):
        return parse_instant_str(value)
    raise AmbiguousInstantError(f"Unsupported instant type: {type(value).__name__}")


def parse_date_yyyy_mm_dd(s: str) -> dt.date:
    return dt.datetime.strptime(s, "%Y-%m-%d").date()
