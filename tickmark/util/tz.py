# tickmark/util/tz.py
from __future__ import annotations

import datetime as dt
import re
from typing import Optional
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from tickmark.errors import AmbiguousInstantError, InvalidTimezoneError

# Canonical application timezone: due dates and axis days are JST calendar days.
DEFAULT_TZ = "Asia/Tokyo"

EPOCH = dt.datetime(1970, 1, 1, tzinfo=dt.timezone.utc)

_OFFSET_RE = re.compile(r"^([+-])(\d{2}):?(\d{2})$")

_LOCAL_ALIASES = {"local", "system", "native"}
_ALIASES = {
    "jst": "Asia/Tokyo",
}


def normalize_tz_name(name: Optional[str]) -> str:
    """Normalize a timezone identifier.

    Supported forms:
      - "UTC" / "Z" / "GMT" -> "UTC"
      - "JST" -> "Asia/Tokyo"
      - IANA names, e.g. "Asia/Tokyo"
      - Fixed offsets: "+09:00", "+0900", "-05:00"

    None or "" falls back to DEFAULT_TZ. Machine-local aliases are kept as
    "local" so resolve_tz can refuse them with a clear message.
    """
    if name is None:
        return DEFAULT_TZ
    s = str(name).strip()
    if not s:
        return DEFAULT_TZ

    low = s.lower()
    if low in _LOCAL_ALIASES:
        return "local"
    if low in {"utc", "z", "gmt", "utc0", "utc+0"}:
        return "UTC"
    if low in _ALIASES:
        return _ALIASES[low]

    return s


def resolve_tz(name: Optional[str]) -> dt.tzinfo:
    """Resolve a timezone name into a tzinfo.

    For "UTC", resolves to dt.timezone.utc.
    For IANA zone names, resolves via zoneinfo.ZoneInfo.
    For fixed offsets, resolves to dt.timezone(offset).

    Raises InvalidTimezoneError for unknown identifiers and for "local":
    the machine's own zone differs between deployments, which is exactly
    what makes day comparisons drift.
    """
    tz_name = normalize_tz_name(name)

    if tz_name == "UTC":
        return dt.timezone.utc

    if tz_name == "local":
        raise InvalidTimezoneError(
            f"Machine-local timezone is not allowed: {name!r}; pass an explicit zone such as {DEFAULT_TZ!r}"
        )

    # Fixed offsets: +HH:MM, +HHMM, -HH:MM, -HHMM
    m = _OFFSET_RE.match(tz_name)
    if m:
        sign_s, hh_s, mm_s = m.groups()
        hh = int(hh_s)
        mm = int(mm_s)
        if hh > 23 or mm > 59:
            raise InvalidTimezoneError(f"Invalid timezone offset: {tz_name!r}")
        sign = 1 if sign_s == "+" else -1
        off_min = sign * (hh * 60 + mm)
        return dt.timezone(dt.timedelta(minutes=off_min))

    try:
        return ZoneInfo(tz_name)
    except (ZoneInfoNotFoundError, ValueError) as ex:
        raise InvalidTimezoneError(f"Invalid timezone identifier: {tz_name!r}") from ex


def datetime_from_ms(ms: int, tz: dt.tzinfo) -> dt.datetime:
    # Integer arithmetic; fromtimestamp() would round through a float.
    try:
        return (EPOCH + dt.timedelta(milliseconds=int(ms))).astimezone(tz)
    except (OverflowError, ValueError) as ex:
        raise AmbiguousInstantError(f"Instant out of representable range: {ms!r}") from ex


def civil_date(ms: int, tz: dt.tzinfo) -> dt.date:
    """Calendar date a person in `tz` would write down at instant `ms`."""
    return datetime_from_ms(ms, tz).date()
