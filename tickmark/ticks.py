# tickmark/ticks.py
from __future__ import annotations

import calendar
import datetime as dt
from typing import List, Optional, Union

from .errors import InvalidRangeError, UnsupportedModeError
from .labels import Locale, get_locale
from .model import VIEW_DAY, VIEW_MODES, VIEW_MONTH, VIEW_WEEK, WEEKEND_WEEKDAYS, Tick
from .util.obs import obs_log
from .util.timeparse import InstantLike, to_epoch_ms
from .util.tz import DEFAULT_TZ, civil_date, resolve_tz


def check_view_mode(mode: str) -> str:
    if not isinstance(mode, str) or mode not in VIEW_MODES:
        raise UnsupportedModeError(f"Unsupported view mode: {mode!r} (expected one of {', '.join(VIEW_MODES)})")
    return mode


def add_months(d: dt.date, months: int) -> dt.date:
    """Add calendar months, clamping the day to the target month's last day.

    Jan 31 + 1 -> Feb 28 (Feb 29 in leap years); Mar 31 - 1 -> Feb 28.
    """
    idx = d.year * 12 + (d.month - 1) + int(months)
    y, m0 = divmod(idx, 12)
    m = m0 + 1
    last = calendar.monthrange(y, m)[1]
    return dt.date(y, m, min(d.day, last))


def is_weekend(d: dt.date) -> bool:
    return d.weekday() in WEEKEND_WEEKDAYS


def format_tick_label(d: dt.date, mode: str, locale: Optional[Union[str, Locale]] = None) -> str:
    loc = get_locale(locale)
    if check_view_mode(mode) == VIEW_MONTH:
        return loc.format_month_label(d)
    return loc.format_day_label(d)


def tick_dates(start: dt.date, end: dt.date, mode: str) -> List[dt.date]:
    """Civil dates of every tick in [start, end] for `mode`.

    Every date is derived from `start` by calendar arithmetic: day and week
    steps add whole days, month steps re-apply add_months to the anchor so a
    clamped short month does not pull later ticks off the anchor day.
    """
    check_view_mode(mode)
    if start > end:
        raise InvalidRangeError(f"Range start {start.isoformat()} is after end {end.isoformat()}")

    out: List[dt.date] = []
    k = 0
    while True:
        try:
            if mode == VIEW_DAY:
                cur = start + dt.timedelta(days=k)
            elif mode == VIEW_WEEK:
                cur = start + dt.timedelta(days=7 * k)
            else:
                cur = add_months(start, k)
        except (OverflowError, ValueError):
            # Next step lies past dt.date.max.
            break
        if cur > end:
            break
        out.append(cur)
        k += 1
    return out


def generate_ticks(
    start: InstantLike,
    end: InstantLike,
    mode: str = VIEW_DAY,
    locale: Optional[Union[str, Locale]] = None,
    *,
    tz: Optional[str] = DEFAULT_TZ,
) -> List[Tick]:
    """Ordered, complete axis ticks from `start` to `end` (both inclusive).

    Instants are bucketed into civil dates in `tz`. A tick stands for midnight
    of its date in `tz`, so the last tick is the one whose date is the end
    instant's civil date (for day mode) or the last step not past it.

    Raises:
      UnsupportedModeError: mode is not day/week/month.
      InvalidRangeError: start is after end.
      InvalidTimezoneError: tz cannot be resolved.
      AmbiguousInstantError: an instant has no explicit offset.
    """
    check_view_mode(mode)
    loc = get_locale(locale)
    tzinfo = resolve_tz(tz)

    start_ms = to_epoch_ms(start)
    end_ms = to_epoch_ms(end)
    if start_ms > end_ms:
        raise InvalidRangeError(f"Range start {start!r} is after end {end!r}")

    dates = tick_dates(civil_date(start_ms, tzinfo), civil_date(end_ms, tzinfo), mode)
    ticks = [Tick(date=d, label=format_tick_label(d, mode, loc), is_weekend=is_weekend(d)) for d in dates]

    obs_log("ticks", "ticks.ok", mode=mode, n=len(ticks), first=dates[0].isoformat(), last=dates[-1].isoformat())
    return ticks
