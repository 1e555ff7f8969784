# tickmark/layout.py
from __future__ import annotations

import datetime as dt
import math
from typing import Iterable, Optional, Tuple

from .errors import InvalidRangeError
from .model import BarPosition, DateRange
from .util.timeparse import InstantLike, to_epoch_ms
from .util.tz import DEFAULT_TZ, civil_date, resolve_tz

Span = Tuple[InstantLike, InstantLike]


def _require_width(container_width: float) -> float:
    w = float(container_width)
    if w <= 0:
        raise ValueError(f"container_width must be positive, got {container_width!r}")
    return w


def calculate_date_range(
    spans: Iterable[Span],
    now: InstantLike,
    tz: Optional[str] = DEFAULT_TZ,
    *,
    previous: Optional[DateRange] = None,
    lead_days: int = 20,
    tail_days: int = 100,
    pad_days: int = 7,
) -> DateRange:
    """Visible window for a schedule.

    Future-weighted default: `lead_days` before today through `tail_days`
    after. Task spans falling outside the default pull the matching edge out
    to the span plus `pad_days`. With `previous`, the window never shrinks.
    """
    tzinfo = resolve_tz(tz)
    today = civil_date(to_epoch_ms(now), tzinfo)
    start = today - dt.timedelta(days=int(lead_days))
    end = today + dt.timedelta(days=int(tail_days))

    min_day: Optional[dt.date] = None
    max_day: Optional[dt.date] = None
    for s, e in spans:
        s_ms = to_epoch_ms(s)
        e_ms = to_epoch_ms(e)
        if s_ms > e_ms:
            raise InvalidRangeError(f"Task span start {s!r} is after end {e!r}")
        s_day = civil_date(s_ms, tzinfo)
        e_day = civil_date(e_ms, tzinfo)
        min_day = s_day if min_day is None or s_day < min_day else min_day
        max_day = e_day if max_day is None or e_day > max_day else max_day

    if min_day is not None and min_day < start:
        start = min_day - dt.timedelta(days=int(pad_days))
    if max_day is not None and max_day > end:
        end = max_day + dt.timedelta(days=int(pad_days))

    if previous is not None:
        start = min(start, previous.start)
        end = max(end, previous.end)

    return DateRange(start=start, end=end)


def task_bar_position(
    task_start: dt.date,
    task_end: dt.date,
    date_range: DateRange,
    container_width: float,
    row_height: float,
    row_index: int,
) -> BarPosition:
    """Pixel box of a task bar on a day-column grid.

    Columns are inclusive on both range ends, matching the day-mode tick count.
    A bar runs from the left edge of its start column to the right edge of its
    end column, one pixel short so it never bleeds into the next column.
    """
    if task_start > task_end:
        raise InvalidRangeError(f"Task start {task_start.isoformat()} is after end {task_end.isoformat()}")
    day_width = _require_width(container_width) / date_range.days_inclusive

    start_offset = (task_start - date_range.start).days
    duration = (task_end - task_start).days

    left = start_offset * day_width
    width = max((duration + 1) * day_width - 1, 1)
    top = row_index * row_height
    return BarPosition(left=left, width=width, top=top)


def pixel_to_date(pixel_x: float, container_width: float, date_range: DateRange) -> dt.date:
    ratio = float(pixel_x) / _require_width(container_width)
    # Half-column positions round up.
    day_offset = math.floor(ratio * date_range.days_inclusive + 0.5)
    return date_range.start + dt.timedelta(days=day_offset)


def today_position(
    date_range: DateRange,
    container_width: float,
    now: InstantLike,
    tz: Optional[str] = DEFAULT_TZ,
) -> Optional[float]:
    """Left edge of today's column, or None when today is outside the range."""
    width = _require_width(container_width)
    today = civil_date(to_epoch_ms(now), resolve_tz(tz))
    if today < date_range.start or today > date_range.end:
        return None
    day_width = width / date_range.days_inclusive
    return (today - date_range.start).days * day_width
