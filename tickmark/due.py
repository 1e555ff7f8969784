# tickmark/due.py
from __future__ import annotations

from typing import Optional

from .util.obs import obs_log
from .util.timeparse import InstantLike, to_epoch_ms
from .util.tz import DEFAULT_TZ, civil_date, normalize_tz_name, resolve_tz

STATUS_COMPLETED = "completed"


def is_before_today(due: InstantLike, reference_now: InstantLike, tz: Optional[str] = DEFAULT_TZ) -> bool:
    """True when `due` falls on a calendar day strictly before `reference_now`'s day in `tz`.

    Both instants are bucketed into civil dates in the same timezone and the
    dates are compared. Comparing the instants themselves, or date strings
    formatted in the machine's local zone, gives answers that change with the
    host: 2025-11-24T00:00+09:00 is 2025-11-24 in JST but 2025-11-23 in UTC.
    """
    tzinfo = resolve_tz(tz)
    due_day = civil_date(to_epoch_ms(due), tzinfo)
    ref_day = civil_date(to_epoch_ms(reference_now), tzinfo)

    obs_log("due", "due.cmp", due_day=due_day.isoformat(), ref_day=ref_day.isoformat(), tz=normalize_tz_name(tz))
    return due_day < ref_day


def is_overdue(
    due: Optional[InstantLike],
    reference_now: InstantLike,
    tz: Optional[str] = DEFAULT_TZ,
    *,
    status: Optional[str] = None,
) -> bool:
    """Overdue badge rule: completed tasks and tasks without a due date are never overdue."""
    if due is None:
        return False
    if (status or "").strip().lower() == STATUS_COMPLETED:
        return False
    return is_before_today(due, reference_now, tz)
