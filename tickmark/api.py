"""tickmark.api

Stable *library* entrypoint for tickmark.

Policy:
  - Only names listed in __all__ are considered public API.
  - Everything else is internal and may change without notice.
"""

from __future__ import annotations

from tickmark.due import is_before_today, is_overdue
from tickmark.errors import (
    AmbiguousInstantError,
    InvalidRangeError,
    InvalidTimezoneError,
    TickmarkError,
    UnsupportedLocaleError,
    UnsupportedModeError,
)
from tickmark.labels import JapaneseLocale, Locale, NumericLocale, get_locale
from tickmark.layout import calculate_date_range, pixel_to_date, task_bar_position, today_position
from tickmark.model import VIEW_MODES, BarPosition, DateRange, Tick
from tickmark.ticks import add_months, format_tick_label, generate_ticks
from tickmark.util.timeparse import to_epoch_ms
from tickmark.util.tz import DEFAULT_TZ, civil_date, resolve_tz

__all__ = [
    "DEFAULT_TZ",
    "VIEW_MODES",
    "Tick",
    "DateRange",
    "BarPosition",
    "Locale",
    "JapaneseLocale",
    "NumericLocale",
    "get_locale",
    "generate_ticks",
    "format_tick_label",
    "add_months",
    "is_before_today",
    "is_overdue",
    "calculate_date_range",
    "task_bar_position",
    "pixel_to_date",
    "today_position",
    "to_epoch_ms",
    "civil_date",
    "resolve_tz",
    "TickmarkError",
    "InvalidRangeError",
    "UnsupportedModeError",
    "InvalidTimezoneError",
    "AmbiguousInstantError",
    "UnsupportedLocaleError",
]
