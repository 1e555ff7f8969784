"""Label formatting strategies.

A locale only turns civil dates into strings. It never sees an instant or a
timezone, so labels cannot depend on where the code runs.
"""

from __future__ import annotations

import datetime as dt
from typing import Dict, Optional, Tuple, Union

from tickmark.errors import UnsupportedLocaleError


class Locale:
    """Base label policy. Subclasses provide the month and weekday vocabulary."""

    name = "base"
    weekday_names: Tuple[str, ...] = ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun")

    def format_day_label(self, d: dt.date) -> str:
        return f"{d.month}/{d.day}"

    def format_month_label(self, d: dt.date) -> str:
        return f"{d.month}"

    def weekday_name(self, d: dt.date) -> str:
        return self.weekday_names[d.weekday()]

    def format_full_date(self, d: dt.date) -> str:
        return f"{d.year:04d}/{d.month:02d}/{d.day:02d} ({self.weekday_name(d)})"

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


class JapaneseLocale(Locale):
    name = "ja"
    weekday_names = ("月", "火", "水", "木", "金", "土", "日")

    def format_month_label(self, d: dt.date) -> str:
        return f"{d.month}月"


class NumericLocale(Locale):
    name = "numeric"


JAPANESE = JapaneseLocale()
NUMERIC = NumericLocale()

DEFAULT_LOCALE = "ja"

LOCALES: Dict[str, Locale] = {
    "ja": JAPANESE,
    "ja-jp": JAPANESE,
    "numeric": NUMERIC,
    "en": NUMERIC,
}

_LOCALE_METHODS = ("format_day_label", "format_month_label")


def get_locale(locale: Optional[Union[str, Locale]] = None) -> Locale:
    """Resolve a registry name (or pass through a locale object).

    None selects the Japanese locale. Objects are duck-typed: anything with
    format_day_label/format_month_label is accepted.
    """
    if locale is None:
        return LOCALES[DEFAULT_LOCALE]
    if isinstance(locale, str):
        key = locale.strip().lower().replace("_", "-")
        try:
            return LOCALES[key]
        except KeyError:
            raise UnsupportedLocaleError(
                f"Unsupported locale: {locale!r} (known: {', '.join(sorted(LOCALES))})"
            ) from None
    if all(callable(getattr(locale, m, None)) for m in _LOCALE_METHODS):
        return locale
    raise UnsupportedLocaleError(f"Not a locale: {type(locale).__name__}")
