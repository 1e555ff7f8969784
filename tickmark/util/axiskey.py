# tickmark/util/axiskey.py
from __future__ import annotations

import datetime as dt


def make_axis_key(start: dt.date, end: dt.date, mode: str, locale: str, tz: str) -> str:
    """Stable key for one axis request, used by renderers to cache tick lists.

    Identical inputs always give the same key (the tick list is a pure
    function of them). The timezone is part of the key because it decides
    which civil dates the endpoints fall on.
    """
    raw = f"{start.isoformat()}|{end.isoformat()}|{mode}|{locale}|{tz}"
    h = 0
    for ch in raw:
        h = (h * 131 + ord(ch)) & 0xFFFFFFFF
    return f"{h:08x}"
