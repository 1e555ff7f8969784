from __future__ import annotations

import datetime as dt
from dataclasses import dataclass
from typing import Any, Dict

from .errors import InvalidRangeError

VIEW_DAY = "day"
VIEW_WEEK = "week"
VIEW_MONTH = "month"
VIEW_MODES = (VIEW_DAY, VIEW_WEEK, VIEW_MONTH)

WEEKEND_WEEKDAYS = (5, 6)  # date.weekday(): Saturday, Sunday


@dataclass(frozen=True)
class Tick:
    date: dt.date
    label: str
    is_weekend: bool

    def to_dict(self) -> Dict[str, Any]:
        return {"date": self.date.isoformat(), "label": self.label, "is_weekend": self.is_weekend}


@dataclass(frozen=True)
class DateRange:
    start: dt.date   # inclusive
    end: dt.date     # inclusive

    def __post_init__(self) -> None:
        if self.start > self.end:
            raise InvalidRangeError(f"Range start {self.start.isoformat()} is after end {self.end.isoformat()}")

    @property
    def days_inclusive(self) -> int:
        return (self.end - self.start).days + 1


@dataclass(frozen=True)
class BarPosition:
    left: float
    width: float
    top: float


__all__ = [
    "VIEW_DAY",
    "VIEW_WEEK",
    "VIEW_MONTH",
    "VIEW_MODES",
    "WEEKEND_WEEKDAYS",
    "Tick",
    "DateRange",
    "BarPosition",
]
