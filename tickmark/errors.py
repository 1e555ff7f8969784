"""Error taxonomy for tickmark.

All errors are local validation failures on malformed input. They subclass
ValueError so callers that already guard date parsing keep working.
"""

from __future__ import annotations


class TickmarkError(ValueError):
    """Base class for tickmark input errors."""


class InvalidRangeError(TickmarkError):
    """Raised when a range starts after it ends."""


class UnsupportedModeError(TickmarkError):
    """Raised for a view mode outside day/week/month."""


class InvalidTimezoneError(TickmarkError):
    """Raised for an unknown or disallowed timezone identifier."""


class AmbiguousInstantError(TickmarkError):
    """Raised when an instant carries no explicit UTC offset."""


class UnsupportedLocaleError(TickmarkError):
    """Raised for an unknown locale name or an object that is not a locale."""


__all__ = [
    "TickmarkError",
    "InvalidRangeError",
    "UnsupportedModeError",
    "InvalidTimezoneError",
    "AmbiguousInstantError",
    "UnsupportedLocaleError",
]
