"""
Time source and two-digit year windowing.

Everything in the library that needs "now" goes through a clock: a callable
taking no arguments and returning an aware UTC datetime. Tests and callers
pass their own clock instead of patching the system time.
"""

from datetime import datetime, timezone
from typing import Callable, Optional

Clock = Callable[[], datetime]
YearExpander = Callable[[int], int]


def utc_now() -> datetime:
    """Return the current date and time in UTC."""
    return datetime.now(timezone.utc)


def fixed_clock(moment: datetime) -> Clock:
    """
    Build a clock that always returns the same instant.

    Args:
        moment: Instant to return. Naive values are taken as UTC.

    Returns:
        A clock returning ``moment`` as an aware UTC datetime
    """
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)
    else:
        moment = moment.astimezone(timezone.utc)
    return lambda: moment


def century_window(two_digit_year: int, clock: Optional[Clock] = None) -> int:
    """
    Expand a two-digit year into the current century.

    The current century is taken from the clock's UTC year with no pivot:
    ``23`` read during 2026 gives 2023, and ``99`` read during 2100 gives 2199.
    Callers that need a different window pass their own year expander.

    Args:
        two_digit_year: The low-order digits of a year
        clock: Time source (defaults to the system UTC clock)

    Returns:
        A four digit year
    """
    now = (clock or utc_now)()
    hundreds = now.year // 100
    return hundreds * 100 + two_digit_year
