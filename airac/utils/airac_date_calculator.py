"""
AIRAC date calculation utilities.

This module provides schedule helpers on top of the Cycle model: next and
previous effective dates, ranges of AIRAC dates and the list of cycles of a
given year. AIRAC dates follow a 28-day cycle and always fall on Thursdays.
"""

import logging
from datetime import MAXYEAR, MINYEAR, date, datetime, timezone
from typing import Iterable, List, Optional, Union

import pandas as pd
from dateutil import parser as date_parser

from ..models.cycle import Cycle
from .clock import Clock, YearExpander, utc_now

logger = logging.getLogger(__name__)

DateLike = Union[str, date, datetime]


class AIRACDateCalculator:
    """
    Utility for calculating AIRAC dates based on the 28-day cycle.

    Dates can be given as ``date``, ``datetime`` or ISO-8601 strings
    (YYYY-MM-DD). When no date is given the calculator uses today's UTC date
    from its clock.
    """

    # AIRAC cycle length in days
    AIRAC_CYCLE_DAYS = 28

    # Thursday weekday number (Monday=0, Tuesday=1, ..., Thursday=3)
    THURSDAY_WEEKDAY = 3

    def __init__(self, clock: Optional[Clock] = None):
        """
        Initialize the AIRAC date calculator.

        Args:
            clock: Time source used when no date is given (defaults to the system UTC clock)
        """
        self.clock = clock or utc_now

    def _parse_date(self, value: Optional[DateLike]) -> date:
        """Convert a date, datetime or ISO-8601 string to a date, defaulting to today."""
        if value is None:
            return self._today()
        if isinstance(value, datetime):
            if value.tzinfo is not None and value.utcoffset() is not None:
                value = value.astimezone(timezone.utc)
            return value.date()
        if isinstance(value, date):
            return value
        try:
            return date_parser.isoparse(value).date()
        except (ValueError, TypeError):
            raise ValueError(f"Invalid date format: {value}. Expected YYYY-MM-DD")

    def _today(self) -> date:
        return self._parse_date(self.clock())

    def current_cycle(self, from_date: Optional[DateLike] = None) -> Cycle:
        """
        Get the cycle containing a date.

        Args:
            from_date: Date to look up (defaults to today)

        Returns:
            The cycle in effect on that date
        """
        if from_date is None:
            return Cycle.now(self.clock)
        return Cycle.from_date(self._parse_date(from_date))

    def next_airac_date(self, from_date: Optional[DateLike] = None) -> date:
        """
        Get the next AIRAC date from a given date.

        Args:
            from_date: Date to calculate from (defaults to today)

        Returns:
            First AIRAC date strictly after ``from_date``
        """
        return self.current_cycle(from_date).next().effective_date

    def previous_airac_date(self, from_date: Optional[DateLike] = None) -> date:
        """
        Get the previous AIRAC date from a given date.

        Args:
            from_date: Date to calculate from (defaults to today)

        Returns:
            Last AIRAC date strictly before ``from_date``
        """
        day = self._parse_date(from_date)
        cycle = Cycle.from_date(day)
        if cycle.effective_date == day:
            # On an AIRAC date, the previous one is a full cycle earlier
            cycle = cycle.previous()
        return cycle.effective_date

    def get_current_airac_date(self, from_date: Optional[DateLike] = None) -> date:
        """
        Get the current effective AIRAC date (the most recent AIRAC date not in the future).

        Args:
            from_date: Date to calculate from (defaults to today)

        Returns:
            Effective date of the cycle containing ``from_date``
        """
        return self.current_cycle(from_date).effective_date

    def is_airac_date(self, value: DateLike) -> bool:
        """
        Check if a given date is an AIRAC date.

        Args:
            value: Date to check

        Returns:
            True if the date is the first day of a cycle, False otherwise
        """
        day = self._parse_date(value)
        if day.weekday() != self.THURSDAY_WEEKDAY:
            return False
        return Cycle.from_date(day).effective_date == day

    def get_airac_dates_range(self, start_date: Optional[DateLike] = None,
                              end_date: Optional[DateLike] = None,
                              count: Optional[int] = None) -> List[date]:
        """
        Get a range of AIRAC dates.

        Args:
            start_date: Starting date (defaults to today)
            end_date: Ending date, included if it is an AIRAC date
            count: Number of dates to return (alternative to end_date)

        Returns:
            AIRAC dates on or after ``start_date``

        Raises:
            ValueError: If both end_date and count are provided, or neither is provided
        """
        return [cycle.effective_date for cycle in self.get_cycles_range(start_date, end_date, count)]

    def get_cycles_range(self, start_date: Optional[DateLike] = None,
                         end_date: Optional[DateLike] = None,
                         count: Optional[int] = None) -> List[Cycle]:
        """
        Get the cycles whose effective date falls in a range.

        Same arguments as get_airac_dates_range.
        """
        if (end_date is None and count is None) or (end_date is not None and count is not None):
            raise ValueError("Either end_date or count must be provided, but not both")

        start = self._parse_date(start_date)
        current = Cycle.from_date(start)
        if current.effective_date < start:
            current = current.next()

        if count is not None:
            return [current.next(offset) for offset in range(count)]

        end = self._parse_date(end_date)
        cycles = []
        while current.effective_date <= end:
            cycles.append(current)
            current = current.next()
        return cycles

    def cycles_in_year(self, year: int) -> List[Cycle]:
        """
        Get all the cycles starting in a year.

        Args:
            year: Four digit year

        Returns:
            The 13 or 14 cycles of the year, in order

        Raises:
            ValueError: If the year is outside the supported range
        """
        if not MINYEAR < year <= MAXYEAR:
            raise ValueError(f"Year {year} is outside the supported range")

        current = Cycle.from_date(date(year - 1, 12, 31)).next()
        cycles = []
        while True:
            try:
                effective_date = current.effective_date
            except OverflowError:
                # The last cycle of 9999 has no representable successor
                break
            if effective_date.year != year:
                break
            cycles.append(current)
            current = current.next()
        logger.debug(f"{year} has {len(cycles)} cycles")
        return cycles

    def days_until_next_airac(self, from_date: Optional[DateLike] = None) -> int:
        """
        Calculate the number of days until the next AIRAC date.

        Args:
            from_date: Date to calculate from (defaults to today)

        Returns:
            Number of days until the next AIRAC date
        """
        day = self._parse_date(from_date)
        return (self.next_airac_date(day) - day).days

    def days_since_previous_airac(self, from_date: Optional[DateLike] = None) -> int:
        """
        Calculate the number of days since the previous AIRAC date.

        Args:
            from_date: Date to calculate from (defaults to today)

        Returns:
            Number of days since the previous AIRAC date
        """
        day = self._parse_date(from_date)
        return (day - self.previous_airac_date(day)).days

    @staticmethod
    def schedule_dataframe(cycles: Iterable[Cycle]) -> pd.DataFrame:
        """
        Tabulate cycles, one row per cycle.

        Args:
            cycles: Cycles to include, in the order given

        Returns:
            DataFrame with identifier, ordinal, effective_date and end_date columns
        """
        rows = [
            {
                'identifier': cycle.identifier,
                'ordinal': cycle.ordinal,
                'effective_date': cycle.effective_date,
                'end_date': cycle.end_date,
            }
            for cycle in cycles
        ]
        return pd.DataFrame(rows, columns=['identifier', 'ordinal', 'effective_date', 'end_date'])


# Convenience functions for common operations
def is_airac_date(value: DateLike) -> bool:
    """
    Check if a date is an AIRAC date.

    Args:
        value: Date to check

    Returns:
        True if the date is an AIRAC date
    """
    return AIRACDateCalculator().is_airac_date(value)


def get_next_airac_date(from_date: Optional[DateLike] = None, clock: Optional[Clock] = None) -> date:
    """
    Get the next AIRAC date.

    Args:
        from_date: Date to calculate from (defaults to today)
        clock: Time source used when no date is given

    Returns:
        First AIRAC date strictly after ``from_date``
    """
    return AIRACDateCalculator(clock).next_airac_date(from_date)


def current_cycle(clock: Optional[Clock] = None) -> Cycle:
    """Get the cycle in effect today."""
    return Cycle.now(clock)


def parse_cycle(identifier: str, year_expander: Optional[YearExpander] = None,
                clock: Optional[Clock] = None) -> Cycle:
    """Shortcut for Cycle.parse."""
    return Cycle.parse(identifier, year_expander, clock)
