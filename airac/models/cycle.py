"""
AIRAC cycle model.

The AIRAC (Aeronautical Information Regulation and Control) cycle governs the
publication schedule of Aeronautical Information Publications. Cycles do not
overlap, each one begins on a Thursday (UTC) and lasts 28 days.

See https://www.icao.int/airnavigation/information-management/Pages/AIRAC.aspx
"""

import logging
import re
from dataclasses import dataclass
from datetime import MAXYEAR, MINYEAR, date, datetime, timedelta, timezone
from typing import ClassVar, Optional, Union

from ..exceptions import AiracFormatError, AiracRangeError
from ..utils.clock import Clock, YearExpander, century_window, utc_now

logger = logging.getLogger(__name__)

_IDENTIFIER_PATTERN = re.compile(r'[0-9]+')


@dataclass(frozen=True, order=True, repr=False)
class Cycle:
    """
    One 28-day AIRAC cycle.

    The only stored state is the serial, the number of cycles between the
    epoch and this cycle. Effective date, ordinal and identifier are derived.

    Two cycles are equal when their serials are equal, whatever date they
    were built from:

        >>> Cycle.from_date(date(2020, 1, 2)) == Cycle.from_date(date(2020, 1, 16))
        True
    """

    # Arbitrary Thursday from which cycles are counted. AIRAC was introduced
    # in 1964, so earlier cycles are academic.
    _EPOCH: ClassVar[date] = date(1901, 1, 10)
    _DURATION: ClassVar[timedelta] = timedelta(days=28)

    serial: int

    @classmethod
    def now(cls, clock: Optional[Clock] = None) -> 'Cycle':
        """
        Get the cycle in effect at the current UTC date.

        Args:
            clock: Time source (defaults to the system UTC clock)

        Returns:
            The current cycle
        """
        return cls.from_datetime((clock or utc_now)())

    @classmethod
    def from_date(cls, value: Union[date, datetime]) -> 'Cycle':
        """
        Get the cycle whose 28-day window contains the given date.

        Args:
            value: Date to look up. Datetimes are normalised as in from_datetime.

        Returns:
            The containing cycle
        """
        if isinstance(value, datetime):
            return cls.from_datetime(value)
        days = value.toordinal() - cls._EPOCH.toordinal()
        return cls(days // cls._DURATION.days)

    @classmethod
    def from_datetime(cls, value: datetime) -> 'Cycle':
        """
        Get the cycle containing the UTC date of the given datetime.

        Args:
            value: Aware datetimes are converted to UTC, naive ones are taken as UTC

        Returns:
            The containing cycle
        """
        if value.tzinfo is not None and value.utcoffset() is not None:
            value = value.astimezone(timezone.utc)
        return cls.from_date(value.date())

    @classmethod
    def parse(cls, identifier: str,
              year_expander: Optional[YearExpander] = None,
              clock: Optional[Clock] = None) -> 'Cycle':
        """
        Get the cycle represented by an identifier.

        Any string of ASCII digits is accepted: the last two digits are the
        ordinal and the rest is the two-digit year, so ``"12345"`` reads as
        year part 123 and ordinal 45.

        Args:
            identifier: Identifier in the format YYoo
            year_expander: Converts the two-digit year to four digits
                (defaults to the current UTC century, see century_window)
            clock: Time source for the default year expander

        Returns:
            The cycle whose identifier is ``identifier``

        Raises:
            AiracFormatError: If the identifier is not made of digits only
            AiracRangeError: If the ordinal does not exist in the expanded year
        """
        if not isinstance(identifier, str) or not _IDENTIFIER_PATTERN.fullmatch(identifier):
            raise AiracFormatError(identifier)

        try:
            value = int(identifier)
        except ValueError:
            # Digit strings beyond the interpreter's integer conversion limit
            raise AiracFormatError(identifier)
        yy, ordinal = divmod(value, 100)

        if year_expander is None:
            year = century_window(yy, clock)
        else:
            year = year_expander(yy)
        logger.debug(f"Identifier {identifier} expands to year {year}, ordinal {ordinal}")

        if not MINYEAR < year <= MAXYEAR:
            raise AiracRangeError(year, ordinal, f"Year {year} is outside the supported range")

        last_cycle_of_previous_year = cls.from_date(date(year - 1, 12, 31))
        cycle = cls(last_cycle_of_previous_year.serial + ordinal)

        try:
            effective_year = cycle.effective_date.year
        except OverflowError:
            effective_year = None
        if effective_year != year:
            logger.debug(f"Rejecting {identifier}: serial {cycle.serial} does not start in {year}")
            raise AiracRangeError(year, ordinal)

        return cycle

    from_identifier = parse

    @property
    def effective_date(self) -> date:
        """The first day of the cycle, always a Thursday."""
        return self._EPOCH + self._DURATION * self.serial

    @property
    def end_date(self) -> date:
        """The last day of the cycle, capped at date.max for the last cycle of 9999."""
        effective_date = self.effective_date
        try:
            return effective_date + (self._DURATION - timedelta(days=1))
        except OverflowError:
            return date.max

    @property
    def ordinal(self) -> int:
        """Position of the cycle among the cycles starting in the same year, from 1."""
        day_of_year = self.effective_date.timetuple().tm_yday
        return (day_of_year - 1) // self._DURATION.days + 1

    @property
    def identifier(self) -> str:
        """Human readable representation in the format YYoo."""
        effective_date = self.effective_date
        return f"{effective_date.year % 100:02d}{self.ordinal:02d}"

    def next(self, count: int = 1) -> 'Cycle':
        """Get the cycle ``count`` cycles after this one."""
        return Cycle(self.serial + count)

    def previous(self, count: int = 1) -> 'Cycle':
        """Get the cycle ``count`` cycles before this one."""
        return Cycle(self.serial - count)

    def __add__(self, other: int) -> 'Cycle':
        if isinstance(other, int):
            return self.next(other)
        return NotImplemented

    def __sub__(self, other):
        if isinstance(other, Cycle):
            return self.serial - other.serial
        if isinstance(other, int):
            return self.previous(other)
        return NotImplemented

    def __contains__(self, value: Union[date, datetime]) -> bool:
        return Cycle.from_date(value) == self

    def __hash__(self) -> int:
        return hash(self.serial)

    def __str__(self) -> str:
        return self.identifier

    def __repr__(self) -> str:
        try:
            return f"Cycle({self.identifier}, effective_date={self.effective_date.isoformat()})"
        except OverflowError:
            return f"Cycle(serial={self.serial})"
