"""
AIRAC (Aeronautical Information Regulation and Control) cycle library.

This package computes and parses the 28-day AIRAC cycles used to schedule
updates of Aeronautical Information Publications.

The main public API includes:
- Cycle: Immutable AIRAC cycle value (effective date, ordinal, identifier)
- AIRACDateCalculator: Schedule helpers built on Cycle
- AiracFormatError, AiracRangeError: Errors raised when parsing identifiers
"""

from .exceptions import AiracError, AiracFormatError, AiracRangeError
from .models.cycle import Cycle
from .utils.airac_date_calculator import AIRACDateCalculator
from .utils.clock import century_window, fixed_clock, utc_now


__version__ = '0.1.0'
__all__ = [
    'Cycle',
    'AIRACDateCalculator',
    'AiracError',
    'AiracFormatError',
    'AiracRangeError',
    'century_window',
    'fixed_clock',
    'utc_now',
]
