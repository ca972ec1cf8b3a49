"""
Exceptions raised when an AIRAC identifier cannot be turned into a cycle.
"""

from typing import Any, Optional


class AiracError(ValueError):
    """Base class for AIRAC parsing errors."""


class AiracFormatError(AiracError):
    """Exception raised when an identifier is not a base-10 non-negative integer."""

    def __init__(self, identifier: Any):
        """
        Initialize format error.

        Args:
            identifier: The rejected input, kept as given
        """
        super().__init__(f"Invalid AIRAC identifier: {identifier!r}. Expected digits in the format YYoo")
        self.identifier = identifier


class AiracRangeError(AiracError):
    """Exception raised when a year does not contain the requested cycle."""

    def __init__(self, year: int, ordinal: int, message: Optional[str] = None):
        """
        Initialize range error.

        Args:
            year: Four digit year the identifier was expanded to
            ordinal: Requested position of the cycle within that year
            message: Optional message replacing the default one
        """
        super().__init__(message or f"{year} does not have {ordinal} cycles")
        self.year = year
        self.ordinal = ordinal
