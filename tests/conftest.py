import pytest
from datetime import datetime, timezone

from airac.utils.clock import fixed_clock

@pytest.fixture
def now() -> datetime:
    """Return the instant used as "now" by the fixed clock."""
    return datetime(2026, 10, 17, 12, 0, tzinfo=timezone.utc)

@pytest.fixture
def clock(now):
    """Return a clock frozen at the ``now`` fixture."""
    return fixed_clock(now)
