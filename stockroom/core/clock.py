from datetime import datetime
from typing import Callable

# A clock is any zero-argument callable returning the current time.
# It is injected into the ledger so "now" and "today" stay deterministic in tests.
Clock = Callable[[], datetime]


def system_clock() -> datetime:
    """Returns the current local wall-clock time."""
    return datetime.now()
