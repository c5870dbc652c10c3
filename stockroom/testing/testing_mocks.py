from datetime import datetime, timedelta


class FixedClock:
    """Clock stand-in for tests: returns a settable instant instead of wall-clock time."""

    def __init__(self, now: datetime):
        self.now = now

    def __call__(self) -> datetime:
        return self.now

    def advance(self, **kwargs) -> datetime:
        """Moves the clock forward by timedelta(**kwargs) and returns the new time."""
        self.now = self.now + timedelta(**kwargs)
        return self.now
