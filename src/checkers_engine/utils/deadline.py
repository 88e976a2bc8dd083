"""Wall-clock deadline for move selection."""

import time


class Deadline:
    """
    A fixed instant in the future.

    Uses the monotonic clock, so it is unaffected by system clock changes.
    """

    def __init__(self, seconds: float):
        """
        Args:
            seconds: Time from now until the deadline
        """
        self._instant = time.monotonic() + seconds

    def time_until(self) -> float:
        """Seconds left until the deadline (negative once it has passed)."""
        return self._instant - time.monotonic()

    def expired(self) -> bool:
        return self.time_until() <= 0
