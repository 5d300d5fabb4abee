import time
from typing import Protocol


class Clock(Protocol):
    def now(self) -> int:
        """Current time in seconds since the epoch."""
        ...


class SystemClock:
    def now(self) -> int:
        return int(time.time())


class FrozenClock:
    """A clock stuck at a fixed instant, for tests."""

    def __init__(self, value: int):
        self.value = value

    def now(self) -> int:
        return self.value

    def advance(self, seconds: int) -> None:
        self.value += seconds
