"""Clock abstraction supplying the current date to business rules."""

from abc import ABC, abstractmethod
from datetime import UTC, date, datetime


class Clock(ABC):
    @abstractmethod
    def today(self) -> date:
        """Return the date that age and birth-date rules are evaluated against."""
        raise NotImplementedError


class SystemClock(Clock):
    """Clock reading the current UTC date."""

    def today(self) -> date:
        return datetime.now(UTC).date()


class FixedClock(Clock):
    """Clock pinned to a given date, used by tests and replays."""

    def __init__(self, current: date):
        self._current = current

    def today(self) -> date:
        return self._current
