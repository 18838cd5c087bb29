"""Dense, calendar-contiguous daily load series."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, timedelta


@dataclass(frozen=True)
class DailyLoad:
    """Training load summed over one calendar day."""

    date: date
    load: float


@dataclass(frozen=True)
class DailyLoadSeries:
    """One load value per calendar day, oldest first.

    The last entry is the anchor day ("today"). Rest days are present
    with a load of 0.0, never omitted.
    """

    anchor_date: date
    loads: tuple[float, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        if any(load < 0 for load in self.loads):
            raise ValueError("Daily loads must be non-negative")

    def __len__(self) -> int:
        return len(self.loads)

    @property
    def start_date(self) -> date:
        return self.anchor_date - timedelta(days=len(self.loads) - 1)

    @property
    def dates(self) -> tuple[date, ...]:
        start = self.start_date
        return tuple(start + timedelta(days=i) for i in range(len(self.loads)))

    @property
    def days_with_data(self) -> int:
        """Number of days with a strictly positive load."""
        return sum(1 for load in self.loads if load > 0)

    def date_at(self, index: int) -> date:
        """Calendar date of the entry at *index* (0 = oldest)."""
        return self.start_date + timedelta(days=index)

    def last(self, n: int) -> tuple[float, ...]:
        """The most recent *n* loads (fewer if the series is shorter)."""
        if n <= 0:
            return ()
        return self.loads[-n:]

    def days(self) -> list[DailyLoad]:
        """The series as (date, load) pairs."""
        return [DailyLoad(date=d, load=load) for d, load in zip(self.dates, self.loads)]
