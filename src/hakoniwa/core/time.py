"""
Time: the hierarchical clock of a world.

Simulated time is a single counter of unit-ticks (`all`) viewed through two
calendar ratios:
- one_day_of_time: unit-ticks per day
- one_year_of_day: days per year

The derived fields (day, remainder_time, year, remainder_day) are carried
along so hosts can read "what day of the year is it" without dividing.

Invariants after every operation except change_rule:
    all == day * one_day_of_time + remainder_time
    day == year * one_year_of_day + remainder_day
"""

from __future__ import annotations
from dataclasses import dataclass, replace
from typing import Optional


def _check_int(name: str, value) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"{name} must be an int, got {value!r}")


def _check_ratios(one_day_of_time: int, one_year_of_day: int):
    _check_int("one_day_of_time", one_day_of_time)
    _check_int("one_year_of_day", one_year_of_day)
    if one_day_of_time <= 0 or one_year_of_day <= 0:
        raise ValueError(
            f"Calendar ratios must be positive, got "
            f"one_day_of_time={one_day_of_time}, one_year_of_day={one_year_of_day}"
        )


@dataclass(frozen=True)
class Time:
    """
    A point (or span) of simulated time.

    Time values are immutable: every operation returns a new Time. Use
    Time.new() rather than the constructor so derived fields are consistent.
    """

    all: int  # Total elapsed unit-ticks
    one_day_of_time: int  # Unit-ticks per day
    day: int
    remainder_time: int  # Unit-ticks into the current day
    one_year_of_day: int  # Days per year
    year: int
    remainder_day: int  # Day of the current year

    @classmethod
    def new(cls, all: int, one_day_of_time: int, one_year_of_day: int) -> Time:
        """
        Build a Time from a tick count and the two calendar ratios.

        Raises:
            ValueError: if a value is not an int, a ratio is not positive,
                or `all` is negative
        """
        _check_ratios(one_day_of_time, one_year_of_day)
        _check_int("all", all)
        if all < 0:
            raise ValueError(f"Time cannot be negative, got all={all}")

        day, remainder_time = divmod(all, one_day_of_time)
        year, remainder_day = divmod(day, one_year_of_day)
        return cls(
            all=all,
            one_day_of_time=one_day_of_time,
            day=day,
            remainder_time=remainder_time,
            one_year_of_day=one_year_of_day,
            year=year,
            remainder_day=remainder_day,
        )

    def plus(self, delta: int) -> Time:
        """
        Advance by `delta` unit-ticks, propagating day and year carries.

        The result equals Time.new(self.all + delta, ...) field for field.
        """
        _check_int("delta", delta)
        if delta < 0:
            raise ValueError(f"Cannot advance time by a negative amount: {delta}")

        plus_day, remainder_time = divmod(self.remainder_time + delta, self.one_day_of_time)
        plus_year, remainder_day = divmod(self.remainder_day + plus_day, self.one_year_of_day)
        return replace(
            self,
            all=self.all + delta,
            day=self.day + plus_day,
            remainder_time=remainder_time,
            year=self.year + plus_year,
            remainder_day=remainder_day,
        )

    def plus_one(self) -> Time:
        """Advance by a single unit-tick."""
        return self.plus(1)

    def change_rule(self, one_day_of_time: int, one_year_of_day: int) -> Time:
        """
        Switch calendar ratios, carrying only the current remainders.

        day/year are re-derived from remainder_time and remainder_day against
        the new ratios; `all` is left untouched. When ratios shrink, the
        result no longer satisfies the Time.new() invariant. Use rebase() to
        recompute everything from `all` instead.
        """
        _check_ratios(one_day_of_time, one_year_of_day)

        plus_day, remainder_time = divmod(self.remainder_time, one_day_of_time)
        plus_year, remainder_day = divmod(self.remainder_day + plus_day, one_year_of_day)
        return replace(
            self,
            one_day_of_time=one_day_of_time,
            day=self.day + plus_day,
            remainder_time=remainder_time,
            one_year_of_day=one_year_of_day,
            year=self.year + plus_year,
            remainder_day=remainder_day,
        )

    def rebase(self, one_day_of_time: int, one_year_of_day: int) -> Time:
        """Switch calendar ratios, recomputing every field from `all`."""
        return Time.new(self.all, one_day_of_time, one_year_of_day)

    def add(self, other: Time) -> Time:
        """Sum of two durations, expressed in this value's calendar."""
        return Time.new(self.all + other.all, self.one_day_of_time, self.one_year_of_day)

    def minus(self, other: Time) -> Optional[Time]:
        """
        Difference of two durations, expressed in this value's calendar.

        Returns None instead of a negative duration when `other` is longer.
        """
        if other.all > self.all:
            return None
        return Time.new(self.all - other.all, self.one_day_of_time, self.one_year_of_day)

    def __add__(self, other: Time) -> Time:
        return self.add(other)

    def consistent(self) -> bool:
        """True when the derived fields agree with Time.new(self.all, ...)."""
        return self == self.rebase(self.one_day_of_time, self.one_year_of_day)


@dataclass
class CalendarConfig:
    """Calendar ratios shared by every Time value of one world."""

    one_day_of_time: int = 24  # Unit-ticks per day
    one_year_of_day: int = 365  # Days per year

    def __post_init__(self):
        _check_ratios(self.one_day_of_time, self.one_year_of_day)

    @property
    def one_year_of_time(self) -> int:
        """Unit-ticks per year."""
        return self.one_day_of_time * self.one_year_of_day

    def at(self, all: int) -> Time:
        """Time value at tick `all` in this calendar."""
        return Time.new(all, self.one_day_of_time, self.one_year_of_day)

    def zero(self) -> Time:
        return self.at(0)

    def days(self, n: int) -> Time:
        """Duration of `n` days."""
        return self.at(n * self.one_day_of_time)

    def years(self, n: int) -> Time:
        """Duration of `n` years."""
        return self.at(n * self.one_year_of_time)
