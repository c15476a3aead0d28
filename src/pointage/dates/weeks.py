from collections.abc import Callable
from dataclasses import dataclass
from datetime import date, datetime, timedelta

from .utils import as_date, monday_on_or_before


@dataclass(slots=True, frozen=True)
class WeekId:
    week_number: int
    year: int


@dataclass(slots=True, frozen=True)
class WeekRange:
    start: date
    end: date

    @property
    def days(self) -> list[date]:
        return [self.start + timedelta(days=i) for i in range(7)]

    def __contains__(self, t: date) -> bool:
        return self.start <= as_date(t) <= self.end


def week_number(t: date | datetime) -> int:
    return as_date(t).isocalendar()[1]


def week_year(t: date | datetime) -> int:
    '''
    Year paired with week_number(t). This is the calendar year of t, not the ISO week-year:
    2024-12-30 is week 1 of year 2024 and 2021-01-01 is week 53 of year 2021.
    Use iso_week_year when the strict ISO pairing is needed.
    '''
    return as_date(t).year


def iso_week_year(t: date | datetime) -> int:
    return as_date(t).isocalendar()[0]


def week_id(t: date | datetime) -> WeekId:
    return WeekId(week_number(t), week_year(t))


def week_range(week_number: int, year: int) -> WeekRange:
    '''
    Week ranges are anchored on the Monday on or before January 1 of year, so week 1 always
    contains January 1. In years starting on Friday, Saturday or Sunday that first week is
    the last ISO week of the previous year, and every later range recomputes to week_number - 1.
    '''
    calendar_start = monday_on_or_before(date(year, 1, 1))
    start = calendar_start + timedelta(weeks=week_number - 1)
    return WeekRange(start, start + timedelta(days=6))


def week_days(week_number: int, year: int) -> list[date]:
    return week_range(week_number, year).days


def _shift_week(week_number: int, year: int, weeks: int) -> WeekId:
    shifted_start = week_range(week_number, year).start + timedelta(weeks=weeks)
    return week_id(shifted_start)


def next_week(week_number: int, year: int) -> WeekId:
    return _shift_week(week_number, year, 1)


def previous_week(week_number: int, year: int) -> WeekId:
    return _shift_week(week_number, year, -1)


def current_week(clock: Callable[[], date | datetime] = datetime.now) -> WeekId:
    return week_id(clock())


def weeks_in_year(year: int) -> int:
    # December 28 always lies in the last ISO week of its year.
    return date(year, 12, 28).isocalendar()[1]
