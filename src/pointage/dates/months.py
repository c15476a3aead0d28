import calendar
from dataclasses import dataclass
from datetime import date, timedelta

from dateutil.relativedelta import relativedelta

from .utils import monday_on_or_before, sunday_on_or_after
from .weeks import week_number, week_year


@dataclass(slots=True, frozen=True)
class MonthWeek:
    week_number: int
    year: int
    days: tuple[date, ...]
    week_start: date
    week_end: date
    belongs_to_month: bool

    @property
    def thursday(self) -> date:
        return self.days[3]


def _first_of_month(month: int, year: int) -> date:
    # Months are 0-indexed: 0 is January, 11 is December.
    return date(year, month + 1, 1)


def _shift_month(month: int, year: int, months: int) -> tuple[int, int]:
    t = _first_of_month(month, year) + relativedelta(months=months)
    return t.month - 1, t.year


def next_month(month: int, year: int) -> tuple[int, int]:
    return _shift_month(month, year, 1)


def previous_month(month: int, year: int) -> tuple[int, int]:
    return _shift_month(month, year, -1)


def month_bounds(month: int, year: int) -> tuple[date, date]:
    month_start = _first_of_month(month, year)
    last_day = calendar.monthrange(year, month + 1)[1]
    return month_start, month_start.replace(day=last_day)


def _build_week(monday: date, month: int, year: int) -> MonthWeek:
    days = tuple(monday + timedelta(days=i) for i in range(7))
    thursday = days[3]
    belongs = thursday.month == month + 1 and thursday.year == year
    return MonthWeek(
        week_number=week_number(thursday),
        year=week_year(thursday),
        days=days,
        week_start=days[0],
        week_end=days[-1],
        belongs_to_month=belongs,
    )


def calendar_weeks(month: int, year: int) -> list[MonthWeek]:
    '''
    Every Monday-to-Sunday week touching the month, chronological and without gaps.
    Leading and trailing weeks may belong to the adjacent months.
    '''
    month_start, month_end = month_bounds(month, year)
    calendar_start = monday_on_or_before(month_start)
    calendar_end = sunday_on_or_after(month_end)

    weeks = []
    monday = calendar_start
    while monday <= calendar_end:
        weeks.append(_build_week(monday, month, year))
        monday += timedelta(weeks=1)
    return weeks


def month_weeks(month: int, year: int) -> list[MonthWeek]:
    '''
    Weeks displayed for a month: those whose Thursday falls inside it. Weeks are never clipped,
    so the grid may start in the previous month and end in the next one.
    '''
    return [w for w in calendar_weeks(month, year) if w.belongs_to_month]


def month_grid_range(month: int, year: int) -> tuple[date, date]:
    weeks = month_weeks(month, year)
    return weeks[0].week_start, weeks[-1].week_end
