from dataclasses import dataclass, field
from datetime import date, datetime, timedelta
from typing import Optional, Self

from holidays import HolidayBase
from loguru import logger

from .classification import is_work_day
from .holidays import FRENCH_HOLIDAY_RULES, Holiday, HolidayRule, generate_holidays
from .utils import as_date


@dataclass(slots=True)
class WorkCalendar:
    '''
    Public holidays for a set of years plus custom holidays, backed by a holidays.HolidayBase.
    Several holidays on one date are stored once, their names joined.
    '''
    years: list[int] = field(default_factory=list)
    custom_holidays: list[Holiday] = field(default_factory=list)
    rules: tuple[tuple[str, HolidayRule], ...] = field(default=FRENCH_HOLIDAY_RULES)
    _calendar: HolidayBase = field(default=None)

    def __post_init__(self):
        if self._calendar is None:
            self._calendar = HolidayBase(expand=False)
            for year in self.years:
                self.add_holidays(generate_holidays(year, self.rules))
            self.add_holidays(self.custom_holidays)
        logger.debug(f'Work calendar ready with {len(self._calendar)} holiday dates for years {self.years}')

    def add_holiday(self, holiday: Holiday):
        self._calendar[holiday.date] = holiday.name

    def add_holidays(self, holidays: list[Holiday]):
        for h in holidays:
            self.add_holiday(h)

    def is_holiday(self, t: date | datetime) -> bool:
        return as_date(t) in self._calendar

    def holiday_name(self, t: date | datetime) -> Optional[str]:
        return self._calendar.get(as_date(t))

    def is_business_day(self, t: date | datetime) -> bool:
        return is_work_day(t) and not self.is_holiday(t)

    def add_business_days(self, t: date | datetime, business_days: int) -> date:
        # Zero steps returns t unchanged, even on a weekend or holiday.
        t = as_date(t)
        step = timedelta(days=1 if business_days >= 0 else -1)
        remaining = abs(business_days)
        while remaining > 0:
            t += step
            if self.is_business_day(t):
                remaining -= 1
        return t

    def get_holidays(self, year: int) -> list[Holiday]:
        return [Holiday(d, name) for d, name in sorted(self._calendar.items()) if d.year == year]

    def _entries(self) -> list[Holiday]:
        return [Holiday(d, name) for d in sorted(self._calendar) for name in self._calendar.get_list(d)]

    def combine(self, other: Self) -> Self:
        combined = HolidayBase(expand=False)
        for h in self._entries() + other._entries():
            combined[h.date] = h.name
        return WorkCalendar(years=sorted(set(self.years) | set(other.years)), rules=self.rules, _calendar=combined)

    def __add__(self, other: Self) -> Self:
        return self.combine(other)
