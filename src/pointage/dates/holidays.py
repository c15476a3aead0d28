from abc import ABC, abstractmethod
from collections.abc import Iterable
from dataclasses import dataclass, field
from datetime import date, timedelta
from typing import Self

from loguru import logger

from .utils import as_date


@dataclass(slots=True, frozen=True)
class Holiday:
    date: date
    name: str
    year: int = field(init=False)

    def __post_init__(self):
        object.__setattr__(self, 'date', as_date(self.date))
        object.__setattr__(self, 'year', self.date.year)


class HolidayRule(ABC):
    @abstractmethod
    def get_date(self, year: int) -> date:
        pass

    @abstractmethod
    def copy(self) -> Self:
        pass

    def __copy__(self) -> Self:
        return self.copy()


class MonthDayRule(HolidayRule):
    def __init__(self, month: int, day: int):
        self.month = month
        self.day = day

    def get_date(self, year: int) -> date:
        return date(year, self.month, self.day)

    def copy(self) -> Self:
        return MonthDayRule(self.month, self.day)


def easter_sunday(year: int) -> date:
    a = year % 19
    b = year // 100
    c = year % 100
    d = b // 4
    e = b % 4
    f = (b + 8) // 25
    g = (b - f + 1) // 3
    h = (19 * a + b - d - g + 15) % 30
    i = c // 4
    k = c % 4
    l = (32 + 2 * e + 2 * i - h - k) % 7
    m = (a + 11 * h + 22 * l) // 451
    month = (h + l - 7 * m + 114) // 31
    day = (h + l - 7 * m + 114) % 31 + 1
    return date(year, month, day)


class EasterOffsetRule(HolidayRule):
    def __init__(self, days: int):
        self.days = days

    def get_date(self, year: int) -> date:
        return easter_sunday(year) + timedelta(days=self.days)

    def copy(self) -> Self:
        return EasterOffsetRule(self.days)


FRENCH_HOLIDAY_RULES: tuple[tuple[str, HolidayRule], ...] = (
    ("Jour de l'An", MonthDayRule(1, 1)),
    ('Fête du Travail', MonthDayRule(5, 1)),
    ('Victoire 1945', MonthDayRule(5, 8)),
    ('Fête Nationale', MonthDayRule(7, 14)),
    ('Assomption', MonthDayRule(8, 15)),
    ('Toussaint', MonthDayRule(11, 1)),
    ('Armistice', MonthDayRule(11, 11)),
    ('Noël', MonthDayRule(12, 25)),
    ('Lundi de Pâques', EasterOffsetRule(1)),
    ('Ascension', EasterOffsetRule(39)),
    ('Lundi de Pentecôte', EasterOffsetRule(50)),
)


def generate_holidays(year: int, rules: Iterable[tuple[str, HolidayRule]] = FRENCH_HOLIDAY_RULES) -> list[Holiday]:
    '''
    Public holidays of year, sorted by date. Rules landing on the same day (Ascension on
    May 1 in 2008) produce two entries; merging them is left to the caller.
    '''
    holidays = [Holiday(rule.get_date(year), name) for name, rule in rules]
    holidays.sort(key=lambda h: h.date)
    logger.debug(f'Generated {len(holidays)} holidays for {year}, Easter on {easter_sunday(year)}')
    return holidays


def holidays_between(holidays: Iterable[Holiday], start: date, end: date) -> list[Holiday]:
    start, end = as_date(start), as_date(end)
    if end < start:
        raise ValueError(f'End date {end} must not be before start date {start}.')
    return sorted((h for h in holidays if start <= h.date <= end), key=lambda h: h.date)
