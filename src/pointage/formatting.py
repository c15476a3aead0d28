'''
French labels for weeks, months and days. Presentation only: nothing in pointage.dates
depends on this module.
'''
from collections.abc import Callable
from datetime import date, datetime
from typing import Optional

from .dates import week_range, weeks_in_year
from .dates.utils import as_date
from .settings import Settings, settings as default_settings

DAY_NAMES = ('Lundi', 'Mardi', 'Mercredi', 'Jeudi', 'Vendredi', 'Samedi', 'Dimanche')
DAY_SHORT_NAMES = ('Lun', 'Mar', 'Mer', 'Jeu', 'Ven', 'Sam', 'Dim')
MONTH_NAMES = ('Janvier', 'Février', 'Mars', 'Avril', 'Mai', 'Juin',
               'Juillet', 'Août', 'Septembre', 'Octobre', 'Novembre', 'Décembre')
MONTH_SHORT_NAMES = ('janv.', 'févr.', 'mars', 'avr.', 'mai', 'juin',
                     'juil.', 'août', 'sept.', 'oct.', 'nov.', 'déc.')


def day_name(day_index: int) -> str:
    # 0 is Monday
    return DAY_NAMES[day_index] if 0 <= day_index < 7 else ''


def day_short_name(day_index: int) -> str:
    return DAY_SHORT_NAMES[day_index] if 0 <= day_index < 7 else ''


def format_date(t: date | datetime, format_str: str = '%d/%m/%Y') -> str:
    return as_date(t).strftime(format_str)


def _short_day_month(t: date) -> str:
    return f'{t.day} {MONTH_SHORT_NAMES[t.month - 1]}'


def format_month_year(month: int, year: int) -> str:
    return f'{MONTH_NAMES[month].lower()} {year}'


def format_week_label(week_number: int, year: int) -> str:
    wr = week_range(week_number, year)
    return f'Semaine {week_number} - {_short_day_month(wr.start)} au {_short_day_month(wr.end)} {wr.end.year}'


def month_options() -> list[dict]:
    return [{'value': i + 1, 'label': name} for i, name in enumerate(MONTH_NAMES)]


def year_options(clock: Callable[[], date | datetime] = datetime.now, settings: Optional[Settings] = None) -> list[dict]:
    settings = settings or default_settings
    current_year = as_date(clock()).year
    years = range(current_year - settings.years_back, current_year + settings.years_ahead + 1)
    return [{'value': y, 'label': str(y)} for y in years]


def week_options(year: int) -> list[dict]:
    options = []
    for w in range(1, weeks_in_year(year) + 1):
        monday = week_range(w, year).start
        options.append({'value': w, 'label': f'S{w} - {monday.strftime("%d/%m")}'})
    return options
