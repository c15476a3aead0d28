from collections.abc import Iterable
from datetime import date
from typing import Optional

import pandas as pd

from .dates import Holiday, LeaveDay, generate_holidays, month_weeks
from .dates.classification import is_holiday, is_leave_day, is_work_day
from .formatting import DAY_SHORT_NAMES, day_name, format_date

HOLIDAY_MARK = 'F'
LEAVE_MARK = 'C'
WEEKEND_MARK = 'WE'


def holidays_frame(year: int) -> pd.DataFrame:
    holidays = generate_holidays(year)
    df = pd.DataFrame({
        'date': [h.date for h in holidays],
        'jour': [day_name(h.date.weekday()) for h in holidays],
        'nom': [h.name for h in holidays],
    })
    df['affichage'] = [format_date(h.date) for h in holidays]
    return df


def _mark_day(t: date, holidays: list[Holiday], leaves: list[LeaveDay], user_id: Optional[str]) -> str:
    if is_holiday(t, holidays):
        return f'{t.day} {HOLIDAY_MARK}'
    if user_id is not None and is_leave_day(t, user_id, leaves):
        return f'{t.day} {LEAVE_MARK}'
    if not is_work_day(t):
        return f'{t.day} {WEEKEND_MARK}'
    return str(t.day)


def month_grid_frame(month: int, year: int, holidays: Iterable[Holiday], leaves: Optional[Iterable[LeaveDay]] = None,
                     user_id: Optional[str] = None) -> pd.DataFrame:
    '''
    One row per displayed week, indexed by week number, one column per weekday. Cells hold the
    day of month followed by F (holiday), C (leave of user_id) or WE (weekend) when relevant.
    '''
    holidays = list(holidays)
    leaves = list(leaves or [])
    weeks = month_weeks(month, year)
    rows = [[_mark_day(t, holidays, leaves, user_id) for t in w.days] for w in weeks]
    return pd.DataFrame(rows, columns=list(DAY_SHORT_NAMES), index=pd.Index([w.week_number for w in weeks], name='semaine'))
