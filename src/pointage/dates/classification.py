from collections.abc import Iterable
from dataclasses import dataclass
from datetime import date, datetime
from enum import Enum
from typing import Optional

from .holidays import Holiday
from .utils import as_date, iter_days


class LeaveType(Enum):
    PAID = 'PAID'
    UNPAID = 'UNPAID'
    SICK = 'SICK'
    OTHER = 'OTHER'


@dataclass(slots=True, frozen=True)
class LeaveDay:
    date: date
    user_id: str
    type: LeaveType = LeaveType.PAID

    def __post_init__(self):
        object.__setattr__(self, 'date', as_date(self.date))


_WEEKEND_WEEKDAYS = {5, 6}


def is_work_day(t: date | datetime) -> bool:
    return as_date(t).weekday() not in _WEEKEND_WEEKDAYS


def is_holiday(t: date | datetime, holidays: Iterable[Holiday]) -> bool:
    t = as_date(t)
    return any(h.date == t for h in holidays)


def holiday_name(t: date | datetime, holidays: Iterable[Holiday]) -> Optional[str]:
    t = as_date(t)
    return next((h.name for h in holidays if h.date == t), None)


def is_leave_day(t: date | datetime, user_id: str, leaves: Iterable[LeaveDay]) -> bool:
    t = as_date(t)
    return any(leave.user_id == user_id and leave.date == t for leave in leaves)


def is_business_day(t: date | datetime, holidays: Iterable[Holiday], leaves: Optional[Iterable[LeaveDay]] = None,
                    user_id: Optional[str] = None) -> bool:
    '''
    A work day that is neither a holiday nor, when leaves and user_id are given, a leave day of that user.
    '''
    if not is_work_day(t) or is_holiday(t, holidays):
        return False
    if leaves is not None and user_id is not None:
        return not is_leave_day(t, user_id, leaves)
    return True


def expand_leave(start: date | datetime, end: date | datetime, user_id: str, type: LeaveType = LeaveType.PAID) -> list[LeaveDay]:
    '''
    One LeaveDay per weekday of the inclusive [start, end] interval. Weekends are skipped,
    holidays are not.
    '''
    return [LeaveDay(t, user_id, type) for t in iter_days(as_date(start), as_date(end)) if is_work_day(t)]


def count_business_days(start: date | datetime, end: date | datetime, holidays: Iterable[Holiday]) -> int:
    holiday_dates = {h.date for h in holidays}
    return sum(1 for t in iter_days(as_date(start), as_date(end)) if is_work_day(t) and t not in holiday_dates)
