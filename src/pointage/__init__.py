from .__version__ import __version__
from .dates import WeekId, WeekRange, MonthWeek, Holiday, LeaveDay, LeaveType, WorkCalendar
from .dates import week_number, week_year, week_range, next_week, previous_week, current_week, next_month, previous_month, month_weeks
from .dates import is_holiday, is_leave_day, is_work_day, generate_holidays, easter_sunday
