from .weeks import WeekId, WeekRange, week_number, week_year, iso_week_year, week_id, week_range, week_days, next_week, previous_week, current_week, weeks_in_year
from .months import MonthWeek, next_month, previous_month, month_bounds, calendar_weeks, month_weeks, month_grid_range
from .holidays import Holiday, HolidayRule, MonthDayRule, EasterOffsetRule, FRENCH_HOLIDAY_RULES, easter_sunday, generate_holidays, holidays_between
from .classification import LeaveType, LeaveDay, is_work_day, is_holiday, holiday_name, is_leave_day, is_business_day, expand_leave, count_business_days
from .calendars import WorkCalendar
