'''
Schema layer for raw caller input. Everything here validates and converts; the date
functions in pointage.dates assume their arguments already passed through these models.
'''
from collections.abc import Iterable
import datetime as dt
from typing import Annotated, Any, Optional

from dateutil.parser import isoparse
from pydantic import BaseModel, BeforeValidator, ConfigDict, Field, ValidationInfo, field_validator, model_validator

from .dates import Holiday, LeaveDay, LeaveType, WeekId, expand_leave
from .settings import Settings, settings as default_settings


def _parse_day(value: Any) -> Any:
    if isinstance(value, dt.datetime):
        return value.date()
    if isinstance(value, str):
        return isoparse(value).date()
    return value


Day = Annotated[dt.date, BeforeValidator(_parse_day)]


def _settings_from(info: ValidationInfo) -> Settings:
    return (info.context or {}).get('settings', default_settings)


class _Schema(BaseModel):
    model_config = ConfigDict(populate_by_name=True, frozen=True)


class _YearSchema(_Schema):
    year: int

    @field_validator('year')
    @classmethod
    def validate_year(cls, value: int, info: ValidationInfo) -> int:
        cfg = _settings_from(info)
        if not cfg.week_min_year <= value <= cfg.week_max_year:
            raise ValueError(f'year must be between {cfg.week_min_year} and {cfg.week_max_year}. Got {value}')
        return value


class WeekQuery(_YearSchema):
    week_number: int = Field(alias='weekNumber', ge=1, le=53)

    def to_week_id(self) -> WeekId:
        return WeekId(self.week_number, self.year)


class MonthQuery(_YearSchema):
    month: int = Field(ge=0, le=11)


class HolidayIn(_Schema):
    date: Day
    name: str = Field(min_length=1)

    def to_holiday(self) -> Holiday:
        return Holiday(self.date, self.name)


class LeaveDayIn(_Schema):
    date: Day
    user_id: str = Field(alias='userId', min_length=1)
    type: LeaveType = LeaveType.PAID

    def to_leave_day(self) -> LeaveDay:
        return LeaveDay(self.date, self.user_id, self.type)


class LeaveRequestIn(_Schema):
    start_date: Day = Field(alias='startDate')
    end_date: Day = Field(alias='endDate')
    type: LeaveType = LeaveType.PAID
    reason: Optional[str] = None

    @model_validator(mode='after')
    def validate_interval(self) -> 'LeaveRequestIn':
        if self.end_date < self.start_date:
            raise ValueError(f'endDate {self.end_date} must not be before startDate {self.start_date}')
        return self

    def expand(self, user_id: str) -> list[LeaveDay]:
        return expand_leave(self.start_date, self.end_date, user_id, self.type)


def parse_holidays(records: Iterable[dict]) -> list[Holiday]:
    return [HolidayIn.model_validate(r).to_holiday() for r in records]


def parse_leaves(records: Iterable[dict]) -> list[LeaveDay]:
    return [LeaveDayIn.model_validate(r).to_leave_day() for r in records]
