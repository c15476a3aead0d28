"""Tests for the HolidayBase-backed work calendar."""

from datetime import date

from loguru import logger

from pointage.dates import Holiday, WorkCalendar


class TestWorkCalendar:
    def test_generated_years(self):
        cal = WorkCalendar(years=[2024, 2025])
        assert cal.is_holiday(date(2024, 4, 1))
        assert cal.is_holiday(date(2025, 4, 21))
        assert not cal.is_holiday(date(2026, 4, 6))
        assert len(cal.get_holidays(2024)) == 11

    def test_same_day_holidays_are_merged(self):
        cal = WorkCalendar(years=[2008])
        name = cal.holiday_name(date(2008, 5, 1))
        assert 'Ascension' in name
        assert 'Fête du Travail' in name
        assert len(cal.get_holidays(2008)) == 10

    def test_custom_holidays(self):
        cal = WorkCalendar(custom_holidays=[Holiday(date(2024, 6, 3), 'Fête locale')])
        assert cal.holiday_name(date(2024, 6, 3)) == 'Fête locale'
        assert not cal.is_business_day(date(2024, 6, 3))
        assert cal.is_business_day(date(2024, 6, 4))

    def test_add_business_days(self):
        cal = WorkCalendar(years=[2024])
        assert cal.add_business_days(date(2024, 4, 30), 1) == date(2024, 5, 2)
        assert cal.add_business_days(date(2024, 5, 10), 1) == date(2024, 5, 13)
        assert cal.add_business_days(date(2024, 5, 21), -1) == date(2024, 5, 17)

    def test_zero_business_days_keeps_the_day(self):
        cal = WorkCalendar(years=[2024])
        assert cal.add_business_days(date(2024, 5, 4), 0) == date(2024, 5, 4)
        assert cal.add_business_days(date(2024, 5, 1), 0) == date(2024, 5, 1)
        assert cal.add_business_days(date(2024, 5, 2), 0) == date(2024, 5, 2)

    def test_combine(self):
        national = WorkCalendar(years=[2024])
        local = WorkCalendar(custom_holidays=[Holiday(date(2024, 6, 3), 'Fête locale')])
        combined = national + local
        assert combined.is_holiday(date(2024, 6, 3))
        assert combined.is_holiday(date(2024, 12, 25))
        assert combined.years == [2024]
        assert len(combined.get_holidays(2024)) == 12

    def test_combine_logs_merged_years(self):
        national = WorkCalendar(years=[2024])
        local = WorkCalendar(years=[2025])
        messages = []
        sink_id = logger.add(messages.append, level='DEBUG', format='{message}')
        try:
            combined = national.combine(local)
        finally:
            logger.remove(sink_id)
        assert combined.years == [2024, 2025]
        assert combined.custom_holidays == []
        assert len(combined.get_holidays(2025)) == 11
        assert any('for years [2024, 2025]' in m for m in messages)
