from datetime import date, datetime, timedelta


def as_date(value: date | datetime) -> date:
    '''
    Reduces a datetime to its calendar day. Plain dates are returned untouched.
    '''
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    raise TypeError(f'Expected a date or datetime. Got {type(value).__name__}: {value!r}')


def monday_on_or_before(t: date) -> date:
    return t - timedelta(days=t.weekday())


def sunday_on_or_after(t: date) -> date:
    return t + timedelta(days=6 - t.weekday())


def iter_days(start: date, end: date):
    if end < start:
        raise ValueError(f'End date {end} must not be before start date {start}.')
    t = start
    while t <= end:
        yield t
        t += timedelta(days=1)
