from datetime import date, timedelta
from dateutil.relativedelta import relativedelta


def add_months(d: date, months: int) -> date:
    """Add N calendar months, clamping to the last day of short months"""
    return d + relativedelta(months=months)


def schedule_date(start_date: date, month: int) -> date:
    """Calendar date of the month-th payment (month is 1-based)"""
    return add_months(start_date, month)


def days_before(d: date, days: int) -> date:
    return d - timedelta(days=days)

