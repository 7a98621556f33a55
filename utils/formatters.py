from config.settings import CURRENCY_SYMBOL


def fmt_amount(minor_units: int, symbol: str = CURRENCY_SYMBOL) -> str:
    """Format minor units: 123456 -> $1,234.56"""
    sign = "-" if minor_units < 0 else ""
    return f"{sign}{symbol}{abs(minor_units) / 100:,.2f}"


def fmt_rate(value: float) -> str:
    """Format a decimal rate: 0.1899 -> 18.99%"""
    return f"{value * 100:.2f}%"


def fmt_months(months: int) -> str:
    """Format a month count: 38 -> 3 years 2 months"""
    years = months // 12
    remain = months % 12
    year_part = f"{years} year{'s' if years != 1 else ''}"
    month_part = f"{remain} month{'s' if remain != 1 else ''}"
    if remain == 0:
        return year_part
    if years == 0:
        return month_part
    return f"{year_part} {month_part}"
