"""Core money math: monthly interest, fixed-payment amortization"""
from decimal import Decimal

from utils.money import round_half_up, to_decimal


def monthly_interest(balance: int, annual_rate: float) -> int:
    """One month of interest on an integer balance: round(balance * rate / 12)"""
    if balance <= 0 or not annual_rate:
        return 0
    return round_half_up(Decimal(balance) * to_decimal(annual_rate) / 12)


def calc_equal_installment(
    principal: int,
    annual_rate: float,
    term_months: int,
) -> int:
    """Fixed monthly payment that amortizes principal over term_months

    payment = P * m * (1+m)^n / ((1+m)^n - 1), m = rate / 12; P / n when m == 0.
    """
    if principal <= 0 or term_months <= 0:
        return 0
    if annual_rate == 0:
        return round_half_up(Decimal(principal) / term_months)
    m = annual_rate / 12
    factor = (1 + m) ** term_months
    monthly = principal * m * factor / (factor - 1)
    return round_half_up(monthly)


def calc_interest_only(principal: int, annual_rate: float) -> int:
    """Interest-only payment, as on a revolving line of credit"""
    return monthly_interest(principal, annual_rate)


def calc_percent_with_floor(balance: int, percent: float, floor: int) -> int:
    """Greater of a percentage of the balance or a fixed floor"""
    return max(round_half_up(Decimal(balance) * to_decimal(percent)), floor)
