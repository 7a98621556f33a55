from typing import Optional, Sequence, Tuple

from config.constants import StrategyKind
from core.errors import ValidationError
from data_manager.schema import DebtAccount, MonthlyPaymentSchedule


def validate_debt_account(debt: DebtAccount) -> Tuple[bool, str]:
    """Check an enriched debt before simulation, returns (is_valid, error)"""
    if not debt.id:
        return False, "Debt id must not be empty"

    if not isinstance(debt.balance, int) or debt.balance < 0:
        return False, f"Balance must be a non-negative integer of minor units: {debt.name}"

    if not isinstance(debt.minimum_payment, int) or debt.minimum_payment < 0:
        return False, f"Minimum payment must be a non-negative integer of minor units: {debt.name}"

    if debt.interest_rate < 0:
        return False, f"Interest rate must not be negative: {debt.name}"

    if debt.promotional_rate is not None and debt.promotional_rate < 0:
        return False, f"Promotional rate must not be negative: {debt.name}"

    return True, ""


def validate_plan_options(
    strategy: str,
    monthly_payment: Optional[int],
    custom_order: Optional[Sequence[str]] = None,
) -> Tuple[bool, str]:
    """Check payoff plan options"""
    if strategy not in [e.value for e in StrategyKind]:
        return False, f"Invalid payoff strategy: {strategy}"

    if monthly_payment is not None and (not isinstance(monthly_payment, int) or monthly_payment < 0):
        return False, "Monthly payment must be a non-negative integer of minor units"

    if custom_order and len(set(custom_order)) != len(custom_order):
        return False, "Custom order must not list a debt twice"

    return True, ""


def check_schedule_integrity(schedule: Sequence[MonthlyPaymentSchedule]) -> None:
    """Raise ValidationError when a row's money does not add up"""
    for row in schedule:
        month_total = 0
        for p in row.payments:
            if p.principal + p.interest != p.payment:
                raise ValidationError(
                    f"Month {row.month} payment for {p.debt_name} does not equal principal + interest",
                    observed=p.principal + p.interest,
                    expected=p.payment,
                )
            if p.remaining_balance < 0:
                raise ValidationError(
                    f"Month {row.month} remaining balance for {p.debt_name} is negative",
                    observed=p.remaining_balance,
                    expected=0,
                )
            month_total += p.payment
        if month_total > row.total_payment:
            raise ValidationError(
                f"Month {row.month} payments exceed the monthly payment",
                observed=month_total,
                expected=row.total_payment,
            )
