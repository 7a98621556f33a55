"""Debt payoff planning errors"""
from typing import Optional

from utils.formatters import fmt_amount


class PayoffPlanError(ValueError):
    """Base class for planning failures surfaced to the caller"""

    user_message = "Unable to create a debt payoff plan"


class NoDebtAccountsError(PayoffPlanError):
    """No eligible debt remained after filtering"""

    user_message = "No debt accounts found to plan around"

    def __init__(self, message: str = "No active debt accounts to create payoff plan"):
        super().__init__(message)


class InsufficientPaymentError(PayoffPlanError):
    """Monthly payment does not cover the sum of minimum payments"""

    user_message = "This payment is too low to cover your minimum payments"

    def __init__(self, required_minimum: int, monthly_payment: int):
        self.required_minimum = required_minimum
        self.monthly_payment = monthly_payment
        super().__init__(
            f"Monthly payment ({fmt_amount(monthly_payment)}) must be at least "
            f"the sum of minimum payments ({fmt_amount(required_minimum)})"
        )

    @property
    def shortfall(self) -> int:
        return self.required_minimum - self.monthly_payment


class ValidationError(PayoffPlanError):
    """Integer money bookkeeping did not add up"""

    def __init__(self, message: str, observed: Optional[int] = None, expected: Optional[int] = None):
        self.observed = observed
        self.expected = expected
        if observed is not None or expected is not None:
            message = f"{message} (observed {observed}, expected {expected})"
        super().__init__(message)
