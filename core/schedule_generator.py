"""
Month-by-month payoff simulator

Each month is a pure transition: next_month_state(states, month_date, monthly_payment)
takes the debts' snapshots and returns new snapshots plus that month's payment rows.
Nothing is mutated in place, so identical inputs always give identical schedules.

Per month, in strategy order, every debt with a balance:
  1. accrues round(balance * rate / 12), using the promotional rate while the window is open
  2. on deferred-interest debts, silently accrues nominal-rate interest during the window;
     in the month the window is found to have ended the whole accrual is added to the
     balance and to that month's interest charge
  3. pays min(minimum, balance + interest, remaining budget)
Whatever budget is left goes, all of it as principal, to the first debt still owing.
Minimums freed by paid-off debts flow to that target automatically because the
monthly budget stays fixed.
"""
import logging
from dataclasses import dataclass, replace
from datetime import date
from typing import List, Optional, Sequence, Tuple

from config.settings import MAX_SCHEDULE_MONTHS, PROMO_LOOKBACK_DAYS
from core.calculator import monthly_interest
from core.errors import InsufficientPaymentError
from data_manager.schema import DebtAccount, DebtPayment, MonthlyPaymentSchedule
from utils.date_utils import days_before, schedule_date

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DebtState:
    """Snapshot of one debt between months"""
    debt: DebtAccount
    balance: int
    accrued_deferred_interest: int = 0

    @property
    def is_active(self) -> bool:
        return self.balance > 0


def initial_states(debts: Sequence[DebtAccount]) -> Tuple[DebtState, ...]:
    return tuple(DebtState(debt=d, balance=d.balance) for d in debts)


def total_minimum_payment(debts: Sequence[DebtAccount]) -> int:
    return sum(d.minimum_payment for d in debts)


def in_promotional_period(debt: DebtAccount, month_date: date) -> bool:
    return debt.has_promotional_window and month_date < debt.promotional_end_date


def promotional_period_just_ended(debt: DebtAccount, month_date: date) -> bool:
    """Window closed within the lookback

    A fixed 30-day lookback against calendar-month steps: when the window ends the day
    after a payment date that is followed by a 31-day month, the end is never seen.
    """
    if debt.promotional_end_date is None or in_promotional_period(debt, month_date):
        return False
    return days_before(month_date, PROMO_LOOKBACK_DAYS) < debt.promotional_end_date


def _accrue(state: DebtState, month_date: date) -> Tuple[DebtState, int]:
    """Return the state with deferred interest applied, and this month's interest charge"""
    debt = state.debt
    in_promo = in_promotional_period(debt, month_date)
    if in_promo and debt.promotional_rate is not None:
        rate = debt.promotional_rate
    else:
        rate = debt.interest_rate

    charge = monthly_interest(state.balance, rate)
    accrued = state.accrued_deferred_interest
    balance = state.balance

    if debt.deferred_interest:
        if in_promo:
            accrued += monthly_interest(state.balance, debt.interest_rate)
        elif promotional_period_just_ended(debt, month_date) and state.balance > 0:
            # retroactive interest lands on the balance and is billed this month
            balance += accrued
            charge += accrued
            accrued = 0

    return replace(state, balance=balance, accrued_deferred_interest=accrued), charge


def next_month_state(
    states: Sequence[DebtState],
    month_date: date,
    monthly_payment: int,
) -> Tuple[Tuple[DebtState, ...], Tuple[DebtPayment, ...]]:
    """Apply one month of interest and payments; returns (new states, payment rows)"""
    remaining = monthly_payment
    new_states: List[DebtState] = []
    payments: List[DebtPayment] = []

    # Minimums, in strategy order
    for state in states:
        if not state.is_active:
            new_states.append(state)
            continue

        state, charge = _accrue(state, month_date)
        payment = min(state.debt.minimum_payment, state.balance + charge, remaining)
        interest = min(charge, payment)
        principal = payment - interest
        balance = state.balance + charge - payment
        remaining -= payment

        new_states.append(replace(state, balance=balance))
        payments.append(DebtPayment(
            debt_id=state.debt.id,
            debt_name=state.debt.name,
            payment=payment,
            principal=principal,
            interest=interest,
            remaining_balance=max(0, balance),
        ))

    # Leftover budget goes to the first debt still owing
    if remaining > 0:
        target = next((i for i, s in enumerate(new_states) if s.is_active), None)
        if target is not None:
            state = new_states[target]
            extra = min(remaining, state.balance)
            new_states[target] = replace(state, balance=state.balance - extra)
            for j, row in enumerate(payments):
                if row.debt_id == state.debt.id:
                    payments[j] = replace(
                        row,
                        payment=row.payment + extra,
                        principal=row.principal + extra,
                        remaining_balance=max(0, state.balance - extra),
                    )
                    break

    return tuple(new_states), tuple(payments)


def calculate_payment_schedule(
    ordered_debts: Sequence[DebtAccount],
    monthly_payment: int,
    start_date: Optional[date] = None,
    max_months: int = MAX_SCHEDULE_MONTHS,
) -> List[MonthlyPaymentSchedule]:
    """
    Simulate payoff of already-ordered debts with a fixed monthly budget.

    Args:
        ordered_debts: enriched debts in strategy order
        monthly_payment: fixed monthly budget in minor units
        start_date: plan creation date; month N is dated start_date + N months
        max_months: safety ceiling; a truncated schedule is returned, not an error

    Raises:
        InsufficientPaymentError: monthly_payment is below the sum of minimums
    """
    required = total_minimum_payment(ordered_debts)
    if monthly_payment < required:
        raise InsufficientPaymentError(required, monthly_payment)

    start_date = start_date or date.today()
    states = initial_states(ordered_debts)
    schedule: List[MonthlyPaymentSchedule] = []

    month = 1
    while any(s.is_active for s in states) and month <= max_months:
        month_date = schedule_date(start_date, month)
        states, payments = next_month_state(states, month_date, monthly_payment)
        schedule.append(MonthlyPaymentSchedule(
            month=month,
            date=month_date,
            total_payment=monthly_payment,
            payments=payments,
            debts_remaining=sum(1 for s in states if s.is_active),
        ))
        month += 1

    if any(s.is_active for s in states):
        logger.warning(
            "Payoff simulation stopped at %d months with %d debts remaining",
            max_months, schedule[-1].debts_remaining if schedule else len(states),
        )

    return schedule
