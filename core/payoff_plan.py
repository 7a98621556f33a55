"""Payoff plan assembly: summary, naming, single-plan and two-strategy entry points"""
import logging
from datetime import date, datetime
from typing import Iterable, List, Optional, Sequence, Union

from config.constants import DEFAULT_PLAN_NAME, StrategyKind
from config.settings import DEFAULT_PAYMENT_MULTIPLIER
from core.errors import InsufficientPaymentError, NoDebtAccountsError, ValidationError
from core.estimation import get_debt_accounts
from core.schedule_generator import calculate_payment_schedule, total_minimum_payment
from core.strategy import order_debts
from data_manager.data_validator import (
    check_schedule_integrity,
    validate_debt_account,
    validate_plan_options,
)
from data_manager.schema import (
    DebtAccount,
    DebtPayoffPlan,
    FinancialAccount,
    MonthlyPaymentSchedule,
    PayoffPlanOptions,
    PayoffPlanSummary,
)
from utils.formatters import fmt_amount, fmt_months
from utils.id_generator import generate_plan_id
from utils.money import round_half_up

logger = logging.getLogger(__name__)

AccountLike = Union[FinancialAccount, DebtAccount]


def calculate_summary(
    debts: Sequence[DebtAccount],
    schedule: Sequence[MonthlyPaymentSchedule],
    today: Optional[date] = None,
) -> PayoffPlanSummary:
    """Totals over a finished schedule; total_debt comes from the starting balances"""
    total_debt = sum(d.balance for d in debts)
    total_interest = sum(p.interest for row in schedule for p in row.payments)
    return PayoffPlanSummary(
        total_debt=total_debt,
        total_interest=total_interest,
        total_paid=total_debt + total_interest,
        months_to_payoff=len(schedule),
        monthly_payment=schedule[0].total_payment if schedule else 0,
        debt_free_date=schedule[-1].date if schedule else (today or date.today()),
    )


def generate_plan_name(strategy) -> str:
    try:
        return StrategyKind(strategy).label
    except ValueError:
        return DEFAULT_PLAN_NAME


def as_debt_accounts(accounts: Iterable[AccountLike]) -> List[DebtAccount]:
    """Enriched debts pass through; raw accounts are filtered and statically enriched"""
    debts: List[DebtAccount] = []
    raw: List[FinancialAccount] = []
    for account in accounts:
        if isinstance(account, DebtAccount):
            debts.append(account)
        else:
            raw.append(account)
    return debts + get_debt_accounts(raw)


def generate_plan(
    accounts: Iterable[AccountLike],
    options: PayoffPlanOptions,
    organization_id: Optional[str] = None,
    account_id: Optional[str] = None,
    profile_owner: Optional[str] = None,
    today: Optional[date] = None,
) -> DebtPayoffPlan:
    """
    Build one payoff plan.

    Monthly payment defaults to the sum of minimums plus options.extra_payment
    when it is not given or 0.

    Raises:
        NoDebtAccountsError: nothing eligible to plan around
        InsufficientPaymentError: monthly payment below the sum of minimums
        ValidationError: invalid options or debts
    """
    debts = as_debt_accounts(accounts)
    if not debts:
        raise NoDebtAccountsError()

    strategy = options.strategy.value if isinstance(options.strategy, StrategyKind) else options.strategy
    ok, msg = validate_plan_options(strategy, options.monthly_payment, options.custom_order)
    if not ok:
        raise ValidationError(msg)
    for debt in debts:
        ok, msg = validate_debt_account(debt)
        if not ok:
            raise ValidationError(msg)

    strategy = StrategyKind(strategy)
    today = today or date.today()
    total_minimums = total_minimum_payment(debts)
    if options.monthly_payment:
        monthly_payment = options.monthly_payment
    else:
        monthly_payment = total_minimums + (options.extra_payment or 0)

    if monthly_payment < total_minimums:
        raise InsufficientPaymentError(total_minimums, monthly_payment)

    ordered = order_debts(debts, strategy, options.custom_order)
    schedule = calculate_payment_schedule(ordered, monthly_payment, start_date=today)
    check_schedule_integrity(schedule)
    summary = calculate_summary(debts, schedule, today)

    logger.debug(
        "Generated %s plan: %d debts, paid off in %s, interest %s",
        strategy.value, len(debts), fmt_months(summary.months_to_payoff), fmt_amount(summary.total_interest),
    )

    return DebtPayoffPlan(
        plan_id=generate_plan_id(),
        name=generate_plan_name(strategy),
        strategy=strategy,
        debts=tuple(debts),
        monthly_payment=monthly_payment,
        extra_payment=monthly_payment - total_minimums,
        summary=summary,
        schedule=tuple(schedule),
        created_at=datetime.now(),
        organization_id=organization_id,
        account_id=account_id,
        profile_owner=profile_owner,
    )


def default_monthly_payment(debts: Sequence[DebtAccount]) -> int:
    """Sum of minimums plus 10%"""
    return round_half_up(total_minimum_payment(debts) * DEFAULT_PAYMENT_MULTIPLIER)


def generate_payoff_plans(
    accounts: Iterable[AccountLike],
    monthly_payment: Optional[int] = None,
    organization_id: Optional[str] = None,
    account_id: Optional[str] = None,
    profile_owner: Optional[str] = None,
    today: Optional[date] = None,
) -> List[DebtPayoffPlan]:
    """Avalanche and snowball plans at the same monthly payment; [] when there is no debt"""
    debts = as_debt_accounts(accounts)
    if not debts:
        return []

    payment = monthly_payment if monthly_payment else default_monthly_payment(debts)
    return [
        generate_plan(
            debts,
            PayoffPlanOptions(strategy=strategy, monthly_payment=payment),
            organization_id=organization_id,
            account_id=account_id,
            profile_owner=profile_owner,
            today=today,
        )
        for strategy in (StrategyKind.AVALANCHE, StrategyKind.SNOWBALL)
    ]
