"""Debt estimation: fill in interest rates and minimum payments the provider did not supply"""
import logging
from dataclasses import replace
from datetime import date
from typing import Dict, Iterable, List, Optional

from config.constants import AccountStatus, AccountType
from config.settings import (
    DEFAULT_INTEREST_RATE,
    INSTALLMENT_TERM_MONTHS,
    MEDICAL_MINIMUM_FLOOR,
    MEDICAL_MINIMUM_PERCENT,
    REVOLVING_MINIMUM_FLOOR,
    REVOLVING_MINIMUM_PERCENT,
)
from core.calculator import calc_equal_installment, calc_interest_only, calc_percent_with_floor
from data_manager.schema import DebtAccount, FinancialAccount, InterestRateEstimate
from utils.date_utils import add_months

logger = logging.getLogger(__name__)


def _account_type(value) -> Optional[AccountType]:
    if isinstance(value, AccountType):
        return value
    try:
        return AccountType(value)
    except ValueError:
        return None


def fallback_interest_rate(account_type: Optional[AccountType]) -> float:
    """Industry-average APR (decimal) for an account type"""
    match account_type:
        case AccountType.CREDIT_CARD:
            return 0.2099
        case AccountType.LINE_OF_CREDIT:
            return 0.1249
        case AccountType.MORTGAGE | AccountType.AUTO_LOAN:
            return 0.0699
        case AccountType.STUDENT_LOAN:
            return 0.0549
        case AccountType.PERSONAL_LOAN:
            return 0.1149
        case AccountType.MEDICAL_DEBT:
            return 0.0
        case AccountType.LIABILITY:
            return 0.0999
        case _:
            return DEFAULT_INTEREST_RATE


def _rate_from_raw_data(raw: Optional[dict]) -> Optional[float]:
    """Provider APRs are percentages (20.99); convert to a decimal"""
    if not isinstance(raw, dict):
        return None
    aprs = raw.get("aprs")
    if isinstance(aprs, list) and aprs:
        first = aprs[0]
        if isinstance(first, dict) and first.get("apr_percentage") is not None:
            return float(first["apr_percentage"]) / 100
    if raw.get("apr_percentage"):
        return float(raw["apr_percentage"]) / 100
    return None


def estimate_interest_rate(account: FinancialAccount) -> float:
    """Explicit rate, then provider raw data, then the fallback table"""
    if account.interest_rate is not None:
        return account.interest_rate

    raw_rate = _rate_from_raw_data(account.raw_data)
    if raw_rate is not None:
        return raw_rate

    return fallback_interest_rate(_account_type(account.type))


def estimate_minimum_payment(account: FinancialAccount, rate: Optional[float] = None) -> int:
    """Explicit minimum, then provider raw data, then a per-type estimate

    The balance must already be sign-normalized.
    """
    if account.minimum_payment is not None:
        return account.minimum_payment

    if isinstance(account.raw_data, dict) and account.raw_data.get("minimum_payment"):
        # Provider minimums are already in minor units
        return int(account.raw_data["minimum_payment"])

    balance = account.current_balance or 0
    account_type = _account_type(account.type)

    if account_type == AccountType.CREDIT_CARD:
        return calc_percent_with_floor(balance, REVOLVING_MINIMUM_PERCENT, REVOLVING_MINIMUM_FLOOR)

    if account_type == AccountType.LINE_OF_CREDIT:
        if rate is None:
            rate = estimate_interest_rate(account)
        return calc_interest_only(balance, rate)

    if account_type is not None and account_type.is_installment:
        # Rough 10-year amortization; real minimums come from the loan terms
        if rate is None:
            rate = estimate_interest_rate(account)
        return calc_equal_installment(balance, rate, INSTALLMENT_TERM_MONTHS)

    if account_type == AccountType.MEDICAL_DEBT:
        return calc_percent_with_floor(balance, MEDICAL_MINIMUM_PERCENT, MEDICAL_MINIMUM_FLOOR)

    return calc_percent_with_floor(balance, REVOLVING_MINIMUM_PERCENT, REVOLVING_MINIMUM_FLOOR)


def is_debt_account(account: FinancialAccount) -> bool:
    account_type = _account_type(account.type)
    return account_type is not None and account_type.is_debt


def normalize_balance(balance: Optional[int]) -> int:
    """Liabilities may arrive negative (ledger sign convention); amounts owed are positive"""
    return abs(balance or 0)


def is_eligible_debt(account: FinancialAccount) -> bool:
    return (
        is_debt_account(account)
        and account.status == AccountStatus.ACTIVE.value
        and normalize_balance(account.current_balance) > 0
    )


def _normalized(account: FinancialAccount) -> FinancialAccount:
    return replace(account, current_balance=normalize_balance(account.current_balance))


def to_debt_account(
    account: FinancialAccount,
    interest_rate: Optional[float] = None,
    promotional_rate: Optional[float] = None,
    promotional_end_date: Optional[date] = None,
    deferred_interest: Optional[bool] = None,
) -> DebtAccount:
    """Build an enriched DebtAccount; overrides win over the account's own promo terms"""
    account = _normalized(account)
    rate = interest_rate if interest_rate is not None else estimate_interest_rate(account)
    if promotional_end_date is None:
        promotional_rate = account.promotional_rate
        promotional_end_date = account.promotional_end_date
        deferred_interest = account.deferred_interest
    if promotional_end_date is None:
        # No end date, no promotional window
        promotional_rate = None
        deferred_interest = False
    return DebtAccount(
        id=account.financial_account_id,
        name=account.name,
        account_type=account.type.value if isinstance(account.type, AccountType) else account.type,
        balance=account.current_balance,
        interest_rate=rate,
        minimum_payment=estimate_minimum_payment(account, rate),
        promotional_rate=promotional_rate,
        promotional_end_date=promotional_end_date,
        deferred_interest=bool(deferred_interest),
    )


def eligible_debt_accounts(accounts: Iterable[FinancialAccount]) -> List[FinancialAccount]:
    return [_normalized(a) for a in accounts if is_eligible_debt(a)]


def get_debt_accounts(accounts: Iterable[FinancialAccount]) -> List[DebtAccount]:
    """Filter to active debts with a balance and enrich with static estimates"""
    return [to_debt_account(a) for a in eligible_debt_accounts(accounts)]


def apply_estimate(
    account: FinancialAccount,
    estimate: Optional[InterestRateEstimate],
    today: date,
) -> DebtAccount:
    """Enrich one account from an AI estimate; the explicit rate still wins"""
    if estimate is None:
        return to_debt_account(account)

    rate = None
    if account.interest_rate is None and estimate.estimated_rate:
        rate = estimate.estimated_rate

    if estimate.has_promotional_period and estimate.promotional_months:
        return to_debt_account(
            account,
            interest_rate=rate,
            promotional_rate=estimate.promotional_rate,
            promotional_end_date=add_months(today, estimate.promotional_months),
            deferred_interest=estimate.has_deferred_interest,
        )
    return to_debt_account(account, interest_rate=rate)


def get_debt_accounts_with_estimator(
    accounts: Iterable[FinancialAccount],
    estimator,
    today: Optional[date] = None,
) -> List[DebtAccount]:
    """Batch-enrich via an interest rate estimator, falling back to static estimates

    Estimator failures are logged and never propagated.
    """
    candidates = eligible_debt_accounts(accounts)
    if not candidates:
        return []
    if estimator is None:
        return [to_debt_account(a) for a in candidates]

    today = today or date.today()
    try:
        estimates: Dict[str, InterestRateEstimate] = estimator.estimate_interest_rates(candidates, today)
    except Exception as exc:  # noqa: BLE001
        logger.warning("AI batch estimation failed, using fallback: %s", exc)
        return [to_debt_account(a) for a in candidates]

    return [apply_estimate(a, estimates.get(a.financial_account_id), today) for a in candidates]
