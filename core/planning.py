"""
Debt payoff planning service

Discovers an organization's debt accounts, enriches them (with the AI estimator
when one is configured, always falling back to static estimates), and produces
plans for two scopes:

- consumer: everything except mortgages, at the minimum pace and, when no
  payment was requested, at an "optimized" payment
- all: every debt including mortgages, at the requested or default payment
"""
import logging
from dataclasses import replace
from datetime import date
from typing import List, Optional

from config.constants import AccountType, PlanScope
from config.settings import OPTIMIZED_PAYMENT_MULTIPLIER
from core.errors import NoDebtAccountsError
from core.estimation import get_debt_accounts, get_debt_accounts_with_estimator
from core.payoff_plan import generate_payoff_plans
from core.rate_estimator import InterestRateEstimator
from core.schedule_generator import total_minimum_payment
from data_manager.schema import DebtAccount, DebtPayoffPlan
from data_manager.sources import AccountSource, BudgetSource
from utils.money import round_half_up

logger = logging.getLogger(__name__)


def optimized_monthly_payment(debts: List[DebtAccount], surplus: Optional[int]) -> int:
    """Minimums plus the budget surplus, or minimums * 2.2 when no surplus is known"""
    total_minimums = total_minimum_payment(debts)
    if surplus is not None and surplus > 0:
        return round_half_up(total_minimums + surplus)
    return round_half_up(total_minimums * OPTIMIZED_PAYMENT_MULTIPLIER)


def split_consumer_debt(debts: List[DebtAccount]) -> List[DebtAccount]:
    return [d for d in debts if d.account_type != AccountType.MORTGAGE.value]


class DebtPayoffPlanner:
    """Orchestrates account lookup, enrichment and multi-scenario plan generation"""

    def __init__(
        self,
        account_source: AccountSource,
        budget_source: BudgetSource,
        estimator: Optional[InterestRateEstimator] = None,
    ):
        self.account_source = account_source
        self.budget_source = budget_source
        self.estimator = estimator

    def get_enriched_debt_accounts(
        self, organization_id: str, today: Optional[date] = None
    ) -> List[DebtAccount]:
        accounts = list(self.account_source.find_debt_accounts_for_organization(organization_id))
        if not accounts:
            return []
        if self.estimator is not None:
            return get_debt_accounts_with_estimator(accounts, self.estimator, today)
        return get_debt_accounts(accounts)

    def generate_enriched_payoff_plans(
        self,
        organization_id: str,
        account_id: str,
        monthly_payment: Optional[int] = None,
        profile_owner: Optional[str] = None,
        today: Optional[date] = None,
    ) -> List[DebtPayoffPlan]:
        """
        Generate the scenario set for an organization.

        Raises:
            NoDebtAccountsError: no eligible debt accounts
            InsufficientPaymentError: monthly_payment below a scope's minimums
        """
        today = today or date.today()
        debts = self.get_enriched_debt_accounts(organization_id, today)
        if not debts:
            raise NoDebtAccountsError("No debt accounts found")

        common = dict(
            organization_id=organization_id,
            account_id=account_id,
            profile_owner=profile_owner,
            today=today,
        )
        plans: List[DebtPayoffPlan] = []

        consumer = split_consumer_debt(debts)
        if consumer:
            plans.extend(
                replace(p, scope=PlanScope.CONSUMER, optimized=False)
                for p in generate_payoff_plans(consumer, monthly_payment, **common)
            )

            if not monthly_payment:
                surplus = self.budget_source.find_active_budget_surplus(organization_id)
                optimized = optimized_monthly_payment(consumer, surplus)
                plans.extend(
                    replace(p, scope=PlanScope.CONSUMER, optimized=True)
                    for p in generate_payoff_plans(consumer, optimized, **common)
                )

        plans.extend(
            replace(p, scope=PlanScope.ALL, optimized=False)
            for p in generate_payoff_plans(debts, monthly_payment, **common)
        )

        logger.info(
            "Generated %d payoff plans for organization %s (%d debts, %d consumer)",
            len(plans), organization_id, len(debts), len(consumer),
        )
        return plans
