from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Any, Dict, List, Optional, Tuple

from config.constants import AccountStatus, EstimateConfidence, PlanScope, StrategyKind


@dataclass
class FinancialAccount:
    """Account as delivered by the upstream account store (amounts in minor units)"""
    financial_account_id: str
    name: str
    type: str  # AccountType value; unknown strings are tolerated
    status: str = AccountStatus.ACTIVE.value
    current_balance: Optional[int] = None  # may be negative for liabilities
    interest_rate: Optional[float] = None  # APR as decimal, 0.1599 = 15.99%
    minimum_payment: Optional[int] = None
    promotional_rate: Optional[float] = None
    promotional_end_date: Optional[date] = None
    deferred_interest: Optional[bool] = None
    raw_data: Optional[Dict[str, Any]] = None
    official_name: Optional[str] = None
    organization_id: Optional[str] = None


@dataclass(frozen=True)
class DebtAccount:
    """Enriched debt consumed by the simulator"""
    id: str
    name: str
    account_type: str
    balance: int
    interest_rate: float
    minimum_payment: int
    promotional_rate: Optional[float] = None
    promotional_end_date: Optional[date] = None
    deferred_interest: bool = False

    @property
    def has_promotional_window(self) -> bool:
        return self.promotional_end_date is not None


@dataclass(frozen=True)
class DebtPayment:
    debt_id: str
    debt_name: str
    payment: int
    principal: int
    interest: int
    remaining_balance: int


@dataclass(frozen=True)
class MonthlyPaymentSchedule:
    month: int
    date: date
    total_payment: int
    payments: Tuple[DebtPayment, ...]
    debts_remaining: int

    def payment_for(self, debt_id: str) -> Optional[DebtPayment]:
        for p in self.payments:
            if p.debt_id == debt_id:
                return p
        return None


@dataclass(frozen=True)
class PayoffPlanSummary:
    total_debt: int
    total_interest: int
    total_paid: int
    months_to_payoff: int
    monthly_payment: int
    debt_free_date: date


@dataclass(frozen=True)
class DebtPayoffPlan:
    plan_id: str
    name: str
    strategy: StrategyKind
    debts: Tuple[DebtAccount, ...]
    monthly_payment: int
    extra_payment: int
    summary: PayoffPlanSummary
    schedule: Tuple[MonthlyPaymentSchedule, ...]
    created_at: datetime
    organization_id: Optional[str] = None
    account_id: Optional[str] = None
    profile_owner: Optional[str] = None
    scope: Optional[PlanScope] = None
    optimized: Optional[bool] = None

    @property
    def is_complete(self) -> bool:
        """False when the simulation hit the month ceiling with debt left"""
        return not self.schedule or self.schedule[-1].debts_remaining == 0


@dataclass
class PayoffPlanOptions:
    strategy: StrategyKind
    monthly_payment: Optional[int] = None
    extra_payment: Optional[int] = None
    custom_order: List[str] = field(default_factory=list)


@dataclass(frozen=True)
class InterestRateEstimate:
    estimated_rate: float
    confidence: EstimateConfidence = EstimateConfidence.LOW
    reasoning: Optional[str] = None
    market_context: Optional[str] = None
    has_promotional_period: bool = False
    promotional_rate: Optional[float] = None
    promotional_months: Optional[int] = None
    has_deferred_interest: bool = False
