"""External collaborators the planner reads from"""
from typing import Iterable, Optional, Protocol

from data_manager.schema import FinancialAccount


class AccountSource(Protocol):
    """Account store lookup"""

    def find_debt_accounts_for_organization(
        self, organization_id: str
    ) -> Iterable[FinancialAccount]:  # pragma: no cover - interface
        ...


class BudgetSource(Protocol):
    """Active budget lookup; None when there is no active budget"""

    def find_active_budget_surplus(
        self, organization_id: str
    ) -> Optional[int]:  # pragma: no cover - interface
        ...
