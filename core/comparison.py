"""Plan comparison and tabular schedules"""
from typing import Dict, Sequence

import pandas as pd

from config.constants import COMPARISON_COLUMNS, SCHEDULE_COLUMNS
from data_manager.schema import DebtPayoffPlan


def schedule_to_frame(plan: DebtPayoffPlan) -> pd.DataFrame:
    """One row per debt per month"""
    records = [
        {
            "plan_id": plan.plan_id,
            "month": row.month,
            "date": row.date.strftime("%Y-%m-%d"),
            "debt_id": p.debt_id,
            "debt_name": p.debt_name,
            "payment": p.payment,
            "principal": p.principal,
            "interest": p.interest,
            "remaining_balance": p.remaining_balance,
            "total_payment": row.total_payment,
            "debts_remaining": row.debts_remaining,
        }
        for row in plan.schedule
        for p in row.payments
    ]
    return pd.DataFrame(records, columns=SCHEDULE_COLUMNS)


def debt_payoff_months(plan: DebtPayoffPlan) -> Dict[str, int]:
    """Month in which each debt's balance first reaches zero"""
    df = schedule_to_frame(plan)
    if df.empty:
        return {}
    paid = df[df["remaining_balance"] == 0]
    return paid.groupby("debt_id")["month"].min().astype(int).to_dict()


def compare_plans(plans: Sequence[DebtPayoffPlan]) -> pd.DataFrame:
    """
    Key figures of several plans side by side.
    Plans with an empty schedule are skipped.
    """
    rows = []
    for plan in plans:
        if not plan.schedule:
            continue
        s = plan.summary
        rows.append({
            "plan_id": plan.plan_id,
            "name": plan.name,
            "strategy": plan.strategy.value,
            "scope": plan.scope.value if plan.scope is not None else None,
            "optimized": plan.optimized,
            "monthly_payment": plan.monthly_payment,
            "extra_payment": plan.extra_payment,
            "months_to_payoff": s.months_to_payoff,
            "total_debt": s.total_debt,
            "total_interest": s.total_interest,
            "total_paid": s.total_paid,
            "debt_free_date": s.debt_free_date.strftime("%Y-%m-%d"),
            "interest_share": round(s.total_interest / s.total_paid * 100, 2) if s.total_paid > 0 else 0,
        })

    return pd.DataFrame(rows, columns=COMPARISON_COLUMNS)


def interest_saved(baseline: DebtPayoffPlan, candidate: DebtPayoffPlan) -> int:
    """Interest the candidate saves over the baseline (negative if it costs more)"""
    return baseline.summary.total_interest - candidate.summary.total_interest


def months_saved(baseline: DebtPayoffPlan, candidate: DebtPayoffPlan) -> int:
    return baseline.summary.months_to_payoff - candidate.summary.months_to_payoff
