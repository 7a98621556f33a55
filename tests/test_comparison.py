"""Plan comparison tests"""
import sys
from datetime import date
from pathlib import Path
sys.path.insert(0, str(Path(__file__).parent.parent))

from dataclasses import replace

import pytest
from config.constants import COMPARISON_COLUMNS, SCHEDULE_COLUMNS, PlanScope
from core.comparison import (
    compare_plans,
    debt_payoff_months,
    interest_saved,
    months_saved,
    schedule_to_frame,
)
from core.payoff_plan import generate_payoff_plans


@pytest.fixture
def plans(two_debts):
    return generate_payoff_plans(two_debts, 6000, today=date(2025, 1, 1))


class TestScheduleFrame:
    def test_one_row_per_payment(self, plans):
        plan = plans[0]
        df = schedule_to_frame(plan)
        assert list(df.columns) == SCHEDULE_COLUMNS
        assert len(df) == sum(len(row.payments) for row in plan.schedule)

    def test_first_rows(self, plans):
        df = schedule_to_frame(plans[0])
        first = df[(df["month"] == 1) & (df["debt_id"] == "A")].iloc[0]
        assert first["date"] == "2025-02-01"
        assert first["payment"] == 4000
        assert first["remaining_balance"] == 98000
        assert first["total_payment"] == 6000

    def test_interest_column_matches_summary(self, plans):
        for plan in plans:
            assert schedule_to_frame(plan)["interest"].sum() == plan.summary.total_interest

    def test_payoff_months(self, plans):
        avalanche, snowball = plans
        av = debt_payoff_months(avalanche)
        sb = debt_payoff_months(snowball)
        assert set(av) == {"A", "B"}
        assert sb["B"] < sb["A"]
        assert max(av.values()) == avalanche.summary.months_to_payoff


class TestComparePlans:
    def test_columns_and_rows(self, plans):
        df = compare_plans(plans)
        assert list(df.columns) == COMPARISON_COLUMNS
        assert list(df["strategy"]) == ["avalanche", "snowball"]
        assert (df["total_paid"] == df["total_debt"] + df["total_interest"]).all()

    def test_scope_column(self, plans):
        tagged = [replace(p, scope=PlanScope.CONSUMER, optimized=True) for p in plans]
        df = compare_plans(tagged)
        assert set(df["scope"]) == {"consumer"}
        assert df["optimized"].all()

    def test_empty_schedule_skipped(self, plans):
        empty = replace(plans[0], schedule=())
        assert len(compare_plans([empty, plans[1]])) == 1

    def test_savings(self, plans):
        avalanche, snowball = plans
        assert interest_saved(snowball, avalanche) >= 0
        assert interest_saved(snowball, avalanche) == -interest_saved(avalanche, snowball)
        assert months_saved(snowball, snowball) == 0
