"""Validation tests"""
import sys
from datetime import date
from pathlib import Path
sys.path.insert(0, str(Path(__file__).parent.parent))

import pytest
from core.errors import ValidationError
from data_manager.data_validator import (
    check_schedule_integrity,
    validate_debt_account,
    validate_plan_options,
)
from data_manager.schema import DebtAccount, DebtPayment, MonthlyPaymentSchedule


def debt(**kwargs):
    fields = dict(id="d1", name="Card", account_type="credit_card",
                  balance=100000, interest_rate=0.2, minimum_payment=2500)
    fields.update(kwargs)
    return DebtAccount(**fields)


def month(*payments, total=5000):
    return MonthlyPaymentSchedule(month=1, date=date(2025, 2, 1), total_payment=total,
                                  payments=tuple(payments), debts_remaining=1)


class TestDebtAccount:
    def test_valid(self):
        assert validate_debt_account(debt()) == (True, "")

    @pytest.mark.parametrize("kwargs", [
        {"id": ""},
        {"balance": -1},
        {"balance": 100.5},
        {"minimum_payment": -100},
        {"interest_rate": -0.01},
        {"promotional_rate": -0.01, "promotional_end_date": date(2026, 1, 1)},
    ])
    def test_invalid(self, kwargs):
        ok, msg = validate_debt_account(debt(**kwargs))
        assert not ok
        assert msg


class TestPlanOptions:
    def test_valid(self):
        assert validate_plan_options("avalanche", 5000) == (True, "")
        assert validate_plan_options("custom", None, ["a", "b"]) == (True, "")

    def test_invalid_strategy(self):
        ok, msg = validate_plan_options("fastest", 5000)
        assert not ok
        assert "fastest" in msg

    def test_negative_payment(self):
        assert not validate_plan_options("snowball", -1)[0]

    def test_duplicate_custom_ids(self):
        assert not validate_plan_options("custom", 5000, ["a", "a"])[0]


class TestScheduleIntegrity:
    def test_consistent_month(self):
        check_schedule_integrity([month(DebtPayment("d1", "Card", 3000, 2000, 1000, 98000))])

    def test_split_mismatch(self):
        with pytest.raises(ValidationError) as exc_info:
            check_schedule_integrity([month(DebtPayment("d1", "Card", 3000, 2000, 900, 98000))])
        assert exc_info.value.observed == 2900
        assert exc_info.value.expected == 3000
        assert "observed 2900, expected 3000" in str(exc_info.value)

    def test_negative_balance(self):
        with pytest.raises(ValidationError, match="negative"):
            check_schedule_integrity([month(DebtPayment("d1", "Card", 3000, 3000, 0, -5))])

    def test_over_budget(self):
        with pytest.raises(ValidationError, match="exceed"):
            check_schedule_integrity([month(
                DebtPayment("d1", "Card", 3000, 3000, 0, 0),
                DebtPayment("d2", "Loan", 3000, 3000, 0, 0),
            )])
