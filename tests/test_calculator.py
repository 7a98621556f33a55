"""Money math tests"""
import sys
from pathlib import Path
sys.path.insert(0, str(Path(__file__).parent.parent))

import pytest
from core.calculator import (
    monthly_interest,
    calc_equal_installment,
    calc_interest_only,
    calc_percent_with_floor,
)
from utils.money import round_half_up
from utils.formatters import fmt_amount, fmt_rate, fmt_months


class TestRounding:
    def test_half_rounds_away_from_zero(self):
        assert round_half_up(2.5) == 3
        assert round_half_up(3.5) == 4
        assert round_half_up(-2.5) == -3

    def test_below_half_rounds_down(self):
        assert round_half_up(2.4999) == 2


class TestMonthlyInterest:
    def test_basic(self):
        # 100000 * 0.24 / 12 = 2000
        assert monthly_interest(100000, 0.24) == 2000
        assert monthly_interest(50000, 0.12) == 500

    def test_half_cent_rounds_up(self):
        # 150 * 0.04 / 12 = 0.5
        assert monthly_interest(150, 0.04) == 1

    def test_zero_rate_or_balance(self):
        assert monthly_interest(100000, 0) == 0
        assert monthly_interest(0, 0.24) == 0

    def test_returns_int(self):
        assert isinstance(monthly_interest(123457, 0.1899), int)


class TestEqualInstallment:
    def test_zero_rate(self):
        assert calc_equal_installment(120000, 0, 12) == 10000

    def test_ten_year_loan(self):
        """$12,000 at 6% over 120 months -> about $133.22"""
        payment = calc_equal_installment(1_200_000, 0.06, 120)
        assert 13300 < payment < 13350

    def test_covers_first_month_interest(self):
        payment = calc_equal_installment(1_200_000, 0.06, 120)
        assert payment > monthly_interest(1_200_000, 0.06)

    def test_empty_principal(self):
        assert calc_equal_installment(0, 0.06, 120) == 0


class TestOtherMinimums:
    def test_interest_only(self):
        assert calc_interest_only(120000, 0.1249) == 1249

    def test_percent_floor_applies(self):
        assert calc_percent_with_floor(100000, 0.02, 2500) == 2500

    def test_percent_above_floor(self):
        assert calc_percent_with_floor(500000, 0.02, 2500) == 10000


class TestFormatters:
    def test_amount(self):
        assert fmt_amount(123456) == "$1,234.56"
        assert fmt_amount(-5) == "-$0.05"

    def test_rate(self):
        assert fmt_rate(0.1899) == "18.99%"

    def test_months(self):
        assert fmt_months(12) == "1 year"
        assert fmt_months(38) == "3 years 2 months"
        assert fmt_months(1) == "1 month"
