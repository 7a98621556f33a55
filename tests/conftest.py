import sys
from datetime import date
from pathlib import Path

import pytest

# Make sure the project root is on sys.path
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from data_manager.schema import DebtAccount  # noqa: E402


@pytest.fixture
def start_date():
    return date(2025, 1, 1)


@pytest.fixture
def two_debts():
    """A: $1000.00 at 24%, B: $500.00 at 12%"""
    return [
        DebtAccount(id="A", name="Card A", account_type="credit_card",
                    balance=100000, interest_rate=0.24, minimum_payment=3000),
        DebtAccount(id="B", name="Loan B", account_type="personal_loan",
                    balance=50000, interest_rate=0.12, minimum_payment=2000),
    ]
