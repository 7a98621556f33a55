from enum import Enum


class AccountType(str, Enum):
    # Assets
    CHECKING = "checking"
    SAVINGS = "savings"
    CASH = "cash"
    BROKERAGE = "brokerage"
    RETIREMENT_401K = "401k"
    IRA = "ira"
    ROTH = "roth"
    INVESTMENT = "investment"
    ASSET = "asset"
    # Liabilities
    CREDIT_CARD = "credit_card"
    LINE_OF_CREDIT = "line_of_credit"
    MORTGAGE = "mortgage"
    AUTO_LOAN = "auto_loan"
    STUDENT_LOAN = "student_loan"
    PERSONAL_LOAN = "personal_loan"
    MEDICAL_DEBT = "medical_debt"
    LIABILITY = "liability"

    @property
    def is_debt(self) -> bool:
        return self in DEBT_ACCOUNT_TYPES

    @property
    def is_installment(self) -> bool:
        return self in (
            AccountType.MORTGAGE,
            AccountType.AUTO_LOAN,
            AccountType.STUDENT_LOAN,
            AccountType.PERSONAL_LOAN,
        )

    @property
    def label(self) -> str:
        return {
            "credit_card": "Credit card",
            "line_of_credit": "Line of credit",
            "mortgage": "Mortgage",
            "auto_loan": "Auto loan",
            "student_loan": "Student loan",
            "personal_loan": "Personal loan",
            "medical_debt": "Medical debt",
            "liability": "Other liability",
        }.get(self.value, self.value.replace("_", " ").capitalize())


DEBT_ACCOUNT_TYPES = frozenset({
    AccountType.CREDIT_CARD,
    AccountType.LINE_OF_CREDIT,
    AccountType.MORTGAGE,
    AccountType.AUTO_LOAN,
    AccountType.STUDENT_LOAN,
    AccountType.PERSONAL_LOAN,
    AccountType.MEDICAL_DEBT,
    AccountType.LIABILITY,
})


class AccountStatus(str, Enum):
    ACTIVE = "active"
    INACTIVE = "inactive"
    CLOSED = "closed"


class StrategyKind(str, Enum):
    AVALANCHE = "avalanche"  # highest rate first
    SNOWBALL = "snowball"  # smallest balance first
    CUSTOM = "custom"

    @property
    def label(self) -> str:
        return {
            "avalanche": "Avalanche Strategy (Highest Interest First)",
            "snowball": "Snowball Strategy (Smallest Balance First)",
            "custom": "Custom Payoff Plan",
        }[self.value]


class PlanScope(str, Enum):
    CONSUMER = "consumer"  # everything except mortgages
    ALL = "all"


class EstimateConfidence(str, Enum):
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


DEFAULT_PLAN_NAME = "Debt Payoff Plan"

# Column definitions
SCHEDULE_COLUMNS = [
    "plan_id", "month", "date", "debt_id", "debt_name",
    "payment", "principal", "interest", "remaining_balance",
    "total_payment", "debts_remaining",
]

COMPARISON_COLUMNS = [
    "plan_id", "name", "strategy", "scope", "optimized",
    "monthly_payment", "extra_payment", "months_to_payoff",
    "total_debt", "total_interest", "total_paid", "debt_free_date",
    "interest_share",
]
