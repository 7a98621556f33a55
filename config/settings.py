# Simulation ceiling: 50 years
MAX_SCHEDULE_MONTHS = 600

# Default annual rate (decimal) for unrecognized account types
DEFAULT_INTEREST_RATE = 0.1099

# Assumed term for installment-loan minimum payment estimates (10 years)
INSTALLMENT_TERM_MONTHS = 120

# Credit cards / other: 2% of balance, $25 floor
REVOLVING_MINIMUM_PERCENT = 0.02
REVOLVING_MINIMUM_FLOOR = 2500

# Medical debt: 1% of balance, $50 floor
MEDICAL_MINIMUM_PERCENT = 0.01
MEDICAL_MINIMUM_FLOOR = 5000

# Default monthly payment = sum of minimums * 1.1
DEFAULT_PAYMENT_MULTIPLIER = 1.1

# "Optimized" monthly payment when no budget surplus is known
OPTIMIZED_PAYMENT_MULTIPLIER = 2.2

# Lookback window (days) for detecting a promotional period that just ended
PROMO_LOOKBACK_DAYS = 30

# Display
CURRENCY_SYMBOL = "$"
