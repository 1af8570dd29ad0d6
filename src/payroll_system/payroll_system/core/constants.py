"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

from decimal import Decimal

DEFAULT_ANNUAL_LEAVE_ALLOWANCE = 20
DEFAULT_PRESENT_HOURS = 8
MAX_DAILY_HOURS = 24

PROVIDENT_FUND_RATE = Decimal("0.12")
PER_SUBORDINATE_ALLOWANCE = Decimal("50")
MANAGER_BONUS_MULTIPLIER = Decimal("1.5")

DEFAULT_DATA_FILE = "employees.json"
DEFAULT_PAYSLIP_DIR = "payslips"
