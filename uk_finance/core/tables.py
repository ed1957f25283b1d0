"""Tax-year tables, 2025/26, England / Northern Ireland.

Sources (captured 2026-02-17):
- SDLT: https://www.gov.uk/stamp-duty-land-tax/residential-property-rates
- Income tax: https://www.gov.uk/income-tax-rates
- NI (category A): https://www.gov.uk/national-insurance-rates-letters
- Student loans: https://www.gov.uk/repaying-your-student-loan/what-you-pay

Everything here is read-only once the module is imported.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from types import MappingProxyType

TAX_YEAR_LABEL = "2025/26"

PERIODS_PER_YEAR = MappingProxyType({"monthly": 12, "fortnightly": 26, "weekly": 52})

# (upper bound inclusive, rate). A rate of None means the relief does not apply.
SDLT_BANDS_MAIN = (
    (125_000.0, 0.00),
    (250_000.0, 0.02),
    (925_000.0, 0.05),
    (1_500_000.0, 0.10),
    (math.inf, 0.12),
)

# First-time buyer relief, simplified: not available above 500k.
SDLT_BANDS_FTB = (
    (300_000.0, 0.00),
    (500_000.0, 0.05),
    (math.inf, None),
)

SDLT_ADDITIONAL_PROPERTY_SURCHARGE = 0.05
SDLT_NON_UK_RESIDENT_SURCHARGE = 0.02

PERSONAL_ALLOWANCE = 12_570.0
PERSONAL_ALLOWANCE_TAPER_START = 100_000.0

# Band widths on taxable income (after the personal allowance), not cumulative caps.
INCOME_TAX_BANDS = (
    (37_700.0, 0.20),
    (74_870.0, 0.40),
    (math.inf, 0.45),
)

# Weekly thresholds, annualised by 52.
NI_PRIMARY_THRESHOLD = 242.0 * 52
NI_UPPER_EARNINGS_LIMIT = 967.0 * 52
NI_MAIN_RATE = 0.08
NI_UPPER_RATE = 0.02


@dataclass(frozen=True)
class StudentLoanPlan:
    label: str
    annual_threshold: float
    rate: float


STUDENT_LOAN_PLANS = MappingProxyType(
    {
        "none": StudentLoanPlan("None", math.inf, 0.0),
        "plan1": StudentLoanPlan("Plan 1", 26_065.0, 0.09),
        "plan2": StudentLoanPlan("Plan 2", 28_470.0, 0.09),
        "plan4": StudentLoanPlan("Plan 4", 32_745.0, 0.09),
        "plan5": StudentLoanPlan("Plan 5", 25_000.0, 0.09),
        "pg": StudentLoanPlan("Postgraduate Loan", 21_000.0, 0.06),
    }
)
