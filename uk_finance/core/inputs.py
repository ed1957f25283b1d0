from dataclasses import dataclass, field
from typing import Optional

import pandas as pd


@dataclass(frozen=True)
class LoanParameters:
    principal: float
    annual_rate_pct: float
    years: float
    frequency: str = "monthly"  # "monthly", "fortnightly" or "weekly"
    payment_type: str = "repayment"  # "repayment" or "interestOnly"
    offset_balance: float = 0.0

    @property
    def interest_only(self) -> bool:
        return self.payment_type == "interestOnly"


@dataclass(frozen=True)
class PeriodRow:
    period: int
    payment: float
    interest: float
    principal_paid: float
    balance: float
    effective_principal: float


@dataclass(frozen=True)
class Schedule:
    payment: float
    periodic_rate: float
    n_periods: int
    rows: tuple[PeriodRow, ...] = ()

    @property
    def total_interest(self) -> float:
        return sum(row.interest for row in self.rows)

    @property
    def total_paid(self) -> float:
        return sum(row.interest + row.principal_paid for row in self.rows)

    def to_frame(self) -> pd.DataFrame:
        """Ledger as a DataFrame indexed by period."""
        columns = ["period", "payment", "interest", "principal_paid", "balance", "effective_principal"]
        records = [
            {
                "period": row.period,
                "payment": row.payment,
                "interest": row.interest,
                "principal_paid": row.principal_paid,
                "balance": row.balance,
                "effective_principal": row.effective_principal,
            }
            for row in self.rows
        ]
        return pd.DataFrame.from_records(records, columns=columns).set_index("period")


@dataclass(frozen=True)
class AffordabilityParams:
    price: float
    deposit_pct: float
    mortgage_rate_pct: float
    term_years: float
    owner_monthly_costs: float = 0.0
    rent_monthly: float = 0.0
    rent_extra_monthly: float = 0.0
    horizon_years: float = 5.0
    rent_inflation_pct: float = 0.0
    owner_cost_inflation_pct: float = 0.0
    price_growth_pct: float = 0.0
    selling_cost_pct: float = 0.0
    legal_fees: float = 0.0
    survey_fees: float = 0.0
    sale_legal_fees: float = 0.0
    include_sdlt: bool = True


@dataclass(frozen=True)
class AffordabilityResult:
    deposit: float
    principal: float
    mortgage_monthly: float
    rent_monthly0: float
    owner_monthly: float
    rent_total_basic: float
    buy_total_basic: float
    rent_total: float
    buy_total: float
    sdlt: float
    buy_upfront: float
    sale_price: float
    selling: float
    remaining_balance: float
    equity: float
    buy_net_cost: float

    @property
    def buying_saves(self) -> float:
        """Positive when buying beats renting over the horizon."""
        return self.rent_total - self.buy_net_cost


@dataclass(frozen=True)
class SdltOptions:
    buyer_type: str = "main"  # "main" or "ftb"
    additional_property: bool = False
    non_uk_resident: bool = False


@dataclass(frozen=True)
class BandLine:
    lower: float
    upper: Optional[float]  # None for the open top band
    slice: float
    rate: float
    tax: float


@dataclass(frozen=True)
class BandedTax:
    ok: bool
    tax: float
    lines: tuple[BandLine, ...] = ()
    reason: Optional[str] = None


@dataclass(frozen=True)
class SdltResult:
    ok: bool
    total: float
    base: float
    extra_rate: float
    lines: tuple[BandLine, ...] = ()
    reason: Optional[str] = None


@dataclass(frozen=True)
class TakeHomeParams:
    gross_annual: float
    pension_pct: float = 0.0
    pension_method: str = "none"  # "salarySacrifice" or "none"
    student_loan_plan: str = "none"


@dataclass(frozen=True)
class TakeHomeResult:
    gross_annual: float
    adjusted_gross_annual: float
    pension_annual: float
    personal_allowance: float
    taxable_income: float
    income_tax: float
    ni: float
    student_loan: float
    net_annual: float
    net_monthly: float
    income_tax_bands: tuple[BandLine, ...] = field(default_factory=tuple)
    ni_thresholds: tuple[float, float] = (0.0, 0.0)  # (primary threshold, upper earnings limit)
    student_loan_label: str = "None"
