from __future__ import annotations

import logging
import math
from typing import Iterator

from uk_finance.validation.checks import validate_frequency

from .inputs import LoanParameters, PeriodRow, Schedule
from .tables import PERIODS_PER_YEAR

logger = logging.getLogger(__name__)


def periods_per_year(frequency: str) -> int:
    validate_frequency(frequency)
    return PERIODS_PER_YEAR[frequency]


def round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def effective_principal(balance: float, offset_balance: float) -> float:
    """Portion of the balance that accrues interest once the offset is netted off."""
    return max(0.0, balance - max(0.0, offset_balance))


def repayment_payment(principal: float, periodic_rate: float, n_periods: int) -> float:
    """Fixed payment that clears `principal` over `n_periods`; NaN for a non-positive term."""
    if n_periods <= 0:
        return math.nan
    if periodic_rate == 0:
        return principal / n_periods
    # expm1/log1p keep the denominator non-zero for rates too small to move (1 + r) ** n.
    growth = math.expm1(n_periods * math.log1p(periodic_rate))
    return principal * periodic_rate * (growth + 1) / growth


def monthly_mortgage_payment(principal: float, annual_rate_pct: float, years: float) -> float:
    monthly_rate = (annual_rate_pct / 100.0) / 12.0
    return repayment_payment(principal, monthly_rate, round_half_up(years * 12))


def amortization_walk(
    principal: float,
    periodic_rate: float,
    payment: float,
    n_periods: int,
    offset_balance: float = 0.0,
    interest_only: bool = False,
) -> Iterator[PeriodRow]:
    """Yield one row per period until the term runs out or the balance is cleared.

    Interest accrues on the balance less the offset. Principal paid is capped at
    the outstanding balance, so the last row absorbs any overshoot.
    """
    balance = principal
    for period in range(1, n_periods + 1):
        if balance <= 0:
            break

        eff = effective_principal(balance, offset_balance)
        interest = eff * periodic_rate
        if interest_only:
            principal_paid = 0.0
        else:
            principal_paid = min(max(0.0, payment - interest), balance)
        ending_balance = max(balance - principal_paid, 0.0)

        yield PeriodRow(
            period=period,
            payment=payment,
            interest=interest,
            principal_paid=principal_paid,
            balance=ending_balance,
            effective_principal=eff,
        )

        balance = ending_balance


def remaining_balance(principal: float, periodic_rate: float, payment: float, n_periods: int) -> float:
    balance = principal
    for row in amortization_walk(principal, periodic_rate, payment, n_periods):
        balance = row.balance
    return balance


def build_schedule(params: LoanParameters) -> Schedule:
    principal = max(params.principal, 0.0)
    annual_rate_pct = max(params.annual_rate_pct, 0.0)
    years = max(params.years, 0.0)
    offset_balance = max(params.offset_balance, 0.0)

    ppy = periods_per_year(params.frequency)
    n_periods = round_half_up(years * ppy)
    periodic_rate = (annual_rate_pct / 100.0) / ppy

    # Interest-only payment tracks the contractual amount on the full principal,
    # not the offset-reduced interest actually charged.
    if params.interest_only:
        payment = principal * periodic_rate
    else:
        payment = repayment_payment(principal, periodic_rate, n_periods)

    rows = tuple(
        amortization_walk(
            principal,
            periodic_rate,
            payment,
            n_periods,
            offset_balance=offset_balance,
            interest_only=params.interest_only,
        )
    )
    logger.debug(
        "Built %s %s schedule: %d of %d periods, payment %.2f",
        params.frequency,
        params.payment_type,
        len(rows),
        n_periods,
        payment,
    )
    return Schedule(payment=payment, periodic_rate=periodic_rate, n_periods=n_periods, rows=rows)
