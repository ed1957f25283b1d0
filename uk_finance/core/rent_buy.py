from __future__ import annotations

import logging

import numpy as np
import pandas as pd

from .budget import cumulative_cost, inflated_cost_path, total_cost
from .inputs import AffordabilityParams, AffordabilityResult, SdltOptions
from .mortgage import monthly_mortgage_payment, remaining_balance, round_half_up
from .sdlt import calc_sdlt

logger = logging.getLogger(__name__)


def deposit_and_principal(params: AffordabilityParams) -> tuple[float, float]:
    deposit = params.price * float(np.clip(params.deposit_pct / 100.0, 0.0, 1.0))
    return deposit, max(0.0, params.price - deposit)


def horizon_months(params: AffordabilityParams) -> int:
    return round_half_up(params.horizon_years * 12)


def _monthly_outgoings(params: AffordabilityParams) -> tuple[float, float, float]:
    """Return (mortgage payment, owner monthly cost, rent monthly cost) at month 0."""
    _, principal = deposit_and_principal(params)
    mortgage_monthly = monthly_mortgage_payment(principal, params.mortgage_rate_pct, params.term_years)
    owner_monthly = mortgage_monthly + params.owner_monthly_costs
    rent_monthly0 = params.rent_monthly + params.rent_extra_monthly
    return mortgage_monthly, owner_monthly, rent_monthly0


def monthly_cost_paths(params: AffordabilityParams) -> pd.DataFrame:
    """Month-by-month inflated rent and ownership costs with running totals."""
    _, owner_monthly, rent_monthly0 = _monthly_outgoings(params)
    months = horizon_months(params)

    rent_path = inflated_cost_path(rent_monthly0, params.rent_inflation_pct, months)
    owner_path = inflated_cost_path(owner_monthly, params.owner_cost_inflation_pct, months)

    return pd.DataFrame(
        {
            "month": np.arange(1, max(months, 0) + 1),
            "rent": rent_path,
            "own": owner_path,
            "rent_cumulative": cumulative_cost(rent_path),
            "own_cumulative": cumulative_cost(owner_path),
        }
    ).set_index("month")


def upfront_buying_costs(params: AffordabilityParams) -> tuple[float, float]:
    """Return (stamp duty, total upfront costs). Ineligible SDLT counts as zero."""
    sdlt_cost = 0.0
    if params.include_sdlt:
        sdlt = calc_sdlt(params.price, SdltOptions(buyer_type="main"))
        sdlt_cost = sdlt.total if sdlt.ok else 0.0
    return sdlt_cost, params.legal_fees + params.survey_fees + sdlt_cost


def rent_vs_buy(params: AffordabilityParams) -> AffordabilityResult:
    """Compare renting with buying over the horizon.

    Monthly costs inflate with a fractional-year exponent (month / 12) while the
    sale price compounds once per year over the horizon. The remaining mortgage
    balance ignores any offset account.
    """
    deposit, principal = deposit_and_principal(params)
    mortgage_monthly, owner_monthly, rent_monthly0 = _monthly_outgoings(params)
    months = horizon_months(params)

    rent_total_basic = rent_monthly0 * months
    buy_total_basic = owner_monthly * months

    rent_total = total_cost(inflated_cost_path(rent_monthly0, params.rent_inflation_pct, months))
    buy_total = total_cost(inflated_cost_path(owner_monthly, params.owner_cost_inflation_pct, months))

    sdlt_cost, buy_upfront = upfront_buying_costs(params)

    # Growth below -100% over a fractional horizon has no real value; numpy gives NaN.
    with np.errstate(invalid="ignore"):
        growth = float(np.power(1 + params.price_growth_pct / 100.0, params.horizon_years))
    sale_price = params.price * growth
    selling = sale_price * (params.selling_cost_pct / 100.0) + params.sale_legal_fees

    monthly_rate = (params.mortgage_rate_pct / 100.0) / 12.0
    term_months = round_half_up(params.term_years * 12)
    balance = remaining_balance(principal, monthly_rate, mortgage_monthly, min(months, term_months))

    equity = max(0.0, sale_price - balance - selling)
    buy_net_cost = buy_total + buy_upfront - equity

    logger.debug(
        "Rent vs buy over %d months: rent %.2f, buy net %.2f (equity %.2f)",
        months,
        rent_total,
        buy_net_cost,
        equity,
    )

    return AffordabilityResult(
        deposit=deposit,
        principal=principal,
        mortgage_monthly=mortgage_monthly,
        rent_monthly0=rent_monthly0,
        owner_monthly=owner_monthly,
        rent_total_basic=rent_total_basic,
        buy_total_basic=buy_total_basic,
        rent_total=rent_total,
        buy_total=buy_total,
        sdlt=sdlt_cost,
        buy_upfront=buy_upfront,
        sale_price=sale_price,
        selling=selling,
        remaining_balance=balance,
        equity=equity,
        buy_net_cost=buy_net_cost,
    )
