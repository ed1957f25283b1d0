import dataclasses
import math

import pytest

from uk_finance.core.inputs import AffordabilityParams, LoanParameters
from uk_finance.core.mortgage import build_schedule
from uk_finance.core.rent_buy import monthly_cost_paths, rent_vs_buy
from uk_finance.core.scenarios import base_rent_vs_buy

FLAT = AffordabilityParams(
    price=200_000,
    deposit_pct=25,
    mortgage_rate_pct=0,
    term_years=25,
    owner_monthly_costs=100,
    rent_monthly=800,
    rent_extra_monthly=50,
    horizon_years=5,
    selling_cost_pct=1,
    legal_fees=1_000,
    survey_fees=500,
    sale_legal_fees=800,
    include_sdlt=True,
)


def test_flat_scenario_figures():
    result = rent_vs_buy(FLAT)
    assert result.deposit == 50_000
    assert result.principal == 150_000
    assert result.mortgage_monthly == 500
    assert result.owner_monthly == 600
    assert result.rent_monthly0 == 850
    assert result.rent_total_basic == 51_000
    assert result.buy_total_basic == 36_000
    assert result.rent_total == pytest.approx(51_000)
    assert result.buy_total == pytest.approx(36_000)
    assert result.sdlt == pytest.approx(1_500)
    assert result.buy_upfront == pytest.approx(3_000)
    assert result.sale_price == 200_000
    assert result.selling == pytest.approx(2_800)
    assert result.remaining_balance == pytest.approx(120_000)
    assert result.equity == pytest.approx(77_200)
    assert result.buy_net_cost == pytest.approx(-38_200)
    assert result.buying_saves == pytest.approx(89_200)


def test_inflation_uses_fractional_year_exponent():
    params = dataclasses.replace(FLAT, rent_monthly=1_000, rent_extra_monthly=0, rent_inflation_pct=12, owner_cost_inflation_pct=6, horizon_years=1)
    result = rent_vs_buy(params)
    expected_rent = sum(1_000 * 1.12 ** (m / 12) for m in range(12))
    expected_own = sum(600 * 1.06 ** (m / 12) for m in range(12))
    assert result.rent_total == pytest.approx(expected_rent, rel=1e-12)
    assert result.buy_total == pytest.approx(expected_own, rel=1e-12)
    # basic totals ignore inflation
    assert result.rent_total_basic == 12_000


def test_sale_price_compounds_annually():
    params = dataclasses.replace(FLAT, price_growth_pct=10, horizon_years=2)
    assert rent_vs_buy(params).sale_price == pytest.approx(242_000)


def test_equity_floors_at_zero():
    params = dataclasses.replace(FLAT, deposit_pct=5, price_growth_pct=-50)
    result = rent_vs_buy(params)
    assert result.equity == 0
    assert result.buy_net_cost == pytest.approx(result.buy_total + result.buy_upfront)


@pytest.mark.parametrize("deposit_pct, expected_deposit", [(150, 200_000), (-10, 0)])
def test_deposit_percentage_is_clamped(deposit_pct, expected_deposit):
    result = rent_vs_buy(dataclasses.replace(FLAT, deposit_pct=deposit_pct, mortgage_rate_pct=4))
    assert result.deposit == expected_deposit
    assert result.principal == 200_000 - expected_deposit


def test_full_deposit_leaves_no_mortgage():
    result = rent_vs_buy(dataclasses.replace(FLAT, deposit_pct=100, mortgage_rate_pct=4))
    assert result.mortgage_monthly == 0
    assert result.remaining_balance == 0


def test_sdlt_can_be_excluded():
    result = rent_vs_buy(dataclasses.replace(FLAT, include_sdlt=False))
    assert result.sdlt == 0
    assert result.buy_upfront == 1_500


def test_remaining_balance_matches_monthly_schedule():
    params = dataclasses.replace(FLAT, mortgage_rate_pct=4.5)
    result = rent_vs_buy(params)
    schedule = build_schedule(LoanParameters(principal=150_000, annual_rate_pct=4.5, years=25))
    assert result.mortgage_monthly == pytest.approx(schedule.payment)
    assert result.remaining_balance == pytest.approx(schedule.rows[59].balance)


def test_horizon_beyond_term_clears_mortgage():
    params = dataclasses.replace(FLAT, mortgage_rate_pct=4.5, term_years=5, horizon_years=8)
    assert rent_vs_buy(params).remaining_balance == pytest.approx(0.0, abs=1e-6)


def test_zero_term_propagates_nan_payment():
    result = rent_vs_buy(dataclasses.replace(FLAT, term_years=0))
    assert math.isnan(result.mortgage_monthly)
    assert result.remaining_balance == 150_000


def test_monthly_cost_paths_match_totals():
    params = base_rent_vs_buy()
    result = rent_vs_buy(params)
    paths = monthly_cost_paths(params)
    assert len(paths) == 120
    assert paths.index[0] == 1
    assert paths["rent"].iloc[0] == pytest.approx(result.rent_monthly0)
    assert paths["own"].iloc[0] == pytest.approx(result.owner_monthly)
    assert paths["rent_cumulative"].iloc[-1] == pytest.approx(result.rent_total)
    assert paths["own_cumulative"].iloc[-1] == pytest.approx(result.buy_total)


def test_tiny_mortgage_rate_behaves_like_zero_rate():
    result = rent_vs_buy(dataclasses.replace(FLAT, mortgage_rate_pct=1e-14))
    assert result.mortgage_monthly == pytest.approx(500)
    assert result.remaining_balance == pytest.approx(120_000)


def test_price_collapse_over_fractional_horizon_gives_nan_sale_price():
    result = rent_vs_buy(dataclasses.replace(FLAT, price_growth_pct=-150, horizon_years=2.5))
    assert math.isnan(result.sale_price)
    assert math.isnan(result.selling)
