from __future__ import annotations

from .inputs import AffordabilityParams, LoanParameters, SdltOptions, TakeHomeParams


def base_loan() -> LoanParameters:
    """Provide a reasonable starting point for the UI."""
    return LoanParameters(
        principal=300_000,
        annual_rate_pct=5.0,
        years=25,
        frequency="monthly",
        payment_type="repayment",
        offset_balance=0.0,
    )


def base_rent_vs_buy() -> AffordabilityParams:
    return AffordabilityParams(
        price=350_000,
        deposit_pct=10.0,
        mortgage_rate_pct=4.5,
        term_years=25,
        owner_monthly_costs=250,
        rent_monthly=1_500,
        rent_extra_monthly=0,
        horizon_years=10,
        rent_inflation_pct=3.0,
        owner_cost_inflation_pct=2.0,
        price_growth_pct=2.5,
        selling_cost_pct=1.5,
        legal_fees=1_500,
        survey_fees=600,
        sale_legal_fees=1_200,
        include_sdlt=True,
    )


def base_take_home() -> TakeHomeParams:
    return TakeHomeParams(gross_annual=45_000, pension_pct=5.0, pension_method="salarySacrifice", student_loan_plan="plan2")


def base_sdlt_options() -> SdltOptions:
    return SdltOptions(buyer_type="main", additional_property=False, non_uk_resident=False)
