from __future__ import annotations

import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[2]
if str(ROOT) not in sys.path:
    sys.path.append(str(ROOT))


import pandas as pd
import streamlit as st

from uk_finance.core.inputs import AffordabilityParams, LoanParameters, SdltOptions, TakeHomeParams
from uk_finance.core.mortgage import build_schedule
from uk_finance.core.rent_buy import monthly_cost_paths, rent_vs_buy
from uk_finance.core.scenarios import base_loan, base_rent_vs_buy, base_sdlt_options, base_take_home
from uk_finance.core.sdlt import calc_sdlt
from uk_finance.core.tables import STUDENT_LOAN_PLANS, TAX_YEAR_LABEL
from uk_finance.core.take_home import take_home_pay


st.set_page_config(page_title="UK Money Calculators", layout="wide")


def _gbp(value: float) -> str:
    return f"£{value:,.2f}"


def mortgage_inputs() -> LoanParameters:
    defaults = base_loan()
    col1, col2, col3 = st.columns(3)
    with col1:
        principal = st.number_input("Loan amount", min_value=0, max_value=5_000_000, value=int(defaults.principal), step=5_000)
        rate = st.number_input(
            "Interest rate (annual %)", min_value=0.0, max_value=20.0, value=defaults.annual_rate_pct, step=0.05, format="%.2f"
        )
    with col2:
        years = st.slider("Term (years)", min_value=1, max_value=40, value=int(defaults.years))
        frequency = st.selectbox("Payment frequency", options=["monthly", "fortnightly", "weekly"])
    with col3:
        payment_type = st.selectbox(
            "Mortgage type",
            options=["repayment", "interestOnly"],
            format_func=lambda x: "Repayment" if x == "repayment" else "Interest only",
        )
        offset = st.number_input("Offset savings", min_value=0, max_value=5_000_000, value=int(defaults.offset_balance), step=1_000)

    return LoanParameters(
        principal=float(principal),
        annual_rate_pct=float(rate),
        years=float(years),
        frequency=frequency,
        payment_type=payment_type,
        offset_balance=float(offset),
    )


def render_mortgage() -> None:
    params = mortgage_inputs()
    schedule = build_schedule(params)
    df = schedule.to_frame()

    m1, m2, m3 = st.columns(3)
    m1.metric(f"Payment ({params.frequency})", _gbp(schedule.payment))
    m2.metric("Total interest", _gbp(schedule.total_interest))
    m3.metric("Periods to clear", f"{len(schedule.rows)} of {schedule.n_periods}")

    if df.empty:
        st.info("Enter a term and loan amount to see the schedule.")
        return
    st.line_chart(df[["balance"]])
    st.dataframe(df.style.format("{:,.2f}"))


def rent_vs_buy_inputs() -> AffordabilityParams:
    defaults = base_rent_vs_buy()
    with st.expander("Purchase & mortgage", expanded=True):
        price = st.number_input("Property price", min_value=0, max_value=10_000_000, value=int(defaults.price), step=5_000)
        deposit_pct = st.slider("Deposit (%)", min_value=0.0, max_value=100.0, value=defaults.deposit_pct, step=0.5)
        mortgage_rate = st.number_input("Mortgage rate (annual %)", min_value=0.0, max_value=20.0, value=defaults.mortgage_rate_pct, step=0.05)
        term_years = st.slider("Mortgage term (years)", min_value=1, max_value=40, value=int(defaults.term_years))
        owner_costs = st.number_input("Other owner costs (monthly)", min_value=0, max_value=20_000, value=int(defaults.owner_monthly_costs), step=25)

    with st.expander("Renting", expanded=True):
        rent = st.number_input("Rent (monthly)", min_value=0, max_value=50_000, value=int(defaults.rent_monthly), step=25)
        rent_extra = st.number_input("Other renting costs (monthly)", min_value=0, max_value=20_000, value=int(defaults.rent_extra_monthly), step=25)

    with st.expander("Assumptions", expanded=False):
        horizon = st.slider("Horizon (years)", min_value=1, max_value=40, value=int(defaults.horizon_years))
        rent_inflation = st.slider("Rent inflation (annual %)", min_value=0.0, max_value=10.0, value=defaults.rent_inflation_pct, step=0.1)
        owner_inflation = st.slider(
            "Owner cost inflation (annual %)", min_value=0.0, max_value=10.0, value=defaults.owner_cost_inflation_pct, step=0.1
        )
        price_growth = st.slider("House price growth (annual %)", min_value=-5.0, max_value=10.0, value=defaults.price_growth_pct, step=0.1)
        selling_pct = st.slider("Selling costs (% of sale price)", min_value=0.0, max_value=5.0, value=defaults.selling_cost_pct, step=0.1)
        legal = st.number_input("Legal fees (purchase)", min_value=0, max_value=50_000, value=int(defaults.legal_fees), step=100)
        survey = st.number_input("Survey fees", min_value=0, max_value=10_000, value=int(defaults.survey_fees), step=50)
        sale_legal = st.number_input("Legal fees (sale)", min_value=0, max_value=50_000, value=int(defaults.sale_legal_fees), step=100)
        include_sdlt = st.checkbox("Include stamp duty", value=defaults.include_sdlt)

    return AffordabilityParams(
        price=float(price),
        deposit_pct=float(deposit_pct),
        mortgage_rate_pct=float(mortgage_rate),
        term_years=float(term_years),
        owner_monthly_costs=float(owner_costs),
        rent_monthly=float(rent),
        rent_extra_monthly=float(rent_extra),
        horizon_years=float(horizon),
        rent_inflation_pct=float(rent_inflation),
        owner_cost_inflation_pct=float(owner_inflation),
        price_growth_pct=float(price_growth),
        selling_cost_pct=float(selling_pct),
        legal_fees=float(legal),
        survey_fees=float(survey),
        sale_legal_fees=float(sale_legal),
        include_sdlt=include_sdlt,
    )


def render_rent_vs_buy() -> None:
    params = rent_vs_buy_inputs()
    result = rent_vs_buy(params)

    m1, m2, m3 = st.columns(3)
    m1.metric("Total rent (inflated)", _gbp(result.rent_total))
    m2.metric("Net cost of buying", _gbp(result.buy_net_cost))
    m3.metric("Buying saves" if result.buying_saves >= 0 else "Renting saves", _gbp(abs(result.buying_saves)))

    rows = [
        ("Deposit", result.deposit),
        ("Mortgage", result.principal),
        ("Mortgage payment (monthly)", result.mortgage_monthly),
        ("Owner cost (monthly)", result.owner_monthly),
        ("Rent (monthly)", result.rent_monthly0),
        ("Rent total, no inflation", result.rent_total_basic),
        ("Owner total, no inflation", result.buy_total_basic),
        ("Stamp duty", result.sdlt),
        ("Upfront buying costs", result.buy_upfront),
        ("Sale price", result.sale_price),
        ("Selling costs", result.selling),
        ("Mortgage left at sale", result.remaining_balance),
        ("Equity released", result.equity),
    ]
    df = pd.DataFrame(rows, columns=["Line item", "Amount"])
    df["Amount"] = df["Amount"].map(_gbp)
    st.table(df)

    paths = monthly_cost_paths(params)
    st.line_chart(paths[["rent_cumulative", "own_cumulative"]])
    st.caption("A simplified cashflow view; it ignores investment returns on the deposit.")


def render_sdlt() -> None:
    defaults = base_sdlt_options()
    price = st.number_input("Purchase price", min_value=0, max_value=20_000_000, value=350_000, step=5_000)
    buyer_type = st.selectbox(
        "Buyer", options=["main", "ftb"], format_func=lambda x: "First-time buyer" if x == "ftb" else "Home mover"
    )
    additional = st.checkbox("Additional property", value=defaults.additional_property)
    non_resident = st.checkbox("Non-UK resident", value=defaults.non_uk_resident)

    result = calc_sdlt(float(price), SdltOptions(buyer_type=buyer_type, additional_property=additional, non_uk_resident=non_resident))
    if not result.ok:
        st.warning(result.reason)
        return

    st.metric("Stamp duty", _gbp(result.total))
    df = pd.DataFrame(
        [
            {
                "From": _gbp(line.lower),
                "To": _gbp(line.upper) if line.upper is not None else "and above",
                "Rate": f"{line.rate * 100:.0f}%",
                "Tax": _gbp(line.tax),
            }
            for line in result.lines
        ]
    )
    st.table(df)


def render_take_home() -> None:
    defaults = base_take_home()
    gross = st.number_input("Salary (annual)", min_value=0, max_value=2_000_000, value=int(defaults.gross_annual), step=1_000)
    pension_pct = st.slider("Pension contribution (%)", min_value=0.0, max_value=50.0, value=defaults.pension_pct, step=0.5)
    pension_method = st.selectbox("Pension method", options=["salarySacrifice", "none"])
    plan_keys = list(STUDENT_LOAN_PLANS.keys())
    plan = st.selectbox(
        "Student loan", options=plan_keys, index=plan_keys.index(defaults.student_loan_plan),
        format_func=lambda key: STUDENT_LOAN_PLANS[key].label,
    )

    result = take_home_pay(
        TakeHomeParams(gross_annual=float(gross), pension_pct=pension_pct, pension_method=pension_method, student_loan_plan=plan)
    )
    m1, m2 = st.columns(2)
    m1.metric("Take-home (annual)", _gbp(result.net_annual))
    m2.metric("Take-home (monthly)", _gbp(result.net_monthly))

    rows = [
        ("Gross pay", result.gross_annual),
        ("Pension", -result.pension_annual),
        ("Income tax", -result.income_tax),
        ("National Insurance", -result.ni),
        (result.student_loan_label, -result.student_loan),
        ("Take-home pay", result.net_annual),
    ]
    df = pd.DataFrame(rows, columns=["Line item", "Annual"])
    df["Annual"] = df["Annual"].map(_gbp)
    st.table(df)
    st.caption(f"Tax year {TAX_YEAR_LABEL}, England / Wales / Northern Ireland rates.")


st.title("UK Money Calculators")
mortgage_tab, rent_tab, sdlt_tab, pay_tab = st.tabs(["Mortgage", "Rent vs buy", "Stamp duty", "Take-home pay"])
with mortgage_tab:
    render_mortgage()
with rent_tab:
    render_rent_vs_buy()
with sdlt_tab:
    render_sdlt()
with pay_tab:
    render_take_home()
