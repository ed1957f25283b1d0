from __future__ import annotations

from .inputs import BandedTax, TakeHomeParams, TakeHomeResult
from .tables import (
    INCOME_TAX_BANDS,
    NI_MAIN_RATE,
    NI_PRIMARY_THRESHOLD,
    NI_UPPER_EARNINGS_LIMIT,
    NI_UPPER_RATE,
    PERSONAL_ALLOWANCE,
    PERSONAL_ALLOWANCE_TAPER_START,
    STUDENT_LOAN_PLANS,
    StudentLoanPlan,
)
from .taxes import calc_width_banded_tax


def personal_allowance(adjusted_net_income: float) -> float:
    """Standard allowance, reduced by 1 for every 2 of income above the taper start."""
    if adjusted_net_income <= PERSONAL_ALLOWANCE_TAPER_START:
        return PERSONAL_ALLOWANCE
    reduction = (adjusted_net_income - PERSONAL_ALLOWANCE_TAPER_START) / 2.0
    return max(0.0, PERSONAL_ALLOWANCE - reduction)


def income_tax_annual(taxable_income: float) -> BandedTax:
    return calc_width_banded_tax(taxable_income, INCOME_TAX_BANDS)


def employee_ni_annual(gross_annual: float) -> float:
    """Class 1 employee NI, category A, on annualised weekly thresholds."""
    gross = max(0.0, gross_annual)
    main_band = max(0.0, min(gross, NI_UPPER_EARNINGS_LIMIT) - NI_PRIMARY_THRESHOLD)
    upper_band = max(0.0, gross - NI_UPPER_EARNINGS_LIMIT)
    return main_band * NI_MAIN_RATE + upper_band * NI_UPPER_RATE


def student_loan_plan(plan_key: str) -> StudentLoanPlan:
    return STUDENT_LOAN_PLANS.get(plan_key, STUDENT_LOAN_PLANS["none"])


def student_loan_annual(gross_annual: float, plan_key: str) -> float:
    plan = student_loan_plan(plan_key)
    if gross_annual <= plan.annual_threshold:
        return 0.0
    return (gross_annual - plan.annual_threshold) * plan.rate


def take_home_pay(params: TakeHomeParams) -> TakeHomeResult:
    gross = max(0.0, float(params.gross_annual))
    pension_pct = max(0.0, min(100.0, float(params.pension_pct)))
    pension_annual = gross * (pension_pct / 100.0)

    # Only salary sacrifice comes off before tax; other schemes are ignored here.
    if params.pension_method == "salarySacrifice":
        adjusted_gross = max(0.0, gross - pension_annual)
    else:
        adjusted_gross = gross

    allowance = personal_allowance(adjusted_gross)
    taxable = max(0.0, adjusted_gross - allowance)
    income_tax = income_tax_annual(taxable)
    ni = employee_ni_annual(adjusted_gross)
    plan = student_loan_plan(params.student_loan_plan)
    student_loan = student_loan_annual(adjusted_gross, params.student_loan_plan)

    net_annual = adjusted_gross - income_tax.tax - ni - student_loan

    return TakeHomeResult(
        gross_annual=gross,
        adjusted_gross_annual=adjusted_gross,
        pension_annual=pension_annual,
        personal_allowance=allowance,
        taxable_income=taxable,
        income_tax=income_tax.tax,
        ni=ni,
        student_loan=student_loan,
        net_annual=net_annual,
        net_monthly=net_annual / 12.0,
        income_tax_bands=income_tax.lines,
        ni_thresholds=(NI_PRIMARY_THRESHOLD, NI_UPPER_EARNINGS_LIMIT),
        student_loan_label=plan.label,
    )
