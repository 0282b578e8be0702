"""Amortization engine - EMI, affordability and rate comparison"""

import math

from fynp_gateway.domain.models import (
    AffordabilityResult,
    AmortizationResult,
    LoanTerms,
    RateComparison,
)
from fynp_gateway.utils.numbers import is_finite

# Share of free monthly income a lender lets go towards a new EMI (FOIR)
DEFAULT_CEILING_RATIO = 0.55


def monthly_rate(annual_rate_percent: float) -> float:
    """Convert a nominal annual percentage rate into a monthly fraction"""
    return annual_rate_percent / 12 / 100


def _compound_growth(rate: float, periods: float) -> float:
    """(1 + rate) ** periods, saturating to infinity instead of raising"""
    try:
        return (1 + rate) ** periods
    except OverflowError:
        return math.inf


def periodic_payment(principal: float, annual_rate_percent: float, term_months: int) -> float:
    """
    Fixed monthly payment for a fully amortizing loan.

    EMI = P * r * (1+r)^N / ((1+r)^N - 1), with r the monthly rate.
    A zero rate falls back to straight-line P / N. Inputs outside the domain
    (non-positive principal or term, negative or non-finite rate) give 0.0.
    """
    if not is_finite(principal, annual_rate_percent, term_months):
        return 0.0
    if principal <= 0 or term_months <= 0 or annual_rate_percent < 0:
        return 0.0

    r = monthly_rate(annual_rate_percent)
    if r == 0:
        return principal / term_months

    growth = _compound_growth(r, term_months)
    if math.isinf(growth):
        # Very long terms: the payment converges to interest-only
        return principal * r
    if growth - 1 <= 0:
        # Rate too small to register in double precision
        return principal / term_months

    return principal * (r * growth / (growth - 1))


def calculate_emi(terms: LoanTerms) -> AmortizationResult:
    """
    Forward calculation: payment, total repaid and total interest.

    Invariants:
    - total_payment == periodic_payment * term_months
    - total_interest == total_payment - principal (never negative)

    Returns AmortizationResult.zero() for degenerate terms.
    """
    payment = periodic_payment(terms.principal, terms.annual_rate_percent, terms.term_months)
    if payment <= 0:
        return AmortizationResult.zero()

    total_payment = payment * terms.term_months
    total_interest = max(total_payment - terms.principal, 0.0)

    if not is_finite(payment, total_payment, total_interest):
        return AmortizationResult.zero()

    return AmortizationResult(
        periodic_payment=payment,
        total_payment=total_payment,
        total_interest=total_interest,
    )


def max_principal_for_payment(payment: float, annual_rate_percent: float, term_months: int) -> float:
    """
    Inverse of periodic_payment: largest principal a payment budget can service.

    P = B * ((1+r)^N - 1) / (r * (1+r)^N), straight-line B * N at zero rate.
    """
    if not is_finite(payment, annual_rate_percent, term_months):
        return 0.0
    if payment <= 0 or term_months <= 0 or annual_rate_percent < 0:
        return 0.0

    r = monthly_rate(annual_rate_percent)
    if r == 0:
        return payment * term_months

    growth = _compound_growth(r, term_months)
    if math.isinf(growth):
        return payment / r
    if growth - 1 <= 0:
        return payment * term_months

    principal = payment * ((growth - 1) / (r * growth))
    return principal if is_finite(principal) else 0.0


def calculate_affordability(
    monthly_income: float,
    existing_monthly_obligations: float,
    annual_rate_percent: float,
    term_months: int,
    ceiling_ratio: float = DEFAULT_CEILING_RATIO,
) -> AffordabilityResult:
    """
    Maximum loan eligibility from income and existing EMIs.

    - available income = income - obligations, clamped at zero
    - affordable EMI = available income * ceiling ratio (FOIR)
    - max principal = inverse EMI formula on the affordable EMI
    """
    if not is_finite(monthly_income, existing_monthly_obligations, annual_rate_percent, term_months, ceiling_ratio):
        return AffordabilityResult.zero()
    if term_months <= 0 or annual_rate_percent < 0 or ceiling_ratio <= 0:
        return AffordabilityResult.zero()

    available_income = max(monthly_income - existing_monthly_obligations, 0.0)
    max_payment = available_income * ceiling_ratio
    if max_payment <= 0:
        return AffordabilityResult.zero()

    max_principal = max_principal_for_payment(max_payment, annual_rate_percent, term_months)

    return AffordabilityResult(
        max_principal=max_principal,
        max_affordable_payment=max_payment,
    )


def compare_rates(
    principal: float,
    term_months: int,
    first_rate_percent: float,
    second_rate_percent: float,
) -> RateComparison:
    """Price the same principal and term at two rates"""
    first = calculate_emi(LoanTerms(principal, first_rate_percent, term_months))
    second = calculate_emi(LoanTerms(principal, second_rate_percent, term_months))

    return RateComparison(
        principal=principal,
        term_months=term_months,
        first=first,
        second=second,
        total_payment_delta=second.total_payment - first.total_payment,
    )
