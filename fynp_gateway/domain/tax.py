"""Home loan tax-saving estimate (first-year approximation)"""

from fynp_gateway.domain.models import TaxSavings
from fynp_gateway.utils.numbers import is_finite

# Flat assumptions behind the estimate; not a full amortization schedule
ASSUMED_TENURE_YEARS = 20
TAX_BRACKET = 0.30

# Section 24(b): interest on a self-occupied home loan
INTEREST_DEDUCTION_CAP = 200_000
# Section 80C: principal repayment
PRINCIPAL_DEDUCTION_CAP = 150_000


def estimate_tax_savings(loan_amount: float, annual_rate_percent: float) -> TaxSavings:
    """
    Estimate annual tax saved on home loan interest and principal.

    - annual interest ~ loan * rate / 100 (first year, no schedule)
    - annual principal ~ loan / ASSUMED_TENURE_YEARS (straight-line)
    - each capped at its statutory limit, then taxed at TAX_BRACKET
    """
    if not is_finite(loan_amount) or loan_amount <= 0:
        return TaxSavings.zero()

    annual_interest = 0.0
    if is_finite(annual_rate_percent) and annual_rate_percent > 0:
        annual_interest = float(loan_amount) * annual_rate_percent / 100
    if not is_finite(annual_interest):
        annual_interest = 0.0

    eligible_interest = min(annual_interest, INTEREST_DEDUCTION_CAP)
    interest_saving = eligible_interest * TAX_BRACKET

    annual_principal = loan_amount / ASSUMED_TENURE_YEARS
    eligible_principal = min(annual_principal, PRINCIPAL_DEDUCTION_CAP)
    principal_saving = eligible_principal * TAX_BRACKET

    return TaxSavings(
        eligible_interest=eligible_interest,
        eligible_principal=eligible_principal,
        interest_saving=interest_saving,
        principal_saving=principal_saving,
        total_saving=interest_saving + principal_saving,
    )
