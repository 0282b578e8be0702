"""Domain models - pure Python dataclasses for loan calculations"""

from dataclasses import dataclass, replace

from fynp_gateway.utils.currency import round_currency


@dataclass(frozen=True)
class LoanTerms:
    """Inputs for a single amortization calculation"""

    principal: float
    annual_rate_percent: float
    term_months: int


@dataclass(frozen=True)
class AmortizationResult:
    """Fixed-payment schedule summary for a fully amortizing loan"""

    periodic_payment: float
    total_payment: float
    total_interest: float

    @classmethod
    def zero(cls) -> "AmortizationResult":
        return cls(periodic_payment=0.0, total_payment=0.0, total_interest=0.0)

    @property
    def is_zero(self) -> bool:
        return self.periodic_payment == 0 and self.total_payment == 0 and self.total_interest == 0

    def rounded(self) -> "AmortizationResult":
        """Copy with every amount rounded to a whole currency unit"""
        return replace(
            self,
            periodic_payment=round_currency(self.periodic_payment),
            total_payment=round_currency(self.total_payment),
            total_interest=round_currency(self.total_interest),
        )


@dataclass(frozen=True)
class AffordabilityResult:
    """Largest loan serviceable within the obligation-to-income ceiling"""

    max_principal: float
    max_affordable_payment: float

    @classmethod
    def zero(cls) -> "AffordabilityResult":
        return cls(max_principal=0.0, max_affordable_payment=0.0)

    def rounded(self) -> "AffordabilityResult":
        return replace(
            self,
            max_principal=round_currency(self.max_principal),
            max_affordable_payment=round_currency(self.max_affordable_payment),
        )


@dataclass(frozen=True)
class RateComparison:
    """Same principal and term priced at two different rates"""

    principal: float
    term_months: int
    first: AmortizationResult
    second: AmortizationResult
    total_payment_delta: float  # second minus first


@dataclass(frozen=True)
class TaxSavings:
    """Approximate annual tax benefit of a home loan"""

    eligible_interest: float
    eligible_principal: float
    interest_saving: float
    principal_saving: float
    total_saving: float

    @classmethod
    def zero(cls) -> "TaxSavings":
        return cls(0.0, 0.0, 0.0, 0.0, 0.0)

    def rounded(self) -> "TaxSavings":
        # Total is rounded from the unrounded parts, not summed after rounding
        return replace(
            self,
            eligible_interest=round_currency(self.eligible_interest),
            eligible_principal=round_currency(self.eligible_principal),
            interest_saving=round_currency(self.interest_saving),
            principal_saving=round_currency(self.principal_saving),
            total_saving=round_currency(self.total_saving),
        )


@dataclass(frozen=True)
class LenderOffer:
    """Rate and fee quoted by a single lender"""

    lender_name: str
    annual_rate_percent: float
    processing_fee: float = 0.0


@dataclass(frozen=True)
class OfferQuote:
    """Lender offer priced for a requested amount and tenure"""

    offer: LenderOffer
    result: AmortizationResult
    total_cost: float  # total payment plus processing fee
    best_rate: bool = False
