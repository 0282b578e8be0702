"""Pydantic schemas for API request/response validation"""

from typing import Dict, List, Optional
from pydantic import BaseModel, ConfigDict, Field

from fynp_gateway.utils.currency import format_compact, format_inr

# Upper bounds keep request values inside float range for the engine
MAX_AMOUNT = 1_000_000_000_000
MAX_RATE_PERCENT = 100
MAX_TERM_MONTHS = 1200


class StrictModel(BaseModel):
    """Request model base; NaN and Infinity are rejected"""

    model_config = ConfigDict(allow_inf_nan=False)


class EMIRequest(StrictModel):
    """Request body for POST /v1/emi"""

    principal: float = Field(..., ge=0, le=MAX_AMOUNT, description="Loan amount")
    annual_rate_percent: float = Field(..., ge=0, le=MAX_RATE_PERCENT, description="Nominal annual interest rate, in percent")
    term_months: int = Field(..., ge=0, le=MAX_TERM_MONTHS, description="Repayment tenure in months")


class EMIResponse(BaseModel):
    """Rounded amortization summary"""

    periodic_payment: int
    total_payment: int
    total_interest: int
    display: Dict[str, str] = {}


class EMICompareRequest(StrictModel):
    """Request body for POST /v1/emi/compare"""

    principal: float = Field(..., ge=0, le=MAX_AMOUNT)
    term_months: int = Field(..., ge=0, le=MAX_TERM_MONTHS)
    first_rate_percent: float = Field(..., ge=0, le=MAX_RATE_PERCENT)
    second_rate_percent: float = Field(..., ge=0, le=MAX_RATE_PERCENT)


class EMICompareResponse(BaseModel):
    """Response for POST /v1/emi/compare"""

    first: EMIResponse
    second: EMIResponse
    total_payment_delta: int  # second minus first


class EligibilityRequest(StrictModel):
    """Request body for POST /v1/eligibility"""

    monthly_income: float = Field(..., ge=0, le=MAX_AMOUNT)
    existing_monthly_obligations: float = Field(0, ge=0, le=MAX_AMOUNT, description="Current EMIs paid per month")
    annual_rate_percent: float = Field(..., ge=0, le=MAX_RATE_PERCENT)
    term_months: int = Field(..., ge=0, le=MAX_TERM_MONTHS)
    ceiling_ratio: Optional[float] = Field(None, gt=0, le=1, description="FOIR override")


class EligibilityResponse(BaseModel):
    """Response for POST /v1/eligibility"""

    max_principal: int
    max_affordable_payment: int
    ceiling_ratio: float
    display: Dict[str, str] = {}


class TaxSavingsRequest(StrictModel):
    """Request body for POST /v1/tax-savings"""

    loan_amount: float = Field(..., ge=0, le=MAX_AMOUNT)
    annual_rate_percent: float = Field(..., ge=0, le=MAX_RATE_PERCENT)


class TaxSavingsResponse(BaseModel):
    """Response for POST /v1/tax-savings"""

    eligible_interest: int
    eligible_principal: int
    interest_saving: int
    principal_saving: int
    total_saving: int
    assumed_tenure_years: int
    tax_bracket: float
    display: Dict[str, str] = {}


class LenderOfferSchema(StrictModel):
    """Single lender's rate and fee"""

    lender_name: str = Field(..., min_length=1)
    annual_rate_percent: float = Field(..., ge=0, le=MAX_RATE_PERCENT)
    processing_fee: float = Field(0, ge=0, le=MAX_AMOUNT)


class OffersCompareRequest(StrictModel):
    """Request body for POST /v1/offers/compare"""

    principal: float = Field(..., ge=0, le=MAX_AMOUNT)
    term_months: int = Field(..., ge=0, le=MAX_TERM_MONTHS)
    offers: List[LenderOfferSchema]


class OfferQuoteSchema(BaseModel):
    """Priced lender offer"""

    lender_name: str
    annual_rate_percent: float
    processing_fee: int
    periodic_payment: int
    total_payment: int
    total_interest: int
    total_cost: int
    best_rate: bool


class OffersCompareResponse(BaseModel):
    """Response for POST /v1/offers/compare, cheapest first"""

    principal: float
    term_months: int
    quotes: List[OfferQuoteSchema]


class LoanConfigurationRequest(StrictModel):
    """Request body for POST /v1/loan-configuration with raw slider values"""

    lender_name: str = Field(..., min_length=1)
    annual_rate_percent: float = Field(..., ge=0, le=MAX_RATE_PERCENT)
    loan_amount: float = Field(..., ge=0, le=MAX_AMOUNT)
    tenure_months: float = Field(..., ge=0, le=MAX_TERM_MONTHS)
    processing_fee: Optional[float] = Field(None, ge=0, le=MAX_AMOUNT)


class LoanConfigurationResponse(BaseModel):
    """Snapped slider values and the resulting quote"""

    lender_name: str
    loan_amount: int
    tenure_months: int
    annual_rate_percent: float
    processing_fee: int
    periodic_payment: int
    total_payment: int
    total_interest: int
    total_cost: int
    display: Dict[str, str] = {}


def display_amounts(**amounts: float) -> Dict[str, str]:
    """Formatted rupee strings keyed like the raw fields, plus compact forms"""
    display = {name: format_inr(value) for name, value in amounts.items()}
    display.update({f"{name}_compact": format_compact(value) for name, value in amounts.items()})
    return display
