"""POST /v1/emi and /v1/emi/compare - EMI calculator endpoints"""

import time
import logging
from fastapi import APIRouter, Depends, HTTPException

from fynp_gateway.api.v1.schemas import (
    EMICompareRequest,
    EMICompareResponse,
    EMIRequest,
    EMIResponse,
    display_amounts,
)
from fynp_gateway.api.dependencies import get_request_id
from fynp_gateway.domain.amortization import calculate_emi, compare_rates
from fynp_gateway.domain.models import AmortizationResult, LoanTerms
from fynp_gateway.infrastructure.observability.logging import log_calculation
from fynp_gateway.infrastructure.observability.metrics import record_calculation
from fynp_gateway.utils.currency import round_currency

router = APIRouter()


def to_emi_response(result: AmortizationResult) -> EMIResponse:
    rounded = result.rounded()
    return EMIResponse(
        periodic_payment=rounded.periodic_payment,
        total_payment=rounded.total_payment,
        total_interest=rounded.total_interest,
        display=display_amounts(
            periodic_payment=result.periodic_payment,
            total_payment=result.total_payment,
            total_interest=result.total_interest,
        ),
    )


@router.post("/emi", response_model=EMIResponse)
def create_emi(
    request_body: EMIRequest,
    request_id: str = Depends(get_request_id),
):
    """
    Monthly EMI, total interest and total payable for a loan.

    Degenerate input (zero principal or tenure) returns an all-zero result.
    """
    start_time = time.time()

    try:
        result = calculate_emi(
            LoanTerms(
                principal=request_body.principal,
                annual_rate_percent=request_body.annual_rate_percent,
                term_months=request_body.term_months,
            )
        )

        duration_ms = (time.time() - start_time) * 1000
        record_calculation("emi", result.is_zero)
        log_calculation(request_id, "emi", result.is_zero, duration_ms)

        return to_emi_response(result)

    except Exception as e:
        logging.error(f"Unexpected error: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=500, detail="Internal server error")


@router.post("/emi/compare", response_model=EMICompareResponse)
def create_emi_comparison(
    request_body: EMICompareRequest,
    request_id: str = Depends(get_request_id),
):
    """Same principal and tenure priced at two interest rates"""
    start_time = time.time()

    try:
        comparison = compare_rates(
            principal=request_body.principal,
            term_months=request_body.term_months,
            first_rate_percent=request_body.first_rate_percent,
            second_rate_percent=request_body.second_rate_percent,
        )

        degenerate = comparison.first.is_zero and comparison.second.is_zero
        duration_ms = (time.time() - start_time) * 1000
        record_calculation("emi_compare", degenerate)
        log_calculation(request_id, "emi_compare", degenerate, duration_ms)

        return EMICompareResponse(
            first=to_emi_response(comparison.first),
            second=to_emi_response(comparison.second),
            total_payment_delta=round_currency(comparison.total_payment_delta),
        )

    except Exception as e:
        logging.error(f"Unexpected error: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=500, detail="Internal server error")
