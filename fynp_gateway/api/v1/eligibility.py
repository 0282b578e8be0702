"""POST /v1/eligibility - maximum loan eligibility from income"""

import time
import logging
from fastapi import APIRouter, Depends, HTTPException

from fynp_gateway.api.v1.schemas import EligibilityRequest, EligibilityResponse, display_amounts
from fynp_gateway.api.dependencies import get_request_id, get_settings
from fynp_gateway.config import Settings
from fynp_gateway.domain.amortization import calculate_affordability
from fynp_gateway.infrastructure.observability.logging import log_calculation
from fynp_gateway.infrastructure.observability.metrics import record_calculation, record_eligibility

router = APIRouter()


@router.post("/eligibility", response_model=EligibilityResponse)
def create_eligibility(
    request_body: EligibilityRequest,
    request_id: str = Depends(get_request_id),
    app_settings: Settings = Depends(get_settings),
):
    """
    Largest loan the applicant can service.

    Flow:
    1. Free income = monthly income - existing EMIs (never below zero)
    2. Affordable EMI = free income * FOIR ceiling (request override or configured)
    3. Max loan = inverse EMI formula on the affordable EMI
    """
    start_time = time.time()
    ceiling_ratio = request_body.ceiling_ratio or app_settings.foir_ceiling_ratio

    try:
        result = calculate_affordability(
            monthly_income=request_body.monthly_income,
            existing_monthly_obligations=request_body.existing_monthly_obligations,
            annual_rate_percent=request_body.annual_rate_percent,
            term_months=request_body.term_months,
            ceiling_ratio=ceiling_ratio,
        )
        rounded = result.rounded()

        degenerate = rounded.max_principal == 0
        duration_ms = (time.time() - start_time) * 1000
        record_calculation("eligibility", degenerate)
        record_eligibility(result.max_principal)
        log_calculation(request_id, "eligibility", degenerate, duration_ms)

        return EligibilityResponse(
            max_principal=rounded.max_principal,
            max_affordable_payment=rounded.max_affordable_payment,
            ceiling_ratio=ceiling_ratio,
            display=display_amounts(
                max_principal=result.max_principal,
                max_affordable_payment=result.max_affordable_payment,
            ),
        )

    except Exception as e:
        logging.error(f"Unexpected error: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=500, detail="Internal server error")
