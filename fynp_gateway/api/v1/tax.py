"""POST /v1/tax-savings - home loan tax saver"""

import time
import logging
from fastapi import APIRouter, Depends, HTTPException

from fynp_gateway.api.v1.schemas import TaxSavingsRequest, TaxSavingsResponse, display_amounts
from fynp_gateway.api.dependencies import get_request_id
from fynp_gateway.domain.tax import ASSUMED_TENURE_YEARS, TAX_BRACKET, estimate_tax_savings
from fynp_gateway.infrastructure.observability.logging import log_calculation
from fynp_gateway.infrastructure.observability.metrics import record_calculation

router = APIRouter()


@router.post("/tax-savings", response_model=TaxSavingsResponse)
def create_tax_savings(
    request_body: TaxSavingsRequest,
    request_id: str = Depends(get_request_id),
):
    """Approximate annual tax saved under Sections 24(b) and 80C"""
    start_time = time.time()

    try:
        savings = estimate_tax_savings(request_body.loan_amount, request_body.annual_rate_percent)
        rounded = savings.rounded()

        degenerate = rounded.total_saving == 0
        duration_ms = (time.time() - start_time) * 1000
        record_calculation("tax_savings", degenerate)
        log_calculation(request_id, "tax_savings", degenerate, duration_ms)

        return TaxSavingsResponse(
            eligible_interest=rounded.eligible_interest,
            eligible_principal=rounded.eligible_principal,
            interest_saving=rounded.interest_saving,
            principal_saving=rounded.principal_saving,
            total_saving=rounded.total_saving,
            assumed_tenure_years=ASSUMED_TENURE_YEARS,
            tax_bracket=TAX_BRACKET,
            display=display_amounts(
                interest_saving=savings.interest_saving,
                principal_saving=savings.principal_saving,
                total_saving=savings.total_saving,
            ),
        )

    except Exception as e:
        logging.error(f"Unexpected error: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=500, detail="Internal server error")
