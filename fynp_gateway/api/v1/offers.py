"""POST /v1/offers/compare and /v1/loan-configuration - lender offer pricing"""

import time
import logging
from fastapi import APIRouter, Depends, HTTPException

from fynp_gateway.api.v1.schemas import (
    LoanConfigurationRequest,
    LoanConfigurationResponse,
    OfferQuoteSchema,
    OffersCompareRequest,
    OffersCompareResponse,
    display_amounts,
)
from fynp_gateway.api.dependencies import get_request_id, get_settings
from fynp_gateway.config import Settings
from fynp_gateway.domain.exceptions import InvalidRangeError, NoOffersError
from fynp_gateway.domain.models import LenderOffer, OfferQuote
from fynp_gateway.domain.offers import compare_offers, quote_offer
from fynp_gateway.infrastructure.observability.logging import log_calculation
from fynp_gateway.infrastructure.observability.metrics import record_calculation
from fynp_gateway.utils.currency import round_currency
from fynp_gateway.utils.sliders import snap_to_step

router = APIRouter()


def to_quote_schema(quote: OfferQuote) -> OfferQuoteSchema:
    rounded = quote.result.rounded()
    return OfferQuoteSchema(
        lender_name=quote.offer.lender_name,
        annual_rate_percent=quote.offer.annual_rate_percent,
        processing_fee=round_currency(quote.offer.processing_fee),
        periodic_payment=rounded.periodic_payment,
        total_payment=rounded.total_payment,
        total_interest=rounded.total_interest,
        total_cost=round_currency(quote.total_cost),
        best_rate=quote.best_rate,
    )


@router.post("/offers/compare", response_model=OffersCompareResponse)
def create_offer_comparison(
    request_body: OffersCompareRequest,
    request_id: str = Depends(get_request_id),
):
    """
    Side-by-side lender comparison for one amount and tenure.

    Quotes are ordered by total cost (repayment plus processing fee);
    the lowest-rate lender carries the best_rate badge.
    """
    start_time = time.time()

    try:
        offers = [
            LenderOffer(
                lender_name=o.lender_name,
                annual_rate_percent=o.annual_rate_percent,
                processing_fee=o.processing_fee,
            )
            for o in request_body.offers
        ]
        quotes = compare_offers(offers, request_body.principal, request_body.term_months)

        degenerate = all(q.result.is_zero for q in quotes)
        duration_ms = (time.time() - start_time) * 1000
        record_calculation("offers_compare", degenerate)
        log_calculation(request_id, "offers_compare", degenerate, duration_ms)

        return OffersCompareResponse(
            principal=request_body.principal,
            term_months=request_body.term_months,
            quotes=[to_quote_schema(q) for q in quotes],
        )

    except NoOffersError as e:
        logging.warning(f"Offer comparison rejected: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=422, detail=str(e))

    except Exception as e:
        logging.error(f"Unexpected error: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=500, detail="Internal server error")


@router.post("/loan-configuration", response_model=LoanConfigurationResponse)
def create_loan_configuration(
    request_body: LoanConfigurationRequest,
    request_id: str = Depends(get_request_id),
    app_settings: Settings = Depends(get_settings),
):
    """
    Price a chosen lender for raw slider positions.

    Flow:
    1. Snap the amount to the configured step and clamp it into bounds
    2. Round tenure to whole months within bounds
    3. Quote the offer, adding the processing fee (default when not sent)
    """
    start_time = time.time()

    try:
        loan_amount = snap_to_step(
            request_body.loan_amount,
            app_settings.loan_amount_min,
            app_settings.loan_amount_max,
            app_settings.loan_amount_step,
        )
        tenure_months = int(
            snap_to_step(
                request_body.tenure_months,
                app_settings.tenure_months_min,
                app_settings.tenure_months_max,
                1,
            )
        )
        processing_fee = (
            request_body.processing_fee
            if request_body.processing_fee is not None
            else app_settings.default_processing_fee
        )

        offer = LenderOffer(
            lender_name=request_body.lender_name,
            annual_rate_percent=request_body.annual_rate_percent,
            processing_fee=processing_fee,
        )
        quote = quote_offer(offer, loan_amount, tenure_months)
        rounded = quote.result.rounded()

        duration_ms = (time.time() - start_time) * 1000
        record_calculation("loan_configuration", quote.result.is_zero)
        log_calculation(request_id, "loan_configuration", quote.result.is_zero, duration_ms)

        return LoanConfigurationResponse(
            lender_name=offer.lender_name,
            loan_amount=round_currency(loan_amount),
            tenure_months=tenure_months,
            annual_rate_percent=offer.annual_rate_percent,
            processing_fee=round_currency(processing_fee),
            periodic_payment=rounded.periodic_payment,
            total_payment=rounded.total_payment,
            total_interest=rounded.total_interest,
            total_cost=round_currency(quote.total_cost),
            display=display_amounts(
                loan_amount=loan_amount,
                periodic_payment=quote.result.periodic_payment,
                total_cost=quote.total_cost,
            ),
        )

    except InvalidRangeError as e:
        logging.error(f"Slider configuration error: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=500, detail="Loan configuration bounds are invalid")

    except Exception as e:
        logging.error(f"Unexpected error: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=500, detail="Internal server error")
