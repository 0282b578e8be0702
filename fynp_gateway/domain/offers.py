"""Lender offer quoting for the comparison and configuration flows"""

from typing import List, Sequence

from fynp_gateway.domain.amortization import calculate_emi
from fynp_gateway.domain.exceptions import NoOffersError
from fynp_gateway.domain.models import LenderOffer, LoanTerms, OfferQuote


def quote_offer(offer: LenderOffer, principal: float, term_months: int, best_rate: bool = False) -> OfferQuote:
    """Price one offer; total cost adds the one-time processing fee to total repayment"""
    result = calculate_emi(LoanTerms(principal, offer.annual_rate_percent, term_months))
    total_cost = result.total_payment + offer.processing_fee if not result.is_zero else 0.0

    return OfferQuote(
        offer=offer,
        result=result,
        total_cost=total_cost,
        best_rate=best_rate,
    )


def compare_offers(offers: Sequence[LenderOffer], principal: float, term_months: int) -> List[OfferQuote]:
    """
    Quote every offer for the same amount and tenure, cheapest first.

    Ordering: total cost, then rate, then lender name.
    Every offer sharing the lowest rate is flagged best_rate.

    Raises:
        NoOffersError: If no offers were supplied
    """
    if not offers:
        raise NoOffersError("At least one lender offer is required for comparison")

    lowest_rate = min(o.annual_rate_percent for o in offers)
    quotes = [
        quote_offer(o, principal, term_months, best_rate=o.annual_rate_percent == lowest_rate)
        for o in offers
    ]

    return sorted(
        quotes,
        key=lambda q: (q.total_cost, q.offer.annual_rate_percent, q.offer.lender_name),
    )
