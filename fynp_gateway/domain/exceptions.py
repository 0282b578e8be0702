"""Domain-specific exceptions"""


class DomainException(Exception):
    """Base exception for domain layer"""

    pass


class NoOffersError(DomainException):
    """Offer comparison was requested without any lender offers"""

    pass


class InvalidRangeError(DomainException):
    """Slider bounds or step are misconfigured"""

    pass
