"""Domain-level exceptions.

All cart errors are expressed as subclasses of DomainException so the
CLI layer can catch them uniformly and display user-friendly messages.
"""

PAYMENT_FAILURE_MESSAGE = "Failed to process the payment. Please try again."


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """Caller input could not be turned into a domain value."""


class PaymentFailure(DomainException):
    """The simulated payment was declined.

    Raised only by ``Cart.checkout()``. Never retried internally; the
    caller decides whether to check out again.
    """

    def __init__(self, message: str = PAYMENT_FAILURE_MESSAGE) -> None:
        super().__init__(message)
