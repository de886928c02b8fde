"""Errors raised by the payment service layer.

The HTTP layer renders every ``PaymentServiceError`` as a 400 response;
see ``error_handlers``.
"""


class PaymentServiceError(Exception):
    """Base exception for payment service errors."""
    pass


class PaymentNotFoundError(PaymentServiceError):
    """Raised when a payment cannot be found."""
    pass


class ValidationError(PaymentServiceError):
    """Raised when input validation fails."""
    pass


class InfrastructureError(PaymentServiceError):
    """Raised when the store or the Order service fails."""
    pass
