"""
Payment domain exceptions.
"""

from talardnad.domain.exceptions.base import ErrorKind, TalardnadException


class PaymentError(TalardnadException):
    """Base exception for payment errors."""

    kind = ErrorKind.INTERNAL

    def __init__(self, message: str, code: str = "PAYMENT_ERROR"):
        super().__init__(message, code=code)


class PaymentGatewayError(PaymentError):
    """Raised when the external payment gateway cannot complete a charge."""

    kind = ErrorKind.UPSTREAM

    def __init__(self, reason: str):
        super().__init__(f"Payment gateway error: {reason}", code="PAYMENT_GATEWAY_ERROR")
