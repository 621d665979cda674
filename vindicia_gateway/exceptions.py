"""
Gateway exception hierarchy.

Validation errors (InvalidRequestError, InvalidItemError) are raised before
anything reaches the network. Transport errors are passed through to the
caller untouched; nothing here retries.
"""
from typing import Optional


class GatewayError(Exception):
    """Base exception for all gateway errors."""

    pass


class InvalidRequestError(GatewayError):
    """Raised when a required request parameter is missing or invalid."""

    pass


class InvalidCreditCardError(InvalidRequestError):
    """Raised when card details are present but unusable."""

    pass


class InvalidItemError(GatewayError):
    """Raised when an embedded value object fails its own validation."""

    pass


class InvalidResponseError(GatewayError):
    """Raised when a provider reply lacks structurally required data."""

    pass


class RequestSentError(GatewayError, RuntimeError):
    """Raised when a request is modified or re-sent after send()."""

    pass


class TransportError(GatewayError):
    """Base exception for failures talking to the provider."""

    def __init__(self, message: str, original_error: Optional[Exception] = None):
        """
        Initialize transport error.

        Args:
            message: Error message
            original_error: Underlying exception, if any
        """
        super().__init__(message)
        self.original_error = original_error


class ProviderFaultError(TransportError):
    """Raised when the provider answers with a SOAP fault."""

    def __init__(
        self,
        message: str,
        fault_code: Optional[str] = None,
        original_error: Optional[Exception] = None,
    ):
        super().__init__(message, original_error=original_error)
        self.fault_code = fault_code
