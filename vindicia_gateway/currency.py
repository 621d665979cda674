"""Currency precision and amount formatting."""
from decimal import Decimal, InvalidOperation
from typing import Any, Optional

from vindicia_gateway.exceptions import InvalidRequestError

DEFAULT_DECIMAL_PLACES = 2

# ISO 4217 minor units for currencies that don't use two decimals
_DECIMAL_PLACES = {
    "BHD": 3,
    "BIF": 0,
    "CLP": 0,
    "DJF": 0,
    "GNF": 0,
    "IQD": 3,
    "ISK": 0,
    "JOD": 3,
    "JPY": 0,
    "KMF": 0,
    "KRW": 0,
    "KWD": 3,
    "LYD": 3,
    "OMR": 3,
    "PYG": 0,
    "RWF": 0,
    "TND": 3,
    "UGX": 0,
    "VND": 0,
    "VUV": 0,
    "XAF": 0,
    "XOF": 0,
    "XPF": 0,
}


def decimal_places(currency: Optional[str]) -> int:
    if not currency:
        return DEFAULT_DECIMAL_PLACES
    return _DECIMAL_PLACES.get(currency.upper(), DEFAULT_DECIMAL_PLACES)


def to_decimal(value: Any) -> Decimal:
    """
    Parse a monetary value.

    Floats go through str() so that 9.99 stays 9.99 rather than its binary
    approximation.

    Raises:
        InvalidRequestError: If the value is not a finite number
    """
    if isinstance(value, bool):
        raise InvalidRequestError("Please specify amount as a string or number.")
    try:
        amount = Decimal(str(value)) if isinstance(value, float) else Decimal(value)
    except (InvalidOperation, TypeError, ValueError):
        raise InvalidRequestError("Please specify amount as a string or number.") from None
    if not amount.is_finite():
        raise InvalidRequestError("Please specify amount as a string or number.")
    return amount


def format_amount(value: Any, currency: Optional[str], allow_zero: bool = False) -> str:
    """
    Validate an amount and render it with the currency's precision.

    Examples:
        format_amount("9.9", "USD") -> "9.90"
        format_amount(500, "JPY") -> "500"

    Raises:
        InvalidRequestError: On negative, zero (unless allowed) or
            over-precise amounts
    """
    amount = to_decimal(value)
    places = decimal_places(currency)

    if amount < 0:
        raise InvalidRequestError("A negative amount is not allowed.")
    if amount == 0 and not allow_zero:
        raise InvalidRequestError("A zero amount is not allowed.")

    quantum = Decimal(1).scaleb(-places)
    if amount != amount.quantize(quantum):
        raise InvalidRequestError("Amount precision is too high for currency.")

    return str(amount.quantize(quantum))
