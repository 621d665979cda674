"""
Payment source builders.

Requests that charge or store a payment method pick one of these by name
through their payment_method_type attribute, so a PayPal purchase differs
from a card purchase by configuration only.
"""
from typing import TYPE_CHECKING, Any, Callable, Dict, Optional

if TYPE_CHECKING:
    from vindicia_gateway.message.base import AbstractRequest

PAYMENT_METHOD_CREDIT_CARD = "CreditCard"
PAYMENT_METHOD_PAYPAL = "PayPal"


def credit_card_source(request: "AbstractRequest") -> Optional[Dict[str, Any]]:
    """
    Card payment method, or None to use the account's default method.

    A card without a number only contributes the holder's name and address.
    """
    card = request.get_card()
    payment_method_id = request.get_payment_method_id()
    payment_method_reference = request.get_payment_method_reference()
    if card is None and not payment_method_id and not payment_method_reference:
        return None

    source: Dict[str, Any] = {
        "merchantPaymentMethodId": payment_method_id,
        "VID": payment_method_reference,
    }
    if card is not None:
        source.update(card.serialize())
        if card.get_number():
            source["type"] = PAYMENT_METHOD_CREDIT_CARD
    return source


def paypal_source(request: "AbstractRequest") -> Dict[str, Any]:
    """PayPal payment method; any card number given is ignored."""
    source: Dict[str, Any] = {
        "merchantPaymentMethodId": request.get_payment_method_id(),
        "VID": request.get_payment_method_reference(),
        "type": PAYMENT_METHOD_PAYPAL,
        "paypal": {
            "returnUrl": request.get_return_url(),
            "cancelUrl": request.get_cancel_url(),
        },
    }
    card = request.get_card()
    if card is not None:
        source["accountHolderName"] = card.get_name()
        source["billingAddress"] = card.serialize_billing_address()
    return source


PAYMENT_SOURCES: Dict[str, Callable[["AbstractRequest"], Optional[Dict[str, Any]]]] = {
    PAYMENT_METHOD_CREDIT_CARD: credit_card_source,
    PAYMENT_METHOD_PAYPAL: paypal_source,
}


def build_payment_source(request: "AbstractRequest", payment_method_type: str) -> Optional[Dict[str, Any]]:
    try:
        builder = PAYMENT_SOURCES[payment_method_type]
    except KeyError:
        raise ValueError(f"Unknown payment method type: {payment_method_type}") from None
    return builder(request)
