"""
Vindicia billing gateway.

Maps purchases, refunds, customers, plans, products, subscriptions and
invoices onto the provider's SOAP API behind one request/response contract:
set parameters on a request, send() it, then read the Response.
"""
from .card import CreditCard
from .catalog import Attribute, Plan, Price, Product
from .config import GatewaySettings, get_settings
from .customer import Customer
from .exceptions import (
    GatewayError,
    InvalidCreditCardError,
    InvalidItemError,
    InvalidRequestError,
    InvalidResponseError,
    ProviderFaultError,
    RequestSentError,
    TransportError,
)
from .gateway import Gateway, PayPalGateway
from .items import Item, RefundItem
from .parameters import ParameterBag

__version__ = "1.0.0"

__all__ = [
    "Attribute",
    "CreditCard",
    "Customer",
    "Gateway",
    "GatewayError",
    "GatewaySettings",
    "InvalidCreditCardError",
    "InvalidItemError",
    "InvalidRequestError",
    "InvalidResponseError",
    "Item",
    "ParameterBag",
    "PayPalGateway",
    "Plan",
    "Price",
    "Product",
    "ProviderFaultError",
    "RefundItem",
    "RequestSentError",
    "TransportError",
    "get_settings",
]
