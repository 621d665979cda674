"""
Gateway facade.

Holds the transport and default parameters and hands out one request per
operation. Requests are single-use: create a fresh one for every call.

Example:
    gateway = Gateway(GatewaySettings(username="api_user", password="s3cret"))
    response = gateway.fetch_subscription({"subscriptionId": "sub-1"}).send()
"""
from typing import Any, Dict, Mapping, Optional, Type, TypeVar

import structlog

from vindicia_gateway.config import GatewaySettings, get_settings
from vindicia_gateway.message.base import AbstractRequest
from vindicia_gateway.message.catalog import (
    CreatePlanRequest,
    CreateProductRequest,
    FetchPlanRequest,
    FetchProductRequest,
)
from vindicia_gateway.message.customer import CreateCustomerRequest, FetchCustomerRequest
from vindicia_gateway.message.refund import RefundRequest
from vindicia_gateway.message.subscription import (
    CancelSubscriptionRequest,
    CreateSubscriptionRequest,
    FetchSubscriptionInvoiceRequest,
    FetchSubscriptionRequest,
)
from vindicia_gateway.message.transaction import (
    AuthorizeRequest,
    CaptureRequest,
    CompletePayPalPurchaseRequest,
    FetchTransactionRequest,
    PayPalPurchaseRequest,
    PurchaseRequest,
    VoidRequest,
)
from vindicia_gateway.transport.base import Transport
from vindicia_gateway.transport.soap import SoapTransport

logger = structlog.get_logger(__name__)

R = TypeVar("R", bound=AbstractRequest)

Parameters = Optional[Mapping[str, Any]]


class Gateway:
    """Credit card gateway."""

    name = "Vindicia"

    def __init__(
        self,
        settings: Optional[GatewaySettings] = None,
        transport: Optional[Transport] = None,
        default_parameters: Parameters = None,
    ):
        """
        Initialize gateway.

        Args:
            settings: Connection settings; loaded from the environment when
                omitted and no transport is given
            transport: Optional transport; a SoapTransport is built from
                settings otherwise
            default_parameters: Parameters applied to every request
        """
        if transport is None:
            settings = settings or get_settings()
            transport = SoapTransport(settings)
        self.settings = settings
        self.transport = transport
        self.default_parameters: Dict[str, Any] = dict(default_parameters or {})

        logger.info(
            "gateway_initialized",
            gateway=self.name,
            transport=type(transport).__name__,
        )

    def create_request(self, request_class: Type[R], parameters: Parameters = None) -> R:
        merged = dict(self.default_parameters)
        merged.update(parameters or {})
        return request_class(self.transport, merged)

    def close(self) -> None:
        self.transport.close()

    def __enter__(self) -> "Gateway":
        return self

    def __exit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        self.close()

    # Transactions

    def authorize(self, parameters: Parameters = None) -> AuthorizeRequest:
        return self.create_request(AuthorizeRequest, parameters)

    def capture(self, parameters: Parameters = None) -> CaptureRequest:
        return self.create_request(CaptureRequest, parameters)

    def purchase(self, parameters: Parameters = None) -> PurchaseRequest:
        return self.create_request(PurchaseRequest, parameters)

    def void(self, parameters: Parameters = None) -> VoidRequest:
        return self.create_request(VoidRequest, parameters)

    def refund(self, parameters: Parameters = None) -> RefundRequest:
        return self.create_request(RefundRequest, parameters)

    def fetch_transaction(self, parameters: Parameters = None) -> FetchTransactionRequest:
        return self.create_request(FetchTransactionRequest, parameters)

    # Customers

    def create_customer(self, parameters: Parameters = None) -> CreateCustomerRequest:
        return self.create_request(CreateCustomerRequest, parameters)

    def update_customer(self, parameters: Parameters = None) -> CreateCustomerRequest:
        return self.create_request(CreateCustomerRequest, parameters)

    def fetch_customer(self, parameters: Parameters = None) -> FetchCustomerRequest:
        return self.create_request(FetchCustomerRequest, parameters)

    # Catalog

    def create_plan(self, parameters: Parameters = None) -> CreatePlanRequest:
        return self.create_request(CreatePlanRequest, parameters)

    def update_plan(self, parameters: Parameters = None) -> CreatePlanRequest:
        return self.create_request(CreatePlanRequest, parameters)

    def fetch_plan(self, parameters: Parameters = None) -> FetchPlanRequest:
        return self.create_request(FetchPlanRequest, parameters)

    def create_product(self, parameters: Parameters = None) -> CreateProductRequest:
        return self.create_request(CreateProductRequest, parameters)

    def update_product(self, parameters: Parameters = None) -> CreateProductRequest:
        return self.create_request(CreateProductRequest, parameters)

    def fetch_product(self, parameters: Parameters = None) -> FetchProductRequest:
        return self.create_request(FetchProductRequest, parameters)

    # Subscriptions

    def create_subscription(self, parameters: Parameters = None) -> CreateSubscriptionRequest:
        return self.create_request(CreateSubscriptionRequest, parameters)

    def update_subscription(self, parameters: Parameters = None) -> CreateSubscriptionRequest:
        return self.create_request(CreateSubscriptionRequest, parameters)

    def fetch_subscription(self, parameters: Parameters = None) -> FetchSubscriptionRequest:
        return self.create_request(FetchSubscriptionRequest, parameters)

    def cancel_subscription(self, parameters: Parameters = None) -> CancelSubscriptionRequest:
        return self.create_request(CancelSubscriptionRequest, parameters)

    def fetch_subscription_invoice(
        self, parameters: Parameters = None
    ) -> FetchSubscriptionInvoiceRequest:
        return self.create_request(FetchSubscriptionInvoiceRequest, parameters)


class PayPalGateway(Gateway):
    """
    PayPal gateway.

    Purchases redirect the customer to PayPal; complete_purchase finishes
    them once the customer is back on your site.
    """

    name = "Vindicia PayPal"

    def purchase(self, parameters: Parameters = None) -> PayPalPurchaseRequest:
        return self.create_request(PayPalPurchaseRequest, parameters)

    def complete_purchase(self, parameters: Parameters = None) -> CompletePayPalPurchaseRequest:
        return self.create_request(CompletePayPalPurchaseRequest, parameters)
