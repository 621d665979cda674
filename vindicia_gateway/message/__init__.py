"""Request and response messages for every gateway operation."""
from .base import AbstractFetchRequest, AbstractRequest
from .catalog import CreatePlanRequest, CreateProductRequest, FetchPlanRequest, FetchProductRequest
from .customer import CreateCustomerRequest, FetchCustomerRequest
from .refund import RefundRequest
from .responses import CompletePayPalPurchaseResponse, PayPalPurchaseResponse, Response
from .subscription import (
    CancelSubscriptionRequest,
    CreateSubscriptionRequest,
    FetchSubscriptionInvoiceRequest,
    FetchSubscriptionRequest,
)
from .transaction import (
    AuthorizeRequest,
    CaptureRequest,
    CompletePayPalPurchaseRequest,
    FetchTransactionRequest,
    PayPalPurchaseRequest,
    PurchaseRequest,
    VoidRequest,
)

__all__ = [
    "AbstractFetchRequest",
    "AbstractRequest",
    "AuthorizeRequest",
    "CancelSubscriptionRequest",
    "CaptureRequest",
    "CompletePayPalPurchaseRequest",
    "CompletePayPalPurchaseResponse",
    "CreateCustomerRequest",
    "CreatePlanRequest",
    "CreateProductRequest",
    "CreateSubscriptionRequest",
    "FetchCustomerRequest",
    "FetchPlanRequest",
    "FetchProductRequest",
    "FetchSubscriptionInvoiceRequest",
    "FetchSubscriptionRequest",
    "FetchTransactionRequest",
    "PayPalPurchaseRequest",
    "PayPalPurchaseResponse",
    "PurchaseRequest",
    "RefundRequest",
    "Response",
    "VoidRequest",
]
