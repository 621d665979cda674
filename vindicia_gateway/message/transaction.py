"""
One-off payments: authorize, capture, purchase, void and lookup.

Example:
    gateway = Gateway(settings)
    response = gateway.purchase({
        "amount": "9.99",
        "currency": "USD",
        "customerId": "cust-123",
        "card": {"number": "4111111111111111", "expiryMonth": 12, "expiryYear": 2030},
    }).send()

    if response.is_successful():
        print(response.get_transaction_reference())
"""
from decimal import Decimal
from typing import Any, Dict, List, Optional

from vindicia_gateway.currency import to_decimal
from vindicia_gateway.exceptions import InvalidRequestError
from vindicia_gateway.message.base import AbstractFetchRequest, AbstractRequest
from vindicia_gateway.message.payment_methods import (
    PAYMENT_METHOD_CREDIT_CARD,
    PAYMENT_METHOD_PAYPAL,
    build_payment_source,
)
from vindicia_gateway.message.responses import (
    CompletePayPalPurchaseResponse,
    PayPalPurchaseResponse,
)

DEFAULT_ITEM_SKU = "1"


class AuthorizeRequest(AbstractRequest):
    """
    Authorize an amount on the customer's payment method.

    The customer must already exist on the provider. Without items, a single
    line for the whole amount is sent.
    """

    object_name = "Transaction"
    action = "auth"
    required_parameters = ("amount", "currency")
    alternative_parameters = (("customerId", "customerReference"),)
    payment_method_type = PAYMENT_METHOD_CREDIT_CARD

    def validate_request(self) -> None:
        super().validate_request()
        items = self.get_items()
        if items:
            total = sum(
                (to_decimal(item.get_price()) * item.get_quantity() for item in items),
                Decimal(0),
            )
            if total != to_decimal(self.get_amount()):
                raise InvalidRequestError(
                    "Sum of item prices must equal the transaction amount."
                )

    def serialize_items(self) -> List[Dict[str, Any]]:
        items = self.get_items()
        if not items:
            return [
                {
                    "sku": DEFAULT_ITEM_SKU,
                    "name": self.get_description() or "Purchase",
                    "price": self.get_amount(),
                    "quantity": 1,
                }
            ]
        return [item.serialize() for item in items]

    def build_data(self) -> Dict[str, Any]:
        transaction = {
            "merchantTransactionId": self.get_transaction_id(),
            "account": self.account_reference(),
            "amount": self.get_amount(),
            "currency": self.get_currency(),
            "sourcePaymentMethod": build_payment_source(self, self.payment_method_type),
            "transactionItems": self.serialize_items(),
            "sourceIp": self.get_client_ip(),
            "billingStatementIdentifier": self.get_statement_descriptor(),
            "nameValues": self.serialize_attributes(),
        }
        return {
            "transaction": transaction,
            "sendEmailNotification": False,
            "ignoreAvsPolicy": False,
            "ignoreCvnPolicy": False,
            "campaignCode": None,
            "dryrun": False,
        }


class PurchaseRequest(AuthorizeRequest):
    """Authorize and capture in one call."""

    action = "authCapture"


class PayPalPurchaseRequest(PurchaseRequest):
    """
    Begin a PayPal purchase.

    Takes the same parameters as a purchase, plus returnUrl and cancelUrl
    for sending the customer back from PayPal. A card may be given for its
    name and address; a card number is ignored. The response carries the
    redirect URL; finish with CompletePayPalPurchaseRequest.
    """

    required_parameters = PurchaseRequest.required_parameters + ("returnUrl", "cancelUrl")
    payment_method_type = PAYMENT_METHOD_PAYPAL
    response_class = PayPalPurchaseResponse
    validate_card = False


class CompletePayPalPurchaseRequest(AbstractRequest):
    """
    Finish a PayPal purchase after the customer returns from PayPal.

    Parameters:
        payPalTransactionReference: the vindicia_vid from the return URL
        success: False if the customer came back through cancelUrl
    """

    object_name = "Transaction"
    action = "finalizePayPalAuth"
    required_parameters = ("payPalTransactionReference", "success")
    response_class = CompletePayPalPurchaseResponse

    def get_pay_pal_transaction_reference(self) -> Optional[str]:
        return self.get_parameter("payPalTransactionReference")

    def set_pay_pal_transaction_reference(self, value: Optional[str]) -> "CompletePayPalPurchaseRequest":
        return self.set_parameter("payPalTransactionReference", value)

    def get_success(self) -> Optional[bool]:
        return self.get_parameter("success")

    def set_success(self, value: Optional[bool]) -> "CompletePayPalPurchaseRequest":
        return self.set_parameter("success", value)

    def build_data(self) -> Dict[str, Any]:
        return {
            "payPalTransactionId": self.get_pay_pal_transaction_reference(),
            "success": bool(self.get_success()),
        }


class CaptureRequest(AbstractRequest):
    object_name = "Transaction"
    action = "capture"
    alternative_parameters = (("transactionId", "transactionReference"),)

    def build_data(self) -> Dict[str, Any]:
        return {"transactions": [self.transaction_reference()]}


class VoidRequest(AbstractRequest):
    """Cancel an authorized but not yet captured transaction."""

    object_name = "Transaction"
    action = "cancel"
    alternative_parameters = (("transactionId", "transactionReference"),)

    def build_data(self) -> Dict[str, Any]:
        return {"transactions": [self.transaction_reference()]}


class FetchTransactionRequest(AbstractFetchRequest):
    object_name = "Transaction"
    id_parameter = "transactionId"
    reference_parameter = "transactionReference"
    fetch_by_id_action = "fetchByMerchantTransactionId"
    id_field = "merchantTransactionId"
