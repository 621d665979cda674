"""
Responses wrapping raw provider replies.

A reply is the nested dict the transport hands back. Every reply carries a
"return" block with the provider's return code; accessors read the
operation-specific objects around it and answer None for anything absent.
"""
from typing import TYPE_CHECKING, Any, Dict, List, Mapping, Optional

from vindicia_gateway.exceptions import InvalidResponseError

if TYPE_CHECKING:
    from vindicia_gateway.message.base import AbstractRequest

SUCCESS_CODE = 200


def as_list(value: Any) -> List[Any]:
    """Normalize a field that may hold nothing, one value, or a list."""
    if value is None:
        return []
    if isinstance(value, list):
        return value
    return [value]


def dig(data: Any, *path: Any) -> Any:
    """
    Walk nested dicts/lists, returning None as soon as a step is missing.

    Integer steps index into lists; a lone dict counts as a one-element list
    since repeated XML elements only become lists when there is more than one.
    """
    current = data
    for step in path:
        if current is None:
            return None
        if isinstance(step, int):
            items = as_list(current)
            current = items[step] if -len(items) <= step < len(items) else None
        elif isinstance(current, Mapping):
            current = current.get(step)
        else:
            return None
    return current


class Response:
    """Uniform view over a provider reply."""

    def __init__(self, request: "AbstractRequest", data: Mapping[str, Any]):
        if not isinstance(data, Mapping) or not isinstance(data.get("return"), Mapping):
            raise InvalidResponseError("Response format is invalid: no return block.")
        self.request = request
        self.data = data

    def get_request(self) -> "AbstractRequest":
        return self.request

    def get_data(self) -> Mapping[str, Any]:
        return self.data

    def get_code(self) -> Optional[int]:
        code = dig(self.data, "return", "returnCode")
        try:
            return int(code)
        except (TypeError, ValueError):
            return None

    def get_message(self) -> Optional[str]:
        return dig(self.data, "return", "returnString")

    def get_soap_id(self) -> Optional[str]:
        return dig(self.data, "return", "soapId")

    def is_successful(self) -> bool:
        return self.get_code() == SUCCESS_CODE

    def is_redirect(self) -> bool:
        return False

    def is_cancelled(self) -> bool:
        return False

    # Transactions

    def get_transaction(self) -> Optional[Dict[str, Any]]:
        return self.data.get("transaction")

    def get_transaction_id(self) -> Optional[str]:
        return dig(self.data, "transaction", "merchantTransactionId")

    def get_transaction_reference(self) -> Optional[str]:
        return dig(self.data, "transaction", "VID")

    def get_transaction_status(self) -> Optional[str]:
        return dig(self.data, "transaction", "statusLog", 0, "status")

    # Customers

    def _account(self) -> Optional[Dict[str, Any]]:
        return (
            self.data.get("account")
            or dig(self.data, "transaction", "account")
            or dig(self.data, "autobill", "account")
        )

    def get_customer(self) -> Optional[Dict[str, Any]]:
        return self.data.get("account")

    def get_customer_id(self) -> Optional[str]:
        return dig(self._account(), "merchantAccountId")

    def get_customer_reference(self) -> Optional[str]:
        return dig(self._account(), "VID")

    # Subscriptions

    def get_subscription(self) -> Optional[Dict[str, Any]]:
        """
        The subscription (autobill) object, if the reply has one.

        Raises:
            InvalidResponseError: If the object carries no identifier at all
        """
        autobill = self.data.get("autobill")
        if autobill is None:
            return None
        if not autobill.get("merchantAutoBillId") and not autobill.get("VID"):
            raise InvalidResponseError("Subscription in response has no id or reference.")
        return autobill

    def get_subscription_id(self) -> Optional[str]:
        return dig(self.data, "autobill", "merchantAutoBillId")

    def get_subscription_reference(self) -> Optional[str]:
        return dig(self.data, "autobill", "VID")

    def get_subscription_status(self) -> Optional[str]:
        return dig(self.data, "autobill", "status")

    # Payment methods

    def _payment_method(self) -> Optional[Dict[str, Any]]:
        return (
            self.data.get("paymentMethod")
            or dig(self.data, "transaction", "sourcePaymentMethod")
            or dig(self.data, "autobill", "paymentMethod")
        )

    def get_payment_method_id(self) -> Optional[str]:
        return dig(self._payment_method(), "merchantPaymentMethodId")

    def get_payment_method_reference(self) -> Optional[str]:
        return dig(self._payment_method(), "VID")

    # Catalog

    def get_plan(self) -> Optional[Dict[str, Any]]:
        return self.data.get("billingPlan")

    def get_plan_id(self) -> Optional[str]:
        return dig(self.data, "billingPlan", "merchantBillingPlanId")

    def get_plan_reference(self) -> Optional[str]:
        return dig(self.data, "billingPlan", "VID")

    def get_product(self) -> Optional[Dict[str, Any]]:
        return self.data.get("product")

    def get_product_id(self) -> Optional[str]:
        return dig(self.data, "product", "merchantProductId")

    def get_product_reference(self) -> Optional[str]:
        return dig(self.data, "product", "VID")

    # Refunds

    def get_refunds(self) -> List[Dict[str, Any]]:
        return as_list(self.data.get("refunds"))

    def get_refund_id(self) -> Optional[str]:
        return dig(self.get_refunds(), 0, "merchantRefundId")

    def get_refund_reference(self) -> Optional[str]:
        return dig(self.get_refunds(), 0, "VID")

    # Invoices

    def get_invoice_numbers(self) -> List[str]:
        return as_list(self.data.get("invoicenum"))

    def get_invoice_id(self) -> Optional[str]:
        """First invoice number; the provider normally returns just one."""
        numbers = self.get_invoice_numbers()
        return numbers[0] if numbers else None

    def get_invoice(self) -> Optional[str]:
        return self.data.get("invoice")


class PayPalPurchaseResponse(Response):
    """
    Response to a PayPal purchase.

    The customer must be sent to PayPal to approve the payment; the provider
    hands back the URL in the transaction's first status log entry.
    """

    def get_redirect_url(self) -> Optional[str]:
        return dig(self.data, "transaction", "statusLog", 0, "payPalStatus", "redirectUrl")

    def is_redirect(self) -> bool:
        return self.get_redirect_url() is not None

    def get_redirect_method(self) -> str:
        return "GET"

    def get_redirect_data(self) -> None:
        return None


class CompletePayPalPurchaseResponse(Response):
    def is_cancelled(self) -> bool:
        return self.request.get_success() is False
