"""
Subscription (provider "AutoBill") requests.

Example:
    response = gateway.create_subscription({
        "subscriptionId": "sub-1",
        "customerId": "cust-123",
        "productId": "prod-gold",
        "planId": "monthly",
        "currency": "USD",
        "paymentMethodId": "pm-1",
    }).send()

    invoices = gateway.fetch_subscription_invoice({
        "subscriptionId": response.get_subscription_id(),
        "invoiceState": "Overdue",
    }).send()
"""
from typing import Any, Dict, List, Optional, Union

from vindicia_gateway.exceptions import InvalidRequestError
from vindicia_gateway.message.base import AbstractFetchRequest, AbstractRequest
from vindicia_gateway.message.payment_methods import credit_card_source
from vindicia_gateway.parameters import is_blank

INVOICE_STATES = ("Open", "Due", "Paid", "Overdue", "WrittenOff")


class CreateSubscriptionRequest(AbstractRequest):
    """
    Create or update a subscription.

    The plan is optional when the product has a default billing plan.
    Setting shouldAuthorize asks the provider to validate the payment
    method before the subscription starts.
    """

    object_name = "AutoBill"
    action = "update"
    required_parameters = ("currency",)
    alternative_parameters = (
        ("customerId", "customerReference"),
        ("productId", "productReference"),
    )

    def get_start_time(self) -> Optional[str]:
        return self.get_parameter("startTime")

    def set_start_time(self, value: Optional[str]) -> "CreateSubscriptionRequest":
        return self.set_parameter("startTime", value)

    def get_billing_day(self) -> Optional[int]:
        return self.get_parameter("billingDay")

    def set_billing_day(self, value: Optional[int]) -> "CreateSubscriptionRequest":
        return self.set_parameter("billingDay", value)

    def get_should_authorize(self) -> bool:
        return bool(self.get_parameter("shouldAuthorize", False))

    def set_should_authorize(self, value: bool) -> "CreateSubscriptionRequest":
        return self.set_parameter("shouldAuthorize", value)

    def get_min_chargeback_probability(self) -> int:
        return self.get_parameter("minChargebackProbability", 100)

    def set_min_chargeback_probability(self, value: int) -> "CreateSubscriptionRequest":
        return self.set_parameter("minChargebackProbability", value)

    def validate_request(self) -> None:
        super().validate_request()
        billing_day = self.get_billing_day()
        if billing_day is not None and not 1 <= billing_day <= 31:
            raise InvalidRequestError("The billingDay parameter must be between 1 and 31.")

    def _billing_plan(self) -> Optional[Dict[str, Any]]:
        if is_blank(self.get_plan_id()) and is_blank(self.get_plan_reference()):
            return None
        return {
            "merchantBillingPlanId": self.get_plan_id(),
            "VID": self.get_plan_reference(),
        }

    def build_data(self) -> Dict[str, Any]:
        autobill = self.autobill_reference()
        autobill.update(
            {
                "account": self.account_reference(),
                "items": [
                    {
                        "index": 0,
                        "product": {
                            "merchantProductId": self.get_product_id(),
                            "VID": self.get_product_reference(),
                        },
                    }
                ],
                "billingPlan": self._billing_plan(),
                "currency": self.get_currency(),
                "paymentMethod": credit_card_source(self),
                "startTimestamp": self.get_start_time(),
                "billingDay": self.get_billing_day(),
                "billingStatementIdentifier": self.get_statement_descriptor(),
                "nameValues": self.serialize_attributes(),
            }
        )
        return {
            "autobill": autobill,
            "validatePaymentMethod": self.get_should_authorize(),
            "minChargebackProbability": self.get_min_chargeback_probability(),
            "ignoreAvsPolicy": False,
            "ignoreCvnPolicy": False,
            "campaignCode": None,
            "dryrun": False,
            "cancelReasonCode": None,
        }


class FetchSubscriptionRequest(AbstractFetchRequest):
    object_name = "AutoBill"
    id_parameter = "subscriptionId"
    reference_parameter = "subscriptionReference"
    fetch_by_id_action = "fetchByMerchantAutoBillId"
    id_field = "merchantAutoBillId"


class CancelSubscriptionRequest(AbstractRequest):
    """Cancel a subscription immediately, without settling the balance."""

    object_name = "AutoBill"
    action = "cancel"
    alternative_parameters = (("subscriptionId", "subscriptionReference"),)

    def get_cancel_reason(self) -> Optional[str]:
        return self.get_parameter("cancelReason")

    def set_cancel_reason(self, value: Optional[str]) -> "CancelSubscriptionRequest":
        return self.set_parameter("cancelReason", value)

    def build_data(self) -> Dict[str, Any]:
        return {
            "autobill": self.autobill_reference(),
            "disentitle": True,
            "force": True,
            "settle": False,
            "sendCancellationNotice": True,
            "cancelReasonCode": self.get_cancel_reason(),
        }


class FetchSubscriptionInvoiceRequest(AbstractRequest):
    """
    Fetch a subscription's invoice numbers, or one invoice.

    Without invoiceId the provider returns the invoice numbers of the
    subscription, optionally filtered by invoiceState (Open, Due, Paid,
    Overdue or WrittenOff). Pass those numbers back as invoiceId to fetch the
    invoice itself; only the first number is used.
    """

    object_name = "AutoBill"
    alternative_parameters = (("subscriptionId", "subscriptionReference"),)

    def get_invoice_id(self) -> Optional[str]:
        """
        The first invoice number, or None if there is none.

        invoiceId is normally the list fetchInvoiceNumbers returned. A plain
        string is also taken as a single invoice number and fetches that
        invoice; list-only clients of the provider treat a string as absent
        and fetch numbers instead. A blank first element counts as no
        invoice number.
        """
        invoice_numbers = self.get_parameter("invoiceId")
        if isinstance(invoice_numbers, (list, tuple)):
            invoice_id = invoice_numbers[0] if invoice_numbers else None
        elif isinstance(invoice_numbers, str):
            invoice_id = invoice_numbers
        else:
            invoice_id = None
        return None if is_blank(invoice_id) else invoice_id

    def set_invoice_id(self, value: Union[str, List[str], None]) -> "FetchSubscriptionInvoiceRequest":
        return self.set_parameter("invoiceId", value)

    def get_invoice_state(self) -> Optional[str]:
        return self.get_parameter("invoiceState")

    def set_invoice_state(self, value: Optional[str]) -> "FetchSubscriptionInvoiceRequest":
        return self.set_parameter("invoiceState", value)

    def get_action(self) -> str:
        return "fetchInvoiceNumbers" if self.get_invoice_id() is None else "fetchInvoice"

    def validate_request(self) -> None:
        super().validate_request()
        state = self.get_invoice_state()
        if state is not None and state not in INVOICE_STATES:
            raise InvalidRequestError(
                f"The invoiceState parameter must be one of {', '.join(INVOICE_STATES)}."
            )

    def build_data(self) -> Dict[str, Any]:
        invoice_id = self.get_invoice_id()

        # fetchInvoiceNumbers comes first; its result feeds fetchInvoice
        if invoice_id is None:
            return {
                "autobill": self.autobill_reference(),
                # lower case on the wire, unlike every other key
                "invoicestate": self.get_invoice_state(),
            }

        return {
            "autobill": self.autobill_reference(),
            "invoiceId": invoice_id,
            "asPDF": False,
            "statementTemplateId": None,
            "dunningIndex": 0,
            "language": "en-US",
        }
