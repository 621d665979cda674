"""
Base request contract shared by every gateway operation.

A request is configuration over one pipeline:

    validate_request() -> build_data() -> transport.call() -> response_class

Concrete requests declare which provider object and action they target,
which parameters are required (outright or as either/or pairs) and how to
shape the payload. Validation always runs inside get_data(), so a concrete
request cannot build or send a payload that skipped it.
"""
from typing import Any, Dict, List, Mapping, Optional, Tuple, Type, Union

import structlog

from vindicia_gateway.card import CreditCard
from vindicia_gateway.catalog import Attribute, AttributeList
from vindicia_gateway.currency import format_amount
from vindicia_gateway.exceptions import (
    InvalidItemError,
    InvalidRequestError,
    RequestSentError,
)
from vindicia_gateway.items import Item, coerce_list
from vindicia_gateway.message.responses import Response
from vindicia_gateway.parameters import Parameterized, ValueObject, is_blank
from vindicia_gateway.transport.base import Transport

logger = structlog.get_logger(__name__)

ItemList = List[Union[Item, Mapping[str, Any]]]


class AbstractRequest(Parameterized):
    """
    Base class for all requests.

    Class attributes:
        object_name: Provider object the call goes to (e.g. "AutoBill")
        action: Provider action; override get_action() to pick one per call
        required_parameters: Parameters that must be present
        alternative_parameters: (a, b) pairs of which at least one is needed
        response_class: Response type wrapping the reply
        zero_amount_allowed: Whether an amount of 0 passes validation
        validate_card: Whether the card's number and expiry are checked;
            off where the card only carries name and address
    """

    object_name: str = ""
    action: str = ""
    required_parameters: Tuple[str, ...] = ()
    alternative_parameters: Tuple[Tuple[str, str], ...] = ()
    response_class: Type[Response] = Response
    zero_amount_allowed: bool = False
    validate_card: bool = True

    def __init__(self, transport: Transport, parameters: Optional[Mapping[str, Any]] = None):
        self.transport = transport
        self.response: Optional[Response] = None
        super().__init__(parameters)

    def initialize(self, parameters: Optional[Mapping[str, Any]] = None) -> "AbstractRequest":
        if self.response is not None:
            raise RequestSentError("Request cannot be modified after it has been sent!")
        return super().initialize(parameters)

    def set_parameter(self, key: str, value: Any) -> "AbstractRequest":
        if self.response is not None:
            raise RequestSentError("Request cannot be modified after it has been sent!")
        return super().set_parameter(key, value)

    # ------------------------------------------------------------------
    # Validation
    # ------------------------------------------------------------------

    def validate(self, *names: str) -> None:
        """
        Check that each named parameter has a value.

        Raises:
            InvalidRequestError: For the first missing parameter
        """
        for name in names:
            if is_blank(self.get_parameter(name)):
                raise InvalidRequestError(f"The {name} parameter is required")

    def validate_either(self, first: str, second: str) -> None:
        """
        Check that at least one of two alternative identifiers is present.

        Both may be given; both are then sent and the provider resolves them.
        """
        if is_blank(self.get_parameter(first)) and is_blank(self.get_parameter(second)):
            raise InvalidRequestError(
                f"Either the {first} or {second} parameter is required."
            )

    def embedded_objects(self) -> List[ValueObject]:
        """Every value object held directly or in a list parameter."""
        found: List[ValueObject] = []
        for value in self.parameters.all().values():
            if isinstance(value, CreditCard) and not self.validate_card:
                continue
            if isinstance(value, ValueObject):
                found.append(value)
            elif isinstance(value, (list, tuple)):
                found.extend(v for v in value if isinstance(v, ValueObject))
        return found

    def validate_request(self) -> None:
        """
        Run every validation rule for this request.

        Subclasses adding rules must call the base implementation.
        """
        self.validate(*self.required_parameters)
        for first, second in self.alternative_parameters:
            self.validate_either(first, second)
        for value_object in self.embedded_objects():
            value_object.validate()

    # ------------------------------------------------------------------
    # Payload and dispatch
    # ------------------------------------------------------------------

    def get_action(self) -> str:
        return self.action

    def build_data(self) -> Dict[str, Any]:
        """Operation-specific payload, without the action tag."""
        raise NotImplementedError

    def get_data(self) -> Dict[str, Any]:
        """
        Validate and build the payload for this operation.

        Raises:
            InvalidRequestError: If a parameter is missing or invalid
            InvalidItemError: If an embedded value object is invalid
        """
        try:
            self.validate_request()
            data: Dict[str, Any] = {"action": self.get_action()}
            data.update(self.build_data())
        except (InvalidRequestError, InvalidItemError) as e:
            logger.warning(
                "request_validation_failed",
                request=type(self).__name__,
                error=str(e),
            )
            raise
        return data

    def send_data(self, data: Mapping[str, Any]) -> Dict[str, Any]:
        payload = {key: value for key, value in data.items() if key != "action"}
        return self.transport.call(self.object_name, data["action"], payload)

    def build_response(self, data: Mapping[str, Any]) -> Response:
        return self.response_class(self, data)

    def send(self) -> Response:
        """
        Validate, send and wrap the reply.

        Returns:
            Response: Check is_successful() for provider-side declines

        Raises:
            InvalidRequestError: Before any network call
            InvalidItemError: Before any network call
            TransportError: Passed through from the transport unchanged
            RequestSentError: If this request was already sent
        """
        if self.response is not None:
            raise RequestSentError("Request has already been sent.")

        data = self.get_data()
        logger.info(
            "request_sending",
            request=type(self).__name__,
            object=self.object_name,
            action=data["action"],
        )

        reply = self.send_data(data)
        response = self.build_response(reply)
        self.response = response

        logger.info(
            "response_received",
            request=type(self).__name__,
            successful=response.is_successful(),
            code=response.get_code(),
            soap_id=response.get_soap_id(),
        )
        return response

    def get_response(self) -> Optional[Response]:
        return self.response

    # ------------------------------------------------------------------
    # Shared parameters
    # ------------------------------------------------------------------

    def get_amount(self) -> Optional[str]:
        """
        Amount formatted to the currency's precision.

        Raises:
            InvalidRequestError: If the amount is negative, non-numeric,
                zero (unless allowed) or too precise for the currency
        """
        amount = self.get_parameter("amount")
        if is_blank(amount):
            return None
        return format_amount(amount, self.get_currency(), self.zero_amount_allowed)

    def set_amount(self, value: Any) -> "AbstractRequest":
        return self.set_parameter("amount", value)

    def get_currency(self) -> Optional[str]:
        currency = self.get_parameter("currency")
        return currency.upper() if currency else currency

    def set_currency(self, value: Optional[str]) -> "AbstractRequest":
        return self.set_parameter("currency", value)

    def get_description(self) -> Optional[str]:
        return self.get_parameter("description")

    def set_description(self, value: Optional[str]) -> "AbstractRequest":
        return self.set_parameter("description", value)

    def get_client_ip(self) -> Optional[str]:
        return self.get_parameter("clientIp")

    def set_client_ip(self, value: Optional[str]) -> "AbstractRequest":
        return self.set_parameter("clientIp", value)

    def get_statement_descriptor(self) -> Optional[str]:
        return self.get_parameter("statementDescriptor")

    def set_statement_descriptor(self, value: Optional[str]) -> "AbstractRequest":
        return self.set_parameter("statementDescriptor", value)

    def get_customer_id(self) -> Optional[str]:
        return self.get_parameter("customerId")

    def set_customer_id(self, value: Optional[str]) -> "AbstractRequest":
        return self.set_parameter("customerId", value)

    def get_customer_reference(self) -> Optional[str]:
        return self.get_parameter("customerReference")

    def set_customer_reference(self, value: Optional[str]) -> "AbstractRequest":
        return self.set_parameter("customerReference", value)

    def get_transaction_id(self) -> Optional[str]:
        return self.get_parameter("transactionId")

    def set_transaction_id(self, value: Optional[str]) -> "AbstractRequest":
        return self.set_parameter("transactionId", value)

    def get_transaction_reference(self) -> Optional[str]:
        return self.get_parameter("transactionReference")

    def set_transaction_reference(self, value: Optional[str]) -> "AbstractRequest":
        return self.set_parameter("transactionReference", value)

    def get_subscription_id(self) -> Optional[str]:
        return self.get_parameter("subscriptionId")

    def set_subscription_id(self, value: Optional[str]) -> "AbstractRequest":
        return self.set_parameter("subscriptionId", value)

    def get_subscription_reference(self) -> Optional[str]:
        return self.get_parameter("subscriptionReference")

    def set_subscription_reference(self, value: Optional[str]) -> "AbstractRequest":
        return self.set_parameter("subscriptionReference", value)

    def get_payment_method_id(self) -> Optional[str]:
        return self.get_parameter("paymentMethodId")

    def set_payment_method_id(self, value: Optional[str]) -> "AbstractRequest":
        return self.set_parameter("paymentMethodId", value)

    def get_payment_method_reference(self) -> Optional[str]:
        return self.get_parameter("paymentMethodReference")

    def set_payment_method_reference(self, value: Optional[str]) -> "AbstractRequest":
        return self.set_parameter("paymentMethodReference", value)

    def get_plan_id(self) -> Optional[str]:
        return self.get_parameter("planId")

    def set_plan_id(self, value: Optional[str]) -> "AbstractRequest":
        return self.set_parameter("planId", value)

    def get_plan_reference(self) -> Optional[str]:
        return self.get_parameter("planReference")

    def set_plan_reference(self, value: Optional[str]) -> "AbstractRequest":
        return self.set_parameter("planReference", value)

    def get_product_id(self) -> Optional[str]:
        return self.get_parameter("productId")

    def set_product_id(self, value: Optional[str]) -> "AbstractRequest":
        return self.set_parameter("productId", value)

    def get_product_reference(self) -> Optional[str]:
        return self.get_parameter("productReference")

    def set_product_reference(self, value: Optional[str]) -> "AbstractRequest":
        return self.set_parameter("productReference", value)

    def get_card(self) -> Optional[CreditCard]:
        return self.get_parameter("card")

    def set_card(self, value: Union[CreditCard, Mapping[str, Any], None]) -> "AbstractRequest":
        if value is not None and not isinstance(value, CreditCard):
            value = CreditCard(value)
        return self.set_parameter("card", value)

    def get_items(self) -> Optional[List[Item]]:
        return self.get_parameter("items")

    def set_items(self, value: Optional[ItemList]) -> "AbstractRequest":
        return self.set_parameter("items", coerce_list(value, Item))

    def get_attributes(self) -> Optional[List[Attribute]]:
        return self.get_parameter("attributes")

    def set_attributes(self, value: Optional[AttributeList]) -> "AbstractRequest":
        return self.set_parameter("attributes", coerce_list(value, Attribute))

    def get_return_url(self) -> Optional[str]:
        return self.get_parameter("returnUrl")

    def set_return_url(self, value: Optional[str]) -> "AbstractRequest":
        return self.set_parameter("returnUrl", value)

    def get_cancel_url(self) -> Optional[str]:
        return self.get_parameter("cancelUrl")

    def set_cancel_url(self, value: Optional[str]) -> "AbstractRequest":
        return self.set_parameter("cancelUrl", value)

    # ------------------------------------------------------------------
    # Wire helpers
    # ------------------------------------------------------------------

    def account_reference(self) -> Dict[str, Any]:
        return {
            "merchantAccountId": self.get_customer_id(),
            "VID": self.get_customer_reference(),
        }

    def transaction_reference(self) -> Dict[str, Any]:
        return {
            "merchantTransactionId": self.get_transaction_id(),
            "VID": self.get_transaction_reference(),
        }

    def autobill_reference(self) -> Dict[str, Any]:
        return {
            "merchantAutoBillId": self.get_subscription_id(),
            "VID": self.get_subscription_reference(),
        }

    def serialize_attributes(self) -> Optional[List[Dict[str, Any]]]:
        attributes = self.get_attributes()
        if not attributes:
            return None
        return [attribute.serialize() for attribute in attributes]


class AbstractFetchRequest(AbstractRequest):
    """
    Fetch one provider object by your id or by the provider's reference.

    When both are given the id wins, since the provider's fetch calls take
    a single identifier.
    """

    id_parameter: str = ""
    reference_parameter: str = ""
    fetch_by_id_action: str = ""
    id_field: str = ""

    def validate_request(self) -> None:
        super().validate_request()
        self.validate_either(self.id_parameter, self.reference_parameter)

    def _fetch_by_id(self) -> bool:
        return not is_blank(self.get_parameter(self.id_parameter))

    def get_action(self) -> str:
        return self.fetch_by_id_action if self._fetch_by_id() else "fetchByVid"

    def build_data(self) -> Dict[str, Any]:
        if self._fetch_by_id():
            return {self.id_field: self.get_parameter(self.id_parameter)}
        return {"vid": self.get_parameter(self.reference_parameter)}
