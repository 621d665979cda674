"""Catalog value objects: prices, attributes, billing plans and products."""
from typing import Any, Dict, Iterable, List, Mapping, Optional, Union

from vindicia_gateway.currency import to_decimal
from vindicia_gateway.exceptions import InvalidItemError, InvalidRequestError
from vindicia_gateway.items import coerce_list
from vindicia_gateway.parameters import ValueObject, is_blank

PLAN_INTERVALS = ("Day", "Week", "Month", "Year")


class Price(ValueObject):
    """An amount in one currency."""

    def get_amount(self) -> Any:
        return self.get_parameter("amount")

    def set_amount(self, value: Any) -> "Price":
        return self.set_parameter("amount", value)

    def get_currency(self) -> Optional[str]:
        currency = self.get_parameter("currency")
        return currency.upper() if currency else currency

    def set_currency(self, value: Optional[str]) -> "Price":
        return self.set_parameter("currency", value)

    def validate(self) -> None:
        if is_blank(self.get_amount()):
            raise InvalidItemError("Price requires amount.")
        if is_blank(self.get_currency()):
            raise InvalidItemError("Price requires currency.")
        try:
            to_decimal(self.get_amount())
        except InvalidRequestError:
            raise InvalidItemError("Price amount must be numeric.") from None

    def serialize(self) -> Dict[str, Any]:
        return {"amount": str(self.get_amount()), "currency": self.get_currency()}


class Attribute(ValueObject):
    """A free-form name/value pair stored on the provider's object."""

    def get_name(self) -> Optional[str]:
        return self.get_parameter("name")

    def set_name(self, value: Optional[str]) -> "Attribute":
        return self.set_parameter("name", value)

    def get_value(self) -> Any:
        return self.get_parameter("value")

    def set_value(self, value: Any) -> "Attribute":
        return self.set_parameter("value", value)

    def validate(self) -> None:
        if is_blank(self.get_name()):
            raise InvalidItemError("Attribute requires name.")

    def serialize(self) -> Dict[str, Any]:
        return {"name": self.get_name(), "value": self.get_value()}


PriceList = Iterable[Union[Price, Mapping[str, Any]]]
AttributeList = Iterable[Union[Attribute, Mapping[str, Any]]]


def _validate_all(values: Optional[List[ValueObject]]) -> None:
    for value in values or ():
        value.validate()


class Plan(ValueObject):
    """
    A billing plan: how often and how much a subscription is charged.

    Identified by your id (merchantBillingPlanId on the wire) or by the
    provider's reference (VID).
    """

    def get_id(self) -> Optional[str]:
        return self.get_parameter("id")

    def set_id(self, value: Optional[str]) -> "Plan":
        return self.set_parameter("id", value)

    def get_reference(self) -> Optional[str]:
        return self.get_parameter("reference")

    def set_reference(self, value: Optional[str]) -> "Plan":
        return self.set_parameter("reference", value)

    def get_description(self) -> Optional[str]:
        return self.get_parameter("description")

    def set_description(self, value: Optional[str]) -> "Plan":
        return self.set_parameter("description", value)

    def get_interval(self) -> Optional[str]:
        return self.get_parameter("interval")

    def set_interval(self, value: Optional[str]) -> "Plan":
        return self.set_parameter("interval", value)

    def get_interval_count(self) -> Optional[int]:
        return self.get_parameter("intervalCount")

    def set_interval_count(self, value: Optional[int]) -> "Plan":
        return self.set_parameter("intervalCount", value)

    def get_tax_classification(self) -> Optional[str]:
        return self.get_parameter("taxClassification")

    def set_tax_classification(self, value: Optional[str]) -> "Plan":
        return self.set_parameter("taxClassification", value)

    def get_prices(self) -> Optional[List[Price]]:
        return self.get_parameter("prices")

    def set_prices(self, value: Optional[PriceList]) -> "Plan":
        return self.set_parameter("prices", coerce_list(value, Price))

    def validate(self) -> None:
        if is_blank(self.get_id()) and is_blank(self.get_reference()):
            raise InvalidItemError("Plan requires id or reference.")
        interval = self.get_interval()
        if interval is not None and interval not in PLAN_INTERVALS:
            raise InvalidItemError(
                f"Plan interval must be one of {', '.join(PLAN_INTERVALS)}."
            )
        _validate_all(self.get_prices())

    def serialize_reference(self) -> Dict[str, Any]:
        """Just the identifiers, for embedding in other objects."""
        return {"merchantBillingPlanId": self.get_id(), "VID": self.get_reference()}

    def serialize(self) -> Dict[str, Any]:
        data = self.serialize_reference()
        data["description"] = self.get_description()
        data["taxClassification"] = self.get_tax_classification()
        if self.get_interval() is not None:
            data["periods"] = [
                {
                    "type": self.get_interval(),
                    "quantity": self.get_interval_count() or 1,
                    "cycles": 0,
                    "prices": [price.serialize() for price in self.get_prices() or ()],
                }
            ]
        return data


class Product(ValueObject):
    """A sellable product, optionally with a default billing plan."""

    def get_id(self) -> Optional[str]:
        return self.get_parameter("id")

    def set_id(self, value: Optional[str]) -> "Product":
        return self.set_parameter("id", value)

    def get_reference(self) -> Optional[str]:
        return self.get_parameter("reference")

    def set_reference(self, value: Optional[str]) -> "Product":
        return self.set_parameter("reference", value)

    def get_description(self) -> Optional[str]:
        return self.get_parameter("description")

    def set_description(self, value: Optional[str]) -> "Product":
        return self.set_parameter("description", value)

    def get_plan(self) -> Optional[Plan]:
        return self.get_parameter("plan")

    def set_plan(self, value: Union[Plan, Mapping[str, Any], None]) -> "Product":
        if value is not None and not isinstance(value, Plan):
            value = Plan(value)
        return self.set_parameter("plan", value)

    def get_plan_id(self) -> Optional[str]:
        return self.get_parameter("planId")

    def set_plan_id(self, value: Optional[str]) -> "Product":
        return self.set_parameter("planId", value)

    def get_plan_reference(self) -> Optional[str]:
        return self.get_parameter("planReference")

    def set_plan_reference(self, value: Optional[str]) -> "Product":
        return self.set_parameter("planReference", value)

    def get_tax_classification(self) -> Optional[str]:
        return self.get_parameter("taxClassification")

    def set_tax_classification(self, value: Optional[str]) -> "Product":
        return self.set_parameter("taxClassification", value)

    def get_prices(self) -> Optional[List[Price]]:
        return self.get_parameter("prices")

    def set_prices(self, value: Optional[PriceList]) -> "Product":
        return self.set_parameter("prices", coerce_list(value, Price))

    def get_attributes(self) -> Optional[List[Attribute]]:
        return self.get_parameter("attributes")

    def set_attributes(self, value: Optional[AttributeList]) -> "Product":
        return self.set_parameter("attributes", coerce_list(value, Attribute))

    def validate(self) -> None:
        if is_blank(self.get_id()) and is_blank(self.get_reference()):
            raise InvalidItemError("Product requires id or reference.")
        if self.get_plan() is not None:
            self.get_plan().validate()
        _validate_all(self.get_prices())
        _validate_all(self.get_attributes())

    def _default_billing_plan(self) -> Optional[Dict[str, Any]]:
        plan = self.get_plan()
        if plan is not None:
            return plan.serialize_reference()
        if self.get_plan_id() or self.get_plan_reference():
            return {
                "merchantBillingPlanId": self.get_plan_id(),
                "VID": self.get_plan_reference(),
            }
        return None

    def serialize_reference(self) -> Dict[str, Any]:
        return {"merchantProductId": self.get_id(), "VID": self.get_reference()}

    def serialize(self) -> Dict[str, Any]:
        data = self.serialize_reference()
        data["description"] = self.get_description()
        data["taxClassification"] = self.get_tax_classification()
        data["defaultBillingPlan"] = self._default_billing_plan()
        if self.get_prices():
            data["prices"] = [price.serialize() for price in self.get_prices()]
        if self.get_attributes():
            data["nameValues"] = [attr.serialize() for attr in self.get_attributes()]
        return data
