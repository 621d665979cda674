"""Customer (provider "Account") value object."""
from typing import Any, Dict, List, Optional

from vindicia_gateway.catalog import Attribute, AttributeList
from vindicia_gateway.exceptions import InvalidItemError
from vindicia_gateway.items import coerce_list
from vindicia_gateway.parameters import ValueObject, is_blank


class Customer(ValueObject):
    def get_id(self) -> Optional[str]:
        return self.get_parameter("id")

    def set_id(self, value: Optional[str]) -> "Customer":
        return self.set_parameter("id", value)

    def get_reference(self) -> Optional[str]:
        return self.get_parameter("reference")

    def set_reference(self, value: Optional[str]) -> "Customer":
        return self.set_parameter("reference", value)

    def get_name(self) -> Optional[str]:
        return self.get_parameter("name")

    def set_name(self, value: Optional[str]) -> "Customer":
        return self.set_parameter("name", value)

    def get_email(self) -> Optional[str]:
        return self.get_parameter("email")

    def set_email(self, value: Optional[str]) -> "Customer":
        return self.set_parameter("email", value)

    def get_phone(self) -> Optional[str]:
        return self.get_parameter("phone")

    def set_phone(self, value: Optional[str]) -> "Customer":
        return self.set_parameter("phone", value)

    def get_attributes(self) -> Optional[List[Attribute]]:
        return self.get_parameter("attributes")

    def set_attributes(self, value: Optional[AttributeList]) -> "Customer":
        return self.set_parameter("attributes", coerce_list(value, Attribute))

    def validate(self) -> None:
        if is_blank(self.get_id()) and is_blank(self.get_reference()):
            raise InvalidItemError("Customer requires id or reference.")
        for attribute in self.get_attributes() or ():
            attribute.validate()

    def serialize(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {
            "merchantAccountId": self.get_id(),
            "VID": self.get_reference(),
            "name": self.get_name(),
            "emailAddress": self.get_email(),
        }
        if self.get_phone():
            data["shippingAddress"] = {"phone": self.get_phone()}
        if self.get_attributes():
            data["nameValues"] = [attr.serialize() for attr in self.get_attributes()]
        return data
