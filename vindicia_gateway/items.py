"""Line items for purchases and refunds."""
from typing import Any, Dict, Iterable, List, Mapping, Optional, Type, TypeVar, Union

from vindicia_gateway.exceptions import InvalidItemError
from vindicia_gateway.parameters import ValueObject, is_blank

V = TypeVar("V", bound=ValueObject)


def coerce_list(
    values: Optional[Iterable[Union[V, Mapping[str, Any]]]], cls: Type[V]
) -> Optional[List[V]]:
    """Turn a list of dicts and/or value objects into value objects of cls."""
    if values is None:
        return None
    return [value if isinstance(value, cls) else cls(value) for value in values]


class Item(ValueObject):
    """A purchased line item."""

    def get_name(self) -> Optional[str]:
        return self.get_parameter("name")

    def set_name(self, value: Optional[str]) -> "Item":
        return self.set_parameter("name", value)

    def get_sku(self) -> Optional[str]:
        return self.get_parameter("sku")

    def set_sku(self, value: Optional[str]) -> "Item":
        return self.set_parameter("sku", value)

    def get_description(self) -> Optional[str]:
        return self.get_parameter("description")

    def set_description(self, value: Optional[str]) -> "Item":
        return self.set_parameter("description", value)

    def get_quantity(self) -> int:
        return self.get_parameter("quantity", 1)

    def set_quantity(self, value: int) -> "Item":
        return self.set_parameter("quantity", value)

    def get_price(self) -> Any:
        return self.get_parameter("price")

    def set_price(self, value: Any) -> "Item":
        return self.set_parameter("price", value)

    def get_tax_classification(self) -> Optional[str]:
        return self.get_parameter("taxClassification")

    def set_tax_classification(self, value: Optional[str]) -> "Item":
        return self.set_parameter("taxClassification", value)

    def validate(self) -> None:
        if is_blank(self.get_sku()):
            raise InvalidItemError("Item requires sku.")
        if is_blank(self.get_price()):
            raise InvalidItemError("Item requires price.")
        quantity = self.get_quantity()
        if not isinstance(quantity, int) or isinstance(quantity, bool) or quantity < 1:
            raise InvalidItemError("Item quantity must be a positive integer.")

    def serialize(self) -> Dict[str, Any]:
        return {
            "sku": self.get_sku(),
            "name": self.get_name() or self.get_sku(),
            "description": self.get_description(),
            "price": str(self.get_price()),
            "quantity": self.get_quantity(),
            "taxClassification": self.get_tax_classification(),
        }


class RefundItem(ValueObject):
    """
    One line of a partial refund.

    The line is located on the original transaction either by sku or by the
    transaction item's index. A tax-only line refunds just the tax on that
    item and needs no amount.
    """

    def get_sku(self) -> Optional[str]:
        return self.get_parameter("sku")

    def set_sku(self, value: Optional[str]) -> "RefundItem":
        return self.set_parameter("sku", value)

    def get_amount(self) -> Any:
        return self.get_parameter("amount")

    def set_amount(self, value: Any) -> "RefundItem":
        return self.set_parameter("amount", value)

    def get_transaction_item_index_number(self) -> Optional[int]:
        return self.get_parameter("transactionItemIndexNumber")

    def set_transaction_item_index_number(self, value: Optional[int]) -> "RefundItem":
        return self.set_parameter("transactionItemIndexNumber", value)

    def get_tax_only(self) -> Optional[bool]:
        return self.get_parameter("taxOnly")

    def set_tax_only(self, value: Optional[bool]) -> "RefundItem":
        return self.set_parameter("taxOnly", value)

    def validate(self) -> None:
        if is_blank(self.get_sku()) and self.get_transaction_item_index_number() is None:
            raise InvalidItemError("Refund item requires sku or transactionItemIndexNumber.")
        if not self.get_tax_only() and is_blank(self.get_amount()):
            raise InvalidItemError("Refund item requires amount if taxOnly is not set to true.")

    def serialize(self) -> Dict[str, Any]:
        amount = self.get_amount()
        return {
            "sku": self.get_sku(),
            "transactionItemIndexNumber": self.get_transaction_item_index_number(),
            "amount": None if is_blank(amount) else str(amount),
            "taxOnly": bool(self.get_tax_only()),
        }
