"""Refunds against an earlier transaction."""
from typing import Any, Dict, Iterable, List, Mapping, Optional, Union

from vindicia_gateway.items import RefundItem, coerce_list
from vindicia_gateway.message.base import AbstractRequest


class RefundRequest(AbstractRequest):
    """
    Refund all or part of a transaction.

    Parameters:
        transactionId / transactionReference: the transaction to refund
        amount: partial refund amount; omit for a full refund
        refundItems: per-line refunds (see RefundItem)
        refundId: your identifier for the refund
        reason: note stored with the refund
    """

    object_name = "Refund"
    action = "perform"
    alternative_parameters = (("transactionId", "transactionReference"),)

    def get_refund_id(self) -> Optional[str]:
        return self.get_parameter("refundId")

    def set_refund_id(self, value: Optional[str]) -> "RefundRequest":
        return self.set_parameter("refundId", value)

    def get_reason(self) -> Optional[str]:
        return self.get_parameter("reason")

    def set_reason(self, value: Optional[str]) -> "RefundRequest":
        return self.set_parameter("reason", value)

    def get_refund_items(self) -> Optional[List[RefundItem]]:
        return self.get_parameter("refundItems")

    def set_refund_items(
        self, value: Optional[Iterable[Union[RefundItem, Mapping[str, Any]]]]
    ) -> "RefundRequest":
        return self.set_parameter("refundItems", coerce_list(value, RefundItem))

    def build_data(self) -> Dict[str, Any]:
        refund: Dict[str, Any] = {
            "merchantRefundId": self.get_refund_id(),
            "transaction": self.transaction_reference(),
            "amount": self.get_amount(),
            "currency": self.get_currency(),
            "note": self.get_reason(),
            "nameValues": self.serialize_attributes(),
        }
        refund_items = self.get_refund_items()
        if refund_items:
            refund["refundItems"] = [item.serialize() for item in refund_items]
        return {"refunds": [refund]}
