"""
Unit tests for customer, catalog and refund requests.
"""
from typing import Any, Dict

import pytest

from vindicia_gateway.catalog import Plan
from vindicia_gateway.exceptions import InvalidItemError, InvalidRequestError
from vindicia_gateway.gateway import Gateway
from vindicia_gateway.transport.fake import FakeTransport
from tests.conftest import success_reply


class TestCustomerRequests:
    """Test suite for customer requests."""

    @pytest.mark.unit
    def test_create_customer_payload(
        self, gateway: Gateway, transport: FakeTransport, valid_card: Dict[str, Any]
    ) -> None:
        gateway.create_customer(
            {
                "customerId": "cust-1",
                "name": "Ada Lovelace",
                "email": "ada@example.com",
                "phone": "555-0100",
                "card": valid_card,
                "attributes": [{"name": "tier", "value": "gold"}],
            }
        ).send()

        call = transport.last_call
        assert (call["object"], call["action"]) == ("Account", "update")
        account = call["payload"]["account"]
        assert account["merchantAccountId"] == "cust-1"
        assert account["emailAddress"] == "ada@example.com"
        assert account["shippingAddress"] == {"phone": "555-0100"}
        assert account["nameValues"] == [{"name": "tier", "value": "gold"}]
        assert account["paymentMethods"][0]["type"] == "CreditCard"
        assert call["payload"]["updateBehavior"] == "CatchUp"

    @pytest.mark.unit
    def test_customer_without_payment_method(self, gateway: Gateway) -> None:
        data = gateway.update_customer({"customerReference": "VID-1"}).get_data()
        assert "paymentMethods" not in data["account"]
        assert data["account"]["VID"] == "VID-1"

    @pytest.mark.unit
    def test_customer_requires_identifier(self, gateway: Gateway, transport: FakeTransport) -> None:
        with pytest.raises(InvalidRequestError, match="Either the customerId"):
            gateway.create_customer({"name": "Ada"}).send()
        assert transport.calls == []

    @pytest.mark.unit
    def test_fetch_customer(self, gateway: Gateway, transport: FakeTransport) -> None:
        transport.queue_reply(
            success_reply(account={"merchantAccountId": "cust-1", "VID": "acct-vid"})
        )
        response = gateway.fetch_customer({"customerId": "cust-1"}).send()
        assert transport.last_call["action"] == "fetchByMerchantAccountId"
        assert transport.last_call["payload"] == {"merchantAccountId": "cust-1"}
        assert response.get_customer() == {"merchantAccountId": "cust-1", "VID": "acct-vid"}
        assert response.get_customer_reference() == "acct-vid"


class TestPlanRequests:
    """Test suite for billing plan requests."""

    @pytest.fixture
    def plan_parameters(self) -> Dict[str, Any]:
        return {
            "planId": "monthly",
            "description": "Monthly",
            "interval": "Month",
            "intervalCount": 1,
            "prices": [{"amount": "9.99", "currency": "USD"}],
        }

    @pytest.mark.unit
    def test_create_plan(
        self, gateway: Gateway, transport: FakeTransport, plan_parameters: Dict[str, Any]
    ) -> None:
        gateway.create_plan(plan_parameters).send()
        call = transport.last_call
        assert (call["object"], call["action"]) == ("BillingPlan", "update")
        plan = call["payload"]["billingPlan"]
        assert plan["merchantBillingPlanId"] == "monthly"
        assert plan["periods"][0]["type"] == "Month"

    @pytest.mark.unit
    def test_create_plan_rejects_bad_interval(
        self, gateway: Gateway, plan_parameters: Dict[str, Any]
    ) -> None:
        plan_parameters["interval"] = "Decade"
        with pytest.raises(InvalidItemError, match="Plan interval"):
            gateway.create_plan(plan_parameters).get_data()

    @pytest.mark.unit
    def test_create_plan_requires_prices(
        self, gateway: Gateway, plan_parameters: Dict[str, Any]
    ) -> None:
        del plan_parameters["prices"]
        with pytest.raises(InvalidRequestError, match="The prices parameter is required"):
            gateway.update_plan(plan_parameters).get_data()

    @pytest.mark.unit
    def test_fetch_plan(self, gateway: Gateway, transport: FakeTransport) -> None:
        transport.queue_reply(
            success_reply(billingPlan={"merchantBillingPlanId": "monthly", "VID": "bp-vid"})
        )
        response = gateway.fetch_plan({"planReference": "bp-vid"}).send()
        assert transport.last_call["action"] == "fetchByVid"
        assert response.get_plan_id() == "monthly"
        assert response.get_plan_reference() == "bp-vid"


class TestProductRequests:
    """Test suite for product requests."""

    @pytest.mark.unit
    def test_create_product_with_plan_object(
        self, gateway: Gateway, transport: FakeTransport
    ) -> None:
        request = gateway.create_product(
            {"productId": "prod-gold", "plan": {"reference": "bp-vid"}, "description": "Gold"}
        )
        assert isinstance(request.get_plan(), Plan)
        request.send()

        product = transport.last_call["payload"]["product"]
        assert transport.last_call["object"] == "Product"
        assert product["merchantProductId"] == "prod-gold"
        assert product["defaultBillingPlan"] == {"merchantBillingPlanId": None, "VID": "bp-vid"}

    @pytest.mark.unit
    def test_create_product_requires_identifier(self, gateway: Gateway) -> None:
        with pytest.raises(InvalidRequestError, match="Either the productId"):
            gateway.create_product({"description": "Gold"}).get_data()

    @pytest.mark.unit
    def test_fetch_product(self, gateway: Gateway, transport: FakeTransport) -> None:
        transport.queue_reply(
            success_reply(product={"merchantProductId": "prod-gold", "VID": "p-vid"})
        )
        response = gateway.fetch_product({"productId": "prod-gold"}).send()
        assert transport.last_call["payload"] == {"merchantProductId": "prod-gold"}
        assert response.get_product_id() == "prod-gold"
        assert response.get_product_reference() == "p-vid"


class TestRefundRequest:
    """Test suite for RefundRequest."""

    @pytest.mark.unit
    def test_partial_refund(self, gateway: Gateway, transport: FakeTransport) -> None:
        transport.queue_reply(
            success_reply(refunds=[{"merchantRefundId": "ref-1", "VID": "ref-vid"}])
        )
        response = gateway.refund(
            {
                "transactionId": "txn-1",
                "refundId": "ref-1",
                "amount": "4.5",
                "currency": "USD",
                "reason": "Damaged",
            }
        ).send()

        call = transport.last_call
        assert (call["object"], call["action"]) == ("Refund", "perform")
        refund = call["payload"]["refunds"][0]
        assert refund["transaction"] == {"merchantTransactionId": "txn-1", "VID": None}
        assert refund["amount"] == "4.50"
        assert refund["note"] == "Damaged"
        assert "refundItems" not in refund
        assert response.get_refund_id() == "ref-1"
        assert response.get_refund_reference() == "ref-vid"

    @pytest.mark.unit
    def test_full_refund_sends_no_amount(self, gateway: Gateway) -> None:
        data = gateway.refund({"transactionReference": "VID-1"}).get_data()
        assert data["refunds"][0]["amount"] is None

    @pytest.mark.unit
    def test_refund_items(self, gateway: Gateway) -> None:
        data = gateway.refund(
            {
                "transactionId": "txn-1",
                "refundItems": [
                    {"sku": "gold", "amount": "1.00"},
                    {"transactionItemIndexNumber": 1, "taxOnly": True},
                ],
            }
        ).get_data()
        assert data["refunds"][0]["refundItems"] == [
            {"sku": "gold", "transactionItemIndexNumber": None, "amount": "1.00", "taxOnly": False},
            {"sku": None, "transactionItemIndexNumber": 1, "amount": None, "taxOnly": True},
        ]

    @pytest.mark.unit
    def test_invalid_refund_item_never_reaches_transport(
        self, gateway: Gateway, transport: FakeTransport
    ) -> None:
        request = gateway.refund({"transactionId": "txn-1", "refundItems": [{"sku": "gold"}]})
        with pytest.raises(InvalidItemError, match="Refund item requires amount"):
            request.send()
        assert transport.calls == []
