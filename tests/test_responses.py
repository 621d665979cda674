"""
Unit tests for Response accessors.
"""
import pytest

from vindicia_gateway.exceptions import InvalidResponseError
from vindicia_gateway.message.responses import Response, as_list, dig
from vindicia_gateway.message.transaction import FetchTransactionRequest
from vindicia_gateway.transport.fake import FakeTransport
from tests.conftest import success_reply


@pytest.fixture
def request_(transport: FakeTransport) -> FetchTransactionRequest:
    return FetchTransactionRequest(transport, {"transactionId": "txn-1"})


class TestHelpers:
    """Test suite for reply navigation helpers."""

    @pytest.mark.unit
    def test_as_list(self) -> None:
        assert as_list(None) == []
        assert as_list("a") == ["a"]
        assert as_list(["a", "b"]) == ["a", "b"]

    @pytest.mark.unit
    def test_dig(self) -> None:
        data = {"a": {"b": [{"c": 1}, {"c": 2}]}, "single": {"c": 3}}
        assert dig(data, "a", "b", 1, "c") == 2
        assert dig(data, "single", 0, "c") == 3
        assert dig(data, "a", "b", 5, "c") is None
        assert dig(data, "missing", "c") is None
        assert dig(data, "a", "b", "c") is None


class TestResponse:
    """Test suite for Response."""

    @pytest.mark.unit
    @pytest.mark.parametrize("data", [{}, {"return": None}, {"return": "200"}])
    def test_reply_without_return_block(self, request_: FetchTransactionRequest, data) -> None:
        with pytest.raises(InvalidResponseError, match="no return block"):
            Response(request_, data)

    @pytest.mark.unit
    def test_success(self, request_: FetchTransactionRequest) -> None:
        response = Response(request_, success_reply())
        assert response.is_successful()
        assert response.get_code() == 200
        assert response.get_message() == "OK"
        assert response.get_soap_id() == "soap-123"
        assert not response.is_redirect()
        assert not response.is_cancelled()
        assert response.get_request() is request_

    @pytest.mark.unit
    def test_failure_code(self, request_: FetchTransactionRequest) -> None:
        response = Response(
            request_, {"return": {"returnCode": "404", "returnString": "Not found"}}
        )
        assert not response.is_successful()
        assert response.get_code() == 404
        assert response.get_message() == "Not found"

    @pytest.mark.unit
    def test_unparseable_code(self, request_: FetchTransactionRequest) -> None:
        response = Response(request_, {"return": {"returnCode": "oops"}})
        assert response.get_code() is None
        assert not response.is_successful()

    @pytest.mark.unit
    def test_absent_objects_read_as_none(self, request_: FetchTransactionRequest) -> None:
        response = Response(request_, success_reply())
        assert response.get_transaction() is None
        assert response.get_transaction_reference() is None
        assert response.get_customer_id() is None
        assert response.get_subscription() is None
        assert response.get_payment_method_id() is None
        assert response.get_plan() is None
        assert response.get_product() is None
        assert response.get_refunds() == []
        assert response.get_refund_id() is None
        assert response.get_invoice_numbers() == []
        assert response.get_invoice_id() is None
        assert response.get_invoice() is None

    @pytest.mark.unit
    def test_payment_method_from_transaction(self, request_: FetchTransactionRequest) -> None:
        response = Response(
            request_,
            success_reply(
                transaction={"sourcePaymentMethod": {"merchantPaymentMethodId": "pm-1", "VID": "v"}}
            ),
        )
        assert response.get_payment_method_id() == "pm-1"
        assert response.get_payment_method_reference() == "v"

    @pytest.mark.unit
    def test_single_refund_reply(self, request_: FetchTransactionRequest) -> None:
        response = Response(request_, success_reply(refunds={"merchantRefundId": "ref-1"}))
        assert response.get_refunds() == [{"merchantRefundId": "ref-1"}]
        assert response.get_refund_id() == "ref-1"
