"""
Pytest configuration and fixtures.
"""
from datetime import datetime, timezone
from typing import Any, Dict

import pytest
from faker import Faker

from vindicia_gateway.config import GatewaySettings
from vindicia_gateway.gateway import Gateway, PayPalGateway
from vindicia_gateway.transport.fake import FakeTransport


def pytest_configure(config: Any) -> None:
    config.addinivalue_line("markers", "unit: fast tests with no network access")


def success_reply(**objects: Any) -> Dict[str, Any]:
    """Provider reply with a 200 return block and the given objects."""
    reply: Dict[str, Any] = {
        "return": {"returnCode": "200", "returnString": "OK", "soapId": "soap-123"}
    }
    reply.update(objects)
    return reply


@pytest.fixture
def fake() -> Faker:
    return Faker()


@pytest.fixture
def transport() -> FakeTransport:
    return FakeTransport()


@pytest.fixture
def test_settings() -> GatewaySettings:
    """Create test settings."""
    return GatewaySettings(
        username="api_user",
        password="api_password",
        test_mode=True,
        app_env="test",
        log_level="DEBUG",
    )


@pytest.fixture
def gateway(transport: FakeTransport) -> Gateway:
    return Gateway(transport=transport)


@pytest.fixture
def paypal_gateway(transport: FakeTransport) -> PayPalGateway:
    return PayPalGateway(transport=transport)


@pytest.fixture
def valid_card() -> Dict[str, Any]:
    """Card details that pass validation."""
    return {
        "firstName": "Ada",
        "lastName": "Lovelace",
        "number": "4111111111111111",
        "expiryMonth": 12,
        "expiryYear": datetime.now(timezone.utc).year + 2,
        "cvv": "123",
        "postcode": "94105",
        "country": "US",
    }


@pytest.fixture
def purchase_parameters(fake: Faker) -> Dict[str, Any]:
    """Minimal parameters for a purchase or authorize."""
    return {
        "amount": "9.99",
        "currency": "USD",
        "customerId": f"cust_{fake.uuid4()[:8]}",
        "transactionId": f"txn_{fake.uuid4()[:8]}",
    }
