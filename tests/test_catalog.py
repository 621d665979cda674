"""
Unit tests for catalog value objects (Product, Plan, Price, Attribute).
"""
import pytest
from faker import Faker

from vindicia_gateway.catalog import Attribute, Plan, Price, Product
from vindicia_gateway.exceptions import InvalidItemError


@pytest.fixture
def product_id(fake: Faker) -> str:
    return f"prod_{fake.uuid4()[:8]}"


@pytest.fixture
def product_reference(fake: Faker) -> str:
    return fake.bothify("VID-########")


class TestProduct:
    """Test suite for Product."""

    @pytest.mark.unit
    def test_construct_with_params(self, product_id: str, product_reference: str) -> None:
        product = Product({"id": product_id, "reference": product_reference})
        assert product.get_id() == product_id
        assert product.get_reference() == product_reference

    @pytest.mark.unit
    def test_initialize_with_params(self, product_id: str, product_reference: str) -> None:
        product = Product()
        assert product.initialize({"id": product_id, "reference": product_reference}) is product
        assert product.get_id() == product_id
        assert product.get_reference() == product_reference

    @pytest.mark.unit
    def test_get_parameters(self, product_id: str, product_reference: str) -> None:
        product = Product()
        assert product.set_id(product_id).set_reference(product_reference) is product
        assert product.get_parameters() == {"id": product_id, "reference": product_reference}

    @pytest.mark.unit
    def test_plan(self) -> None:
        product = Product()
        plan = Plan()
        assert product.set_plan(plan) is product
        assert product.get_plan() is plan

    @pytest.mark.unit
    def test_plan_from_dict(self) -> None:
        product = Product({"plan": {"id": "monthly"}})
        assert isinstance(product.get_plan(), Plan)
        assert product.get_plan().get_id() == "monthly"

    @pytest.mark.unit
    def test_plan_id_and_reference(self, fake: Faker) -> None:
        product = Product()
        plan_id = fake.uuid4()
        plan_reference = fake.uuid4()
        assert product.set_plan_id(plan_id) is product
        assert product.set_plan_reference(plan_reference) is product
        assert product.get_plan_id() == plan_id
        assert product.get_plan_reference() == plan_reference

    @pytest.mark.unit
    def test_tax_classification(self) -> None:
        product = Product()
        assert product.set_tax_classification("TaxExempt") is product
        assert product.get_tax_classification() == "TaxExempt"

    @pytest.mark.unit
    def test_prices(self) -> None:
        product = Product()
        prices = [Price({"amount": "9.99", "currency": "USD"})]
        assert product.set_prices(prices) is product
        assert product.get_prices() == prices
        assert product.get_prices()[0] is prices[0]

    @pytest.mark.unit
    def test_attributes(self) -> None:
        product = Product()
        assert product.set_attributes([{"name": "tier", "value": "gold"}]) is product
        assert product.get_attributes() == [Attribute({"name": "tier", "value": "gold"})]

    @pytest.mark.unit
    def test_validate_requires_id_or_reference(self) -> None:
        with pytest.raises(InvalidItemError, match="Product requires id or reference."):
            Product({"description": "Gold"}).validate()

    @pytest.mark.unit
    def test_validate_checks_nested_objects(self, product_id: str) -> None:
        product = Product({"id": product_id, "prices": [{"amount": "1.00"}]})
        with pytest.raises(InvalidItemError, match="Price requires currency."):
            product.validate()

        product = Product({"id": product_id, "plan": {"description": "no id"}})
        with pytest.raises(InvalidItemError, match="Plan requires id or reference."):
            product.validate()

    @pytest.mark.unit
    def test_serialize_uses_plan_identifiers(self, product_id: str) -> None:
        data = Product({"id": product_id, "planId": "monthly"}).serialize()
        assert data["merchantProductId"] == product_id
        assert data["VID"] is None
        assert data["defaultBillingPlan"] == {"merchantBillingPlanId": "monthly", "VID": None}


class TestPlan:
    """Test suite for Plan."""

    @pytest.mark.unit
    def test_validate_rejects_unknown_interval(self) -> None:
        with pytest.raises(InvalidItemError, match="Plan interval must be one of"):
            Plan({"id": "p", "interval": "Fortnight"}).validate()

    @pytest.mark.unit
    def test_serialize_period(self) -> None:
        plan = Plan(
            {
                "id": "monthly",
                "interval": "Month",
                "intervalCount": 1,
                "prices": [{"amount": "9.99", "currency": "usd"}],
            }
        )
        plan.validate()
        period = plan.serialize()["periods"][0]
        assert period["type"] == "Month"
        assert period["quantity"] == 1
        assert period["prices"] == [{"amount": "9.99", "currency": "USD"}]


class TestPriceAndAttribute:
    """Test suite for Price and Attribute."""

    @pytest.mark.unit
    def test_price_requires_numeric_amount(self) -> None:
        with pytest.raises(InvalidItemError, match="Price amount must be numeric."):
            Price({"amount": "lots", "currency": "USD"}).validate()

    @pytest.mark.unit
    def test_attribute_requires_name(self) -> None:
        with pytest.raises(InvalidItemError, match="Attribute requires name."):
            Attribute({"value": "x"}).validate()
