"""
Unit tests for purchase and refund line items.
"""
import pytest
from faker import Faker

from vindicia_gateway.exceptions import InvalidItemError
from vindicia_gateway.items import Item, RefundItem


class TestRefundItem:
    """Test suite for RefundItem."""

    @pytest.fixture
    def sku(self, fake: Faker) -> str:
        return fake.lexify("?" * fake.random_int(3, 15))

    @pytest.fixture
    def item(self, sku: str) -> RefundItem:
        return RefundItem(
            {"sku": sku, "amount": "4.50", "transactionItemIndexNumber": 2, "taxOnly": False}
        )

    @pytest.mark.unit
    def test_construct_with_params(self, sku: str) -> None:
        item = RefundItem({"sku": sku})
        assert item.get_sku() == sku

    @pytest.mark.unit
    def test_initialize_with_params(self, sku: str) -> None:
        item = RefundItem()
        assert item.initialize({"sku": sku}) is item
        assert item.get_sku() == sku

    @pytest.mark.unit
    def test_get_parameters(self, sku: str) -> None:
        item = RefundItem()
        assert item.set_sku(sku) is item
        assert item.get_parameters() == {"sku": sku}

    @pytest.mark.unit
    def test_setters_are_fluent(self, fake: Faker) -> None:
        item = RefundItem()
        index = fake.random_int(1, 15)
        assert item.set_amount("1.00") is item
        assert item.set_transaction_item_index_number(index) is item
        assert item.set_tax_only(True) is item
        assert item.get_amount() == "1.00"
        assert item.get_transaction_item_index_number() == index
        assert item.get_tax_only() is True

    @pytest.mark.unit
    def test_validate_amount_required(self, item: RefundItem) -> None:
        item.set_tax_only(False)
        item.set_amount(None)
        with pytest.raises(
            InvalidItemError,
            match="Refund item requires amount if taxOnly is not set to true.",
        ):
            item.validate()

    @pytest.mark.unit
    def test_validate_sku_or_transaction_item_index_number_required(
        self, item: RefundItem
    ) -> None:
        item.set_sku(None)
        item.set_transaction_item_index_number(None)
        with pytest.raises(
            InvalidItemError,
            match="Refund item requires sku or transactionItemIndexNumber.",
        ):
            item.validate()

    @pytest.mark.unit
    def test_tax_only_item_needs_no_amount(self, item: RefundItem) -> None:
        item.set_tax_only(True)
        item.set_amount(None)
        item.validate()

    @pytest.mark.unit
    def test_index_alone_identifies_line(self) -> None:
        RefundItem({"transactionItemIndexNumber": 0, "amount": "1.00"}).validate()

    @pytest.mark.unit
    def test_serialize(self, item: RefundItem, sku: str) -> None:
        assert item.serialize() == {
            "sku": sku,
            "transactionItemIndexNumber": 2,
            "amount": "4.50",
            "taxOnly": False,
        }


class TestItem:
    """Test suite for purchase Item."""

    @pytest.mark.unit
    def test_quantity_defaults_to_one(self) -> None:
        assert Item({"sku": "a", "price": "1.00"}).get_quantity() == 1

    @pytest.mark.unit
    def test_validate_requires_sku(self) -> None:
        with pytest.raises(InvalidItemError, match="Item requires sku."):
            Item({"price": "1.00"}).validate()

    @pytest.mark.unit
    def test_validate_requires_price(self) -> None:
        with pytest.raises(InvalidItemError, match="Item requires price."):
            Item({"sku": "a"}).validate()

    @pytest.mark.unit
    @pytest.mark.parametrize("quantity", [0, -1, "2", True])
    def test_validate_rejects_bad_quantity(self, quantity: object) -> None:
        with pytest.raises(InvalidItemError, match="positive integer"):
            Item({"sku": "a", "price": "1.00", "quantity": quantity}).validate()

    @pytest.mark.unit
    def test_serialize_falls_back_to_sku_for_name(self) -> None:
        data = Item({"sku": "gold", "price": 5, "quantity": 2}).serialize()
        assert data["name"] == "gold"
        assert data["price"] == "5"
        assert data["quantity"] == 2
