"""Customer (provider "Account") requests."""
from typing import Any, Dict, Optional

from vindicia_gateway.customer import Customer
from vindicia_gateway.message.base import AbstractFetchRequest, AbstractRequest
from vindicia_gateway.message.payment_methods import credit_card_source


class CreateCustomerRequest(AbstractRequest):
    """
    Create or update a customer.

    The provider upserts accounts, so the same request serves both. A card
    or payment method id stores a payment method on the account.
    """

    object_name = "Account"
    action = "update"
    alternative_parameters = (("customerId", "customerReference"),)

    def get_name(self) -> Optional[str]:
        return self.get_parameter("name")

    def set_name(self, value: Optional[str]) -> "CreateCustomerRequest":
        return self.set_parameter("name", value)

    def get_email(self) -> Optional[str]:
        return self.get_parameter("email")

    def set_email(self, value: Optional[str]) -> "CreateCustomerRequest":
        return self.set_parameter("email", value)

    def get_phone(self) -> Optional[str]:
        return self.get_parameter("phone")

    def set_phone(self, value: Optional[str]) -> "CreateCustomerRequest":
        return self.set_parameter("phone", value)

    def get_customer(self) -> Customer:
        return Customer(
            {
                "id": self.get_customer_id(),
                "reference": self.get_customer_reference(),
                "name": self.get_name(),
                "email": self.get_email(),
                "phone": self.get_phone(),
                "attributes": self.get_attributes(),
            }
        )

    def validate_request(self) -> None:
        super().validate_request()
        self.get_customer().validate()

    def build_data(self) -> Dict[str, Any]:
        account = self.get_customer().serialize()
        payment_method = credit_card_source(self)
        if payment_method is not None:
            account["paymentMethods"] = [payment_method]
        return {
            "account": account,
            "updateBehavior": "CatchUp",
            "ignoreAvsPolicy": False,
            "ignoreCvnPolicy": False,
        }


class FetchCustomerRequest(AbstractFetchRequest):
    object_name = "Account"
    id_parameter = "customerId"
    reference_parameter = "customerReference"
    fetch_by_id_action = "fetchByMerchantAccountId"
    id_field = "merchantAccountId"
