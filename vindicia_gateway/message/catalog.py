"""Billing plan and product requests."""
from typing import Any, Dict, List, Mapping, Optional, Union

from vindicia_gateway.catalog import Plan, Price, PriceList, Product
from vindicia_gateway.items import coerce_list
from vindicia_gateway.message.base import AbstractFetchRequest, AbstractRequest


class CatalogRequestMixin:
    """Parameters shared by plan and product creation."""

    def get_tax_classification(self) -> Optional[str]:
        return self.get_parameter("taxClassification")

    def set_tax_classification(self, value: Optional[str]):
        return self.set_parameter("taxClassification", value)

    def get_prices(self) -> Optional[List[Price]]:
        return self.get_parameter("prices")

    def set_prices(self, value: Optional[PriceList]):
        return self.set_parameter("prices", coerce_list(value, Price))


class CreatePlanRequest(CatalogRequestMixin, AbstractRequest):
    """
    Create or update a billing plan.

    Parameters:
        planId / planReference: identifies the plan
        interval: Day, Week, Month or Year
        intervalCount: number of intervals between charges
        prices: one Price per currency
    """

    object_name = "BillingPlan"
    action = "update"
    required_parameters = ("interval", "intervalCount", "prices")
    alternative_parameters = (("planId", "planReference"),)

    def get_interval(self) -> Optional[str]:
        return self.get_parameter("interval")

    def set_interval(self, value: Optional[str]) -> "CreatePlanRequest":
        return self.set_parameter("interval", value)

    def get_interval_count(self) -> Optional[int]:
        return self.get_parameter("intervalCount")

    def set_interval_count(self, value: Optional[int]) -> "CreatePlanRequest":
        return self.set_parameter("intervalCount", value)

    def get_plan(self) -> Plan:
        return Plan(
            {
                "id": self.get_plan_id(),
                "reference": self.get_plan_reference(),
                "description": self.get_description(),
                "interval": self.get_interval(),
                "intervalCount": self.get_interval_count(),
                "taxClassification": self.get_tax_classification(),
                "prices": self.get_prices(),
            }
        )

    def validate_request(self) -> None:
        super().validate_request()
        self.get_plan().validate()

    def build_data(self) -> Dict[str, Any]:
        return {"billingPlan": self.get_plan().serialize()}


class CreateProductRequest(CatalogRequestMixin, AbstractRequest):
    """
    Create or update a product.

    A default billing plan can be given as a Plan object (plan) or by its
    identifiers (planId / planReference).
    """

    object_name = "Product"
    action = "update"
    alternative_parameters = (("productId", "productReference"),)

    def get_plan(self) -> Optional[Plan]:
        return self.get_parameter("plan")

    def set_plan(self, value: Union[Plan, Mapping[str, Any], None]) -> "CreateProductRequest":
        if value is not None and not isinstance(value, Plan):
            value = Plan(value)
        return self.set_parameter("plan", value)

    def get_product(self) -> Product:
        return Product(
            {
                "id": self.get_product_id(),
                "reference": self.get_product_reference(),
                "description": self.get_description(),
                "plan": self.get_plan(),
                "planId": self.get_plan_id(),
                "planReference": self.get_plan_reference(),
                "taxClassification": self.get_tax_classification(),
                "prices": self.get_prices(),
                "attributes": self.get_attributes(),
            }
        )

    def validate_request(self) -> None:
        super().validate_request()
        self.get_product().validate()

    def build_data(self) -> Dict[str, Any]:
        return {"product": self.get_product().serialize()}


class FetchPlanRequest(AbstractFetchRequest):
    object_name = "BillingPlan"
    id_parameter = "planId"
    reference_parameter = "planReference"
    fetch_by_id_action = "fetchByMerchantBillingPlanId"
    id_field = "merchantBillingPlanId"


class FetchProductRequest(AbstractFetchRequest):
    object_name = "Product"
    id_parameter = "productId"
    reference_parameter = "productReference"
    fetch_by_id_action = "fetchByMerchantProductId"
    id_field = "merchantProductId"
