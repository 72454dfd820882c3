"""
Resource records for the Shopify Admin REST API.

Plain data-transfer models: unknown keys from the API are ignored and unset
fields are left out when a record is written back.
"""

from datetime import datetime
from decimal import Decimal, InvalidOperation
from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict

from .exceptions import ValidationError


class ShopifyRecord(BaseModel):
    """Base for all resource records."""

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    id: Optional[int] = None


class Metafield(ShopifyRecord):
    key: Optional[str] = None
    value: Optional[Any] = None
    value_type: Optional[str] = None
    type: Optional[str] = None
    namespace: Optional[str] = None
    description: Optional[str] = None
    owner_id: Optional[int] = None
    owner_resource: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    admin_graphql_api_id: Optional[str] = None


class Image(ShopifyRecord):
    product_id: Optional[int] = None
    position: Optional[int] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    width: Optional[int] = None
    height: Optional[int] = None
    src: Optional[str] = None
    alt: Optional[str] = None
    attachment: Optional[str] = None
    filename: Optional[str] = None
    variant_ids: Optional[List[int]] = None


class ProductOption(ShopifyRecord):
    product_id: Optional[int] = None
    name: Optional[str] = None
    position: Optional[int] = None
    values: Optional[List[str]] = None


class Variant(ShopifyRecord):
    product_id: Optional[int] = None
    title: Optional[str] = None
    sku: Optional[str] = None
    position: Optional[int] = None
    grams: Optional[int] = None
    inventory_policy: Optional[str] = None
    price: Optional[Decimal] = None
    compare_at_price: Optional[Decimal] = None
    fulfillment_service: Optional[str] = None
    inventory_management: Optional[str] = None
    inventory_item_id: Optional[int] = None
    option1: Optional[str] = None
    option2: Optional[str] = None
    option3: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    taxable: Optional[bool] = None
    barcode: Optional[str] = None
    image_id: Optional[int] = None
    inventory_quantity: Optional[int] = None
    weight: Optional[Decimal] = None
    weight_unit: Optional[str] = None
    old_inventory_quantity: Optional[int] = None
    requires_shipping: Optional[bool] = None
    metafields: Optional[List[Metafield]] = None


class Product(ShopifyRecord):
    title: Optional[str] = None
    body_html: Optional[str] = None
    vendor: Optional[str] = None
    product_type: Optional[str] = None
    handle: Optional[str] = None
    status: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    published_at: Optional[datetime] = None
    published_scope: Optional[str] = None
    tags: Optional[str] = None
    options: Optional[List[ProductOption]] = None
    variants: Optional[List[Variant]] = None
    image: Optional[Image] = None
    images: Optional[List[Image]] = None
    template_suffix: Optional[str] = None
    metafields_global_title_tag: Optional[str] = None
    metafields_global_description_tag: Optional[str] = None
    metafields: Optional[List[Metafield]] = None


class Page(ShopifyRecord):
    author: Optional[str] = None
    handle: Optional[str] = None
    title: Optional[str] = None
    body_html: Optional[str] = None
    template_suffix: Optional[str] = None
    shop_id: Optional[int] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    published_at: Optional[datetime] = None
    metafields: Optional[List[Metafield]] = None


class Redirect(ShopifyRecord):
    path: Optional[str] = None
    target: Optional[str] = None


class Webhook(ShopifyRecord):
    address: Optional[str] = None
    topic: Optional[str] = None
    format: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    fields: Optional[List[str]] = None
    metafield_namespaces: Optional[List[str]] = None


class CustomCollection(ShopifyRecord):
    handle: Optional[str] = None
    title: Optional[str] = None
    body_html: Optional[str] = None
    sort_order: Optional[str] = None
    template_suffix: Optional[str] = None
    image: Optional[Image] = None
    published: Optional[bool] = None
    published_at: Optional[datetime] = None
    published_scope: Optional[str] = None
    updated_at: Optional[datetime] = None
    metafields: Optional[List[Metafield]] = None


class Rule(BaseModel):
    column: Optional[str] = None
    relation: Optional[str] = None
    condition: Optional[str] = None


class SmartCollection(CustomCollection):
    rules: Optional[List[Rule]] = None
    disjunctive: Optional[bool] = None


class PrerequisiteSubtotalRange(BaseModel):
    greater_than_or_equal_to: Optional[str] = None


class PrerequisiteQuantityRange(BaseModel):
    greater_than_or_equal_to: Optional[int] = None


class PrerequisiteShippingPriceRange(BaseModel):
    less_than_or_equal_to: Optional[str] = None


class PrerequisiteToEntitlementQuantityRatio(BaseModel):
    prerequisite_quantity: Optional[int] = None
    entitled_quantity: Optional[int] = None


def _validate_money(value: str, field: str) -> str:
    """Reject strings that are not decimal amounts."""
    try:
        amount = Decimal(value)
    except (InvalidOperation, TypeError):
        raise ValidationError(f"Invalid money amount: {value!r}", field=field)
    if not amount.is_finite():
        raise ValidationError(f"Invalid money amount: {value!r}", field=field)
    return value


class PriceRule(ShopifyRecord):
    title: Optional[str] = None
    value_type: Optional[str] = None
    value: Optional[str] = None
    customer_selection: Optional[str] = None
    target_type: Optional[str] = None
    target_selection: Optional[str] = None
    allocation_method: Optional[str] = None
    allocation_limit: Optional[int] = None
    once_per_customer: Optional[bool] = None
    usage_limit: Optional[int] = None
    starts_at: Optional[datetime] = None
    ends_at: Optional[datetime] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    entitled_product_ids: Optional[List[int]] = None
    entitled_variant_ids: Optional[List[int]] = None
    entitled_collection_ids: Optional[List[int]] = None
    entitled_country_ids: Optional[List[int]] = None
    prerequisite_product_ids: Optional[List[int]] = None
    prerequisite_variant_ids: Optional[List[int]] = None
    prerequisite_collection_ids: Optional[List[int]] = None
    prerequisite_saved_search_ids: Optional[List[int]] = None
    prerequisite_customer_ids: Optional[List[int]] = None
    prerequisite_subtotal_range: Optional[PrerequisiteSubtotalRange] = None
    prerequisite_quantity_range: Optional[PrerequisiteQuantityRange] = None
    prerequisite_shipping_price_range: Optional[PrerequisiteShippingPriceRange] = None
    prerequisite_to_entitlement_quantity_ratio: Optional[PrerequisiteToEntitlementQuantityRatio] = None

    def set_prerequisite_subtotal_range(self, greater_than_or_equal_to: Optional[str]) -> None:
        """Set the minimum subtotal, or clear it with None."""
        if greater_than_or_equal_to is None:
            self.prerequisite_subtotal_range = None
            return
        _validate_money(greater_than_or_equal_to, "prerequisite_subtotal_range")
        self.prerequisite_subtotal_range = PrerequisiteSubtotalRange(
            greater_than_or_equal_to=greater_than_or_equal_to
        )

    def set_prerequisite_quantity_range(self, greater_than_or_equal_to: Optional[int]) -> None:
        """Set the minimum quantity, or clear it with None."""
        if greater_than_or_equal_to is None:
            self.prerequisite_quantity_range = None
            return
        self.prerequisite_quantity_range = PrerequisiteQuantityRange(
            greater_than_or_equal_to=greater_than_or_equal_to
        )

    def set_prerequisite_shipping_price_range(self, less_than_or_equal_to: Optional[str]) -> None:
        """Set the maximum shipping price, or clear it with None."""
        if less_than_or_equal_to is None:
            self.prerequisite_shipping_price_range = None
            return
        _validate_money(less_than_or_equal_to, "prerequisite_shipping_price_range")
        self.prerequisite_shipping_price_range = PrerequisiteShippingPriceRange(
            less_than_or_equal_to=less_than_or_equal_to
        )

    def set_prerequisite_to_entitlement_quantity_ratio(
        self,
        prerequisite_quantity: Optional[int],
        entitled_quantity: Optional[int]
    ) -> None:
        """Set the buy X get Y ratio; clearing both removes it entirely."""
        if prerequisite_quantity is None and entitled_quantity is None:
            self.prerequisite_to_entitlement_quantity_ratio = None
            return
        self.prerequisite_to_entitlement_quantity_ratio = PrerequisiteToEntitlementQuantityRatio(
            prerequisite_quantity=prerequisite_quantity,
            entitled_quantity=entitled_quantity,
        )


class DiscountCode(ShopifyRecord):
    price_rule_id: Optional[int] = None
    code: Optional[str] = None
    amount: Optional[Decimal] = None
    type: Optional[str] = None
    usage_count: Optional[int] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class GiftCard(ShopifyRecord):
    initial_value: Optional[Decimal] = None
    balance: Optional[Decimal] = None
    code: Optional[str] = None
    masked_code: Optional[str] = None
    currency: Optional[str] = None
    note: Optional[str] = None
    template_suffix: Optional[str] = None
    last_characters: Optional[str] = None
    expires_on: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    disabled_at: Optional[datetime] = None
    api_client_id: Optional[int] = None
    order_id: Optional[int] = None
    user_id: Optional[int] = None
    customer_id: Optional[int] = None
    line_item_id: Optional[int] = None


class Location(ShopifyRecord):
    name: Optional[str] = None
    address1: Optional[str] = None
    address2: Optional[str] = None
    city: Optional[str] = None
    zip: Optional[str] = None
    province: Optional[str] = None
    country: Optional[str] = None
    phone: Optional[str] = None
    country_code: Optional[str] = None
    country_name: Optional[str] = None
    province_code: Optional[str] = None
    legacy: Optional[bool] = None
    active: Optional[bool] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
