"""
Unit tests for shopify_rest_methods.models and shopify_rest_methods.schemas.
"""

from datetime import datetime, timezone

import pytest
import sys
import os

# Add the parent directory to the path so we can import the module
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from shopify_rest_methods.models import (
    ListOptions,
    CountOptions,
    GiftCardSearchOptions,
    Pagination,
    to_query_params,
)
from shopify_rest_methods.schemas import PriceRule, Product, Variant
from shopify_rest_methods.exceptions import ValidationError


class TestListOptions:
    """Test list query options."""

    def test_empty_options(self):
        assert ListOptions().to_params() == {}

    def test_initial_query(self):
        options = ListOptions(
            limit=50,
            since_id=1000,
            created_at_min=datetime(2024, 1, 1, tzinfo=timezone.utc),
            ids=[1, 2, 3],
            fields="id,title",
        )

        assert options.to_params() == {
            "limit": "50",
            "since_id": "1000",
            "created_at_min": "2024-01-01T00:00:00+00:00",
            "ids": "1,2,3",
            "fields": "id,title",
        }
        assert not options.is_continuation

    def test_extra_filters(self):
        options = ListOptions(limit=10, filters={"status": "active", "published_status": None})

        assert options.to_params() == {"limit": "10", "status": "active"}

    def test_continuation(self):
        options = ListOptions.continuation("abc123", limit=50)

        assert options == ListOptions(page_info="abc123", limit=50)
        assert options.is_continuation
        assert options.to_params() == {"page_info": "abc123", "limit": "50"}

    def test_continuation_without_limit(self):
        assert ListOptions.continuation("abc123").to_params() == {"page_info": "abc123"}

    def test_page_info_with_filters_is_rejected(self):
        with pytest.raises(ValidationError) as exc_info:
            ListOptions(page_info="abc123", vendor="Acme")

        assert exc_info.value.field == "page_info"
        assert "vendor" in str(exc_info.value)

    def test_page_info_with_extra_filter_is_rejected(self):
        with pytest.raises(ValidationError):
            ListOptions(page_info="abc123", filters={"status": "active"})

    def test_page_info_with_empty_filters_is_allowed(self):
        options = ListOptions(page_info="abc123", ids=[], filters={"status": None})

        assert options.to_params() == {"page_info": "abc123"}

    def test_options_are_hashable(self):
        continuation = ListOptions.continuation("abc123", limit=2)
        filtered = ListOptions(limit=10, ids=[1, 2], filters={"status": "active"})

        assert hash(continuation) == hash(ListOptions(page_info="abc123", limit=2))
        assert hash(filtered) == hash(ListOptions(limit=10, ids=[1, 2], filters={"status": "active"}))
        assert len({continuation, ListOptions.continuation("abc123", limit=2)}) == 1

    def test_options_are_immutable(self):
        options = ListOptions(limit=5)

        with pytest.raises(AttributeError):
            options.limit = 10


class TestCountOptions:
    """Test count query options."""

    def test_count_options(self):
        options = CountOptions(published_status="published", status="active")

        assert options.to_params() == {"published_status": "published", "status": "active"}

    def test_count_options_are_hashable(self):
        options = CountOptions(status="active", filters={"vendor": "Acme"})

        assert hash(options) == hash(CountOptions(status="active", filters={"vendor": "Acme"}))

    def test_count_options_dates(self):
        options = CountOptions(updated_at_min=datetime(2024, 5, 1, 12, 30))

        assert options.to_params() == {"updated_at_min": "2024-05-01T12:30:00"}


class TestGiftCardSearchOptions:
    def test_search_options(self):
        options = GiftCardSearchOptions(query="last_characters:mnop", limit=10)

        assert options.to_params() == {"query": "last_characters:mnop", "limit": "10"}


class TestToQueryParams:
    """Test serializing any supported options value."""

    def test_none(self):
        assert to_query_params(None) == {}

    def test_mapping(self):
        assert to_query_params({"limit": 5, "published": True, "vendor": ""}) == {
            "limit": "5",
            "published": "true",
        }

    def test_options(self):
        assert to_query_params(ListOptions(limit=5)) == {"limit": "5"}


class TestPagination:
    def test_empty(self):
        pagination = Pagination()

        assert not pagination.has_next_page
        assert not pagination.has_previous_page

    def test_next_only(self):
        pagination = Pagination(next_page_options=ListOptions.continuation("foo"))

        assert pagination.has_next_page
        assert not pagination.has_previous_page

    def test_pagination_is_hashable(self):
        pagination = Pagination(next_page_options=ListOptions.continuation("foo", limit=2))

        assert hash(pagination) == hash(Pagination(next_page_options=ListOptions.continuation("foo", limit=2)))


class TestPriceRuleSetters:
    """Test the prerequisite helpers on PriceRule."""

    @pytest.fixture
    def price_rule(self):
        return PriceRule(id=1, title="SUMMER", value_type="percentage", value="-10.0")

    def test_subtotal_range(self, price_rule):
        price_rule.set_prerequisite_subtotal_range("40.00")

        assert price_rule.prerequisite_subtotal_range.greater_than_or_equal_to == "40.00"

    def test_subtotal_range_cleared(self, price_rule):
        price_rule.set_prerequisite_subtotal_range("40.00")
        price_rule.set_prerequisite_subtotal_range(None)

        assert price_rule.prerequisite_subtotal_range is None

    @pytest.mark.parametrize("amount", ["forty", "", "NaN", "Infinity"])
    def test_subtotal_range_rejects_invalid_amounts(self, price_rule, amount):
        with pytest.raises(ValidationError) as exc_info:
            price_rule.set_prerequisite_subtotal_range(amount)

        assert exc_info.value.field == "prerequisite_subtotal_range"
        assert price_rule.prerequisite_subtotal_range is None

    def test_quantity_range(self, price_rule):
        price_rule.set_prerequisite_quantity_range(2)

        assert price_rule.prerequisite_quantity_range.greater_than_or_equal_to == 2

        price_rule.set_prerequisite_quantity_range(None)
        assert price_rule.prerequisite_quantity_range is None

    def test_shipping_price_range(self, price_rule):
        price_rule.set_prerequisite_shipping_price_range("10.00")

        assert price_rule.prerequisite_shipping_price_range.less_than_or_equal_to == "10.00"

    def test_shipping_price_range_rejects_invalid_amount(self, price_rule):
        with pytest.raises(ValidationError):
            price_rule.set_prerequisite_shipping_price_range("ten")

    def test_entitlement_ratio(self, price_rule):
        price_rule.set_prerequisite_to_entitlement_quantity_ratio(2, 1)

        ratio = price_rule.prerequisite_to_entitlement_quantity_ratio
        assert ratio.prerequisite_quantity == 2
        assert ratio.entitled_quantity == 1

    def test_entitlement_ratio_partial(self, price_rule):
        price_rule.set_prerequisite_to_entitlement_quantity_ratio(None, 1)

        ratio = price_rule.prerequisite_to_entitlement_quantity_ratio
        assert ratio.prerequisite_quantity is None
        assert ratio.entitled_quantity == 1

    def test_entitlement_ratio_cleared(self, price_rule):
        price_rule.set_prerequisite_to_entitlement_quantity_ratio(2, 1)
        price_rule.set_prerequisite_to_entitlement_quantity_ratio(None, None)

        assert price_rule.prerequisite_to_entitlement_quantity_ratio is None

    def test_ranges_are_serialized(self, price_rule):
        price_rule.set_prerequisite_subtotal_range("40.00")

        dumped = price_rule.model_dump(mode="json", exclude_none=True)

        assert dumped["prerequisite_subtotal_range"] == {"greater_than_or_equal_to": "40.00"}
        assert "prerequisite_quantity_range" not in dumped


class TestRecords:
    """Test decoding nested resource records."""

    def test_product_with_variants(self):
        product = Product.model_validate({
            "id": 632910392,
            "title": "IPod Nano - 8GB",
            "variants": [{"id": 808950810, "price": "199.00", "sku": "IPOD2008PINK"}],
            "images": [{"id": 850703190, "src": "https://cdn.shopify.com/ipod-nano.png"}],
        })

        assert product.variants[0] == Variant(id=808950810, price="199.00", sku="IPOD2008PINK")
        assert str(product.variants[0].price) == "199.00"
        assert product.images[0].src == "https://cdn.shopify.com/ipod-nano.png"
