"""
Shopify REST Methods Library - A typed Python client for the Shopify Admin REST API.

Every resource (products, variants, pages, collections, price rules, gift
cards, metafields, ...) shares one request dispatcher, one JSON envelope
codec, one error taxonomy and one cursor pagination protocol.

Usage:
    from shopify_rest_methods import ShopifyRestClient, ClientConfig, ListOptions

    client = ShopifyRestClient(ClientConfig(shop_name="fooshop", access_token="shpat_..."))

    pages, pagination = client.pages.list_with_pagination(ListOptions(limit=50))
    if pagination.has_next_page:
        more, pagination = client.pages.list_with_pagination(pagination.next_page_options)
"""

from .client import ShopifyRestClient
from .config import ClientConfig
from .envelope import Envelope
from .models import ListOptions, CountOptions, GiftCardSearchOptions, Pagination
from .pagination import extract_pagination
from .exceptions import (
    ShopifyError,
    DecodingError,
    APIError,
    UnknownError,
    RateLimitError,
    AuthenticationError,
    ValidationError,
)

__version__ = "0.1.0"
__author__ = "ECLA Development Team"
__description__ = "A typed Python client for the Shopify Admin REST API"

__all__ = [
    "ShopifyRestClient",
    "ClientConfig",
    "Envelope",
    "ListOptions",
    "CountOptions",
    "GiftCardSearchOptions",
    "Pagination",
    "extract_pagination",
    "ShopifyError",
    "DecodingError",
    "APIError",
    "UnknownError",
    "RateLimitError",
    "AuthenticationError",
    "ValidationError",
]
