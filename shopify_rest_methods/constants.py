"""
Constants and configuration for Shopify REST Methods Library.
"""

# API Configuration
DEFAULT_API_VERSION = "2024-10"
DEFAULT_TIMEOUT = 30  # seconds
DEFAULT_USER_AGENT = "shopify-rest-methods/0.1.0"
SHOP_DOMAIN_SUFFIX = ".myshopify.com"

# Headers
class Headers:
    """HTTP header names and defaults."""

    ACCESS_TOKEN = "X-Shopify-Access-Token"
    LINK = "Link"
    RETRY_AFTER = "Retry-After"

    DEFAULT_HEADERS = {
        "Content-Type": "application/json",
        "Accept": "application/json",
    }


class StatusCodes:
    """HTTP status codes the dispatcher cares about."""

    OK = 200
    CREATED = 201
    MULTIPLE_CHOICES = 300
    TOO_MANY_REQUESTS = 429

    @classmethod
    def is_success(cls, status_code: int) -> bool:
        return cls.OK <= status_code < cls.MULTIPLE_CHOICES


# Resource base paths (relative to the admin path prefix)
class Endpoints:
    """Shopify Admin REST resource paths."""

    PRODUCTS = "products"
    VARIANTS = "products/{product_id}/variants"
    VARIANT = "variants"
    IMAGES = "products/{product_id}/images"
    PAGES = "pages"
    REDIRECTS = "redirects"
    WEBHOOKS = "webhooks"
    CUSTOM_COLLECTIONS = "custom_collections"
    SMART_COLLECTIONS = "smart_collections"
    PRICE_RULES = "price_rules"
    DISCOUNT_CODES = "price_rules/{price_rule_id}/discount_codes"
    GIFT_CARDS = "gift_cards"
    LOCATIONS = "locations"
    METAFIELDS = "metafields"

    COUNT = "count"
    SEARCH = "search"
    DISABLE = "disable"
    SUFFIX = ".json"


# Metafield owner path tags
class MetafieldOwners:
    """Path segments under which metafields are nested."""

    PRODUCTS = "products"
    VARIANTS = "products/{product_id}/variants"
    PAGES = "pages"
    COLLECTIONS = "collections"


# Pagination
class PaginationParams:
    """Query parameter and relation names used by cursor pagination."""

    PAGE_INFO = "page_info"
    LIMIT = "limit"
    REL_NEXT = "next"
    REL_PREVIOUS = "previous"


# Common error messages
ERROR_MESSAGES = {
    'unknown': 'Unknown Error',
    'invalid_link_header': 'could not extract pagination link header',
    'invalid_link_url': 'pagination does not contain a valid URL',
    'missing_page_info': 'page_info is missing',
    'not_an_object': 'response body is not a JSON object',
    'missing_credentials': 'Missing required credentials',
    'empty_shop': 'Shop name cannot be empty',
}

# Environment variable names
ENV_VARS = {
    'shop_name': 'SHOPIFY_SHOP_NAME',
    'access_token': 'SHOPIFY_ACCESS_TOKEN',
    'api_key': 'SHOPIFY_API_KEY',
    'password': 'SHOPIFY_PASSWORD',
    'api_version': 'SHOPIFY_API_VERSION',
    'timeout': 'SHOPIFY_TIMEOUT',
}
