"""
Utility functions for Shopify REST Methods Library.

Provides helpers for shop domain normalization, path building and query
string encoding/decoding.
"""

import re
from datetime import date, datetime
from decimal import Decimal
from typing import Union, Optional, Dict, Any, List, Mapping
from urllib.parse import parse_qs

from .constants import Endpoints, SHOP_DOMAIN_SUFFIX

_PERCENT_ESCAPE = re.compile(r'%(?![0-9A-Fa-f]{2})')


def normalize_shop_domain(shop_name: str) -> str:
    """
    Normalize a shop name into its full myshopify domain.

    Examples:
        >>> normalize_shop_domain('fooshop')
        'fooshop.myshopify.com'
        >>> normalize_shop_domain('https://fooshop.myshopify.com/')
        'fooshop.myshopify.com'
    """
    domain = shop_name.strip()

    # Remove protocol if present
    domain = domain.replace("https://", "").replace("http://", "").rstrip('/')

    # Add .myshopify.com if no domain was given
    if not domain.endswith(SHOP_DOMAIN_SUFFIX) and '.' not in domain:
        domain = f"{domain}{SHOP_DOMAIN_SUFFIX}"

    return domain


def join_path(*segments: Union[str, int]) -> str:
    """
    Join path segments with '/', skipping empty ones.

    Examples:
        >>> join_path('products', 1, 'metafields')
        'products/1/metafields'
    """
    parts = [str(segment).strip('/') for segment in segments if segment not in (None, '')]
    return '/'.join(part for part in parts if part)


def json_path(*segments: Union[str, int]) -> str:
    """Build a resource path ending in '.json'."""
    return f"{join_path(*segments)}{Endpoints.SUFFIX}"


def metafield_path_prefix(owner: Optional[str] = None, owner_id: Optional[int] = None) -> str:
    """
    Path under which metafields live for an owner resource.

    Examples:
        >>> metafield_path_prefix()
        'metafields'
        >>> metafield_path_prefix('products', 1)
        'products/1/metafields'
    """
    if not owner:
        return Endpoints.METAFIELDS
    return join_path(owner, owner_id, Endpoints.METAFIELDS)


def format_query_value(value: Any) -> Optional[str]:
    """
    Render a single option value as a query parameter string.

    Returns None for values that should be skipped (None, empty strings and
    empty sequences).
    """
    if value is None:
        return None
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, datetime):
        return value.isoformat()
    if isinstance(value, date):
        return value.isoformat()
    if isinstance(value, Decimal):
        return str(value)
    if isinstance(value, (list, tuple, set)):
        items = [format_query_value(item) for item in value]
        items = [item for item in items if item]
        return ",".join(items) if items else None
    text = str(value)
    return text if text != "" else None


def encode_query_params(params: Optional[Mapping[str, Any]]) -> Dict[str, str]:
    """Drop empty values and stringify the rest."""
    if not params:
        return {}
    encoded = {}
    for key, value in params.items():
        formatted = format_query_value(value)
        if formatted is not None:
            encoded[key] = formatted
    return encoded


def parse_query_string(raw_query: str) -> Dict[str, List[str]]:
    """
    Parse a URL query string, rejecting malformed percent-escapes.

    Escapes must decode to UTF-8 so opaque tokens are never altered.

    Raises:
        ValueError: If the query contains an invalid escape such as '%in'
        UnicodeDecodeError: If an escaped value is not valid UTF-8

    Examples:
        >>> parse_query_string('page_info=foo&limit=2')
        {'page_info': ['foo'], 'limit': ['2']}
    """
    match = _PERCENT_ESCAPE.search(raw_query)
    if match:
        escape = raw_query[match.start():match.start() + 3]
        raise ValueError(f'invalid URL escape "{escape}"')
    return parse_qs(raw_query, keep_blank_values=True, errors="strict")


def first_query_value(params: Mapping[str, List[str]], key: str) -> str:
    """First value for a query key, or '' when it is absent."""
    values = params.get(key)
    return values[0] if values else ""
