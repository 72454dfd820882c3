"""
Cursor pagination for Shopify REST list endpoints.

Shopify signals further pages through a Link header:

    Link: <https://shop.myshopify.com/admin/api/2024-10/products.json?page_info=abc&limit=50>; rel="next",
          <https://shop.myshopify.com/admin/api/2024-10/products.json?page_info=xyz&limit=50>; rel="previous"

The `page_info` token is opaque. It is copied verbatim into the ListOptions
of the next call and never interpreted.
"""

import re
from typing import Optional, List, Tuple
from urllib.parse import urlsplit

from .constants import ERROR_MESSAGES, PaginationParams
from .exceptions import DecodingError
from .models import ListOptions, Pagination
from .utils import parse_query_string, first_query_value

_LINK_SEGMENT = re.compile(r'^\s*<([^>]+)>\s*;\s*rel="?([^"]*)"?\s*$')
_RELATIONS = (PaginationParams.REL_NEXT, PaginationParams.REL_PREVIOUS)
_BASE10_INTEGER = re.compile(r'[+-]?[0-9]+')


def _split_segments(link_header: str) -> List[Tuple[str, str]]:
    """
    Split a Link header into (url, rel) pairs for the recognized relations.

    Raises:
        DecodingError: If a segment is not of the form `<url>; rel="name"`,
            or no segment is a next/previous link
    """
    links = []
    for segment in link_header.split(','):
        match = _LINK_SEGMENT.match(segment)
        if not match:
            raise DecodingError(ERROR_MESSAGES['invalid_link_header'])
        url, rel = match.group(1), match.group(2).strip()
        if rel in _RELATIONS:
            links.append((url, rel))

    if not links:
        raise DecodingError(ERROR_MESSAGES['invalid_link_header'])
    return links


def _page_options_from_url(url: str) -> ListOptions:
    """
    Turn one pagination URL into continuation options.

    Raises:
        DecodingError: If the URL is not valid or has no page_info
        ValueError: If the query has a malformed escape or limit is not a base-10 integer
    """
    try:
        parsed = urlsplit(url)
    except ValueError:
        raise DecodingError(ERROR_MESSAGES['invalid_link_url'])
    if not parsed.scheme or not parsed.netloc:
        raise DecodingError(ERROR_MESSAGES['invalid_link_url'])

    params = parse_query_string(parsed.query)

    page_info = first_query_value(params, PaginationParams.PAGE_INFO)
    if not page_info:
        raise DecodingError(ERROR_MESSAGES['missing_page_info'])

    limit: Optional[int] = None
    raw_limit = first_query_value(params, PaginationParams.LIMIT)
    if raw_limit:
        if not _BASE10_INTEGER.fullmatch(raw_limit):
            raise ValueError(f"invalid literal for int() with base 10: {raw_limit!r}")
        limit = int(raw_limit)

    return ListOptions.continuation(page_info, limit=limit)


def extract_pagination(link_header: Optional[str]) -> Pagination:
    """
    Extract next/previous page options from a Link header value.

    Args:
        link_header: Raw Link header, or None when the response had none

    Returns:
        Pagination with whichever relations were present. An empty header
        yields an empty Pagination.

    Raises:
        DecodingError: On a malformed header, an invalid URL or a missing page_info
        ValueError: Propagated unchanged from the query parser or int()

    Example:
        pagination = extract_pagination('<https://x.myshopify.com/a.json?page_info=foo&limit=2>; rel="next"')
        pagination.next_page_options  # ListOptions(page_info='foo', limit=2)
    """
    if not link_header or not link_header.strip():
        return Pagination()

    next_page_options = None
    previous_page_options = None

    for url, rel in _split_segments(link_header):
        options = _page_options_from_url(url)
        if rel == PaginationParams.REL_NEXT:
            next_page_options = options
        else:
            previous_page_options = options

    return Pagination(
        next_page_options=next_page_options,
        previous_page_options=previous_page_options,
    )
