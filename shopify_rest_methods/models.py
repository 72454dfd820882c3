"""
Request option and pagination models for Shopify REST Methods Library.

These are caller-constructed, immutable values consumed once per call.
"""

from dataclasses import dataclass, field, fields as dataclass_fields
from datetime import datetime
from typing import Optional, Dict, Any, List, Mapping, Union

from .constants import PaginationParams
from .exceptions import ValidationError
from .utils import encode_query_params


@dataclass(frozen=True)
class ListOptions:
    """
    Query parameters for list endpoints.

    Two shapes are valid: an initial query (any filters, no `page_info`) or a
    continuation query (`page_info` plus an optional `limit`). Shopify rejects
    other filters alongside a cursor, so that combination is refused here.

    Attributes:
        page_info: Opaque cursor taken from a previous response
        limit: Maximum number of results per page
        since_id: Only return results after this id
        created_at_min / created_at_max: Creation date bounds
        updated_at_min / updated_at_max: Update date bounds
        order: Sort order, e.g. "created_at desc"
        fields: Comma separated list of fields to return
        ids: Restrict results to these ids
        vendor: Product vendor filter
        filters: Any other resource-specific query parameters
    """
    page_info: Optional[str] = None
    limit: Optional[int] = None
    since_id: Optional[int] = None
    created_at_min: Optional[datetime] = None
    created_at_max: Optional[datetime] = None
    updated_at_min: Optional[datetime] = None
    updated_at_max: Optional[datetime] = None
    order: Optional[str] = None
    fields: Optional[str] = None
    ids: Optional[List[int]] = field(default=None, hash=False)
    vendor: Optional[str] = None
    filters: Dict[str, Any] = field(default_factory=dict, hash=False)

    def __post_init__(self):
        if self.page_info:
            extra = [
                name for name, value in self._filter_params().items()
                if encode_query_params({name: value})
            ]
            if extra:
                raise ValidationError(
                    f"page_info cannot be combined with other filters: {', '.join(sorted(extra))}",
                    field="page_info",
                )

    @classmethod
    def continuation(cls, page_info: str, limit: Optional[int] = None) -> "ListOptions":
        """Build continuation options from a cursor."""
        return cls(page_info=page_info, limit=limit)

    @property
    def is_continuation(self) -> bool:
        return bool(self.page_info)

    def _filter_params(self) -> Dict[str, Any]:
        params = {
            f.name: getattr(self, f.name)
            for f in dataclass_fields(self)
            if f.name not in ("page_info", "limit", "filters")
        }
        params.update(self.filters)
        return params

    def to_params(self) -> Dict[str, str]:
        """Serialize to query parameters, skipping empty fields."""
        params: Dict[str, Any] = {
            PaginationParams.PAGE_INFO: self.page_info,
            PaginationParams.LIMIT: self.limit,
        }
        params.update(self._filter_params())
        return encode_query_params(params)


@dataclass(frozen=True)
class CountOptions:
    """
    Filters for count endpoints.

    Attributes:
        created_at_min / created_at_max: Creation date bounds
        updated_at_min / updated_at_max: Update date bounds
        published_at_min / published_at_max: Publication date bounds
        published_status: published, unpublished or any
        status: Resource status filter
        filters: Any other resource-specific query parameters
    """
    created_at_min: Optional[datetime] = None
    created_at_max: Optional[datetime] = None
    updated_at_min: Optional[datetime] = None
    updated_at_max: Optional[datetime] = None
    published_at_min: Optional[datetime] = None
    published_at_max: Optional[datetime] = None
    published_status: Optional[str] = None
    status: Optional[str] = None
    filters: Dict[str, Any] = field(default_factory=dict, hash=False)

    def to_params(self) -> Dict[str, str]:
        """Serialize to query parameters, skipping empty fields."""
        params = {f.name: getattr(self, f.name) for f in dataclass_fields(self) if f.name != "filters"}
        params.update(self.filters)
        return encode_query_params(params)


@dataclass(frozen=True)
class GiftCardSearchOptions:
    """Query options for the gift card search endpoint."""
    query: Optional[str] = None
    order: Optional[str] = None
    fields: Optional[str] = None
    limit: Optional[int] = None
    page_info: Optional[str] = None

    def to_params(self) -> Dict[str, str]:
        return encode_query_params({f.name: getattr(self, f.name) for f in dataclass_fields(self)})


@dataclass(frozen=True)
class Pagination:
    """
    Continuation cursors extracted from a list response.

    Both fields are None when the response carried no Link header.
    """
    next_page_options: Optional[ListOptions] = None
    previous_page_options: Optional[ListOptions] = None

    @property
    def has_next_page(self) -> bool:
        return self.next_page_options is not None

    @property
    def has_previous_page(self) -> bool:
        return self.previous_page_options is not None


QueryOptions = Union[ListOptions, CountOptions, GiftCardSearchOptions, Mapping[str, Any], None]


def to_query_params(options: QueryOptions) -> Dict[str, str]:
    """Serialize any supported options value into query parameters."""
    if options is None:
        return {}
    if isinstance(options, (ListOptions, CountOptions, GiftCardSearchOptions)):
        return options.to_params()
    return encode_query_params(options)
