"""
Generic resource services.

One set of List/Get/Create/Update/Delete/Count operations, parameterized by a
path template and an Envelope, serves every REST resource. Nested resources
put their parent ids in the template (e.g. 'products/{product_id}/images')
and take them as keyword arguments:

    client.images.list(product_id=1)
    client.discount_codes.get(507, price_rule_id=12)
    client.variants.metafields(808, product_id=1).list()
"""

from typing import Any, Generic, Iterator, List, Mapping, Optional, Tuple, TypeVar, Union

from pydantic import BaseModel

from .constants import Endpoints
from .envelope import Envelope
from .exceptions import ValidationError
from .models import Pagination, QueryOptions
from .schemas import (
    Product,
    Variant,
    Image,
    Page,
    Redirect,
    Webhook,
    CustomCollection,
    SmartCollection,
    PriceRule,
    DiscountCode,
    GiftCard,
    Location,
    Metafield,
)
from .utils import join_path, json_path, metafield_path_prefix

T = TypeVar("T", bound=BaseModel)

PRODUCT_ENVELOPE = Envelope("product", "products", Product)
VARIANT_ENVELOPE = Envelope("variant", "variants", Variant)
IMAGE_ENVELOPE = Envelope("image", "images", Image)
PAGE_ENVELOPE = Envelope("page", "pages", Page)
REDIRECT_ENVELOPE = Envelope("redirect", "redirects", Redirect)
WEBHOOK_ENVELOPE = Envelope("webhook", "webhooks", Webhook)
CUSTOM_COLLECTION_ENVELOPE = Envelope("custom_collection", "custom_collections", CustomCollection)
SMART_COLLECTION_ENVELOPE = Envelope("smart_collection", "smart_collections", SmartCollection)
PRICE_RULE_ENVELOPE = Envelope("price_rule", "price_rules", PriceRule)
DISCOUNT_CODE_ENVELOPE = Envelope("discount_code", "discount_codes", DiscountCode)
GIFT_CARD_ENVELOPE = Envelope("gift_card", "gift_cards", GiftCard)
LOCATION_ENVELOPE = Envelope("location", "locations", Location)
METAFIELD_ENVELOPE = Envelope("metafield", "metafields", Metafield)

Record = Union[BaseModel, Mapping[str, Any]]


def _resource_id(resource: Record) -> Optional[int]:
    if isinstance(resource, BaseModel):
        return getattr(resource, "id", None)
    return resource.get("id")


class ReadableResource(Generic[T]):
    """
    Read operations over one REST collection.

    Args:
        client: ShopifyRestClient used to dispatch requests
        envelope: Envelope names and record model
        path_template: Collection path, optionally with '{parent_id}' fields
        metafield_owner: Owner path for nested metafields, if the resource has any
    """

    def __init__(self, client, envelope: Envelope[T], path_template: str,
                 metafield_owner: Optional[str] = None):
        self.client = client
        self.envelope = envelope
        self.path_template = path_template
        self.metafield_owner = metafield_owner

    def _format(self, template: str, path_params: Mapping[str, Any]) -> str:
        try:
            return template.format(**path_params)
        except KeyError as e:
            name = e.args[0]
            raise ValidationError(
                f"{name} is required for {self.envelope.plural}", field=name
            )

    def collection_path(self, **path_params) -> str:
        return self._format(self.path_template, path_params)

    def item_path(self, resource_id: Any, **path_params) -> str:
        return join_path(self.collection_path(**path_params), resource_id)

    def list(self, options: QueryOptions = None, **path_params) -> List[T]:
        return self.client.list(json_path(self.collection_path(**path_params)), self.envelope, options)

    def list_with_pagination(self, options: QueryOptions = None,
                             **path_params) -> Tuple[List[T], Pagination]:
        return self.client.list_with_pagination(
            json_path(self.collection_path(**path_params)), self.envelope, options
        )

    def iter_pages(self, options: QueryOptions = None, **path_params) -> Iterator[List[T]]:
        """Yield each page in turn, following next_page_options until exhausted."""
        while True:
            items, pagination = self.list_with_pagination(options, **path_params)
            yield items
            if not pagination.has_next_page:
                return
            options = pagination.next_page_options

    def count(self, options: QueryOptions = None, **path_params) -> int:
        return self.client.count(json_path(self.collection_path(**path_params), Endpoints.COUNT), options)

    def get(self, resource_id: int, options: QueryOptions = None, **path_params) -> Optional[T]:
        return self.client.get(json_path(self.item_path(resource_id, **path_params)), self.envelope, options)

    def metafields(self, owner_id: int, **path_params) -> "MetafieldService":
        """Metafields nested under one record of this resource."""
        if not self.metafield_owner:
            raise ValidationError(f"{self.envelope.plural} do not have metafields")
        owner = self._format(self.metafield_owner, path_params)
        return MetafieldService(self.client, owner=owner, owner_id=owner_id)


class WritableResource(ReadableResource[T]):
    """Adds create and update."""

    def _require_id(self, resource: Record) -> int:
        resource_id = _resource_id(resource)
        if resource_id is None:
            raise ValidationError(f"{self.envelope.singular} id is required", field="id")
        return resource_id

    def create(self, resource: Record, **path_params) -> Optional[T]:
        return self.client.post(json_path(self.collection_path(**path_params)), resource, self.envelope)

    def update(self, resource: Record, **path_params) -> Optional[T]:
        path = self.item_path(self._require_id(resource), **path_params)
        return self.client.put(json_path(path), resource, self.envelope)


class ResourceService(WritableResource[T]):
    """Full CRUD plus count."""

    def delete(self, resource_id: int, **path_params) -> None:
        self.client.delete(json_path(self.item_path(resource_id, **path_params)))


class VariantService(ResourceService[Variant]):
    """
    Variants are listed, created and deleted under their product but fetched
    and updated at the top-level 'variants/{id}' path.
    """

    def get(self, resource_id: int, options: QueryOptions = None, **path_params) -> Optional[Variant]:
        return self.client.get(json_path(Endpoints.VARIANT, resource_id), self.envelope, options)

    def update(self, resource: Record, **path_params) -> Optional[Variant]:
        path = json_path(Endpoints.VARIANT, self._require_id(resource))
        return self.client.put(path, resource, self.envelope)


class GiftCardService(WritableResource[GiftCard]):
    """Gift cards cannot be deleted, only disabled."""

    def search(self, options: QueryOptions = None) -> List[GiftCard]:
        return self.client.list(json_path(self.collection_path(), Endpoints.SEARCH), self.envelope, options)

    def disable(self, gift_card_id: int) -> Optional[GiftCard]:
        value, _ = self.client.perform(
            "POST", json_path(self.item_path(gift_card_id), Endpoints.DISABLE), envelope=self.envelope
        )
        return value


class MetafieldService(ResourceService[Metafield]):
    """
    Metafields for one owner, or shop-level metafields when no owner is given.

    The owner is a path tag such as 'products', 'collections' or
    'products/1/variants'.
    """

    def __init__(self, client, owner: Optional[str] = None, owner_id: Optional[int] = None):
        super().__init__(client, METAFIELD_ENVELOPE, metafield_path_prefix(owner, owner_id))
        self.owner = owner
        self.owner_id = owner_id
