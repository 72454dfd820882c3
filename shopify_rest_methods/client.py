"""
Main ShopifyRestClient class for interacting with the Shopify Admin REST API.
"""

import logging
import threading
from typing import Any, Dict, List, Mapping, Optional, Tuple, Union

import requests

from .config import ClientConfig
from .constants import Endpoints, Headers, StatusCodes, MetafieldOwners
from .envelope import Envelope, decode_count
from .exceptions import create_exception_from_response
from .models import Pagination, QueryOptions, to_query_params
from .pagination import extract_pagination
from .resources import (
    ReadableResource,
    ResourceService,
    VariantService,
    GiftCardService,
    MetafieldService,
    PRODUCT_ENVELOPE,
    VARIANT_ENVELOPE,
    IMAGE_ENVELOPE,
    PAGE_ENVELOPE,
    REDIRECT_ENVELOPE,
    WEBHOOK_ENVELOPE,
    CUSTOM_COLLECTION_ENVELOPE,
    SMART_COLLECTION_ENVELOPE,
    PRICE_RULE_ENVELOPE,
    DISCOUNT_CODE_ENVELOPE,
    GIFT_CARD_ENVELOPE,
    LOCATION_ENVELOPE,
)

# Set up logging
logger = logging.getLogger(__name__)


class ShopifyRestClient:
    """
    Client for the Shopify Admin REST API.

    Every resource service routes through `perform`, which issues exactly one
    HTTP request, classifies failures and decodes the JSON envelope.

    A client can be shared between threads. Unless a session is supplied,
    each thread gets its own requests.Session. A supplied session is used
    from every thread.

    Example:
        client = ShopifyRestClient(ClientConfig(shop_name="fooshop", access_token="shpat_..."))

        products, pagination = client.products.list_with_pagination(ListOptions(limit=50))
        while pagination.has_next_page:
            products, pagination = client.products.list_with_pagination(pagination.next_page_options)
    """

    def __init__(self, config: Optional[ClientConfig] = None,
                 session: Optional[requests.Session] = None):
        """
        Initialize the client.

        Args:
            config: Connection settings (defaults to ClientConfig.from_env())
            session: requests session to use for every call (one session per
                thread is created if omitted)

        Raises:
            AuthenticationError: If no credentials are configured
            ValidationError: If the shop name is empty
        """
        self.config = config or ClientConfig.from_env()
        self.logger = self.config.logger or logger
        self._session = session
        self._local = threading.local()
        self._owned_sessions: List[requests.Session] = []
        self._sessions_lock = threading.Lock()
        self.headers = self.config.default_headers()

        self.products = ResourceService(
            self, PRODUCT_ENVELOPE, Endpoints.PRODUCTS, metafield_owner=MetafieldOwners.PRODUCTS)
        self.variants = VariantService(
            self, VARIANT_ENVELOPE, Endpoints.VARIANTS, metafield_owner=MetafieldOwners.VARIANTS)
        self.images = ResourceService(self, IMAGE_ENVELOPE, Endpoints.IMAGES)
        self.pages = ResourceService(
            self, PAGE_ENVELOPE, Endpoints.PAGES, metafield_owner=MetafieldOwners.PAGES)
        self.redirects = ResourceService(self, REDIRECT_ENVELOPE, Endpoints.REDIRECTS)
        self.webhooks = ResourceService(self, WEBHOOK_ENVELOPE, Endpoints.WEBHOOKS)
        self.custom_collections = ResourceService(
            self, CUSTOM_COLLECTION_ENVELOPE, Endpoints.CUSTOM_COLLECTIONS,
            metafield_owner=MetafieldOwners.COLLECTIONS)
        self.smart_collections = ResourceService(
            self, SMART_COLLECTION_ENVELOPE, Endpoints.SMART_COLLECTIONS,
            metafield_owner=MetafieldOwners.COLLECTIONS)
        self.price_rules = ResourceService(self, PRICE_RULE_ENVELOPE, Endpoints.PRICE_RULES)
        self.discount_codes = ResourceService(self, DISCOUNT_CODE_ENVELOPE, Endpoints.DISCOUNT_CODES)
        self.gift_cards = GiftCardService(self, GIFT_CARD_ENVELOPE, Endpoints.GIFT_CARDS)
        self.locations = ReadableResource(self, LOCATION_ENVELOPE, Endpoints.LOCATIONS)
        self.metafields = MetafieldService(self)

        if self.config.enable_logging:
            self.logger.info(f"ShopifyRestClient initialized for {self.config.shop_name}")

    @property
    def session(self) -> requests.Session:
        """The caller-supplied session, or this thread's own session."""
        if self._session is not None:
            return self._session
        session = getattr(self._local, "session", None)
        if session is None:
            session = requests.Session()
            self._local.session = session
            with self._sessions_lock:
                self._owned_sessions.append(session)
        return session

    def metafields_for(self, owner: str, owner_id: int) -> MetafieldService:
        """Metafields nested under any owner path, e.g. ('blogs', 12)."""
        return MetafieldService(self, owner=owner, owner_id=owner_id)

    def _send(self, method: str, path: str, payload: Optional[Dict[str, Any]] = None,
              options: QueryOptions = None) -> requests.Response:
        """
        Issue one HTTP request and raise the classified error on non-2xx.

        Transport errors from requests propagate unchanged.
        """
        url = self.config.url_for(path)
        params = to_query_params(options)

        if self.config.enable_logging:
            self.logger.info(f"Making {method} request to {path}")
            if params:
                self.logger.debug(f"Query params: {params}")
            if payload:
                self.logger.debug(f"Request payload: {payload}")

        response = self.session.request(
            method=method,
            url=url,
            params=params or None,
            json=payload,
            headers=self.headers,
            auth=self.config.auth,
            timeout=self.config.timeout,
        )

        if self.config.enable_logging:
            self.logger.info(f"Response status: {response.status_code}")

        if not StatusCodes.is_success(response.status_code):
            error = create_exception_from_response(
                response.status_code, response.content, response.headers
            )
            if self.config.enable_logging:
                self.logger.warning(f"{method} {path} failed ({response.status_code}): {error}")
            raise error

        return response

    def perform(
        self,
        method: str,
        path: str,
        body: Union[Any, Mapping[str, Any], None] = None,
        options: QueryOptions = None,
        envelope: Optional[Envelope] = None,
        many: bool = False
    ) -> Tuple[Any, Mapping[str, str]]:
        """
        Issue a request and decode its envelope.

        Args:
            method: HTTP method
            path: Path relative to the admin prefix, e.g. 'pages/1.json'
            body: Record to send, wrapped under the envelope's singular key
            options: Query options (ListOptions, CountOptions or a mapping)
            envelope: Envelope to decode the response with; None skips decoding
            many: Decode the plural key instead of the singular one

        Returns:
            (decoded value, response headers)

        Raises:
            APIError / UnknownError / RateLimitError: On non-2xx responses
            DecodingError: If a successful body cannot be decoded
        """
        payload = None
        if body is not None:
            payload = envelope.wrap(body) if envelope is not None else dict(body)

        response = self._send(method, path, payload=payload, options=options)

        if envelope is None:
            return None, response.headers
        if many:
            return envelope.unwrap_many(response.content), response.headers
        return envelope.unwrap_one(response.content), response.headers

    def get(self, path: str, envelope: Envelope, options: QueryOptions = None) -> Any:
        value, _ = self.perform("GET", path, options=options, envelope=envelope)
        return value

    def list(self, path: str, envelope: Envelope, options: QueryOptions = None) -> List[Any]:
        values, _ = self.perform("GET", path, options=options, envelope=envelope, many=True)
        return values

    def list_with_pagination(self, path: str, envelope: Envelope,
                             options: QueryOptions = None) -> Tuple[List[Any], Pagination]:
        """List a collection and extract the next/previous cursors from the Link header."""
        values, headers = self.perform("GET", path, options=options, envelope=envelope, many=True)
        pagination = extract_pagination(headers.get(Headers.LINK))
        return values, pagination

    def post(self, path: str, body: Any, envelope: Envelope) -> Any:
        value, _ = self.perform("POST", path, body=body, envelope=envelope)
        return value

    def put(self, path: str, body: Any, envelope: Envelope) -> Any:
        value, _ = self.perform("PUT", path, body=body, envelope=envelope)
        return value

    def delete(self, path: str) -> None:
        """Delete a resource; the response body is ignored on success."""
        self._send("DELETE", path)

    def count(self, path: str, options: QueryOptions = None) -> int:
        """Hit a count endpoint and decode `{"count": N}`."""
        response = self._send("GET", path, options=options)
        return decode_count(response.content)

    def close(self) -> None:
        """Close the HTTP sessions this client created."""
        with self._sessions_lock:
            sessions, self._owned_sessions = self._owned_sessions, []
        for session in sessions:
            session.close()
        self._local = threading.local()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_value, traceback):
        self.close()
