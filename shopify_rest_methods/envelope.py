"""
JSON envelope codec.

Shopify wraps every single-resource payload in its singular name
(`{"page": {...}}`) and every collection in its plural name
(`{"pages": [...]}`). Counts come back as `{"count": N}`.
"""

import json
from dataclasses import dataclass
from typing import Any, Dict, Generic, List, Mapping, Optional, Type, TypeVar, Union

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from .constants import ERROR_MESSAGES
from .exceptions import DecodingError

T = TypeVar("T", bound=BaseModel)

COUNT_KEY = "count"


def decode_json_object(body: Union[bytes, str, None]) -> Dict[str, Any]:
    """
    Parse a response body that must be a JSON object.

    Raises:
        DecodingError: If the body is not valid JSON or not an object
    """
    try:
        data = json.loads(body or b"")
    except ValueError as e:
        raise DecodingError(f"could not decode response body: {e}", body=_as_bytes(body))

    if not isinstance(data, dict):
        raise DecodingError(ERROR_MESSAGES['not_an_object'], body=_as_bytes(body))
    return data


def _as_bytes(body: Union[bytes, str, None]) -> Optional[bytes]:
    if isinstance(body, str):
        return body.encode("utf-8")
    return body


def decode_count(body: Union[bytes, str, None]) -> int:
    """Decode a `{"count": N}` body. A missing key counts as zero."""
    data = decode_json_object(body)
    count = data.get(COUNT_KEY, 0)
    if isinstance(count, bool) or not isinstance(count, int):
        raise DecodingError(f"count is not an integer: {count!r}", body=_as_bytes(body))
    return count


@dataclass(frozen=True)
class Envelope(Generic[T]):
    """
    Envelope names and record type for one resource kind.

    Attributes:
        singular: Key for single-resource payloads, e.g. "page"
        plural: Key for collection payloads, e.g. "pages"
        model: Pydantic model the payload decodes into
    """
    singular: str
    plural: str
    model: Type[T]

    def wrap(self, value: Union[T, Mapping[str, Any]]) -> Dict[str, Any]:
        """Wrap a record under its singular key for writes."""
        if isinstance(value, BaseModel):
            payload = value.model_dump(mode="json", exclude_none=True)
        else:
            payload = dict(value)
        return {self.singular: payload}

    def _validate(self, data: Any, body: Union[bytes, str, None]) -> T:
        try:
            return self.model.model_validate(data)
        except PydanticValidationError as e:
            raise DecodingError(
                f"could not decode {self.singular}: {e.error_count()} validation error(s)",
                body=_as_bytes(body),
                details={"errors": e.errors(include_url=False)},
            )

    def unwrap_one(self, body: Union[bytes, str, None]) -> Optional[T]:
        """Decode a single-resource body; a missing key yields None."""
        data = decode_json_object(body)
        item = data.get(self.singular)
        if item is None:
            return None
        return self._validate(item, body)

    def unwrap_many(self, body: Union[bytes, str, None]) -> List[T]:
        """Decode a collection body in server order; a missing key yields []."""
        data = decode_json_object(body)
        items = data.get(self.plural)
        if items is None:
            return []
        if not isinstance(items, list):
            raise DecodingError(f"{self.plural} is not a list", body=_as_bytes(body))
        return [self._validate(item, body) for item in items]
