"""Data models for apiservice SDK."""

import re
from dataclasses import dataclass
from enum import Enum
from typing import Any, Generic, TypeAlias, TypeVar

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter
from pydantic_core import from_json, to_json

from .exceptions import DecodingFailureError, EncodingError, ErrorKind

BodyT = TypeVar("BodyT")
T = TypeVar("T")


# =============================================================================
# Enums
# =============================================================================


class HTTPMethod(str, Enum):
    """HTTP request methods."""

    get = "GET"
    put = "PUT"
    post = "POST"
    delete = "DELETE"
    head = "HEAD"
    options = "OPTIONS"
    trace = "TRACE"
    connect = "CONNECT"


_CAMEL_BOUNDARY = re.compile(r"(?<=[a-z0-9])(?=[A-Z])")


def snake_to_camel(key: str) -> str:
    """Convert ``user_id`` to ``userId``, keeping leading/trailing underscores."""
    stripped = key.strip("_")
    if not stripped:
        return key
    leading = key[: len(key) - len(key.lstrip("_"))]
    trailing = key[len(key.rstrip("_")) :]
    parts = [part for part in stripped.split("_") if part]
    if len(parts) == 1:
        return key
    head, *rest = parts
    return leading + head.lower() + "".join(part.capitalize() for part in rest) + trailing


def camel_to_snake(key: str) -> str:
    """Convert ``userId`` to ``user_id``."""
    return _CAMEL_BOUNDARY.sub("_", key).lower()


class KeyDecodingStrategy(str, Enum):
    """How object keys in a response body are rewritten before validation."""

    use_default_keys = "use_default_keys"
    convert_from_snake_case = "convert_from_snake_case"
    convert_from_camel_case = "convert_from_camel_case"

    def apply(self, value: Any) -> Any:
        """Rewrite keys of every JSON object nested in ``value``."""
        if self is KeyDecodingStrategy.use_default_keys:
            return value
        convert = (
            snake_to_camel
            if self is KeyDecodingStrategy.convert_from_snake_case
            else camel_to_snake
        )
        return _rewrite_keys(value, convert)


def _rewrite_keys(value: Any, convert) -> Any:
    if isinstance(value, dict):
        return {
            (convert(k) if isinstance(k, str) else k): _rewrite_keys(v, convert)
            for k, v in value.items()
        }
    if isinstance(value, list):
        return [_rewrite_keys(item, convert) for item in value]
    return value


# =============================================================================
# Request Models
# =============================================================================


class HTTPHeader(BaseModel):
    """A single header field. Duplicate fields are sent as separate lines."""

    model_config = ConfigDict(frozen=True)

    field: str = Field(..., description="Header field name")
    value: str = Field(..., description="Header value")


class QueryItem(BaseModel):
    """A single query string item."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., description="Query parameter name")
    value: str | None = Field(None, description="Query parameter value")


def encode_json(payload: Any) -> bytes:
    """
    Encode a serializable value to JSON bytes.

    Pydantic models are encoded by alias so wire names such as ``userId``
    are preserved.

    Raises:
        EncodingError: If the value cannot be serialized
    """
    try:
        if isinstance(payload, BaseModel):
            return payload.model_dump_json(by_alias=True).encode()
        return to_json(payload)
    except ValueError as e:
        raise EncodingError(f"Failed to encode request body: {e}") from e


class APIRequest(BaseModel):
    """
    Description of a single HTTP call against the service base URL.

    Requests are immutable; build a new one instead of modifying a request
    that may already be in flight.

    Example:
        ```python
        request = APIRequest(method=HTTPMethod.get, path="users")

        request = APIRequest(
            method=HTTPMethod.post,
            path="posts",
            headers=[HTTPHeader(field="content-type", value="application/json")],
            body=b'{"title": "foo"}',
        )

        request = APIRequest.with_json_body(HTTPMethod.post, "posts", post)
        ```
    """

    model_config = ConfigDict(frozen=True)

    method: HTTPMethod = Field(..., description="HTTP method")
    path: str = Field(..., description="Path appended to the base URL")
    query_items: tuple[QueryItem, ...] | None = Field(None, description="Ordered query items")
    headers: tuple[HTTPHeader, ...] | None = Field(None, description="Ordered header fields")
    body: bytes | None = Field(None, description="Raw request body")

    @classmethod
    def with_json_body(
        cls,
        method: HTTPMethod | str,
        path: str,
        payload: Any,
        headers: list[HTTPHeader] | None = None,
        query_items: list[QueryItem] | None = None,
    ) -> "APIRequest":
        """
        Build a request whose body is ``payload`` encoded as JSON.

        Args:
            method: HTTP method
            path: Path appended to the base URL
            payload: Any JSON-serializable value (models, dataclasses, dicts, lists)
            headers: Optional header fields
            query_items: Optional query items

        Returns:
            APIRequest carrying the encoded body

        Raises:
            EncodingError: If the payload cannot be encoded
        """
        return cls(
            method=method,
            path=path,
            headers=headers,
            query_items=query_items,
            body=encode_json(payload),
        )


# =============================================================================
# Response Models
# =============================================================================


@dataclass(frozen=True)
class APIResponse(Generic[BodyT]):
    """Status code and body of a completed request."""

    status_code: int
    body: BodyT

    def decode(
        self,
        to: Any,
        key_strategy: KeyDecodingStrategy = KeyDecodingStrategy.use_default_keys,
    ) -> "APIResponse[Any]":
        """
        Decode the raw JSON body into ``to``.

        Args:
            to: Target type; anything pydantic can validate (models,
                dataclasses, ``list[Model]``, ``TypedDict``, scalars)
            key_strategy: Key rewrite applied to the JSON before validation

        Returns:
            New APIResponse with the same status code and the decoded body

        Raises:
            DecodingFailureError: If the body is missing, is not valid JSON,
                or does not match ``to``
        """
        data = self.body
        if data is None or not isinstance(data, (bytes, bytearray, str)):
            raise DecodingFailureError("Response body is not raw JSON")
        if not data:
            raise DecodingFailureError("Response body is empty")

        adapter = TypeAdapter(to)
        try:
            if key_strategy is KeyDecodingStrategy.use_default_keys:
                decoded = adapter.validate_json(data)
            else:
                decoded = adapter.validate_python(key_strategy.apply(from_json(data)))
        except ValueError as e:
            raise DecodingFailureError(f"Failed to decode response body: {e}") from e

        return APIResponse(status_code=self.status_code, body=decoded)


@dataclass(frozen=True)
class Success(Generic[BodyT]):
    response: APIResponse[BodyT]


@dataclass(frozen=True)
class Failure:
    error: ErrorKind


APIResult: TypeAlias = Success[BodyT] | Failure
