"""apiservice Python SDK

Typed async client for the JSONPlaceholder REST API.

Example:
    ```python
    from apiservice import (
        APIClient,
        APIRequest,
        Failure,
        HTTPHeader,
        HTTPMethod,
        Post,
        PostCreate,
        Success,
    )

    async with APIClient() as client:
        request = APIRequest.with_json_body(
            HTTPMethod.post,
            "posts",
            PostCreate(title="foo", body="bar", user_id=1),
            headers=[HTTPHeader(field="content-type", value="application/json")],
        )
        match await client.perform(request):
            case Success(response):
                post = response.decode(to=Post).body
            case Failure(error):
                ...
    ```
"""

from .client import APIClient, APIClientCompletion
from .config import DEFAULT_BASE_URL, APIServiceConfig
from .exceptions import (
    APIServiceError,
    DecodingFailureError,
    EncodingError,
    ErrorKind,
    InvalidURLError,
    RequestFailedError,
)
from .models import (
    APIRequest,
    APIResponse,
    APIResult,
    Failure,
    HTTPHeader,
    HTTPMethod,
    KeyDecodingStrategy,
    QueryItem,
    Success,
    encode_json,
)
from .resources import Address, Company, Geo, Post, PostCreate, User

__version__ = "0.1.0"

__all__ = [
    # Version
    "__version__",
    # Client
    "APIClient",
    "APIClientCompletion",
    # Config
    "APIServiceConfig",
    "DEFAULT_BASE_URL",
    # Exceptions
    "APIServiceError",
    "DecodingFailureError",
    "EncodingError",
    "ErrorKind",
    "InvalidURLError",
    "RequestFailedError",
    # Models
    "APIRequest",
    "APIResponse",
    "APIResult",
    "Failure",
    "HTTPHeader",
    "HTTPMethod",
    "KeyDecodingStrategy",
    "QueryItem",
    "Success",
    "encode_json",
    # Resources
    "Address",
    "Company",
    "Geo",
    "Post",
    "PostCreate",
    "User",
]
