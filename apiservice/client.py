"""apiservice SDK Client implementation."""

import asyncio
import json
from typing import Any, Callable
from urllib.parse import quote

import httpx
import structlog

from .config import APIServiceConfig
from .exceptions import ErrorKind, InvalidURLError
from .models import APIRequest, APIResponse, APIResult, Failure, Success

logger = structlog.get_logger()

APIClientCompletion = Callable[[APIResult[bytes]], None]


_PATH_SAFE = "/:@!$&'()*+,;=%"


def _has_non_printable(value: str) -> bool:
    return any(char.isascii() and not char.isprintable() for char in value)


def _quote_path(path: str) -> str:
    """Percent-encode a request path so it stays below the base path.

    ``?`` and ``#`` are encoded instead of starting a query or fragment, and
    dot segments are encoded so they are not resolved against the base path.
    """
    segments = []
    for segment in path.lstrip("/").split("/"):
        if segment in (".", ".."):
            segment = segment.replace(".", "%2E")
        segments.append(quote(segment, safe=_PATH_SAFE))
    return "/".join(segments)


class APIClient:
    """
    Async client for the JSONPlaceholder REST API.

    Every call resolves to an ``APIResult``: ``Success`` with the raw status
    code and body, or ``Failure`` with an ``ErrorKind``. Non-2xx responses are
    successes; inspect ``status_code``. Decoding is left to the caller via
    ``APIResponse.decode``.

    Example:
        ```python
        from apiservice import APIClient, APIRequest, HTTPMethod, Success, User

        async with APIClient() as client:
            result = await client.perform(APIRequest(method=HTTPMethod.get, path="users"))

            match result:
                case Success(response):
                    users = response.decode(to=list[User]).body
                case Failure(error):
                    print(f"Request failed: {error}")
        ```
    """

    def __init__(self, config: APIServiceConfig | None = None) -> None:
        """
        Initialize apiservice client.

        Args:
            config: Client configuration. If None, uses default config.
        """
        self.config = config or APIServiceConfig()
        self._client: httpx.AsyncClient | None = None
        logger.info("APIClient initialized", base_url=self.config.base_url)

    async def __aenter__(self) -> "APIClient":
        """Async context manager entry."""
        self._get_client()
        return self

    async def __aexit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        """Async context manager exit."""
        await self.close()

    def _get_client(self) -> httpx.AsyncClient:
        """Get or create HTTP client."""
        if self._client is None:
            self._client = httpx.AsyncClient(
                timeout=self.config.timeout,
                verify=self.config.verify_ssl,
            )
        return self._client

    async def close(self) -> None:
        """Close the HTTP client and cleanup resources."""
        if self._client:
            await self._client.aclose()
            self._client = None
            logger.info("APIClient closed")

    def build_url(self, request: APIRequest) -> httpx.URL:
        """
        Resolve a request against the configured base URL.

        The request path is appended to the base path as a path component
        and the query items are added in order.

        Args:
            request: Request to resolve

        Returns:
            Absolute URL for the request

        Raises:
            InvalidURLError: If the URL cannot be composed
        """
        query_items = request.query_items or ()
        components = [request.path]
        for item in query_items:
            components.append(item.name)
            if item.value is not None:
                components.append(item.value)
        if any(_has_non_printable(component) for component in components):
            raise InvalidURLError(f"Invalid character in request path or query: {request.path!r}")

        try:
            base = httpx.URL(self.config.base_url)
            if not base.scheme or not base.host:
                raise InvalidURLError(f"Base URL is not absolute: {self.config.base_url!r}")

            path = f"{base.path.rstrip('/')}/{_quote_path(request.path)}"
            params = [(item.name, item.value or "") for item in query_items]
            return httpx.URL(
                scheme=base.scheme,
                host=base.host,
                port=base.port,
                path=path,
                params=params or None,
            )
        except httpx.InvalidURL as e:
            raise InvalidURLError(str(e)) from e

    async def perform(self, request: APIRequest) -> APIResult[bytes]:
        """
        Perform a request.

        Args:
            request: Request to perform

        Returns:
            Success with the status code and raw body, or Failure with
            ``invalid_url`` (nothing was sent) or ``request_failed`` (the
            transport produced no response)
        """
        try:
            url = self.build_url(request)
        except InvalidURLError as e:
            logger.warning("Invalid request URL", path=request.path, error=e.message)
            return Failure(ErrorKind.invalid_url)

        logger.info("Performing request", method=request.method.value, url=str(url))

        client = self._get_client()
        try:
            http_request = client.build_request(
                request.method.value,
                url,
                content=request.body,
                headers=[(header.field, header.value) for header in request.headers or ()],
            )
        except (ValueError, TypeError) as e:
            # Header fields and values must be encodable as ASCII
            logger.warning("Request could not be built", url=str(url), error=str(e))
            return Failure(ErrorKind.request_failed)

        try:
            response = await client.send(http_request)
        except httpx.RequestError as e:
            logger.warning("Request failed", url=str(url), error=str(e))
            return Failure(ErrorKind.request_failed)

        body = response.content
        self._log_json_body(body)
        return Success(APIResponse(status_code=response.status_code, body=body))

    def dispatch(
        self, request: APIRequest, completion: APIClientCompletion
    ) -> "asyncio.Task[None]":
        """
        Perform a request in the background and hand the result to a callback.

        ``completion`` is invoked exactly once, with the same result
        ``perform`` would return. Must be called from a running event loop.

        Args:
            request: Request to perform
            completion: Callback receiving the result

        Returns:
            Task running the request
        """

        async def run() -> None:
            try:
                result = await self.perform(request)
            except Exception:
                logger.exception("Dispatched request raised", path=request.path)
                result = Failure(ErrorKind.request_failed)
            completion(result)

        return asyncio.create_task(run())

    def _log_json_body(self, body: bytes) -> None:
        try:
            parsed = json.loads(body)
        except ValueError:
            return
        if isinstance(parsed, dict):
            logger.debug("Response body", body=parsed)
