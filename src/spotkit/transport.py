"""HTTP request helper used by the API client.

A request either yields the response body of a 2xx response or a
failure carrying the error; it never raises.
"""

import logging
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from enum import StrEnum
from typing import Any, Protocol
from urllib.parse import urlencode

import httpx

from spotkit.exceptions import TransportError

logger = logging.getLogger(__name__)


class HTTPRequestMethod(StrEnum):
    """HTTP methods supported by the transport."""

    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    DELETE = "DELETE"


class HTTPStatusClass(StrEnum):
    """Classes of HTTP status codes the transport distinguishes."""

    OK = "ok"
    REDIRECTION = "redirection"
    ERROR = "error"


def classify_status(status_code: int) -> HTTPStatusClass | None:
    """Classify a status code by its hundreds digit.

    Returns:
        OK for 2xx, REDIRECTION for 3xx, ERROR for 4xx, None otherwise
        (including 5xx).
    """
    match status_code // 100:
        case 2:
            return HTTPStatusClass.OK
        case 3:
            return HTTPStatusClass.REDIRECTION
        case 4:
            return HTTPStatusClass.ERROR
        case _:
            return None


def _format_value(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def encode_parameters(parameters: Mapping[str, Any]) -> str:
    """Encode query parameters in insertion order; spaces become '+'."""
    return urlencode([(key, _format_value(value)) for key, value in parameters.items()])


def build_url(url: str, parameters: Mapping[str, Any] | None = None) -> str:
    """Append encoded query parameters to a URL when any are given."""
    if parameters is None:
        return url
    return f"{url}?{encode_parameters(parameters)}"


@dataclass(frozen=True)
class RequestResult:
    """Outcome of a single HTTP request.

    Attributes:
        data: Response body, set only on success.
        error: Why the request failed, if it did. May be None for failures
            without a specific cause.
        status_code: HTTP status of the response, if one was received.
    """

    data: bytes | None = None
    error: Exception | None = None
    status_code: int | None = None

    @property
    def ok(self) -> bool:
        """Whether the request produced a 2xx response body."""
        return self.data is not None and self.error is None

    @classmethod
    def success(cls, data: bytes, status_code: int | None = None) -> "RequestResult":
        return cls(data=data, status_code=status_code)

    @classmethod
    def failure(
        cls, error: Exception | None, status_code: int | None = None
    ) -> "RequestResult":
        return cls(error=error, status_code=status_code)


Completion = Callable[[RequestResult], None]


class TransportProtocol(Protocol):
    """Protocol for HTTP transports.

    This protocol enables dependency injection and testing.
    """

    def request(
        self,
        url: str,
        method: HTTPRequestMethod = HTTPRequestMethod.GET,
        parameters: Mapping[str, Any] | None = None,
        headers: Mapping[str, str] | None = None,
        completion: Completion | None = None,
    ) -> RequestResult:
        """Perform a request and report its outcome."""
        ...


class HTTPTransport:
    """httpx-backed transport.

    Redirects are followed, so only the final response is classified.
    """

    def __init__(
        self, client: httpx.Client | None = None, timeout: float = 30.0
    ) -> None:
        """Initialize the transport.

        Args:
            client: Optional httpx client. Creates one if not provided.
            timeout: Request timeout in seconds for a created client.
        """
        self._client = client or httpx.Client(timeout=timeout, follow_redirects=True)

    def request(
        self,
        url: str,
        method: HTTPRequestMethod = HTTPRequestMethod.GET,
        parameters: Mapping[str, Any] | None = None,
        headers: Mapping[str, str] | None = None,
        completion: Completion | None = None,
    ) -> RequestResult:
        """Perform a request.

        Args:
            url: Absolute URL without query string.
            method: HTTP method.
            parameters: Query parameters appended to the URL.
            headers: Request headers.
            completion: Optional callback invoked with the result before
                it is returned.

        Returns:
            Success with the body of a 2xx response, failure otherwise.
        """
        result = self._perform(url, method, parameters, headers)
        if completion is not None:
            completion(result)
        return result

    def _perform(
        self,
        url: str,
        method: HTTPRequestMethod,
        parameters: Mapping[str, Any] | None,
        headers: Mapping[str, str] | None,
    ) -> RequestResult:
        if not url or not url.strip():
            return RequestResult.failure(ValueError("url cannot be empty"))

        full_url = build_url(url, parameters)
        logger.debug("%s %s", method, full_url)
        try:
            response = self._client.request(
                method.value, full_url, headers=dict(headers or {})
            )
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            logger.warning("%s %s failed: %s", method, url, e)
            return RequestResult.failure(e)

        status_code = response.status_code
        if classify_status(status_code) is not HTTPStatusClass.OK:
            logger.warning("%s %s returned HTTP %d", method, url, status_code)
            error = TransportError(
                f"{method} {url} returned HTTP {status_code}", http_status=status_code
            )
            return RequestResult.failure(error, status_code)

        return RequestResult.success(response.content, status_code)

    def close(self) -> None:
        """Close the underlying HTTP client."""
        self._client.close()

    def __enter__(self) -> "HTTPTransport":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()
