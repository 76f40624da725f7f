"""Tests for the HTTP transport."""

import httpx
import pytest
from spotkit.exceptions import TransportError
from spotkit.transport import (
    HTTPRequestMethod,
    HTTPStatusClass,
    HTTPTransport,
    RequestResult,
    build_url,
    classify_status,
    encode_parameters,
)


def transport_for(handler) -> HTTPTransport:
    return HTTPTransport(client=httpx.Client(transport=httpx.MockTransport(handler)))


class TestClassifyStatus:
    @pytest.mark.parametrize(
        ("status_code", "expected"),
        [
            (200, HTTPStatusClass.OK),
            (204, HTTPStatusClass.OK),
            (299, HTTPStatusClass.OK),
            (301, HTTPStatusClass.REDIRECTION),
            (304, HTTPStatusClass.REDIRECTION),
            (400, HTTPStatusClass.ERROR),
            (401, HTTPStatusClass.ERROR),
            (429, HTTPStatusClass.ERROR),
            (100, None),
            (500, None),
            (503, None),
        ],
    )
    def test_classifies_by_hundreds(
        self, status_code: int, expected: HTTPStatusClass | None
    ) -> None:
        assert classify_status(status_code) is expected


class TestEncodeParameters:
    def test_keeps_insertion_order(self) -> None:
        assert encode_parameters({"q": "abc", "type": "track", "limit": 5}) == (
            "q=abc&type=track&limit=5"
        )

    def test_spaces_become_plus(self) -> None:
        assert encode_parameters({"q": "kind of blue"}) == "q=kind+of+blue"

    def test_booleans_are_lowercase(self) -> None:
        assert encode_parameters({"public": True, "collab": False}) == (
            "public=true&collab=false"
        )

    def test_reserved_characters_are_escaped(self) -> None:
        assert encode_parameters({"q": "a&b=c"}) == "q=a%26b%3Dc"

    def test_empty(self) -> None:
        assert encode_parameters({}) == ""


class TestBuildUrl:
    def test_without_parameters(self) -> None:
        assert build_url("https://x/v1/me") == "https://x/v1/me"

    def test_with_parameters(self) -> None:
        assert build_url("https://x/v1/search", {"q": "a b"}) == (
            "https://x/v1/search?q=a+b"
        )


class TestRequestResult:
    def test_success(self) -> None:
        result = RequestResult.success(b"{}", 200)
        assert result.ok
        assert result.data == b"{}"

    def test_failure_without_error(self) -> None:
        result = RequestResult.failure(None)
        assert not result.ok
        assert result.data is None


class TestHTTPTransport:
    def test_returns_body_on_2xx(self) -> None:
        transport = transport_for(
            lambda request: httpx.Response(200, content=b'{"a":1}')
        )

        result = transport.request("https://api.example.com/v1/me")

        assert result.ok
        assert result.data == b'{"a":1}'
        assert result.status_code == 200

    def test_sends_method_headers_and_query(self) -> None:
        seen: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(200, content=b"")

        transport = transport_for(handler)
        transport.request(
            "https://api.example.com/v1/search",
            method=HTTPRequestMethod.GET,
            parameters={"q": "so what", "type": "track"},
            headers={"Authorization": "Bearer t"},
        )

        request = seen[0]
        assert request.method == "GET"
        assert request.url.params["q"] == "so what"
        assert request.url.params["type"] == "track"
        assert request.headers["Authorization"] == "Bearer t"

    @pytest.mark.parametrize("status_code", [302, 401, 404, 500, 503])
    def test_non_2xx_is_failure(self, status_code: int) -> None:
        transport = transport_for(lambda request: httpx.Response(status_code))

        result = transport.request("https://api.example.com/v1/me")

        assert not result.ok
        assert result.status_code == status_code
        assert isinstance(result.error, TransportError)
        assert result.error.http_status == status_code

    def test_network_error_is_failure(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        result = transport_for(handler).request("https://api.example.com/v1/me")

        assert not result.ok
        assert result.status_code is None
        assert isinstance(result.error, httpx.ConnectError)

    @pytest.mark.parametrize("url", ["", "   "])
    def test_empty_url_is_failure(self, url: str) -> None:
        result = transport_for(lambda request: httpx.Response(200)).request(url)

        assert not result.ok
        assert isinstance(result.error, ValueError)

    def test_completion_receives_result(self) -> None:
        received: list[RequestResult] = []
        transport = transport_for(lambda request: httpx.Response(200, content=b"x"))

        result = transport.request(
            "https://api.example.com/v1/me", completion=received.append
        )

        assert received == [result]

    def test_context_manager_closes_client(self) -> None:
        mock = httpx.MockTransport(lambda request: httpx.Response(200))
        client = httpx.Client(transport=mock)
        with HTTPTransport(client=client):
            pass
        assert client.is_closed
