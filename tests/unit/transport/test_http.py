"""Tests for the httpx-backed transport."""

import json

import httpx
import pytest

from twitch_api_client import ApiClient
from twitch_api_client.errors import AuthenticationError, NotFoundError
from twitch_api_client.testing import create_error_response, create_mock_transport
from twitch_api_client.transport import Transport


class TestFetch:
    @pytest.mark.unit
    async def test_returns_decoded_json(self):
        seen: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(200, json={"_total": 1})

        transport = create_mock_transport(handler)

        result = await transport.fetch(
            "https://api.twitch.tv/kraken/streams",
            headers={"Client-ID": "abc"},
            search={"game": "Overwatch", "limit": 5},
        )

        assert result == {"_total": 1}
        request = seen[0]
        assert request.method == "GET"
        assert request.headers["Client-ID"] == "abc"
        assert request.url.params["game"] == "Overwatch"
        assert request.url.params["limit"] == "5"

    @pytest.mark.unit
    async def test_sends_json_body(self):
        seen: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(204)

        transport = create_mock_transport(handler)

        result = await transport.fetch("https://api.twitch.tv/kraken/users/follows", method="post", body={"a": 1})

        assert result is None
        assert seen[0].method == "POST"
        assert json.loads(seen[0].content) == {"a": 1}

    @pytest.mark.unit
    async def test_sends_raw_body(self):
        seen: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(200, text="ok")

        transport = create_mock_transport(handler)

        result = await transport.fetch("https://api.twitch.tv/kraken/x", method="PUT", body="raw")

        assert result == "ok"
        assert seen[0].content == b"raw"

    @pytest.mark.unit
    async def test_401_raises_authentication_error(self):
        transport = create_mock_transport(lambda request: create_error_response(401, "invalid oauth token"))

        with pytest.raises(AuthenticationError) as exc_info:
            await transport.fetch("https://api.twitch.tv/helix/users")

        assert exc_info.value.body["message"] == "invalid oauth token"

    @pytest.mark.unit
    async def test_other_errors_raise_api_error(self):
        transport = create_mock_transport(lambda request: create_error_response(404))

        with pytest.raises(NotFoundError):
            await transport.fetch("https://api.twitch.tv/helix/nothing")


class TestLifecycle:
    @pytest.mark.unit
    async def test_closes_owned_client(self):
        async with Transport() as transport:
            client = transport._client

        assert client.is_closed

    @pytest.mark.unit
    async def test_leaves_injected_client_open(self):
        client = httpx.AsyncClient(transport=httpx.MockTransport(lambda request: httpx.Response(200)))

        async with Transport(client=client):
            pass

        assert not client.is_closed
        await client.aclose()

    @pytest.mark.unit
    async def test_default_timeout(self):
        transport = Transport(timeout=5.0)

        assert transport._client.timeout == httpx.Timeout(5.0)
        await transport.aclose()

    @pytest.mark.unit
    async def test_closes_injected_client_it_owns(self):
        client = httpx.AsyncClient(transport=httpx.MockTransport(lambda request: httpx.Response(200)))

        async with Transport(client=client, owns_client=True):
            pass

        assert client.is_closed

    @pytest.mark.unit
    async def test_mock_transport_is_closed_with_api_client(self):
        transport = create_mock_transport(lambda request: httpx.Response(200, json={}))

        async with ApiClient(transport=transport) as api:
            await api.get("streams")

        assert transport._client.is_closed
