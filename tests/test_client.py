"""
Tests for the entities read‑endpoint client.

All HTTP traffic goes through ``httpx.MockTransport``; no network access.
"""

import asyncio

import httpx
import pytest

from entityview.client import EntitiesClient, ErrorKind, FetchFailed
from conftest import ACME_JSON

ENDPOINT = "http://registry.test/api/entities"


def _client(handler) -> EntitiesClient:
    transport = httpx.MockTransport(handler)
    return EntitiesClient(ENDPOINT, client=httpx.AsyncClient(transport=transport))


def _fetch(handler, params=None):
    async def go():
        async with _client(handler) as client:
            try:
                return await client.fetch(params or {})
            finally:
                await client._client.aclose()
    return asyncio.run(go())


class TestEntitiesClient:
    """Test suite for EntitiesClient.fetch"""

    def test_parses_data_list(self):
        entities = _fetch(lambda request: httpx.Response(200, json={"data": [ACME_JSON]}))
        assert [e.name for e in entities] == ["Acme"]
        assert entities[0].registrations[0].status == "VERIFIED"

    def test_only_given_params_are_sent(self):
        seen = []

        def handler(request):
            seen.append(dict(request.url.params))
            return httpx.Response(200, json={"data": []})

        _fetch(handler, {"country": "AE", "status": "ACTIVE"})
        assert seen == [{"country": "AE", "status": "ACTIVE"}]

    def test_no_params_means_bare_url(self):
        seen = []

        def handler(request):
            seen.append(str(request.url))
            return httpx.Response(200, json={"data": []})

        assert _fetch(handler) == []
        assert seen == [ENDPOINT]

    @pytest.mark.parametrize("status_code", [400, 403, 404, 500, 503])
    def test_non_success_is_fetch_failed(self, status_code):
        with pytest.raises(FetchFailed) as info:
            _fetch(lambda request: httpx.Response(status_code, json={"error": "nope"}))
        assert info.value.kind is ErrorKind.FETCH_FAILED
        assert info.value.status_code == status_code

    def test_timeout_is_fetch_failed(self):
        def handler(request):
            raise httpx.ReadTimeout("too slow", request=request)

        with pytest.raises(FetchFailed) as info:
            _fetch(handler)
        assert info.value.status_code is None

    def test_connection_error_is_fetch_failed(self):
        def handler(request):
            raise httpx.ConnectError("refused", request=request)

        with pytest.raises(FetchFailed):
            _fetch(handler)

    @pytest.mark.parametrize(
        "response",
        [
            httpx.Response(200, content=b"<html>oops</html>"),
            httpx.Response(200, json={"items": []}),
            httpx.Response(200, json={"data": {"id": "1"}}),
            httpx.Response(200, json={"data": [{"name": "no id"}]}),
        ],
    )
    def test_malformed_payload_is_fetch_failed(self, response):
        with pytest.raises(FetchFailed):
            _fetch(lambda request: response)


def test_injected_client_is_not_closed():
    async def go():
        http = httpx.AsyncClient(transport=httpx.MockTransport(lambda r: httpx.Response(200, json={"data": []})))
        async with EntitiesClient(ENDPOINT, client=http):
            pass
        closed = http.is_closed
        await http.aclose()
        return closed

    assert asyncio.run(go()) is False


def test_error_kind_string():
    assert str(ErrorKind.FETCH_FAILED) == "FetchFailed"
    assert str(FetchFailed()) == "Failed to fetch entities"


def test_null_id_is_fetch_failed():
    with pytest.raises(FetchFailed):
        _fetch(lambda request: httpx.Response(200, json={"data": [dict(ACME_JSON, id=None)]}))
