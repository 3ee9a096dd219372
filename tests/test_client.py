"""Tests for the REST client transport: auth, hosts, decoding and errors."""

import httpx
import pytest

from shortio_client.api import client, types

from .conftest import API_KEY, API_URL, STATS_URL

# ---------------------------------------------------------------------------
# Construction
# ---------------------------------------------------------------------------


def test_init_requires_api_key():
    """Client refuses to start without any key."""
    with pytest.raises(ValueError, match="API key"):
        client.ShortioRestApiClient()


def test_init_rejects_empty_base_url():
    with pytest.raises(ValueError, match="cannot be empty"):
        client.ShortioRestApiClient(api_key=API_KEY, base_url="")


def test_init_rejects_non_positive_timeout():
    with pytest.raises(ValueError, match="timeout"):
        client.ShortioRestApiClient(api_key=API_KEY, timeout=0)


def test_init_reads_key_file(tmp_path):
    """Key file content is stripped and used as the Authorization header."""
    key_file = tmp_path / "key"
    key_file.write_text("sk_from_file\n")

    rest_client = client.ShortioRestApiClient(api_key_file=str(key_file))

    assert rest_client.headers["Authorization"] == "sk_from_file"


def test_init_missing_key_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        client.ShortioRestApiClient(api_key_file=tmp_path / "missing")


def test_base_urls_strip_trailing_slash():
    rest_client = client.ShortioRestApiClient(
        api_key=API_KEY,
        base_url="https://example.test/",
        statistics_url="https://stats.example.test/v2/",
    )
    assert rest_client.url_for("/links") == "https://example.test/links"
    assert (
        rest_client.url_for("domain/1", client.Host.STATISTICS)
        == "https://stats.example.test/v2/domain/1"
    )


# ---------------------------------------------------------------------------
# Headers and authentication
# ---------------------------------------------------------------------------


async def test_request_sends_raw_api_key(server, api_client):
    """Authorization carries the key verbatim, without a Bearer prefix."""
    server.add("GET", f"{API_URL}/api/domains", json=[])

    await api_client.request("GET", "/api/domains")

    assert server.last.headers["Authorization"] == API_KEY
    assert server.last.headers["Content-Type"] == "application/json"
    assert server.last.headers["Accept"] == "application/json"


async def test_set_api_key_applies_to_later_requests(server, api_client):
    server.add("GET", f"{API_URL}/api/domains", json=[])

    api_client.set_api_key("sk_rotated")
    await api_client.request("GET", "/api/domains")

    assert server.last.headers["Authorization"] == "sk_rotated"


def test_set_api_key_does_not_touch_built_requests():
    """Headers are captured when a request is built."""
    rest_client = client.ShortioRestApiClient(api_key="sk_old")
    request = rest_client.build_request("GET", "/api/domains")

    rest_client.set_api_key("sk_new")

    assert request.headers["Authorization"] == "sk_old"


def test_set_api_key_rejects_empty_key():
    rest_client = client.ShortioRestApiClient(api_key=API_KEY)
    with pytest.raises(ValueError, match="empty"):
        rest_client.set_api_key("")


async def test_per_call_api_key_is_not_persisted(server, api_client):
    server.add("GET", f"{API_URL}/api/domains", json=[])

    await api_client.request("GET", "/api/domains", api_key="pk_public")
    assert server.last.headers["Authorization"] == "pk_public"

    await api_client.request("GET", "/api/domains")
    assert server.last.headers["Authorization"] == API_KEY


async def test_clients_with_different_keys_are_independent(server):
    transport = httpx.MockTransport(server.handler)
    server.add("GET", f"{API_URL}/api/domains", json=[])
    first = client.ShortioRestApiClient(api_key="sk_first", transport=transport)
    second = client.ShortioRestApiClient(api_key="sk_second", transport=transport)

    await first.request("GET", "/api/domains")
    await second.request("GET", "/api/domains")

    keys = [request.headers["Authorization"] for request in server.requests]
    assert keys == ["sk_first", "sk_second"]
    await first.aclose()
    await second.aclose()


async def test_statistics_host_is_used(server, api_client):
    server.add("GET", f"{STATS_URL}/domain/7", json={"clicks": 1})

    result = await api_client.request("GET", "/domain/7", host=client.Host.STATISTICS)

    assert result.data == {"clicks": 1}
    assert server.last.url.host == "api-v2.short.cm"


# ---------------------------------------------------------------------------
# Response decoding
# ---------------------------------------------------------------------------


async def test_success_body_returned_verbatim(server, api_client):
    body = {"links": [], "count": 0, "nextPageToken": None, "unknownField": [1, 2]}
    server.add("GET", f"{API_URL}/api/links", json=body)

    result = await api_client.request("GET", "/api/links")

    assert result.ok
    assert result.data == body
    assert result.error is None
    assert result.kind is client.ResultKind.JSON


async def test_error_status_fills_error_not_data(server, api_client):
    server.add("GET", f"{API_URL}/links/lnk_a_b", status_code=404, json={"error": "Link not found"})

    result = await api_client.request("GET", "/links/lnk_a_b")

    assert not result.ok
    assert result.status_code == 404
    assert result.data is None
    assert result.error == {"error": "Link not found"}


async def test_error_shaped_success_body_stays_in_data(server, api_client):
    """A 200 with an error-shaped payload is not reinterpreted."""
    server.add("GET", f"{API_URL}/links/lnk_a_b", json={"error": "Link not found"})

    result = await api_client.request("GET", "/links/lnk_a_b")

    assert result.data == {"error": "Link not found"}
    assert result.error is None


async def test_non_json_error_body_is_returned_as_text(server, api_client):
    server.add("GET", f"{API_URL}/api/domains", status_code=502, content=b"Bad Gateway")

    result = await api_client.request("GET", "/api/domains")

    assert result.error == "Bad Gateway"


async def test_empty_success_body_gives_no_data(server, api_client):
    server.add("DELETE", f"{API_URL}/link_country/lnk_a_b/US", status_code=200, content=b"")

    result = await api_client.request("DELETE", "/link_country/lnk_a_b/US")

    assert result.ok
    assert result.data is None
    assert result.error is None


async def test_binary_kind_returns_bytes(server, api_client):
    image = b"\x89PNG\r\n\x1a\nfake"
    server.add("POST", f"{API_URL}/links/qr/lnk_a_b", content=image, headers={"Content-Type": "image/png"})

    result = await api_client.request("POST", "/links/qr/lnk_a_b", json={}, kind=client.ResultKind.BINARY)

    assert result.data == image
    assert result.kind is client.ResultKind.BINARY


async def test_binary_kind_error_is_decoded_as_json(server, api_client):
    server.add("POST", f"{API_URL}/links/qr/lnk_a_b", status_code=404, json={"error": "Not found"})

    result = await api_client.request("POST", "/links/qr/lnk_a_b", kind=client.ResultKind.BINARY)

    assert result.data is None
    assert result.error == {"error": "Not found"}


async def test_parsed_validates_into_model(server, api_client):
    server.add(
        "GET",
        f"{API_URL}/links/lnk_abc_123",
        json={"idString": "lnk_abc_123", "path": "abc123", "originalURL": "https://example.com"},
    )

    result = await api_client.request("GET", "/links/lnk_abc_123")
    link = result.parsed(types.Link)

    assert link.idString == "lnk_abc_123"
    assert link.shortURL is None


def test_parsed_without_data_returns_none():
    result = client.ApiResult(status_code=404, error={"error": "nope"})
    assert result.parsed(types.Link) is None


# ---------------------------------------------------------------------------
# Error handling
# ---------------------------------------------------------------------------


async def test_throw_on_error_raises_api_error(server, api_client):
    server.add(
        "POST",
        f"{API_URL}/links",
        status_code=401,
        json={"message": "Unauthorized", "statusCode": 401},
    )

    with pytest.raises(client.ApiError) as exc_info:
        await api_client.request("POST", "/links", json={}, throw_on_error=True)

    assert exc_info.value.status_code == 401
    assert exc_info.value.body == {"message": "Unauthorized", "statusCode": 401}
    assert exc_info.value.method == "POST"


async def test_throw_on_error_returns_normally_on_success(server, api_client):
    server.add("GET", f"{API_URL}/api/domains", json=[])

    result = await api_client.request("GET", "/api/domains", throw_on_error=True)

    assert result.data == []


async def test_raise_for_error_after_the_fact(server, api_client):
    server.add("GET", f"{API_URL}/api/domains", status_code=500, json={"error": "boom"})

    result = await api_client.request("GET", "/api/domains")

    with pytest.raises(client.ApiError, match="HTTP 500"):
        result.raise_for_error()


def test_api_error_is_a_shortio_error():
    assert issubclass(client.ApiError, client.ShortioError)


async def test_transport_error_propagates():
    """Network failures are raised, never turned into a result."""

    def refuse(request: httpx.Request) -> httpx.Response:
        msg = "connection refused"
        raise httpx.ConnectError(msg, request=request)

    rest_client = client.ShortioRestApiClient(
        api_key=API_KEY,
        transport=httpx.MockTransport(refuse),
    )

    with pytest.raises(httpx.ConnectError):
        await rest_client.request("GET", "/api/domains")
    await rest_client.aclose()


# ---------------------------------------------------------------------------
# Lifecycle
# ---------------------------------------------------------------------------


async def test_context_manager_closes_client(server):
    async with client.ShortioRestApiClient(
        api_key=API_KEY,
        transport=httpx.MockTransport(server.handler),
    ) as rest_client:
        http_client = rest_client.client
        assert not http_client.is_closed

    assert http_client.is_closed


async def test_client_recreated_after_close(server, api_client):
    first = api_client.client
    await api_client.aclose()

    assert api_client.client is not first
