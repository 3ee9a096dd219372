"""Tests for domain endpoints."""

from shortio_client.api import types
from shortio_client.endpoints import domains

from ..conftest import API_URL

DOMAIN = {
    "id": 7,
    "hostname": "short.io",
    "linkType": "random",
    "httpsLinks": True,
    "state": "configured",
    "createdAt": "2024-01-01T00:00:00.000Z",
}


async def test_list_domains(server, api_client):
    server.add("GET", f"{API_URL}/api/domains", json=[DOMAIN])

    result = await domains.list_domains(api_client)

    assert result.data == [DOMAIN]
    assert server.last.content == b""


async def test_list_domains_error_body(server, api_client):
    server.add("GET", f"{API_URL}/api/domains", status_code=403, json={"error": "Forbidden"})

    result = await domains.list_domains(api_client)

    assert result.data is None
    assert result.error == {"error": "Forbidden"}


async def test_get_domain_parses_link_type(server, api_client):
    server.add("GET", f"{API_URL}/domains/7", json=DOMAIN)

    result = await domains.get_domain(api_client, 7)
    domain = result.parsed(types.Domain)

    assert domain.hostname == "short.io"
    assert domain.linkType == types.LinkType.RANDOM


async def test_create_domain_body(server, api_client):
    server.add("POST", f"{API_URL}/domains", json=DOMAIN)

    result = await domains.create_domain(
        api_client,
        "short.io",
        types.DomainCreateOptions(linkType=types.LinkType.FOUR_CHAR, hideReferer=True),
    )

    assert result.data == DOMAIN
    assert server.last_json() == {
        "hostname": "short.io",
        "hideReferer": True,
        "linkType": "four-char",
    }


async def test_create_domain_without_options(server, api_client):
    server.add("POST", f"{API_URL}/domains", json=DOMAIN)

    await domains.create_domain(api_client, "short.io")

    assert server.last_json() == {"hostname": "short.io"}
