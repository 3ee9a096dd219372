"""Shared fixtures: a mock Short.io server behind an httpx.MockTransport."""

import json
from typing import Any

import httpx
import pytest

from shortio_client.api import client

API_URL = "https://api.short.io"
STATS_URL = "https://api-v2.short.cm/statistics"
API_KEY = "sk_test_key"


class MockServer:
    """Routes requests by method and URL (without query) to canned responses.

    Every request is recorded in ``requests`` for later inspection.
    Unregistered routes answer 404 with a JSON error body.
    """

    def __init__(self):
        self.routes: dict[tuple[str, str], dict[str, Any]] = {}
        self.requests: list[httpx.Request] = []

    def add(  # noqa: PLR0913
        self,
        method: str,
        url: str,
        status_code: int = 200,
        json: Any = None,
        content: bytes | None = None,
        headers: dict[str, str] | None = None,
    ) -> None:
        route: dict[str, Any] = {"status_code": status_code, "headers": headers}
        if json is not None:
            route["json"] = json
        else:
            route["content"] = content
        self.routes[(method, url)] = route

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        url = f"{request.url.scheme}://{request.url.host}{request.url.path}"
        route = self.routes.get((request.method, url))
        if route is None:
            return httpx.Response(404, json={"message": "no route", "statusCode": 404})
        return httpx.Response(**route)

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]

    def last_json(self) -> Any:
        return json.loads(self.last.content)

    def last_query(self) -> list[tuple[str, str]]:
        return list(self.last.url.params.multi_items())


@pytest.fixture
def server() -> MockServer:
    return MockServer()


@pytest.fixture
async def api_client(server: MockServer):
    """REST client wired to the mock server."""
    rest_client = client.ShortioRestApiClient(
        api_key=API_KEY,
        transport=httpx.MockTransport(server.handler),
    )
    yield rest_client
    await rest_client.aclose()
