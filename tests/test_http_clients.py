"""Tests for HTTP-based adapters."""

import asyncio
import json

import httpx
import pytest

from calorie_tracker.adapters.nutritionix_client import HttpxNutritionixClient


def test_nutritionix_client_posts_query_with_credentials() -> None:
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, json={"foods": []})

    transport = httpx.MockTransport(handler)
    async_client = httpx.AsyncClient(transport=transport)
    client = HttpxNutritionixClient(
        app_id="app-id",
        app_key="app-key",
        base_url="https://api.test/v2/",
        http_client=async_client,
    )

    result = asyncio.run(client.natural_nutrients("2 eggs"))

    assert result == {"foods": []}
    assert len(seen) == 1
    request = seen[0]
    assert request.method == "POST"
    assert request.url.path == "/v2/natural/nutrients"
    assert request.headers["x-app-id"] == "app-id"
    assert request.headers["x-app-key"] == "app-key"
    assert json.loads(request.content.decode()) == {"query": "2 eggs"}


def test_nutritionix_client_raises_on_error_status() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(401, json={"message": "unauthorized"})

    client = HttpxNutritionixClient(
        app_id="app-id",
        app_key="bad-key",
        base_url="https://api.test/v2",
        http_client=httpx.AsyncClient(transport=httpx.MockTransport(handler)),
    )

    with pytest.raises(httpx.HTTPStatusError):
        asyncio.run(client.natural_nutrients("2 eggs"))
