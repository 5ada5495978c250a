"""Liveness endpoint answers every request with a fixed body."""

from aiohttp.test_utils import TestClient, TestServer

from battle_stats.keepalive import create_app


async def test_any_path_and_method_is_alive():
    async with TestClient(TestServer(create_app())) as client:
        for method, path in (("GET", "/"), ("GET", "/health"), ("POST", "/anything/else")):
            response = await client.request(method, path)
            assert response.status == 200
            assert await response.text() == "Bot is alive"
