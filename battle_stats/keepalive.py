"""
Liveness endpoint for hosted deployments.

Platforms like Railway put idle services to sleep unless something answers
HTTP, so every request gets a fixed 200 response.
"""

from aiohttp import web

from .constants import KEEPALIVE_BODY
from .logging_config import get_logger

logger = get_logger(__name__)


async def handle_alive(request: web.Request) -> web.Response:
    return web.Response(text=KEEPALIVE_BODY)


def create_app() -> web.Application:
    """Application answering any method on any path."""
    app = web.Application()
    app.router.add_route("*", "/{tail:.*}", handle_alive)
    return app


async def start_keepalive(port: int, host: str = "0.0.0.0") -> web.AppRunner:
    """Start the liveness server on the running event loop.

    Returns:
        The runner; call ``await runner.cleanup()`` to stop it.
    """
    runner = web.AppRunner(create_app())
    await runner.setup()
    site = web.TCPSite(runner, host, port)
    await site.start()
    logger.info(f"🌐 Liveness endpoint listening on port {port}")
    return runner
