"""Process entrypoint for the MCP server (stdio by default, streamable HTTP on request)."""

import asyncio
import sys

import uvicorn
from loguru import logger

from maps_grounding.config import settings
from maps_grounding.servers.tool_registry import McpServersRegistry

registry = McpServersRegistry()


def configure_logging() -> None:
    """Route all log output to stderr; stdout carries the MCP stream."""
    logger.remove()
    logger.add(sys.stderr, level=settings.LOG_LEVEL)


async def run_stdio() -> None:
    await registry.initialize()
    logger.info("Google Maps Grounding MCP Server running on stdio")
    await registry.get_registry().run_stdio_async(show_banner=False)


def create_http_app():
    _inner_app = registry.get_registry().http_app(stateless_http=True)

    async def app(scope, receive, send):
        """ASGI app that forwards lifespan and lazily initializes the registry."""
        if scope["type"] == "lifespan":
            await _inner_app(scope, receive, send)
            return
        if not registry._is_initialized:
            await registry.initialize()
        await _inner_app(scope, receive, send)

    return app


def main() -> None:
    configure_logging()
    try:
        if settings.MCP_TRANSPORT == "http":
            logger.info(
                f"Google Maps Grounding MCP Server running on "
                f"http://{settings.MCP_HTTP_HOST}:{settings.MCP_HTTP_PORT}"
            )
            uvicorn.run(
                create_http_app(),
                host=settings.MCP_HTTP_HOST,
                port=settings.MCP_HTTP_PORT,
            )
        else:
            asyncio.run(run_stdio())
    except Exception:
        logger.exception("Fatal error in main()")
        sys.exit(1)


if __name__ == "__main__":
    main()
