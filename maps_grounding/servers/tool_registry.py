"""
MCP Tool Registry.

Owns the FastMCP instance served by the process and initializes
observability before the first request is handled.
"""

from fastmcp import FastMCP
from loguru import logger

from maps_grounding.infrastructure.observability import initialize_observability
from maps_grounding.servers.maps_grounding_server import maps_grounding_mcp


class McpServersRegistry:
    def __init__(self) -> None:
        self.registry = maps_grounding_mcp
        self._is_initialized = False

    async def initialize(self) -> None:
        """Start observability and log the exposed tool surface."""
        if self._is_initialized:
            return

        logger.info("Initializing MCP tool registry...")

        try:
            from maps_grounding.config import settings

            initialize_observability(
                service_name=settings.OTEL_SERVICE_NAME,
                enabled=settings.AGENT_OBSERVABILITY_ENABLED,
            )
        except Exception:
            logger.exception(
                "Observability initialization failed. "
                "Tracing will be disabled."
            )

        self._is_initialized = True

        all_tools = await self.registry.get_tools()
        tool_names = list(all_tools)
        logger.info(f"Registry initialized with {len(tool_names)} tools: {tool_names}")

    def get_registry(self) -> FastMCP:
        return self.registry
