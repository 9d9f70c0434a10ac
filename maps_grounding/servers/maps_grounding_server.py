"""
Maps Grounding MCP Server.

Self-contained FastMCP instance exposing the `google_maps_search` tool.
Assembled and initialized via tool_registry.py.

Error tiers:
- Unknown tool names and a missing `query` are rejected before dispatch with
  a JSON-RPC error (McpError).
- Anything that fails while searching becomes an `isError` tool result with
  the text `Error: <message>`.
"""

from typing import Annotated

from fastmcp import FastMCP
from fastmcp.exceptions import ToolError
from loguru import logger
from mcp import types
from mcp.shared.exceptions import McpError
from pydantic import Field

from maps_grounding.clients.gemini_maps_client import GeminiMapsGroundingClient
from maps_grounding.config import settings
from maps_grounding.infrastructure.trace_decorator import traced
from maps_grounding.utils.formatters import format_grounding_response

SERVER_NAME = "google-maps-grounding"
SERVER_VERSION = "1.0.0"

TOOL_NAME = "google_maps_search"
DEFAULT_MODEL = "gemini-2.5-flash"

maps_grounding_mcp = FastMCP(SERVER_NAME, version=SERVER_VERSION)

# ---------------------------------------------------------------------------
# Lazy client singleton
# ---------------------------------------------------------------------------

_client: GeminiMapsGroundingClient | None = None


def _get_client() -> GeminiMapsGroundingClient:
    global _client
    if _client is None:
        _client = GeminiMapsGroundingClient(api_key=settings.GOOGLE_GEMINI_API_KEY)
    return _client


# ---------------------------------------------------------------------------
# MCP Tools
# ---------------------------------------------------------------------------


@maps_grounding_mcp.tool(
    name=TOOL_NAME,
    title="Google Maps Search",
    description=(
        "Search for places, restaurants, businesses, or get location-based "
        "information using Google Maps with Gemini AI. Returns AI-generated "
        "responses with grounding metadata including place details, URIs, "
        "and place IDs."
    ),
    tags={"maps", "search", "gemini", "google"},
    annotations={
        "title": "Google Maps Search",
        "readOnlyHint": True,
        "destructiveHint": False,
        "idempotentHint": True,
        "openWorldHint": True,
    },
    output_schema=None,
)
@traced(span_name=f"mcp.tool.{TOOL_NAME}", handler_type="tool")
async def google_maps_search(
    query: Annotated[
        str,
        Field(
            description=(
                "The search query (e.g., 'Italian restaurants nearby', "
                "'coffee shops in San Francisco', 'hotels near Times Square')"
            ),
        ),
    ],
    latitude: Annotated[
        float | None,
        Field(description="Latitude for location context (optional, but recommended for 'nearby' searches)"),
    ] = None,
    longitude: Annotated[
        float | None,
        Field(description="Longitude for location context (optional, but recommended for 'nearby' searches)"),
    ] = None,
    model: Annotated[
        str | None,
        Field(
            description=(
                f"Gemini model to use (default: {DEFAULT_MODEL}). Options: "
                "gemini-2.5-pro, gemini-2.5-flash, gemini-2.5-flash-lite, gemini-2.0-flash"
            ),
        ),
    ] = DEFAULT_MODEL,
    enableWidget: Annotated[  # noqa: N803
        bool | None,
        Field(description="Enable interactive map widget in response (default: false)"),
    ] = False,
) -> str:
    """Answer a location query with Gemini grounded on Google Maps."""
    model = model or DEFAULT_MODEL
    enable_widget = enableWidget or False

    try:
        client = _get_client()
        response = await client.generate_content(
            query,
            model=model,
            latitude=latitude,
            longitude=longitude,
            enable_widget=enable_widget,
        )
        return format_grounding_response(response)
    except Exception as e:
        logger.error(f"{TOOL_NAME} failed: {e}")
        raise ToolError(f"Error: {e}") from e


# ---------------------------------------------------------------------------
# Call dispatch
# ---------------------------------------------------------------------------


def _install_call_guard(server: FastMCP) -> None:
    """Reject unknown tools and a missing query as JSON-RPC errors.

    The SDK's tool-call handler turns every exception into an `isError`
    result, so these checks sit in front of it on the low-level server.
    """
    low_level = server._mcp_server
    dispatch = low_level.request_handlers[types.CallToolRequest]

    async def guarded_call_tool(req: types.CallToolRequest) -> types.ServerResult:
        name = req.params.name
        arguments = req.params.arguments or {}

        if name != TOOL_NAME:
            raise McpError(types.ErrorData(
                code=types.INVALID_PARAMS,
                message=f"Unknown tool: {name}",
            ))
        if not arguments.get("query"):
            raise McpError(types.ErrorData(
                code=types.INVALID_PARAMS,
                message="query parameter is required",
            ))
        return await dispatch(req)

    low_level.request_handlers[types.CallToolRequest] = guarded_call_tool


_install_call_guard(maps_grounding_mcp)
