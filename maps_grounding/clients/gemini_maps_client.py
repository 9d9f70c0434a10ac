"""
Gemini API HTTP client for Google Maps grounded generation.

Wraps a single endpoint:
- POST /v1beta/models/{model}:generateContent   (with the googleMaps tool)
"""

import httpx
from loguru import logger

from maps_grounding.schemas.grounding import (
    Content,
    GeminiTool,
    GenerateContentRequest,
    GenerateContentResponse,
    GoogleMaps,
    LatLng,
    Part,
    RetrievalConfig,
    ToolConfig,
)

BASE_URL = "https://generativelanguage.googleapis.com/v1beta"


class GeminiMapsGroundingError(Exception):
    """Non-success HTTP status returned by the Gemini API."""

    def __init__(self, status_code: int, reason: str, body: str) -> None:
        self.status_code = status_code
        self.reason = reason
        self.body = body
        super().__init__(
            f"Google Maps Grounding API error: {status_code} {reason} - {body}"
        )


def build_request_body(
    query: str,
    latitude: float | None = None,
    longitude: float | None = None,
    enable_widget: bool = False,
) -> dict:
    """Build the generateContent JSON body.

    The location block is attached only when both coordinates are given;
    a lone latitude or longitude is dropped.
    """
    tool_config = None
    if latitude is not None and longitude is not None:
        tool_config = ToolConfig(
            retrieval_config=RetrievalConfig(
                lat_lng=LatLng(latitude=latitude, longitude=longitude),
            )
        )

    request = GenerateContentRequest(
        contents=[Content(parts=[Part(text=query)])],
        tools=[GeminiTool(google_maps=GoogleMaps(enable_widget=enable_widget))],
        tool_config=tool_config,
    )
    return request.model_dump(by_alias=True, exclude_none=True)


class GeminiMapsGroundingClient:
    """Async client for Gemini generateContent with Google Maps grounding."""

    def __init__(
        self,
        api_key: str,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        if not api_key:
            raise ValueError("GOOGLE_GEMINI_API_KEY environment variable is required")
        self._client = httpx.AsyncClient(
            base_url=BASE_URL,
            headers={
                "x-goog-api-key": api_key,
                "Content-Type": "application/json",
            },
            transport=transport,
        )

    async def generate_content(
        self,
        query: str,
        *,
        model: str,
        latitude: float | None = None,
        longitude: float | None = None,
        enable_widget: bool,
    ) -> GenerateContentResponse:
        """Run a Maps-grounded generation and return the parsed response."""
        body = build_request_body(
            query=query,
            latitude=latitude,
            longitude=longitude,
            enable_widget=enable_widget,
        )

        logger.debug(
            f"generateContent: model={model}, query={query!r}, "
            f"lat={latitude}, lng={longitude}, widget={enable_widget}"
        )
        response = await self._client.post(
            f"/models/{model}:generateContent",
            json=body,
        )
        if not response.is_success:
            raise GeminiMapsGroundingError(
                status_code=response.status_code,
                reason=response.reason_phrase,
                body=response.text,
            )
        return GenerateContentResponse.model_validate(response.json())

    async def close(self) -> None:
        """Close the underlying HTTP client."""
        await self._client.aclose()
