"""Pydantic models for the Gemini generateContent call with Google Maps grounding."""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class _GeminiModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
        extra="ignore",
    )


# ---------------------------------------------------------------------------
# Request
# ---------------------------------------------------------------------------


class Part(_GeminiModel):
    text: str = Field(description="Text payload of the part.")


class Content(_GeminiModel):
    parts: list[Part] = Field(description="Ordered content parts.")
    role: str | None = Field(None, description="Author role (user / model).")


class GoogleMaps(_GeminiModel):
    enable_widget: bool = Field(False, description="Return a map widget context token.")


class GeminiTool(_GeminiModel):
    google_maps: GoogleMaps = Field(description="Google Maps grounding tool.")


class LatLng(_GeminiModel):
    latitude: float = Field(description="Latitude coordinate.")
    longitude: float = Field(description="Longitude coordinate.")


class RetrievalConfig(_GeminiModel):
    lat_lng: LatLng | None = Field(None, description="Location context for retrieval.")


class ToolConfig(_GeminiModel):
    retrieval_config: RetrievalConfig | None = Field(None, description="Retrieval configuration.")


class GenerateContentRequest(_GeminiModel):
    contents: list[Content] = Field(description="Conversation contents (a single user turn).")
    tools: list[GeminiTool] = Field(description="Tools enabled for the call.")
    tool_config: ToolConfig | None = Field(None, description="Tool configuration (location context).")


# ---------------------------------------------------------------------------
# Response
# ---------------------------------------------------------------------------


class MapsSource(_GeminiModel):
    uri: str | None = Field(None, description="Google Maps URL of the place.")
    title: str | None = Field(None, description="Display name of the place.")
    place_id: str | None = Field(None, description="Google Place ID.")


class GroundingChunk(_GeminiModel):
    maps: MapsSource | None = Field(None, description="Place data, when the chunk is a Maps source.")


class Segment(_GeminiModel):
    start_index: int | None = Field(None, description="Start offset in the answer text.")
    end_index: int | None = Field(None, description="End offset in the answer text.")
    text: str | None = Field(None, description="Supported text segment.")


class GroundingSupport(_GeminiModel):
    grounding_chunk_indices: list[int] = Field(default_factory=list, description="Indices into groundingChunks.")
    confidence_scores: list[float] = Field(default_factory=list, description="Confidence per referenced chunk.")
    segment: Segment | None = Field(None, description="Answer segment backed by the chunks.")


class GroundingMetadata(_GeminiModel):
    grounding_chunks: list[GroundingChunk] | None = Field(None, description="Retrieved citations, in index order.")
    grounding_supports: list[GroundingSupport] | None = Field(None, description="Segment to citation mapping.")
    google_maps_widget_context_token: str | None = Field(None, description="Opaque token for the Maps widget.")


class Candidate(_GeminiModel):
    content: Content = Field(description="Generated content.")
    finish_reason: str | None = Field(None, description="Why generation stopped.")
    grounding_metadata: GroundingMetadata | None = Field(None, description="Grounding citations.")


class UsageMetadata(_GeminiModel):
    prompt_token_count: int | None = Field(None, description="Tokens in the prompt.")
    candidates_token_count: int | None = Field(None, description="Tokens in the response.")
    total_token_count: int | None = Field(None, description="Total tokens billed.")


class GenerateContentResponse(_GeminiModel):
    candidates: list[Candidate] = Field(default_factory=list, description="Generated candidates.")
    usage_metadata: UsageMetadata | None = Field(None, description="Token usage counters.")
