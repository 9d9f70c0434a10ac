"""Formatting helpers for Gemini Maps grounding responses."""

from maps_grounding.schemas.grounding import (
    GenerateContentResponse,
    GroundingMetadata,
    UsageMetadata,
)


def _format_sources(metadata: GroundingMetadata | None) -> str:
    """Numbered list of Maps sources, counting only chunks that carry place data."""
    if metadata is None or not metadata.grounding_chunks:
        return ""
    places = [chunk.maps for chunk in metadata.grounding_chunks if chunk.maps]
    if not places:
        return ""

    parts = ["## Sources\n\n"]
    for i, place in enumerate(places, 1):
        parts.append(
            f"{i}. **{place.title}**\n"
            f"   - Place ID: {place.place_id}\n"
            f"   - URL: {place.uri}\n\n"
        )
    return "".join(parts)


def _format_usage(usage: UsageMetadata | None) -> str:
    if usage is None:
        return ""
    return (
        "## Usage\n\n"
        f"- Prompt tokens: {usage.prompt_token_count}\n"
        f"- Response tokens: {usage.candidates_token_count}\n"
        f"- Total tokens: {usage.total_token_count}\n"
    )


def format_grounding_response(response: GenerateContentResponse) -> str:
    """Render the first candidate, its sources, widget token and usage as markdown.

    An empty candidate list raises IndexError; callers turn it into an error result.
    """
    candidate = response.candidates[0]
    text = candidate.content.parts[0].text
    metadata = candidate.grounding_metadata

    sections = [f"## Response\n\n{text}\n\n", _format_sources(metadata)]

    if metadata is not None and metadata.google_maps_widget_context_token:
        sections.append(
            f"## Map Widget Token\n\n{metadata.google_maps_widget_context_token}\n\n"
        )

    sections.append(_format_usage(response.usage_metadata))
    return "".join(sections)
