import pytest

from maps_grounding.schemas.grounding import GenerateContentResponse
from maps_grounding.utils.formatters import format_grounding_response


def _response(payload: dict) -> GenerateContentResponse:
    return GenerateContentResponse.model_validate(payload)


def _maps_chunk(title: str, place_id: str, uri: str) -> dict:
    return {"maps": {"title": title, "placeId": place_id, "uri": uri}}


def test_response_section_only(gemini_payload):
    text = format_grounding_response(_response(gemini_payload("Try Pike Place")))

    assert text == "## Response\n\nTry Pike Place\n\n"


def test_all_sections_in_order(gemini_payload):
    payload = gemini_payload(
        "Two good spots.",
        grounding_metadata={
            "groundingChunks": [
                _maps_chunk("Pike Place Market", "places/pike", "https://maps.google.com/?cid=1"),
            ],
            "googleMapsWidgetContextToken": "widgetcontent/token",
        },
        usage={"promptTokenCount": 12, "candidatesTokenCount": 34, "totalTokenCount": 46},
    )

    text = format_grounding_response(_response(payload))

    assert text == (
        "## Response\n\nTwo good spots.\n\n"
        "## Sources\n\n"
        "1. **Pike Place Market**\n"
        "   - Place ID: places/pike\n"
        "   - URL: https://maps.google.com/?cid=1\n\n"
        "## Map Widget Token\n\nwidgetcontent/token\n\n"
        "## Usage\n\n"
        "- Prompt tokens: 12\n"
        "- Response tokens: 34\n"
        "- Total tokens: 46\n"
    )


def test_sources_numbered_over_place_chunks_only(gemini_payload):
    payload = gemini_payload(
        "answer",
        grounding_metadata={
            "groundingChunks": [
                {"web": {"uri": "https://example.com", "title": "A"}},
                _maps_chunk("X", "places/x", "https://maps.google.com/?cid=x"),
                _maps_chunk("Y", "places/y", "https://maps.google.com/?cid=y"),
            ]
        },
    )

    text = format_grounding_response(_response(payload))

    assert "1. **X**\n" in text
    assert "2. **Y**\n" in text
    assert "3. " not in text
    assert text.index("1. **X**") < text.index("2. **Y**")


@pytest.mark.parametrize(
    "grounding_metadata",
    [
        None,
        {},
        {"groundingChunks": []},
        {"groundingChunks": [{}, {"web": {"uri": "https://example.com"}}]},
    ],
)
def test_sources_omitted_without_place_chunks(gemini_payload, grounding_metadata):
    text = format_grounding_response(_response(gemini_payload("answer", grounding_metadata)))

    assert "## Sources" not in text


def test_widget_token_omitted_when_absent(gemini_payload):
    payload = gemini_payload(
        "answer",
        grounding_metadata={"groundingChunks": [_maps_chunk("X", "places/x", "https://maps.google.com/?cid=x")]},
    )

    text = format_grounding_response(_response(payload))

    assert "## Map Widget Token" not in text
    assert "## Usage" not in text


def test_formatting_is_deterministic(gemini_payload):
    payload = gemini_payload(
        "answer",
        grounding_metadata={
            "groundingChunks": [_maps_chunk("X", "places/x", "https://maps.google.com/?cid=x")],
            "googleMapsWidgetContextToken": "tok",
        },
        usage={"promptTokenCount": 1, "candidatesTokenCount": 2, "totalTokenCount": 3},
    )
    response = _response(payload)

    assert format_grounding_response(response) == format_grounding_response(response)


def test_empty_candidates_raise_index_error():
    with pytest.raises(IndexError):
        format_grounding_response(_response({"candidates": []}))
