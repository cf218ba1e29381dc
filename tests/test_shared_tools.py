"""Tests for the shared state, artifact and JSON helpers."""

import base64

import pytest

from video_seo_agent.shared.schemas import SeoCopy
from video_seo_agent.shared.tools import (
    _maybe_extract_json,
    data_uri,
    decode_data_uri,
    list_current_state,
    list_saved_artifacts,
    load_thumbnails,
    make_part,
    parse_model_json,
)
from tests.conftest import FakeToolContext

SEO_JSON = '{"title": "T", "description": "D", "tags": ["a"], "hashtags": ["#a"]}'


def test_maybe_extract_json_passes_plain_json_through():
    assert _maybe_extract_json(f"  {SEO_JSON}\n") == SEO_JSON


def test_maybe_extract_json_strips_code_fences():
    assert _maybe_extract_json(f"Here you go:\n```json\n{SEO_JSON}\n```") == SEO_JSON
    assert _maybe_extract_json(f"```\n{SEO_JSON}\n```") == SEO_JSON


def test_parse_model_json_returns_model():
    seo = parse_model_json(f"```json\n{SEO_JSON}\n```", SeoCopy, "SEO metadata")

    assert seo.title == "T"
    assert seo.hashtags == ["#a"]


@pytest.mark.parametrize("text", ["", "not json at all", '{"title": "only a title"}'])
def test_parse_model_json_rejects_invalid_output(text):
    with pytest.raises(ValueError, match="Gemini returned invalid JSON for SEO metadata."):
        parse_model_json(text, SeoCopy, "SEO metadata")


def test_data_uri_round_trip():
    uri = data_uri("image/png", b"\x89PNG")

    assert uri.startswith("data:image/png;base64,")
    assert decode_data_uri(uri) == ("image/png", b"\x89PNG")


@pytest.mark.parametrize("uri", ["image/jpeg;base64,AAAA", "data:image/jpeg,AAAA", "data:image/jpeg;base64"])
def test_decode_data_uri_rejects_malformed(uri):
    with pytest.raises(ValueError):
        decode_data_uri(uri)


def test_list_current_state():
    ctx = FakeToolContext({"topic": "Sourdough"})

    assert list_current_state(ctx) == {"status": "success", "topic": "Sourdough"}


async def test_list_saved_artifacts(tool_context):
    await tool_context.save_artifact("thumbnail_0.jpg", make_part("image/jpeg", b"x"))
    await tool_context.save_artifact("VIDSEO_Report.txt", make_part("text/plain", b"y"))

    assert await list_saved_artifacts(tool_context) == {
        "count": 2,
        "files": ["VIDSEO_Report.txt", "thumbnail_0.jpg"],
    }


async def test_load_thumbnails_builds_data_uris_and_skips_missing(tool_context):
    version = await tool_context.save_artifact("thumbnail_0.jpg", make_part("image/jpeg", b"jpeg-bytes"))
    refs = [
        {"prompt": "bold bread", "artifact_key": "thumbnail_0.jpg", "artifact_version": version, "mime_type": "image/jpeg"},
        {"prompt": "bold bread", "artifact_key": "thumbnail_1.jpg", "artifact_version": 0, "mime_type": "image/jpeg"},
    ]

    thumbnails = await load_thumbnails(refs, tool_context.load_artifact)

    assert len(thumbnails) == 1
    assert thumbnails[0].prompt == "bold bread"
    assert thumbnails[0].image_url == "data:image/jpeg;base64," + base64.b64encode(b"jpeg-bytes").decode()
