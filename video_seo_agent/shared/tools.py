"""Shared tool functions for ADK state and artifact management.

This module provides common utility functions used across all agents for:
    - State inspection and listing
    - Artifact creation and loading (thumbnails, exports)
    - JSON extraction from agent responses that may be wrapped in code fences

These tools are available to all agents and provide standardized patterns for
working with the ADK framework's state and artifact systems.
"""

import base64
import logging
import re
from typing import Any, Awaitable, Callable, Dict, List, Optional, Tuple, Type, TypeVar

from google.adk.tools import ToolContext
from google.genai.types import Blob, Part
from pydantic import BaseModel, ValidationError

from .schemas import GeneratedThumbnail

ModelT = TypeVar("ModelT", bound=BaseModel)

# (filename, version) -> Part, e.g. tool_context.load_artifact
ArtifactLoader = Callable[..., Awaitable[Optional[Part]]]


async def list_saved_artifacts(tool_context: ToolContext) -> Dict[str, Any]:
    """List all artifacts saved in the current ADK session.

    Useful for verifying which thumbnails and exports have been stored.

    Args:
        tool_context: ADK ToolContext for accessing the artifact store

    Returns:
        Dictionary containing:
            - count (int): Number of artifacts in the store
            - files (list): List of artifact filenames
    """
    filenames = await tool_context.list_artifacts()
    return {
        "count": len(filenames),
        "files": filenames
    }


def list_current_state(tool_context: ToolContext) -> Dict[str, Any]:
    """List the entire current session state.

    Args:
        tool_context: ADK ToolContext for accessing the session state

    Returns:
        Dictionary containing:
            - status (str): Always "success"
            - [all state keys]: All state data as key-value pairs
    """
    current_state = tool_context.state.to_dict()
    return {
        "status": "success",
        **current_state
    }


def make_part(type: str, content: bytes) -> Part:
    """Wrap binary content in the Part structure required for saving artifacts."""
    return Part(
        inline_data=Blob(
            mime_type=type,
            data=content,
        )
    )


def data_uri(mime_type: str, data: bytes) -> str:
    return f"data:{mime_type};base64,{base64.b64encode(data).decode('utf-8')}"


# Regex pattern for extracting JSON from markdown code fences
_JSON_FENCE_RE = re.compile(r"```(?:json)?\s*(\{.*?\}|\[.*?\])\s*```", re.DOTALL)


def _maybe_extract_json(text: str) -> str:
    """Extract a JSON document from text, handling markdown code fences.

    Processing logic:
        1) If text is already pure JSON -> return as-is
        2) If wrapped in ```json ... ``` -> extract the fenced block
        3) Otherwise, return original text (caller can attempt JSON parsing)
    """
    text = (text or "").strip()
    if not text:
        return text

    m = _JSON_FENCE_RE.search(text)
    if m:
        return m.group(1).strip()

    return text


def parse_model_json(text: str, model_cls: Type[ModelT], label: str) -> ModelT:
    """Validate (possibly fenced) model output against a pydantic schema.

    Raises:
        ValueError: "Gemini returned invalid JSON for <label>." when the text
            is not valid JSON or does not match the schema.
    """
    candidate = _maybe_extract_json(text)
    try:
        return model_cls.model_validate_json(candidate)
    except ValidationError as e:
        logging.error(f"❌ Failed to parse {label} JSON: {candidate!r} ({e})")
        raise ValueError(f"Gemini returned invalid JSON for {label}.") from e


async def load_thumbnails(refs: List[Dict[str, Any]], load_artifact: ArtifactLoader) -> List[GeneratedThumbnail]:
    """Load thumbnail artifacts back into data-URI GeneratedThumbnail objects.

    Args:
        refs: Thumbnail references as written to state['thumbnails']
        load_artifact: Async callable accepting filename= and version= keywords

    Returns:
        One GeneratedThumbnail per reference whose artifact could be loaded
    """
    thumbnails: List[GeneratedThumbnail] = []
    for ref in refs or []:
        part = await load_artifact(filename=ref["artifact_key"], version=ref.get("artifact_version"))
        if part is None or not part.inline_data or part.inline_data.data is None:
            logging.warning(f"Thumbnail artifact '{ref['artifact_key']}' is missing - skipping")
            continue
        mime = part.inline_data.mime_type or ref.get("mime_type", "image/jpeg")
        thumbnails.append(
            GeneratedThumbnail(prompt=ref.get("prompt", ""), image_url=data_uri(mime, part.inline_data.data))
        )
    return thumbnails


def decode_data_uri(uri: str) -> Tuple[str, bytes]:
    """Split a base64 data URI into (mime_type, raw bytes)."""
    if not uri.startswith("data:") or "," not in uri:
        raise ValueError("Invalid data URI (expected data:<mime>;base64,<payload>).")
    header, payload = uri.split(",", 1)
    if ";base64" not in header:
        raise ValueError("Data URI is not base64-encoded.")
    return header[len("data:"):].split(";", 1)[0], base64.b64decode(payload)
