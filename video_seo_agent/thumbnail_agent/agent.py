"""Thumbnail Designer agent and its image generation tool.

Expected state inputs:
    - topic: what the video is about (required)
    - aspect_ratio: Imagen aspect ratio (defaults to 16:9)

Side effects of the tool:
    - Saves thumbnail_<i>.jpg artifacts (image/jpeg)
    - Writes state['thumbnails']: list of artifact references

Image bytes never go into state; only artifact references do.
"""

# Google ADK Imports
from google.adk.agents.llm_agent import Agent
from google.adk.tools import ToolContext

# Shared Imports
from ..shared.constants import GEMINI_MODEL, DEFAULT_ASPECT_RATIO, THUMBNAIL_COUNT, get_gemini_client
from ..shared.progress import mark_agent_working, mark_agent_done
from ..shared.tools import make_part
from .image_gen import generate_thumbnail_images, thumbnail_prompt

# Utilities
import logging
from typing import Any, Dict, List


async def generate_thumbnails(tool_context: ToolContext) -> Dict[str, Any]:
    """Generate thumbnail concepts for the video topic in state and save them as artifacts.

    Preconditions:
        - tool_context.state["topic"] exists

    Returns:
        Dict with status "success" and the saved thumbnail references, or
        status "error" with a message.
    """
    topic = tool_context.state.get("topic")
    if not topic:
        return {"status": "error", "message": "Missing 'topic' in state - commit a video request first"}

    aspect_ratio = tool_context.state.get("aspect_ratio") or DEFAULT_ASPECT_RATIO
    logging.info(f"🎨 Generating {THUMBNAIL_COUNT} thumbnails for '{topic}' at {aspect_ratio}")

    images = await generate_thumbnail_images(get_gemini_client(), topic, aspect_ratio, THUMBNAIL_COUNT)
    if not images:
        return {"status": "error", "message": "Imagen returned no images for this topic"}

    prompt = thumbnail_prompt(topic)
    refs: List[Dict[str, Any]] = []
    for i, image_bytes in enumerate(images):
        artifact_key = f"thumbnail_{i}.jpg"
        version = await tool_context.save_artifact(filename=artifact_key, artifact=make_part("image/jpeg", image_bytes))
        refs.append({
            "prompt": prompt,
            "artifact_key": artifact_key,
            "artifact_version": version,
            "mime_type": "image/jpeg",
        })

    tool_context.state["thumbnails"] = refs
    logging.info(f"✅ Saved {len(refs)} thumbnail artifacts.")
    return {"status": "success", "count": len(refs), "thumbnails": refs}


THUMBNAIL_INSTRUCTION = "Call generate_thumbnails to create thumbnail concepts for the video. Do not output anything else. If the tool returns an error, report the error message verbatim."


def create_thumbnail_agent(name: str = "thumbnail_agent") -> Agent:
    agent = Agent(
        model=GEMINI_MODEL,
        name=name,
        description="Generates high click-through-rate thumbnail concepts with Imagen.",
        instruction=THUMBNAIL_INSTRUCTION,
        tools=[generate_thumbnails],
        before_agent_callback=mark_agent_working,
        after_agent_callback=mark_agent_done,
    )
    logging.info(f"✅ Sub-agent '{agent.name}' created using model '{GEMINI_MODEL}'.")
    return agent
