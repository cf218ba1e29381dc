"""SEO & Metadata agent.

Researches current search trends for the video topic with the built-in
``google_search`` tool and returns an optimized title, description, tags and
hashtags. Search-grounded agents cannot use structured output, so the model's
raw text is stored in state['seo_copy_raw'] and parsed deterministically in an
after-agent callback into state['seo_copy'].
"""

# Google ADK Imports
from google.adk.agents.llm_agent import Agent
from google.adk.agents.callback_context import CallbackContext
from google.adk.agents.readonly_context import ReadonlyContext
from google.adk.tools import google_search

# Shared Imports
from ..shared.constants import GEMINI_MODEL
from ..shared.progress import mark_agent_working, mark_agent_done
from ..shared.schemas import SeoCopy
from ..shared.tools import parse_model_json

import logging

SEO_PROMPT = """Based on current search trends for "{topic}", generate an optimized YouTube video title, a compelling video description, 20 relevant tags, and 5 relevant hashtags.
{audience_note}
Return ONLY a valid JSON object in the following format, with no markdown formatting:
{{
  "title": "string",
  "description": "string",
  "tags": ["string"],
  "hashtags": ["string"]
}}"""

AUDIENCE_NOTE = """
The video is written in a "{tone}" tone for this audience: {audience}. Choose wording and keywords that this audience actually searches for.
"""


def seo_instruction(context: ReadonlyContext) -> str:
    state = context.state
    audience_note = ""
    if state.get("mode") == "plan" and state.get("tone") and state.get("audience"):
        audience_note = AUDIENCE_NOTE.format(tone=state["tone"], audience=state["audience"])
    return SEO_PROMPT.format(topic=state.get("topic", ""), audience_note=audience_note)


def store_seo_copy(callback_context: CallbackContext) -> None:
    """After-agent callback: validate the raw SEO text and store it as SeoCopy.

    Raises:
        ValueError: if the model did not return valid SEO JSON. This fails the run.
    """
    raw = callback_context.state.get("seo_copy_raw", "")
    seo_copy = parse_model_json(raw, SeoCopy, "SEO metadata")
    callback_context.state["seo_copy"] = seo_copy.model_dump()
    logging.info(f"SEO metadata parsed: '{seo_copy.title}' with {len(seo_copy.tags)} tags")
    mark_agent_done(callback_context)


def create_seo_agent(name: str = "seo_agent") -> Agent:
    agent = Agent(
        model=GEMINI_MODEL,
        name=name,
        description="Researches trends to generate optimized titles, descriptions, tags and hashtags.",
        instruction=seo_instruction,
        include_contents="none",
        tools=[google_search],
        output_key="seo_copy_raw",
        before_agent_callback=mark_agent_working,
        after_agent_callback=store_seo_copy,
    )
    logging.info(f"✅ Sub-agent '{agent.name}' created using model '{GEMINI_MODEL}'.")
    return agent
