"""Script writer and script rewriter agents.

The script writer drafts a brand-new, sectioned video script from the plan
request (topic or URL, tone, audience). The script rewriter takes an existing
transcript plus the analysis report and rewrites it to act on the report's
feedback. Both return a VideoScript via structured output.

Expected state inputs:
    - writer: topic, tone, audience, is_url
    - rewriter: transcript, analysis_report

State outputs:
    - writer: script
    - rewriter: rewritten_script
"""

# Google ADK Imports
from google.adk.agents.llm_agent import Agent
from google.adk.agents.readonly_context import ReadonlyContext

# Shared Imports
from ..shared.constants import GEMINI_PRO_MODEL
from ..shared.progress import mark_agent_working, mark_agent_done
from ..shared.schemas import VideoScript

# Utilities
import logging
from typing import Any, Dict, Mapping

SCRIPT_WRITER_PROMPT = """**Role:** Script Writer Agent

You are an expert YouTube scriptwriter. Write a complete video script for a video about "{topic}".

{source_note}

**Tone:** {tone}
**Target audience:** {audience}

**Guidelines:**
- Open with a strong hook in the first 5 seconds that earns the click.
- Keep the language natural and spoken, matched to the tone and audience above.
- Weave in the keywords a viewer would search for, without stuffing.
- End with a clear, specific call to action.
- Do NOT include camera directions or markdown such as ** in the spoken content.

Break the script down into logical sections (e.g., "Intro / Hook", "Main Content", "Call to Action", "Outro").

Return the result as a single JSON object with the following structure, and nothing else:
{{
  "title": "A catchy title for the script",
  "sections": [
    {{ "heading": "Section 1 Title (e.g., Intro)", "content": "The content for section 1..." }}
  ]
}}"""

URL_SOURCE_NOTE = "The topic is a URL: treat the page or video it points to as the reference material for this script."
TOPIC_SOURCE_NOTE = "Base the script on current, accurate knowledge of this topic."

SCRIPT_REWRITER_PROMPT = """Given the original video transcript and this optimization report, rewrite the transcript to be more engaging, SEO-friendly, and to have a stronger call to action. Incorporate the feedback from the report.

Original Transcript:
{transcript}

Optimization Report:
{report_summary}

Break the rewritten script down into logical sections (e.g., "Intro / Hook", "Main Content", "Call to Action", "Outro").

Return the result as a single JSON object with the following structure, and nothing else:
{{
  "title": "A new, catchy title for the script",
  "sections": [
    {{ "heading": "Section 1 Title (e.g., Intro)", "content": "The rewritten content for section 1..." }},
    {{ "heading": "Section 2 Title", "content": "The rewritten content for section 2..." }}
  ]
}}"""


def summarize_analysis_report(report: Mapping[str, Any]) -> str:
    """Render an analysis report dict as the plain-text summary used in prompts."""
    pros = ", ".join(report.get("pros", []))
    cons = ", ".join(f"{c['text']} (Severity: {c['severity']})" for c in report.get("cons", []))
    recommendations = "\n".join(f"{o['title']}: {o['description']}" for o in report.get("optimizations", []))
    return f"Pros: {pros}\nCons: {cons}\nRecommendations: {recommendations}"


def script_writer_instruction(context: ReadonlyContext) -> str:
    state = context.state
    return SCRIPT_WRITER_PROMPT.format(
        topic=state.get("topic", ""),
        tone=state.get("tone", ""),
        audience=state.get("audience", ""),
        source_note=URL_SOURCE_NOTE if state.get("is_url") else TOPIC_SOURCE_NOTE,
    )


def script_rewriter_instruction(context: ReadonlyContext) -> str:
    state = context.state
    report: Dict[str, Any] = state.get("analysis_report") or {}
    return SCRIPT_REWRITER_PROMPT.format(
        transcript=state.get("transcript", ""),
        report_summary=summarize_analysis_report(report),
    )


def create_script_writer_agent(name: str = "script_writer_agent") -> Agent:
    agent = Agent(
        model=GEMINI_PRO_MODEL,
        name=name,
        description="Drafts a sectioned video script tuned to the requested tone and audience.",
        instruction=script_writer_instruction,
        output_schema=VideoScript,
        output_key="script",
        before_agent_callback=mark_agent_working,
        after_agent_callback=mark_agent_done,
    )
    logging.info(f"✅ Sub-agent '{agent.name}' created using model '{GEMINI_PRO_MODEL}'.")
    return agent


def create_script_rewriter_agent(name: str = "script_rewriter_agent") -> Agent:
    agent = Agent(
        model=GEMINI_PRO_MODEL,
        name=name,
        description="Rewrites the original transcript using the optimization report's feedback.",
        instruction=script_rewriter_instruction,
        include_contents="none",
        output_schema=VideoScript,
        output_key="rewritten_script",
        before_agent_callback=mark_agent_working,
        after_agent_callback=mark_agent_done,
    )
    logging.info(f"✅ Sub-agent '{agent.name}' created using model '{GEMINI_PRO_MODEL}'.")
    return agent
