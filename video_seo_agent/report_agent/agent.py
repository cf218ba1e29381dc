"""Final Report Synthesizer agents.

Two flavors share this module:
    - plan report: reviews a freshly generated plan (script, SEO copy,
      thumbnail concept) and lists strengths and production recommendations
    - analysis report: merges the visual and transcript analyses of an
      existing video into pros, cons (with severity) and optimizations

Both use structured output so downstream code reads validated dicts from
state['plan_report'] / state['analysis_report'].
"""

# Google ADK Imports
from google.adk.agents.llm_agent import Agent
from google.adk.agents.readonly_context import ReadonlyContext

# Shared Imports
from ..shared.constants import GEMINI_PRO_MODEL
from ..shared.progress import mark_agent_working, mark_agent_done
from ..shared.schemas import AnalysisReport, VideoPlanReport

# Utilities
import logging
from typing import Any, Mapping

PLAN_REPORT_PROMPT = """You are a professional video optimization consultant. Review the following plan for a new video about "{topic}", written in a "{tone}" tone for {audience}.

Script:
{script_text}

SEO Metadata:
Title: {seo_title}
Description: {seo_description}
Tags: {seo_tags}

Thumbnail concept:
{thumbnail_prompt}

Based on this, create a final report with:
1. "strengths": A list of 3-5 key strengths of this plan, each with a "title" and a short "description".
2. "recommendations": A list of 3-5 actionable production recommendations to improve CTR, SEO, and retention, each with a "title" and a short "description".

Return the report as a JSON object."""

ANALYSIS_REPORT_PROMPT = """You are a professional video optimization consultant. Synthesize the following analyses for a video about "{topic}" into a professional report.

Video Visuals Analysis:
{video_analysis}

Transcript & Content Analysis:
{transcript_analysis}

Based on this, create a final report with:
1. "pros": A list of 3-5 key strengths.
2. "cons": A list of 3-5 key weaknesses, each with a "severity" rating ('Low', 'Medium', or 'High').
3. "optimizations": A list of the top 5 most impactful, actionable recommendations to improve CTR, SEO, and retention. Each optimization should have a title and a short description.

Return the report as a JSON object."""


def script_as_text(script: Mapping[str, Any]) -> str:
    sections = "\n\n".join(f"{s['heading']}\n{s['content']}" for s in script.get("sections", []))
    return f"{script.get('title', '')}\n\n{sections}".strip()


def plan_report_instruction(context: ReadonlyContext) -> str:
    state = context.state
    seo = state.get("seo_copy") or {}
    thumbnails = state.get("thumbnails") or []
    return PLAN_REPORT_PROMPT.format(
        topic=state.get("topic", ""),
        tone=state.get("tone", ""),
        audience=state.get("audience", ""),
        script_text=script_as_text(state.get("script") or {}),
        seo_title=seo.get("title", ""),
        seo_description=seo.get("description", ""),
        seo_tags=", ".join(seo.get("tags", [])),
        thumbnail_prompt=thumbnails[0]["prompt"] if thumbnails else "No thumbnails were generated.",
    )


def analysis_report_instruction(context: ReadonlyContext) -> str:
    state = context.state
    return ANALYSIS_REPORT_PROMPT.format(
        topic=state.get("topic", ""),
        video_analysis=state.get("video_analysis", ""),
        transcript_analysis=state.get("transcript_analysis", ""),
    )


def create_plan_report_agent(name: str = "plan_report_agent") -> Agent:
    agent = Agent(
        model=GEMINI_PRO_MODEL,
        name=name,
        description="Synthesizes the script, SEO copy and thumbnails into a final, actionable report.",
        instruction=plan_report_instruction,
        include_contents="none",
        output_schema=VideoPlanReport,
        output_key="plan_report",
        before_agent_callback=mark_agent_working,
        after_agent_callback=mark_agent_done,
    )
    logging.info(f"✅ Sub-agent '{agent.name}' created using model '{GEMINI_PRO_MODEL}'.")
    return agent


def create_analysis_report_agent(name: str = "analysis_report_agent") -> Agent:
    agent = Agent(
        model=GEMINI_PRO_MODEL,
        name=name,
        description="Synthesizes all analyses into a final, actionable report.",
        instruction=analysis_report_instruction,
        include_contents="none",
        output_schema=AnalysisReport,
        output_key="analysis_report",
        before_agent_callback=mark_agent_working,
        after_agent_callback=mark_agent_done,
    )
    logging.info(f"✅ Sub-agent '{agent.name}' created using model '{GEMINI_PRO_MODEL}'.")
    return agent
