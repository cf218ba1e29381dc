"""Video Structure Analyzer and Transcript & Content Analyst agents.

These two agents open the existing-video analysis pipeline:
    - video_analyzer_agent researches the YouTube URL with google_search and,
      when the user attached sampled frames from a local copy, inspects them
      for visuals, pacing and branding
    - transcript_analyzer_agent reviews the transcript for clarity,
      engagement, keyword usage and calls-to-action

Expected state inputs: url, topic, transcript
State outputs: video_analysis, transcript_analysis (free text)

Only video_analyzer_agent reads the user message with its attached frames.
Every later agent in the pipeline renders its prompt from state alone
(include_contents="none").
"""

# Google ADK Imports
from google.adk.agents.llm_agent import Agent
from google.adk.agents.readonly_context import ReadonlyContext
from google.adk.tools import google_search

# Shared Imports
from ..shared.constants import GEMINI_PRO_MODEL
from ..shared.progress import mark_agent_working, mark_agent_done

import logging

VIDEO_ANALYZER_PROMPT = """As an expert video analyst, analyze the YouTube video at this URL: {url}. The video is about "{topic}".

Use your search capabilities to find information about this video, including its title, description, thumbnail, and general public reception if available.
{frames_note}
Based on your findings and your expertise in video engagement, provide a detailed analysis of the following:
1.  **Visuals & Branding**: Comment on the likely quality of the visuals, editing style, and use of branding based on the thumbnail and any available information.
2.  **Pacing & Structure**: Infer the video's pacing and structure. Is it likely to be fast-paced, slow and deliberate, etc.? How might this affect viewer retention?
3.  **Engagement Potential**: Assess how well the video is likely to engage its target audience.

Provide a concise summary of its visual strengths and weaknesses, focusing on what could be optimized for user retention and click-through rates."""

FRAMES_NOTE = """
The user has attached {count} frames sampled at even intervals from the video. Treat them as direct evidence of the visuals, editing style and pacing, and prefer them over inferences from search results.
"""

TRANSCRIPT_ANALYZER_PROMPT = """Analyze this video transcript for a video about "{topic}". Focus on clarity, engagement, keyword usage for SEO, and the presence of clear calls-to-action. Provide a summary of its strengths and weaknesses regarding audience retention and SEO.

Transcript:
{transcript}"""


def video_analyzer_instruction(context: ReadonlyContext) -> str:
    state = context.state
    frame_count = state.get("frame_count", 0)
    return VIDEO_ANALYZER_PROMPT.format(
        url=state.get("url", ""),
        topic=state.get("topic", ""),
        frames_note=FRAMES_NOTE.format(count=frame_count) if frame_count else "",
    )


def transcript_analyzer_instruction(context: ReadonlyContext) -> str:
    state = context.state
    return TRANSCRIPT_ANALYZER_PROMPT.format(
        topic=state.get("topic", ""),
        transcript=state.get("transcript", ""),
    )


def create_video_analyzer_agent(name: str = "video_analyzer_agent") -> Agent:
    agent = Agent(
        model=GEMINI_PRO_MODEL,
        name=name,
        description="Analyzes the video URL for visual appeal and pacing.",
        instruction=video_analyzer_instruction,
        tools=[google_search],
        output_key="video_analysis",
        before_agent_callback=mark_agent_working,
        after_agent_callback=mark_agent_done,
    )
    logging.info(f"✅ Sub-agent '{agent.name}' created using model '{GEMINI_PRO_MODEL}'.")
    return agent


def create_transcript_analyzer_agent(name: str = "transcript_analyzer_agent") -> Agent:
    agent = Agent(
        model=GEMINI_PRO_MODEL,
        name=name,
        description="Evaluates the script for clarity, engagement, and keywords.",
        instruction=transcript_analyzer_instruction,
        include_contents="none",
        output_key="transcript_analysis",
        before_agent_callback=mark_agent_working,
        after_agent_callback=mark_agent_done,
    )
    logging.info(f"✅ Sub-agent '{agent.name}' created using model '{GEMINI_PRO_MODEL}'.")
    return agent
