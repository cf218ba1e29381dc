"""Workflow agents that wire the swarm together.

Video plan pipeline (new video):
    script_writer_agent
    -> [seo_agent || thumbnail_agent]     (ParallelAgent, issued together)
    -> plan_report_agent

Video analysis pipeline (existing video):
    video_analyzer_agent -> transcript_analyzer_agent -> analysis_seo_agent
    -> analysis_report_agent -> script_rewriter_agent

ADK agents can only belong to one parent, so every call builds fresh agent
instances. The root agent and each SwarmRunner run get their own tree.
"""

# Google ADK Imports
from google.adk.agents import BaseAgent
from google.adk.agents.parallel_agent import ParallelAgent
from google.adk.agents.sequential_agent import SequentialAgent

# Sub-agent factories
from .script_agent.agent import create_script_writer_agent, create_script_rewriter_agent
from .seo_agent.agent import create_seo_agent
from .thumbnail_agent.agent import create_thumbnail_agent
from .report_agent.agent import create_plan_report_agent, create_analysis_report_agent
from .video_analysis_agent.agent import create_video_analyzer_agent, create_transcript_analyzer_agent

from typing import Iterator

VIDEO_PLAN_PIPELINE_NAME = "video_plan_pipeline"
VIDEO_ANALYSIS_PIPELINE_NAME = "video_analysis_pipeline"


def create_video_plan_pipeline() -> SequentialAgent:
    return SequentialAgent(
        name=VIDEO_PLAN_PIPELINE_NAME,
        description="Writes a script, generates SEO metadata and thumbnails in parallel, then compiles a report for a new video.",
        sub_agents=[
            create_script_writer_agent(),
            ParallelAgent(
                name="seo_and_thumbnails",
                description="Generates SEO metadata and thumbnails concurrently.",
                sub_agents=[create_seo_agent(), create_thumbnail_agent()],
            ),
            create_plan_report_agent(),
        ],
    )


def create_video_analysis_pipeline() -> SequentialAgent:
    return SequentialAgent(
        name=VIDEO_ANALYSIS_PIPELINE_NAME,
        description="Analyzes an existing video and transcript, then produces SEO metadata, a report and a rewritten script.",
        sub_agents=[
            create_video_analyzer_agent(),
            create_transcript_analyzer_agent(),
            create_seo_agent(name="analysis_seo_agent"),
            create_analysis_report_agent(),
            create_script_rewriter_agent(),
        ],
    )


def iter_leaf_agents(agent: BaseAgent) -> Iterator[BaseAgent]:
    """Yield the working (leaf) agents of a tree in execution order."""
    if not agent.sub_agents:
        yield agent
        return
    for sub_agent in agent.sub_agents:
        yield from iter_leaf_agents(sub_agent)
