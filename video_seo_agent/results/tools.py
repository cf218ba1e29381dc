"""Root-agent tools for collecting requests and reviewing results.

The form side:
    - commit_video_plan_request / commit_video_analysis_request validate the
      user's input and seed the session state the pipelines read from

The results side:
    - rate_recommendation: thumbs up / down on a plan recommendation
    - select_thumbnail: mark the thumbnail the user wants to use
    - export_video_plan / export_video_analysis: save the text report and
      JSON bundle as artifacts

Every tool returns {"status": "success" | "error", ...} and reports bad input
back to the model instead of raising.
"""

from google.adk.tools import ToolContext
from pydantic import ValidationError

from ..runner import PipelineError, video_analysis_from_state, video_plan_from_state
from ..shared.constants import DEFAULT_ASPECT_RATIO
from ..shared.progress import STATUS_KEY_PREFIX
from ..shared.schemas import VideoAnalysisRequest, VideoPlanRequest, toggle_rating, validation_message
from ..shared.tools import load_thumbnails, make_part
from .formatting import (
    ANALYSIS_REPORT_FILENAME,
    REPORT_FILENAME,
    format_analysis_report,
    format_plan_report,
    plan_export_dict,
)

import json
import logging
from typing import Any, Dict

PLAN_EXPORT_JSON = "video_plan_export.json"
ANALYSIS_EXPORT_JSON = "video_analysis_export.json"

# State written by a previous run that must not leak into the next one
_RESULT_KEYS = (
    "script", "seo_copy_raw", "seo_copy", "plan_report", "video_analysis", "transcript_analysis",
    "analysis_report", "rewritten_script", "selected_thumbnail", "final_export_reference",
)

# Request fields of either workflow
_REQUEST_KEYS = ("topic", "tone", "audience", "aspect_ratio", "is_url", "url", "transcript", "frame_count", "mode")


def _reset_results(tool_context: ToolContext) -> None:
    for key in _REQUEST_KEYS + _RESULT_KEYS:
        if tool_context.state.get(key) is not None:
            tool_context.state[key] = None
    for key in list(tool_context.state.to_dict()):
        if key.startswith(STATUS_KEY_PREFIX):
            tool_context.state[key] = None
    tool_context.state["thumbnails"] = []
    tool_context.state["ratings"] = {}


def commit_video_plan_request(topic: str, tone: str, audience: str, aspect_ratio: str, tool_context: ToolContext) -> Dict[str, Any]:
    """Validate the user's video plan form and store it in state.

    Call this once the user has given a topic (or URL), tone and audience, and
    before transferring to video_plan_pipeline. Pass an empty string for tone,
    audience or aspect_ratio to use the defaults.

    Args:
        topic: Video topic, or a URL to base the video on
        tone: Desired tone, e.g. "Funny", "Authoritative"
        audience: Target audience, e.g. "Beginner home bakers"
        aspect_ratio: Thumbnail aspect ratio: 16:9, 9:16, 1:1, 4:3 or 3:4
        tool_context: ADK ToolContext automatically injected at runtime

    Returns:
        Dict containing a status (str): "success" or "error", and the committed request
    """
    try:
        request = VideoPlanRequest(topic=topic, tone=tone, audience=audience, aspect_ratio=aspect_ratio or DEFAULT_ASPECT_RATIO)
    except ValidationError as e:
        return {"status": "error", "message": validation_message(e)}

    _reset_results(tool_context)
    tool_context.state["topic"] = request.topic
    tool_context.state["tone"] = request.tone
    tool_context.state["audience"] = request.audience
    tool_context.state["aspect_ratio"] = request.aspect_ratio
    tool_context.state["is_url"] = request.is_url
    tool_context.state["mode"] = "plan"
    logging.info(f"📥 Video plan request committed: '{request.topic}'")
    return {"status": "success", "request": request.model_dump()}


def commit_video_analysis_request(url: str, transcript: str, topic: str, tool_context: ToolContext) -> Dict[str, Any]:
    """Validate the user's existing-video form and store it in state.

    Call this once the user has given the YouTube URL, the full transcript and
    the topic, and before transferring to video_analysis_pipeline.

    Args:
        url: YouTube video URL
        transcript: Full video transcript
        topic: What the video is about
        tool_context: ADK ToolContext automatically injected at runtime

    Returns:
        Dict containing a status (str): "success" or "error"
    """
    try:
        request = VideoAnalysisRequest(url=url, transcript=transcript, topic=topic)
    except ValidationError as e:
        return {"status": "error", "message": validation_message(e)}

    _reset_results(tool_context)
    tool_context.state["url"] = request.url
    tool_context.state["transcript"] = request.transcript
    tool_context.state["topic"] = request.topic
    tool_context.state["frame_count"] = 0
    tool_context.state["mode"] = "analysis"
    logging.info(f"📥 Video analysis request committed: {request.url}")
    return {"status": "success", "url": request.url, "topic": request.topic}


def rate_recommendation(index: int, rating: str, tool_context: ToolContext) -> Dict[str, Any]:
    """Rate a recommendation from the plan report with "up" or "down".

    Rating a recommendation with the rating it already has clears the rating.

    Args:
        index: Zero-based index into the report's recommendations
        rating: "up" or "down"
        tool_context: ADK ToolContext automatically injected at runtime

    Returns:
        Dict containing a status (str) and the recommendation's new rating (or None)
    """
    if rating not in ("up", "down"):
        return {"status": "error", "message": "Rating must be 'up' or 'down'."}
    report = tool_context.state.get("plan_report") or {}
    recommendations = report.get("recommendations") or []
    if not 0 <= index < len(recommendations):
        return {"status": "error", "message": f"No recommendation at index {index}; there are {len(recommendations)}."}

    ratings = dict(tool_context.state.get("ratings") or {})
    new_rating = toggle_rating(ratings.get(str(index)), rating)
    if new_rating is None:
        ratings.pop(str(index), None)
    else:
        ratings[str(index)] = new_rating
    tool_context.state["ratings"] = ratings

    return {"status": "success", "recommendation": recommendations[index]["title"], "rating": new_rating}


def select_thumbnail(index: int, tool_context: ToolContext) -> Dict[str, Any]:
    """Mark one of the generated thumbnails as the one to use.

    Args:
        index: Zero-based index into the generated thumbnails
        tool_context: ADK ToolContext automatically injected at runtime
    """
    thumbnails = tool_context.state.get("thumbnails") or []
    if not 0 <= index < len(thumbnails):
        return {"status": "error", "message": f"No thumbnail at index {index}; there are {len(thumbnails)}."}
    tool_context.state["selected_thumbnail"] = index
    return {"status": "success", "selected_thumbnail": thumbnails[index]["artifact_key"]}


async def export_video_plan(tool_context: ToolContext) -> Dict[str, Any]:
    """Save the finished video plan as a text report and a JSON bundle artifact.

    Side effects:
        - Saves VIDSEO_Report.txt (text/plain) and video_plan_export.json (application/json)
        - Writes tool_context.state["final_export_reference"]
    """
    state = tool_context.state.to_dict()
    try:
        request = VideoPlanRequest(
            topic=state.get("topic"),
            tone=state.get("tone"),
            audience=state.get("audience"),
            aspect_ratio=state.get("aspect_ratio") or DEFAULT_ASPECT_RATIO,
        )
        thumbnails = await load_thumbnails(state.get("thumbnails") or [], tool_context.load_artifact)
        plan = video_plan_from_state(request, state, thumbnails)
    except (ValidationError, PipelineError):
        return {"status": "error", "message": "Failed to generate report data. Run video_plan_pipeline first."}

    refs = [
        {**ref, "selected": plan.selected_thumbnail == i}
        for i, ref in enumerate(state.get("thumbnails") or [])
    ]
    report_version = await tool_context.save_artifact(
        filename=REPORT_FILENAME,
        artifact=make_part("text/plain", format_plan_report(plan).encode("utf-8")),
    )
    json_bytes = json.dumps(plan_export_dict(plan, refs), indent=2, ensure_ascii=False).encode("utf-8")
    json_version = await tool_context.save_artifact(filename=PLAN_EXPORT_JSON, artifact=make_part("application/json", json_bytes))

    final_export_reference = {
        "report_key": REPORT_FILENAME,
        "report_version": report_version,
        "json_key": PLAN_EXPORT_JSON,
        "json_version": json_version,
    }
    tool_context.state["final_export_reference"] = final_export_reference
    logging.info("✅ Video plan exported.")
    return {"status": "success", "message": "Saved the report and JSON export artifacts.", **final_export_reference}


async def export_video_analysis(tool_context: ToolContext) -> Dict[str, Any]:
    """Save the finished video analysis as a text report and a JSON bundle artifact."""
    state = tool_context.state.to_dict()
    try:
        request = VideoAnalysisRequest(url=state.get("url"), transcript=state.get("transcript"), topic=state.get("topic"))
        analysis = video_analysis_from_state(request, state)
    except (ValidationError, PipelineError):
        return {"status": "error", "message": "Failed to generate report data. Run video_analysis_pipeline first."}

    report_version = await tool_context.save_artifact(
        filename=ANALYSIS_REPORT_FILENAME,
        artifact=make_part("text/plain", format_analysis_report(analysis).encode("utf-8")),
    )
    json_bytes = json.dumps(analysis.model_dump(mode="json"), indent=2, ensure_ascii=False).encode("utf-8")
    json_version = await tool_context.save_artifact(filename=ANALYSIS_EXPORT_JSON, artifact=make_part("application/json", json_bytes))

    final_export_reference = {
        "report_key": ANALYSIS_REPORT_FILENAME,
        "report_version": report_version,
        "json_key": ANALYSIS_EXPORT_JSON,
        "json_version": json_version,
    }
    tool_context.state["final_export_reference"] = final_export_reference
    return {"status": "success", "message": "Saved the report and JSON export artifacts.", **final_export_reference}
