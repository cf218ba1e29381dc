"""One-shot execution of the swarm pipelines.

SwarmRunner runs a pipeline to completion with in-memory ADK session and
artifact services. It forwards each agent's status change to an optional
progress callback and assembles the composite result (VideoPlan or
VideoAnalysis) from the final session state.

Usage:
    runner = SwarmRunner()
    plan = await runner.plan_video(VideoPlanRequest(topic="Sourdough for beginners"), on_progress=print)
"""

# Google ADK Imports
from google.adk.agents import BaseAgent
from google.adk.artifacts import InMemoryArtifactService
from google.adk.runners import Runner
from google.adk.sessions import InMemorySessionService
from google.genai.types import Content, Part

# Shared Imports
from .pipeline import create_video_plan_pipeline, create_video_analysis_pipeline, iter_leaf_agents
from .shared.progress import AgentProgress, AgentStatus, progress_for, statuses_from_delta
from .shared.schemas import VideoAnalysis, VideoAnalysisRequest, VideoPlan, VideoPlanRequest
from .shared.tools import ArtifactLoader, load_thumbnails
from .video_analysis_agent.frames import extract_frames_from_video, frames_to_parts

# Utilities
import asyncio
import inspect
import logging
from typing import Any, Awaitable, Callable, Dict, List, Optional, Tuple, Union
from pydantic import ValidationError

APP_NAME = "video_seo_agent"
USER_ID = "vidseo_user"

ProgressCallback = Callable[[AgentProgress], Union[None, Awaitable[None]]]


class PipelineError(RuntimeError):
    """Raised when a pipeline run fails or its results are incomplete."""


async def _notify(on_progress: Optional[ProgressCallback], progress: AgentProgress) -> None:
    if on_progress is None:
        return
    result = on_progress(progress)
    if inspect.isawaitable(result):
        await result


def video_plan_from_state(request: VideoPlanRequest, state: Dict[str, Any], thumbnails: List[Any]) -> VideoPlan:
    """Assemble the composite VideoPlan from final session state."""
    try:
        return VideoPlan(
            request=request,
            script=state.get("script"),
            seo_copy=state.get("seo_copy"),
            report=state.get("plan_report"),
            thumbnails=thumbnails,
            ratings=state.get("ratings") or {},
            selected_thumbnail=state.get("selected_thumbnail"),
        )
    except ValidationError as e:
        logging.error(f"❌ Incomplete video plan state: {e}")
        raise PipelineError("Failed to generate report data.") from e


def video_analysis_from_state(request: VideoAnalysisRequest, state: Dict[str, Any]) -> VideoAnalysis:
    """Assemble the composite VideoAnalysis from final session state."""
    try:
        return VideoAnalysis(
            request=request,
            video_analysis=state.get("video_analysis"),
            transcript_analysis=state.get("transcript_analysis"),
            seo_copy=state.get("seo_copy"),
            report=state.get("analysis_report"),
            rewritten_script=state.get("rewritten_script"),
        )
    except ValidationError as e:
        logging.error(f"❌ Incomplete video analysis state: {e}")
        raise PipelineError("Failed to generate report data.") from e


class SwarmRunner:
    """Runs the video plan and video analysis pipelines end to end."""

    def __init__(
        self,
        plan_factory: Callable[[], BaseAgent] = create_video_plan_pipeline,
        analysis_factory: Callable[[], BaseAgent] = create_video_analysis_pipeline,
        frame_extractor: Callable[[str], List[str]] = extract_frames_from_video,
    ):
        self.plan_factory = plan_factory
        self.analysis_factory = analysis_factory
        self.frame_extractor = frame_extractor

    async def plan_video(self, request: VideoPlanRequest, on_progress: Optional[ProgressCallback] = None) -> VideoPlan:
        initial_state = {
            "topic": request.topic,
            "tone": request.tone,
            "audience": request.audience,
            "aspect_ratio": request.aspect_ratio,
            "is_url": request.is_url,
            "mode": "plan",
            "thumbnails": [],
            "ratings": {},
        }
        message = f'Create a video plan for "{request.topic}" ({request.tone} tone, for {request.audience}).'
        logging.info(f"🚀 Starting video plan for '{request.topic}'")

        state, load_artifact = await self._run(self.plan_factory(), initial_state, [Part(text=message)], on_progress)

        thumbnails = await load_thumbnails(state.get("thumbnails") or [], load_artifact)
        if not thumbnails:
            logging.warning("⚠️ No thumbnails were generated for this plan")
        plan = video_plan_from_state(request, state, thumbnails)
        logging.info(f"🎉 Video plan ready: '{plan.script.title}'")
        return plan

    async def analyze_video(self, request: VideoAnalysisRequest, on_progress: Optional[ProgressCallback] = None) -> VideoAnalysis:
        parts = [Part(text=f'Analyze the video at {request.url} about "{request.topic}".')]
        frame_count = 0
        if request.video_path:
            try:
                frames = await asyncio.to_thread(self.frame_extractor, request.video_path)
            except ValueError as e:
                raise PipelineError(f"Analysis failed: {e}") from e
            frame_count = len(frames)
            parts.extend(frames_to_parts(frames))
            logging.info(f"🖼️ Attached {frame_count} frames from {request.video_path}")

        initial_state = {
            "url": request.url,
            "topic": request.topic,
            "transcript": request.transcript,
            "frame_count": frame_count,
            "mode": "analysis",
        }
        logging.info(f"🚀 Starting video analysis for {request.url}")

        state, _ = await self._run(self.analysis_factory(), initial_state, parts, on_progress)
        return video_analysis_from_state(request, state)

    async def _run(
        self,
        agent: BaseAgent,
        initial_state: Dict[str, Any],
        parts: List[Part],
        on_progress: Optional[ProgressCallback],
    ) -> Tuple[Dict[str, Any], ArtifactLoader]:
        """Run one pipeline and return its final state plus an artifact loader."""
        session_service = InMemorySessionService()
        artifact_service = InMemoryArtifactService()
        runner = Runner(
            app_name=APP_NAME,
            agent=agent,
            session_service=session_service,
            artifact_service=artifact_service,
        )
        session = await session_service.create_session(app_name=APP_NAME, user_id=USER_ID, state=initial_state)

        descriptions = {leaf.name: leaf.description for leaf in iter_leaf_agents(agent)}
        statuses: Dict[str, AgentStatus] = {}
        for name, description in descriptions.items():
            statuses[name] = AgentStatus.PENDING
            await _notify(on_progress, progress_for(name, AgentStatus.PENDING, description))

        try:
            async for event in runner.run_async(
                user_id=USER_ID,
                session_id=session.id,
                new_message=Content(role="user", parts=parts),
            ):
                if event.error_message:
                    raise RuntimeError(event.error_message)
                delta = event.actions.state_delta if event.actions else None
                for name, status in statuses_from_delta(delta).items():
                    if statuses.get(name) == status:
                        continue
                    statuses[name] = status
                    await _notify(on_progress, progress_for(name, status, descriptions.get(name, "")))
        except Exception as e:
            logging.error(f"❌ Pipeline '{agent.name}' failed: {e}")
            for name, status in statuses.items():
                if status == AgentStatus.WORKING:
                    statuses[name] = AgentStatus.ERROR
                    await _notify(on_progress, progress_for(name, AgentStatus.ERROR, descriptions.get(name, "")))
            raise PipelineError(f"Analysis failed: {e}") from e

        final_session = await session_service.get_session(app_name=APP_NAME, user_id=USER_ID, session_id=session.id)

        async def load_artifact(filename: str, version: Optional[int] = None):
            return await artifact_service.load_artifact(
                app_name=APP_NAME,
                user_id=USER_ID,
                session_id=session.id,
                filename=filename,
                version=version,
            )

        return dict(final_session.state), load_artifact
