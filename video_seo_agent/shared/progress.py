"""Agent status tracking for the swarm's progress view.

Every pipeline agent is registered with two ADK callbacks:
    - before_agent_callback=mark_agent_working
    - after_agent_callback=mark_agent_done

Each callback writes the agent's status into its own state key
(``agent_status__<agent_name>``), so parallel branches never overwrite each
other. The runner reads those keys back out of each event's state delta and
turns them into AgentProgress updates for the caller.
"""

import logging
from enum import Enum
from typing import Any, Dict, Mapping, Optional

from google.adk.agents.callback_context import CallbackContext
from pydantic import BaseModel

STATUS_KEY_PREFIX = "agent_status__"


class AgentStatus(str, Enum):
    PENDING = "Pending"
    WORKING = "Working..."
    DONE = "Done"
    ERROR = "Error"


class AgentProgress(BaseModel):
    """Snapshot of one agent's state, as shown in the progress view."""
    name: str
    display_name: str
    description: str = ""
    status: AgentStatus = AgentStatus.PENDING
    result: Optional[str] = None


# Human-readable labels for the progress view
DISPLAY_NAMES: Dict[str, str] = {
    "script_writer_agent": "Script Writer",
    "seo_agent": "SEO & Metadata Agent",
    "thumbnail_agent": "Thumbnail Designer",
    "plan_report_agent": "Final Report Synthesizer",
    "video_analyzer_agent": "Video Structure Analyzer",
    "transcript_analyzer_agent": "Transcript & Content Analyst",
    "analysis_seo_agent": "SEO & Metadata Agent",
    "analysis_report_agent": "Final Report Synthesizer",
    "script_rewriter_agent": "Script Rewriter",
}

DONE_MESSAGES: Dict[str, str] = {
    "script_writer_agent": "Script drafted.",
    "seo_agent": "SEO metadata generated.",
    "thumbnail_agent": "Thumbnails generated.",
    "plan_report_agent": "Report compiled.",
    "video_analyzer_agent": "Video analysis complete.",
    "transcript_analyzer_agent": "Transcript analysis complete.",
    "analysis_seo_agent": "SEO metadata generated.",
    "analysis_report_agent": "Report compiled.",
    "script_rewriter_agent": "Script rewritten.",
}


def status_key(agent_name: str) -> str:
    return f"{STATUS_KEY_PREFIX}{agent_name}"


def mark_agent_working(callback_context: CallbackContext) -> None:
    callback_context.state[status_key(callback_context.agent_name)] = AgentStatus.WORKING.value
    logging.info(f"🤖 Agent '{callback_context.agent_name}' started.")


def mark_agent_done(callback_context: CallbackContext) -> None:
    callback_context.state[status_key(callback_context.agent_name)] = AgentStatus.DONE.value
    logging.info(f"✅ Agent '{callback_context.agent_name}' finished.")


def statuses_from_delta(state_delta: Optional[Mapping[str, Any]]) -> Dict[str, AgentStatus]:
    """Extract {agent_name: AgentStatus} from an event's state delta."""
    statuses: Dict[str, AgentStatus] = {}
    for key, value in (state_delta or {}).items():
        if not key.startswith(STATUS_KEY_PREFIX):
            continue
        try:
            statuses[key[len(STATUS_KEY_PREFIX):]] = AgentStatus(value)
        except ValueError:
            logging.warning(f"Ignoring unknown agent status {value!r} for key '{key}'")
    return statuses


def progress_for(agent_name: str, status: AgentStatus, description: str = "") -> AgentProgress:
    """Build the AgentProgress record for an agent in the given status."""
    return AgentProgress(
        name=agent_name,
        display_name=DISPLAY_NAMES.get(agent_name, agent_name),
        description=description,
        status=status,
        result=DONE_MESSAGES.get(agent_name) if status == AgentStatus.DONE else None,
    )
