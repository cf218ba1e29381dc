"""Pytest configuration and shared fixtures.

Fakes for the ADK contexts that tools, callbacks and instruction providers
receive at runtime, plus sample pipeline outputs.
"""

from types import SimpleNamespace
from typing import Any, Dict, List, Optional

import pytest


class FakeState(dict):
    """Dict with the to_dict() accessor of ADK's session State."""

    def to_dict(self) -> Dict[str, Any]:
        return dict(self)


class FakeToolContext:
    """Minimal stand-in for google.adk.tools.ToolContext with an in-memory artifact store."""

    def __init__(self, state: Optional[Dict[str, Any]] = None):
        self.state = FakeState(state or {})
        self.artifacts: Dict[str, List[Any]] = {}

    async def save_artifact(self, filename: str, artifact) -> int:
        versions = self.artifacts.setdefault(filename, [])
        versions.append(artifact)
        return len(versions) - 1

    async def load_artifact(self, filename: str, version: Optional[int] = None):
        versions = self.artifacts.get(filename)
        if not versions:
            return None
        return versions[-1 if version is None else version]

    async def list_artifacts(self) -> List[str]:
        return sorted(self.artifacts)


def make_callback_context(agent_name: str, state: Optional[Dict[str, Any]] = None):
    return SimpleNamespace(agent_name=agent_name, state=FakeState(state or {}))


def make_readonly_context(state: Dict[str, Any]):
    return SimpleNamespace(state=FakeState(state))


@pytest.fixture
def tool_context():
    return FakeToolContext()


@pytest.fixture
def sample_script() -> Dict[str, Any]:
    return {
        "title": "Sourdough in 10 Minutes a Day",
        "sections": [
            {"heading": "Intro / Hook", "content": "Your first loaf can look like this."},
            {"heading": "Main Content", "content": "Feed the starter, mix, fold, bake."},
            {"heading": "Call to Action", "content": "Subscribe for the shaping video."},
        ],
    }


@pytest.fixture
def sample_seo_copy() -> Dict[str, Any]:
    return {
        "title": "Easy Sourdough for Beginners (No Fancy Tools)",
        "description": "Everything you need to bake your first sourdough loaf.",
        "tags": ["sourdough", "bread", "baking"],
        "hashtags": ["#sourdough", "#baking"],
    }


@pytest.fixture
def sample_plan_report() -> Dict[str, Any]:
    return {
        "strengths": [
            {"title": "Strong hook", "description": "The opening promises a visible result."},
        ],
        "recommendations": [
            {"title": "Show the crumb", "description": "Cut the loaf on camera in the first minute."},
            {"title": "Add chapters", "description": "Use the script sections as chapter markers."},
        ],
    }


@pytest.fixture
def sample_analysis_report() -> Dict[str, Any]:
    return {
        "pros": ["Clear explanations", "Good lighting"],
        "cons": [
            {"text": "Slow intro", "severity": "High"},
            {"text": "No call to action", "severity": "Medium"},
        ],
        "optimizations": [
            {"title": "Tighten the hook", "description": "Cut the first 20 seconds."},
        ],
    }
