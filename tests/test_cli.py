"""Tests for the vidseo command line interface."""

import json
import logging
import subprocess
import sys
from pathlib import Path

import pytest
from click.testing import CliRunner

from video_seo_agent import cli
from video_seo_agent.runner import PipelineError
from video_seo_agent.shared.progress import AgentStatus, progress_for
from video_seo_agent.shared.schemas import GeneratedThumbnail, VideoAnalysis, VideoPlan
from video_seo_agent.shared.tools import data_uri


class FakeSwarmRunner:
    result = None
    error = None
    requests = []

    async def plan_video(self, request, on_progress=None):
        return await self._finish(request, "seo_agent", on_progress)

    async def analyze_video(self, request, on_progress=None):
        return await self._finish(request, "analysis_seo_agent", on_progress)

    async def _finish(self, request, agent_name, on_progress):
        FakeSwarmRunner.requests.append(request)
        on_progress(progress_for(agent_name, AgentStatus.WORKING))
        if FakeSwarmRunner.error:
            raise FakeSwarmRunner.error
        on_progress(progress_for(agent_name, AgentStatus.DONE))
        return FakeSwarmRunner.result(request)


@pytest.fixture
def fake_runner(monkeypatch):
    FakeSwarmRunner.result = None
    FakeSwarmRunner.error = None
    FakeSwarmRunner.requests = []
    monkeypatch.setattr(cli, "SwarmRunner", FakeSwarmRunner)
    return FakeSwarmRunner


def test_plan_writes_bundle(fake_runner, tmp_path, sample_script, sample_seo_copy, sample_plan_report):
    fake_runner.result = lambda request: VideoPlan(
        request=request,
        script=sample_script,
        seo_copy=sample_seo_copy,
        report=sample_plan_report,
        thumbnails=[GeneratedThumbnail(prompt="bold", image_url=data_uri("image/jpeg", b"img"))],
    )

    result = CliRunner().invoke(
        cli.main,
        ["plan", "Sourdough", "--tone", "Friendly", "--aspect-ratio", "9:16", "--output-dir", str(tmp_path)],
    )

    assert result.exit_code == 0, result.output
    assert "Your AI-Generated Video Plan is Ready!" in result.output
    assert fake_runner.requests[0].tone == "Friendly"
    assert fake_runner.requests[0].aspect_ratio == "9:16"
    assert (tmp_path / "VIDSEO_Report.txt").exists()
    assert (tmp_path / "thumbnail_0.jpg").read_bytes() == b"img"
    assert json.loads((tmp_path / "video_plan.json").read_text(encoding="utf-8"))["script"]["title"] == sample_script["title"]


def test_plan_rejects_blank_topic(fake_runner):
    result = CliRunner().invoke(cli.main, ["plan", "   "])

    assert result.exit_code == 1
    assert "Please provide a video topic or URL." in result.output
    assert fake_runner.requests == []


def test_plan_reports_pipeline_failure(fake_runner, tmp_path):
    fake_runner.error = PipelineError("Analysis failed: quota exceeded")

    result = CliRunner().invoke(cli.main, ["plan", "Sourdough", "--output-dir", str(tmp_path)])

    assert result.exit_code == 1
    assert "Analysis failed: quota exceeded" in result.output
    assert not (tmp_path / "VIDSEO_Report.txt").exists()


def test_analyze_reads_transcript_file(fake_runner, tmp_path, sample_seo_copy, sample_analysis_report):
    transcript = tmp_path / "talk.txt"
    transcript.write_text("hi everyone, today we bake", encoding="utf-8")
    fake_runner.result = lambda request: VideoAnalysis(
        request=request,
        video_analysis="Good lighting.",
        transcript_analysis="Weak CTA.",
        seo_copy=sample_seo_copy,
        report=sample_analysis_report,
    )

    result = CliRunner().invoke(
        cli.main,
        [
            "analyze",
            "--url", "https://youtu.be/a",
            "--topic", "Sourdough",
            "--transcript-file", str(transcript),
            "--output-dir", str(tmp_path / "out"),
        ],
    )

    assert result.exit_code == 0, result.output
    assert fake_runner.requests[0].transcript == "hi everyone, today we bake"
    assert (tmp_path / "out" / "VIDSEO_Analysis_Report.txt").exists()
    assert "Slow intro" in result.output


def test_analyze_rejects_empty_transcript(fake_runner, tmp_path):
    transcript = tmp_path / "empty.txt"
    transcript.write_text("", encoding="utf-8")

    result = CliRunner().invoke(
        cli.main,
        ["analyze", "--url", "https://youtu.be/a", "--topic", "Sourdough", "--transcript-file", str(transcript)],
    )

    assert result.exit_code == 1
    assert "Please provide a YouTube URL, transcript, and topic." in result.output


@pytest.fixture
def root_logger():
    root = logging.getLogger()
    level, handlers = root.level, root.handlers[:]
    yield root
    root.handlers[:] = handlers
    root.setLevel(level)


def test_verbose_enables_debug_logging(fake_runner, root_logger):
    CliRunner().invoke(cli.main, ["--verbose", "plan", "   "])

    assert root_logger.level == logging.DEBUG


def test_default_log_level_is_warning(fake_runner, root_logger):
    root_logger.setLevel(logging.INFO)

    CliRunner().invoke(cli.main, ["plan", "   "])

    assert root_logger.level == logging.WARNING


def test_importing_cli_does_not_build_root_agent():
    code = "import sys, video_seo_agent.cli; print('video_seo_agent.agent' in sys.modules)"

    result = subprocess.run(
        [sys.executable, "-c", code],
        cwd=Path(__file__).resolve().parents[1],
        capture_output=True,
        text=True,
        check=True,
    )

    assert result.stdout.strip() == "False"
    assert "created using model" not in result.stderr
