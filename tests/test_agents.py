"""Tests for the sub-agents' instruction providers and callbacks."""

import json

import pytest

from video_seo_agent.report_agent.agent import analysis_report_instruction, plan_report_instruction, script_as_text
from video_seo_agent.script_agent.agent import (
    URL_SOURCE_NOTE,
    TOPIC_SOURCE_NOTE,
    script_rewriter_instruction,
    script_writer_instruction,
    summarize_analysis_report,
)
from video_seo_agent.seo_agent.agent import seo_instruction, store_seo_copy
from video_seo_agent.video_analysis_agent.agent import transcript_analyzer_instruction, video_analyzer_instruction
from video_seo_agent.results.tools import commit_video_analysis_request, commit_video_plan_request
from tests.conftest import FakeToolContext, make_callback_context, make_readonly_context


def test_script_writer_instruction_fills_request():
    ctx = make_readonly_context({"topic": "Sourdough", "tone": "Funny", "audience": "Students", "is_url": False})

    instruction = script_writer_instruction(ctx)

    assert 'a video about "Sourdough"' in instruction
    assert "**Tone:** Funny" in instruction
    assert "**Target audience:** Students" in instruction
    assert TOPIC_SOURCE_NOTE in instruction
    assert '"sections": [' in instruction


def test_script_writer_instruction_treats_url_as_source():
    ctx = make_readonly_context({"topic": "https://example.com/post", "tone": "Calm", "audience": "All", "is_url": True})

    assert URL_SOURCE_NOTE in script_writer_instruction(ctx)


def test_summarize_analysis_report(sample_analysis_report):
    summary = summarize_analysis_report(sample_analysis_report)

    assert summary == (
        "Pros: Clear explanations, Good lighting\n"
        "Cons: Slow intro (Severity: High), No call to action (Severity: Medium)\n"
        "Recommendations: Tighten the hook: Cut the first 20 seconds."
    )


def test_script_rewriter_instruction(sample_analysis_report):
    ctx = make_readonly_context({"transcript": "hi everyone, today we bake", "analysis_report": sample_analysis_report})

    instruction = script_rewriter_instruction(ctx)

    assert "Original Transcript:\nhi everyone, today we bake" in instruction
    assert "Slow intro (Severity: High)" in instruction


def test_seo_instruction_adds_audience_note_only_for_plans():
    plan_ctx = make_readonly_context({"topic": "Sourdough", "tone": "Funny", "audience": "Students", "mode": "plan"})
    analysis_ctx = make_readonly_context({"topic": "Sourdough", "url": "https://youtu.be/a"})

    assert 'a "Funny" tone for this audience: Students' in seo_instruction(plan_ctx)
    assert "tone for this audience" not in seo_instruction(analysis_ctx)
    assert 'search trends for "Sourdough"' in seo_instruction(analysis_ctx)


def test_seo_instruction_after_switching_from_plan_to_analysis():
    ctx = FakeToolContext()
    commit_video_plan_request("Sourdough", "Funny", "Students", "", ctx)
    commit_video_analysis_request("https://youtu.be/a", "hi everyone", "Bread basics", ctx)

    instruction = seo_instruction(make_readonly_context(ctx.state))

    assert 'search trends for "Bread basics"' in instruction
    assert "Funny" not in instruction
    assert "Students" not in instruction
    assert ctx.state["tone"] is None


def test_store_seo_copy_parses_fenced_output(sample_seo_copy):
    raw = "```json\n" + json.dumps(sample_seo_copy) + "\n```"
    ctx = make_callback_context("seo_agent", {"seo_copy_raw": raw})

    store_seo_copy(ctx)

    assert ctx.state["seo_copy"] == sample_seo_copy
    assert ctx.state["agent_status__seo_agent"] == "Done"


def test_store_seo_copy_fails_on_invalid_output():
    ctx = make_callback_context("analysis_seo_agent", {"seo_copy_raw": "Sorry, I can't help with that."})

    with pytest.raises(ValueError, match="invalid JSON for SEO metadata"):
        store_seo_copy(ctx)
    assert "seo_copy" not in ctx.state
    assert "agent_status__analysis_seo_agent" not in ctx.state


def test_script_as_text(sample_script):
    text = script_as_text(sample_script)

    assert text.startswith("Sourdough in 10 Minutes a Day\n\nIntro / Hook\nYour first loaf")


def test_plan_report_instruction_uses_all_outputs(sample_script, sample_seo_copy):
    state = {
        "topic": "Sourdough",
        "tone": "Friendly",
        "audience": "Beginners",
        "script": sample_script,
        "seo_copy": sample_seo_copy,
        "thumbnails": [{"prompt": "Bold bread thumbnail", "artifact_key": "thumbnail_0.jpg"}],
    }

    instruction = plan_report_instruction(make_readonly_context(state))

    assert 'written in a "Friendly" tone for Beginners' in instruction
    assert "Title: Easy Sourdough for Beginners (No Fancy Tools)" in instruction
    assert "Tags: sourdough, bread, baking" in instruction
    assert "Bold bread thumbnail" in instruction
    assert "Feed the starter" in instruction


def test_plan_report_instruction_without_thumbnails(sample_script, sample_seo_copy):
    state = {"topic": "Sourdough", "script": sample_script, "seo_copy": sample_seo_copy, "thumbnails": []}

    assert "No thumbnails were generated." in plan_report_instruction(make_readonly_context(state))


def test_analysis_report_instruction():
    ctx = make_readonly_context({"topic": "Sourdough", "video_analysis": "Great b-roll.", "transcript_analysis": "Weak CTA."})

    instruction = analysis_report_instruction(ctx)

    assert "Video Visuals Analysis:\nGreat b-roll." in instruction
    assert "Transcript & Content Analysis:\nWeak CTA." in instruction


def test_video_analyzer_instruction_mentions_frames_only_when_attached():
    without_frames = make_readonly_context({"url": "https://youtu.be/a", "topic": "Sourdough", "frame_count": 0})
    with_frames = make_readonly_context({"url": "https://youtu.be/a", "topic": "Sourdough", "frame_count": 10})

    assert "frames sampled" not in video_analyzer_instruction(without_frames)
    assert "attached 10 frames sampled" in video_analyzer_instruction(with_frames)


def test_transcript_analyzer_instruction():
    ctx = make_readonly_context({"topic": "Sourdough", "transcript": "hi everyone"})

    assert transcript_analyzer_instruction(ctx).endswith("Transcript:\nhi everyone")
