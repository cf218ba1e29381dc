"""Tests for OpenCV frame sampling."""

import base64

import cv2
import numpy as np
import pytest

from video_seo_agent.video_analysis_agent.frames import extract_frames_from_video, frames_to_parts


@pytest.fixture
def sample_video(tmp_path):
    """Two seconds of 64x48 video at 10 fps, each frame a different shade."""
    path = tmp_path / "sample.avi"
    writer = cv2.VideoWriter(str(path), cv2.VideoWriter_fourcc(*"MJPG"), 10.0, (64, 48))
    for i in range(20):
        writer.write(np.full((48, 64, 3), i * 12, dtype=np.uint8))
    writer.release()
    return path


def test_extracts_requested_number_of_jpeg_frames(sample_video):
    frames = extract_frames_from_video(sample_video, frames_to_extract=10)

    assert len(frames) == 10
    decoded = cv2.imdecode(np.frombuffer(base64.b64decode(frames[0]), dtype=np.uint8), cv2.IMREAD_COLOR)
    assert decoded.shape == (48, 64, 3)


def test_never_returns_more_than_requested(sample_video):
    assert len(extract_frames_from_video(sample_video, frames_to_extract=3)) == 3
    assert len(extract_frames_from_video(sample_video, frames_to_extract=30)) <= 30


def test_missing_video_raises(tmp_path):
    with pytest.raises(ValueError, match="Error loading video"):
        extract_frames_from_video(tmp_path / "missing.mp4")


def test_frames_to_extract_must_be_positive(sample_video):
    with pytest.raises(ValueError):
        extract_frames_from_video(sample_video, frames_to_extract=0)


def test_frames_to_parts():
    frame = base64.b64encode(b"jpeg").decode()

    parts = frames_to_parts([frame, frame])

    assert len(parts) == 2
    assert parts[0].inline_data.mime_type == "image/jpeg"
    assert parts[0].inline_data.data == b"jpeg"
