"""Frame sampling from local video files with OpenCV.

Frames are sampled at even intervals (duration / n) starting at t=0 and are
returned as base64-encoded JPEG strings without a data-URI prefix, ready to
be attached to a Gemini request as inline image parts.
"""

import base64
from pathlib import Path
from typing import List, Union

import cv2
from google.genai.types import Blob, Part

from ..shared.constants import FRAMES_TO_EXTRACT, FRAME_JPEG_QUALITY


def extract_frames_from_video(
    video_path: Union[str, Path],
    frames_to_extract: int = FRAMES_TO_EXTRACT,
    jpeg_quality: int = FRAME_JPEG_QUALITY,
) -> List[str]:
    """Sample evenly spaced frames from a video file.

    Args:
        video_path: Path to a local video file
        frames_to_extract: Maximum number of frames to return
        jpeg_quality: JPEG quality (0-100) used when encoding frames

    Returns:
        Base64 JPEG strings, at most frames_to_extract of them

    Raises:
        ValueError: if the video cannot be opened or has no readable duration
    """
    if frames_to_extract <= 0:
        raise ValueError("frames_to_extract must be positive")

    capture = cv2.VideoCapture(str(video_path))
    if not capture.isOpened():
        raise ValueError(f"Error loading video: could not open {video_path}")

    try:
        fps = capture.get(cv2.CAP_PROP_FPS) or 0.0
        frame_count = int(capture.get(cv2.CAP_PROP_FRAME_COUNT) or 0)
        if fps <= 0 or frame_count <= 0:
            raise ValueError(f"Error loading video: could not read duration of {video_path}")

        duration = frame_count / fps
        interval = duration / frames_to_extract
        frames: List[str] = []
        current_time = 0.0

        while len(frames) < frames_to_extract and current_time <= duration:
            frame_index = min(int(round(current_time * fps)), frame_count - 1)
            capture.set(cv2.CAP_PROP_POS_FRAMES, frame_index)
            ok, frame = capture.read()
            if not ok:
                break
            ok, buffer = cv2.imencode(".jpg", frame, [int(cv2.IMWRITE_JPEG_QUALITY), jpeg_quality])
            if not ok:
                raise ValueError(f"Error loading video: could not encode frame {frame_index}")
            frames.append(base64.b64encode(buffer.tobytes()).decode("utf-8"))
            current_time += interval

        return frames
    finally:
        capture.release()


def frames_to_parts(frames: List[str]) -> List[Part]:
    """Wrap base64 JPEG frames as inline image parts for a Gemini request."""
    return [
        Part(inline_data=Blob(mime_type="image/jpeg", data=base64.b64decode(frame)))
        for frame in frames
    ]
