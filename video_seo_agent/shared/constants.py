"""Shared configuration constants and API clients for the Video SEO agent swarm.

This module provides centralized configuration values and the lazily-initialized
Gemini client that is used across all agents in the multi-agent system.

Constants:
    GEMINI_MODEL: Flash model used by the orchestrator and search-grounded agents
    GEMINI_PRO_MODEL: Pro model used for analysis, script writing and report synthesis
    IMAGEN_MODEL: Imagen model used for thumbnail generation
    GOOGLE_API_KEY: Google AI API key loaded from environment variables
"""

from google import genai
import os
from functools import lru_cache
from dotenv import load_dotenv

load_dotenv()

# Model configuration (Flash for speed/cost, Pro for long-form reasoning)
GEMINI_MODEL = os.getenv("GEMINI_MODEL", "gemini-2.5-flash")
GEMINI_PRO_MODEL = os.getenv("GEMINI_PRO_MODEL", "gemini-2.5-pro")
IMAGEN_MODEL = os.getenv("IMAGEN_MODEL", "imagen-4.0-generate-001")

# Google API key from environment (required for Gemini and Imagen)
GOOGLE_API_KEY = os.getenv("GOOGLE_API_KEY")

# Thumbnail defaults
THUMBNAIL_COUNT = 4
DEFAULT_ASPECT_RATIO = "16:9"
SUPPORTED_ASPECT_RATIOS = ("16:9", "9:16", "1:1", "4:3", "3:4")

# Frame sampling for local video analysis
FRAMES_TO_EXTRACT = 10
FRAME_JPEG_QUALITY = 70


@lru_cache(maxsize=1)
def get_gemini_client() -> genai.Client:
    """Return the shared Gemini client, creating it on first use."""
    if os.getenv("GOOGLE_GENAI_USE_VERTEXAI", "").lower() in ("1", "true"):
        # Project and location come from GOOGLE_CLOUD_PROJECT / GOOGLE_CLOUD_LOCATION
        return genai.Client()
    api_key = os.getenv("GOOGLE_API_KEY") or GOOGLE_API_KEY
    if not api_key:
        raise ValueError("GOOGLE_API_KEY environment variable is not set")
    return genai.Client(api_key=api_key)
