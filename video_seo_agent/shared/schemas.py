"""Pydantic schemas shared by every agent in the swarm.

Two groups of models live here:
    - Output schemas handed to Gemini as structured-output contracts
      (SeoCopy, VideoScript, VideoPlanReport, AnalysisReport)
    - Request and result models used by the runner, the CLI and the
      results tools (VideoPlanRequest, VideoPlan, VideoAnalysis, ...)

Output schemas only use required fields so they translate cleanly into a
Gemini response schema.
"""

from typing import Dict, List, Literal, Optional
from pydantic import BaseModel, Field, field_validator

from .constants import DEFAULT_ASPECT_RATIO, SUPPORTED_ASPECT_RATIOS

Rating = Literal["up", "down"]
Severity = Literal["Low", "Medium", "High"]


# ----------------------------
# Output schemas
# ----------------------------
class SeoCopy(BaseModel):
    """Optimized YouTube metadata for a single video."""
    title: str = Field(description="Optimized YouTube video title")
    description: str = Field(description="Compelling video description")
    tags: List[str] = Field(description="Relevant search tags")
    hashtags: List[str] = Field(description="Relevant hashtags, each starting with #")


class ReportPoint(BaseModel):
    """A titled finding (strength, recommendation or optimization)."""
    title: str
    description: str


class VideoPlanReport(BaseModel):
    """Synthesized review of a generated video plan."""
    strengths: List[ReportPoint] = Field(description="3-5 key strengths of the plan")
    recommendations: List[ReportPoint] = Field(description="3-5 actionable production recommendations")


class Weakness(BaseModel):
    text: str
    severity: Severity


class AnalysisReport(BaseModel):
    """Final report for an existing video."""
    pros: List[str] = Field(description="3-5 key strengths")
    cons: List[Weakness] = Field(description="3-5 key weaknesses with a severity rating")
    optimizations: List[ReportPoint] = Field(description="Top 5 most impactful, actionable recommendations")


class ScriptSection(BaseModel):
    heading: str = Field(description="Section title, e.g. 'Intro / Hook'")
    content: str = Field(description="The spoken content for this section")


class VideoScript(BaseModel):
    """A video script broken into logical sections."""
    title: str = Field(description="A catchy title for the script")
    sections: List[ScriptSection]


# ----------------------------
# Requests
# ----------------------------
def _require_text(value: str, message: str) -> str:
    value = (value or "").strip()
    if not value:
        raise ValueError(message)
    return value


class VideoPlanRequest(BaseModel):
    """Form input for planning a new video."""
    topic: str
    tone: str = "Engaging"
    audience: str = "General audience"
    aspect_ratio: str = DEFAULT_ASPECT_RATIO

    @field_validator("topic", mode="before")
    @classmethod
    def _topic_required(cls, value):
        return _require_text(value, "Please provide a video topic or URL.")

    @field_validator("tone", "audience", mode="before")
    @classmethod
    def _strip(cls, value, info):
        value = (value or "").strip()
        return value or cls.model_fields[info.field_name].default

    @field_validator("aspect_ratio")
    @classmethod
    def _supported_ratio(cls, value):
        if value not in SUPPORTED_ASPECT_RATIOS:
            raise ValueError(f"Unsupported aspect ratio '{value}'. Use one of: {', '.join(SUPPORTED_ASPECT_RATIOS)}")
        return value

    @property
    def is_url(self) -> bool:
        return self.topic.lower().startswith(("http://", "https://"))


class VideoAnalysisRequest(BaseModel):
    """Form input for analyzing an existing video."""
    url: str
    transcript: str
    topic: str
    video_path: Optional[str] = None

    @field_validator("url", "transcript", "topic", mode="before")
    @classmethod
    def _all_required(cls, value):
        return _require_text(value, "Please provide a YouTube URL, transcript, and topic.")


def toggle_rating(current: Optional[str], rating: str) -> Optional[str]:
    """Clicking the current rating again clears it; any other rating replaces it."""
    return None if current == rating else rating


# ----------------------------
# Composite results
# ----------------------------
class GeneratedThumbnail(BaseModel):
    prompt: str
    image_url: str = Field(description="data:image/jpeg;base64,... URI")


class RatedRecommendation(ReportPoint):
    rating: Optional[Rating] = None


class VideoPlan(BaseModel):
    """The full creative package returned by the video plan pipeline."""
    request: VideoPlanRequest
    script: VideoScript
    seo_copy: SeoCopy
    thumbnails: List[GeneratedThumbnail] = Field(default_factory=list)
    report: VideoPlanReport
    ratings: Dict[int, Rating] = Field(default_factory=dict)
    selected_thumbnail: Optional[int] = None

    def rate_recommendation(self, index: int, rating: Rating) -> Optional[Rating]:
        """Rate a recommendation; repeating the current rating clears it."""
        if not 0 <= index < len(self.report.recommendations):
            raise IndexError(f"No recommendation at index {index}")
        new_rating = toggle_rating(self.ratings.get(index), rating)
        if new_rating is None:
            self.ratings.pop(index, None)
        else:
            self.ratings[index] = new_rating
        return new_rating

    def rated_recommendations(self) -> List[RatedRecommendation]:
        return [
            RatedRecommendation(**rec.model_dump(), rating=self.ratings.get(i))
            for i, rec in enumerate(self.report.recommendations)
        ]

    def select_thumbnail(self, index: int) -> GeneratedThumbnail:
        if not 0 <= index < len(self.thumbnails):
            raise IndexError(f"No thumbnail at index {index}")
        self.selected_thumbnail = index
        return self.thumbnails[index]


class VideoAnalysis(BaseModel):
    """Results of the existing-video analysis pipeline."""
    request: VideoAnalysisRequest
    video_analysis: str
    transcript_analysis: str
    seo_copy: SeoCopy
    report: AnalysisReport
    rewritten_script: Optional[VideoScript] = None


def validation_message(error: Exception) -> str:
    """Return the first human-readable message from a pydantic ValidationError."""
    errors = getattr(error, "errors", None)
    if callable(errors):
        for item in errors():
            message = item.get("msg", "")
            return message.removeprefix("Value error, ")
    return str(error)
