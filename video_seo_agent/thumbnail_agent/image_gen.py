"""Imagen integration for AI-generated YouTube thumbnails.

Thumbnails are generated in one Imagen request that returns several candidate
images, so the user can pick the concept they like best. The images come back
as raw JPEG bytes; callers store them as artifacts or wrap them in data URIs.
"""

from typing import List

from google import genai
from google.genai.types import GenerateImagesConfig

from ..shared.constants import IMAGEN_MODEL, THUMBNAIL_COUNT, DEFAULT_ASPECT_RATIO

THUMBNAIL_PROMPT = 'Generate a visually striking, high click-through-rate YouTube thumbnail for a video about: "{subject}". Minimal text, bold colors, and clear subject focus.'


def thumbnail_prompt(subject: str) -> str:
    return THUMBNAIL_PROMPT.format(subject=subject)


async def generate_thumbnail_images(
    client: genai.Client,
    subject: str,
    aspect_ratio: str = DEFAULT_ASPECT_RATIO,
    number_of_images: int = THUMBNAIL_COUNT,
) -> List[bytes]:
    """Generate thumbnail candidates for a video subject with Imagen.

    Args:
        client: Initialized Google Gemini client with API key
        subject: What the video is about (topic, URL or title)
        aspect_ratio: Imagen aspect ratio, e.g. "16:9"
        number_of_images: How many candidates to request

    Returns:
        JPEG bytes for each image Imagen returned. Images dropped by safety
        filtering are omitted, so the list can be shorter than requested.
    """
    response = await client.aio.models.generate_images(
        model=IMAGEN_MODEL,
        prompt=thumbnail_prompt(subject),
        config=GenerateImagesConfig(
            number_of_images=number_of_images,
            output_mime_type="image/jpeg",
            aspect_ratio=aspect_ratio,
        ),
    )

    images: List[bytes] = []
    for generated in response.generated_images or []:
        if generated.image and generated.image.image_bytes:
            images.append(generated.image.image_bytes)
    return images
