"""Thumbnail Agent - Creates thumbnail concepts for a video.

Main Components:
    - agent.py: Agent definition with the generate_thumbnails tool
    - image_gen.py: Imagen integration returning JPEG bytes
"""

from . import agent
