"""Video Analysis Agent - Reviews an existing video before it is optimized.

Main Components:
    - agent.py: Video Structure Analyzer (search-grounded, frame-aware) and
      Transcript & Content Analyst agent factories
    - frames.py: OpenCV frame sampling for local video files
"""

from . import agent
