"""Results - Rendering, export and review of the swarm's output.

Main Components:
    - formatting.py: Text report, clipboard script text and on-disk export
    - tools.py: Root-agent tools for committing requests, rating
      recommendations, selecting thumbnails and exporting artifacts
"""
