"""Script Agent - Writes and rewrites video scripts.

Main Components:
    - agent.py: Factories for the script writer (new video plans) and the
      script rewriter (existing transcripts improved with report feedback)

Both agents return a VideoScript ({"title", "sections": [{"heading", "content"}]})
through structured output and write it to state['script'] or
state['rewritten_script'] respectively.
"""

from . import agent
