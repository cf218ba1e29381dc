"""SEO Agent - Generates search-optimized YouTube metadata.

Main Components:
    - agent.py: Search-grounded agent factory and the callback that parses its
      output into state['seo_copy']
"""

from . import agent
