"""Report Agent - Synthesizes the swarm's work into a final report."""

from . import agent
