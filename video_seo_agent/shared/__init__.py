"""Shared utilities and tools for the Video SEO agent swarm.

This package contains common utilities, constants, schemas and tool functions
used across all agents in the multi-agent system.

Modules:
    - constants.py: Shared configuration values and the Gemini client
    - schemas.py: Pydantic output schemas, requests and composite results
    - progress.py: Agent status callbacks feeding the progress view
    - tools.py: Common tool functions for state/artifact management
"""
