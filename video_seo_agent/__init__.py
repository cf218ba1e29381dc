"""Video SEO Agent - Multi-agent swarm for planning and optimizing YouTube videos.

This package contains the root orchestrator agent, the workflow pipelines and
all specialized sub-agents. Together they turn a topic (or URL), a tone and an
audience into a complete video plan, or review an existing video and its
transcript to produce an optimization report.

Main Components:
    - agent.py: Root orchestrator agent and ADK App (for `adk web` / `adk run`)
    - pipeline.py: Sequential/parallel workflow agents wiring the swarm together
    - runner.py: One-shot runs with progress callbacks returning composite results
    - cli.py: `vidseo` terminal front-end
    - shared/: Configuration, schemas, progress tracking and common tools
    - script_agent/: Writes new scripts and rewrites existing transcripts
    - seo_agent/: Search-grounded SEO titles, descriptions, tags and hashtags
    - thumbnail_agent/: Imagen thumbnail concepts
    - report_agent/: Final report synthesis
    - video_analysis_agent/: Video URL/frame analysis and transcript analysis
    - results/: Report rendering, export and review tools

The root agent lives in the `agent` submodule, which ADK's loader imports on
its own. Importing the package does not build it, so the CLI and the runner
keep their own logging setup.

Usage:
    from video_seo_agent.agent import root_agent
    # The root_agent is configured with both pipelines and ready to use
"""
