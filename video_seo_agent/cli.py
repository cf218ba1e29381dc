"""vidseo - terminal front-end for the Video SEO agent swarm.

    vidseo plan "How to bake sourdough" --tone Friendly --audience "Beginner bakers"
    vidseo analyze --url https://youtu.be/... --topic "Sourdough" --transcript-file talk.txt

The progress view is a live table of agent statuses; the results view prints
the SEO copy, thumbnails, report and script, and the full bundle is written
to --output-dir.
"""

import asyncio
import logging
import sys
from pathlib import Path
from typing import Dict, Optional

import click
from pydantic import ValidationError
from rich import box
from rich.console import Console
from rich.live import Live
from rich.panel import Panel
from rich.table import Table

from .runner import PipelineError, SwarmRunner
from .shared.constants import DEFAULT_ASPECT_RATIO, SUPPORTED_ASPECT_RATIOS
from .shared.progress import AgentProgress, AgentStatus
from .shared.schemas import VideoAnalysis, VideoAnalysisRequest, VideoPlan, VideoPlanRequest, validation_message
from .results.formatting import format_script_text, write_video_analysis, write_video_plan

console = Console()

STATUS_STYLES = {
    AgentStatus.PENDING: "dim",
    AgentStatus.WORKING: "bold yellow",
    AgentStatus.DONE: "bold green",
    AgentStatus.ERROR: "bold red",
}

STATUS_ICONS = {
    AgentStatus.PENDING: "○",
    AgentStatus.WORKING: "◐",
    AgentStatus.DONE: "✔",
    AgentStatus.ERROR: "✖",
}


class ProgressBoard:
    """Keeps the latest AgentProgress per agent and renders it as a table."""

    def __init__(self, title: str):
        self.title = title
        self.agents: Dict[str, AgentProgress] = {}
        self.live: Optional[Live] = None

    def update(self, progress: AgentProgress) -> None:
        self.agents[progress.name] = progress
        if self.live is not None:
            self.live.update(self.render())

    def render(self) -> Table:
        table = Table(title=self.title, box=box.ROUNDED, expand=True)
        table.add_column("", width=2)
        table.add_column("Agent", style="bold")
        table.add_column("Role")
        table.add_column("Status")
        for agent in self.agents.values():
            style = STATUS_STYLES[agent.status]
            table.add_row(
                f"[{style}]{STATUS_ICONS[agent.status]}[/{style}]",
                agent.display_name,
                agent.description,
                f"[{style}]{agent.result or agent.status.value}[/{style}]",
            )
        return table


def _run_with_board(title: str, make_coro):
    board = ProgressBoard(title)
    with Live(board.render(), console=console, refresh_per_second=8) as live:
        board.live = live
        return asyncio.run(make_coro(board.update))


def _fail(message: str) -> None:
    console.print(f"[bold red]✖ {message}[/bold red]")
    sys.exit(1)


def print_video_plan(plan: VideoPlan, written: Dict[str, Path]) -> None:
    seo = plan.seo_copy
    console.print(Panel(
        f"[bold]{seo.title}[/bold]\n\n{seo.description}\n\n"
        f"[dim]Tags:[/dim] {', '.join(seo.tags)}\n[dim]Hashtags:[/dim] {' '.join(seo.hashtags)}",
        title="SEO & Metadata", border_style="green",
    ))

    thumbs = [str(path) for key, path in written.items() if key.startswith("thumbnail_")]
    console.print(Panel("\n".join(thumbs) or "No thumbnails were generated.", title="Thumbnail Concepts", border_style="magenta"))

    strengths = "\n".join(f"[green]✔[/green] [bold]{p.title}[/bold]: {p.description}" for p in plan.report.strengths)
    recommendations = "\n".join(
        f"[cyan]{i + 1}.[/cyan] [bold]{p.title}[/bold]: {p.description}" for i, p in enumerate(plan.report.recommendations)
    )
    console.print(Panel(
        f"[bold green]Strengths of this Plan[/bold green]\n{strengths}\n\n"
        f"[bold cyan]Production Recommendations[/bold cyan]\n{recommendations}",
        title="Report", border_style="cyan",
    ))

    console.print(Panel(format_script_text(plan.script), title=f"Generated Script: {plan.script.title}", border_style="blue"))


def print_video_analysis(analysis: VideoAnalysis) -> None:
    seo = analysis.seo_copy
    console.print(Panel(
        f"[bold]{seo.title}[/bold]\n\n{seo.description}\n\n[dim]Tags:[/dim] {', '.join(seo.tags)}",
        title="SEO & Metadata", border_style="green",
    ))

    severity_styles = {"Low": "yellow", "Medium": "dark_orange", "High": "red"}
    pros = "\n".join(f"[green]✔[/green] {pro}" for pro in analysis.report.pros)
    cons = "\n".join(
        f"[{severity_styles[c.severity]}]✖ [{c.severity}][/{severity_styles[c.severity]}] {c.text}" for c in analysis.report.cons
    )
    optimizations = "\n".join(
        f"[cyan]{i + 1}.[/cyan] [bold]{o.title}[/bold]: {o.description}" for i, o in enumerate(analysis.report.optimizations)
    )
    console.print(Panel(
        f"[bold green]Pros[/bold green]\n{pros}\n\n[bold red]Cons[/bold red]\n{cons}\n\n"
        f"[bold cyan]Optimizations[/bold cyan]\n{optimizations}",
        title="Report", border_style="cyan",
    ))

    if analysis.rewritten_script:
        console.print(Panel(
            format_script_text(analysis.rewritten_script),
            title=f"Rewritten Script: {analysis.rewritten_script.title}", border_style="blue",
        ))


@click.group()
@click.option("--verbose", is_flag=True, help="Enable debug logging")
def main(verbose: bool):
    """Leverage a swarm of AI agents to boost your video's CTR, SEO, and retention."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s - %(levelname)s - %(message)s",
        force=True,
    )


@main.command()
@click.argument("topic")
@click.option("--tone", default="Engaging", show_default=True, help="Tone of the video")
@click.option("--audience", default="General audience", show_default=True, help="Target audience")
@click.option("--aspect-ratio", type=click.Choice(SUPPORTED_ASPECT_RATIOS), default=DEFAULT_ASPECT_RATIO, show_default=True)
@click.option("--output-dir", type=click.Path(file_okay=False, path_type=Path), default=Path("vidseo_output"), show_default=True)
def plan(topic: str, tone: str, audience: str, aspect_ratio: str, output_dir: Path):
    """Plan a new video about TOPIC (a subject or a URL)."""
    try:
        request = VideoPlanRequest(topic=topic, tone=tone, audience=audience, aspect_ratio=aspect_ratio)
    except ValidationError as e:
        _fail(validation_message(e))

    runner = SwarmRunner()
    try:
        result = _run_with_board(
            "AI Agent Swarm is Working...",
            lambda on_progress: runner.plan_video(request, on_progress=on_progress),
        )
    except PipelineError as e:
        _fail(str(e))

    written = write_video_plan(result, output_dir)
    console.print("\n[bold]Your AI-Generated Video Plan is Ready![/bold]\n")
    print_video_plan(result, written)
    console.print(f"\n💾 Full report saved to [bold]{written['report']}[/bold]")


@main.command()
@click.option("--url", required=True, help="YouTube video URL")
@click.option("--topic", required=True, help="What the video is about")
@click.option("--transcript-file", required=True, type=click.File("r", encoding="utf-8"), help="Transcript text file ('-' for stdin)")
@click.option("--video-file", type=click.Path(exists=True, dir_okay=False), default=None, help="Local copy of the video for frame analysis")
@click.option("--output-dir", type=click.Path(file_okay=False, path_type=Path), default=Path("vidseo_output"), show_default=True)
def analyze(url: str, topic: str, transcript_file, video_file: Optional[str], output_dir: Path):
    """Analyze an existing video and its transcript."""
    try:
        request = VideoAnalysisRequest(url=url, topic=topic, transcript=transcript_file.read(), video_path=video_file)
    except ValidationError as e:
        _fail(validation_message(e))

    runner = SwarmRunner()
    try:
        result = _run_with_board(
            "AI Agent Swarm is Working...",
            lambda on_progress: runner.analyze_video(request, on_progress=on_progress),
        )
    except PipelineError as e:
        _fail(str(e))

    written = write_video_analysis(result, output_dir)
    console.print("\n[bold]Your Video Analysis is Ready![/bold]\n")
    print_video_analysis(result)
    console.print(f"\n💾 Full report saved to [bold]{written['report']}[/bold]")


if __name__ == "__main__":
    main()
