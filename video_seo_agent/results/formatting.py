"""Rendering and export of swarm results.

Text renderings mirror what the results view offers:
    - format_plan_report: the downloadable VIDSEO_Report.txt
    - format_script_text: the "copy script" clipboard text
    - format_analysis_report: the text export for an analyzed video

write_video_plan / write_video_analysis put the full bundle on disk: the text
report, a JSON document and, for plans, one JPEG per thumbnail.
"""

import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from ..shared.schemas import SeoCopy, VideoAnalysis, VideoPlan, VideoScript
from ..shared.tools import decode_data_uri

REPORT_FILENAME = "VIDSEO_Report.txt"
ANALYSIS_REPORT_FILENAME = "VIDSEO_Analysis_Report.txt"
PLAN_JSON_FILENAME = "video_plan.json"
ANALYSIS_JSON_FILENAME = "video_analysis.json"


def format_seo_block(seo_copy: SeoCopy) -> str:
    return (
        f"TITLE: {seo_copy.title}\n\n"
        f"DESCRIPTION:\n{seo_copy.description}\n\n"
        f"TAGS: {', '.join(seo_copy.tags)}\n\n"
        f"HASHTAGS: {' '.join(seo_copy.hashtags)}"
    )


def format_script_sections(script: VideoScript) -> str:
    return "\n\n".join(f"\n### {section.heading} ###\n{section.content}\n" for section in script.sections)


def format_plan_report(plan: VideoPlan) -> str:
    """Render the downloadable plain-text report for a video plan."""
    report = plan.report
    strengths = "\n".join(f"- {point.title}: {point.description}" for point in report.strengths)
    recommendations = "\n".join(f"- {point.title}: {point.description}" for point in report.recommendations)

    content = f"""
VIDSEO: AI-GENERATED VIDEO PLAN
================================

## SEO & METADATA
-----------------
{format_seo_block(plan.seo_copy)}


## ANALYSIS & RECOMMENDATIONS
-----------------------------
STRENGTHS:
{strengths}

RECOMMENDATIONS:
{recommendations}


## GENERATED SCRIPT
-------------------
SCRIPT TITLE: {plan.script.title}
{format_script_sections(plan.script)}
"""
    return content.strip()


def format_script_text(script: VideoScript) -> str:
    """Render a script the way the copy-to-clipboard button does."""
    return f"{script.title}\n\n" + "\n\n".join(f"{s.heading}\n{s.content}" for s in script.sections)


def format_analysis_report(analysis: VideoAnalysis) -> str:
    report = analysis.report
    pros = "\n".join(f"- {pro}" for pro in report.pros)
    cons = "\n".join(f"- [{con.severity}] {con.text}" for con in report.cons)
    optimizations = "\n".join(f"- {opt.title}: {opt.description}" for opt in report.optimizations)

    content = f"""
VIDSEO: VIDEO ANALYSIS REPORT
=============================

VIDEO: {analysis.request.url}
TOPIC: {analysis.request.topic}

## SEO & METADATA
-----------------
{format_seo_block(analysis.seo_copy)}


## ANALYSIS & RECOMMENDATIONS
-----------------------------
STRENGTHS:
{pros}

WEAKNESSES:
{cons}

OPTIMIZATIONS:
{optimizations}


## VISUALS ANALYSIS
-------------------
{analysis.video_analysis.strip()}


## TRANSCRIPT & CONTENT ANALYSIS
--------------------------------
{analysis.transcript_analysis.strip()}
"""
    if analysis.rewritten_script:
        content += f"""

## REWRITTEN SCRIPT
-------------------
SCRIPT TITLE: {analysis.rewritten_script.title}
{format_script_sections(analysis.rewritten_script)}
"""
    return content.strip()


def plan_export_dict(plan: VideoPlan, thumbnails: Optional[List[Dict[str, Any]]] = None) -> Dict[str, Any]:
    """JSON-safe export of a plan; thumbnails are replaced by the given references."""
    data = plan.model_dump(mode="json", exclude={"thumbnails"})
    data["recommendations"] = [rec.model_dump(mode="json") for rec in plan.rated_recommendations()]
    data["thumbnails"] = thumbnails if thumbnails is not None else [
        {"prompt": thumb.prompt} for thumb in plan.thumbnails
    ]
    return data


def write_video_plan(plan: VideoPlan, output_dir: Union[str, Path]) -> Dict[str, Path]:
    """Write the text report, JSON bundle and thumbnail JPEGs for a plan.

    Returns:
        Mapping of artifact kind ("report", "json", "thumbnail_<i>") to path
    """
    output_dir = Path(output_dir)
    output_dir.mkdir(parents=True, exist_ok=True)
    written: Dict[str, Path] = {}

    thumbnail_refs: List[Dict[str, Any]] = []
    for i, thumb in enumerate(plan.thumbnails):
        mime, image_bytes = decode_data_uri(thumb.image_url)
        extension = ".png" if mime == "image/png" else ".jpg"
        path = output_dir / f"thumbnail_{i}{extension}"
        path.write_bytes(image_bytes)
        written[f"thumbnail_{i}"] = path
        thumbnail_refs.append({"prompt": thumb.prompt, "file": path.name, "selected": plan.selected_thumbnail == i})

    report_path = output_dir / REPORT_FILENAME
    report_path.write_text(format_plan_report(plan), encoding="utf-8")
    written["report"] = report_path

    json_path = output_dir / PLAN_JSON_FILENAME
    json_path.write_text(json.dumps(plan_export_dict(plan, thumbnail_refs), indent=2, ensure_ascii=False), encoding="utf-8")
    written["json"] = json_path

    logging.info(f"💾 Video plan written to {output_dir}")
    return written


def write_video_analysis(analysis: VideoAnalysis, output_dir: Union[str, Path]) -> Dict[str, Path]:
    """Write the text report and JSON bundle for an analyzed video."""
    output_dir = Path(output_dir)
    output_dir.mkdir(parents=True, exist_ok=True)

    report_path = output_dir / ANALYSIS_REPORT_FILENAME
    report_path.write_text(format_analysis_report(analysis), encoding="utf-8")

    json_path = output_dir / ANALYSIS_JSON_FILENAME
    json_path.write_text(json.dumps(analysis.model_dump(mode="json"), indent=2, ensure_ascii=False), encoding="utf-8")

    logging.info(f"💾 Video analysis written to {output_dir}")
    return {"report": report_path, "json": json_path}
