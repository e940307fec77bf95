from typing import List, Tuple

import streamlit as st

from schemas import AnalysisResult

SECTION_TITLES = (
    ("Strengths", "strengths"),
    ("Weaknesses", "weaknesses"),
    ("Suggestions", "suggestions"),
    ("Tailored Bullets", "tailoredBullets"),
)


def result_sections(result: AnalysisResult) -> List[Tuple[str, List[str]]]:
    """Titled list sections in display order, skipping empty ones."""
    return [
        (title, getattr(result, field))
        for title, field in SECTION_TITLES
        if getattr(result, field)
    ]


def format_score(result: AnalysisResult) -> str:
    return f"{result.matchScore}/100"


def render_result(result: AnalysisResult, container=st) -> None:
    container.metric("Match Score", format_score(result))

    for title, items in result_sections(result):
        container.markdown(f"#### {title}")
        container.markdown("\n".join(f"- {item}" for item in items))

    if result.notes:
        container.markdown("#### Notes")
        container.write(result.notes)
