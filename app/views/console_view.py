"""Plain-text rendering of the reveal view for terminals."""

from __future__ import annotations

from collections.abc import Iterable

from app.views.constants import STATISTICS_LABELS, WARNING_TEXT, WARNING_TITLE
from core.models import DisplaySection, RiskFinding, SessionStatistics


def render_banner() -> str:
    return f"!! {WARNING_TITLE} !!\n{WARNING_TEXT}"


def render_sections(sections: Iterable[DisplaySection]) -> str:
    """Render sections as indented label/value blocks."""
    blocks: list[str] = []
    for section in sections:
        width = max((len(r.label) for r in section.rows), default=0)
        lines = [f"[{section.title}]"]
        lines += [f"  {r.label.ljust(width)} : {r.value}" for r in section.rows]
        blocks.append("\n".join(lines))
    return "\n\n".join(blocks)


def render_findings(findings: Iterable[tuple[RiskFinding, str]]) -> str:
    lines = []
    for finding, color in findings:
        lines.append(f"  {finding.level.value:<8} {finding.category} ({color})")
        lines.append(f"           {finding.description}")
        lines.append(f"           -> {finding.data}")
    return "\n".join(lines) if lines else "  No risks detected"


def render_statistics(stats: SessionStatistics) -> str:
    return "\n".join(f"  {label}: {getattr(stats, key)}" for key, label in STATISTICS_LABELS)
