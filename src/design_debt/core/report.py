"""Executive report over a collection of analyzed components.

Pure post-processing of engine output: averages, counts, rankings and a
sprint-based timeline. No scoring happens here.
"""

from __future__ import annotations

import logging
from collections import Counter
from datetime import date
from decimal import Decimal
from typing import Sequence

from .models import (
    AnalyzedComponent,
    ExecutiveReport,
    IssueFrequency,
    PriorityComponent,
    Severity,
)
from .scoring import round_debt_score

logger = logging.getLogger(__name__)

DEFAULT_SPRINT_CAPACITY = 20  # story points per sprint
DEFAULT_SPRINT_WEEKS = 2
DEFAULT_TOP_N = 5


def build_executive_report(
    components: Sequence[AnalyzedComponent],
    sprint_capacity: int = DEFAULT_SPRINT_CAPACITY,
    sprint_weeks: int = DEFAULT_SPRINT_WEEKS,
    top_n: int = DEFAULT_TOP_N,
) -> ExecutiveReport:
    """Summarize analyzed components for a portfolio-level review.

    Timeline assumes every sprint burns ``sprint_capacity`` points, rounded up
    to whole sprints. Ties in the top-issue and priority rankings keep the
    order in which they first appear in ``components``.
    """
    if sprint_capacity <= 0 or sprint_weeks <= 0:
        raise ValueError(f"Sprint capacity and length must be positive, got {sprint_capacity} SP / {sprint_weeks} weeks")

    total = len(components)
    if total:
        average = round_debt_score(Decimal(sum(c.debt_score for c in components)) / total)
    else:
        average = 0

    severity_counts = {severity: 0 for severity in Severity}
    for component in components:
        severity_counts[component.severity] += 1

    total_effort = sum(c.remediation_effort for c in components)
    sprints = -(-total_effort // sprint_capacity)
    estimated_weeks = sprints * sprint_weeks

    issue_counts = Counter(issue.kind for c in components for issue in c.issues)
    top_issues = [IssueFrequency(kind=kind, count=count) for kind, count in issue_counts.most_common(top_n)]

    ranked = sorted(components, key=lambda c: c.debt_score, reverse=True)[:top_n]
    highest_priority = [
        PriorityComponent(
            name=c.name,
            debt_score=c.debt_score,
            remediation_effort=c.remediation_effort,
            severity=c.severity,
        )
        for c in ranked
    ]

    recommendations = [
        f"Prioritize fixing {severity_counts[Severity.CRITICAL]} critical components immediately to prevent production failures",
        f"Allocate {total_effort} story points across {estimated_weeks} weeks for full remediation",
        "Focus on streaming readiness - this is the most common gap across components",
        "Implement circuit breaker patterns to prevent cascade failures",
        "Add confidence indicators to all AI-generated content displays",
        "Establish human handoff protocols for all AI interactions",
    ]

    logger.debug("Built report for %d components: avg=%d effort=%d", total, average, total_effort)

    return ExecutiveReport(
        total_components=total,
        average_debt_score=average,
        severity_counts=severity_counts,
        total_remediation_effort=total_effort,
        estimated_weeks=estimated_weeks,
        top_issues=top_issues,
        highest_priority=highest_priority,
        recommendations=recommendations,
    )


def _section(title: str, lines: list[str]) -> str:
    return "\n".join([title, "=" * len(title), *lines])


def render_report_text(report: ExecutiveReport, generated_on: date) -> str:
    """Render the report in its plain-text export layout."""
    header = f"AI DESIGN DEBT CALCULATOR - EXECUTIVE REPORT\nGenerated: {generated_on.isoformat()}"

    overview = _section("OVERVIEW", [
        f"Total Components Analyzed: {report.total_components}",
        f"Average Debt Score: {report.average_debt_score}",
        f"Total Remediation Effort: {report.total_remediation_effort} story points",
        f"Estimated Timeline: {report.estimated_weeks} weeks",
    ])
    severity = _section("SEVERITY BREAKDOWN", [
        f"{s.value.capitalize()}: {report.severity_counts.get(s, 0)} components" for s in Severity
    ])
    top_issues = _section("TOP ISSUES", [
        f"- {item.kind}: {item.count} occurrences" for item in report.top_issues
    ])
    priority = _section("HIGHEST PRIORITY COMPONENTS", [
        f"{idx}. {c.name} (Score: {c.debt_score}, Effort: {c.remediation_effort} SP)"
        for idx, c in enumerate(report.highest_priority, start=1)
    ])
    recommendations = _section("RECOMMENDATIONS", [
        f"{idx}. {text}" for idx, text in enumerate(report.recommendations, start=1)
    ])

    return "\n\n".join([header, overview, severity, top_issues, priority, recommendations])
