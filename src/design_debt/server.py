"""AI Design Debt MCP Server.

FastMCP server with 5 read-only tools over the design debt engine.
Run: design-debt-mcp
"""

from __future__ import annotations

import logging
import os
import uuid
from contextlib import asynccontextmanager
from datetime import date
from typing import AsyncIterator, Optional

from mcp.server.fastmcp import FastMCP
from mcp.types import ToolAnnotations

from .core.models import AnalyzedComponent, ComponentIdentity, MetricsRecord
from .core.report import (
    DEFAULT_SPRINT_CAPACITY,
    DEFAULT_SPRINT_WEEKS,
    build_executive_report,
    render_report_text,
)
from .core.scoring import analyze_component
from .core.templates import TEMPLATES, get_template, list_templates, quick_metrics

logger = logging.getLogger(__name__)

DEFAULT_LOG_LEVEL = "INFO"

READ_ONLY = ToolAnnotations(readOnlyHint=True, destructiveHint=False, idempotentHint=True, openWorldHint=False)


@asynccontextmanager
async def lifespan(server: FastMCP) -> AsyncIterator[None]:
    """Configure logging for the server process."""
    level = os.environ.get("LOG_LEVEL", DEFAULT_LOG_LEVEL).upper()
    logging.basicConfig(level=level, format="%(asctime)s %(name)s %(levelname)s %(message)s")
    logger.info("Design debt server started (%d templates)", len(TEMPLATES))
    try:
        yield
    finally:
        logger.info("Design debt server stopped")


mcp = FastMCP(
    "AI Design Debt",
    instructions="Score how ready UI components are for AI-generated content across streaming, confidence, error handling, dynamic content, and interaction patterns, and get prioritized remediation issues with story-point estimates.",
    lifespan=lifespan,
)


def _get_positive_int_env(name: str, default: int) -> int:
    raw = os.environ.get(name, "")
    if not raw:
        return default
    try:
        value = int(raw)
    except ValueError:
        raise ValueError(f"{name} must be a positive integer, got '{raw}'") from None
    if value <= 0:
        raise ValueError(f"{name} must be a positive integer, got '{raw}'")
    return value


def _new_identity(
    name: str,
    component_type: str = "interactive",
    instances: int = 0,
    dependencies: Optional[list[str]] = None,
    team: str = "Unknown",
    last_modified: Optional[str] = None,
) -> ComponentIdentity:
    """Build identity metadata, filling in the generated id and today's date."""
    return ComponentIdentity(
        id=f"comp_{uuid.uuid4().hex[:8]}",
        name=name,
        component_type=component_type,
        instances=instances,
        dependencies=dependencies or [],
        team=team,
        last_modified=last_modified or date.today(),
    )


def _component_summary(component: AnalyzedComponent) -> str:
    if not component.issues:
        return f"{component.name}: debt score {component.debt_score}/100 ({component.severity.value}). No issues found."
    return (
        f"{component.name}: debt score {component.debt_score}/100 ({component.severity.value}). "
        f"{len(component.issues)} issue(s), {component.remediation_effort} story points to remediate."
    )


def _component_result(component: AnalyzedComponent) -> dict:
    return {
        "title": f"Design Debt: {component.name}",
        "component": component.model_dump(mode="json"),
        "summary": _component_summary(component),
    }


# ─── Tool 1: Analyze Component ───────────────────────────────────────────────


@mcp.tool(annotations=READ_ONLY)
async def debt_analyze_component(
    name: str,
    metrics: dict,
    component_type: str = "interactive",
    instances: int = 0,
    dependencies: Optional[list[str]] = None,
    team: str = "Unknown",
    last_modified: Optional[str] = None,
) -> dict:
    """Score a component's AI readiness from its full capability metrics.

    Args:
        name: Component name, e.g. 'ChatPanel'.
        metrics: Object with streaming_readiness, confidence_handling, error_handling,
                 dynamic_content and interaction_patterns. Every flag is required;
                 camelCase keys (hasFixedHeight, errorStateCount, ...) are accepted.
        component_type: One of interactive, display, input, layout, feedback.
        instances: How many times the component is used in the product.
        dependencies: Names of components this one depends on.
        team: Owning team.
        last_modified: ISO date of the last change. Defaults to today.
    """
    record = MetricsRecord.model_validate(metrics)
    identity = _new_identity(name, component_type, instances, dependencies, team, last_modified)
    return _component_result(analyze_component(identity, record))


# ─── Tool 2: Quick Analysis ──────────────────────────────────────────────────


@mcp.tool(annotations=READ_ONLY)
async def debt_quick_analysis(
    component_name: str,
    has_fixed_height: bool = True,
    has_overflow_handling: bool = False,
    supports_streaming: bool = False,
    has_progressive_render: bool = False,
    has_confidence_ui: bool = False,
    error_state_count: int = 2,
    handles_variable_length: bool = False,
) -> dict:
    """Fast assessment from a handful of yes/no answers. Unasked capabilities count as missing.

    Args:
        component_name: Component name.
        has_fixed_height: Does the component have a fixed height? Default true.
        has_overflow_handling: Does it scroll or otherwise handle overflow?
        supports_streaming: Can it render content as it streams in?
        has_progressive_render: Does it show skeletons / progressive loading?
        has_confidence_ui: Does it show confidence indicators?
        error_state_count: How many distinct error states it renders. Default 2.
        handles_variable_length: Does the layout adapt to variable-length content?
    """
    record = quick_metrics(
        has_fixed_height=has_fixed_height,
        has_overflow_handling=has_overflow_handling,
        supports_streaming=supports_streaming,
        has_progressive_render=has_progressive_render,
        has_confidence_ui=has_confidence_ui,
        error_state_count=error_state_count,
        handles_variable_length=handles_variable_length,
    )
    return _component_result(analyze_component(_new_identity(component_name), record))


# ─── Tool 3: Templates ───────────────────────────────────────────────────────


@mcp.tool(annotations=READ_ONLY)
async def debt_list_templates() -> dict:
    """Preset metrics for common component kinds (button, modal, card, data table, ...)."""
    templates = list_templates()
    return {
        "title": "Component Templates",
        "templates": [t.model_dump(mode="json") for t in templates],
        "count": len(templates),
        "summary": f"{len(templates)} templates: {', '.join(t.id for t in templates)}",
    }


@mcp.tool(annotations=READ_ONLY)
async def debt_analyze_template(template_id: str, name: Optional[str] = None) -> dict:
    """Score one of the preset component templates.

    Args:
        template_id: Template id from debt_list_templates, e.g. 'button' or 'data-table'.
        name: Optional component name. Defaults to the template's name.
    """
    template = get_template(template_id)
    identity = _new_identity(name or template.name, template.component_type.value)
    return _component_result(analyze_component(identity, template.metrics))


# ─── Tool 4: Executive Report ────────────────────────────────────────────────


def _analyze_entry(entry: dict) -> AnalyzedComponent:
    """Analyze one report entry carrying either ``metrics`` or a ``template_id``."""
    fields = dict(entry)
    template_id = fields.pop("template_id", None)
    raw_metrics = fields.pop("metrics", None)

    if template_id:
        template = get_template(template_id)
        record = template.metrics
        fields.setdefault("name", template.name)
        if not {"component_type", "type"} & fields.keys():
            fields["component_type"] = template.component_type
    elif raw_metrics is not None:
        record = MetricsRecord.model_validate(raw_metrics)
    else:
        raise ValueError(f"Component {fields.get('name', '?')!r} needs either 'metrics' or 'template_id'")

    fields.setdefault("id", f"comp_{uuid.uuid4().hex[:8]}")
    if not {"last_modified", "lastModified"} & fields.keys():
        fields["last_modified"] = date.today()
    return analyze_component(ComponentIdentity.model_validate(fields), record)


@mcp.tool(annotations=READ_ONLY)
async def debt_executive_report(components: list[dict]) -> dict:
    """Portfolio report: average debt, severity breakdown, top issues, priorities, and timeline.

    Timeline uses SPRINT_CAPACITY_POINTS story points per sprint (default 20)
    and SPRINT_LENGTH_WEEKS weeks per sprint (default 2).

    Args:
        components: List of components. Each needs a 'name' plus either 'metrics'
                    (same shape as debt_analyze_component) or a 'template_id'.
                    Optional: component_type, instances, dependencies, team, last_modified.
    """
    sprint_capacity = _get_positive_int_env("SPRINT_CAPACITY_POINTS", DEFAULT_SPRINT_CAPACITY)
    sprint_weeks = _get_positive_int_env("SPRINT_LENGTH_WEEKS", DEFAULT_SPRINT_WEEKS)

    analyzed = [_analyze_entry(entry) for entry in components]
    report = build_executive_report(analyzed, sprint_capacity=sprint_capacity, sprint_weeks=sprint_weeks)

    if not analyzed:
        summary = "No components supplied."
    else:
        summary = (
            f"{report.total_components} components, average debt score {report.average_debt_score}. "
            f"{report.total_remediation_effort} story points over ~{report.estimated_weeks} weeks."
        )

    return {
        "title": "Executive Report",
        "report": report.model_dump(mode="json"),
        "components": [{"name": c.name, "debt_score": c.debt_score, "severity": c.severity.value} for c in analyzed],
        "report_text": render_report_text(report, date.today()),
        "summary": summary,
    }


def main():
    """Entry point for the CLI command."""
    mcp.run()


if __name__ == "__main__":
    main()
