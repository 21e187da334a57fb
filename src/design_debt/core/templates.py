"""Component template catalogue and quick-analysis metrics.

Templates are named metric presets for common component kinds. The engine
treats them exactly like freehand input.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict

from .models import (
    ComponentType,
    ConfidenceHandling,
    DynamicContent,
    ErrorHandling,
    InteractionPatterns,
    MetricsRecord,
    StreamingReadiness,
)


class ComponentTemplate(BaseModel):
    """A named metrics preset."""

    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    component_type: ComponentType
    description: str
    metrics: MetricsRecord


def _metrics(streaming: tuple, confidence: tuple, errors: tuple, dynamic: tuple, interaction: tuple) -> MetricsRecord:
    """Build a MetricsRecord from per-bundle values in field declaration order."""
    return MetricsRecord(
        streaming_readiness=StreamingReadiness(**dict(zip(StreamingReadiness.model_fields, streaming))),
        confidence_handling=ConfidenceHandling(**dict(zip(ConfidenceHandling.model_fields, confidence))),
        error_handling=ErrorHandling(**dict(zip(ErrorHandling.model_fields, errors))),
        dynamic_content=DynamicContent(**dict(zip(DynamicContent.model_fields, dynamic))),
        interaction_patterns=InteractionPatterns(**dict(zip(InteractionPatterns.model_fields, interaction))),
    )


_NONE = (False, False, False, False)
_ALL = (True, True, True, True)

# Streaming: fixed height, overflow, streaming, progressive render.
# Errors: graceful degradation, timeout, circuit breaker, human handoff, error state count.
TEMPLATES: dict[str, ComponentTemplate] = {
    t.id: t
    for t in (
        ComponentTemplate(
            id="button", name="Button", component_type=ComponentType.INTERACTIVE,
            description="Standard button component with common patterns",
            metrics=_metrics((True, False, False, False), _NONE, (True, False, False, False, 2), _NONE, _NONE),
        ),
        ComponentTemplate(
            id="modal", name="Modal/Dialog", component_type=ComponentType.LAYOUT,
            description="Modal dialog for displaying content",
            metrics=_metrics((True, False, False, False), _NONE, (False, False, False, False, 1), _NONE, _NONE),
        ),
        ComponentTemplate(
            id="text-input", name="Text Input", component_type=ComponentType.INPUT,
            description="Text field or input component",
            metrics=_metrics((True, False, False, False), _NONE, (False, False, False, False, 3), _NONE, _NONE),
        ),
        ComponentTemplate(
            id="card", name="Card", component_type=ComponentType.DISPLAY,
            description="Content card for displaying information",
            metrics=_metrics(
                (True, False, False, True), _NONE, (True, False, False, False, 2),
                (False, True, False, False), (False, False, True, False),
            ),
        ),
        ComponentTemplate(
            id="notification", name="Notification/Toast", component_type=ComponentType.FEEDBACK,
            description="Notification or toast component",
            metrics=_metrics(
                (False, True, False, False), _NONE, (True, True, False, False, 4),
                (True, False, False, False), (False, False, True, False),
            ),
        ),
        ComponentTemplate(
            id="data-table", name="Data Table", component_type=ComponentType.DISPLAY,
            description="Table component for displaying structured data",
            metrics=_metrics(
                (True, True, False, False), _NONE, (False, True, False, False, 3),
                (True, False, False, False), _NONE,
            ),
        ),
        ComponentTemplate(
            id="ai-ready", name="AI-Ready Component", component_type=ComponentType.INTERACTIVE,
            description="Ideal component with full AI readiness",
            metrics=_metrics((False, True, True, True), _ALL, (True, True, True, True, 7), _ALL, _ALL),
        ),
    )
}


def list_templates() -> list[ComponentTemplate]:
    return list(TEMPLATES.values())


def get_template(template_id: str) -> ComponentTemplate:
    template = TEMPLATES.get(template_id)
    if template is None:
        raise ValueError(f"Unknown template '{template_id}'. Available templates: {', '.join(TEMPLATES)}")
    return template


def quick_metrics(
    has_fixed_height: bool = True,
    has_overflow_handling: bool = False,
    supports_streaming: bool = False,
    has_progressive_render: bool = False,
    has_confidence_ui: bool = False,
    error_state_count: int = 2,
    handles_variable_length: bool = False,
) -> MetricsRecord:
    """Expand the short quick-analysis questionnaire into a full MetricsRecord.

    Graceful degradation is assumed once a component has 3+ error states and
    timeout handling once it has 4+. Capabilities the questionnaire does not
    ask about are treated as absent.
    """
    return MetricsRecord(
        streaming_readiness=StreamingReadiness(
            has_fixed_height=has_fixed_height,
            has_overflow_handling=has_overflow_handling,
            supports_streaming=supports_streaming,
            has_progressive_render=has_progressive_render,
        ),
        confidence_handling=ConfidenceHandling(
            has_confidence_indicators=has_confidence_ui,
            has_hallucination_detection=False,
            has_ambiguity_states=False,
            has_verification_badges=False,
        ),
        error_handling=ErrorHandling(
            has_graceful_degradation=error_state_count >= 3,
            has_timeout_handling=error_state_count >= 4,
            has_circuit_breaker=False,
            has_human_handoff=False,
            error_state_count=error_state_count,
        ),
        dynamic_content=DynamicContent(
            handles_variable_length=handles_variable_length,
            supports_multi_modal=False,
            has_token_limit_management=False,
            supports_content_switching=False,
        ),
        interaction_patterns=InteractionPatterns(
            has_intent_construction=False,
            has_refinement_journey=False,
            has_contextual_actions=False,
            has_feedback_loops=False,
        ),
    )
