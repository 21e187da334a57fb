"""Pydantic records exchanged between the engine and its callers.

The engine, the template catalogue, the report builder and the MCP server all
exchange these models. Capability records accept either snake_case or the
camelCase field names used by stored components and UI forms.
"""

from __future__ import annotations

from datetime import date
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, StrictBool, StrictInt, model_validator
from pydantic.alias_generators import to_camel

# Capability flags and counts use Strict types: "yes", 1 or 3.0 are contract
# violations, not booleans or counts.
_METRICS_CONFIG = ConfigDict(
    frozen=True,
    extra="forbid",
    alias_generator=to_camel,
    populate_by_name=True,
)


class Severity(str, Enum):
    """Ordinal severity bucket, worst first."""

    CRITICAL = "critical"
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"

    @property
    def rank(self) -> int:
        """0 for critical up to 3 for low."""
        return list(Severity).index(self)


class ComponentType(str, Enum):
    """Kind of UI component being assessed."""

    INTERACTIVE = "interactive"
    DISPLAY = "display"
    INPUT = "input"
    LAYOUT = "layout"
    FEEDBACK = "feedback"


class Dimension(str, Enum):
    """Readiness dimensions, in scoring and issue-emission order.

    Values match the field names on ``MetricsRecord``.
    """

    STREAMING_READINESS = "streaming_readiness"
    CONFIDENCE_HANDLING = "confidence_handling"
    ERROR_HANDLING = "error_handling"
    DYNAMIC_CONTENT = "dynamic_content"
    INTERACTION_PATTERNS = "interaction_patterns"


class StreamingReadiness(BaseModel):
    """Can the component render content that arrives incrementally?"""

    model_config = _METRICS_CONFIG

    has_fixed_height: StrictBool
    has_overflow_handling: StrictBool
    supports_streaming: StrictBool
    has_progressive_render: StrictBool


class ConfidenceHandling(BaseModel):
    """Does the component surface how much to trust generated content?"""

    model_config = _METRICS_CONFIG

    has_confidence_indicators: StrictBool
    has_hallucination_detection: StrictBool
    has_ambiguity_states: StrictBool
    has_verification_badges: StrictBool


class ErrorHandling(BaseModel):
    """Fallback behavior when generation fails or stalls."""

    model_config = _METRICS_CONFIG

    has_graceful_degradation: StrictBool
    has_timeout_handling: StrictBool
    has_circuit_breaker: StrictBool
    has_human_handoff: StrictBool
    error_state_count: StrictInt = Field(ge=0, description="Distinct error states the component renders")


class DynamicContent(BaseModel):
    """Tolerance for content of unknown length and type."""

    model_config = _METRICS_CONFIG

    handles_variable_length: StrictBool
    supports_multi_modal: StrictBool
    has_token_limit_management: StrictBool
    supports_content_switching: StrictBool


class InteractionPatterns(BaseModel):
    """Conversational interaction affordances."""

    model_config = _METRICS_CONFIG

    has_intent_construction: StrictBool
    has_refinement_journey: StrictBool
    has_contextual_actions: StrictBool
    has_feedback_loops: StrictBool


class MetricsRecord(BaseModel):
    """Raw capability metrics for one component, the engine input."""

    model_config = _METRICS_CONFIG

    streaming_readiness: StreamingReadiness
    confidence_handling: ConfidenceHandling
    error_handling: ErrorHandling
    dynamic_content: DynamicContent
    interaction_patterns: InteractionPatterns

    def bundle(self, dimension: Dimension) -> BaseModel:
        return getattr(self, dimension.value)


class DimensionScores(BaseModel):
    """Per-dimension readiness, 100 = fully ready."""

    model_config = ConfigDict(frozen=True)

    streaming_readiness: int = Field(ge=0, le=100)
    confidence_handling: int = Field(ge=0, le=100)
    error_handling: int = Field(ge=0, le=100)
    dynamic_content: int = Field(ge=0, le=100)
    interaction_patterns: int = Field(ge=0, le=100)

    def get(self, dimension: Dimension) -> int:
        return getattr(self, dimension.value)


class Issue(BaseModel):
    """A single detected deficiency with its remediation estimate."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    kind: str = Field(alias="type", description="Stable remediation identifier, e.g. addStreamingState")
    description: str
    severity: Severity
    effort: int = Field(gt=0, description="Story points")
    recommendation: str


class ComponentIdentity(BaseModel):
    """Identity and ownership metadata carried alongside the metrics."""

    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    id: str
    name: str = Field(min_length=1)
    component_type: ComponentType = Field(alias="type")
    instances: int = Field(0, ge=0)
    dependencies: list[str] = Field(default_factory=list)
    team: str = "Unknown"
    last_modified: date


class AnalyzedComponent(ComponentIdentity):
    """A component with every derived field populated."""

    metrics: MetricsRecord
    dimension_scores: DimensionScores
    debt_score: int = Field(ge=0, le=100, description="0 = ready, 100 = not ready")
    severity: Severity
    issues: list[Issue] = Field(default_factory=list)
    remediation_effort: int = Field(ge=0, description="Total story points across issues")

    @model_validator(mode="after")
    def _effort_matches_issues(self) -> AnalyzedComponent:
        expected = sum(issue.effort for issue in self.issues)
        if self.remediation_effort != expected:
            raise ValueError(
                f"remediation_effort {self.remediation_effort} does not match issue total {expected}"
            )
        return self


class IssueFrequency(BaseModel):
    kind: str
    count: int


class PriorityComponent(BaseModel):
    name: str
    debt_score: int
    remediation_effort: int
    severity: Severity


class ExecutiveReport(BaseModel):
    """Portfolio-level summary of many analyzed components."""

    total_components: int
    average_debt_score: int = Field(ge=0, le=100)
    severity_counts: dict[Severity, int]
    total_remediation_effort: int
    estimated_weeks: int = Field(description="Sprint-rounded timeline for full remediation")
    top_issues: list[IssueFrequency]
    highest_priority: list[PriorityComponent]
    recommendations: list[str]
