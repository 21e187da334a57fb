"""Static remediation rule table and issue detection.

Each rule inspects the raw metrics directly, independent of the numeric
scores. ``RULES`` is ordered by dimension and then by flag declaration order;
that order is the display ranking, so new rules must be inserted where they
belong rather than appended.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Optional, Union

from .models import Dimension, Issue, MetricsRecord, Severity

# Components are expected to render at least this many distinct error states.
MIN_ERROR_STATES = 5
EFFORT_PER_MISSING_ERROR_STATE = 2


@dataclass(frozen=True)
class FlagRule:
    """One capability flag mapped to the issue emitted when it is deficient."""

    dimension: Dimension
    flag: str
    kind: str
    description: str
    severity: Severity
    effort: int
    recommendation: str
    deficient_when: bool = False

    def evaluate(self, metrics: MetricsRecord) -> Optional[Issue]:
        if getattr(metrics.bundle(self.dimension), self.flag) is not self.deficient_when:
            return None
        return Issue(
            kind=self.kind,
            description=self.description,
            severity=self.severity,
            effort=self.effort,
            recommendation=self.recommendation,
        )


@dataclass(frozen=True)
class ErrorStateRule:
    """Aggregate rule for too few error states; effort scales with the gap."""

    dimension: Dimension
    kind: str
    severity: Severity
    recommendation: str
    minimum: int = MIN_ERROR_STATES
    effort_per_state: int = EFFORT_PER_MISSING_ERROR_STATE

    def evaluate(self, metrics: MetricsRecord) -> Optional[Issue]:
        missing = self.minimum - metrics.error_handling.error_state_count
        if missing <= 0:
            return None
        return Issue(
            kind=self.kind,
            description=f"Missing {missing} error states (need {self.minimum} minimum)",
            severity=self.severity,
            effort=missing * self.effort_per_state,
            recommendation=self.recommendation,
        )


Rule = Union[FlagRule, ErrorStateRule]

_S = Dimension.STREAMING_READINESS
_C = Dimension.CONFIDENCE_HANDLING
_E = Dimension.ERROR_HANDLING
_D = Dimension.DYNAMIC_CONTENT
_I = Dimension.INTERACTION_PATTERNS

RULES: tuple[Rule, ...] = (
    # Streaming readiness
    FlagRule(_S, "has_fixed_height", "removeFixedHeight", "Component has fixed height constraints",
             Severity.HIGH, 3, "Remove fixed height, implement min-height with auto-expansion",
             deficient_when=True),
    FlagRule(_S, "has_overflow_handling", "addOverflowHandling", "Missing overflow handling for dynamic content",
             Severity.MEDIUM, 2, "Add overflow-y: auto with max-height constraint"),
    FlagRule(_S, "supports_streaming", "addStreamingState", "No streaming state support",
             Severity.CRITICAL, 5, "Implement streaming state with progressive content reveal"),
    FlagRule(_S, "has_progressive_render", "addProgressiveRender", "Missing progressive rendering capability",
             Severity.HIGH, 5, "Add skeleton states and progressive content loading"),
    # Confidence handling
    FlagRule(_C, "has_confidence_indicators", "addConfidenceIndicator", "No confidence score visualization",
             Severity.MEDIUM, 3, "Add visual confidence indicators (e.g., badges, colors)"),
    FlagRule(_C, "has_hallucination_detection", "addHallucinationDetection", "Missing hallucination detection UI",
             Severity.HIGH, 5, "Implement warning states for low-confidence content"),
    FlagRule(_C, "has_ambiguity_states", "addAmbiguityStates", "No handling for ambiguous AI responses",
             Severity.MEDIUM, 3, "Add disambiguation UI patterns"),
    FlagRule(_C, "has_verification_badges", "addVerificationBadges", "Missing verification status indicators",
             Severity.LOW, 2, "Add badges for verified/unverified content"),
    # Error handling
    FlagRule(_E, "has_graceful_degradation", "addGracefulDegradation", "No graceful degradation strategy",
             Severity.HIGH, 4, "Implement fallback content and partial success states"),
    FlagRule(_E, "has_timeout_handling", "addTimeoutHandling", "Missing timeout handling",
             Severity.HIGH, 3, "Add timeout states with retry options"),
    FlagRule(_E, "has_circuit_breaker", "addCircuitBreaker", "No circuit breaker pattern",
             Severity.MEDIUM, 5, "Implement circuit breaker to prevent cascade failures"),
    FlagRule(_E, "has_human_handoff", "addHumanHandoff", "Missing human handoff mechanism",
             Severity.CRITICAL, 8, "Add escalation path to human support"),
    ErrorStateRule(_E, "addErrorState", Severity.MEDIUM,
                   "Add comprehensive error states (network, timeout, validation, server, rate-limit)"),
    # Dynamic content
    FlagRule(_D, "handles_variable_length", "addVariableLengthHandling", "Cannot handle variable-length content",
             Severity.HIGH, 4, "Implement flexible layouts for variable content lengths"),
    FlagRule(_D, "supports_multi_modal", "addMultiModalSupport", "No support for multiple content types",
             Severity.MEDIUM, 6, "Add rendering for text, images, code, tables, etc."),
    FlagRule(_D, "has_token_limit_management", "implementTokenCounter", "Missing token limit management",
             Severity.MEDIUM, 5, "Add token counter with limit warnings"),
    FlagRule(_D, "supports_content_switching", "addContentSwitching", "No dynamic content switching capability",
             Severity.LOW, 3, "Support seamless content type transitions"),
    # Interaction patterns
    FlagRule(_I, "has_intent_construction", "addIntentConstruction", "Missing intent construction UI",
             Severity.MEDIUM, 5, "Add guided intent building interface"),
    FlagRule(_I, "has_refinement_journey", "addRefinementJourney", "No refinement workflow",
             Severity.MEDIUM, 6, "Implement iterative refinement patterns"),
    FlagRule(_I, "has_contextual_actions", "addContextualActions", "Missing contextual action suggestions",
             Severity.LOW, 4, "Add smart action recommendations based on content"),
    FlagRule(_I, "has_feedback_loops", "addFeedbackLoops", "No user feedback mechanisms",
             Severity.MEDIUM, 4, "Implement thumbs up/down and improvement suggestions"),
)


def detect_issues(metrics: MetricsRecord, rules: Iterable[Rule] = RULES) -> list[Issue]:
    """Evaluate every rule in order and collect the issues that fire."""
    issues = []
    for rule in rules:
        issue = rule.evaluate(metrics)
        if issue is not None:
            issues.append(issue)
    return issues


def total_effort(issues: Iterable[Issue]) -> int:
    """Total story points across issues."""
    return sum(issue.effort for issue in issues)
