"""Design debt scoring engine.

Turns a component's raw capability metrics into five dimension scores, a
weighted debt score, a severity bucket and the list of remediation issues.

Rules
-----
- Pure and synchronous: no I/O, no clocks, no randomness
- Identical metrics always produce identical output, issue order included
- Rounding happens once, at the ``analyze_component`` boundary
"""

from __future__ import annotations

import logging
from decimal import ROUND_HALF_UP, Decimal

from .models import (
    AnalyzedComponent,
    ComponentIdentity,
    ConfidenceHandling,
    Dimension,
    DimensionScores,
    DynamicContent,
    ErrorHandling,
    InteractionPatterns,
    MetricsRecord,
    Severity,
    StreamingReadiness,
)
from .rules import MIN_ERROR_STATES, detect_issues, total_effort

logger = logging.getLogger(__name__)

MAX_SCORE = 100

# Per error state short of MIN_ERROR_STATES.
ERROR_STATE_PENALTY = 4

# (field, penalty, value that counts as deficient)
STREAMING_PENALTIES = (
    ("has_fixed_height", 30, True),
    ("has_overflow_handling", 20, False),
    ("supports_streaming", 25, False),
    ("has_progressive_render", 25, False),
)

CONFIDENCE_PENALTIES = (
    ("has_confidence_indicators", 25, False),
    ("has_hallucination_detection", 25, False),
    ("has_ambiguity_states", 25, False),
    ("has_verification_badges", 25, False),
)

ERROR_PENALTIES = (
    ("has_graceful_degradation", 20, False),
    ("has_timeout_handling", 20, False),
    ("has_circuit_breaker", 20, False),
    ("has_human_handoff", 20, False),
)

DYNAMIC_CONTENT_PENALTIES = (
    ("handles_variable_length", 25, False),
    ("supports_multi_modal", 25, False),
    ("has_token_limit_management", 25, False),
    ("supports_content_switching", 25, False),
)

INTERACTION_PENALTIES = (
    ("has_intent_construction", 25, False),
    ("has_refinement_journey", 25, False),
    ("has_contextual_actions", 25, False),
    ("has_feedback_loops", 25, False),
)

# Decimal so the weights sum to exactly 1 and the debt score carries no
# binary floating-point drift into rounding.
DIMENSION_WEIGHTS: dict[Dimension, Decimal] = {
    Dimension.STREAMING_READINESS: Decimal("0.25"),
    Dimension.CONFIDENCE_HANDLING: Decimal("0.20"),
    Dimension.ERROR_HANDLING: Decimal("0.25"),
    Dimension.DYNAMIC_CONTENT: Decimal("0.15"),
    Dimension.INTERACTION_PATTERNS: Decimal("0.15"),
}

# Inclusive lower bounds, checked highest first.
SEVERITY_THRESHOLDS = (
    (80, Severity.CRITICAL),
    (60, Severity.HIGH),
    (40, Severity.MEDIUM),
)


def _apply_penalties(bundle, penalties) -> int:
    score = MAX_SCORE
    for field, penalty, deficient_when in penalties:
        if getattr(bundle, field) is deficient_when:
            score -= penalty
    return score


def score_streaming_readiness(bundle: StreamingReadiness) -> int:
    """Score streaming readiness.

    ``has_fixed_height`` is the one flag penalized when present: a fixed-height
    container clips content that keeps growing while it streams in.
    """
    return max(0, _apply_penalties(bundle, STREAMING_PENALTIES))


def score_confidence_handling(bundle: ConfidenceHandling) -> int:
    return max(0, _apply_penalties(bundle, CONFIDENCE_PENALTIES))


def score_error_handling(bundle: ErrorHandling) -> int:
    """Score error handling, including the shortfall against MIN_ERROR_STATES."""
    score = _apply_penalties(bundle, ERROR_PENALTIES)
    missing_states = max(0, MIN_ERROR_STATES - bundle.error_state_count)
    score -= missing_states * ERROR_STATE_PENALTY
    return max(0, score)


def score_dynamic_content(bundle: DynamicContent) -> int:
    return max(0, _apply_penalties(bundle, DYNAMIC_CONTENT_PENALTIES))


def score_interaction_patterns(bundle: InteractionPatterns) -> int:
    return max(0, _apply_penalties(bundle, INTERACTION_PENALTIES))


def score_dimensions(metrics: MetricsRecord) -> DimensionScores:
    """Score all five dimensions independently."""
    return DimensionScores(
        streaming_readiness=score_streaming_readiness(metrics.streaming_readiness),
        confidence_handling=score_confidence_handling(metrics.confidence_handling),
        error_handling=score_error_handling(metrics.error_handling),
        dynamic_content=score_dynamic_content(metrics.dynamic_content),
        interaction_patterns=score_interaction_patterns(metrics.interaction_patterns),
    )


def _composite_debt(dimension_scores: DimensionScores) -> Decimal:
    readiness = sum(
        (Decimal(dimension_scores.get(dimension)) * weight for dimension, weight in DIMENSION_WEIGHTS.items()),
        Decimal(0),
    )
    return MAX_SCORE - readiness


def composite_debt_score(dimension_scores: DimensionScores) -> float:
    """Combine dimension scores into the unrounded debt score.

    The weighted sum measures readiness; debt is its complement, so 0 means
    fully ready and 100 means nothing is in place.
    """
    return float(_composite_debt(dimension_scores))


def round_debt_score(debt: float | Decimal) -> int:
    """Round to the nearest integer, ties away from zero (92.5 -> 93)."""
    return int(Decimal(str(debt)).quantize(Decimal(1), rounding=ROUND_HALF_UP))


def classify_severity(debt_score: int) -> Severity:
    for lower_bound, severity in SEVERITY_THRESHOLDS:
        if debt_score >= lower_bound:
            return severity
    return Severity.LOW


def analyze_component(identity: ComponentIdentity, metrics: MetricsRecord) -> AnalyzedComponent:
    """Run the full pipeline for one component.

    Scores each dimension, aggregates and rounds the debt score, classifies
    severity, detects issues and totals their effort. The returned entity is
    built in one step, so callers never see a partially scored component.
    """
    dimension_scores = score_dimensions(metrics)
    debt_score = round_debt_score(_composite_debt(dimension_scores))
    severity = classify_severity(debt_score)
    issues = detect_issues(metrics)
    remediation_effort = total_effort(issues)

    logger.debug(
        "Analyzed %s: debt=%d severity=%s issues=%d effort=%d",
        identity.name, debt_score, severity.value, len(issues), remediation_effort,
    )

    return AnalyzedComponent(
        **identity.model_dump(include=set(ComponentIdentity.model_fields)),
        metrics=metrics,
        dimension_scores=dimension_scores,
        debt_score=debt_score,
        severity=severity,
        issues=issues,
        remediation_effort=remediation_effort,
    )
