"""Shared fixtures: identity metadata and canonical metrics records."""

from datetime import date

import pytest

from design_debt.core.models import ComponentIdentity, Dimension, MetricsRecord


def _metrics(value: bool, fixed_height: bool, error_states: int) -> dict:
    return {
        "streaming_readiness": {
            "has_fixed_height": fixed_height,
            "has_overflow_handling": value,
            "supports_streaming": value,
            "has_progressive_render": value,
        },
        "confidence_handling": {
            "has_confidence_indicators": value,
            "has_hallucination_detection": value,
            "has_ambiguity_states": value,
            "has_verification_badges": value,
        },
        "error_handling": {
            "has_graceful_degradation": value,
            "has_timeout_handling": value,
            "has_circuit_breaker": value,
            "has_human_handoff": value,
            "error_state_count": error_states,
        },
        "dynamic_content": {
            "handles_variable_length": value,
            "supports_multi_modal": value,
            "has_token_limit_management": value,
            "supports_content_switching": value,
        },
        "interaction_patterns": {
            "has_intent_construction": value,
            "has_refinement_journey": value,
            "has_contextual_actions": value,
            "has_feedback_loops": value,
        },
    }


@pytest.fixture
def metrics_data():
    """Raw dict for a fully capable component, safe to mutate per test."""
    return _metrics(True, fixed_height=False, error_states=5)


@pytest.fixture
def all_present():
    return MetricsRecord.model_validate(_metrics(True, fixed_height=False, error_states=5))


@pytest.fixture
def all_absent():
    """Every desirable capability missing; fixed height is off, which is the good value."""
    return MetricsRecord.model_validate(_metrics(False, fixed_height=False, error_states=0))


@pytest.fixture
def worst_case():
    return MetricsRecord.model_validate(_metrics(False, fixed_height=True, error_states=0))


@pytest.fixture
def identity():
    return ComponentIdentity(
        id="comp-1",
        name="ChatPanel",
        component_type="interactive",
        instances=12,
        dependencies=["MessageList", "Composer"],
        team="Conversational UI",
        last_modified=date(2026, 10, 1),
    )


@pytest.fixture
def with_flag():
    """Return a copy of a metrics record with one field replaced."""

    def _with_flag(metrics: MetricsRecord, dimension: Dimension, field: str, value) -> MetricsRecord:
        bundle = metrics.bundle(dimension).model_copy(update={field: value})
        return metrics.model_copy(update={dimension.value: bundle})

    return _with_flag
