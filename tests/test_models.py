"""Boundary validation of the engine's input and output records."""

import pytest
from pydantic import ValidationError

from design_debt.core.models import (
    AnalyzedComponent,
    ComponentIdentity,
    ComponentType,
    ErrorHandling,
    Issue,
    MetricsRecord,
    Severity,
)
from design_debt.core.scoring import analyze_component


def _error_locations(exc: ValidationError) -> list[str]:
    return [".".join(str(part) for part in err["loc"]).lower() for err in exc.errors()]


class TestMetricsValidation:
    def test_valid_record(self, metrics_data):
        record = MetricsRecord.model_validate(metrics_data)
        assert record.error_handling.error_state_count == 5

    def test_missing_flag_is_named(self, metrics_data):
        del metrics_data["streaming_readiness"]["has_progressive_render"]
        with pytest.raises(ValidationError) as exc_info:
            MetricsRecord.model_validate(metrics_data)
        assert any("progressive" in loc for loc in _error_locations(exc_info.value))

    def test_missing_bundle(self, metrics_data):
        del metrics_data["dynamic_content"]
        with pytest.raises(ValidationError):
            MetricsRecord.model_validate(metrics_data)

    def test_negative_error_state_count(self, metrics_data):
        metrics_data["error_handling"]["error_state_count"] = -1
        with pytest.raises(ValidationError) as exc_info:
            MetricsRecord.model_validate(metrics_data)
        assert any("error" in loc and "count" in loc for loc in _error_locations(exc_info.value))

    @pytest.mark.parametrize("value", ["yes", "true", 1, None])
    def test_flags_are_not_coerced(self, metrics_data, value):
        metrics_data["confidence_handling"]["has_verification_badges"] = value
        with pytest.raises(ValidationError):
            MetricsRecord.model_validate(metrics_data)

    @pytest.mark.parametrize("value", ["3", 3.0, True])
    def test_count_is_not_coerced(self, metrics_data, value):
        metrics_data["error_handling"]["error_state_count"] = value
        with pytest.raises(ValidationError):
            MetricsRecord.model_validate(metrics_data)

    def test_unknown_flag_rejected(self, metrics_data):
        metrics_data["interaction_patterns"]["has_voice_input"] = True
        with pytest.raises(ValidationError):
            MetricsRecord.model_validate(metrics_data)

    def test_camel_case_shape_accepted(self):
        record = MetricsRecord.model_validate({
            "streamingReadiness": {
                "hasFixedHeight": True,
                "hasOverflowHandling": False,
                "supportsStreaming": False,
                "hasProgressiveRender": False,
            },
            "confidenceHandling": {
                "hasConfidenceIndicators": False,
                "hasHallucinationDetection": False,
                "hasAmbiguityStates": False,
                "hasVerificationBadges": False,
            },
            "errorHandling": {
                "hasGracefulDegradation": True,
                "hasTimeoutHandling": False,
                "hasCircuitBreaker": False,
                "hasHumanHandoff": False,
                "errorStateCount": 2,
            },
            "dynamicContent": {
                "handlesVariableLength": False,
                "supportsMultiModal": False,
                "hasTokenLimitManagement": False,
                "supportsContentSwitching": False,
            },
            "interactionPatterns": {
                "hasIntentConstruction": False,
                "hasRefinementJourney": False,
                "hasContextualActions": False,
                "hasFeedbackLoops": False,
            },
        })
        assert record.streaming_readiness.has_fixed_height is True
        assert record.error_handling.error_state_count == 2

    def test_records_are_frozen(self, all_present):
        with pytest.raises(ValidationError):
            all_present.error_handling.error_state_count = 0

    def test_bundle_constructor_requires_every_field(self):
        with pytest.raises(ValidationError):
            ErrorHandling(has_graceful_degradation=True)


class TestIdentity:
    def test_type_alias(self):
        identity = ComponentIdentity.model_validate(
            {"id": "c", "name": "Card", "type": "display", "lastModified": "2026-01-31"}
        )
        assert identity.component_type == ComponentType.DISPLAY
        assert identity.last_modified.isoformat() == "2026-01-31"
        assert identity.dependencies == []
        assert identity.team == "Unknown"

    def test_unknown_type_rejected(self):
        with pytest.raises(ValidationError):
            ComponentIdentity(id="c", name="Card", component_type="widget", last_modified="2026-01-31")

    def test_empty_name_rejected(self):
        with pytest.raises(ValidationError):
            ComponentIdentity(id="c", name="", component_type="display", last_modified="2026-01-31")


class TestIssue:
    def test_kind_serializes_as_type(self):
        issue = Issue(kind="addFeedbackLoops", description="d", severity="medium", effort=4, recommendation="r")
        assert issue.model_dump(by_alias=True)["type"] == "addFeedbackLoops"
        assert Issue.model_validate(issue.model_dump(by_alias=True)) == issue

    def test_effort_must_be_positive(self):
        with pytest.raises(ValidationError):
            Issue(kind="x", description="d", severity=Severity.LOW, effort=0, recommendation="r")


class TestAnalyzedComponent:
    def test_round_trips_through_json(self, identity, worst_case):
        result = analyze_component(identity, worst_case)
        assert AnalyzedComponent.model_validate_json(result.model_dump_json()) == result

    def test_effort_mismatch_rejected(self, identity, worst_case):
        data = analyze_component(identity, worst_case).model_dump()
        data["remediation_effort"] += 1
        with pytest.raises(ValidationError, match="does not match issue total"):
            AnalyzedComponent.model_validate(data)

    def test_debt_score_bounds(self, identity, all_present):
        data = analyze_component(identity, all_present).model_dump()
        data["debt_score"] = 101
        with pytest.raises(ValidationError):
            AnalyzedComponent.model_validate(data)
