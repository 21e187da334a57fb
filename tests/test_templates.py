"""Tests for the component template catalogue and quick-analysis metrics."""

from datetime import date

import pytest

from design_debt.core.models import ComponentIdentity, ComponentType, Severity
from design_debt.core.scoring import analyze_component, score_dimensions
from design_debt.core.templates import TEMPLATES, get_template, list_templates, quick_metrics


def _analyze(template_id):
    template = get_template(template_id)
    identity = ComponentIdentity(
        id=template.id,
        name=template.name,
        component_type=template.component_type,
        last_modified=date(2026, 1, 1),
    )
    return analyze_component(identity, template.metrics)


class TestCatalogue:
    def test_catalogue_order(self):
        assert [t.id for t in list_templates()] == [
            "button", "modal", "text-input", "card", "notification", "data-table", "ai-ready",
        ]

    def test_lookup(self):
        template = get_template("notification")
        assert template.name == "Notification/Toast"
        assert template.component_type == ComponentType.FEEDBACK
        assert template.metrics.error_handling.error_state_count == 4

    def test_unknown_template(self):
        with pytest.raises(ValueError, match="Unknown template 'slider'"):
            get_template("slider")

    def test_ids_match_keys(self):
        assert all(key == template.id for key, template in TEMPLATES.items())


class TestTemplateScores:
    @pytest.mark.parametrize(
        "template_id,debt,severity,issue_count,effort",
        [
            ("button", 93, Severity.CRITICAL, 20, 87),
            ("modal", 99, Severity.CRITICAL, 21, 93),
            ("text-input", 97, Severity.CRITICAL, 21, 89),
            ("card", 79, Severity.HIGH, 17, 72),
            ("notification", 66, Severity.HIGH, 15, 67),
            ("data-table", 83, Severity.CRITICAL, 18, 80),
            ("ai-ready", 0, Severity.LOW, 0, 0),
        ],
    )
    def test_template(self, template_id, debt, severity, issue_count, effort):
        result = _analyze(template_id)
        assert result.debt_score == debt
        assert result.severity == severity
        assert len(result.issues) == issue_count
        assert result.remediation_effort == effort

    def test_button_dimensions(self):
        scores = score_dimensions(get_template("button").metrics)
        assert (
            scores.streaming_readiness,
            scores.confidence_handling,
            scores.error_handling,
            scores.dynamic_content,
            scores.interaction_patterns,
        ) == (0, 0, 28, 0, 0)

    def test_notification_dimensions(self):
        scores = score_dimensions(get_template("notification").metrics)
        assert scores.streaming_readiness == 50
        assert scores.error_handling == 56
        assert scores.dynamic_content == 25
        assert scores.interaction_patterns == 25


class TestQuickMetrics:
    def test_defaults(self):
        metrics = quick_metrics()
        assert metrics.streaming_readiness.has_fixed_height is True
        assert metrics.error_handling.error_state_count == 2
        assert metrics.error_handling.has_graceful_degradation is False
        assert metrics.error_handling.has_timeout_handling is False

    @pytest.mark.parametrize(
        "count,graceful,timeout",
        [(2, False, False), (3, True, False), (4, True, True), (9, True, True)],
    )
    def test_error_handling_inferred_from_count(self, count, graceful, timeout):
        errors = quick_metrics(error_state_count=count).error_handling
        assert errors.has_graceful_degradation is graceful
        assert errors.has_timeout_handling is timeout
        assert errors.has_circuit_breaker is False
        assert errors.has_human_handoff is False

    def test_confidence_ui_maps_to_indicators(self):
        confidence = quick_metrics(has_confidence_ui=True).confidence_handling
        assert confidence.has_confidence_indicators is True
        assert confidence.has_hallucination_detection is False

    def test_unasked_capabilities_absent(self):
        metrics = quick_metrics(handles_variable_length=True)
        assert metrics.dynamic_content.handles_variable_length is True
        assert metrics.dynamic_content.supports_multi_modal is False
        assert not any(metrics.interaction_patterns.model_dump().values())

    def test_negative_count_rejected(self):
        with pytest.raises(ValueError):
            quick_metrics(error_state_count=-1)
