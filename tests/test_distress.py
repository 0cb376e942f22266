#!/usr/bin/env python3
"""
Distress Analysis Tests

Severity grading (critical > severe > moderate > mild > baseline), risk
factors, emotional indicators, and the HR crisis-alert record.

Run:
----
    pytest tests/test_distress.py -v
"""

import pytest

from wellness_engine.models.distress import RecommendedAction, Severity
from wellness_engine.models.records import RequestStatus
from wellness_engine.models.situation import SituationCategory
from wellness_engine.stages.distress import (
    ALERT_PRODUCT_ID,
    alert_priority,
    analyze_distress,
    build_crisis_alert,
    crisis_message,
)


class TestSeverity:
    def test_critical(self):
        analysis = analyze_distress("Ya no quiero vivir")
        assert analysis.severity == Severity.CRITICAL
        assert analysis.confidence == 0.95
        assert analysis.needs_immediate_attention is True
        assert analysis.recommended_action == RecommendedAction.URGENT_INTERVENTION
        assert analysis.risk_factors == ["suicidal_ideation", "self_harm_risk", "crisis_state"]
        assert analysis.trigger_keywords == ["no quiero vivir"]

    def test_severe_with_two_phrases(self):
        analysis = analyze_distress("Estoy desesperado y devastado")
        assert analysis.severity == Severity.SEVERE
        assert analysis.recommended_action == RecommendedAction.ESCALATE_TO_HR
        assert analysis.is_escalation

    def test_severe_single_phrase_needs_long_transcript(self):
        filler = " hoy" * 60
        assert analyze_distress("Me siento destruido" + filler).severity == Severity.SEVERE
        short = analyze_distress("Me siento destruido")
        assert short.severity == Severity.MILD
        assert short.confidence == 0.3

    def test_moderate(self):
        analysis = analyze_distress("Estoy triste y agobiado por el trabajo")
        assert analysis.severity == Severity.MODERATE
        assert analysis.needs_immediate_attention is False
        assert analysis.risk_factors == ["financial_stress", "work_stress"]
        # base 50 + 15 boost for "triste"
        assert analysis.emotional_indicators.depression == 65
        assert not analysis.is_escalation

    def test_mild(self):
        analysis = analyze_distress("Estoy un poco mal hoy")
        assert analysis.severity == Severity.MILD
        assert analysis.confidence == 0.65
        assert analysis.recommended_action == RecommendedAction.MONITOR

    @pytest.mark.parametrize("transcript", ["", None, "Todo bien, gracias"])
    def test_baseline(self, transcript):
        analysis = analyze_distress(transcript)
        assert analysis.severity == Severity.MILD
        assert analysis.confidence == 0.3
        assert analysis.situation_type is None
        assert analysis.emotional_indicators.anxiety == 15

    def test_situation_type_needs_two_keywords(self):
        analysis = analyze_distress("Mi madre murió y estoy devastado y destruido")
        assert analysis.situation_type == SituationCategory.BEREAVEMENT

    def test_indicators_capped_at_100(self):
        analysis = analyze_distress("no hay salida, sin esperanza, no puedo más, desesperado")
        assert analysis.emotional_indicators.hopelessness == 100
        assert analysis.emotional_indicators.desperation == 100


class TestCrisisAlert:
    def test_priority_mapping(self):
        assert alert_priority(Severity.CRITICAL) == "urgent"
        assert alert_priority(Severity.SEVERE) == "high"
        assert alert_priority(Severity.MODERATE) == "medium"
        assert alert_priority(Severity.MILD) == "low"

    def test_critical_alert_record(self):
        analysis = analyze_distress("Ya no quiero vivir")
        alert = build_crisis_alert(analysis, "Ya no quiero vivir", "anon_1_abc", session_id="s-1")
        assert alert.status == RequestStatus.URGENT_REVIEW
        assert alert.situation_subtype == "crisis_alert"
        assert alert.situation_type == "emotional_distress"
        assert alert.recommended_product_id == ALERT_PRODUCT_ID
        assert alert.recommendation_score == 100
        assert alert.product_snapshot["alert_priority"] == "urgent"
        assert alert.profile_snapshot["session_id"] == "s-1"
        assert "Risk factors identified: suicidal_ideation" in alert.empathic_message

    def test_severe_alert_is_pending(self):
        analysis = analyze_distress("Estoy desesperado y devastado")
        alert = build_crisis_alert(analysis, "Estoy desesperado y devastado", "anon_1_abc")
        assert alert.status == RequestStatus.PENDING
        assert alert.product_snapshot["alert_priority"] == "high"

    def test_message_without_risk_factors(self):
        analysis = analyze_distress("Estoy desesperado y devastado")
        assert "Risk factors" not in crisis_message(analysis)
        assert crisis_message(analysis).startswith("HIGH PRIORITY")
