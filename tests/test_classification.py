#!/usr/bin/env python3
"""
Situation Classification Tests

Transcript -> Situation: category by keyword count with the
bereavement > breakup > incompetence > economic tie order, subtype by the
first matching subtype group, confidence = min(matches / 3, 1).

Run:
----
    pytest tests/test_classification.py -v
"""

import pytest

from wellness_engine.models.situation import (
    FALLBACK_CONFIDENCE,
    FALLBACK_CONTEXT,
    SituationCategory,
)
from wellness_engine.stages.classification import classify_situation, detect_subtype, matched_keywords


class TestClassifySituation:
    def test_bereavement_with_parent_subtype(self):
        situation = classify_situation("Mi padre murió la semana pasada y no sé cómo seguir")
        assert situation.category == SituationCategory.BEREAVEMENT
        assert situation.subtype == "padres"
        assert situation.context == "Detectado: murió, padre"
        assert situation.confidence == pytest.approx(2 / 3)

    def test_bereavement_with_grandparent_subtype(self):
        situation = classify_situation("Mi abuelo murió la semana pasada. Estoy muy triste.")
        assert situation.category == SituationCategory.BEREAVEMENT
        assert situation.subtype == "abuelos"
        assert situation.context == "Detectado: murió, abuelo"
        assert situation.confidence == pytest.approx(2 / 3)

    def test_breakup_with_infidelity_subtype(self):
        situation = classify_situation("Mi novia me fue infiel y terminamos")
        assert situation.category == SituationCategory.BREAKUP
        assert situation.subtype == "infidelidad"
        assert situation.confidence == 1.0

    def test_economic_hardship_with_layoff_subtype(self):
        situation = classify_situation("Me despidieron, tengo deudas y no me alcanza el dinero")
        assert situation.category == SituationCategory.ECONOMIC_HARDSHIP
        assert situation.subtype == "despido"
        assert situation.confidence == 1.0

    def test_matching_is_case_insensitive(self):
        situation = classify_situation("MI MADRE FALLECIÓ")
        assert situation.category == SituationCategory.BEREAVEMENT
        assert situation.subtype == "padres"

    def test_tie_keeps_higher_priority_category(self):
        # one bereavement keyword, one breakup keyword
        situation = classify_situation("el funeral y mi pareja")
        assert situation.category == SituationCategory.BEREAVEMENT

    @pytest.mark.parametrize("transcript", ["", "Hola, buenos días", None])
    def test_no_match_returns_fallback(self, transcript):
        situation = classify_situation(transcript)
        assert situation.category == SituationCategory.PERCEIVED_INCOMPETENCE
        assert situation.subtype == "general"
        assert situation.context == FALLBACK_CONTEXT
        assert situation.confidence == FALLBACK_CONFIDENCE

    @pytest.mark.parametrize(
        "transcript",
        [
            "murió mi abuelo, el funeral fue ayer, extraño mucho, ya no está, se fue",
            "no puedo, no sirvo, soy un impostor",
            "me siento bloqueado",
        ],
    )
    def test_confidence_is_bounded(self, transcript):
        assert 0.0 <= classify_situation(transcript).confidence <= 1.0

    def test_is_deterministic(self):
        text = "Terminamos después de cinco años de relación"
        assert classify_situation(text) == classify_situation(text)


class TestHelpers:
    def test_matched_keywords_preserves_keyword_order(self):
        assert matched_keywords("padre y abuelo", ("abuelo", "padre", "madre")) == ["abuelo", "padre"]

    def test_detect_subtype_defaults_to_general(self):
        assert detect_subtype("rompimiento_pareja", "terminamos") == "general"

    def test_detect_subtype_first_group_wins(self):
        assert detect_subtype("causa_economica", "el negocio cerró en diciembre") == "negocio"
