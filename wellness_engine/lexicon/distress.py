"""
Distress lexicon — severity keyword lists, risk-factor cues and emotional indicator tables.

Used by stages.distress to grade how urgently a conversation needs human attention.
"""

from types import MappingProxyType
from typing import Mapping, Tuple

CRITICAL_KEYWORDS: Tuple[str, ...] = (
    # suicidal ideation
    "suicidarme", "matarme", "acabar con todo", "no quiero vivir", "mejor muerto",
    "terminar con mi vida", "no vale la pena vivir", "prefiero morir",
    # self-harm
    "cortarme", "lastimarme", "hacerme daño", "autolesiones",
    # extreme desperation
    "no hay salida", "es el fin", "todo está perdido", "no puedo más",
    "me voy a volver loco", "estoy acabado", "mi vida no vale nada",
    # substance abuse
    "drogas para olvidar", "emborracharme hasta morir", "pastillas para dormir forever",
    "cocaína para sentir", "marihuana todo el día",
)

SEVERE_KEYWORDS: Tuple[str, ...] = (
    "desesperado", "desesperada", "sin esperanza", "perdido totalmente",
    "destruido", "devastado", "roto por dentro", "vacío total",
    "crisis total", "colapso", "me estoy hundiendo", "caída libre",
    "tocando fondo", "no puedo respirar", "me ahogo",
    "no rindo nada", "mi carrera está muerta", "perdí todo",
    "mi vida es un desastre", "soy un fracaso total",
    # regional expressions
    "estoy jodido", "la vida me tiene mamado", "estoy vuelto mierda",
    "me tiene hasta la madre", "estoy pal' carajo",
)

MODERATE_KEYWORDS: Tuple[str, ...] = (
    "triste", "deprimido", "bajoneado", "desanimado", "preocupado",
    "estresado", "agobiado", "abrumado", "confundido", "perdido",
    "ansioso", "nervioso", "angustiado", "frustrado", "desalentado",
    "mamado", "cansado de todo", "harto", "aburrido de la vida",
)

MILD_KEYWORDS: Tuple[str, ...] = (
    "un poco mal", "medio bajoneado", "no muy bien", "algo preocupado",
    "un toque estresado", "regular nomás", "así así", "no tan bien",
)

# Transcripts longer than this need only one severe phrase to be graded severe.
SEVERE_SINGLE_MATCH_MIN_LENGTH = 200

CRITICAL_RISK_FACTORS: Tuple[str, ...] = ("suicidal_ideation", "self_harm_risk", "crisis_state")

# Order matters: risk factors are reported in this order.
RISK_FACTOR_CUES: Tuple[Tuple[str, Tuple[str, ...]], ...] = (
    ("social_isolation", ("solo", "nadie", "aislado")),
    ("financial_stress", ("dinero", "deudas", "trabajo")),
    ("relationship_issues", ("ruptura", "pareja", "familia")),
    ("health_concerns", ("enfermo", "salud", "dolor")),
    ("work_stress", ("jefe", "oficina", "trabajo")),
)

INDICATOR_BASE_SCORES: Mapping[str, Mapping[str, int]] = MappingProxyType({
    "critical": MappingProxyType(
        {"desperation": 85, "hopelessness": 90, "anxiety": 80, "depression": 85, "anger": 70}
    ),
    "severe": MappingProxyType(
        {"desperation": 70, "hopelessness": 75, "anxiety": 70, "depression": 70, "anger": 60}
    ),
    "moderate": MappingProxyType(
        {"desperation": 45, "hopelessness": 50, "anxiety": 55, "depression": 50, "anger": 40}
    ),
    "mild": MappingProxyType(
        {"desperation": 25, "hopelessness": 20, "anxiety": 30, "depression": 25, "anger": 20}
    ),
})

BASELINE_INDICATORS: Mapping[str, int] = MappingProxyType(
    {"desperation": 10, "hopelessness": 10, "anxiety": 15, "depression": 10, "anger": 10}
)

# indicator -> (cue phrases, boost); each boost applies once and is capped at 100.
INDICATOR_BOOSTS: Tuple[Tuple[str, Tuple[str, ...], int], ...] = (
    ("desperation", ("desesperado", "no puedo más"), 15),
    ("hopelessness", ("sin esperanza", "no hay salida"), 20),
    ("anxiety", ("ansioso", "nervioso"), 15),
    ("depression", ("deprimido", "triste"), 15),
    ("anger", ("enojado", "furioso"), 20),
)

CRISIS_MESSAGES: Mapping[str, str] = MappingProxyType({
    "critical": (
        "ALERT: Critical emotional distress detected. This employee may need immediate "
        "professional support. Please prioritize this case and consider escalating to "
        "mental health professionals."
    ),
    "severe": (
        "HIGH PRIORITY: Severe emotional distress detected. This employee is experiencing "
        "significant psychological difficulty and would benefit from immediate wellness "
        "intervention and HR attention."
    ),
    "moderate": (
        "ATTENTION: Moderate emotional distress detected. This employee is struggling "
        "emotionally and could benefit from wellness support to prevent escalation."
    ),
    "mild": (
        "NOTICE: Mild emotional concerns detected. Monitor this employee's wellbeing and "
        "consider proactive wellness offerings."
    ),
})

ALERT_PRIORITY: Mapping[str, str] = MappingProxyType({
    "critical": "urgent",
    "severe": "high",
    "moderate": "medium",
})
