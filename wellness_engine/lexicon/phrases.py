"""
Phrase banks used by the empathic message composer.

- CONFRONTATION_PHRASES: category -> subtype -> clause naming the hardship
- CALMING_PHRASES: category -> four realistic affirmations
- ACTIVITY_BENEFITS: profile tag -> benefit clause
- Message templates and length limits

Messages are written in Spanish, the language of the catalog and the users.
"""

from types import MappingProxyType
from typing import Mapping, Tuple

from .situations import BEREAVEMENT, BREAKUP, ECONOMIC_HARDSHIP, PERCEIVED_INCOMPETENCE

CONFRONTATION_PHRASES: Mapping[str, Mapping[str, str]] = MappingProxyType({
    BEREAVEMENT: MappingProxyType({
        "padres": "enfrentarte a la pérdida de tus padres",
        "abuelos": "despedirte de quien te vio crecer",
        "hermanos": "sobrellevar la partida de tu hermano/a",
        "hijos": "atravesar la pérdida más dolorosa que existe",
        "general": "enfrentar la partida de alguien que amabas profundamente",
    }),
    ECONOMIC_HARDSHIP: MappingProxyType({
        "despido": "levantarte después de perder tu trabajo",
        "deudas": "salir adelante con el peso de las deudas",
        "negocio": "reconstruir después de un golpe al negocio",
        "temporada": "manejar las presiones económicas de la temporada",
        "general": "encontrar estabilidad en medio de la incertidumbre económica",
    }),
    PERCEIVED_INCOMPETENCE: MappingProxyType({
        "tech": "superar el bloqueo con la tecnología",
        "laboral": "recuperar la confianza en tu trabajo",
        "aprendizaje": "encontrar tu forma de aprender",
        "general": "reconstruir la confianza en ti mismo/a",
    }),
    BREAKUP: MappingProxyType({
        "divorcio": "reconstruirte después del divorcio",
        "infidelidad": "sanar después de una traición",
        "general": "levantarte después de una ruptura",
    }),
})

CALMING_PHRASES: Mapping[str, Tuple[str, ...]] = MappingProxyType({
    BEREAVEMENT: (
        "Este dolor es parte de haber amado profundamente.",
        "No hay tiempo correcto para sanar, solo el tuyo.",
        "Cada día que enfrentas es un acto de valentía.",
        "Su memoria vive en ti, y eso nadie te lo quita.",
    ),
    ECONOMIC_HARDSHIP: (
        "Las crisis económicas son temporales, tus habilidades no.",
        "Muchos han estado donde estás y salieron adelante.",
        "Tu valor no se define por tu situación financiera.",
        "Cada paso pequeño te acerca a la estabilidad.",
    ),
    PERCEIVED_INCOMPETENCE: (
        "Sentirte perdido no significa que lo estés.",
        "Todos empezamos sin saber, y todos podemos aprender.",
        "Tu capacidad de mejorar es mayor de lo que crees.",
        "El primer paso siempre se siente imposible hasta que lo das.",
    ),
    BREAKUP: (
        "Lo que sientes ahora no es permanente.",
        "El vacío actual dejará espacio para algo nuevo.",
        "Mereces tiempo para reconstruirte.",
        "Esta ruptura no define tu capacidad de amar o ser amado/a.",
    ),
})

ACTIVITY_BENEFITS: Mapping[str, str] = MappingProxyType({
    "tranquilo": "la calma te ayudará a reconectar contigo mismo",
    "activo": "el movimiento físico libera tensión y mejora el ánimo",
    "social": "conectar con otros nos recuerda que no estamos solos",
    "creativo": "expresar lo que las palabras no alcanzan sana",
    "aventurero": "cambiar de ambiente ayuda a ganar perspectiva",
    "introspectivo": "el autoconocimiento es el primer paso hacia la paz",
    "disciplinado": "la rutina puede ser un ancla en tiempos difíciles",
    "autocuidado": "cuidarte a ti mismo es lo más valiente que puedes hacer",
    "tech": "dominar nuevas herramientas te dará confianza",
    "musica": "la música expresa lo que las palabras no pueden",
    "deportes": "el ejercicio libera endorfinas y despeja la mente",
    "arte": "crear algo te conecta con una parte profunda de ti",
    "naturaleza": "la naturaleza tiene un poder sanador comprobado",
    "carrera": "desarrollar nuevas habilidades abre puertas",
})

HOLDING_MESSAGE = "{name}, estamos buscando las mejores opciones para apoyarte en este momento."
MESSAGE_BODY = "{name}, sé que hoy te toca {confrontation}. {calming} Por eso, {hobby_phrase}"
HOBBY_MATCHED = "aprovechando tu gusto por {hobby}, te recomendamos {item}"
HOBBY_GENERIC = "combinando tu interés en {hobby} con algo nuevo, te sugerimos {item}"
HOBBY_NONE = "te recomendamos {item}"
BENEFIT_CLAUSE = " — {benefit}."
GOAL_CLAUSE = " Un paso hacia {goal}."

MAX_MESSAGE_LENGTH = 500
GOAL_CLAUSE_MAX_LENGTH = 420
TRUNCATE_AT = 497
MIN_SENTENCE_CUT = 300
