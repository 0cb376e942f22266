"""
Situation lexicon — keyword, beneficial-tag and avoid-tag lists per situation category.

Contains:
- SITUATION_LEXICON: category value -> SituationProfile (keywords, beneficial, avoid, description)
- CLASSIFICATION_PRIORITY: order in which categories are evaluated by the classifier
- SUBTYPE_KEYWORDS: per-category subtype keyword groups (first matching group wins)
- FALLBACK_CATEGORY: category used when nothing matches or the category is unknown

All data is immutable (tuples and MappingProxyType) and safe for concurrent reads.
"""

from types import MappingProxyType
from typing import Mapping, NamedTuple, Tuple


class SituationProfile(NamedTuple):
    """Static lexicon entry for one situation category."""

    beneficial: Tuple[str, ...]
    avoid: Tuple[str, ...]
    keywords: Tuple[str, ...]
    description: str


BEREAVEMENT = "muerte_familiar"
ECONOMIC_HARDSHIP = "causa_economica"
PERCEIVED_INCOMPETENCE = "bloqueo_incapacidad"
BREAKUP = "rompimiento_pareja"

FALLBACK_CATEGORY = PERCEIVED_INCOMPETENCE

SITUATION_LEXICON: Mapping[str, SituationProfile] = MappingProxyType({
    BEREAVEMENT: SituationProfile(
        beneficial=(
            "tranquilo", "introspectivo", "naturaleza", "mindfulness",
            "expresivo", "arte", "musica",
        ),
        avoid=("competitivo", "fiesta", "alta_estimulacion"),
        keywords=(
            "murió", "falleció", "partió", "muerte", "duelo", "perdí", "perdida",
            "padre", "madre", "abuelo", "abuela", "hermano", "hermana", "hijo", "hija",
            "funeral", "luto", "extraño mucho", "ya no está", "se fue",
        ),
        description="La pérdida requiere espacios de calma para procesar el duelo",
    ),
    ECONOMIC_HARDSHIP: SituationProfile(
        beneficial=("carrera", "tech", "crecimiento_personal", "bienes", "social"),
        avoid=("lujo", "exclusivo"),
        keywords=(
            "dinero", "plata", "deudas", "despido", "despidieron", "sin trabajo",
            "desempleo", "no me alcanza", "crisis económica", "quiebra", "bancarrota",
            "salario", "sueldo", "laboral", "jefe", "oficina", "empresa", "negocio",
            "freelance", "emprendimiento", "navidad", "diciembre",
        ),
        description="Desarrollar habilidades y encontrar nuevas oportunidades",
    ),
    PERCEIVED_INCOMPETENCE: SituationProfile(
        beneficial=("crecimiento_personal", "tech", "carrera", "salud", "social", "arte"),
        avoid=("competitivo", "alta_presion"),
        keywords=(
            "incapaz", "no puedo", "no sirvo", "inútil", "incompetente", "perdido",
            "caso perdido", "fracasado", "impostor", "síndrome impostor", "no entiendo",
            "no aprendo", "torpe", "no sé nada", "tecnología", "no rindo", "bloqueado",
            "estancado", "sin futuro", "acabado", "vida acabada", "no valgo",
        ),
        description="Reconstruir confianza a través de logros pequeños y conexión",
    ),
    BREAKUP: SituationProfile(
        beneficial=("activo", "social", "deportes", "viajes", "amigos", "musica"),
        avoid=("romantico", "parejas", "citas"),
        keywords=(
            "ruptura", "terminamos", "separación", "divorcio", "ex", "dejó", "dejé",
            "corazón roto", "infiel", "infidelidad", "engañó", "tusa", "despecho",
            "soltera", "soltero", "relación", "pareja", "novio", "novia", "amor",
        ),
        description="El movimiento físico y las conexiones sociales ayudan a sanar",
    ),
})

# Ties keep the earlier category; later ones replace the leader only on a strictly higher count.
CLASSIFICATION_PRIORITY: Tuple[str, ...] = (
    BEREAVEMENT,
    BREAKUP,
    PERCEIVED_INCOMPETENCE,
    ECONOMIC_HARDSHIP,
)

SUBTYPE_KEYWORDS: Mapping[str, Tuple[Tuple[str, Tuple[str, ...]], ...]] = MappingProxyType({
    BEREAVEMENT: (
        ("padres", ("padre", "madre", "padres")),
        ("abuelos", ("abuelo", "abuela")),
        ("hermanos", ("hermano", "hermana")),
        ("hijos", ("hijo", "hija")),
    ),
    ECONOMIC_HARDSHIP: (
        ("despido", ("despido", "despidieron")),
        ("deudas", ("deuda", "deudas")),
        ("negocio", ("negocio", "empresa")),
        ("temporada", ("navidad", "diciembre")),
    ),
    PERCEIVED_INCOMPETENCE: (
        ("tech", ("tecnología", "tech", "computador")),
        ("laboral", ("trabajo", "laboral")),
        ("aprendizaje", ("estudios", "aprender")),
    ),
    BREAKUP: (
        ("divorcio", ("divorcio",)),
        ("infidelidad", ("infiel", "engañó")),
    ),
})

GENERAL_SUBTYPE = "general"


def get_situation_profile(category: str) -> SituationProfile:
    """Lexicon entry for a category value; unknown categories use the fallback entry."""
    return SITUATION_LEXICON.get(category) or SITUATION_LEXICON[FALLBACK_CATEGORY]
