"""
Controlled profile-tag vocabulary and normalization rules for free-form onboarding answers.

Each rule is (canonical tag, substrings); the first rule with a substring found in the
lowercased answer wins. Answers that match no rule are kept verbatim.
"""

from typing import Tuple

AGE_TAGS: Tuple[str, ...] = ("joven", "adulto", "mayor")

HOBBY_TAGS: Tuple[str, ...] = (
    "tech", "musica", "deportes", "arte", "lectura",
    "cocina", "viajes", "naturaleza", "manualidades", "social",
)

GOAL_TAGS: Tuple[str, ...] = (
    "familia", "amigos", "bienes", "carrera", "salud", "crecimiento_personal", "estabilidad",
)

GOAL_RULES: Tuple[Tuple[str, Tuple[str, ...]], ...] = (
    ("familia", ("familia",)),
    ("amigos", ("amigo",)),
    ("bienes", ("bien", "dinero", "casa")),
    ("carrera", ("carrera", "trabajo", "profesional")),
    ("salud", ("salud", "ejercicio", "deporte")),
    ("crecimiento_personal", ("personal", "crecer", "aprender")),
    ("estabilidad", ("estabilidad", "seguridad")),
)

HOBBY_RULES: Tuple[Tuple[str, Tuple[str, ...]], ...] = (
    ("tech", ("tech", "tecnología", "programar")),
    ("musica", ("música", "music")),
    ("deportes", ("deporte", "sport", "ejercicio")),
    ("arte", ("arte", "pintar", "dibujar")),
    ("lectura", ("leer", "lectura", "libro")),
    ("cocina", ("cocina", "cocinar")),
    ("viajes", ("viaje", "viajar", "travel")),
    ("naturaleza", ("naturaleza", "aire libre", "outdoor")),
    ("manualidades", ("manualidad", "craft", "diy")),
    ("social", ("social", "amigos", "fiesta")),
)
