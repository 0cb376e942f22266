"""
Catalog tag inference — derive situation_tags and profile_tags from an item's text.

Text = lowercased name, description, category and subcategory. Used by the
catalog retagging script so every row carries tags the scorer can match.
"""

import re
from typing import List, Tuple

from ..lexicon.situations import BEREAVEMENT, BREAKUP, ECONOMIC_HARDSHIP, PERCEIVED_INCOMPETENCE
from ..models.catalog import CatalogItem

_BEREAVEMENT_TERMS = (
    "yoga", "meditación", "mindfulness", "spa", "relajación", "massage", "masaje",
    "terapia", "psicología", "psicólog", "art therapy", "arteterapia", "music therapy",
    "musicoterapia", "retiro", "wellness", "holístico", "acupuntura", "reiki",
    "horticultura", "flores",
)
# (term, any of these must also appear)
_BEREAVEMENT_PAIRS = (
    ("música", ("tranquilo", "relajante")),
    ("naturaleza", ("camina", "excursión")),
)

_ECONOMIC_TERMS = (
    "curso", "capacitación", "educación", "educativo", "aprendizaje", "formación",
    "entrenamiento", "workshop", "webinar", "seminario", "taller", "emprendimiento",
    "startup", "negocio", "carrera", "empleo", "trabajo", "laboral", "habilidad", "skill",
    "profesional", "asesoría", "consultoría", "mentor", "coaching", "finanzas",
    "financiera", "presupuesto", "ahorro", "inversión", "gratis", "gratuito", "económico",
    "asequible", "tech", "tecnología", "programación", "código",
)

_INCOMPETENCE_TERMS = (
    "aprender", "aprendizaje", "curso", "introducción", "fundamentos", "básico",
    "principiante", "iniciante", "mentoría", "mentor", "coaching", "desarrollo personal",
    "crecimiento", "autoestima", "confianza", "transformación", "superar", "reto",
    "desafío", "logro", "éxito", "apoyo emocional", "psicología", "asesoría personal",
    "competencia",
)

_BREAKUP_TERMS = (
    "deporte", "deportivo", "fútbol", "basketball", "tenis", "golf", "voleibol",
    "natación", "ciclismo", "atletismo", "cross fit", "crossfit", "gym", "fitness",
    "entrenamiento", "ejercicio", "actividad física", "team building", "team", "equipo",
    "grupo", "social", "evento", "fiesta", "baile", "danza", "concierto", "música",
    "viaje", "turismo", "excursión", "aventura", "camping", "amigos", "diversión",
    "entretenimiento", "recreación",
)

_YOUTH_TERMS = (
    "gaming", "videojuego", "gamer", "esports", "deporte extremo", "parkour", "skate",
    "dron", "vr", "realidad virtual", "redes sociales", "influencer", "tiktok", "trending",
)
_ADULT_TERMS = (
    "profesional", "ejecutivo", "liderazgo", "dirección", "carrera ejecutiva", "familia",
    "padre", "madre", "responsabilidad", "balance", "work-life", "vino", "golf", "gourmet",
)
_SENIOR_TERMS = (
    "senior", "mayor", "tercera edad", "jubilado", "retiro", "50+", "abuelo", "sabiduria",
    "experiencia", "bajo impacto",
)
_ALL_AGES_TERMS = ("todas edades", "cualquier edad")

_HOBBY_PATTERNS: Tuple[Tuple[str, "re.Pattern[str]"], ...] = tuple(
    (tag, re.compile(pattern))
    for tag, pattern in (
        ("tech", r"tech|tecnología|programación|código|computador|software|digital|coding|desarrollo|app"),
        ("musica", r"música|musical|concierto|canto|canta|voz|instrumento|banda|jazz|clásico|rock|pop"),
        ("deportes", r"deporte|deportivo|ejercicio|gym|fitness|entrenamiento|fútbol|basketball|tenis|voleibol|natación|atletismo|ciclismo|running"),
        ("arte", r"arte|pintura|dibujo|escultura|galería|artístico|creativo"),
        ("lectura", r"lectura|libro|leer|literatura|novela|autor"),
        ("cocina", r"cocina|culinaria|gastronom|chef|receta|gourmet"),
        ("viajes", r"viaje|turismo|excursión|tour|destino|viajero"),
        ("naturaleza", r"naturaleza|aire libre|outdoor|camping|montaña|parque|sendero|verde"),
        ("manualidades", r"manualidad|craft|diy|artesanía"),
        ("social", r"social|grupo|amigos|team|evento|encuentro|reunión"),
    )
)

_GOAL_PATTERNS: Tuple[Tuple[str, "re.Pattern[str]"], ...] = tuple(
    (tag, re.compile(pattern))
    for tag, pattern in (
        ("familia", r"familia|familiar|padre|madre|hijo"),
        ("amigos", r"amigo|amigos|amistad|conexión|comunidad"),
        ("carrera", r"carrera|profesional|trabajo|empleo|laboral|empresario"),
        ("salud", r"salud|bienestar|wellness|fitness|medicina|nutrición"),
        ("crecimiento_personal", r"crecimiento personal|desarrollo personal|transformación|educación|mejora|superación"),
        ("estabilidad", r"estabilidad|seguridad|paz|tranquilidad|equilibrio"),
        ("bienes", r"bienes|casa|propiedad|inmueble|vivienda"),
    )
)


def _item_text(item: CatalogItem) -> str:
    return f"{item.name} {item.description or ''} {item.category or ''} {item.subcategory or ''}".lower()


def _any_in(text: str, terms) -> bool:
    return any(t in text for t in terms)


def infer_situation_tags(item: CatalogItem) -> List[str]:
    """Situations the activity helps with; falls back on the item's category when no term matches."""
    text = _item_text(item)
    tags: List[str] = []

    if _any_in(text, _BEREAVEMENT_TERMS) or any(
        term in text and _any_in(text, companions) for term, companions in _BEREAVEMENT_PAIRS
    ):
        tags.append(BEREAVEMENT)
    if _any_in(text, _ECONOMIC_TERMS):
        tags.append(ECONOMIC_HARDSHIP)
    if _any_in(text, _INCOMPETENCE_TERMS):
        tags.append(PERCEIVED_INCOMPETENCE)
    if _any_in(text, _BREAKUP_TERMS):
        tags.append(BREAKUP)

    if not tags:
        category = (item.category or "").lower()
        if "educación" in category or "capacitación" in category:
            tags = [ECONOMIC_HARDSHIP, PERCEIVED_INCOMPETENCE]
        elif "deporte" in category or "bienestar" in category:
            tags = [BREAKUP, BEREAVEMENT]
        else:
            tags = [PERCEIVED_INCOMPETENCE, ECONOMIC_HARDSHIP]

    return list(dict.fromkeys(tags))


def infer_profile_tags(item: CatalogItem) -> List[str]:
    """Age-bracket, hobby and goal tags for an item; adult is assumed when no age cue is present."""
    text = _item_text(item)
    tags: List[str] = []

    youth = _any_in(text, _YOUTH_TERMS)
    adult = _any_in(text, _ADULT_TERMS)
    senior = _any_in(text, _SENIOR_TERMS)
    if youth:
        tags.append("joven")
    if adult or (not youth and not senior):
        tags.append("adulto")
    if senior or _any_in(text, _ALL_AGES_TERMS):
        tags.append("mayor")

    tags.extend(tag for tag, pattern in _HOBBY_PATTERNS if pattern.search(text))
    tags.extend(tag for tag, pattern in _GOAL_PATTERNS if pattern.search(text))
    return list(dict.fromkeys(tags))


def retag_item(item: CatalogItem) -> CatalogItem:
    """Copy of the item with inferred situation and profile tags."""
    return item.model_copy(update={
        "situation_tags": infer_situation_tags(item),
        "profile_tags": infer_profile_tags(item),
    })
