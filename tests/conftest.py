"""Shared fixtures: a small wellness catalog and a reference profile."""

from typing import Any, Dict, List

import pytest

from wellness_engine.models.catalog import CatalogItem
from wellness_engine.models.profile import Profile

CATALOG_ROWS: List[Dict[str, Any]] = [
    {
        "id": "yoga-1",
        "name": "Clase de Yoga Restaurativa",
        "subcategory": "Yoga",
        "description": "Sesión tranquila de respiración y estiramiento",
        "price_from": 45000,
        "category": "Bienestar",
        "profile_tags": ["adulto", "tranquilo", "mindfulness", "salud"],
        "situation_tags": ["muerte_familiar"],
    },
    {
        "id": "futbol-1",
        "name": "Torneo de Fútbol 5",
        "subcategory": "Deportes",
        "description": "Partidos amistosos con compañeros",
        "price_from": 30000,
        "category": "Deportes",
        "profile_tags": ["joven", "activo", "social", "deportes"],
        "situation_tags": ["rompimiento_pareja"],
    },
    {
        "id": "curso-python",
        "name": "Curso de Python desde cero",
        "subcategory": "Programación",
        "description": "Aprende tecnología paso a paso",
        "price_from": 150000,
        "category": "Educación",
        "profile_tags": ["adulto", "tech", "carrera", "crecimiento_personal"],
        "situation_tags": ["bloqueo_incapacidad", "causa_economica"],
    },
    {
        "id": "fiesta-1",
        "name": "Fiesta Electrónica VIP",
        "subcategory": "Eventos",
        "description": "Noche de fiesta exclusiva",
        "price_from": 250000,
        "category": "Entretenimiento",
        "profile_tags": ["joven", "fiesta", "alta_estimulacion"],
        "situation_tags": [],
    },
]

BEREAVEMENT_TRANSCRIPT = "Mi padre murió la semana pasada y no sé cómo seguir"


def make_item(**overrides) -> CatalogItem:
    """Neutral item (no tags, no price, no lexicon keywords in its text) with overrides applied."""
    data: Dict[str, Any] = {"id": "item", "name": "Actividad", "subcategory": "General"}
    data.update(overrides)
    return CatalogItem.model_validate(data)


@pytest.fixture
def catalog_rows() -> List[Dict[str, Any]]:
    return [dict(row) for row in CATALOG_ROWS]


@pytest.fixture
def catalog_items() -> List[CatalogItem]:
    return [CatalogItem.model_validate(row) for row in CATALOG_ROWS]


@pytest.fixture
def profile() -> Profile:
    return Profile(user_id="user-42", name="Ana", age=35, hobbies=["musica"], goals=["salud"])
