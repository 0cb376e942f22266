"""Pipeline stages: classification, ranking, message composition, distress grading, orchestration."""

from .classification import classify_situation
from .distress import analyze_distress, build_crisis_alert
from .message import compose_message
from .orchestrator import get_recommendations
from .ranking import rank_products, score_product

__all__ = [
    "analyze_distress",
    "build_crisis_alert",
    "classify_situation",
    "compose_message",
    "get_recommendations",
    "rank_products",
    "score_product",
]
