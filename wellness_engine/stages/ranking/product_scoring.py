"""
Product scoring — additive multi-factor score for one catalog item.

Rules are evaluated in a fixed order and each contributes at most once:

  1. situation tag equals the category           +40
  2. beneficial tags present (cap 2 credited)    +25 each
  3. age bracket present in profile tags         +20
  4. hobby in tags or item text                  +20
  5. goal is a substring of an item tag          +15
  6. lexicon keywords in item text (cap 2)       +10 each
  7. avoid tag is a substring of an item tag     -50
  8. starting price set and below 100,000        +10

The sum is not clamped. Matching is substring-based where noted so free-form
onboarding answers still meet the controlled tag vocabulary.
"""

from typing import List

from ...lexicon import get_situation_profile
from ...models.catalog import CatalogItem
from ...models.profile import Profile, classify_age
from ...models.scoring import ProductScore
from ...models.situation import Situation, category_value

WEIGHT_SITUATION_TAG = 40
WEIGHT_BENEFICIAL_TAG = 25
WEIGHT_AGE_BRACKET = 20
WEIGHT_HOBBY = 20
WEIGHT_GOAL = 15
WEIGHT_KEYWORD = 10
PENALTY_AVOID_TAG = -50
WEIGHT_AFFORDABLE = 10

MAX_CREDITED_MATCHES = 2
AFFORDABLE_PRICE_LIMIT = 100_000

REASON_SITUATION = "Recomendado específicamente para tu situación"
REASON_BENEFICIAL = "Actividad de tipo '{tag}' ayuda en tu situación"
REASON_AGE = "Adecuado para tu grupo de edad"
REASON_HOBBY = "Conecta con tu interés en {hobby}"
REASON_GOAL = "Alineado con tu meta de {goal}"
REASON_AFFORDABLE = "Precio accesible"


def _beneficial_matches(beneficial, tags_lower: List[str]) -> List[str]:
    return [b for b in beneficial if b.lower() in tags_lower]


def _hobby_matches(hobbies: List[str], tags_lower: List[str], text: str) -> List[str]:
    return [h for h in hobbies if h.lower() in tags_lower or h.lower() in text]


def _goal_matches(goals: List[str], tags_lower: List[str]) -> List[str]:
    return [g for g in goals if any(g.lower() in t for t in tags_lower)]


def score_product(item: CatalogItem, situation: Situation, profile: Profile) -> ProductScore:
    """Score one item for a situation and profile; returns score and triggered reasons."""
    category = category_value(situation)
    lexicon = get_situation_profile(category)
    tags_lower = [t.lower() for t in item.all_tags]
    text = item.search_text

    score = 0.0
    reasons: List[str] = []

    # 1. Direct situation tag (exact match)
    if category in item.situation_tags:
        score += WEIGHT_SITUATION_TAG
        reasons.append(REASON_SITUATION)

    # 2. Beneficial tags
    beneficial = _beneficial_matches(lexicon.beneficial, tags_lower)
    if beneficial:
        score += WEIGHT_BENEFICIAL_TAG * min(len(beneficial), MAX_CREDITED_MATCHES)
        reasons.append(REASON_BENEFICIAL.format(tag=beneficial[0]))

    # 3. Age bracket
    if profile.age:
        bracket = classify_age(profile.age).value
        if bracket in item.profile_tags:
            score += WEIGHT_AGE_BRACKET
            reasons.append(REASON_AGE)

    # 4. Hobbies
    hobbies = _hobby_matches(profile.hobbies, tags_lower, text)
    if hobbies:
        score += WEIGHT_HOBBY
        reasons.append(REASON_HOBBY.format(hobby=hobbies[0]))

    # 5. Goals
    goals = _goal_matches(profile.goals, tags_lower)
    if goals:
        score += WEIGHT_GOAL
        reasons.append(REASON_GOAL.format(goal=goals[0]))

    # 6. Keyword density in item text (silent)
    keyword_hits = [kw for kw in lexicon.keywords if kw.lower() in text]
    if keyword_hits:
        score += WEIGHT_KEYWORD * min(len(keyword_hits), MAX_CREDITED_MATCHES)

    # 7. Avoid tags (silent)
    if any(a.lower() in t for a in lexicon.avoid for t in tags_lower):
        score += PENALTY_AVOID_TAG

    # 8. Affordability
    if item.price_from and item.price_from < AFFORDABLE_PRICE_LIMIT:
        score += WEIGHT_AFFORDABLE
        reasons.append(REASON_AFFORDABLE)

    return ProductScore(score=score, reasons=reasons)
