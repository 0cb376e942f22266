"""
Empathic message composition — bounded-length message for the top recommendation.

Five slots: confrontation (category + subtype), calming (random draw from a
four-phrase bank), hobby connection, benefit (first item tag with a benefit phrase),
and a goal clause when there is room. Messages never exceed MAX_MESSAGE_LENGTH.

The calming draw uses an injectable random.Random so callers can seed it.
"""

import random
from typing import Optional

from ..lexicon import ACTIVITY_BENEFITS, CALMING_PHRASES, CONFRONTATION_PHRASES, FALLBACK_CATEGORY
from ..lexicon.phrases import (
    BENEFIT_CLAUSE,
    GOAL_CLAUSE,
    GOAL_CLAUSE_MAX_LENGTH,
    HOBBY_GENERIC,
    HOBBY_MATCHED,
    HOBBY_NONE,
    HOLDING_MESSAGE,
    MAX_MESSAGE_LENGTH,
    MESSAGE_BODY,
    MIN_SENTENCE_CUT,
    TRUNCATE_AT,
)
from ..lexicon.situations import GENERAL_SUBTYPE
from ..models.catalog import CatalogItem
from ..models.profile import Profile
from ..models.situation import Situation, category_value

_default_rng = random.Random()


def confrontation_phrase(situation: Situation) -> str:
    """Hardship clause for category/subtype, falling back to 'general' then to the fallback category."""
    phrases = CONFRONTATION_PHRASES.get(category_value(situation)) or CONFRONTATION_PHRASES[FALLBACK_CATEGORY]
    return phrases.get(situation.subtype or GENERAL_SUBTYPE) or phrases[GENERAL_SUBTYPE]


def calming_phrase(situation: Situation, rng: Optional[random.Random] = None) -> str:
    options = CALMING_PHRASES.get(category_value(situation)) or CALMING_PHRASES[FALLBACK_CATEGORY]
    return (rng or _default_rng).choice(options)


def hobby_phrase(profile: Profile, item: CatalogItem) -> str:
    text = item.short_text
    matched = next((h for h in profile.hobbies if h.lower() in text), None)
    if matched:
        return HOBBY_MATCHED.format(hobby=matched.lower(), item=item.name)
    if profile.hobbies:
        return HOBBY_GENERIC.format(hobby=profile.hobbies[0].lower(), item=item.name)
    return HOBBY_NONE.format(item=item.name)


def benefit_phrase(item: CatalogItem) -> Optional[str]:
    """Benefit for the first profile tag present in the benefit table."""
    for tag in item.profile_tags:
        benefit = ACTIVITY_BENEFITS.get(tag.lower())
        if benefit:
            return benefit
    return None


def truncate_message(message: str) -> str:
    """
    Bound a message to MAX_MESSAGE_LENGTH characters.

    Cuts after the last period within the first TRUNCATE_AT characters when that period
    lies past MIN_SENTENCE_CUT; otherwise keeps TRUNCATE_AT characters plus an ellipsis.
    """
    if len(message) <= MAX_MESSAGE_LENGTH:
        return message
    last_period = message[:TRUNCATE_AT].rfind(".")
    if last_period > MIN_SENTENCE_CUT:
        return message[: last_period + 1]
    return message[:TRUNCATE_AT] + "..."


def compose_message(
    profile: Profile,
    situation: Situation,
    top_item: Optional[CatalogItem],
    rng: Optional[random.Random] = None,
) -> str:
    """Compose the empathic message; a holding message when there is no recommendation."""
    if top_item is None:
        return truncate_message(HOLDING_MESSAGE.format(name=profile.name))

    message = MESSAGE_BODY.format(
        name=profile.name,
        confrontation=confrontation_phrase(situation),
        calming=calming_phrase(situation, rng),
        hobby_phrase=hobby_phrase(profile, top_item),
    )

    benefit = benefit_phrase(top_item)
    message += BENEFIT_CLAUSE.format(benefit=benefit) if benefit else "."

    if profile.goals and len(message) < GOAL_CLAUSE_MAX_LENGTH:
        message += GOAL_CLAUSE.format(goal=profile.goals[0].lower())

    return truncate_message(message)
