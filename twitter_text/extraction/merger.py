"""
Deterministic Entity Merger.

Combines entities of different types into one non-overlapping list:
1. Earlier start wins
2. Same start → entity type priority (url > mention > hashtag > cashtag)
3. Same type  → longest span wins
"""
from typing import List

from twitter_text.config.constants import ENTITY_PRIORITY
from twitter_text.models.entity import EntityMatch


def merge_entities(entities: List[EntityMatch]) -> List[EntityMatch]:
    """
    Remove overlapping entities using deterministic rules.

    Args:
        entities: Entities of any type (may overlap, any order).

    Returns:
        Non-overlapping entities sorted by position.
    """
    if not entities:
        return []

    entities_sorted = sorted(
        entities,
        key=lambda e: (
            e.start,
            ENTITY_PRIORITY.get(e.entity_type, 99),
            -e.end,
        ),
    )

    merged: List[EntityMatch] = [entities_sorted[0]]

    # Kept entities are sorted and disjoint, so only the last one can overlap.
    for entity in entities_sorted[1:]:
        if not entity.overlaps(merged[-1]):
            merged.append(entity)

    return merged
