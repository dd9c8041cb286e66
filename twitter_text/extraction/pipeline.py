"""
Entity Extraction Pipeline — every entity type in one ordered list.

Pipeline:
    1. URLs
    2. Mentions and lists
    3. Hashtags
    4. Cashtags
    5. Deterministic merge (overlaps removed, sorted by position)
"""
import logging
from typing import List

from twitter_text.extraction.extractor import (
    cashtag_entities,
    hashtag_entities,
    mention_or_list_entities,
    url_entities,
)
from twitter_text.extraction.merger import merge_entities
from twitter_text.models.entity import EntityMatch

logger = logging.getLogger(__name__)


def extract_entities_with_indices(text: str) -> List[EntityMatch]:
    """
    Extract URLs, mentions/lists, hashtags and cashtags with indices.

    An entity nested in another one (``#frag`` in ``https://example.com/#frag``)
    is dropped in favour of the enclosing entity. Mentions come from the
    unfiltered mention-or-list candidates, so ``@foo@bar`` contributes
    ``foo`` here although extract_mentioned_usernames drops it.

    Returns:
        Non-overlapping EntityMatch objects sorted by start offset.
    """
    if not text:
        return []

    all_entities = (
        url_entities(text)
        + mention_or_list_entities(text)
        + hashtag_entities(text)
        + cashtag_entities(text)
    )

    merged = merge_entities(all_entities)

    if len(merged) < len(all_entities):
        logger.debug("Dropped %d overlapping entities", len(all_entities) - len(merged))

    return merged
