"""
Tweet Entity Extractor — hashtags, cashtags, URLs, mentions and replies.

Every function takes the tweet text and nothing else, never raises for
string input, and returns fresh results:
    - ``extract_*``                 → list of extracted strings
    - ``extract_*_with_indices``    → list of ``{<field>: ..., "indices": [start, end]}``
    - ``extract_replied_username``  → username or ``""``
    - ``extract``                   → all of the above bundled in one dict

Indices are character offsets (see extraction.offsets). URL extraction only
recognises protocol-qualified URLs; bare domains such as ``example.com`` and
protocol-less short links are not extracted.
"""
import logging
from typing import List, Optional

from twitter_text.config.constants import (
    ENTITY_CASHTAG,
    ENTITY_HASHTAG,
    ENTITY_MENTION,
    ENTITY_MENTION_OR_LIST,
    ENTITY_URL,
)
from twitter_text.config.settings import MAX_TEXT_LOG_CHARS
from twitter_text.extraction.offsets import fix_indices
from twitter_text.extraction.regex_rules import RULES
from twitter_text.models.entity import EntityMatch

logger = logging.getLogger(__name__)


def _is_rejected_mention(match) -> bool:
    """
    A mention candidate is dropped when a list slug follows the username
    (it names a list, not an account) or when the following characters
    satisfy end_mention_match (``@`` / accented letter / ``://``).
    """
    if match.group("list_slug"):
        return True
    return RULES["end_mention_match"].pattern.match(match.group("after") or "") is not None


def _entities(text: Optional[str], rule_name: str, entity_type: str, fields=None, mentions_only=False) -> List[EntityMatch]:
    if not text:
        return []

    rule = RULES[rule_name]
    entities: List[EntityMatch] = []

    for match in rule.pattern.finditer(text):
        if mentions_only and _is_rejected_mention(match):
            logger.debug("Rejected mention candidate '%s'", match.group("screen_name"))
            continue
        entities.append(
            fix_indices(
                text,
                match,
                entity_type=entity_type,
                fields=fields or rule.fields,
                tweak=rule.tweak,
                context_group=rule.context_group,
            )
        )

    logger.debug(
        "%s: %d match(es) in '%s'",
        rule_name,
        len(entities),
        text[:MAX_TEXT_LOG_CHARS],
    )
    return entities


# ==========================================================================
# Entity-level extraction (EntityMatch lists)
# ==========================================================================

def hashtag_entities(text: str) -> List[EntityMatch]:
    return _entities(text, "valid_hashtag", ENTITY_HASHTAG)


def cashtag_entities(text: str) -> List[EntityMatch]:
    return _entities(text, "valid_cashtag", ENTITY_CASHTAG)


def url_entities(text: str) -> List[EntityMatch]:
    return _entities(text, "valid_url", ENTITY_URL)


def mention_entities(text: str) -> List[EntityMatch]:
    """Mentions of single accounts, with the boundary rejections applied."""
    return _entities(text, "valid_mentions_or_lists", ENTITY_MENTION, mentions_only=True)


def mention_candidate_entities(text: str) -> List[EntityMatch]:
    """
    Every ``@user`` candidate, reported by username only.

    Backs the indexed mention extraction, which keeps candidates the plain
    list rejects: ``@foo/bar`` and ``@foo@bar`` both yield ``foo``.
    """
    return _entities(text, "valid_mentions_or_lists", ENTITY_MENTION)


def mention_or_list_entities(text: str) -> List[EntityMatch]:
    """
    Every ``@user`` and ``@user/list`` candidate.

    No boundary rejection here: ``@foo@bar`` yields ``foo`` even though
    extract_mentioned_usernames drops it.
    """
    return _entities(
        text,
        "valid_mentions_or_lists",
        ENTITY_MENTION_OR_LIST,
        fields=("screen_name", "list_slug"),
    )


# ==========================================================================
# Plain extraction
# ==========================================================================

def extract_hashtags(text: str) -> List[str]:
    """Extract all hashtags (without the leading ``#``), in order."""
    return [e.get("hashtag") for e in hashtag_entities(text)]


def extract_cashtags(text: str) -> List[str]:
    """Extract all cashtags (without the leading ``$``), in order."""
    return [e.get("cashtag") for e in cashtag_entities(text)]


def extract_urls(text: str) -> List[str]:
    """Extract all protocol-qualified URLs, in order."""
    return [e.get("url") for e in url_entities(text)]


def extract_mentioned_usernames(text: str) -> List[str]:
    """Extract all mentioned usernames (without the leading ``@``), in order."""
    return [e.get("screen_name") for e in mention_entities(text)]


def extract_replied_username(text: str) -> str:
    """
    Extract the username the tweet replies to.

    A reply is a mention at the very start of the tweet (leading whitespace
    allowed). Returns ``""`` when the tweet is not a reply. The mention
    boundary rejections do not apply: ``@alice@bob`` replies to ``alice``.
    """
    if not text:
        return ""

    match = RULES["valid_reply"].pattern.match(text)
    if match is None:
        return ""
    return match.group("screen_name")


# ==========================================================================
# Extraction with indices
# ==========================================================================

def extract_hashtags_with_indices(text: str) -> List[dict]:
    return [e.to_dict() for e in hashtag_entities(text)]


def extract_cashtags_with_indices(text: str) -> List[dict]:
    return [e.to_dict() for e in cashtag_entities(text)]


def extract_urls_with_indices(text: str) -> List[dict]:
    return [e.to_dict() for e in url_entities(text)]


def extract_mentioned_usernames_with_indices(text: str) -> List[dict]:
    """
    Extract ``@user`` references with indices.

    Unlike extract_mentioned_usernames no candidate is rejected, so a
    username followed by a list slug or another ``@`` is still reported.
    """
    return [e.to_dict() for e in mention_candidate_entities(text)]


def extract_mentioned_usernames_or_lists_with_indices(text: str) -> List[dict]:
    """
    Extract ``@user`` and ``@user/list`` references with indices.

    Each record holds ``screen_name``, ``list_slug`` (``""`` when absent,
    otherwise including the leading ``/``) and ``indices``.
    """
    return [e.to_dict() for e in mention_or_list_entities(text)]


# ==========================================================================
# Aggregate
# ==========================================================================

def extract(text: str) -> dict:
    """
    Extract all parts of a tweet.

    Returns:
        {
            "hashtags": [...], "urls": [...], "mentions": [...], "replyto": "...",
            "hashtags_with_indices": [...], "urls_with_indices": [...],
            "mentions_with_indices": [...],
            "cashtags": [...], "cashtags_with_indices": [...],
        }
    """
    return {
        "hashtags": extract_hashtags(text),
        "urls": extract_urls(text),
        "mentions": extract_mentioned_usernames(text),
        "replyto": extract_replied_username(text),
        "hashtags_with_indices": extract_hashtags_with_indices(text),
        "urls_with_indices": extract_urls_with_indices(text),
        "mentions_with_indices": extract_mentioned_usernames_with_indices(text),
        "cashtags": extract_cashtags(text),
        "cashtags_with_indices": extract_cashtags_with_indices(text),
    }
