"""
Pattern Rule Set — compiled, named extraction rules.

Built once at import time and exposed read-only through RULES
(name -> Rule) and PATTERNS (name -> compiled pattern). Every rule addresses
its captures by name; Rule checks at construction that the groups it maps
to fields actually exist in the compiled pattern.

Uses the ``regex`` module for Unicode property classes (``\\p{L}``, ``\\p{M}``)
and possessive quantifiers, which keep the hashtag body linear-time.
"""
import logging
from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping, Optional, Tuple

import regex

from twitter_text.config.constants import (
    AT_SIGNS,
    COUNTRY_TLDS,
    GENERIC_TLDS,
    HASH_SIGNS,
    HASHTAG_LETTERS,
    HASHTAG_NON_LETTERS,
    INVALID_CHARACTERS,
    LATIN_ACCENTS,
    MAX_LIST_SLUG_LENGTH,
    MAX_USERNAME_LENGTH,
    PUNCTUATION,
    RULESET_VERSION,
    SPACES,
    URL_INVALID_PRECEDING_CHARS,
    URL_PATH_CHARS,
    URL_PATH_ENDING_CHARS,
    URL_QUERY_CHARS,
    URL_QUERY_ENDING_CHARS,
    USERNAME_CHARACTERS,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Rule:
    """A compiled pattern plus the named groups that make up its value."""

    name: str
    pattern: regex.Pattern
    fields: Tuple[str, ...] = ()
    tweak: int = 0
    context_group: Optional[str] = "before"

    def __post_init__(self):
        if self.tweak not in (0, 1):
            raise ValueError(f"Rule '{self.name}': tweak must be 0 or 1, got {self.tweak}")

        required = list(self.fields)
        if self.context_group is not None:
            required.append(self.context_group)

        missing = [g for g in required if g not in self.pattern.groupindex]
        if missing:
            raise ValueError(f"Rule '{self.name}': pattern has no group(s) {missing}")


# ==========================================================================
# Hashtags
# ==========================================================================
_HASHTAG_CHARS = HASHTAG_LETTERS + HASHTAG_NON_LETTERS

_VALID_HASHTAG = (
    r"(?P<before>^|[^&" + HASH_SIGNS + _HASHTAG_CHARS + r"])"
    r"(?P<marker>[" + HASH_SIGNS + r"])"
    r"(?P<hashtag>[" + HASHTAG_NON_LETTERS + r"]*+[" + HASHTAG_LETTERS + r"]"
    r"[" + _HASHTAG_CHARS + r"]*+)"
)

# ==========================================================================
# Cashtags
# ==========================================================================
_VALID_CASHTAG = (
    r"(?P<before>^|[" + SPACES + r"])"
    r"(?P<marker>\$)"
    r"(?P<cashtag>[A-Z]{1,6}(?:[._][A-Z]{1,2})?)"
    r"(?![\p{L}\p{M}\p{N}_])"
)

# ==========================================================================
# URLs
# ==========================================================================
_DOMAIN_CHAR = r"[^" + PUNCTUATION + SPACES + INVALID_CHARACTERS + r"]"
_SUBDOMAIN = r"(?:(?:" + _DOMAIN_CHAR + r"(?:[_-]|" + _DOMAIN_CHAR + r")*)?" + _DOMAIN_CHAR + r"\.)"
_DOMAIN_NAME = r"(?:(?:" + _DOMAIN_CHAR + r"(?:-|" + _DOMAIN_CHAR + r")*)?" + _DOMAIN_CHAR + r"\.)"
_TLD_END = r"(?![\p{L}\p{N}])"
_GENERIC_TLD = r"(?:(?:" + "|".join(GENERIC_TLDS) + r")" + _TLD_END + r")"
_COUNTRY_TLD = r"(?:(?:" + "|".join(COUNTRY_TLDS) + r")" + _TLD_END + r")"
_PUNYCODE_TLD = r"(?:xn--[0-9a-z]+)"
_DOMAIN = (
    r"(?:" + _SUBDOMAIN + r"*" + _DOMAIN_NAME
    + r"(?:" + _GENERIC_TLD + r"|" + _COUNTRY_TLD + r"|" + _PUNYCODE_TLD + r"))"
)

_PATH_CHAR = r"[" + URL_PATH_CHARS + r"]"
_BALANCED_PARENS = r"\(" + _PATH_CHAR + r"+\)"
_PATH_ENDING = r"(?:[" + URL_PATH_ENDING_CHARS + r"]|" + _BALANCED_PARENS + r")"
_PATH_SEGMENT = (
    r"(?:(?:" + _PATH_CHAR + r"*(?:" + _BALANCED_PARENS + _PATH_CHAR + r"*)*" + _PATH_ENDING + r")"
    r"|(?:@" + _PATH_CHAR + r"+/))"
)

_VALID_URL = (
    r"(?P<before>^|[^" + URL_INVALID_PRECEDING_CHARS + r"])"
    r"(?P<url>"
    r"(?P<protocol>https?://)"
    r"(?P<domain>" + _DOMAIN + r")"
    r"(?::(?P<port>[0-9]+))?"
    r"(?P<path>/" + _PATH_SEGMENT + r"*)?"
    r"(?P<query>\?[" + URL_QUERY_CHARS + r"]*[" + URL_QUERY_ENDING_CHARS + r"])?"
    r")"
)

# ==========================================================================
# Mentions, lists and replies
# ==========================================================================
_SCREEN_NAME = r"(?P<screen_name>[" + USERNAME_CHARACTERS + r"]{1," + str(MAX_USERNAME_LENGTH) + r"})"
_AFTER = r"(?=(?P<after>.{0,3}))"

_VALID_MENTIONS_OR_LISTS = (
    r"(?P<before>^|RT:?|[^" + USERNAME_CHARACTERS + r"!#$%&*" + AT_SIGNS + r"])"
    r"(?P<at>[" + AT_SIGNS + r"])"
    + _SCREEN_NAME
    + r"(?P<list_slug>/[a-z][a-z0-9_\-]{0," + str(MAX_LIST_SLUG_LENGTH - 1) + r"})?"
    + _AFTER
)

_VALID_REPLY = (
    r"\A(?P<before>[" + SPACES + r"]*)"
    r"(?P<at>[" + AT_SIGNS + r"])"
    + _SCREEN_NAME
    + _AFTER
)

_END_MENTION_MATCH = r"(?:[" + AT_SIGNS + r"]|[" + LATIN_ACCENTS + r"]|://)"


def _build_rules() -> Mapping[str, Rule]:
    rules = [
        Rule(
            "valid_hashtag",
            regex.compile(_VALID_HASHTAG, regex.IGNORECASE),
            fields=("hashtag",),
            tweak=1,
        ),
        Rule(
            "valid_cashtag",
            regex.compile(_VALID_CASHTAG),
            fields=("cashtag",),
            tweak=1,
        ),
        Rule(
            "valid_url",
            regex.compile(_VALID_URL, regex.IGNORECASE),
            fields=("url",),
            tweak=0,
        ),
        Rule(
            "valid_mentions_or_lists",
            regex.compile(_VALID_MENTIONS_OR_LISTS, regex.IGNORECASE),
            fields=("screen_name",),
            tweak=1,
        ),
        Rule(
            "valid_reply",
            regex.compile(_VALID_REPLY, regex.IGNORECASE),
            fields=("screen_name",),
            tweak=1,
        ),
        Rule(
            "end_mention_match",
            regex.compile(_END_MENTION_MATCH, regex.IGNORECASE),
            context_group=None,
        ),
    ]
    logger.debug("Compiled %d extraction rules (%s)", len(rules), RULESET_VERSION)
    return MappingProxyType({rule.name: rule for rule in rules})


RULES: Mapping[str, Rule] = _build_rules()

PATTERNS: Mapping[str, regex.Pattern] = MappingProxyType(
    {name: rule.pattern for name, rule in RULES.items()}
)
