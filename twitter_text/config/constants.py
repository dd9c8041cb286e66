"""
Constants used across the extractor.
Versioned and pinned so extraction results are reproducible.

The character tables below are regex character-class fragments (already
escaped for use inside ``[...]``) consumed by extraction.regex_rules.
"""
from typing import Dict, List

RULESET_VERSION: str = "twitter-text-rules-1.4.0"

# =============================================================================
# Entity types
# =============================================================================
ENTITY_HASHTAG: str = "hashtag"
ENTITY_CASHTAG: str = "cashtag"
ENTITY_URL: str = "url"
ENTITY_MENTION: str = "mention"
ENTITY_MENTION_OR_LIST: str = "mention_or_list"

# Overlap resolution in the combined entity list (lower wins).
ENTITY_PRIORITY: Dict[str, int] = {
    ENTITY_URL: 0,
    ENTITY_MENTION_OR_LIST: 1,
    ENTITY_MENTION: 1,
    ENTITY_HASHTAG: 2,
    ENTITY_CASHTAG: 3,
}

# =============================================================================
# Character classes
# =============================================================================
SPACES: str = (
    r"\u0009-\u000D\u0020\u0085\u00A0\u1680\u180E\u2000-\u200A"
    r"\u2028\u2029\u202F\u205F\u3000"
)

INVALID_CHARACTERS: str = r"\uFFFE\uFEFF\uFFFF\u202A-\u202E"

PUNCTUATION: str = r"!\"#$%&'()*+,\-./:;<=>?@\[\]^_`{|}~"

LATIN_ACCENTS: str = (
    r"\u00C0-\u00D6\u00D8-\u00F6\u00F8-\u00FF\u0100-\u024F"
    r"\u0253\u0254\u0256\u0257\u0259\u025B\u0263\u0268\u026F\u0272"
    r"\u0289\u02BB\u1E00-\u1EFF"
)

AT_SIGNS: str = r"@\uFF20"
HASH_SIGNS: str = r"#\uFF03"

# Letters (any script) are the mandatory part of a hashtag body; the rest may
# also be combining marks, digits, connector punctuation and ZWNJ / ZWJ.
HASHTAG_LETTERS: str = r"\p{L}"
HASHTAG_NON_LETTERS: str = r"\p{M}\p{Nd}\p{Pc}\u200C\u200D"

USERNAME_CHARACTERS: str = r"a-z0-9_" + LATIN_ACCENTS
MAX_USERNAME_LENGTH: int = 20
MAX_LIST_SLUG_LENGTH: int = 25

# =============================================================================
# URL vocabulary
# =============================================================================
URL_INVALID_PRECEDING_CHARS: str = r"\-/\"'!=A-Z0-9_$." + AT_SIGNS + HASH_SIGNS + INVALID_CHARACTERS

URL_PATH_CHARS: str = r"a-z0-9!*';:=+,.$/%#\[\]\-_~&|" + LATIN_ACCENTS
URL_PATH_ENDING_CHARS: str = r"a-z0-9=_#/+\-" + LATIN_ACCENTS
URL_QUERY_CHARS: str = r"a-z0-9!?*'();:&=+$/%#\[\]\-_.,~|@"
URL_QUERY_ENDING_CHARS: str = r"a-z0-9_&=#/"

GENERIC_TLDS: List[str] = [
    "aero", "asia", "biz", "cat", "com", "coop", "edu", "gov", "info",
    "int", "jobs", "mil", "mobi", "museum", "name", "net", "org", "pro",
    "tel", "travel", "xxx",
]

COUNTRY_TLDS: List[str] = [
    "ac", "ad", "ae", "af", "ag", "ai", "al", "am", "an", "ao", "aq", "ar",
    "as", "at", "au", "aw", "ax", "az", "ba", "bb", "bd", "be", "bf", "bg",
    "bh", "bi", "bj", "bm", "bn", "bo", "br", "bs", "bt", "bv", "bw", "by",
    "bz", "ca", "cc", "cd", "cf", "cg", "ch", "ci", "ck", "cl", "cm", "cn",
    "co", "cr", "cs", "cu", "cv", "cx", "cy", "cz", "dd", "de", "dj", "dk",
    "dm", "do", "dz", "ec", "ee", "eg", "eh", "er", "es", "et", "eu", "fi",
    "fj", "fk", "fm", "fo", "fr", "ga", "gb", "gd", "ge", "gf", "gg", "gh",
    "gi", "gl", "gm", "gn", "gp", "gq", "gr", "gs", "gt", "gu", "gw", "gy",
    "hk", "hm", "hn", "hr", "ht", "hu", "id", "ie", "il", "im", "in", "io",
    "iq", "ir", "is", "it", "je", "jm", "jo", "jp", "ke", "kg", "kh", "ki",
    "km", "kn", "kp", "kr", "kw", "ky", "kz", "la", "lb", "lc", "li", "lk",
    "lr", "ls", "lt", "lu", "lv", "ly", "ma", "mc", "md", "me", "mg", "mh",
    "mk", "ml", "mm", "mn", "mo", "mp", "mq", "mr", "ms", "mt", "mu", "mv",
    "mw", "mx", "my", "mz", "na", "nc", "ne", "nf", "ng", "ni", "nl", "no",
    "np", "nr", "nu", "nz", "om", "pa", "pe", "pf", "pg", "ph", "pk", "pl",
    "pm", "pn", "pr", "ps", "pt", "pw", "py", "qa", "re", "ro", "rs", "ru",
    "rw", "sa", "sb", "sc", "sd", "se", "sg", "sh", "si", "sj", "sk", "sl",
    "sm", "sn", "so", "sr", "ss", "st", "su", "sv", "sy", "sz", "tc", "td",
    "tf", "tg", "th", "tj", "tk", "tl", "tm", "tn", "to", "tp", "tr", "tt",
    "tv", "tw", "tz", "ua", "ug", "uk", "us", "uy", "uz", "va", "vc", "ve",
    "vg", "vi", "vn", "vu", "wf", "ws", "ye", "yt", "za", "zm", "zw",
]
