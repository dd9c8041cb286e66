"""
Offset correction — converts match positions into character offsets.

Pattern engines that work on encoded storage (UTF-8 bytes, UTF-16 units)
report positions that drift from character positions as soon as the text
holds non-ASCII characters. The indices reported here are therefore derived
from character counts only: the length of the text preceding the match, the
length of the leading-context capture, and the lengths of the reported
fields. The match's own end position is never used.
"""
from typing import Sequence

from twitter_text.models.entity import EntityMatch


def char_length(value) -> int:
    """Number of characters (code points) in *value*; ``None`` counts as 0."""
    if value is None:
        return 0
    return len(value)


def fix_indices(
    text: str,
    match,
    entity_type: str,
    fields: Sequence[str],
    tweak: int,
    context_group: str = "before",
) -> EntityMatch:
    """
    Build an EntityMatch with character-based ``(start, end)`` for *match*.

    Args:
        text: The text the pattern was run against.
        match: Match object exposing named groups.
        entity_type: Entity type recorded on the result.
        fields: Named groups reported as the entity value, in order.
                Unmatched optional groups are reported as ``""``.
        tweak: Extra characters covered by the entity but not part of any
               field (the ``#``, ``$`` or ``@`` marker): 1, or 0 for URLs.
        context_group: Name of the leading-context group.

    Returns:
        A new EntityMatch; *match* and *text* are left untouched.
    """
    context = match.group(context_group) or ""
    start = char_length(text[: match.start(context_group)]) + char_length(context)

    values = tuple((name, match.group(name) or "") for name in fields)
    length = sum(char_length(value) for _, value in values)
    end = start + length + tweak

    assert 0 <= start <= end <= len(text), (
        f"{entity_type} indices [{start},{end}] out of range for text of length {len(text)}"
    )

    return EntityMatch(entity_type=entity_type, fields=values, start=start, end=end)
