"""
Entity model for extracted tweet entities (hashtag / cashtag / URL / mention).
"""
from dataclasses import dataclass
from typing import Optional, Tuple


@dataclass(frozen=True)
class EntityMatch:
    """A single extracted entity with corrected character offsets."""

    entity_type: str                    # "hashtag" | "cashtag" | "url" | "mention" | "mention_or_list"
    fields: Tuple[Tuple[str, str], ...]  # ordered (field name, extracted text) pairs
    start: int
    end: int

    @property
    def text(self) -> str:
        """Concatenated text of all fields, e.g. ``user/list`` for a list mention."""
        return "".join(value for _, value in self.fields)

    def get(self, name: str) -> Optional[str]:
        for key, value in self.fields:
            if key == name:
                return value
        return None

    def overlaps(self, other: "EntityMatch") -> bool:
        """Check if two entities have overlapping spans."""
        return not (self.end <= other.start or other.end <= self.start)

    def span_length(self) -> int:
        return self.end - self.start

    def to_dict(self) -> dict:
        record = {key: value for key, value in self.fields}
        record["indices"] = [self.start, self.end]
        return record

    def __repr__(self) -> str:
        return f"EntityMatch('{self.text}', {self.entity_type}, [{self.start},{self.end}])"
