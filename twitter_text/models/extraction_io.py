"""
Typed Pydantic models for the extract() output contract.

The extractor itself returns plain dicts and lists; these models are the
typed view used when a payload is validated or handed to another system.
"""
from __future__ import annotations

from typing import List

from pydantic import BaseModel, Field, field_validator


class IndexedEntity(BaseModel):
    """Common part of every ``*_with_indices`` record."""

    indices: List[int] = Field(..., description="[start, end] character offsets, end exclusive.")

    @field_validator("indices")
    @classmethod
    def validate_indices(cls, v: List[int]) -> List[int]:
        if len(v) != 2:
            raise ValueError("indices must contain exactly two integers [start, end]")
        if v[0] < 0:
            raise ValueError("indices[0] must not be negative")
        if v[0] > v[1]:
            raise ValueError("indices[0] must be less than or equal to indices[1]")
        return v


class HashtagEntity(IndexedEntity):
    hashtag: str = Field(..., min_length=1)


class CashtagEntity(IndexedEntity):
    cashtag: str = Field(..., min_length=1, max_length=9)


class UrlEntity(IndexedEntity):
    url: str = Field(..., min_length=1)


class MentionEntity(IndexedEntity):
    screen_name: str = Field(..., min_length=1, max_length=20)


class ExtractionResult(BaseModel):
    """Everything extract() returns for one tweet."""

    hashtags: List[str]
    urls: List[str]
    mentions: List[str]
    replyto: str = ""
    hashtags_with_indices: List[HashtagEntity]
    urls_with_indices: List[UrlEntity]
    mentions_with_indices: List[MentionEntity]
    cashtags: List[str] = Field(default_factory=list)
    cashtags_with_indices: List[CashtagEntity] = Field(default_factory=list)
