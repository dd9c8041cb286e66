"""
JSON Schema for the extract() output payload.

Used by postprocessing.validation before the payload is parsed into the
pydantic ExtractionResult, so structural problems are reported with a
schema path instead of a model error.
"""


def _indexed_entity(field_name: str) -> dict:
    return {
        "type": "object",
        "additionalProperties": False,
        "required": [field_name, "indices"],
        "properties": {
            field_name: {"type": "string", "minLength": 1},
            "indices": {
                "type": "array",
                "minItems": 2,
                "maxItems": 2,
                "items": {"type": "integer", "minimum": 0},
                "description": "[start, end] character offsets, end exclusive",
            },
        },
    }


_STRING_LIST: dict = {"type": "array", "items": {"type": "string"}}

EXTRACTION_OUTPUT_SCHEMA: dict = {
    "name": "tweet_entities_v1",
    "strict": True,
    "schema": {
        "type": "object",
        "additionalProperties": False,
        "required": [
            "hashtags",
            "urls",
            "mentions",
            "replyto",
            "hashtags_with_indices",
            "urls_with_indices",
            "mentions_with_indices",
        ],
        "properties": {
            "hashtags": _STRING_LIST,
            "urls": _STRING_LIST,
            "mentions": _STRING_LIST,
            "cashtags": _STRING_LIST,
            "replyto": {
                "type": "string",
                "description": "Username the tweet replies to, empty when not a reply",
            },
            "hashtags_with_indices": {"type": "array", "items": _indexed_entity("hashtag")},
            "urls_with_indices": {"type": "array", "items": _indexed_entity("url")},
            "mentions_with_indices": {"type": "array", "items": _indexed_entity("screen_name")},
            "cashtags_with_indices": {"type": "array", "items": _indexed_entity("cashtag")},
        },
    },
}
