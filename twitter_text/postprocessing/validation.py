"""
Validation — multi-stage checks of an extract() payload against its tweet.

Implements:
- JSON parse
- Schema conformance (jsonschema strict)
- Typed parse (pydantic ExtractionResult)
- Offset verification (bounds, slice, order, non-overlap)
- Consistency between plain and indexed collections (plain mentions may
  omit candidates the indexed mentions keep)

Payloads produced by extraction.extractor.extract() always pass; the
checks exist for payloads that were stored, transported or hand-edited.
"""
import json
import logging
from typing import List, Sequence

from jsonschema import ValidationError, validate
from pydantic import ValidationError as ModelValidationError

from twitter_text.config.schemas import EXTRACTION_OUTPUT_SCHEMA
from twitter_text.models.extraction_io import ExtractionResult
from twitter_text.models.validation import ValidationResult

logger = logging.getLogger(__name__)

# collection -> (value fields, marker width, plain collection)
INDEXED_COLLECTIONS = {
    "hashtags_with_indices": (("hashtag",), 1, "hashtags"),
    "cashtags_with_indices": (("cashtag",), 1, "cashtags"),
    "urls_with_indices": (("url",), 0, "urls"),
    "mentions_with_indices": (("screen_name",), 1, "mentions"),
}

# Plain collections that drop candidates their indexed collection keeps.
FILTERED_PLAIN_COLLECTIONS = {"mentions"}


def _is_subsequence(items: List[str], sequence: List[str]) -> bool:
    remaining = iter(sequence)
    return all(item in remaining for item in items)


def verify_entity_offsets(
    records: List[dict],
    text: str,
    fields: Sequence[str],
    marker_width: int,
) -> List[str]:
    """
    Verify that every record's indices point at its value inside *text*.

    For each record ``text[start + marker_width:end]`` must equal the
    concatenated field values, records must be in left-to-right order and
    must not overlap.

    Returns:
        List of error strings (empty when all records are consistent).
    """
    errors: List[str] = []
    previous_end = 0

    for record in records:
        start, end = record["indices"]
        value = "".join(record.get(f, "") for f in fields)

        if not 0 <= start <= end <= len(text):
            errors.append(
                f"Indices out of bounds: [{start},{end}] for text length {len(text)}"
            )
            continue

        extracted = text[start + marker_width:end]
        if extracted != value:
            errors.append(
                f"Indices mismatch: [{start},{end}] extracts '{extracted[:30]}' "
                f"but value is '{value[:30]}'"
            )

        if start < previous_end:
            errors.append(f"Overlapping or unordered entity at [{start},{end}]")
        previous_end = max(previous_end, end)

    return errors


def validate_extraction_output(output_json: str | dict, text: str) -> ValidationResult:
    """
    Multi-stage validation of an extract() payload.

    Stages:
        1. JSON Parse
        2. Schema conformance
        3. Typed parse
        4. Offset verification
        5. Plain / indexed consistency

    Args:
        output_json: Payload as a JSON string or dict.
        text: The tweet the payload was extracted from.

    Returns:
        ValidationResult with valid flag, errors, warnings, and the payload.
    """
    errors: List[str] = []
    warnings: List[str] = []

    # ------------------------------------------------------------------
    # Stage 1: Parse JSON
    # ------------------------------------------------------------------
    if isinstance(output_json, dict):
        data = output_json
    else:
        try:
            data = json.loads(output_json)
        except json.JSONDecodeError as e:
            errors.append(f"Invalid JSON: {e}")
            return ValidationResult(valid=False, errors=errors, warnings=warnings)

    # ------------------------------------------------------------------
    # Stage 2: Schema validation
    # ------------------------------------------------------------------
    try:
        validate(instance=data, schema=EXTRACTION_OUTPUT_SCHEMA["schema"])
    except ValidationError as e:
        errors.append(f"Schema violation: {e.message}")
        return ValidationResult(valid=False, errors=errors, warnings=warnings)

    # ------------------------------------------------------------------
    # Stage 3: Typed parse
    # ------------------------------------------------------------------
    try:
        ExtractionResult.model_validate(data)
    except ModelValidationError as e:
        for err in e.errors():
            location = ".".join(str(part) for part in err["loc"])
            errors.append(f"Model violation at {location}: {err['msg']}")
        return ValidationResult(valid=False, errors=errors, warnings=warnings)

    # ------------------------------------------------------------------
    # Stage 4: Offset verification
    # ------------------------------------------------------------------
    entities_checked = 0
    for collection, (fields, marker_width, _) in INDEXED_COLLECTIONS.items():
        records = data.get(collection, [])
        entities_checked += len(records)
        for error in verify_entity_offsets(records, text, fields, marker_width):
            errors.append(f"{collection}: {error}")

    # ------------------------------------------------------------------
    # Stage 5: Consistency
    # ------------------------------------------------------------------
    for collection, (fields, _, plain) in INDEXED_COLLECTIONS.items():
        if collection not in data and plain not in data:
            continue
        indexed_values = ["".join(r[f] for f in fields) for r in data.get(collection, [])]
        plain_values = data.get(plain, [])
        if plain in FILTERED_PLAIN_COLLECTIONS:
            consistent = _is_subsequence(plain_values, indexed_values)
        else:
            consistent = plain_values == indexed_values
        if not consistent:
            errors.append(f"'{plain}' does not match '{collection}'")

    replyto = data.get("replyto", "")
    mentioned = [r["screen_name"] for r in data.get("mentions_with_indices", [])]
    if replyto and replyto not in mentioned:
        warnings.append(f"Reply target '{replyto}' is not among the mentions")

    valid = len(errors) == 0
    if not valid:
        logger.warning("Extraction payload failed validation with %d error(s)", len(errors))

    return ValidationResult(
        valid=valid,
        errors=errors,
        warnings=warnings,
        entities_checked=entities_checked,
        data=data,
    )
