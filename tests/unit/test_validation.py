"""
Unit tests for payload validation.
Tests: validate_extraction_output stages, verify_entity_offsets,
       ExtractionResult models, ValidationResult.summary.
"""
import json

import pytest
from pydantic import ValidationError

from twitter_text.extraction.extractor import extract
from twitter_text.models.extraction_io import ExtractionResult, HashtagEntity, MentionEntity
from twitter_text.models.validation import ValidationResult
from twitter_text.postprocessing.validation import (
    validate_extraction_output,
    verify_entity_offsets,
)


class TestValidateExtractionOutput:
    """Tests for the multi-stage validation function."""

    def test_valid_output_passes(self, valid_payload, multibyte_tweet):
        result = validate_extraction_output(valid_payload, multibyte_tweet)
        assert result.valid is True
        assert result.errors == []
        assert result.entities_checked == 2
        assert result.data is not None

    def test_json_string_accepted(self, valid_payload, multibyte_tweet):
        result = validate_extraction_output(json.dumps(valid_payload), multibyte_tweet)
        assert result.valid is True

    def test_extract_output_always_valid(self, full_tweet):
        result = validate_extraction_output(extract(full_tweet), full_tweet)
        assert result.valid is True, result.errors
        assert result.warnings == []

    def test_invalid_json_fails(self, multibyte_tweet):
        result = validate_extraction_output("not valid json {{{", multibyte_tweet)
        assert result.valid is False
        assert any("Invalid JSON" in e for e in result.errors)

    def test_missing_key_is_schema_violation(self, valid_payload, multibyte_tweet):
        del valid_payload["replyto"]
        result = validate_extraction_output(valid_payload, multibyte_tweet)
        assert result.valid is False
        assert any("Schema violation" in e for e in result.errors)

    def test_unknown_key_is_schema_violation(self, valid_payload, multibyte_tweet):
        valid_payload["symbols"] = []
        result = validate_extraction_output(valid_payload, multibyte_tweet)
        assert result.valid is False
        assert any("Schema violation" in e for e in result.errors)

    def test_reversed_indices_is_model_violation(self, valid_payload, multibyte_tweet):
        valid_payload["hashtags_with_indices"][0]["indices"] = [29, 21]
        result = validate_extraction_output(valid_payload, multibyte_tweet)
        assert result.valid is False
        assert any("Model violation at hashtags_with_indices.0.indices" in e for e in result.errors)

    def test_byte_offsets_detected(self, valid_payload, multibyte_tweet):
        # UTF-8 byte offsets of "#münchen" instead of character offsets.
        valid_payload["hashtags_with_indices"][0]["indices"] = [23, 32]
        result = validate_extraction_output(valid_payload, multibyte_tweet)
        assert result.valid is False
        assert any(e.startswith("hashtags_with_indices: Indices out of bounds") for e in result.errors)

    def test_offset_mismatch_detected(self, valid_payload, multibyte_tweet):
        valid_payload["mentions_with_indices"][0]["indices"] = [5, 12]
        result = validate_extraction_output(valid_payload, multibyte_tweet)
        assert result.valid is False
        assert any("Indices mismatch" in e for e in result.errors)

    def test_plain_and_indexed_must_agree(self, valid_payload, multibyte_tweet):
        valid_payload["hashtags"] = ["bayern"]
        result = validate_extraction_output(valid_payload, multibyte_tweet)
        assert result.valid is False
        assert "'hashtags' does not match 'hashtags_with_indices'" in result.errors

    def test_indexed_mentions_may_exceed_plain(self):
        text = "@foo@bar"
        result = validate_extraction_output(extract(text), text)
        assert result.valid is True, result.errors
        assert result.warnings == []

    def test_plain_mention_missing_from_indexed(self, valid_payload, multibyte_tweet):
        valid_payload["mentions"] = ["gülçin", "ghost"]
        result = validate_extraction_output(valid_payload, multibyte_tweet)
        assert result.valid is False
        assert "'mentions' does not match 'mentions_with_indices'" in result.errors

    def test_reply_with_rejected_mention_is_consistent(self):
        text = "@alice@bob hi"
        result = validate_extraction_output(extract(text), text)
        assert result.data["replyto"] == "alice"
        assert result.data["mentions"] == []
        assert result.valid is True
        assert result.warnings == []

    def test_reply_outside_mentions_warns(self, valid_payload, multibyte_tweet):
        valid_payload["replyto"] = "someone"
        result = validate_extraction_output(valid_payload, multibyte_tweet)
        assert result.valid is True
        assert len(result.warnings) == 1


class TestVerifyEntityOffsets:

    def test_consistent_records(self):
        text = "#a #b"
        records = [{"hashtag": "a", "indices": [0, 2]}, {"hashtag": "b", "indices": [3, 5]}]
        assert verify_entity_offsets(records, text, ("hashtag",), 1) == []

    def test_unordered_records(self):
        text = "#a #b"
        records = [{"hashtag": "b", "indices": [3, 5]}, {"hashtag": "a", "indices": [0, 2]}]
        errors = verify_entity_offsets(records, text, ("hashtag",), 1)
        assert len(errors) == 1
        assert "unordered" in errors[0]

    def test_url_has_no_marker(self):
        text = "(http://a.co)"
        records = [{"url": "http://a.co", "indices": [1, 12]}]
        assert verify_entity_offsets(records, text, ("url",), 0) == []


class TestModels:
    """Tests for the pydantic payload models."""

    def test_indices_need_two_items(self):
        with pytest.raises(ValidationError):
            HashtagEntity(hashtag="a", indices=[0])

    def test_negative_start_rejected(self):
        with pytest.raises(ValidationError):
            HashtagEntity(hashtag="a", indices=[-1, 1])

    def test_screen_name_length(self):
        with pytest.raises(ValidationError):
            MentionEntity(screen_name="a" * 21, indices=[0, 22])

    def test_cashtags_optional(self):
        result = ExtractionResult(
            hashtags=[],
            urls=[],
            mentions=[],
            hashtags_with_indices=[],
            urls_with_indices=[],
            mentions_with_indices=[],
        )
        assert result.replyto == ""
        assert result.cashtags == []
        assert result.cashtags_with_indices == []


class TestValidationResult:

    def test_summary(self):
        result = ValidationResult(valid=False, errors=["x"], warnings=[], entities_checked=3)
        assert result.summary() == "invalid: 3 entities checked, 1 error(s), 0 warning(s)"
