"""Tests for source content validation."""

import pytest

from study_companion.errors import ContentValidationError
from study_companion.validation import (
    MAX_CONTENT_LENGTH,
    MIN_CONTENT_LENGTH,
    TOO_LONG_REASON,
    TOO_SHORT_REASON,
    ensure_valid_content,
    validate_content,
)


class TestValidateContent:
    """Test the length checks run before generation."""

    def test_empty_text_is_too_short(self):
        """Test that empty text is rejected as too short."""
        result = validate_content("")

        assert result.valid is False
        assert result.reason == TOO_SHORT_REASON

    def test_none_is_too_short(self):
        """Test that missing text is rejected as too short."""
        assert validate_content(None).reason == TOO_SHORT_REASON

    def test_exactly_minimum_is_valid(self):
        """Test that the lower bound is inclusive."""
        result = validate_content("a" * MIN_CONTENT_LENGTH)

        assert result.valid is True
        assert result.reason is None

    def test_one_below_minimum_is_invalid(self):
        """Test that 99 characters are rejected."""
        assert validate_content("a" * (MIN_CONTENT_LENGTH - 1)).valid is False

    def test_whitespace_does_not_count_towards_minimum(self):
        """Test that the lower bound applies to stripped text."""
        text = "   " + "a" * (MIN_CONTENT_LENGTH - 1) + "   "

        assert validate_content(text).reason == TOO_SHORT_REASON

    def test_exactly_maximum_is_valid(self):
        """Test that the upper bound is inclusive."""
        assert validate_content("a" * MAX_CONTENT_LENGTH).valid is True

    def test_above_maximum_is_too_long(self):
        """Test that 10,001 characters are rejected as too long."""
        result = validate_content("a" * (MAX_CONTENT_LENGTH + 1))

        assert result.valid is False
        assert result.reason == TOO_LONG_REASON


class TestEnsureValidContent:
    """Test the raising variant."""

    def test_returns_valid_text(self, source_text: str):
        """Test that valid text is returned unchanged."""
        assert ensure_valid_content(source_text) == source_text

    def test_raises_with_reason(self):
        """Test that invalid text raises with the rejection reason."""
        with pytest.raises(ContentValidationError) as exc_info:
            ensure_valid_content("short")

        assert exc_info.value.reason == TOO_SHORT_REASON
