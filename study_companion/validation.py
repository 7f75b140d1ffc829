"""Source text checks run before any generation request."""

from study_companion.errors import ContentValidationError
from study_companion.models import ContentValidation

MIN_CONTENT_LENGTH = 100
MAX_CONTENT_LENGTH = 10_000

TOO_SHORT_REASON = "Content too short for meaningful generation"
TOO_LONG_REASON = "Content too long - please provide a focused excerpt"


def validate_content(text: str | None) -> ContentValidation:
    """
    Check that source text is usable for generation.

    The lower bound applies to the stripped text, the upper bound to the raw
    text. Both bounds are inclusive.

    Args:
        text: Extracted material text

    Returns:
        ContentValidation with a reason when the text is rejected
    """
    if not text or len(text.strip()) < MIN_CONTENT_LENGTH:
        return ContentValidation(valid=False, reason=TOO_SHORT_REASON)

    if len(text) > MAX_CONTENT_LENGTH:
        return ContentValidation(valid=False, reason=TOO_LONG_REASON)

    return ContentValidation(valid=True)


def ensure_valid_content(text: str | None) -> str:
    """Return the text unchanged or raise ContentValidationError."""
    result = validate_content(text)
    if not result.valid:
        raise ContentValidationError(result.reason or TOO_SHORT_REASON)
    return text
