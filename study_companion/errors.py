"""Exception hierarchy for the generation core."""


class StudyCompanionError(Exception):
    """Base class for all errors raised by the generation core."""


class ContentValidationError(StudyCompanionError):
    """Source text was rejected before any provider call."""

    def __init__(self, reason: str):
        super().__init__(reason)
        self.reason = reason


class GenerationError(StudyCompanionError):
    """An agent could not turn the provider response into an artifact."""


class ResponseParseError(GenerationError):
    """The provider response was not valid JSON."""


class ArtifactSchemaError(GenerationError):
    """The parsed response did not match the expected artifact shape."""
