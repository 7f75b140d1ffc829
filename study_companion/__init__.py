"""Study companion generation core: quizzes, flashcards and mock exams from course material."""

from study_companion.agents import AgentManager
from study_companion.config import Settings, get_settings, setup_logging
from study_companion.graph import GenerationSession, GenerationState
from study_companion.validation import validate_content

__version__ = "0.1.0"

__all__ = [
    "AgentManager",
    "GenerationSession",
    "GenerationState",
    "Settings",
    "get_settings",
    "setup_logging",
    "validate_content",
]
