"""LangGraph generation workflow and caller-facing state."""

from .session import GenerationSession
from .state import GenerationState, create_initial_state
from .workflow import compile_workflow, create_generation_workflow

__all__ = [
    "GenerationSession",
    "GenerationState",
    "create_initial_state",
    "compile_workflow",
    "create_generation_workflow",
]
