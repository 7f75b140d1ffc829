"""Generation state: the public per-artifact record and the workflow state."""

from dataclasses import dataclass
from typing import Any, TypedDict

from pydantic import Field

from study_companion.models import ArtifactType
from study_companion.models.artifacts import CamelModel

STAGE_FAILED = "Generation failed"
STAGE_ENHANCING = "Adding vocabulary hints..."
ENHANCING_PROGRESS = 90


class GenerationState(CamelModel):
    """What the caller renders for one artifact type."""

    is_loading: bool = False
    error: str | None = None
    progress: int = Field(default=0, ge=0, le=100)
    stage: str = ""


@dataclass(frozen=True)
class Milestones:
    """Progress values and stage labels reported while generating one artifact type."""

    start_stage: str
    located: int
    located_stage: str
    validated: int
    validated_stage: str
    invoked: int
    invoked_stage: str
    done_stage: str
    planned: int | None = None
    planned_stage: str = ""


MILESTONES: dict[ArtifactType, Milestones] = {
    ArtifactType.QUIZ: Milestones(
        start_stage="Extracting content from material...",
        located=20,
        located_stage="Validating content...",
        validated=50,
        validated_stage="Analyzing content and generating questions...",
        invoked=70,
        invoked_stage="AI processing...",
        done_stage="Quiz generated successfully!",
    ),
    ArtifactType.FLASHCARDS: Milestones(
        start_stage="Extracting content from material...",
        located=20,
        located_stage="Validating content...",
        validated=50,
        validated_stage="Identifying key terms and concepts...",
        invoked=70,
        invoked_stage="Generating flashcards...",
        done_stage="Flashcards generated successfully!",
    ),
    ArtifactType.EXAM: Milestones(
        start_stage="Preparing exam content...",
        located=15,
        located_stage="Analyzing content complexity...",
        validated=35,
        validated_stage="Designing exam structure...",
        planned=55,
        planned_stage="Exam structure planned",
        invoked=75,
        invoked_stage="Generating exam questions...",
        done_stage="Exam generated successfully!",
    ),
}


class WorkflowState(TypedDict, total=False):
    """State passed between the nodes of a generation graph."""

    artifact_type: ArtifactType
    source_text: str | None
    options: Any
    enhance_vocab_hints: bool
    topics: list[str]

    # Public fields relayed into GenerationState
    is_loading: bool
    error: str | None
    progress: int
    stage: str

    result: Any


PUBLIC_FIELDS = ("is_loading", "error", "progress", "stage")


def create_initial_state(
    artifact_type: ArtifactType,
    source_text: str | None,
    options: Any,
    enhance_vocab_hints: bool = False,
) -> WorkflowState:
    """
    Create the starting state for one generation request.

    Args:
        artifact_type: Which artifact to generate
        source_text: Material text, or None when the material could not be found
        options: The matching options model
        enhance_vocab_hints: Add pronunciation hints to quiz questions

    Returns:
        WorkflowState ready for the compiled graph
    """
    return WorkflowState(
        artifact_type=artifact_type,
        source_text=source_text,
        options=options,
        enhance_vocab_hints=enhance_vocab_hints,
        topics=[],
        is_loading=True,
        error=None,
        progress=0,
        stage=MILESTONES[artifact_type].start_stage,
        result=None,
    )


def failure(message: str) -> dict[str, Any]:
    """Update applied when a stage fails; progress keeps its last value."""
    return {"error": message, "is_loading": False, "stage": STAGE_FAILED}
