"""Per-artifact generation state machine relayed to the caller."""

import logging
from collections.abc import Callable
from typing import Any

from study_companion.agents.manager import AgentManager
from study_companion.graph.state import (
    MILESTONES,
    PUBLIC_FIELDS,
    STAGE_FAILED,
    GenerationState,
    create_initial_state,
)
from study_companion.graph.workflow import compile_workflow
from study_companion.models import (
    ArtifactType,
    ExamOptions,
    FlashcardOptions,
    GeneratedExam,
    GeneratedFlashcards,
    GeneratedQuiz,
    QuizOptions,
)

logger = logging.getLogger(__name__)

StateListener = Callable[[ArtifactType, GenerationState], None]


class GenerationSession:
    """
    Drives quiz, flashcard and exam generation and tracks their progress.

    Each artifact type has its own GenerationState. Every stage of a request
    replaces that state, and ``on_update`` (if given) is called with the new
    snapshot. Errors never propagate: the state carries the message and the
    generate methods return None.
    """

    def __init__(self, manager: AgentManager, on_update: StateListener | None = None):
        self.manager = manager
        self.on_update = on_update
        self._states = {artifact_type: GenerationState() for artifact_type in ArtifactType}
        self._workflows: dict[ArtifactType, Any] = {}

    @property
    def quiz_state(self) -> GenerationState:
        return self._states[ArtifactType.QUIZ]

    @property
    def flashcard_state(self) -> GenerationState:
        return self._states[ArtifactType.FLASHCARDS]

    @property
    def exam_state(self) -> GenerationState:
        return self._states[ArtifactType.EXAM]

    def state_for(self, artifact_type: ArtifactType) -> GenerationState:
        return self._states[artifact_type]

    def clear_states(self) -> None:
        """Reset every artifact state to idle."""
        for artifact_type in ArtifactType:
            self._replace_state(artifact_type, GenerationState())

    def _replace_state(self, artifact_type: ArtifactType, state: GenerationState) -> None:
        self._states[artifact_type] = state
        if self.on_update is not None:
            self.on_update(artifact_type, state)

    def _update_state(self, artifact_type: ArtifactType, **updates: Any) -> None:
        current = self._states[artifact_type]
        self._replace_state(artifact_type, current.model_copy(update=updates))

    def _workflow(self, artifact_type: ArtifactType):
        if artifact_type not in self._workflows:
            self._workflows[artifact_type] = compile_workflow(self.manager, artifact_type)
        return self._workflows[artifact_type]

    async def _run(
        self,
        artifact_type: ArtifactType,
        source_text: str | None,
        options: Any,
        enhance_vocab_hints: bool = False,
    ) -> Any:
        self._replace_state(artifact_type, GenerationState())
        self._update_state(
            artifact_type,
            is_loading=True,
            stage=MILESTONES[artifact_type].start_stage,
        )

        initial_state = create_initial_state(
            artifact_type, source_text, options, enhance_vocab_hints
        )
        result = None

        try:
            async for chunk in self._workflow(artifact_type).astream(
                initial_state, stream_mode="updates"
            ):
                for update in chunk.values():
                    if not update:
                        continue
                    if update.get("result") is not None:
                        result = update["result"]
                    public = {key: update[key] for key in PUBLIC_FIELDS if key in update}
                    if public:
                        self._update_state(artifact_type, **public)
        except Exception as e:
            logger.exception("%s generation workflow failed", artifact_type.value)
            self._update_state(
                artifact_type,
                is_loading=False,
                error=str(e) or f"Failed to generate {artifact_type.value}",
                stage=STAGE_FAILED,
            )
            return None

        if self._states[artifact_type].error:
            return None
        return result

    async def generate_quiz(
        self,
        source_text: str | None,
        options: QuizOptions | None = None,
        enhance_vocab_hints: bool = False,
    ) -> GeneratedQuiz | None:
        """Generate a quiz, reporting progress through ``quiz_state``."""
        return await self._run(
            ArtifactType.QUIZ, source_text, options or QuizOptions(), enhance_vocab_hints
        )

    async def generate_flashcards(
        self,
        source_text: str | None,
        options: FlashcardOptions | None = None,
    ) -> GeneratedFlashcards | None:
        """Generate flashcards, reporting progress through ``flashcard_state``."""
        return await self._run(ArtifactType.FLASHCARDS, source_text, options or FlashcardOptions())

    async def generate_exam(
        self,
        source_text: str | None,
        options: ExamOptions | None = None,
    ) -> GeneratedExam | None:
        """Generate a mock exam, reporting progress through ``exam_state``."""
        return await self._run(ArtifactType.EXAM, source_text, options or ExamOptions())
