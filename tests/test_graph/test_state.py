"""Tests for generation state management."""

import pytest
from pydantic import ValidationError

from study_companion.graph.state import (
    MILESTONES,
    STAGE_FAILED,
    GenerationState,
    create_initial_state,
    failure,
)
from study_companion.models import ArtifactType, QuizOptions


class TestGenerationState:
    """Test the caller-facing state record."""

    def test_idle_defaults(self):
        """Test that a new state is idle."""
        state = GenerationState()

        assert state.is_loading is False
        assert state.error is None
        assert state.progress == 0
        assert state.stage == ""

    def test_serializes_camel_case(self):
        """Test that the state dumps with camelCase keys."""
        dumped = GenerationState(is_loading=True).model_dump(by_alias=True)

        assert dumped["isLoading"] is True

    def test_progress_is_bounded(self):
        """Test that progress above 100 is rejected."""
        with pytest.raises(ValidationError):
            GenerationState(progress=101)


class TestCreateInitialState:
    """Test initial workflow state creation."""

    def test_carries_request(self, source_text: str):
        """Test that the request is stored in the state."""
        options = QuizOptions()
        state = create_initial_state(ArtifactType.QUIZ, source_text, options, True)

        assert state["artifact_type"] is ArtifactType.QUIZ
        assert state["source_text"] == source_text
        assert state["options"] == options
        assert state["enhance_vocab_hints"] is True

    def test_starts_loading(self, source_text: str):
        """Test the public fields of a fresh request."""
        state = create_initial_state(ArtifactType.EXAM, source_text, None)

        assert state["is_loading"] is True
        assert state["error"] is None
        assert state["progress"] == 0
        assert state["stage"] == MILESTONES[ArtifactType.EXAM].start_stage
        assert state["result"] is None
        assert state["topics"] == []


class TestMilestones:
    """Test the progress milestones per artifact type."""

    def test_quiz_and_flashcards(self):
        """Test the quiz and flashcard milestone values."""
        for artifact_type in (ArtifactType.QUIZ, ArtifactType.FLASHCARDS):
            milestones = MILESTONES[artifact_type]
            assert (milestones.located, milestones.validated, milestones.invoked) == (20, 50, 70)
            assert milestones.planned is None

    def test_exam(self):
        """Test the exam milestone values."""
        milestones = MILESTONES[ArtifactType.EXAM]

        assert (milestones.located, milestones.validated, milestones.planned, milestones.invoked) == (
            15,
            35,
            55,
            75,
        )


class TestFailure:
    """Test the failure update."""

    def test_leaves_progress_out(self):
        """Test that a failure does not touch progress."""
        update = failure("boom")

        assert update == {"error": "boom", "is_loading": False, "stage": STAGE_FAILED}
