"""Shared test fixtures and configuration for pytest."""

from collections.abc import Callable
from datetime import datetime

import pytest
from langchain_core.language_models import FakeListChatModel

from study_companion.agents import AgentManager
from study_companion.config import Settings
from study_companion.models import (
    Difficulty,
    ExamMetadata,
    ExamQuestion,
    GeneratedExam,
    GeneratedQuiz,
    QuestionType,
    QuizMetadata,
    QuizQuestion,
)
from study_companion.providers import ProviderClient


@pytest.fixture
def source_text() -> str:
    """Course material long enough to pass content validation."""
    return (
        "Metals deform plastically through the motion of dislocations along slip planes. "
        "The face-centered cubic lattice has twelve nearest neighbours and a packing "
        "efficiency of 74 percent. Point defects such as vacancies enable diffusion, which "
        "is driven by concentration gradients as described by Fick's first law. Young's "
        "modulus measures the stiffness of a material in the elastic region."
    )


@pytest.fixture
def mock_settings() -> Settings:
    """Settings with no provider credentials, so the mock responder is used."""
    return Settings(anthropic_api_key=None, openai_api_key=None, _env_file=None)


@pytest.fixture
def live_settings() -> Settings:
    """Settings with a primary provider key configured."""
    return Settings(anthropic_api_key="test-key", openai_api_key=None, _env_file=None)


@pytest.fixture
def mock_provider(mock_settings: Settings) -> ProviderClient:
    """Provider client backed by the deterministic mock responder."""
    return ProviderClient(mock_settings)


@pytest.fixture
def manager(mock_provider: ProviderClient) -> AgentManager:
    """Agent manager without any provider credentials."""
    return AgentManager(mock_provider)


@pytest.fixture
def make_live_manager(live_settings: Settings) -> Callable[[list[str]], AgentManager]:
    """Build an agent manager whose live model replies with the given responses in order."""

    def _make(responses: list[str]) -> AgentManager:
        llm = FakeListChatModel(responses=responses)
        return AgentManager.from_settings(live_settings, llm=llm)

    return _make


@pytest.fixture
def sample_quiz() -> GeneratedQuiz:
    """Create a sample quiz whose questions mention technical terms."""
    questions = [
        QuizQuestion(
            question="What does the ElastizitätsModul describe?",
            options=["Stiffness", "Hardness", "Density", "Toughness"],
            correct_answer=0,
            explanation="It relates stress to strain in the elastic region.",
            difficulty=Difficulty.EASY,
        ),
        QuizQuestion(
            question="Which defect enables plastic deformation?",
            options=["Vacancy", "Dislocation", "Grain boundary", "Pore"],
            correct_answer=1,
            explanation="Dislocation motion carries plastic deformation.",
            difficulty=Difficulty.MEDIUM,
        ),
    ]
    return GeneratedQuiz(
        questions=questions,
        metadata=QuizMetadata(
            source_text="Sample material",
            generated_at=datetime(2024, 1, 1, 12, 0, 0),
            total_questions=len(questions),
        ),
    )


def make_exam(points: list[int]) -> GeneratedExam:
    """Build an exam with one multiple choice question per point value."""
    questions = [
        ExamQuestion(
            question=f"Question {i + 1}",
            options=["A", "B", "C", "D"],
            correct_answer=0,
            points=value,
            type=QuestionType.MULTIPLE_CHOICE,
        )
        for i, value in enumerate(points)
    ]
    return GeneratedExam(
        questions=questions,
        metadata=ExamMetadata(
            source_text="Sample material",
            generated_at=datetime(2024, 1, 1, 12, 0, 0),
            total_questions=len(questions),
            total_points=sum(points),
            estimated_duration=60,
        ),
    )


@pytest.fixture
def exam_factory() -> Callable[[list[int]], GeneratedExam]:
    """Factory for exams with given point values."""
    return make_exam
