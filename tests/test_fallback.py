"""Tests for the minimal fallback artifacts."""

from study_companion.fallback import (
    MINIMAL_CARDS,
    create_minimal_exam,
    create_minimal_flashcards,
    create_minimal_quiz,
)
from study_companion.models import ExamOptions, FlashcardOptions, QuizOptions


class TestMinimalArtifacts:
    """Test that fallback artifacts honour the requested counts."""

    def test_quiz_has_requested_count(self, source_text: str):
        """Test that the quiz cycles its pool up to the requested count."""
        quiz = create_minimal_quiz(source_text, QuizOptions(question_count=5))

        assert len(quiz.questions) == 5
        assert quiz.metadata.total_questions == 5
        assert all(len(q.options) == 4 for q in quiz.questions)

    def test_flashcards_repeat_pool_in_order(self, source_text: str):
        """Test that cards are drawn from the fixed pool in order."""
        deck = create_minimal_flashcards(source_text, FlashcardOptions(card_count=4))

        assert [card.front for card in deck.cards] == [
            MINIMAL_CARDS[0].front,
            MINIMAL_CARDS[1].front,
            MINIMAL_CARDS[2].front,
            MINIMAL_CARDS[0].front,
        ]

    def test_exam_metadata(self, source_text: str):
        """Test that exam metadata reflects the options."""
        exam = create_minimal_exam(source_text, ExamOptions(question_count=3, duration_minutes=45))

        assert exam.metadata.total_questions == 3
        assert exam.metadata.total_points == 30
        assert exam.metadata.estimated_duration == 45

    def test_source_excerpt_is_truncated(self):
        """Test that long material is cut to an excerpt."""
        quiz = create_minimal_quiz("x" * 500, QuizOptions(question_count=1))

        assert quiz.metadata.source_text == "x" * 200 + "..."
