"""Tests for the deterministic mock responder."""

import json

from study_companion.providers.mock import (
    MOCK_EXAM_POOL,
    MOCK_FLASHCARD_POOL,
    MOCK_MEMORY_TECHNIQUE,
    MOCK_TOPICS,
    UNMATCHED_RESPONSE,
    instruction_line,
    mock_response,
    requested_count,
)


class TestRequestedCount:
    """Test reading the item count from a prompt."""

    def test_reads_exactly_n(self):
        """Test that 'exactly N' sets the count."""
        assert requested_count("Create exactly 7 questions.\n\nCONTENT", 3) == 7

    def test_defaults_without_count(self):
        """Test that the default applies when no count is given."""
        assert requested_count("Create some questions.", 3) == 3

    def test_ignores_counts_in_material(self):
        """Test that counts after the instruction paragraph are ignored."""
        prompt = "Create questions.\n\nCONTENT:\nexactly 40 atoms"

        assert requested_count(prompt, 2) == 2

    def test_instruction_line_stops_at_blank_line(self):
        """Test that the instruction paragraph ends at the first blank line."""
        assert instruction_line("  Head line\nsecond\n\nbody") == "Head line\nsecond"


class TestMockResponse:
    """Test keyword routing of the mock responder."""

    def test_quiz_prompt_returns_requested_count(self):
        """Test that quiz prompts get the requested number of questions."""
        payload = json.loads(mock_response("Create a quiz with exactly 5 questions.\n\nCONTENT"))

        assert len(payload["questions"]) == 5
        assert all(len(q["options"]) == 4 for q in payload["questions"])

    def test_flashcard_prompt(self):
        """Test that flashcard prompts draw from the card pool."""
        payload = json.loads(mock_response("Create exactly 2 flashcards.\n\nCONTENT"))

        assert payload["cards"] == MOCK_FLASHCARD_POOL[:2]

    def test_exam_prompt_wins_over_questions(self):
        """Test that exam prompts mentioning questions get exam questions."""
        payload = json.loads(mock_response("Create an exam with exactly 3 questions.\n\nCONTENT"))

        assert payload["questions"] == MOCK_EXAM_POOL[:3]

    def test_material_does_not_steer_response(self):
        """Test that keywords inside the material are ignored."""
        prompt = "Create exactly 1 flashcards.\n\nCONTENT:\nThis exam covers quiz questions."

        assert "cards" in json.loads(mock_response(prompt))

    def test_topics_prompt(self):
        """Test that topic extraction gets a JSON list."""
        assert json.loads(mock_response("Extract the main topics of this exam.")) == MOCK_TOPICS

    def test_pronunciation_prompt_echoes_term(self):
        """Test that pronunciation prompts echo the quoted term."""
        response = mock_response('Provide a pronunciation guide for: "Korngrenze"')

        assert response == "Korngrenze [pronunciation guide unavailable]"

    def test_memory_technique_prompt(self):
        """Test that memory technique prompts get the fixed tip."""
        assert mock_response("Suggest a memory technique for this term.") == MOCK_MEMORY_TECHNIQUE

    def test_adapt_prompt_returns_question(self):
        """Test that adaptation prompts return the original question."""
        prompt = "Adapt this question to hard difficulty.\n\nQUESTION: What is a vacancy?\nCONTEXT: x"

        assert mock_response(prompt) == "What is a vacancy?"

    def test_unmatched_prompt(self):
        """Test that unrelated prompts get the generic response."""
        assert mock_response("Say hello.") == UNMATCHED_RESPONSE

    def test_is_deterministic(self):
        """Test that the same prompt always yields the same text."""
        prompt = "Create exactly 4 flashcards.\n\nCONTENT"

        assert mock_response(prompt) == mock_response(prompt)
