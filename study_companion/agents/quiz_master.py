"""Quiz Master Agent - Generates multiple choice quizzes from course material."""

import logging

from study_companion.agents.base import BaseAgent, source_excerpt, strip_quotes
from study_companion.models import GeneratedQuiz, QuizMetadata, QuizOptions, QuizQuestion
from study_companion.providers import ProviderClient

logger = logging.getLogger(__name__)

QUIZ_MAX_TOKENS = 3000
ADAPT_MAX_TOKENS = 500


class QuizMasterAgent(BaseAgent):
    """Creates multiple choice quizzes with plausible distractors and explanations."""

    def __init__(self, provider: ProviderClient):
        super().__init__(
            provider,
            "Quiz Master",
            "You are an expert educational quiz creator specializing in Material Science. "
            "You focus on creating thought-provoking multiple-choice questions that test deep "
            "understanding, not just memorization. You craft excellent distractors and provide "
            "clear explanations.",
        )

    def get_name(self) -> str:
        return "Quiz Master Agent"

    def get_description(self) -> str:
        return "Specialized in creating educational quizzes with pedagogically sound questions and explanations"

    def build_prompt(self, source_text: str, options: QuizOptions) -> str:
        """Build the quiz generation prompt."""
        return f"""As Quiz Master, analyze this content and create exactly {options.question_count} multiple-choice questions.

CONTENT:
{source_text}

REQUIREMENTS:
- Difficulty level: {options.difficulty.value}
- Language: {options.language.value}
- Every question has exactly 4 options and exactly one correct answer
- Focus on conceptual understanding over memorization
- Create plausible distractors that reveal common misconceptions
- Provide clear, educational explanations
- Cover key concepts from the material

Return exactly this JSON structure and nothing else:
{{
  "questions": [
    {{
      "question": "Clear, specific question text",
      "options": ["Option A", "Option B", "Option C", "Option D"],
      "correctAnswer": 0,
      "explanation": "Why this answer is correct and why the others are wrong",
      "difficulty": "easy|medium|hard"
    }}
  ]
}}"""

    async def generate(self, source_text: str, options: QuizOptions) -> GeneratedQuiz:
        """
        Generate a quiz from source text.

        Args:
            source_text: Material text to build questions from
            options: Requested question count, difficulty and language

        Returns:
            GeneratedQuiz with exactly ``options.question_count`` questions

        Raises:
            ResponseParseError: If the reply is not JSON
            ArtifactSchemaError: If the question count or a question is invalid
        """
        response = await self.call(self.build_prompt(source_text, options), QUIZ_MAX_TOKENS)
        payload = self.parse_json_response(response)

        items = self.extract_items(
            payload,
            "questions",
            options.question_count,
            "question count in generated quiz",
        )
        questions = self.validate_items(items, QuizQuestion)

        return GeneratedQuiz(
            questions=questions,
            metadata=QuizMetadata(
                source_text=source_excerpt(source_text),
                generated_at=self.timestamp(),
                total_questions=len(questions),
            ),
        )

    async def adapt_question_difficulty(
        self,
        question: str,
        current_difficulty: str,
        target_difficulty: str,
        material_context: str,
    ) -> str:
        """Rewrite a question for another difficulty; returns the original on failure."""
        if target_difficulty == "hard":
            direction = "more challenging by requiring deeper analysis"
        elif target_difficulty == "easy":
            direction = "more accessible with clearer language"
        else:
            direction = "moderately challenging with balanced complexity"

        prompt = f"""As Quiz Master, adapt this question from {current_difficulty} to {target_difficulty} difficulty.

QUESTION: {question}
CONTEXT: {material_context}

Make the question {direction}.

Return only the adapted question text."""

        try:
            response = await self.call(prompt, ADAPT_MAX_TOKENS, json_only=False)
        except Exception as e:
            logger.error("Quiz Master adaptation error: %s", e)
            return question

        adapted = strip_quotes(response)
        return adapted or question
