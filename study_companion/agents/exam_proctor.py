"""Exam Proctor Agent - Builds mock exams with balanced point distributions."""

import json
import logging

from study_companion.agents.base import BaseAgent, source_excerpt, strip_code_fences
from study_companion.models import (
    Difficulty,
    ExamDifficultyReport,
    ExamMetadata,
    ExamOptions,
    ExamQuestion,
    GeneratedExam,
)
from study_companion.providers import ProviderClient

logger = logging.getLogger(__name__)

EXAM_MAX_TOKENS = 4000
TOPICS_MAX_TOKENS = 500

# Baseline used for the requested total: question_count * POINTS_PER_QUESTION
POINTS_PER_QUESTION = 10
POINTS_TOLERANCE = 0.2

# Point values used as a difficulty proxy
HARD_POINTS_THRESHOLD = 12
EASY_POINTS_THRESHOLD = 8
HARD_FRACTION_LIMIT = 0.4
EASY_FRACTION_FLOOR = 0.2

MINUTES_PER_QUESTION = {
    Difficulty.EASY: 2,
    Difficulty.MEDIUM: 3,
    Difficulty.HARD: 5,
}
TIME_BUFFER = 1.2

DEFAULT_TOPICS = ["Material Properties", "Crystal Structure", "Mechanical Behavior"]


def rebalance_points(
    questions: list[ExamQuestion],
    question_count: int,
    tolerance: float = POINTS_TOLERANCE,
    points_per_question: int = POINTS_PER_QUESTION,
) -> tuple[list[ExamQuestion], bool]:
    """
    Spread points evenly when the total strays too far from the target.

    The target is ``question_count * points_per_question``. If the summed
    points deviate from it by more than ``tolerance`` (as a fraction of the
    target), every question gets ``round(target / question_count)`` points.
    Applying the function to its own output changes nothing.

    Returns:
        Tuple of (questions, whether points were rewritten)
    """
    target = question_count * points_per_question
    total = sum(q.points for q in questions)

    if abs(total - target) <= target * tolerance:
        return questions, False

    even_points = round(target / question_count)
    logger.info(
        "Rebalancing exam points: total %d deviates from target %d, using %d per question",
        total,
        target,
        even_points,
    )
    return [q.model_copy(update={"points": even_points}) for q in questions], True


class ExamProctorAgent(BaseAgent):
    """Creates exams with realistic timing, varied question types and fair points."""

    def __init__(
        self,
        provider: ProviderClient,
        points_tolerance: float = POINTS_TOLERANCE,
        hard_fraction_limit: float = HARD_FRACTION_LIMIT,
        easy_fraction_floor: float = EASY_FRACTION_FLOOR,
    ):
        super().__init__(
            provider,
            "Exam Proctor",
            "You are a rigorous but fair exam creator specializing in comprehensive Material "
            "Science assessments. You design realistic exam conditions with varied question "
            "types, appropriate point distributions, and balanced difficulty progression. You "
            "ensure exams test both breadth and depth of knowledge.",
        )
        self.points_tolerance = points_tolerance
        self.hard_fraction_limit = hard_fraction_limit
        self.easy_fraction_floor = easy_fraction_floor

    def get_name(self) -> str:
        return "Exam Proctor Agent"

    def get_description(self) -> str:
        return "Creates comprehensive exams with realistic conditions and balanced assessment"

    def build_prompt(self, source_text: str, options: ExamOptions) -> str:
        """Build the exam generation prompt."""
        total_points = options.question_count * POINTS_PER_QUESTION
        minutes_each = max(round(options.duration_minutes / options.question_count), 1)

        question_types = ["multiple_choice"]
        if options.include_essay:
            question_types.append("essay")
        if options.include_calculations:
            question_types.append("calculation")

        topics_line = ""
        if options.focus_topics:
            topics_line = f"\n- Cover these topics: {', '.join(options.focus_topics)}"

        return f"""As Exam Proctor, create a comprehensive {options.exam_type.value} exam with exactly {options.question_count} questions.

CONTENT:
{source_text}

EXAM SPECIFICATIONS:
- Type: {options.exam_type.value}
- Duration: {options.duration_minutes} minutes
- Total Points: {total_points}
- Question types: {', '.join(question_types)}
- Language: {options.language.value}{topics_line}

REQUIREMENTS:
- Start with easier questions, progress to harder ones
- Include conceptual, analytical, and application questions
- Point values should reflect question difficulty and add up to {total_points}
- Provide detailed explanations for learning
- Ensure realistic timing (average {minutes_each} min per question)
- Essay questions use a single descriptive option and correctAnswer 0

Return exactly this JSON structure and nothing else:
{{
  "questions": [
    {{
      "question": "Complete question text",
      "options": ["Option A", "Option B", "Option C", "Option D"],
      "correctAnswer": 0,
      "points": 10,
      "type": "multiple_choice|essay|calculation",
      "explanation": "Detailed explanation for learning purposes"
    }}
  ]
}}"""

    async def generate(self, source_text: str, options: ExamOptions) -> GeneratedExam:
        """
        Generate a mock exam from source text.

        Raises:
            ResponseParseError: If the reply is not JSON
            ArtifactSchemaError: If the question count or a question is invalid
        """
        response = await self.call(self.build_prompt(source_text, options), EXAM_MAX_TOKENS)
        payload = self.parse_json_response(response)

        items = self.extract_items(
            payload,
            "questions",
            options.question_count,
            "question count in generated exam",
        )
        questions = self.validate_items(items, ExamQuestion)
        questions, _ = rebalance_points(questions, options.question_count, self.points_tolerance)

        return GeneratedExam(
            questions=questions,
            metadata=ExamMetadata(
                source_text=source_excerpt(source_text),
                generated_at=self.timestamp(),
                total_questions=len(questions),
                total_points=sum(q.points for q in questions),
                estimated_duration=options.duration_minutes,
            ),
        )

    async def extract_topics(self, source_text: str) -> list[str]:
        """Extract the main topics of the material; falls back to default topics."""
        prompt = f"""As Exam Proctor, extract the 5-8 main topics from this content.

CONTENT:
{source_text}

Return a simple JSON array of strings: ["topic1", "topic2", ...]"""

        response = await self.call(prompt, TOPICS_MAX_TOKENS)
        try:
            topics = json.loads(strip_code_fences(response))
        except json.JSONDecodeError:
            logger.warning("Exam Proctor: could not parse topics, using defaults")
            return list(DEFAULT_TOPICS)

        if not isinstance(topics, list):
            return list(DEFAULT_TOPICS)
        cleaned = [str(topic).strip() for topic in topics if str(topic).strip()]
        return cleaned or list(DEFAULT_TOPICS)

    def validate_exam_difficulty(self, exam: GeneratedExam) -> ExamDifficultyReport:
        """
        Judge the difficulty spread of an exam from its point values.

        Questions worth more than 12 points count as hard, fewer than 8 as
        easy. Advisory only; it never blocks a generated exam.
        """
        total_questions = len(exam.questions)
        hard_questions = sum(1 for q in exam.questions if q.points > HARD_POINTS_THRESHOLD)
        easy_questions = sum(1 for q in exam.questions if q.points < EASY_POINTS_THRESHOLD)

        recommendations = []
        is_balanced = True

        if hard_questions > total_questions * self.hard_fraction_limit:
            recommendations.append("Consider reducing the number of high-difficulty questions")
            is_balanced = False

        if easy_questions < total_questions * self.easy_fraction_floor:
            recommendations.append("Add more foundational questions to help students build confidence")
            is_balanced = False

        if not recommendations:
            recommendations.append("Exam difficulty distribution looks well-balanced")

        return ExamDifficultyReport(is_balanced=is_balanced, recommendations=recommendations)

    @staticmethod
    def calculate_time_estimate(question_count: int, average_difficulty: Difficulty) -> int:
        """Minutes needed for an exam, with a 20% buffer."""
        estimated = question_count * MINUTES_PER_QUESTION[Difficulty(average_difficulty)]
        return round(estimated * TIME_BUFFER)
