"""Minimal artifacts built without any provider, used as the last resort."""

from itertools import cycle, islice

from study_companion.agents.base import source_excerpt
from study_companion.agents.exam_proctor import POINTS_PER_QUESTION
from study_companion.models import (
    Difficulty,
    ExamMetadata,
    ExamOptions,
    ExamQuestion,
    Flashcard,
    FlashcardMetadata,
    FlashcardOptions,
    GeneratedExam,
    GeneratedFlashcards,
    GeneratedQuiz,
    QuestionType,
    QuizMetadata,
    QuizOptions,
    QuizQuestion,
)

MINIMAL_QUESTIONS = [
    QuizQuestion(
        question="Based on the material, which concept is most fundamental?",
        options=["Concept A", "Concept B", "Concept C", "Concept D"],
        correct_answer=0,
        explanation="This question would be generated from your material content.",
        difficulty=Difficulty.EASY,
    ),
    QuizQuestion(
        question="What is the key principle discussed in this material?",
        options=["Principle 1", "Principle 2", "Principle 3", "Principle 4"],
        correct_answer=1,
        explanation="This explanation would be derived from your specific material.",
        difficulty=Difficulty.MEDIUM,
    ),
]

MINIMAL_CARDS = [
    Flashcard(
        front="Key Term from Material",
        back="Definition extracted from your content",
        category="general",
        difficulty=Difficulty.EASY,
    ),
    Flashcard(
        front="Important Concept",
        back="Explanation based on your material",
        category="general",
        difficulty=Difficulty.MEDIUM,
    ),
    Flashcard(
        front="Critical Formula",
        back="Mathematical relationship from your content",
        category="formulas",
        difficulty=Difficulty.HARD,
    ),
]

MINIMAL_EXAM_QUESTIONS = [
    ExamQuestion(
        question="Which concept from the material is most fundamental?",
        options=["Concept A", "Concept B", "Concept C", "Concept D"],
        correct_answer=0,
        points=POINTS_PER_QUESTION,
        type=QuestionType.MULTIPLE_CHOICE,
        explanation="This question would be generated from your material content.",
    ),
    ExamQuestion(
        question="Summarize the central argument of the material in your own words.",
        options=["Essay question - written answer required"],
        correct_answer=0,
        points=POINTS_PER_QUESTION,
        type=QuestionType.ESSAY,
        explanation="A complete answer covers the main claims and their justification.",
    ),
]


def _repeat(pool: list, count: int) -> list:
    return list(islice(cycle(pool), max(count, 0)))


def create_minimal_quiz(source_text: str, options: QuizOptions) -> GeneratedQuiz:
    """Build a valid quiz by cycling through the fixed question pool."""
    questions = _repeat(MINIMAL_QUESTIONS, options.question_count)
    return GeneratedQuiz(
        questions=questions,
        metadata=QuizMetadata(
            source_text=source_excerpt(source_text or ""),
            total_questions=len(questions),
        ),
    )


def create_minimal_flashcards(source_text: str, options: FlashcardOptions) -> GeneratedFlashcards:
    """Build a valid flashcard deck by cycling through the fixed card pool."""
    cards = _repeat(MINIMAL_CARDS, options.card_count)
    return GeneratedFlashcards(
        cards=cards,
        metadata=FlashcardMetadata(
            source_text=source_excerpt(source_text or ""),
            total_cards=len(cards),
        ),
    )


def create_minimal_exam(source_text: str, options: ExamOptions) -> GeneratedExam:
    """Build a valid exam by cycling through the fixed question pool."""
    questions = _repeat(MINIMAL_EXAM_QUESTIONS, options.question_count)
    return GeneratedExam(
        questions=questions,
        metadata=ExamMetadata(
            source_text=source_excerpt(source_text or ""),
            total_questions=len(questions),
            total_points=sum(q.points for q in questions),
            estimated_duration=options.duration_minutes,
        ),
    )
