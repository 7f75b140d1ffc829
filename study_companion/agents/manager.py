"""Agent Manager - Owns the specialist agents and exposes the generation API."""

import asyncio
import logging
from collections.abc import Callable

from langchain_core.language_models import BaseChatModel

from study_companion.agents.exam_proctor import ExamProctorAgent
from study_companion.agents.quiz_master import QuizMasterAgent
from study_companion.agents.vocab_hints import find_technical_terms
from study_companion.agents.vocab_sensei import VocabSenseiAgent
from study_companion.config.settings import Settings
from study_companion.models import (
    AgentInfo,
    ExamDifficultyReport,
    ExamOptions,
    FlashcardOptions,
    GeneratedExam,
    GeneratedFlashcards,
    GeneratedQuiz,
    QuizOptions,
    QuizQuestion,
)
from study_companion.providers import ProviderClient

logger = logging.getLogger(__name__)

TermDetector = Callable[[str], list[str]]


class AgentManager:
    """
    Coordinates the Quiz Master, Vocab Sensei and Exam Proctor agents.

    Build one per application (usually via ``from_settings``) and pass it to
    whatever needs to generate artifacts. Agent failures are re-raised so
    callers can tell "agent logic failed" apart from provider outages, which
    the provider client already absorbs.
    """

    def __init__(
        self,
        provider: ProviderClient,
        term_detector: TermDetector = find_technical_terms,
        points_tolerance: float | None = None,
        hard_fraction_limit: float | None = None,
        easy_fraction_floor: float | None = None,
    ):
        self.provider = provider
        self.term_detector = term_detector

        exam_overrides = {
            "points_tolerance": points_tolerance,
            "hard_fraction_limit": hard_fraction_limit,
            "easy_fraction_floor": easy_fraction_floor,
        }
        self.quiz_master = QuizMasterAgent(provider)
        self.vocab_sensei = VocabSenseiAgent(provider)
        self.exam_proctor = ExamProctorAgent(
            provider,
            **{key: value for key, value in exam_overrides.items() if value is not None},
        )

    @classmethod
    def from_settings(cls, settings: Settings, llm: BaseChatModel | None = None) -> "AgentManager":
        """Build the provider client and the manager from one settings object."""
        return cls(
            ProviderClient(settings, llm=llm),
            points_tolerance=settings.points_tolerance,
            hard_fraction_limit=settings.hard_fraction_limit,
            easy_fraction_floor=settings.easy_fraction_floor,
        )

    @property
    def uses_mock_provider(self) -> bool:
        return self.provider.is_mock

    async def generate_quiz(self, source_text: str, options: QuizOptions) -> GeneratedQuiz:
        """Generate a quiz with the Quiz Master agent."""
        logger.info(
            "Quiz Master: generating %d %s questions",
            options.question_count,
            options.difficulty.value,
        )
        try:
            quiz = await self.quiz_master.generate(source_text, options)
        except Exception as e:
            logger.error("Quiz Master failed: %s", e)
            raise

        logger.info("Quiz Master: generated quiz with %d questions", len(quiz.questions))
        return quiz

    async def generate_flashcards(
        self, source_text: str, options: FlashcardOptions
    ) -> GeneratedFlashcards:
        """Generate a flashcard deck with the Vocab Sensei agent."""
        logger.info(
            "Vocab Sensei: creating %d flashcards (%s focus)",
            options.card_count,
            options.focus_level.value,
        )
        try:
            deck = await self.vocab_sensei.generate(source_text, options)
        except Exception as e:
            logger.error("Vocab Sensei failed: %s", e)
            raise

        logger.info("Vocab Sensei: generated %d flashcards", len(deck.cards))
        return deck

    async def generate_exam(self, source_text: str, options: ExamOptions) -> GeneratedExam:
        """Generate an exam with the Exam Proctor agent and log its difficulty analysis."""
        logger.info(
            "Exam Proctor: creating %s exam (%d questions, %d min)",
            options.exam_type.value,
            options.question_count,
            options.duration_minutes,
        )
        try:
            exam = await self.exam_proctor.generate(source_text, options)
        except Exception as e:
            logger.error("Exam Proctor failed: %s", e)
            raise

        analysis = self.analyze_exam(exam)
        logger.info(
            "Exam Proctor analysis: %s",
            "well-balanced" if analysis.is_balanced else "needs adjustment",
        )
        logger.info("Recommendations: %s", ", ".join(analysis.recommendations))
        return exam

    def analyze_exam(self, exam: GeneratedExam) -> ExamDifficultyReport:
        return self.exam_proctor.validate_exam_difficulty(exam)

    async def _add_vocab_hint(self, question: QuizQuestion) -> QuizQuestion:
        terms = self.term_detector(question.question)
        if not terms:
            return question

        term = terms[0]
        hinted = await self.vocab_sensei.add_pronunciation_hint(term)
        return question.model_copy(
            update={"question": question.question.replace(term, hinted, 1)}
        )

    async def enhance_quiz_with_vocab_hints(self, quiz: GeneratedQuiz) -> GeneratedQuiz:
        """
        Add pronunciation hints for technical terms found in quiz questions.

        Purely cosmetic: on any failure the original quiz is returned as is.
        """
        logger.info("Quiz Master + Vocab Sensei: enhancing quiz with vocabulary hints")
        try:
            enhanced = await asyncio.gather(
                *(self._add_vocab_hint(question) for question in quiz.questions)
            )
        except Exception as e:
            logger.warning("Vocabulary enhancement failed, returning original quiz: %s", e)
            return quiz

        return quiz.model_copy(update={"questions": list(enhanced)})

    def get_agent_info(self) -> dict[str, AgentInfo]:
        """Static name and description for every agent."""
        agents = {
            "quiz_master": self.quiz_master,
            "vocab_sensei": self.vocab_sensei,
            "exam_proctor": self.exam_proctor,
        }
        return {
            key: AgentInfo(name=agent.get_name(), description=agent.get_description())
            for key, agent in agents.items()
        }

    def health_check(self) -> dict[str, bool]:
        """
        Report whether each agent has a live provider behind it.

        No network call is made; a configured credential is taken as healthy.
        """
        healthy = not self.provider.is_mock
        if not healthy:
            logger.warning("No provider credentials configured - agents report offline")
        return {
            "quiz_master": healthy,
            "vocab_sensei": healthy,
            "exam_proctor": healthy,
        }
