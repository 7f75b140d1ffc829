"""Pydantic models for generation options and generated artifacts."""

from datetime import datetime
from enum import Enum

from pydantic import AliasChoices, BaseModel, Field, field_validator, model_validator
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Frozen model that speaks camelCase on the wire and snake_case in Python."""

    model_config = {
        "alias_generator": to_camel,
        "populate_by_name": True,
        "frozen": True,
    }


class Difficulty(str, Enum):
    """Difficulty of a single question or card."""

    EASY = "easy"
    MEDIUM = "medium"
    HARD = "hard"


class QuizDifficulty(str, Enum):
    """Requested difficulty for a whole quiz."""

    EASY = "easy"
    MEDIUM = "medium"
    HARD = "hard"
    MIXED = "mixed"


class Language(str, Enum):
    """Output language."""

    EN = "en"
    DE = "de"


class QuestionType(str, Enum):
    """Exam question kinds."""

    MULTIPLE_CHOICE = "multiple_choice"
    ESSAY = "essay"
    CALCULATION = "calculation"


class ExamType(str, Enum):
    """Exam flavours."""

    MIDTERM = "midterm"
    FINAL = "final"
    PRACTICE = "practice"


class FocusLevel(str, Enum):
    """What a flashcard deck should concentrate on."""

    VOCABULARY = "vocabulary"
    CONCEPTS = "concepts"
    MIXED = "mixed"


class ArtifactType(str, Enum):
    """The three kinds of generated artifact."""

    QUIZ = "quiz"
    FLASHCARDS = "flashcards"
    EXAM = "exam"


# Generation options


class QuizOptions(CamelModel):
    """Options for quiz generation."""

    question_count: int = Field(default=5, ge=1, description="Number of questions")
    difficulty: QuizDifficulty = Field(default=QuizDifficulty.MIXED)
    language: Language = Field(default=Language.EN)


class FlashcardOptions(CamelModel):
    """Options for flashcard generation."""

    card_count: int = Field(default=10, ge=1, description="Number of cards")
    language: Language = Field(default=Language.DE)
    include_formulas: bool = Field(default=True)
    focus_level: FocusLevel = Field(default=FocusLevel.MIXED)


class ExamOptions(CamelModel):
    """Options for mock exam generation."""

    question_count: int = Field(default=8, ge=1, description="Number of questions")
    duration_minutes: int = Field(
        default=90,
        ge=1,
        validation_alias=AliasChoices("durationMinutes", "duration", "duration_minutes"),
        serialization_alias="durationMinutes",
        description="Exam duration in minutes",
    )
    include_essay: bool = Field(default=True)
    include_calculations: bool = Field(default=True)
    language: Language = Field(default=Language.EN)
    exam_type: ExamType = Field(default=ExamType.PRACTICE)
    focus_topics: tuple[str, ...] = Field(
        default=(),
        description="Topics the exam should cover, usually extracted from the material",
    )


# Quiz


class QuizQuestion(CamelModel):
    """A multiple choice quiz question."""

    question: str = Field(..., min_length=1)
    options: list[str] = Field(..., description="Exactly four answer options")
    correct_answer: int = Field(..., ge=0, description="Index into options")
    explanation: str = Field(default="")
    difficulty: Difficulty = Field(default=Difficulty.MEDIUM)

    @field_validator("options")
    @classmethod
    def validate_options(cls, v: list[str]) -> list[str]:
        """Ensure there are exactly four non-empty options."""
        if len(v) != 4:
            raise ValueError("Quiz questions must have exactly 4 options")
        for i, option in enumerate(v):
            if not option or not option.strip():
                raise ValueError(f"Option {i} cannot be empty")
        return v

    @model_validator(mode="after")
    def validate_correct_answer(self) -> "QuizQuestion":
        """Ensure correct_answer points at one of the options."""
        if self.correct_answer >= len(self.options):
            raise ValueError(
                f"correct_answer {self.correct_answer} is out of range for {len(self.options)} options"
            )
        return self


class QuizMetadata(CamelModel):
    """Metadata attached to a generated quiz."""

    source_text: str
    generated_at: datetime = Field(default_factory=datetime.now)
    total_questions: int = Field(..., ge=0)


class GeneratedQuiz(CamelModel):
    """A complete generated quiz."""

    questions: list[QuizQuestion]
    metadata: QuizMetadata


# Flashcards


class Flashcard(CamelModel):
    """A single flashcard."""

    front: str = Field(..., min_length=1)
    back: str = Field(..., min_length=1)
    category: str = Field(default="general")
    difficulty: Difficulty = Field(default=Difficulty.MEDIUM)


class FlashcardMetadata(CamelModel):
    """Metadata attached to a generated flashcard deck."""

    source_text: str
    generated_at: datetime = Field(default_factory=datetime.now)
    total_cards: int = Field(..., ge=0)


class GeneratedFlashcards(CamelModel):
    """A complete generated flashcard deck."""

    cards: list[Flashcard]
    metadata: FlashcardMetadata


# Exam


class ExamQuestion(CamelModel):
    """A mock exam question."""

    question: str = Field(..., min_length=1)
    options: list[str] = Field(..., min_length=1)
    correct_answer: int = Field(default=0, ge=0)
    points: int = Field(default=10, ge=1)
    type: QuestionType = Field(default=QuestionType.MULTIPLE_CHOICE)
    explanation: str = Field(default="")

    @model_validator(mode="after")
    def validate_correct_answer(self) -> "ExamQuestion":
        """Ensure correct_answer points at one of the options."""
        if self.correct_answer >= len(self.options):
            raise ValueError(
                f"correct_answer {self.correct_answer} is out of range for {len(self.options)} options"
            )
        return self


class ExamMetadata(CamelModel):
    """Metadata attached to a generated exam."""

    source_text: str
    generated_at: datetime = Field(default_factory=datetime.now)
    total_questions: int = Field(..., ge=0)
    total_points: int = Field(..., ge=0)
    estimated_duration: int = Field(..., ge=1, description="Minutes")


class GeneratedExam(CamelModel):
    """A complete generated mock exam."""

    questions: list[ExamQuestion]
    metadata: ExamMetadata

    @property
    def total_points(self) -> int:
        """Sum of points across all questions."""
        return sum(q.points for q in self.questions)


# Reports and status


class ContentValidation(CamelModel):
    """Result of checking source text before generation."""

    valid: bool
    reason: str | None = None


class ExamDifficultyReport(CamelModel):
    """Advisory analysis of an exam's point distribution."""

    is_balanced: bool
    recommendations: list[str] = Field(default_factory=list)


class AgentInfo(CamelModel):
    """Static description of an agent."""

    name: str
    description: str
    status: str = "active"
