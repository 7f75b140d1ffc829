"""Data models for artifact generation."""

from .artifacts import (
    AgentInfo,
    ArtifactType,
    ContentValidation,
    Difficulty,
    ExamDifficultyReport,
    ExamMetadata,
    ExamOptions,
    ExamQuestion,
    ExamType,
    Flashcard,
    FlashcardMetadata,
    FlashcardOptions,
    FocusLevel,
    GeneratedExam,
    GeneratedFlashcards,
    GeneratedQuiz,
    Language,
    QuestionType,
    QuizDifficulty,
    QuizMetadata,
    QuizOptions,
    QuizQuestion,
)

__all__ = [
    "AgentInfo",
    "ArtifactType",
    "ContentValidation",
    "Difficulty",
    "ExamDifficultyReport",
    "ExamMetadata",
    "ExamOptions",
    "ExamQuestion",
    "ExamType",
    "Flashcard",
    "FlashcardMetadata",
    "FlashcardOptions",
    "FocusLevel",
    "GeneratedExam",
    "GeneratedFlashcards",
    "GeneratedQuiz",
    "Language",
    "QuestionType",
    "QuizDifficulty",
    "QuizMetadata",
    "QuizOptions",
    "QuizQuestion",
]
