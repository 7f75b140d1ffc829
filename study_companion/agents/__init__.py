"""AI agents for quiz, flashcard and exam generation."""

from .exam_proctor import ExamProctorAgent, rebalance_points
from .manager import AgentManager
from .quiz_master import QuizMasterAgent
from .vocab_hints import find_technical_terms
from .vocab_sensei import VocabSenseiAgent

__all__ = [
    "AgentManager",
    "ExamProctorAgent",
    "QuizMasterAgent",
    "VocabSenseiAgent",
    "find_technical_terms",
    "rebalance_points",
]
