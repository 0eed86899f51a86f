"""Domain model entities for study Q&A."""

from study.domain.model.answer import Answer
from study.domain.model.question import Question
from study.domain.model.vote import Vote

__all__ = [
    "Question",
    "Answer",
    "Vote",
]
