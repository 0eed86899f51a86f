"""Strongly typed identifiers for study Q&A domain entities.

Using NewType for strong typing prevents mixing up different entity IDs
and makes the code more self-documenting.
"""

from typing import NewType
from uuid import UUID

# Identity comes from the external identity service
UserId = NewType("UserId", UUID)

QuestionId = NewType("QuestionId", UUID)
AnswerId = NewType("AnswerId", UUID)
