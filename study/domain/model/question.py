"""Question aggregate root.

Questions are asked by students and answered by the community. The
counters and the solved flag are derived state: they are written only by
the counter projector and the acceptance transition, never by clients.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from study.domain.model.common import DomainModel
from study.domain.value import CourseCode, Level, QuestionId, UserId


class Question(DomainModel):
    """Question aggregate root.

    Invariants:
    - upvotes_count equals the number of votes cast on this question
    - answers_count equals the number of answers posted to this question
    - solved is True iff one of its answers is accepted
    """

    id: QuestionId
    title: str = Field(min_length=8, max_length=300)
    body: str = Field(min_length=10, max_length=10000)
    course_code: Optional[CourseCode] = None
    level: Optional[Level] = None
    author_id: UserId
    author_email: Optional[str] = None
    upvotes_count: int = Field(default=0, ge=0)
    answers_count: int = Field(default=0, ge=0)
    solved: bool = False
    created_at: datetime = Field(default_factory=datetime.now)

    @property
    def tags(self) -> list[str]:
        """Course code and level as display tags (absent ones skipped)."""
        tags = []
        if self.course_code is not None:
            tags.append(self.course_code.root)
        if self.level is not None:
            tags.append(self.level.value)
        return tags
