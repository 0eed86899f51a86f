"""Answer entity."""

from datetime import datetime
from typing import Optional

from pydantic import Field

from study.domain.model.common import DomainModel
from study.domain.value import AnswerId, QuestionId, UserId


class Answer(DomainModel):
    """Answer entity.

    Represents an answer posted to a question. At most one answer per
    question has is_accepted set; only the acceptance transition changes it.
    """

    id: AnswerId
    question_id: QuestionId
    body: str = Field(min_length=10, max_length=10000)
    author_id: UserId
    author_email: Optional[str] = None
    is_accepted: bool = False
    created_at: datetime = Field(default_factory=datetime.now)
