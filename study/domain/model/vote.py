"""Vote entity.

Votes are ledger rows: each one asserts that a voter upvoted a question.
The question's upvotes_count is derived from them.
"""

from datetime import datetime

from pydantic import Field

from study.domain.model.common import DomainModel
from study.domain.value import QuestionId, UserId


class Vote(DomainModel):
    """Vote entity.

    Business rules:
    - One vote per voter per question (composite key, enforced by the store)
    - Upvotes only; retracting deletes the row
    """

    question_id: QuestionId
    voter_id: UserId
    created_at: datetime = Field(default_factory=datetime.now)
