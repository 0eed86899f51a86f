"""SQLAlchemy table definitions for study Q&A.

These table definitions are used with SQLAlchemy Core.
They match the schema defined in Alembic migrations.
"""

from sqlalchemy import (
    Boolean,
    CheckConstraint,
    Column,
    ForeignKey,
    Index,
    Integer,
    MetaData,
    PrimaryKeyConstraint,
    String,
    Table,
    Text,
)
from sqlalchemy.dialects.postgresql import TIMESTAMP, UUID

# Metadata object for all tables
metadata = MetaData()

# ============================================================================
# QUESTIONS TABLE
# ============================================================================
questions_table = Table(
    "questions",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("title", String(300), nullable=False),
    Column("body", Text, nullable=False),
    Column("course_code", String(20), nullable=True),
    Column("level", String(3), nullable=True),
    Column("author_id", UUID, nullable=False),  # Owned by the identity service
    Column("author_email", String(255), nullable=True),  # Denormalized
    Column("upvotes_count", Integer, nullable=False, server_default="0"),
    Column("answers_count", Integer, nullable=False, server_default="0"),
    Column("solved", Boolean, nullable=False, server_default="false"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    CheckConstraint("upvotes_count >= 0", name="upvotes_count_non_negative"),
    CheckConstraint("answers_count >= 0", name="answers_count_non_negative"),
)

Index("idx_questions_created_at", questions_table.c.created_at.desc())
Index("idx_questions_course_code", questions_table.c.course_code)
Index("idx_questions_author_id", questions_table.c.author_id)

# ============================================================================
# ANSWERS TABLE
# ============================================================================
answers_table = Table(
    "answers",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column(
        "question_id",
        UUID,
        ForeignKey("questions.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column("body", Text, nullable=False),
    Column("author_id", UUID, nullable=False),
    Column("author_email", String(255), nullable=True),
    Column("is_accepted", Boolean, nullable=False, server_default="false"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

Index("idx_answers_question_id", answers_table.c.question_id)

# At most one accepted answer per question
Index(
    "uq_answers_one_accepted",
    answers_table.c.question_id,
    unique=True,
    postgresql_where=answers_table.c.is_accepted,
)

# ============================================================================
# QUESTION VOTES TABLE (ledger)
# ============================================================================
votes_table = Table(
    "question_votes",
    metadata,
    Column(
        "question_id",
        UUID,
        ForeignKey("questions.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column("voter_id", UUID, nullable=False),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    PrimaryKeyConstraint("question_id", "voter_id", name="pk_question_votes"),
)

Index("idx_question_votes_voter_id", votes_table.c.voter_id)
