"""initial_schema

Create the schema for study Q&A:
- Questions (with denormalized upvote/answer counters and solved flag)
- Answers (at most one accepted per question)
- Question votes (upvote ledger, one row per voter per question)

Revision ID: 3f9c2a71d4b8
Revises:
Create Date: 2026-10-18 10:12:44.318205

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = "3f9c2a71d4b8"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    op.execute('CREATE EXTENSION IF NOT EXISTS "uuid-ossp"')

    # ========================================================================
    # QUESTIONS table
    # ========================================================================
    op.create_table(
        "questions",
        sa.Column(
            "id",
            sa.UUID(),
            server_default=sa.text("uuid_generate_v4()"),
            nullable=False,
        ),
        sa.Column("title", sa.String(300), nullable=False),
        sa.Column("body", sa.Text(), nullable=False),
        sa.Column("course_code", sa.String(20), nullable=True),
        sa.Column("level", sa.String(3), nullable=True),
        sa.Column("author_id", sa.UUID(), nullable=False),  # Identity service user
        sa.Column("author_email", sa.String(255), nullable=True),
        sa.Column("upvotes_count", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("answers_count", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("solved", sa.Boolean(), nullable=False, server_default="false"),
        sa.Column(
            "created_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.PrimaryKeyConstraint("id"),
        sa.CheckConstraint("upvotes_count >= 0", name="upvotes_count_non_negative"),
        sa.CheckConstraint("answers_count >= 0", name="answers_count_non_negative"),
        sa.CheckConstraint(
            "level IS NULL OR level IN ('100', '200', '300', '400', '500')",
            name="valid_level",
        ),
    )
    op.create_index(
        "idx_questions_created_at",
        "questions",
        [sa.text("created_at DESC")],
    )
    op.create_index("idx_questions_course_code", "questions", ["course_code"])
    op.create_index("idx_questions_author_id", "questions", ["author_id"])

    # ========================================================================
    # ANSWERS table
    # ========================================================================
    op.create_table(
        "answers",
        sa.Column(
            "id",
            sa.UUID(),
            server_default=sa.text("uuid_generate_v4()"),
            nullable=False,
        ),
        sa.Column("question_id", sa.UUID(), nullable=False),
        sa.Column("body", sa.Text(), nullable=False),
        sa.Column("author_id", sa.UUID(), nullable=False),
        sa.Column("author_email", sa.String(255), nullable=True),
        sa.Column("is_accepted", sa.Boolean(), nullable=False, server_default="false"),
        sa.Column(
            "created_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.ForeignKeyConstraint(["question_id"], ["questions.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("idx_answers_question_id", "answers", ["question_id"])
    # At most one accepted answer per question
    op.create_index(
        "uq_answers_one_accepted",
        "answers",
        ["question_id"],
        unique=True,
        postgresql_where=sa.text("is_accepted"),
    )

    # ========================================================================
    # QUESTION_VOTES table (upvote ledger)
    # ========================================================================
    op.create_table(
        "question_votes",
        sa.Column("question_id", sa.UUID(), nullable=False),
        sa.Column("voter_id", sa.UUID(), nullable=False),
        sa.Column(
            "created_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.ForeignKeyConstraint(["question_id"], ["questions.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("question_id", "voter_id", name="pk_question_votes"),
    )
    op.create_index("idx_question_votes_voter_id", "question_votes", ["voter_id"])


def downgrade() -> None:
    """Downgrade schema."""
    # Drop tables (in reverse order of dependencies)
    op.drop_table("question_votes")
    op.drop_table("answers")
    op.drop_table("questions")
