"""SQLAlchemy table definitions for StackIt.

These table definitions are used with SQLAlchemy Core.
They match the schema defined in Alembic migrations.

User accounts live in the account service, so user IDs are stored
without foreign keys.
"""

from sqlalchemy import (
    Boolean,
    CheckConstraint,
    Column,
    ForeignKey,
    Index,
    MetaData,
    SmallInteger,
    String,
    Table,
    Text,
    UniqueConstraint,
)
from sqlalchemy.dialects import postgresql
from sqlalchemy.dialects.postgresql import ARRAY, TIMESTAMP, UUID

# Metadata object for all tables
metadata = MetaData()

# ============================================================================
# QUESTIONS TABLE
# ============================================================================
questions_table = Table(
    "questions",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("author_id", UUID, nullable=False),
    Column("title", String(200), nullable=False),
    Column("description", Text, nullable=False),
    Column("tags", ARRAY(String(50)), nullable=False, server_default="{}"),
    # Answer IDs in submission order, appended atomically
    Column("answer_ids", ARRAY(UUID), nullable=False, server_default="{}"),
    # Set once via compare-and-swap; no FK to avoid a questions<->answers cycle
    Column("accepted_answer_id", UUID, nullable=True),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

Index("idx_questions_created_at", questions_table.c.created_at.desc())
Index("idx_questions_author_id", questions_table.c.author_id)
Index("idx_questions_tags", questions_table.c.tags, postgresql_using="gin")

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
    Column("author_id", UUID, nullable=False),
    Column("content", Text, nullable=False),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

Index("idx_answers_question_id", answers_table.c.question_id)
Index("idx_answers_author_id", answers_table.c.author_id)

# ============================================================================
# VOTES TABLE
# ============================================================================
votes_table = Table(
    "votes",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("voter_id", UUID, nullable=False),
    Column(
        "votable_type",
        postgresql.ENUM("question", "answer", name="votable_type", create_type=False),
        nullable=False,
    ),
    Column("votable_id", UUID, nullable=False),
    Column("value", SmallInteger, nullable=False),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    CheckConstraint("value IN (1, -1)", name="vote_value_signed_unit"),
    # Leading votable columns double as the index for score aggregation
    UniqueConstraint("votable_type", "votable_id", "voter_id", name="unique_vote"),
)

Index("idx_votes_voter_id", votes_table.c.voter_id)

# ============================================================================
# NOTIFICATIONS TABLE
# ============================================================================
notifications_table = Table(
    "notifications",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("recipient_id", UUID, nullable=False),
    Column(
        "kind",
        postgresql.ENUM(
            "question_answered",
            "answer_accepted",
            "platform_message",
            name="notification_kind",
            create_type=False,
        ),
        nullable=False,
    ),
    Column("message", Text, nullable=False),
    Column("link", Text, nullable=True),
    Column("read", Boolean, nullable=False, server_default="false"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

Index(
    "idx_notifications_recipient_created_at",
    notifications_table.c.recipient_id,
    notifications_table.c.created_at.desc(),
)
