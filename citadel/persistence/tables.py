"""SQLAlchemy table definitions for Citadel.

These Core tables are used by the Postgres repositories and match the
schema created by the Alembic migrations.
"""

from sqlalchemy import (
    BigInteger,
    CheckConstraint,
    Column,
    ForeignKey,
    Index,
    Integer,
    MetaData,
    Sequence,
    String,
    Table,
    Text,
    UniqueConstraint,
    func,
)
from sqlalchemy.dialects.postgresql import TIMESTAMP

# Metadata object for all tables
metadata = MetaData()

# Identifiers come from sequences so services can assign them before insert
users_id_seq = Sequence("users_id_seq", metadata=metadata)
posts_id_seq = Sequence("posts_id_seq", metadata=metadata)
comments_id_seq = Sequence("comments_id_seq", metadata=metadata)
votes_id_seq = Sequence("votes_id_seq", metadata=metadata)

# ============================================================================
# USERS TABLE
# ============================================================================
users_table = Table(
    "users",
    metadata,
    Column(
        "id",
        Integer,
        users_id_seq,
        primary_key=True,
        server_default=users_id_seq.next_value(),
    ),
    Column("username", String(255), nullable=False),
    Column("password_hash", String(255), nullable=False),  # bcrypt digest
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    UniqueConstraint("username", name="uq_users_username"),
)

# ============================================================================
# POSTS TABLE
# ============================================================================
posts_table = Table(
    "posts",
    metadata,
    Column(
        "id",
        Integer,
        posts_id_seq,
        primary_key=True,
        server_default=posts_id_seq.next_value(),
    ),
    Column("title", String(300), nullable=False),
    Column("content", Text, nullable=False),
    Column("board", String(100), nullable=False, server_default="General"),
    Column("link", Text, nullable=True),
    Column(
        "author_id", Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False
    ),
    Column("author_username", String(255), nullable=False),  # Denormalized from users
    # Sum of up to one int4 vote per user, so it needs the wider type
    Column("score", BigInteger, nullable=False, server_default="0"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

Index("idx_posts_created_at", posts_table.c.created_at.desc())
Index("idx_posts_author_id", posts_table.c.author_id)
Index("idx_posts_board_lower", func.lower(posts_table.c.board))

# ============================================================================
# COMMENTS TABLE
# ============================================================================
comments_table = Table(
    "comments",
    metadata,
    Column(
        "id",
        Integer,
        comments_id_seq,
        primary_key=True,
        server_default=comments_id_seq.next_value(),
    ),
    Column(
        "post_id", Integer, ForeignKey("posts.id", ondelete="CASCADE"), nullable=False
    ),
    # Replies are re-parented by the service before a delete; SET NULL is the backstop
    Column(
        "parent_id",
        Integer,
        ForeignKey("comments.id", ondelete="SET NULL"),
        nullable=True,
    ),
    Column(
        "author_id", Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False
    ),
    Column("author_username", String(255), nullable=False),  # Denormalized from users
    Column("content", Text, nullable=False),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

Index("idx_comments_post_id", comments_table.c.post_id)
Index("idx_comments_parent_id", comments_table.c.parent_id)
Index("idx_comments_created_at", comments_table.c.created_at)

# ============================================================================
# VOTES TABLE
# ============================================================================
votes_table = Table(
    "votes",
    metadata,
    Column(
        "id",
        Integer,
        votes_id_seq,
        primary_key=True,
        server_default=votes_id_seq.next_value(),
    ),
    Column(
        "user_id", Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False
    ),
    Column(
        "post_id", Integer, ForeignKey("posts.id", ondelete="CASCADE"), nullable=False
    ),
    Column("value", Integer, nullable=False),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    UniqueConstraint("user_id", "post_id", name="uq_votes_user_post"),
    CheckConstraint("value <> 0", name="vote_value_nonzero"),
)

Index("idx_votes_post_id", votes_table.c.post_id)
