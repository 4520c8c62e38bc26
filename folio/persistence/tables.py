"""SQLAlchemy table definitions for Folio.

They match the schema defined in Alembic migrations.
"""

from sqlalchemy import (
    BigInteger,
    Boolean,
    CheckConstraint,
    Column,
    ForeignKey,
    Index,
    Integer,
    MetaData,
    String,
    Table,
    Text,
    UniqueConstraint,
)
from sqlalchemy.dialects import postgresql
from sqlalchemy.dialects.postgresql import TIMESTAMP

# Metadata object for all tables
metadata = MetaData()

# ============================================================================
# USERS TABLE
# ============================================================================
users_table = Table(
    "users",
    metadata,
    Column("id", BigInteger, primary_key=True, autoincrement=True),
    Column("external_id", String(64), nullable=False, unique=True),
    Column("name", Text, nullable=True),
    Column("email", String(320), nullable=True),
    Column("login_method", String(64), nullable=True),
    Column(
        "role",
        postgresql.ENUM("user", "admin", name="user_role", create_type=False),
        nullable=False,
        server_default="user",
    ),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "last_signed_in",
        TIMESTAMP(timezone=True),
        nullable=False,
        server_default="NOW()",
    ),
)

# ============================================================================
# PROFILES TABLE (one-to-one with users)
# ============================================================================
profiles_table = Table(
    "profiles",
    metadata,
    Column(
        "user_id",
        BigInteger,
        ForeignKey("users.id", ondelete="CASCADE"),
        primary_key=True,
    ),
    Column("avatar_url", Text, nullable=True),
    Column("bio", Text, nullable=True),
    Column("location", String(255), nullable=True),
    Column("website", String(255), nullable=True),
    Column("github", String(255), nullable=True),
    Column("twitter", String(255), nullable=True),
    Column("linkedin", String(255), nullable=True),
    Column("skills", postgresql.ARRAY(Text), nullable=False, server_default="{}"),
    Column("follower_count", Integer, nullable=False, server_default="0"),
    Column("following_count", Integer, nullable=False, server_default="0"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    CheckConstraint("follower_count >= 0", name="follower_count_non_negative"),
    CheckConstraint("following_count >= 0", name="following_count_non_negative"),
)

# ============================================================================
# PROJECTS TABLE
# ============================================================================
projects_table = Table(
    "projects",
    metadata,
    Column("id", BigInteger, primary_key=True, autoincrement=True),
    Column(
        "owner_id", BigInteger, ForeignKey("users.id", ondelete="CASCADE"), nullable=False
    ),
    Column("title", String(255), nullable=False),
    Column("description", Text, nullable=True),
    Column("readme_content", Text, nullable=True),
    Column("repository_url", String(255), nullable=True),
    Column("live_url", String(255), nullable=True),
    Column("thumbnail_url", Text, nullable=True),
    Column("tech_stack", postgresql.ARRAY(Text), nullable=False, server_default="{}"),
    Column("tags", postgresql.ARRAY(Text), nullable=False, server_default="{}"),
    Column("star_count", Integer, nullable=False, server_default="0"),
    Column("view_count", Integer, nullable=False, server_default="0"),
    Column("featured", Boolean, nullable=False, server_default="false"),
    Column(
        "visibility",
        postgresql.ENUM("public", "private", name="visibility", create_type=False),
        nullable=False,
        server_default="public",
    ),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    CheckConstraint("star_count >= 0", name="project_star_count_non_negative"),
    CheckConstraint("view_count >= 0", name="project_view_count_non_negative"),
)

Index("idx_projects_owner_id", projects_table.c.owner_id)
Index("idx_projects_created_at", projects_table.c.created_at.desc())

# ============================================================================
# SNIPPETS TABLE
# ============================================================================
snippets_table = Table(
    "snippets",
    metadata,
    Column("id", BigInteger, primary_key=True, autoincrement=True),
    Column(
        "owner_id", BigInteger, ForeignKey("users.id", ondelete="CASCADE"), nullable=False
    ),
    Column("title", String(255), nullable=False),
    Column("description", Text, nullable=True),
    Column("code", Text, nullable=False),
    Column("language", String(50), nullable=False),
    Column("tags", postgresql.ARRAY(Text), nullable=False, server_default="{}"),
    Column("star_count", Integer, nullable=False, server_default="0"),
    Column("view_count", Integer, nullable=False, server_default="0"),
    Column(
        "visibility",
        postgresql.ENUM("public", "private", name="visibility", create_type=False),
        nullable=False,
        server_default="public",
    ),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    CheckConstraint("star_count >= 0", name="snippet_star_count_non_negative"),
    CheckConstraint("view_count >= 0", name="snippet_view_count_non_negative"),
)

Index("idx_snippets_owner_id", snippets_table.c.owner_id)
Index("idx_snippets_language", snippets_table.c.language)
Index("idx_snippets_created_at", snippets_table.c.created_at.desc())

# ============================================================================
# STARS TABLE (ledger for project and snippet stars)
# ============================================================================
stars_table = Table(
    "stars",
    metadata,
    Column("id", BigInteger, primary_key=True, autoincrement=True),
    Column(
        "user_id", BigInteger, ForeignKey("users.id", ondelete="CASCADE"), nullable=False
    ),
    Column(
        "target_type",
        postgresql.ENUM("project", "snippet", name="star_target_type", create_type=False),
        nullable=False,
    ),
    Column("target_id", BigInteger, nullable=False),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    UniqueConstraint("user_id", "target_type", "target_id", name="unique_star"),
)

Index("idx_stars_target", stars_table.c.target_type, stars_table.c.target_id)

# ============================================================================
# FOLLOWS TABLE
# ============================================================================
follows_table = Table(
    "follows",
    metadata,
    Column("id", BigInteger, primary_key=True, autoincrement=True),
    Column(
        "follower_id",
        BigInteger,
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column(
        "following_id",
        BigInteger,
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    UniqueConstraint("follower_id", "following_id", name="unique_follow"),
    CheckConstraint("follower_id <> following_id", name="no_self_follow"),
)

Index("idx_follows_following_id", follows_table.c.following_id)

# ============================================================================
# NOTIFICATIONS TABLE
# ============================================================================
notifications_table = Table(
    "notifications",
    metadata,
    Column("id", BigInteger, primary_key=True, autoincrement=True),
    Column(
        "recipient_id",
        BigInteger,
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column(
        "actor_id", BigInteger, ForeignKey("users.id", ondelete="CASCADE"), nullable=False
    ),
    Column(
        "kind",
        postgresql.ENUM(
            "star", "follow", "comment", name="notification_kind", create_type=False
        ),
        nullable=False,
    ),
    Column(
        "target_kind",
        postgresql.ENUM(
            "project",
            "snippet",
            "profile",
            name="notification_target_kind",
            create_type=False,
        ),
        nullable=False,
    ),
    Column("target_id", BigInteger, nullable=True),
    Column("message", Text, nullable=True),
    Column("read", Boolean, nullable=False, server_default="false"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

Index(
    "idx_notifications_recipient_created",
    notifications_table.c.recipient_id,
    notifications_table.c.created_at.desc(),
)
