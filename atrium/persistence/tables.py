"""SQLAlchemy table definitions for atrium.

They match the schema defined in Alembic migrations.
"""

from sqlalchemy import (
    Column,
    ForeignKey,
    Index,
    Integer,
    LargeBinary,
    MetaData,
    String,
    Table,
    UniqueConstraint,
)
from sqlalchemy.dialects.postgresql import TIMESTAMP, UUID

# Metadata object for all tables
metadata = MetaData()

# ============================================================================
# PROFILE IMAGES TABLE
# ============================================================================
profile_images_table = Table(
    "profile_images",
    metadata,
    Column("id", UUID, primary_key=True),
    Column("name", String(255), nullable=False),  # e.g. 'github-profile.jpg'
    Column("content", LargeBinary, nullable=False),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

# ============================================================================
# ACCOUNTS TABLE (Provider-agnostic)
# ============================================================================
accounts_table = Table(
    "accounts",
    metadata,
    Column("id", UUID, primary_key=True),
    Column("username", String(255), nullable=False),
    Column("email", String(255), nullable=False),
    Column("display_name", String(255), nullable=False),
    Column(
        "profile_image_id",
        UUID,
        ForeignKey("profile_images.id", ondelete="SET NULL"),
        nullable=True,
    ),
    Column("timezone_identifier", String(64), nullable=True),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    UniqueConstraint("username", name="uq_accounts_username"),
    UniqueConstraint("email", name="uq_accounts_email"),
)

# ============================================================================
# LINKED ACCOUNTS TABLE (OAuth provider identities)
# ============================================================================
linked_accounts_table = Table(
    "linked_accounts",
    metadata,
    Column("id", UUID, primary_key=True),
    Column(
        "account_id",
        UUID,
        ForeignKey("accounts.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column("provider", String(50), nullable=False),  # 'github', 'facebook'
    Column("external_user_id", String(255), nullable=False),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    UniqueConstraint(
        "provider", "external_user_id", name="uq_linked_accounts_provider_identity"
    ),
    UniqueConstraint(
        "account_id", "provider", name="uq_linked_accounts_account_provider"
    ),
)

Index("idx_linked_accounts_account_id", linked_accounts_table.c.account_id)

# ============================================================================
# ACCOUNT PREFERENCES TABLE
# ============================================================================
account_preferences_table = Table(
    "account_preferences",
    metadata,
    Column(
        "account_id",
        UUID,
        ForeignKey("accounts.id", ondelete="CASCADE"),
        primary_key=True,
    ),
    Column("ignore_timezone_offset", Integer, nullable=True),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)
