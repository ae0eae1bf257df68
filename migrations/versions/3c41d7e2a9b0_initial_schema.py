"""initial_schema

Create the account schema for atrium:
- Profile images (avatars fetched from OAuth providers)
- Accounts (provider-agnostic, unique username and email)
- Linked accounts (one identity per provider per account)
- Account preferences (timezone conflict dismissal)

Revision ID: 3c41d7e2a9b0
Revises:
Create Date: 2026-10-19 10:12:44.518203

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = "3c41d7e2a9b0"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    # ========================================================================
    # PROFILE_IMAGES table
    # ========================================================================
    op.create_table(
        "profile_images",
        sa.Column("id", sa.UUID(), nullable=False),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("content", sa.LargeBinary(), nullable=False),
        sa.Column(
            "created_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.PrimaryKeyConstraint("id"),
    )

    # ========================================================================
    # ACCOUNTS table (provider-agnostic)
    # ========================================================================
    op.create_table(
        "accounts",
        sa.Column("id", sa.UUID(), nullable=False),
        sa.Column("username", sa.String(255), nullable=False),
        sa.Column("email", sa.String(255), nullable=False),
        sa.Column("display_name", sa.String(255), nullable=False),
        sa.Column("profile_image_id", sa.UUID(), nullable=True),
        sa.Column("timezone_identifier", sa.String(64), nullable=True),
        sa.Column(
            "created_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.Column(
            "updated_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.ForeignKeyConstraint(
            ["profile_image_id"], ["profile_images.id"], ondelete="SET NULL"
        ),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("username", name="uq_accounts_username"),
        sa.UniqueConstraint("email", name="uq_accounts_email"),
    )

    # ========================================================================
    # LINKED_ACCOUNTS table (OAuth provider identities)
    # ========================================================================
    op.create_table(
        "linked_accounts",
        sa.Column("id", sa.UUID(), nullable=False),
        sa.Column("account_id", sa.UUID(), nullable=False),
        sa.Column("provider", sa.String(50), nullable=False),  # 'github', 'facebook'
        sa.Column("external_user_id", sa.String(255), nullable=False),
        sa.Column(
            "created_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.ForeignKeyConstraint(["account_id"], ["accounts.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint(
            "provider",
            "external_user_id",
            name="uq_linked_accounts_provider_identity",
        ),
        sa.UniqueConstraint(
            "account_id", "provider", name="uq_linked_accounts_account_provider"
        ),
    )
    op.create_index(
        "idx_linked_accounts_account_id", "linked_accounts", ["account_id"]
    )

    # ========================================================================
    # ACCOUNT_PREFERENCES table
    # ========================================================================
    op.create_table(
        "account_preferences",
        sa.Column("account_id", sa.UUID(), nullable=False),
        sa.Column("ignore_timezone_offset", sa.Integer(), nullable=True),
        sa.Column(
            "updated_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.ForeignKeyConstraint(["account_id"], ["accounts.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("account_id"),
    )

    # Trigger function to keep updated_at current
    op.execute("""
        CREATE OR REPLACE FUNCTION update_updated_at_column()
        RETURNS TRIGGER AS $$
        BEGIN
            NEW.updated_at = NOW();
            RETURN NEW;
        END;
        $$ LANGUAGE plpgsql
    """)

    op.execute("""
        CREATE TRIGGER update_accounts_updated_at
        BEFORE UPDATE ON accounts
        FOR EACH ROW EXECUTE FUNCTION update_updated_at_column()
    """)


def downgrade() -> None:
    """Downgrade schema."""
    op.execute("DROP TRIGGER IF EXISTS update_accounts_updated_at ON accounts")
    op.execute("DROP FUNCTION IF EXISTS update_updated_at_column()")

    # Drop tables (in reverse order of dependencies)
    op.drop_table("account_preferences")
    op.drop_index("idx_linked_accounts_account_id", table_name="linked_accounts")
    op.drop_table("linked_accounts")
    op.drop_table("accounts")
    op.drop_table("profile_images")
