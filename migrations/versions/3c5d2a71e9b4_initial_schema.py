"""initial_schema

Create the schema for Lens:
- Identities (one row per provider account, unique per provider + provider id)
- Search events (append-only search log)
- Sessions (server-side login sessions)

Revision ID: 3c5d2a71e9b4
Revises:
Create Date: 2026-10-19 10:12:44.518203

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = "3c5d2a71e9b4"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    op.execute('CREATE EXTENSION IF NOT EXISTS "uuid-ossp"')

    # ========================================================================
    # IDENTITIES table
    # ========================================================================
    op.create_table(
        "identities",
        sa.Column(
            "id",
            sa.UUID(),
            server_default=sa.text("uuid_generate_v4()"),
            nullable=False,
        ),
        sa.Column("provider", sa.String(20), nullable=False),
        sa.Column("provider_id", sa.String(255), nullable=False),
        sa.Column("display_name", sa.String(255), nullable=False),
        sa.Column("email", sa.String(255), nullable=True),
        sa.Column("profile_photo", sa.Text(), nullable=True),
        sa.Column(
            "created_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.PrimaryKeyConstraint("id"),
        # Backs the insert-if-absent in identity creation
        sa.UniqueConstraint(
            "provider", "provider_id", name="uq_identities_provider"
        ),
    )

    # ========================================================================
    # SEARCH_EVENTS table
    # ========================================================================
    op.create_table(
        "search_events",
        sa.Column(
            "id",
            sa.UUID(),
            server_default=sa.text("uuid_generate_v4()"),
            nullable=False,
        ),
        sa.Column("identity_id", sa.UUID(), nullable=False),
        sa.Column("term", sa.Text(), nullable=False),
        sa.Column(
            "timestamp",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.Column(
            "seq", sa.BigInteger(), sa.Identity(always=True), nullable=False
        ),
        sa.ForeignKeyConstraint(
            ["identity_id"], ["identities.id"], ondelete="CASCADE"
        ),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(
        "idx_search_events_identity_seq",
        "search_events",
        ["identity_id", sa.text("seq DESC")],
    )
    # Hash, not btree: long terms exceed the btree row size limit
    op.create_index(
        "idx_search_events_term",
        "search_events",
        ["term"],
        postgresql_using="hash",
    )

    # ========================================================================
    # SESSIONS table
    # ========================================================================
    op.create_table(
        "sessions",
        sa.Column("id", sa.String(64), nullable=False),
        sa.Column("identity_id", sa.UUID(), nullable=False),
        sa.Column("created_at", sa.TIMESTAMP(timezone=True), nullable=False),
        sa.Column("expires_at", sa.TIMESTAMP(timezone=True), nullable=False),
        sa.Column("last_touched_at", sa.TIMESTAMP(timezone=True), nullable=False),
        sa.ForeignKeyConstraint(
            ["identity_id"], ["identities.id"], ondelete="CASCADE"
        ),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("idx_sessions_expires_at", "sessions", ["expires_at"])


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_index("idx_sessions_expires_at", table_name="sessions")
    op.drop_table("sessions")

    op.drop_index("idx_search_events_term", table_name="search_events")
    op.drop_index("idx_search_events_identity_seq", table_name="search_events")
    op.drop_table("search_events")

    op.drop_table("identities")
