"""SQLAlchemy table definitions for Lens.

They match the schema defined in Alembic migrations.
"""

from sqlalchemy import (
    BigInteger,
    Column,
    ForeignKey,
    Identity,
    Index,
    MetaData,
    String,
    Table,
    Text,
    UniqueConstraint,
)
from sqlalchemy.dialects.postgresql import TIMESTAMP, UUID

# Metadata object for all tables
metadata = MetaData()

# ============================================================================
# IDENTITIES TABLE (one row per provider account)
# ============================================================================
identities_table = Table(
    "identities",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("provider", String(20), nullable=False),  # 'google', 'facebook', 'github'
    Column("provider_id", String(255), nullable=False),
    Column("display_name", String(255), nullable=False),
    Column("email", String(255), nullable=True),
    Column("profile_photo", Text, nullable=True),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    UniqueConstraint("provider", "provider_id", name="uq_identities_provider"),
)

# ============================================================================
# SEARCH EVENTS TABLE (append-only)
# ============================================================================
search_events_table = Table(
    "search_events",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column(
        "identity_id",
        UUID,
        ForeignKey("identities.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column("term", Text, nullable=False),  # Normalized: trimmed, lower-case
    Column(
        "timestamp", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    # Recording order; history is read back newest-recorded first
    Column("seq", BigInteger, Identity(always=True), nullable=False),
)

Index(
    "idx_search_events_identity_seq",
    search_events_table.c.identity_id,
    search_events_table.c.seq.desc(),
)
# Hash index: terms are unbounded text and btree rows are capped at ~2.7kB
Index("idx_search_events_term", search_events_table.c.term, postgresql_using="hash")

# ============================================================================
# SESSIONS TABLE
# ============================================================================
sessions_table = Table(
    "sessions",
    metadata,
    Column("id", String(64), primary_key=True),
    Column(
        "identity_id",
        UUID,
        ForeignKey("identities.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column("created_at", TIMESTAMP(timezone=True), nullable=False),
    Column("expires_at", TIMESTAMP(timezone=True), nullable=False),
    Column("last_touched_at", TIMESTAMP(timezone=True), nullable=False),
)

Index("idx_sessions_expires_at", sessions_table.c.expires_at)
