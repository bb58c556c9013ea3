"""Strongly typed identifiers for Lens domain entities."""

from typing import NewType
from uuid import UUID

IdentityId = NewType("IdentityId", UUID)
SearchEventId = NewType("SearchEventId", UUID)
