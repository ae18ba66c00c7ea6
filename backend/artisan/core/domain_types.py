"""Domain Types: rich types that replace bare primitives across the codebase.

Invariants:
    - Record ids are UUIDs; parse_id maps anything unparseable to None
    - All valid categories encoded as an Enum, no raw string matching

Design Decisions:
    - str Enums: serialize to JSON without custom encoders
"""

from enum import Enum
from uuid import UUID


# ─── Enums ───────────────────────────────────────────────────────

class ItemCategory(str, Enum):
    """The three product lines an item can belong to."""
    EARRINGS = "earrings"
    BRACELETS = "bracelets"
    NECKLACES = "necklaces"


def parse_id(raw: object) -> UUID | None:
    """Parse an opaque id. Returns None when it cannot name any record."""
    if isinstance(raw, UUID):
        return raw
    try:
        return UUID(str(raw))
    except (ValueError, TypeError):
        return None
