"""Domain Types — rich types that replace bare primitives across the codebase.

Invariants:
    - Identifiers are opaque positive integers assigned by storage at creation
    - Role is the only source of role names — no raw string matching elsewhere
    - NO_OBJECT (0) is the object_id stored for roles that are not scoped

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - str Enums: serialize to JSON and compare equal to their stored strings
"""

from enum import Enum
from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

UserId = NewType("UserId", int)
FranchiseId = NewType("FranchiseId", int)
StoreId = NewType("StoreId", int)
MenuId = NewType("MenuId", int)
OrderId = NewType("OrderId", int)


# ─── Constants ───────────────────────────────────────────────────

NO_OBJECT = 0


# ─── Enums ───────────────────────────────────────────────────────

class Role(str, Enum):
    """Actor roles — maps to the user_roles.role column."""
    DINER = "diner"
    FRANCHISEE = "franchisee"
    ADMIN = "admin"
