"""Authorization Policy — pure decisions over (acting user, target resource).

Invariants:
    - All functions are PURE: no IO, no async, no DB, no shared mutable state
    - Return bool; callers decide whether a denial is ForbiddenError or an empty result
    - Admin passes every check

Design Decisions:
    - Pure functions over method dispatch: testable without mocks, safe to call concurrently
    - can_view_franchise_set denial is turned into an empty list by the caller,
      unlike every other check which becomes ForbiddenError
"""

from typing import Protocol

from jwt_pizza.core.claims import Claims
from jwt_pizza.core.domain_types import Role


class FranchiseLike(Protocol):
    id: int


def _is_admin(actor: Claims) -> bool:
    return actor.has_role(Role.ADMIN)


def can_modify_user(actor: Claims, target_user_id: int) -> bool:
    return actor.id == target_user_id or _is_admin(actor)


def can_manage_menu(actor: Claims) -> bool:
    return _is_admin(actor)


def can_manage_franchises(actor: Claims) -> bool:
    """Creating and deleting whole franchises is reserved to admins."""
    return _is_admin(actor)


def can_view_franchise_set(actor: Claims, target_user_id: int) -> bool:
    return actor.id == target_user_id or _is_admin(actor)


def can_manage_store(actor: Claims, franchise: FranchiseLike) -> bool:
    """Admins, or a franchisee bound to this franchise."""
    return _is_admin(actor) or franchise.id in actor.franchise_ids()
