"""Authorization Policy — pure decisions over (actor, target).

Tests cover:
    - can_modify_user: self or admin
    - can_manage_menu / can_manage_franchises: admin only
    - can_view_franchise_set: self or admin
    - can_manage_store: admin or franchisee bound to that franchise only
"""

from dataclasses import dataclass

from jwt_pizza.core.authorization import (
    can_manage_franchises,
    can_manage_menu,
    can_manage_store,
    can_modify_user,
    can_view_franchise_set,
)
from jwt_pizza.core.claims import AdminRole, Claims, DinerRole, FranchiseeRole


@dataclass
class _Franchise:
    id: int


def _claims(user_id: int, *roles) -> Claims:
    return Claims(id=user_id, name=f"user {user_id}", email=f"u{user_id}@jwt.com", roles=roles)


DINER = _claims(2, DinerRole())
ADMIN = _claims(1, AdminRole())
OWNER_OF_5 = _claims(3, DinerRole(), FranchiseeRole(object_id=5))


# ─── can_modify_user ─────────────────────────────────────────────

def test_user_may_modify_self():
    assert can_modify_user(DINER, 2)


def test_user_may_not_modify_someone_else():
    assert not can_modify_user(DINER, 3)


def test_admin_may_modify_anyone():
    assert can_modify_user(ADMIN, 42)


# ─── menu and franchise management ───────────────────────────────

def test_only_admin_manages_menu():
    assert can_manage_menu(ADMIN)
    assert not can_manage_menu(DINER)
    assert not can_manage_menu(OWNER_OF_5)


def test_only_admin_manages_franchises():
    assert can_manage_franchises(ADMIN)
    assert not can_manage_franchises(OWNER_OF_5)


# ─── can_view_franchise_set ──────────────────────────────────────

def test_view_own_franchise_set():
    assert can_view_franchise_set(OWNER_OF_5, 3)


def test_view_other_franchise_set_denied_for_non_admin():
    assert not can_view_franchise_set(DINER, 3)


def test_admin_views_any_franchise_set():
    assert can_view_franchise_set(ADMIN, 3)


# ─── can_manage_store ────────────────────────────────────────────

def test_franchisee_manages_own_franchise_stores():
    assert can_manage_store(OWNER_OF_5, _Franchise(id=5))


def test_franchisee_cannot_manage_other_franchise():
    assert not can_manage_store(OWNER_OF_5, _Franchise(id=6))


def test_diner_cannot_manage_store():
    assert not can_manage_store(DINER, _Franchise(id=5))


def test_admin_manages_every_store():
    assert can_manage_store(ADMIN, _Franchise(id=99))


def test_policy_has_no_memory_between_calls():
    """Same inputs, same answer, regardless of what was asked before."""
    first = can_manage_store(OWNER_OF_5, _Franchise(id=5))
    can_manage_store(ADMIN, _Franchise(id=5))
    assert can_manage_store(OWNER_OF_5, _Franchise(id=5)) == first
