"""Domain Types — identifier wrappers, the zero scope sentinel, and role names."""

from jwt_pizza.core.domain_types import (
    FranchiseId, MenuId, NO_OBJECT, OrderId, Role, StoreId, UserId,
)


def test_identity_types_wrap_int():
    assert UserId(3) == 3
    assert FranchiseId(4) == 4
    assert StoreId(5) == 5
    assert MenuId(6) == 6
    assert OrderId(7) == 7


def test_zero_is_the_unscoped_sentinel():
    assert NO_OBJECT == 0


def test_role_has_three_members():
    assert set(Role) == {Role.DINER, Role.FRANCHISEE, Role.ADMIN}


def test_role_serializes_to_storage_string():
    assert Role.FRANCHISEE.value == "franchisee"
    assert Role("admin") is Role.ADMIN
