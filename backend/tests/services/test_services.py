"""Boundary services — authentication flow and policy-gated operations end to end.

Invariants:
    - register -> login -> authenticate -> logout -> authenticate fails
    - Denials are ForbiddenError with the caller-facing message, except the
      franchise-set view, which yields []
"""

import pytest
from jose import jwt

from jwt_pizza.core.errors import ForbiddenError, NotFoundError, UnauthorizedError
from jwt_pizza.core.domain_types import Role
from jwt_pizza.schemas.franchise import AdminRef, FranchiseCreate, StoreCreate
from jwt_pizza.schemas.order import FulfillmentReceipt, MenuItemCreate, OrderCreate, OrderItemIn
from jwt_pizza.schemas.user import UserCreate, UserUpdate


@pytest.fixture
async def franchisee(backend, as_claims):
    """A registered diner who becomes the admin of franchise pizzaPocket."""
    registered = await backend.auth.register(
        UserCreate(name="pizza franchisee", email="f@jwt.com", password="franchisee"),
    )
    franchise = await backend.franchises.create_franchise("pizzaPocket", ["f@jwt.com"])
    user = await backend.users.get_user("f@jwt.com")
    return as_claims(user), franchise, registered


# ─── AuthService ─────────────────────────────────────────────────

async def test_register_login_logout_cycle(backend):
    registered = await backend.auth.register(
        UserCreate(name="pizza diner", email="d@jwt.com", password="diner"),
    )
    assert registered.user.roles[0].role == "diner"

    logged_in = await backend.auth.login("d@jwt.com", "diner")
    assert await backend.sessions.is_active(logged_in.token)
    claims = await backend.auth.authenticate(logged_in.token)
    assert claims.id == registered.user.id
    assert claims.email == "d@jwt.com"

    await backend.auth.logout(logged_in.token)
    assert not await backend.sessions.is_active(logged_in.token)
    with pytest.raises(UnauthorizedError):
        await backend.auth.authenticate(logged_in.token)


async def test_logout_of_one_login_keeps_the_other_active(backend):
    first = await backend.auth.login("a@jwt.com", "admin")
    second = await backend.auth.login("a@jwt.com", "admin")
    assert first.token != second.token

    await backend.auth.logout(first.token)

    assert not await backend.sessions.is_active(first.token)
    assert await backend.sessions.is_active(second.token)
    assert (await backend.auth.authenticate(second.token)).email == "a@jwt.com"


async def test_bearer_header_feeds_authenticate(backend):
    result = await backend.auth.login("a@jwt.com", "admin")
    credential = backend.auth.read_bearer(f"Bearer {result.token}")
    claims = await backend.auth.authenticate(credential)
    assert claims.has_role(Role.ADMIN)


async def test_missing_credential_is_unauthorized(backend):
    with pytest.raises(UnauthorizedError):
        await backend.auth.authenticate(None)
    with pytest.raises(UnauthorizedError):
        await backend.auth.logout(None)


async def test_login_with_wrong_password_is_not_found(backend):
    with pytest.raises(NotFoundError, match="unknown user"):
        await backend.auth.login("a@jwt.com", "wrong")


async def test_registered_but_foreign_signed_credential_is_unauthorized(backend, admin):
    forged = jwt.encode(
        {"id": admin.id, "name": "x", "email": "a@jwt.com", "roles": [{"role": "admin"}]},
        "some-other-secret", algorithm="HS256",
    )
    await backend.sessions.register(admin.id, forged)
    with pytest.raises(UnauthorizedError):
        await backend.auth.authenticate(forged)


# ─── UserService ─────────────────────────────────────────────────

async def test_update_self_returns_fresh_active_token(backend, diner):
    result = await backend.user_service.update_user(diner, diner.id, UserUpdate(name="new name"))
    assert result.user.name == "new name"
    claims = await backend.auth.authenticate(result.token)
    assert claims.name == "new name"


async def test_update_other_user_is_forbidden(backend, diner, admin):
    with pytest.raises(ForbiddenError, match="unauthorized"):
        await backend.user_service.update_user(diner, admin.id, UserUpdate(name="hijack"))
    assert (await backend.users.get_user("a@jwt.com")).name == "pizza admin"


async def test_admin_updates_anyone(backend, diner, admin):
    result = await backend.user_service.update_user(admin, diner.id, UserUpdate(email="d2@jwt.com"))
    assert result.user.email == "d2@jwt.com"


async def test_me_returns_claims(backend, diner):
    assert backend.user_service.me(diner) is diner


# ─── FranchiseService ────────────────────────────────────────────

async def test_admin_creates_franchise_with_existing_admin(backend, admin, diner):
    created = await backend.franchise_service.create_franchise(
        admin, FranchiseCreate(name="pizzaPocket", admins=[AdminRef(email="d@jwt.com")]),
    )
    assert created.admins[0].id == diner.id


async def test_create_franchise_with_unknown_admin_is_not_found(backend, admin):
    with pytest.raises(NotFoundError):
        await backend.franchise_service.create_franchise(
            admin, FranchiseCreate(name="pizzaPocket", admins=[AdminRef(email="ghost@jwt.com")]),
        )
    page = await backend.franchise_service.list_franchises(admin)
    assert page.franchises == []


async def test_non_admin_cannot_create_or_delete_franchise(backend, diner, franchisee):
    claims, franchise, _ = franchisee
    with pytest.raises(ForbiddenError, match="unable to create a franchise"):
        await backend.franchise_service.create_franchise(diner, FranchiseCreate(name="mine"))
    with pytest.raises(ForbiddenError, match="unable to delete a franchise"):
        await backend.franchise_service.delete_franchise(claims, franchise.id)


async def test_franchisee_manages_own_stores(backend, franchisee):
    claims, franchise, _ = franchisee
    store = await backend.franchise_service.create_store(
        claims, franchise.id, StoreCreate(name="SLC"),
    )
    await backend.franchise_service.delete_store(claims, franchise.id, store.id)
    assert (await backend.franchises.get_franchise(franchise.id)).stores == []


async def test_franchisee_cannot_touch_other_franchise(backend, admin, franchisee):
    claims, _, _ = franchisee
    other = await backend.franchise_service.create_franchise(admin, FranchiseCreate(name="other"))
    with pytest.raises(ForbiddenError, match="unable to create a store"):
        await backend.franchise_service.create_store(claims, other.id, StoreCreate(name="SLC"))
    store = await backend.franchise_service.create_store(admin, other.id, StoreCreate(name="SLC"))
    with pytest.raises(ForbiddenError, match="unable to delete a store"):
        await backend.franchise_service.delete_store(claims, other.id, store.id)


async def test_store_on_unknown_franchise_is_not_found(backend, admin):
    with pytest.raises(NotFoundError):
        await backend.franchise_service.create_store(admin, 9999, StoreCreate(name="SLC"))


async def test_user_franchises_of_someone_else_is_empty(backend, diner, franchisee):
    claims, franchise, _ = franchisee
    assert await backend.franchise_service.list_user_franchises(diner, claims.id) == []
    own = await backend.franchise_service.list_user_franchises(claims, claims.id)
    assert [f.id for f in own] == [franchise.id]


async def test_anonymous_listing_uses_configured_page_size(backend, admin):
    for i in range(11):
        await backend.franchise_service.create_franchise(admin, FranchiseCreate(name=f"pizza{i:02d}"))
    page = await backend.franchise_service.list_franchises(None)
    assert len(page.franchises) == 10
    assert page.more is True
    assert page.to_wire()["more"] is True


async def test_explicit_zero_limit_is_respected(backend, admin):
    await backend.franchise_service.create_franchise(admin, FranchiseCreate(name="pizzaPocket"))
    page = await backend.franchise_service.list_franchises(None, limit=0)
    assert page.franchises == []
    assert page.more is True


# ─── OrderService ────────────────────────────────────────────────

async def test_menu_needs_no_identity(backend, menu):
    assert len(await backend.order_service.get_menu()) == 2


async def test_only_admin_adds_menu_items(backend, admin, diner):
    item = MenuItemCreate(title="Veggie", description="A garden", image="pizza1.png", price="0.5")
    with pytest.raises(ForbiddenError, match="unable to add menu item"):
        await backend.order_service.add_menu_item(diner, item)
    menu = await backend.order_service.add_menu_item(admin, item)
    assert [m.title for m in menu] == ["Veggie"]


async def test_diner_orders_and_reads_back(backend, diner, menu):
    order = await backend.order_service.create_order(diner, OrderCreate(
        franchise_id=1, store_id=1,
        items=[OrderItemIn(description="Veggie"), OrderItemIn(description="Pepperoni")],
    ))
    page = await backend.order_service.get_orders(diner)
    assert [o.id for o in page.orders] == [order.id]

    receipt = FulfillmentReceipt(jwt="factory.signed.receipt")
    await backend.order_service.record_fulfillment(diner, order.id, receipt)
    assert (await backend.order_service.get_fulfillment(diner, order.id)).jwt == receipt.jwt
