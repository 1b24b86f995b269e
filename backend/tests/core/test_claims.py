"""Role Bindings and Claims — the tagged role variant is enforced at decode.

Tests:
    - Storage rows become bindings; the zero object_id is dropped
    - Franchisee bindings require a positive objectId
    - Unknown roles are rejected
    - Claims wire shape uses objectId
"""

import pytest
from pydantic import ValidationError

from jwt_pizza.core.claims import (
    AdminRole, Claims, DinerRole, FranchiseeRole, binding_from_row, object_id_of,
)
from jwt_pizza.core.domain_types import NO_OBJECT, Role


def test_diner_row_drops_zero_object_id():
    binding = binding_from_row("diner", NO_OBJECT)
    assert binding == DinerRole()


def test_franchisee_row_keeps_object_id():
    binding = binding_from_row("franchisee", 7)
    assert isinstance(binding, FranchiseeRole)
    assert binding.object_id == 7


def test_franchisee_row_without_scope_rejected():
    with pytest.raises(ValidationError):
        binding_from_row("franchisee", 0)


def test_unknown_role_rejected():
    with pytest.raises(ValidationError):
        binding_from_row("owner", 0)


def test_object_id_of_round_trips_storage_value():
    assert object_id_of(AdminRole()) == NO_OBJECT
    assert object_id_of(FranchiseeRole(object_id=3)) == 3


def test_claims_decode_from_wire_payload():
    claims = Claims.model_validate({
        "id": 4, "name": "pizza franchisee", "email": "f@jwt.com",
        "roles": [{"role": "diner"}, {"role": "franchisee", "objectId": 9}],
        "iat": 1700000000,
    })
    assert claims.has_role(Role.FRANCHISEE)
    assert not claims.has_role(Role.ADMIN)
    assert claims.franchise_ids() == {9}


def test_claims_wire_shape_uses_object_id_alias():
    claims = Claims(id=1, name="a", email="a@jwt.com", roles=(FranchiseeRole(object_id=2),))
    dumped = claims.model_dump(mode="json", by_alias=True)
    assert dumped["roles"] == [{"role": "franchisee", "objectId": 2}]


def test_claims_are_immutable():
    claims = Claims(id=1, name="a", email="a@jwt.com")
    with pytest.raises(ValidationError):
        claims.id = 2
