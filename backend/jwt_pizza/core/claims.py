"""Role Bindings and Claims — the tagged role variant and the decoded identity of a caller.

Invariants:
    - A role binding is exactly one of DinerRole | FranchiseeRole | AdminRole,
      discriminated by the "role" key; anything else fails validation
    - FranchiseeRole always carries a positive object_id (the owned franchise)
    - Claims are immutable once decoded

Design Decisions:
    - Pydantic discriminated union: the same model validates rows read from storage
      and payloads decoded from a token, so the shape is enforced at every decode
    - Wire key for the scope is "objectId" (alias), Python attribute is object_id
"""

from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter

from jwt_pizza.core.domain_types import NO_OBJECT, Role


class DinerRole(BaseModel):
    model_config = ConfigDict(frozen=True)
    role: Literal["diner"] = "diner"


class FranchiseeRole(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)
    role: Literal["franchisee"] = "franchisee"
    object_id: int = Field(alias="objectId", gt=0)


class AdminRole(BaseModel):
    model_config = ConfigDict(frozen=True)
    role: Literal["admin"] = "admin"


RoleBinding = Annotated[
    Union[DinerRole, FranchiseeRole, AdminRole],
    Field(discriminator="role"),
]

_binding_adapter: TypeAdapter[RoleBinding] = TypeAdapter(RoleBinding)


def binding_from_row(role: str, object_id: int | None) -> RoleBinding:
    """Build a role binding from a user_roles row; the zero sentinel is dropped."""
    data: dict = {"role": role}
    if object_id and object_id != NO_OBJECT:
        data["objectId"] = object_id
    return _binding_adapter.validate_python(data)


def object_id_of(binding: RoleBinding) -> int:
    """Storage value of a binding's scope."""
    if isinstance(binding, FranchiseeRole):
        return binding.object_id
    return NO_OBJECT


class Claims(BaseModel):
    """Identity decoded from a session credential."""
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: int
    name: str
    email: str
    roles: tuple[RoleBinding, ...] = ()

    def has_role(self, role: Role) -> bool:
        return any(b.role == role.value for b in self.roles)

    def franchise_ids(self) -> set[int]:
        """Ids of every franchise this actor holds a franchisee binding for."""
        return {b.object_id for b in self.roles if isinstance(b, FranchiseeRole)}
