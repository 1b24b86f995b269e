"""User Schemas — registration, profile update, and the outward user shape.

Invariants:
    - UserOut never carries a password field
    - UserUpdate is partial: omitted fields are left untouched
    - RoleRequest for a franchisee names its franchise by id or by name

Design Decisions:
    - camelCase aliases on the wire (objectId), snake_case attributes in Python
"""

from pydantic import Field, field_validator, model_validator

from jwt_pizza.core.claims import RoleBinding
from jwt_pizza.core.domain_types import Role
from jwt_pizza.schemas.base import CamelModel


class RoleRequest(CamelModel):
    """Role to attach at user creation."""
    role: Role
    object_id: int | None = Field(None, gt=0)
    object: str | None = Field(None, min_length=1, max_length=255)

    @model_validator(mode="after")
    def franchisee_needs_scope(self):
        if self.role == Role.FRANCHISEE and self.object_id is None and not self.object:
            raise ValueError("franchisee role requires a franchise id or name")
        return self


class UserCreate(CamelModel):
    name: str = Field(min_length=1, max_length=255)
    email: str = Field(min_length=3, max_length=255)
    password: str = Field(min_length=1, max_length=72)

    @field_validator("name", "email")
    @classmethod
    def strip_text(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("cannot be empty or whitespace")
        return v


class UserUpdate(CamelModel):
    name: str | None = Field(None, min_length=1, max_length=255)
    email: str | None = Field(None, min_length=3, max_length=255)
    password: str | None = Field(None, min_length=1, max_length=72)


class UserOut(CamelModel):
    id: int
    name: str
    email: str
    roles: list[RoleBinding] = []


class AuthResult(CamelModel):
    """A user plus the credential issued for them."""
    user: UserOut
    token: str
