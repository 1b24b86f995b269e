"""Franchise Schemas — franchise creation, store creation, and listing shapes.

Invariants:
    - FranchiseOut.admins is None (omitted) for viewers who are not admins
    - StoreOut.total_revenue is None (omitted) outside the admin/owner enrichment
"""

from decimal import Decimal

from pydantic import Field

from jwt_pizza.schemas.base import CamelModel


class AdminRef(CamelModel):
    email: str = Field(min_length=3, max_length=255)


class FranchiseCreate(CamelModel):
    name: str = Field(min_length=1, max_length=255)
    admins: list[AdminRef] = []


class StoreCreate(CamelModel):
    name: str = Field(min_length=1, max_length=255)


class FranchiseAdminOut(CamelModel):
    id: int
    name: str
    email: str


class StoreOut(CamelModel):
    id: int
    name: str
    franchise_id: int | None = None
    total_revenue: Decimal | None = None


class FranchiseOut(CamelModel):
    id: int
    name: str
    admins: list[FranchiseAdminOut] | None = None
    stores: list[StoreOut] = []


class FranchisePage(CamelModel):
    franchises: list[FranchiseOut]
    more: bool
