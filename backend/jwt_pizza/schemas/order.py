"""Order Schemas — menu items, orders with item snapshots, fulfillment receipts.

Invariants:
    - Menu prices are small positive decimals
    - OrderItemIn.description names the menu item (its title) at order time
    - OrdersPage.page is the page actually served (floored to 1)
"""

from datetime import datetime
from decimal import Decimal

from pydantic import Field

from jwt_pizza.schemas.base import CamelModel


class MenuItemCreate(CamelModel):
    title: str = Field(min_length=1, max_length=64)
    description: str = Field(min_length=1, max_length=255)
    image: str = Field(min_length=1, max_length=1024)
    price: Decimal = Field(gt=0, max_digits=10, decimal_places=8)


class MenuItemOut(CamelModel):
    id: int
    title: str
    description: str
    image: str
    price: Decimal


class OrderItemIn(CamelModel):
    """One requested item, named by its menu title in description.

    menu_id and price are accepted for wire compatibility but not trusted:
    the stored item takes its menu id and price from the menu row for the title.
    """
    menu_id: int | None = None
    description: str = Field(min_length=1, max_length=255)
    price: Decimal | None = None


class OrderCreate(CamelModel):
    franchise_id: int = Field(gt=0)
    store_id: int = Field(gt=0)
    items: list[OrderItemIn] = []


class OrderItemOut(CamelModel):
    id: int
    menu_id: int
    description: str
    price: Decimal


class OrderOut(CamelModel):
    id: int
    franchise_id: int
    store_id: int
    date: datetime
    items: list[OrderItemOut] = []


class OrdersPage(CamelModel):
    diner_id: int
    orders: list[OrderOut]
    page: int


class FulfillmentReceipt(CamelModel):
    """Acknowledgment returned by the fulfillment service for one order."""
    jwt: str = Field(min_length=1)
    report_url: str | None = Field(None, max_length=1024)


class FulfillmentOut(CamelModel):
    order_id: int
    jwt: str
    report_url: str | None = None
    recorded_at: datetime
