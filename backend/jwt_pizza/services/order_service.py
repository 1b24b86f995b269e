"""Order Service — public menu, admin menu edits, and a diner's own orders."""

import logging

from jwt_pizza.core.authorization import can_manage_menu
from jwt_pizza.core.claims import Claims
from jwt_pizza.core.errors import ErrorContext, ForbiddenError
from jwt_pizza.schemas.order import (
    FulfillmentOut, FulfillmentReceipt, MenuItemCreate, MenuItemOut,
    OrderCreate, OrderOut, OrdersPage,
)
from jwt_pizza.store.order_store import OrderStore

logger = logging.getLogger(__name__)


class OrderService:
    def __init__(self, orders: OrderStore):
        self._orders = orders

    async def get_menu(self) -> list[MenuItemOut]:
        return await self._orders.get_menu()

    async def add_menu_item(self, claims: Claims, item: MenuItemCreate) -> list[MenuItemOut]:
        """Append to the menu and return the whole menu."""
        if not can_manage_menu(claims):
            logger.warning("Menu change denied", extra={"user_id": claims.id})
            raise ForbiddenError("unable to add menu item", ErrorContext(user_id=claims.id))
        await self._orders.add_menu_item(item)
        return await self._orders.get_menu()

    async def get_orders(self, claims: Claims, page: int = 1) -> OrdersPage:
        return await self._orders.get_orders(claims.id, page)

    async def create_order(self, claims: Claims, order: OrderCreate) -> OrderOut:
        return await self._orders.add_diner_order(claims.id, order)

    async def record_fulfillment(
        self, claims: Claims, order_id: int, receipt: FulfillmentReceipt,
    ) -> FulfillmentOut:
        return await self._orders.record_fulfillment(claims.id, order_id, receipt)

    async def get_fulfillment(self, claims: Claims, order_id: int) -> FulfillmentOut:
        return await self._orders.get_fulfillment(claims.id, order_id)
