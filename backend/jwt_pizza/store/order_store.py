"""Order Store — the menu, diner orders with item snapshots, fulfillment receipts.

Invariants:
    - An order and all of its items are written in one transaction; an unknown
      menu title aborts the whole order
    - Item price is the menu price at order time; later menu rows never touch it
    - Order pages count from 1; pages below 1 are served as page 1
"""

import logging

from sqlalchemy import select

from jwt_pizza.core.domain_types import MenuId, OrderId, UserId
from jwt_pizza.core.errors import NotFoundError
from jwt_pizza.core.pagination import page_offset
from jwt_pizza.infrastructure.database import DatabaseSessionManager
from jwt_pizza.models.menu import MenuItem
from jwt_pizza.models.order import DinerOrder, OrderFulfillment, OrderItem
from jwt_pizza.schemas.order import (
    FulfillmentOut, FulfillmentReceipt, MenuItemCreate, MenuItemOut,
    OrderCreate, OrderItemOut, OrderOut, OrdersPage,
)
from jwt_pizza.store.lookup import get_id

logger = logging.getLogger(__name__)


def _menu_item_out(row: MenuItem) -> MenuItemOut:
    return MenuItemOut(
        id=row.id, title=row.title, description=row.description,
        image=row.image, price=row.price,
    )


def _order_out(row: DinerOrder, items: list[OrderItem]) -> OrderOut:
    return OrderOut(
        id=row.id,
        franchise_id=row.franchise_id,
        store_id=row.store_id,
        date=row.date,
        items=[
            OrderItemOut(id=i.id, menu_id=i.menu_id, description=i.description, price=i.price)
            for i in items
        ],
    )


def _fulfillment_out(row: OrderFulfillment) -> FulfillmentOut:
    return FulfillmentOut(
        order_id=row.order_id, jwt=row.receipt,
        report_url=row.report_url, recorded_at=row.recorded_at,
    )


class OrderStore:
    def __init__(self, db: DatabaseSessionManager, list_per_page: int = 10):
        self._db = db
        self._page_size = list_per_page

    async def get_menu(self) -> list[MenuItemOut]:
        async with self._db.session() as db:
            rows = (await db.scalars(select(MenuItem).order_by(MenuItem.id))).all()
        return [_menu_item_out(r) for r in rows]

    async def add_menu_item(self, item: MenuItemCreate) -> MenuItemOut:
        async with self._db.session() as db:
            row = MenuItem(
                title=item.title, description=item.description,
                image=item.image, price=item.price,
            )
            db.add(row)
            await db.commit()
        logger.info(f"Menu item added: {item.title}")
        return _menu_item_out(row)

    async def get_orders(self, diner_id: UserId, page: int = 1) -> OrdersPage:
        page = max(page or 1, 1)
        async with self._db.session() as db:
            rows = (await db.scalars(
                select(DinerOrder)
                .where(DinerOrder.diner_id == diner_id)
                .order_by(DinerOrder.id)
                .offset(page_offset(page, self._page_size))
                .limit(self._page_size),
            )).all()
        return OrdersPage(
            diner_id=diner_id,
            orders=[_order_out(r, r.items) for r in rows],
            page=page,
        )

    async def add_diner_order(self, diner_id: UserId, order: OrderCreate) -> OrderOut:
        async with self._db.transaction("unable to create order") as db:
            row = DinerOrder(
                diner_id=diner_id,
                franchise_id=order.franchise_id,
                store_id=order.store_id,
            )
            db.add(row)
            await db.flush()
            items: list[OrderItem] = []
            for item in order.items:
                menu_id = MenuId(await get_id(db, "title", item.description, MenuItem))
                menu = await db.get(MenuItem, menu_id)
                snapshot = OrderItem(
                    order_id=row.id,
                    menu_id=menu_id,
                    description=item.description,
                    price=menu.price,
                )
                db.add(snapshot)
                items.append(snapshot)
            await db.flush()
        logger.info(
            f"Order placed with {len(items)} item(s)",
            extra={"user_id": diner_id, "order_id": row.id, "store_id": order.store_id},
        )
        return _order_out(row, items)

    async def record_fulfillment(
        self, diner_id: UserId, order_id: OrderId, receipt: FulfillmentReceipt,
    ) -> FulfillmentOut:
        async with self._db.session() as db:
            owner = await db.scalar(
                select(DinerOrder.diner_id).where(DinerOrder.id == order_id),
            )
            if owner is None or owner != diner_id:
                raise NotFoundError("unknown order", resource_type="order")
            row = OrderFulfillment(
                order_id=order_id, receipt=receipt.jwt, report_url=receipt.report_url,
            )
            db.add(row)
            await db.commit()
        logger.info("Fulfillment recorded", extra={"user_id": diner_id, "order_id": order_id})
        return _fulfillment_out(row)

    async def get_fulfillment(self, diner_id: UserId, order_id: OrderId) -> FulfillmentOut:
        async with self._db.session() as db:
            row = await db.scalar(
                select(OrderFulfillment)
                .join(DinerOrder, DinerOrder.id == OrderFulfillment.order_id)
                .where(OrderFulfillment.order_id == order_id, DinerOrder.diner_id == diner_id),
            )
        if row is None:
            raise NotFoundError("unknown fulfillment", resource_type="order")
        return _fulfillment_out(row)
