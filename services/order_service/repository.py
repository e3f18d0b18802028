from typing import Optional

from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select
from services.customer_service.models import Customer
from .models import Order, OrderDetail


class OrderRepository:
    """
    Writes here only flush; OrderService decides when the checkout
    transaction commits or rolls back.
    """

    @staticmethod
    async def add_order(db: AsyncSession, order: Order) -> Order:
        db.add(order)
        await db.flush()
        return order

    @staticmethod
    async def add_detail(db: AsyncSession, detail: OrderDetail) -> OrderDetail:
        db.add(detail)
        await db.flush()
        return detail

    @staticmethod
    async def get_order(db: AsyncSession, order_id: int) -> Optional[Order]:
        result = await db.execute(select(Order).where(Order.order_id == order_id))
        return result.scalars().first()

    @staticmethod
    async def get_order_with_customer_name(db: AsyncSession, order_id: int):
        result = await db.execute(
            select(Order, Customer.name)
            .join(Customer, Customer.customer_id == Order.customer_id)
            .where(Order.order_id == order_id)
        )
        return result.first()

    @staticmethod
    async def get_customer_orders(db: AsyncSession, customer_id: int):
        result = await db.execute(
            select(Order, Customer.name)
            .join(Customer, Customer.customer_id == Order.customer_id)
            .where(Order.customer_id == customer_id)
            .order_by(Order.order_id)
        )
        return result.all()

    @staticmethod
    async def get_details(db: AsyncSession, order_id: int):
        result = await db.execute(
            select(OrderDetail).where(OrderDetail.order_id == order_id).order_by(OrderDetail.item_id)
        )
        return result.scalars().all()
