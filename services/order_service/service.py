"""
Checkout and order history.

`create_order` is the only multi-row write in the application: the order
header and its detail rows are written and the cart lines removed in one
database transaction, or not at all.
"""
from datetime import datetime, timezone

import structlog
from sqlalchemy.ext.asyncio import AsyncSession

from shared.exceptions import NotFound, ValidationError
from shared.observability import ecomm_checkout_duration_seconds, ecomm_checkout_total
from services.cart_service.repository import CartRepository
from services.shipping_service.repository import ShippingRepository
from services.tax_service.repository import TaxRepository

from .models import Order, OrderDetail, OrderStatus
from .repository import OrderRepository
from .schemas import OrderCreate

logger = structlog.get_logger(__name__)


def compute_totals(details, tax_percentage: float, shipping_cost: float) -> dict:
    subtotal = round(sum(d.quantity * d.unit_cost for d in details), 2)
    tax = round(subtotal * float(tax_percentage) / 100, 2)
    return {
        "subtotal": subtotal,
        "tax": tax,
        "shipping": float(shipping_cost),
        "total_amount": round(subtotal + tax + float(shipping_cost), 2),
    }


def _short_detail(order: Order, name: str) -> dict:
    return {
        "order_id": order.order_id,
        "total_amount": order.total_amount,
        "created_on": order.created_on,
        "shipped_on": order.shipped_on,
        "status": order.status,
        "name": name,
    }


class OrderService:

    @staticmethod
    async def create_order(db: AsyncSession, customer_id: int, data: OrderCreate) -> int:
        with ecomm_checkout_duration_seconds.time():
            try:
                order_id = await OrderService._checkout(db, customer_id, data)
            except Exception:
                await db.rollback()
                ecomm_checkout_total.labels(status="failed").inc()
                logger.warning("checkout_failed", cart_id=data.cart_id, customer_id=customer_id)
                raise

        ecomm_checkout_total.labels(status="success").inc()
        return order_id

    @staticmethod
    async def _checkout(db: AsyncSession, customer_id: int, data: OrderCreate) -> int:
        lines = await CartRepository.get_cart_lines(db, data.cart_id, lock=True)
        if not lines:
            raise ValidationError("Cannot create an order from an empty cart")

        tax = await TaxRepository.get_by_id(db, data.tax_id)
        if not tax:
            raise ValidationError(f"Tax with id {data.tax_id} does not exist")
        shipping = await ShippingRepository.get_by_id(db, data.shipping_id)
        if not shipping:
            raise ValidationError(f"Shipping with id {data.shipping_id} does not exist")

        # Prices are copied now so later catalog changes never touch this order.
        details = [
            OrderDetail(
                product_id=item.product_id,
                attributes=item.attributes,
                product_name=product.name,
                quantity=item.quantity,
                unit_cost=product.unit_price,
            )
            for item, product in lines
        ]
        totals = compute_totals(details, tax.tax_percentage, shipping.shipping_cost)

        order = await OrderRepository.add_order(
            db,
            Order(
                customer_id=customer_id,
                cart_id=data.cart_id,
                shipping_id=shipping.shipping_id,
                tax_id=tax.tax_id,
                total_amount=totals["total_amount"],
                status=OrderStatus.PLACED.value,
                created_on=datetime.now(timezone.utc),
            ),
        )
        for detail in details:
            detail.order_id = order.order_id
            await OrderRepository.add_detail(db, detail)

        await CartRepository.delete_cart_lines(db, data.cart_id)
        await db.commit()

        logger.info(
            "order_created",
            order_id=order.order_id,
            customer_id=customer_id,
            cart_id=data.cart_id,
            lines=len(details),
            **totals,
        )
        return order.order_id

    @staticmethod
    async def list_customer_orders(db: AsyncSession, customer_id: int):
        rows = await OrderRepository.get_customer_orders(db, customer_id)
        return [_short_detail(order, name) for order, name in rows]

    @staticmethod
    async def _get_owned_order(db: AsyncSession, customer_id: int, order_id: int):
        row = await OrderRepository.get_order_with_customer_name(db, order_id)
        # Another customer's order is reported exactly like a missing one.
        if not row or row[0].customer_id != customer_id:
            raise NotFound(f"Order with id {order_id} does not exist")
        return row

    @staticmethod
    async def get_order_short_detail(db: AsyncSession, customer_id: int, order_id: int) -> dict:
        order, name = await OrderService._get_owned_order(db, customer_id, order_id)
        return _short_detail(order, name)

    @staticmethod
    async def get_order_summary(db: AsyncSession, customer_id: int, order_id: int) -> dict:
        order, _ = await OrderService._get_owned_order(db, customer_id, order_id)
        details = await OrderRepository.get_details(db, order_id)
        return {
            "order_id": order.order_id,
            "total_amount": order.total_amount,
            "status": order.status,
            "created_on": order.created_on,
            "shipped_on": order.shipped_on,
            "tax_id": order.tax_id,
            "shipping_id": order.shipping_id,
            "order_items": [
                {
                    "item_id": d.item_id,
                    "product_id": d.product_id,
                    "attributes": d.attributes,
                    "product_name": d.product_name,
                    "quantity": d.quantity,
                    "unit_cost": d.unit_cost,
                    "subtotal": round(d.quantity * d.unit_cost, 2),
                }
                for d in details
            ],
        }
