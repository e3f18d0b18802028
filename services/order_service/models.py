import enum

from sqlalchemy import Column, DateTime, ForeignKey, Integer, String
from sqlalchemy.sql import func
from shared.config.database import Base
from services.product_service.models import Money


class OrderStatus(enum.IntEnum):
    """
    Stored in `orders.status`. Checkout writes PLACED; fulfilment tooling that
    advances an order outside this API checks `can_move_to` before writing.
    """

    PLACED = 0
    CONFIRMED = 1
    SHIPPED = 2
    DELIVERED = 3
    CANCELLED = 4

    def can_move_to(self, target: "OrderStatus") -> bool:
        """Statuses only move forward; nothing leaves DELIVERED or CANCELLED."""
        if self in (OrderStatus.DELIVERED, OrderStatus.CANCELLED):
            return False
        return target > self


class Order(Base):
    __tablename__ = "orders"

    order_id = Column(Integer, primary_key=True, index=True)
    total_amount = Column(Money, nullable=False, default=0)
    created_on = Column(DateTime(timezone=True), nullable=False, server_default=func.now())
    shipped_on = Column(DateTime(timezone=True), nullable=True)
    status = Column(Integer, nullable=False, default=OrderStatus.PLACED.value)
    comments = Column(String(255), nullable=True)
    customer_id = Column(Integer, ForeignKey("customer.customer_id"), nullable=False, index=True)
    cart_id = Column(String(50), nullable=True)
    auth_code = Column(String(50), nullable=True)
    reference = Column(String(50), nullable=True)
    shipping_id = Column(Integer, ForeignKey("shipping.shipping_id"), nullable=True)
    tax_id = Column(Integer, ForeignKey("tax.tax_id"), nullable=True)


class OrderDetail(Base):
    """Line snapshot taken at checkout; never joined back to live product prices."""

    __tablename__ = "order_detail"

    item_id = Column(Integer, primary_key=True, index=True)
    order_id = Column(Integer, ForeignKey("orders.order_id"), nullable=False, index=True)
    product_id = Column(Integer, nullable=False)
    attributes = Column(String(1000), nullable=False, default="")
    product_name = Column(String(100), nullable=False)
    quantity = Column(Integer, nullable=False)
    unit_cost = Column(Money, nullable=False)
