from sqlalchemy import Column, DateTime, ForeignKey, Integer, SmallInteger, String, UniqueConstraint
from sqlalchemy.sql import func
from shared.config.database import Base


class ShoppingCart(Base):
    __tablename__ = "shopping_cart"
    # Backs the add-to-cart upsert: one line per product/attribute choice in a cart
    __table_args__ = (
        UniqueConstraint("cart_id", "product_id", "attributes", name="uq_shopping_cart_line"),
    )

    item_id = Column(Integer, primary_key=True, index=True)
    cart_id = Column(String(50), nullable=False, index=True)
    product_id = Column(Integer, ForeignKey("product.product_id"), nullable=False)
    attributes = Column(String(1000), nullable=False, default="")
    quantity = Column(Integer, nullable=False)
    buy_now = Column(SmallInteger, nullable=False, default=1)
    added_on = Column(DateTime(timezone=True), nullable=False, server_default=func.now())
