from sqlalchemy import Column, DateTime, ForeignKey, Integer, SmallInteger, Text, UniqueConstraint
from sqlalchemy.sql import func
from shared.config.database import Base


class Review(Base):
    __tablename__ = "review"
    __table_args__ = (
        UniqueConstraint("customer_id", "product_id", name="uq_review_customer_product"),
    )

    review_id = Column(Integer, primary_key=True, index=True)
    customer_id = Column(Integer, ForeignKey("customer.customer_id"), nullable=False, index=True)
    product_id = Column(Integer, ForeignKey("product.product_id"), nullable=False, index=True)
    review = Column(Text, nullable=False)
    rating = Column(SmallInteger, nullable=False)
    created_on = Column(DateTime(timezone=True), nullable=False, server_default=func.now())
