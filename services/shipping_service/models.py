from sqlalchemy import Column, ForeignKey, Integer, String
from shared.config.database import Base
from services.product_service.models import Money


class ShippingRegion(Base):
    __tablename__ = "shipping_region"

    shipping_region_id = Column(Integer, primary_key=True, index=True)
    shipping_region = Column(String(100), nullable=False)


class Shipping(Base):
    __tablename__ = "shipping"

    shipping_id = Column(Integer, primary_key=True, index=True)
    shipping_type = Column(String(100), nullable=False)
    shipping_cost = Column(Money, nullable=False)
    shipping_region_id = Column(
        Integer, ForeignKey("shipping_region.shipping_region_id"), nullable=False, index=True
    )
