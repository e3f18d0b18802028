from sqlalchemy import Column, ForeignKey, Integer, String

from shared.config.database import Base


class Customer(Base):
    __tablename__ = "customer"

    customer_id = Column(Integer, primary_key=True, index=True)
    name = Column(String(50), nullable=False)
    email = Column(String(100), unique=True, nullable=False, index=True)
    password = Column(String(100), nullable=False)  # bcrypt hash
    credit_card = Column(String(100), nullable=True)
    address_1 = Column(String(100), nullable=True)
    address_2 = Column(String(100), nullable=True)
    city = Column(String(100), nullable=True)
    region = Column(String(100), nullable=True)
    postal_code = Column(String(100), nullable=True)
    country = Column(String(100), nullable=True)
    shipping_region_id = Column(
        Integer, ForeignKey("shipping_region.shipping_region_id"), nullable=False, default=1
    )
    day_phone = Column(String(100), nullable=True)
    eve_phone = Column(String(100), nullable=True)
    mob_phone = Column(String(100), nullable=True)
