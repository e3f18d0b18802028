from sqlalchemy import Column, ForeignKey, Integer, Numeric, SmallInteger, String, Text
from shared.config.database import Base

# Money columns are NUMERIC(10, 2) in the schema; surfaced to Python as floats.
Money = Numeric(10, 2, asdecimal=False)


class Department(Base):
    __tablename__ = "department"

    department_id = Column(Integer, primary_key=True, index=True)
    name = Column(String(100), nullable=False)
    description = Column(String(1000), nullable=True)


class Category(Base):
    __tablename__ = "category"

    category_id = Column(Integer, primary_key=True, index=True)
    department_id = Column(Integer, ForeignKey("department.department_id"), nullable=False, index=True)
    name = Column(String(100), nullable=False)
    description = Column(String(1000), nullable=True)


class Product(Base):
    __tablename__ = "product"

    product_id = Column(Integer, primary_key=True, index=True)
    name = Column(String(100), nullable=False)
    description = Column(Text, nullable=False, default="")
    price = Column(Money, nullable=False)
    discounted_price = Column(Money, nullable=False, default=0)
    image = Column(String(150), nullable=True)
    image_2 = Column(String(150), nullable=True)
    thumbnail = Column(String(150), nullable=True)
    display = Column(SmallInteger, nullable=False, default=0)

    @property
    def unit_price(self) -> float:
        """Price a customer pays right now: the discount when one is set."""
        if self.discounted_price and self.discounted_price > 0:
            return float(self.discounted_price)
        return float(self.price)


class ProductCategory(Base):
    __tablename__ = "product_category"

    product_id = Column(Integer, ForeignKey("product.product_id"), primary_key=True)
    category_id = Column(Integer, ForeignKey("category.category_id"), primary_key=True)
