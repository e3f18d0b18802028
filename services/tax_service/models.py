from sqlalchemy import Column, Integer, String
from shared.config.database import Base
from services.product_service.models import Money


class Tax(Base):
    __tablename__ = "tax"

    tax_id = Column(Integer, primary_key=True, index=True)
    tax_type = Column(String(100), nullable=False)
    tax_percentage = Column(Money, nullable=False)
