from typing import Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from .models import Attribute, AttributeValue, ProductAttribute


class AttributeRepository:

    @staticmethod
    async def get_all(db: AsyncSession):
        result = await db.execute(select(Attribute).order_by(Attribute.attribute_id))
        return result.scalars().all()

    @staticmethod
    async def get_by_id(db: AsyncSession, attribute_id: int) -> Optional[Attribute]:
        result = await db.execute(select(Attribute).where(Attribute.attribute_id == attribute_id))
        return result.scalars().first()

    @staticmethod
    async def get_values(db: AsyncSession, attribute_id: int):
        result = await db.execute(
            select(AttributeValue)
            .where(AttributeValue.attribute_id == attribute_id)
            .order_by(AttributeValue.attribute_value_id)
        )
        return result.scalars().all()

    @staticmethod
    async def get_product_attributes(db: AsyncSession, product_id: int):
        """(attribute name, value id, value) rows for every value attached to the product."""
        result = await db.execute(
            select(Attribute.name, AttributeValue.attribute_value_id, AttributeValue.value)
            .join(AttributeValue, AttributeValue.attribute_id == Attribute.attribute_id)
            .join(ProductAttribute, ProductAttribute.attribute_value_id == AttributeValue.attribute_value_id)
            .where(ProductAttribute.product_id == product_id)
            .order_by(Attribute.attribute_id, AttributeValue.attribute_value_id)
        )
        return result.all()
