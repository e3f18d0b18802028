from sqlalchemy.ext.asyncio import AsyncSession

from shared.exceptions import NotFound

from .repository import AttributeRepository


class AttributeService:

    @staticmethod
    async def list_attributes(db: AsyncSession):
        return await AttributeRepository.get_all(db)

    @staticmethod
    async def get_attribute(db: AsyncSession, attribute_id: int):
        attribute = await AttributeRepository.get_by_id(db, attribute_id)
        if not attribute:
            raise NotFound(f"Attribute with id {attribute_id} does not exist")
        return attribute

    @staticmethod
    async def list_attribute_values(db: AsyncSession, attribute_id: int):
        await AttributeService.get_attribute(db, attribute_id)
        return await AttributeRepository.get_values(db, attribute_id)

    @staticmethod
    async def list_product_attributes(db: AsyncSession, product_id: int):
        rows = await AttributeRepository.get_product_attributes(db, product_id)
        return [
            {
                "attribute_name": name,
                "attribute_value_id": attribute_value_id,
                "attribute_value": value,
            }
            for name, attribute_value_id, value in rows
        ]
