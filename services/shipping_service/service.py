from sqlalchemy.ext.asyncio import AsyncSession

from shared.exceptions import NotFound

from .repository import ShippingRepository


class ShippingService:

    @staticmethod
    async def list_regions(db: AsyncSession):
        return await ShippingRepository.get_regions(db)

    @staticmethod
    async def list_region_shippings(db: AsyncSession, shipping_region_id: int):
        region = await ShippingRepository.get_region(db, shipping_region_id)
        if not region:
            raise NotFound(f"Shipping region with id {shipping_region_id} does not exist")
        return await ShippingRepository.get_for_region(db, shipping_region_id)
