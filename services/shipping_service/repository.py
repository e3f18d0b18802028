from typing import Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from .models import Shipping, ShippingRegion


class ShippingRepository:

    @staticmethod
    async def get_regions(db: AsyncSession):
        result = await db.execute(select(ShippingRegion).order_by(ShippingRegion.shipping_region_id))
        return result.scalars().all()

    @staticmethod
    async def get_region(db: AsyncSession, shipping_region_id: int) -> Optional[ShippingRegion]:
        result = await db.execute(
            select(ShippingRegion).where(ShippingRegion.shipping_region_id == shipping_region_id)
        )
        return result.scalars().first()

    @staticmethod
    async def get_for_region(db: AsyncSession, shipping_region_id: int):
        result = await db.execute(
            select(Shipping)
            .where(Shipping.shipping_region_id == shipping_region_id)
            .order_by(Shipping.shipping_id)
        )
        return result.scalars().all()

    @staticmethod
    async def get_by_id(db: AsyncSession, shipping_id: int) -> Optional[Shipping]:
        result = await db.execute(select(Shipping).where(Shipping.shipping_id == shipping_id))
        return result.scalars().first()
