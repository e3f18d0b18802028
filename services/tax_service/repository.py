from typing import Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from .models import Tax


class TaxRepository:

    @staticmethod
    async def get_all(db: AsyncSession):
        result = await db.execute(select(Tax).order_by(Tax.tax_id))
        return result.scalars().all()

    @staticmethod
    async def get_by_id(db: AsyncSession, tax_id: int) -> Optional[Tax]:
        result = await db.execute(select(Tax).where(Tax.tax_id == tax_id))
        return result.scalars().first()
