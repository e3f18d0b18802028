from sqlalchemy.ext.asyncio import AsyncSession

from shared.exceptions import NotFound

from .models import Tax
from .repository import TaxRepository


class TaxService:

    @staticmethod
    async def list_taxes(db: AsyncSession):
        return await TaxRepository.get_all(db)

    @staticmethod
    async def get_tax(db: AsyncSession, tax_id: int) -> Tax:
        tax = await TaxRepository.get_by_id(db, tax_id)
        if not tax:
            raise NotFound(f"Tax with id {tax_id} does not exist")
        return tax
