from fastapi import APIRouter, Depends, Path
from sqlalchemy.ext.asyncio import AsyncSession

from shared.config.database import MAX_INTEGER, get_db

from .schemas import TaxListResponse, TaxResponse
from .service import TaxService

router = APIRouter(prefix="/tax", tags=["Tax"])


@router.get("", response_model=TaxListResponse)
async def list_taxes(db: AsyncSession = Depends(get_db)):
    return {"rows": await TaxService.list_taxes(db)}


@router.get("/{tax_id}", response_model=TaxResponse)
async def get_tax(
    tax_id: int = Path(ge=1, le=MAX_INTEGER),
    db: AsyncSession = Depends(get_db),
):
    return await TaxService.get_tax(db, tax_id)
