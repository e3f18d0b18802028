from fastapi import APIRouter, Depends, Path
from sqlalchemy.ext.asyncio import AsyncSession

from shared.config.database import MAX_INTEGER, get_db

from .schemas import ShippingListResponse, ShippingRegionListResponse
from .service import ShippingService

router = APIRouter(prefix="/shipping", tags=["Shipping"])


@router.get("/regions", response_model=ShippingRegionListResponse)
async def list_regions(db: AsyncSession = Depends(get_db)):
    return {"rows": await ShippingService.list_regions(db)}


@router.get("/regions/{shipping_region_id}", response_model=ShippingListResponse)
async def list_region_shippings(
    shipping_region_id: int = Path(ge=1, le=MAX_INTEGER),
    db: AsyncSession = Depends(get_db),
):
    return {"rows": await ShippingService.list_region_shippings(db, shipping_region_id)}
