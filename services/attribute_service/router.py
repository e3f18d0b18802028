from fastapi import APIRouter, Depends, Path
from sqlalchemy.ext.asyncio import AsyncSession

from shared.config.database import MAX_INTEGER, get_db

from .schemas import (
    AttributeListResponse,
    AttributeResponse,
    AttributeValueListResponse,
    ProductAttributeListResponse,
)
from .service import AttributeService

router = APIRouter(prefix="/attributes", tags=["Attributes"])


@router.get("", response_model=AttributeListResponse)
async def list_attributes(db: AsyncSession = Depends(get_db)):
    return {"rows": await AttributeService.list_attributes(db)}


@router.get("/values/{attribute_id}", response_model=AttributeValueListResponse)
async def list_attribute_values(
    attribute_id: int = Path(ge=1, le=MAX_INTEGER),
    db: AsyncSession = Depends(get_db),
):
    return {"rows": await AttributeService.list_attribute_values(db, attribute_id)}


@router.get("/inProduct/{product_id}", response_model=ProductAttributeListResponse)
async def list_product_attributes(
    product_id: int = Path(ge=1, le=MAX_INTEGER),
    db: AsyncSession = Depends(get_db),
):
    return {"rows": await AttributeService.list_product_attributes(db, product_id)}


@router.get("/{attribute_id}", response_model=AttributeResponse)
async def get_attribute(
    attribute_id: int = Path(ge=1, le=MAX_INTEGER),
    db: AsyncSession = Depends(get_db),
):
    return await AttributeService.get_attribute(db, attribute_id)
