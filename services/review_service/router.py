from fastapi import APIRouter, Depends, Path, status
from sqlalchemy.ext.asyncio import AsyncSession

from shared.config.database import MAX_INTEGER, get_db
from shared.security import get_current_customer

from .schemas import ReviewCreate, ReviewListResponse, ReviewResponse
from .service import ReviewService

router = APIRouter(prefix="/products/{product_id}/reviews", tags=["Reviews"])


@router.get("", response_model=ReviewListResponse)
async def list_reviews(
    product_id: int = Path(ge=1, le=MAX_INTEGER),
    db: AsyncSession = Depends(get_db),
):
    return {"rows": await ReviewService.list_reviews(db, product_id)}


@router.post("", response_model=ReviewResponse, status_code=status.HTTP_201_CREATED)
async def post_review(
    payload: ReviewCreate,
    product_id: int = Path(ge=1, le=MAX_INTEGER),
    customer_id: int = Depends(get_current_customer),
    db: AsyncSession = Depends(get_db),
):
    return await ReviewService.post_review(db, customer_id, product_id, payload)
