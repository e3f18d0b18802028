from datetime import datetime, timezone

import structlog
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from shared.exceptions import Conflict
from services.customer_service.service import CustomerService
from services.product_service.service import ProductService

from .models import Review
from .repository import ReviewRepository
from .schemas import ReviewCreate

logger = structlog.get_logger(__name__)

ALREADY_REVIEWED = "You have already reviewed this product"


def _review_row(review: Review, name: str) -> dict:
    return {
        "review_id": review.review_id,
        "product_id": review.product_id,
        "name": name,
        "review": review.review,
        "rating": review.rating,
        "created_on": review.created_on,
    }


class ReviewService:

    @staticmethod
    async def list_reviews(db: AsyncSession, product_id: int):
        await ProductService.get_product(db, product_id)
        rows = await ReviewRepository.get_for_product(db, product_id)
        return [_review_row(review, name) for review, name in rows]

    @staticmethod
    async def post_review(db: AsyncSession, customer_id: int, product_id: int, data: ReviewCreate) -> dict:
        await ProductService.get_product(db, product_id)
        customer = await CustomerService.get_customer(db, customer_id)

        if await ReviewRepository.get_by_customer_and_product(db, customer_id, product_id):
            raise Conflict(ALREADY_REVIEWED)

        review = Review(
            customer_id=customer_id,
            product_id=product_id,
            review=data.review,
            rating=data.rating,
            created_on=datetime.now(timezone.utc),
        )
        try:
            review = await ReviewRepository.create(db, review)
        except IntegrityError:
            await db.rollback()
            raise Conflict(ALREADY_REVIEWED)

        logger.info("review_posted", review_id=review.review_id, product_id=product_id, customer_id=customer_id)
        return _review_row(review, customer.name)
