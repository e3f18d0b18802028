from typing import Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from services.customer_service.models import Customer

from .models import Review


class ReviewRepository:

    @staticmethod
    async def create(db: AsyncSession, review: Review) -> Review:
        db.add(review)
        await db.commit()
        await db.refresh(review)
        return review

    @staticmethod
    async def get_by_customer_and_product(
        db: AsyncSession, customer_id: int, product_id: int
    ) -> Optional[Review]:
        result = await db.execute(
            select(Review)
            .where(Review.customer_id == customer_id)
            .where(Review.product_id == product_id)
        )
        return result.scalars().first()

    @staticmethod
    async def get_for_product(db: AsyncSession, product_id: int):
        result = await db.execute(
            select(Review, Customer.name)
            .join(Customer, Customer.customer_id == Review.customer_id)
            .where(Review.product_id == product_id)
            .order_by(Review.created_on.desc(), Review.review_id.desc())
        )
        return result.all()
