from typing import Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from .models import Customer


class CustomerRepository:

    @staticmethod
    async def create(db: AsyncSession, customer: Customer) -> Customer:
        db.add(customer)
        await db.commit()
        await db.refresh(customer)
        return customer

    @staticmethod
    async def save(db: AsyncSession, customer: Customer) -> Customer:
        db.add(customer)
        await db.commit()
        await db.refresh(customer)
        return customer

    @staticmethod
    async def get_by_id(db: AsyncSession, customer_id: int) -> Optional[Customer]:
        result = await db.execute(select(Customer).where(Customer.customer_id == customer_id))
        return result.scalars().first()

    @staticmethod
    async def get_by_email(db: AsyncSession, email: str) -> Optional[Customer]:
        result = await db.execute(select(Customer).where(Customer.email == email))
        return result.scalars().first()

    @staticmethod
    async def email_taken_by_other(db: AsyncSession, email: str, customer_id: int) -> bool:
        result = await db.execute(
            select(Customer.customer_id)
            .where(Customer.email == email)
            .where(Customer.customer_id != customer_id)
        )
        return result.first() is not None
