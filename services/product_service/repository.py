from typing import Optional, Sequence

from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import and_, func, or_, select
from .models import Category, Department, Product, ProductCategory


def _name_contains(term: str):
    escaped = term.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")
    return Product.name.ilike(f"%{escaped}%", escape="\\")


class ProductRepository:

    @staticmethod
    async def _page(db: AsyncSession, stmt, offset: int, limit: int):
        """Runs `stmt` for one page and a COUNT over the same filter."""
        total = await db.scalar(select(func.count()).select_from(stmt.order_by(None).subquery()))
        result = await db.execute(stmt.offset(offset).limit(limit))
        return result.scalars().all(), total or 0

    @staticmethod
    async def get_products(db: AsyncSession, offset: int, limit: int):
        stmt = select(Product).order_by(Product.product_id)
        return await ProductRepository._page(db, stmt, offset, limit)

    @staticmethod
    async def search_products(
        db: AsyncSession, terms: Sequence[str], all_words: bool, offset: int, limit: int
    ):
        conditions = [_name_contains(term) for term in terms]
        where = and_(*conditions) if all_words else or_(*conditions)
        stmt = select(Product).where(where).order_by(Product.product_id)
        return await ProductRepository._page(db, stmt, offset, limit)

    @staticmethod
    async def get_products_in_categories(
        db: AsyncSession, category_ids: Sequence[int], offset: int, limit: int
    ):
        linked = select(ProductCategory.product_id).where(ProductCategory.category_id.in_(category_ids))
        stmt = select(Product).where(Product.product_id.in_(linked)).order_by(Product.product_id)
        return await ProductRepository._page(db, stmt, offset, limit)

    @staticmethod
    async def get_product_by_id(db: AsyncSession, product_id: int) -> Optional[Product]:
        result = await db.execute(select(Product).where(Product.product_id == product_id))
        return result.scalars().first()


class DepartmentRepository:

    @staticmethod
    async def get_all(db: AsyncSession):
        result = await db.execute(select(Department).order_by(Department.department_id))
        return result.scalars().all()

    @staticmethod
    async def get_by_id(db: AsyncSession, department_id: int) -> Optional[Department]:
        result = await db.execute(select(Department).where(Department.department_id == department_id))
        return result.scalars().first()


class CategoryRepository:

    @staticmethod
    async def get_all(db: AsyncSession):
        result = await db.execute(select(Category).order_by(Category.category_id))
        return result.scalars().all()

    @staticmethod
    async def get_by_id(db: AsyncSession, category_id: int) -> Optional[Category]:
        result = await db.execute(select(Category).where(Category.category_id == category_id))
        return result.scalars().first()

    @staticmethod
    async def get_by_department(db: AsyncSession, department_id: int):
        result = await db.execute(
            select(Category)
            .where(Category.department_id == department_id)
            .order_by(Category.category_id)
        )
        return result.scalars().all()

    @staticmethod
    async def get_by_product(db: AsyncSession, product_id: int):
        result = await db.execute(
            select(Category)
            .join(ProductCategory, ProductCategory.category_id == Category.category_id)
            .where(ProductCategory.product_id == product_id)
            .order_by(Category.category_id)
        )
        return result.scalars().all()
