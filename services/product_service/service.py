from sqlalchemy.ext.asyncio import AsyncSession

from shared.exceptions import NotFound
from shared.pagination import Page, split_terms, truncate

from .models import Product
from .repository import CategoryRepository, DepartmentRepository, ProductRepository


def _summary(product: Product, description_length: int) -> dict:
    return {
        "product_id": product.product_id,
        "name": product.name,
        "description": truncate(product.description, description_length),
        "price": product.price,
        "discounted_price": product.discounted_price,
        "thumbnail": product.thumbnail,
    }


def _paged(products, total: int, page: Page, description_length: int) -> dict:
    return {
        "paginationMeta": page.meta(total),
        "rows": [_summary(p, description_length) for p in products],
    }


class ProductService:

    @staticmethod
    async def list_products(db: AsyncSession, page: Page, description_length: int):
        products, total = await ProductRepository.get_products(db, page.offset, page.limit)
        return _paged(products, total, page, description_length)

    @staticmethod
    async def search_products(
        db: AsyncSession, query_string: str, all_words: bool, page: Page, description_length: int
    ):
        terms = split_terms(query_string)
        if not terms:
            return _paged([], 0, page, description_length)
        products, total = await ProductRepository.search_products(
            db, terms, all_words, page.offset, page.limit
        )
        return _paged(products, total, page, description_length)

    @staticmethod
    async def list_products_in_category(
        db: AsyncSession, category_id: int, page: Page, description_length: int
    ):
        products, total = await ProductRepository.get_products_in_categories(
            db, [category_id], page.offset, page.limit
        )
        return _paged(products, total, page, description_length)

    @staticmethod
    async def list_products_in_department(
        db: AsyncSession, department_id: int, page: Page, description_length: int
    ):
        department = await DepartmentRepository.get_by_id(db, department_id)
        if not department:
            raise NotFound(f"Department with id {department_id} does not exist")

        categories = await CategoryRepository.get_by_department(db, department_id)
        category_ids = [c.category_id for c in categories]
        if not category_ids:
            return _paged([], 0, page, description_length)

        products, total = await ProductRepository.get_products_in_categories(
            db, category_ids, page.offset, page.limit
        )
        return _paged(products, total, page, description_length)

    @staticmethod
    async def get_product(db: AsyncSession, product_id: int) -> Product:
        product = await ProductRepository.get_product_by_id(db, product_id)
        if not product:
            raise NotFound(f"Product with id {product_id} does not exist")
        return product


class DepartmentService:

    @staticmethod
    async def list_departments(db: AsyncSession):
        return await DepartmentRepository.get_all(db)

    @staticmethod
    async def get_department(db: AsyncSession, department_id: int):
        department = await DepartmentRepository.get_by_id(db, department_id)
        if not department:
            raise NotFound(f"Department with id {department_id} does not exist")
        return department


class CategoryService:

    @staticmethod
    async def list_categories(db: AsyncSession):
        return await CategoryRepository.get_all(db)

    @staticmethod
    async def get_category(db: AsyncSession, category_id: int):
        category = await CategoryRepository.get_by_id(db, category_id)
        if not category:
            raise NotFound(f"Category with id {category_id} does not exist")
        return category

    @staticmethod
    async def list_product_categories(db: AsyncSession, product_id: int):
        await ProductService.get_product(db, product_id)
        return await CategoryRepository.get_by_product(db, product_id)

    @staticmethod
    async def list_department_categories(db: AsyncSession, department_id: int):
        await DepartmentService.get_department(db, department_id)
        return await CategoryRepository.get_by_department(db, department_id)
