from typing import Literal

from fastapi import APIRouter, Depends, Path, Query
from sqlalchemy.ext.asyncio import AsyncSession

from shared.config.database import MAX_INTEGER, get_db
from shared.pagination import DEFAULT_DESCRIPTION_LENGTH, Page

from .schemas import (
    CategoryListResponse,
    CategoryResponse,
    DepartmentListResponse,
    DepartmentResponse,
    ProductPage,
    ProductResponse,
)
from .service import CategoryService, DepartmentService, ProductService

router = APIRouter()


def page_params(
    page: int | None = Query(default=None, le=MAX_INTEGER),
    limit: int | None = Query(default=None, le=MAX_INTEGER),
) -> Page:
    return Page.from_query(page, limit)


@router.get("/products", response_model=ProductPage, tags=["Products"])
async def list_products(
    page: Page = Depends(page_params),
    description_length: int = Query(default=DEFAULT_DESCRIPTION_LENGTH, ge=0),
    db: AsyncSession = Depends(get_db),
):
    return await ProductService.list_products(db, page, description_length)


@router.get("/products/search", response_model=ProductPage, tags=["Products"])
async def search_products(
    query_string: str = Query(...),
    all_words: Literal["on", "off"] = Query(default="on"),
    page: Page = Depends(page_params),
    description_length: int = Query(default=DEFAULT_DESCRIPTION_LENGTH, ge=0),
    db: AsyncSession = Depends(get_db),
):
    return await ProductService.search_products(
        db, query_string, all_words == "on", page, description_length
    )


@router.get("/products/inCategory/{category_id}", response_model=ProductPage, tags=["Products"])
async def list_products_in_category(
    category_id: int = Path(ge=1, le=MAX_INTEGER),
    page: Page = Depends(page_params),
    description_length: int = Query(default=DEFAULT_DESCRIPTION_LENGTH, ge=0),
    db: AsyncSession = Depends(get_db),
):
    return await ProductService.list_products_in_category(db, category_id, page, description_length)


@router.get("/products/inDepartment/{department_id}", response_model=ProductPage, tags=["Products"])
async def list_products_in_department(
    department_id: int = Path(ge=1, le=MAX_INTEGER),
    page: Page = Depends(page_params),
    description_length: int = Query(default=DEFAULT_DESCRIPTION_LENGTH, ge=0),
    db: AsyncSession = Depends(get_db),
):
    return await ProductService.list_products_in_department(
        db, department_id, page, description_length
    )


@router.get("/products/{product_id}", response_model=ProductResponse, tags=["Products"])
async def get_product(
    product_id: int = Path(ge=1, le=MAX_INTEGER),
    db: AsyncSession = Depends(get_db),
):
    return await ProductService.get_product(db, product_id)


@router.get("/departments", response_model=DepartmentListResponse, tags=["Departments"])
async def list_departments(db: AsyncSession = Depends(get_db)):
    return {"rows": await DepartmentService.list_departments(db)}


@router.get("/departments/{department_id}", response_model=DepartmentResponse, tags=["Departments"])
async def get_department(
    department_id: int = Path(ge=1, le=MAX_INTEGER),
    db: AsyncSession = Depends(get_db),
):
    return await DepartmentService.get_department(db, department_id)


@router.get("/categories", response_model=CategoryListResponse, tags=["Categories"])
async def list_categories(db: AsyncSession = Depends(get_db)):
    return {"rows": await CategoryService.list_categories(db)}


@router.get("/categories/inProduct/{product_id}", response_model=CategoryListResponse, tags=["Categories"])
async def list_product_categories(
    product_id: int = Path(ge=1, le=MAX_INTEGER),
    db: AsyncSession = Depends(get_db),
):
    return {"rows": await CategoryService.list_product_categories(db, product_id)}


@router.get(
    "/categories/inDepartment/{department_id}",
    response_model=CategoryListResponse,
    tags=["Categories"],
)
async def list_department_categories(
    department_id: int = Path(ge=1, le=MAX_INTEGER),
    db: AsyncSession = Depends(get_db),
):
    return {"rows": await CategoryService.list_department_categories(db, department_id)}


@router.get("/categories/{category_id}", response_model=CategoryResponse, tags=["Categories"])
async def get_category(
    category_id: int = Path(ge=1, le=MAX_INTEGER),
    db: AsyncSession = Depends(get_db),
):
    return await CategoryService.get_category(db, category_id)
