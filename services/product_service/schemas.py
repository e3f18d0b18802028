from typing import List, Optional
from pydantic import BaseModel

class PaginationMeta(BaseModel):
    currentPage: int
    currentPageSize: int
    totalPages: int
    totalRecords: int

class ProductSummary(BaseModel):
    product_id: int
    name: str
    description: Optional[str]
    price: float
    discounted_price: float
    thumbnail: Optional[str]

class ProductPage(BaseModel):
    paginationMeta: PaginationMeta
    rows: List[ProductSummary]

class ProductResponse(BaseModel):
    product_id: int
    name: str
    description: Optional[str]
    price: float
    discounted_price: float
    image: Optional[str]
    image_2: Optional[str]
    thumbnail: Optional[str]
    display: int

    class Config:
        from_attributes = True

class DepartmentResponse(BaseModel):
    department_id: int
    name: str
    description: Optional[str]

    class Config:
        from_attributes = True

class DepartmentListResponse(BaseModel):
    rows: List[DepartmentResponse]

class CategoryResponse(BaseModel):
    category_id: int
    department_id: int
    name: str
    description: Optional[str]

    class Config:
        from_attributes = True

class CategoryListResponse(BaseModel):
    rows: List[CategoryResponse]
