from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, Field

from shared.config.database import MAX_INTEGER

class OrderCreate(BaseModel):
    cart_id: str
    shipping_id: int = Field(ge=1, le=MAX_INTEGER)
    tax_id: int = Field(ge=1, le=MAX_INTEGER)

class OrderCreatedResponse(BaseModel):
    order_id: int

class OrderShortDetail(BaseModel):
    order_id: int
    total_amount: float
    created_on: datetime
    shipped_on: Optional[datetime]
    status: int
    name: str

class OrderListResponse(BaseModel):
    rows: List[OrderShortDetail]

class OrderItemResponse(BaseModel):
    item_id: int
    product_id: int
    attributes: str
    product_name: str
    quantity: int
    unit_cost: float
    subtotal: float

class OrderSummaryResponse(BaseModel):
    order_id: int
    total_amount: float
    status: int
    created_on: datetime
    shipped_on: Optional[datetime]
    tax_id: Optional[int]
    shipping_id: Optional[int]
    order_items: List[OrderItemResponse]
