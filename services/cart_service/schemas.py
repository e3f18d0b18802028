from pydantic import BaseModel, Field
from typing import List, Optional

from shared.config.database import MAX_INTEGER

class CartIdResponse(BaseModel):
    cart_id: str

class CartItemCreate(BaseModel):
    cart_id: str = Field(min_length=1, max_length=50)
    product_id: int = Field(ge=1, le=MAX_INTEGER)
    attributes: str = Field(default="", max_length=1000)
    quantity: int = Field(default=1, le=MAX_INTEGER)

class CartItemUpdate(BaseModel):
    quantity: int = Field(le=MAX_INTEGER)

class CartItemResponse(BaseModel):
    item_id: int
    cart_id: str
    product_id: int
    attributes: str
    quantity: int
    name: str
    price: float
    discounted_price: float
    image: Optional[str]
    unit_price: float
    subtotal: float

class CartResponse(BaseModel):
    cart_id: str
    rows: List[CartItemResponse] = []
    total_amount: float = 0

class RemovedResponse(BaseModel):
    removed: int

class EmptyCartResponse(BaseModel):
    rows: List[CartItemResponse] = []
    removed: int
