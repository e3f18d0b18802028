from datetime import datetime
from typing import List

from pydantic import BaseModel, Field

class ReviewCreate(BaseModel):
    review: str = Field(min_length=1)
    rating: int = Field(ge=1, le=5)

class ReviewResponse(BaseModel):
    review_id: int
    product_id: int
    name: str
    review: str
    rating: int
    created_on: datetime

class ReviewListResponse(BaseModel):
    rows: List[ReviewResponse]
