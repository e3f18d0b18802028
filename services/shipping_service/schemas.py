from typing import List
from pydantic import BaseModel

class ShippingRegionResponse(BaseModel):
    shipping_region_id: int
    shipping_region: str

    class Config:
        from_attributes = True

class ShippingResponse(BaseModel):
    shipping_id: int
    shipping_type: str
    shipping_cost: float
    shipping_region_id: int

    class Config:
        from_attributes = True

class ShippingRegionListResponse(BaseModel):
    rows: List[ShippingRegionResponse]

class ShippingListResponse(BaseModel):
    rows: List[ShippingResponse]
