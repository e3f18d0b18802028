from typing import List
from pydantic import BaseModel

class AttributeResponse(BaseModel):
    attribute_id: int
    name: str

    class Config:
        from_attributes = True

class AttributeListResponse(BaseModel):
    rows: List[AttributeResponse]

class AttributeValueResponse(BaseModel):
    attribute_value_id: int
    value: str

    class Config:
        from_attributes = True

class AttributeValueListResponse(BaseModel):
    rows: List[AttributeValueResponse]

class ProductAttributeResponse(BaseModel):
    attribute_name: str
    attribute_value_id: int
    attribute_value: str

class ProductAttributeListResponse(BaseModel):
    rows: List[ProductAttributeResponse]
