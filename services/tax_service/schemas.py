from typing import List
from pydantic import BaseModel

class TaxResponse(BaseModel):
    tax_id: int
    tax_type: str
    tax_percentage: float

    class Config:
        from_attributes = True

class TaxListResponse(BaseModel):
    rows: List[TaxResponse]
