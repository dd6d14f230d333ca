
from datetime import datetime

from pydantic import BaseModel, Field

class ProductCreate(BaseModel):
    name: str = Field(min_length=1, max_length=255)
    description: str | None = None
    price: float = Field(ge=0, allow_inf_nan=False)

class ProductUpdate(ProductCreate):
    pass

class ProductOut(BaseModel):
    id: int
    name: str
    description: str | None
    price: float
    created_at: datetime = Field(serialization_alias="createdAt")

    class Config:
        from_attributes = True
