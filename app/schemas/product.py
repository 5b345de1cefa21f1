from pydantic import Field, field_validator
from typing import Optional
from datetime import datetime

from app.schemas.base import CamelModel


# ---------- Product ----------
class ProductCreate(CamelModel):
    vendor_id: str = Field(..., min_length=1)
    name: str = Field(..., min_length=1, max_length=255)
    image_url: Optional[str] = Field(None, max_length=500)
    description: Optional[str] = None
    price_range: Optional[str] = Field(None, max_length=100)


class ProductUpdate(CamelModel):
    name: Optional[str] = Field(None, min_length=1, max_length=255)
    image_url: Optional[str] = Field(None, max_length=500)
    description: Optional[str] = None
    price_range: Optional[str] = Field(None, max_length=100)

    @field_validator("name")
    @classmethod
    def name_not_null(cls, value):
        if value is None:
            raise ValueError("Product name cannot be null")
        return value


class ProductRead(CamelModel):
    id: str
    vendor_id: str
    name: str
    image_url: Optional[str] = None
    description: Optional[str] = None
    price_range: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
