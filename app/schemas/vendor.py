from datetime import datetime
from enum import Enum
from typing import Optional

from pydantic import EmailStr, Field, ValidationInfo, field_validator

from app.core.constants import MIN_PASSWORD_LENGTH
from app.schemas.base import CamelModel


class BusinessCategory(str, Enum):
    CONTRACTOR = "Contractor"
    MATERIAL_SUPPLIER = "Material Supplier"
    CONSULTANT = "Consultant"
    FABRICATOR = "Fabricator"
    ELECTRICIAN = "Electrician"
    PLUMBER = "Plumber"
    INTERIOR_DESIGNER = "Interior Designer"
    ARCHITECT = "Architect"
    OTHER = "Other"


# ---------- Vendor ----------
class VendorBase(CamelModel):
    vendor_name: str = Field(..., min_length=1, max_length=255)
    owner_name: str = Field(..., min_length=1, max_length=255)
    contact_number: str = Field(..., min_length=1, max_length=20)
    email: EmailStr
    business_category: BusinessCategory
    city: str = Field(..., min_length=1, max_length=100)
    description: Optional[str] = None
    logo_url: Optional[str] = Field(None, max_length=500)


class VendorRegister(VendorBase):
    password: str = Field(..., min_length=MIN_PASSWORD_LENGTH)
    confirm_password: str

    @field_validator("confirm_password")
    @classmethod
    def passwords_match(cls, value, info: ValidationInfo):
        # a password that already failed validation is reported on its own
        if "password" in info.data and value != info.data["password"]:
            raise ValueError("Passwords don't match")
        return value


class VendorLogin(CamelModel):
    email: EmailStr
    password: str = Field(..., min_length=1)


# Derived rating fields, credentials, ids and timestamps are deliberately absent:
# unknown keys are dropped on parse so clients cannot write them.
class VendorUpdate(CamelModel):
    vendor_name: Optional[str] = Field(None, min_length=1, max_length=255)
    owner_name: Optional[str] = Field(None, min_length=1, max_length=255)
    contact_number: Optional[str] = Field(None, min_length=1, max_length=20)
    email: Optional[EmailStr] = None
    business_category: Optional[BusinessCategory] = None
    city: Optional[str] = Field(None, min_length=1, max_length=100)
    description: Optional[str] = None
    logo_url: Optional[str] = Field(None, max_length=500)

    @field_validator("vendor_name", "owner_name", "contact_number", "email", "business_category", "city")
    @classmethod
    def not_null(cls, value):
        if value is None:
            raise ValueError("Field cannot be null")
        return value


class VendorRead(CamelModel):
    id: str
    vendor_name: str
    owner_name: str
    contact_number: str
    email: str
    business_category: str
    city: str
    description: Optional[str] = None
    logo_url: Optional[str] = None
    avg_rating: float = 0
    total_reviews: int = 0
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
