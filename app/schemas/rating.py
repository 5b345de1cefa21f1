from pydantic import Field
from typing import Optional
from datetime import datetime

from app.core.constants import MIN_RATING, MAX_RATING
from app.schemas.base import CamelModel


# ---------- Rating ----------
class RatingCreate(CamelModel):
    vendor_id: str = Field(..., min_length=1)
    client_name: str = Field(..., min_length=1, max_length=255)
    project_name: str = Field(..., min_length=1, max_length=255)
    # strict: 4.5, "4" and true are rejected rather than coerced
    rating: int = Field(..., ge=MIN_RATING, le=MAX_RATING, strict=True)
    comments: Optional[str] = None


class RatingRead(CamelModel):
    id: str
    vendor_id: str
    client_name: str
    project_name: str
    rating: int
    comments: Optional[str] = None
    created_at: Optional[datetime] = None
