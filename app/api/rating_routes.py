from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.errors import NotFound
from app.crud import rating as rating_crud
from app.crud.vendor import get_vendor
from app.db import get_db
from app.schemas.rating import RatingCreate, RatingRead

router = APIRouter(prefix="/api/ratings", tags=["ratings"])


# Public: anyone may rate an existing vendor. Deleting ratings is an operator
# task (scripts/manage_vendors.py) and has no HTTP route.
@router.post("", response_model=RatingRead, status_code=201)
async def create_rating(rating_in: RatingCreate, db: AsyncSession = Depends(get_db)):
    if not await get_vendor(db, rating_in.vendor_id):
        raise NotFound("Vendor not found")

    rating = await rating_crud.create_rating(db, rating_in)
    if not rating:
        raise NotFound("Vendor not found")
    return rating
