from typing import List, Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from app.auth.dependencies import VendorContext, ensure_owner, require_vendor
from app.core.errors import NotFound
from app.crud import product as product_crud
from app.crud import rating as rating_crud
from app.crud import vendor as vendor_crud
from app.db import get_db
from app.schemas.product import ProductRead
from app.schemas.rating import RatingRead
from app.schemas.vendor import BusinessCategory, VendorRead, VendorUpdate

router = APIRouter(prefix="/api", tags=["vendors"])


@router.get("/categories", response_model=List[str])
async def list_categories():
    return [category.value for category in BusinessCategory]


@router.get("/vendors", response_model=List[VendorRead])
async def list_vendors(
    category: Optional[BusinessCategory] = Query(None),
    search: Optional[str] = Query(None, max_length=100),
    db: AsyncSession = Depends(get_db),
):
    """Public vendor directory, newest first."""
    return await vendor_crud.list_vendors(db, category=category.value if category else None, search=search)


@router.get("/vendors/{vendor_id}", response_model=VendorRead)
async def get_vendor(vendor_id: str, db: AsyncSession = Depends(get_db)):
    vendor = await vendor_crud.get_vendor(db, vendor_id)
    if not vendor:
        raise NotFound("Vendor not found")
    return vendor


@router.patch("/vendors/{vendor_id}", response_model=VendorRead)
async def update_vendor(
    vendor_id: str,
    updates: VendorUpdate,
    context: VendorContext = Depends(require_vendor),
    db: AsyncSession = Depends(get_db),
):
    """Update the signed-in vendor's own profile."""
    ensure_owner(context, vendor_id)
    vendor = await vendor_crud.update_vendor(db, vendor_id, updates)
    if not vendor:
        raise NotFound("Vendor not found")
    return vendor


@router.get("/vendors/{vendor_id}/products", response_model=List[ProductRead])
async def list_vendor_products(vendor_id: str, db: AsyncSession = Depends(get_db)):
    return await product_crud.list_products_by_vendor(db, vendor_id)


@router.get("/vendors/{vendor_id}/ratings", response_model=List[RatingRead])
async def list_vendor_ratings(vendor_id: str, db: AsyncSession = Depends(get_db)):
    return await rating_crud.list_ratings_by_vendor(db, vendor_id)
