import logging

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.auth.dependencies import VendorContext, ensure_owner, require_vendor
from app.core.errors import NotFound
from app.crud import product as product_crud
from app.db import get_db
from app.schemas.base import MessageResponse
from app.schemas.product import ProductCreate, ProductRead, ProductUpdate

log = logging.getLogger(__name__)

router = APIRouter(prefix="/api/products", tags=["products"])


async def _load_owned_product(db: AsyncSession, product_id: str, context: VendorContext):
    product = await product_crud.get_product(db, product_id)
    if not product:
        raise NotFound("Product not found")
    ensure_owner(context, product.vendor_id)
    return product


@router.post("", response_model=ProductRead, status_code=201)
async def create_product(
    product_in: ProductCreate,
    context: VendorContext = Depends(require_vendor),
    db: AsyncSession = Depends(get_db),
):
    ensure_owner(context, product_in.vendor_id)
    product = await product_crud.create_product(db, product_in)
    log.info("Vendor %s created product %s", context.vendor_id, product.id)
    return product


@router.patch("/{product_id}", response_model=ProductRead)
async def update_product(
    product_id: str,
    updates: ProductUpdate,
    context: VendorContext = Depends(require_vendor),
    db: AsyncSession = Depends(get_db),
):
    await _load_owned_product(db, product_id, context)
    product = await product_crud.update_product(db, product_id, updates)
    if not product:
        raise NotFound("Product not found")
    log.info("Vendor %s updated product %s", context.vendor_id, product_id)
    return product


@router.delete("/{product_id}", response_model=MessageResponse)
async def delete_product(
    product_id: str,
    context: VendorContext = Depends(require_vendor),
    db: AsyncSession = Depends(get_db),
):
    await _load_owned_product(db, product_id, context)
    await product_crud.delete_product(db, product_id)
    log.info("Vendor %s deleted product %s", context.vendor_id, product_id)
    return {"message": "Product deleted"}
