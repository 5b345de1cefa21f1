from datetime import datetime
from typing import Optional
import uuid

from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.future import select

from app.models.product import Product
from app.schemas.product import ProductCreate, ProductUpdate


async def get_product(db: AsyncSession, product_id: str) -> Optional[Product]:
    result = await db.execute(select(Product).where(Product.id == product_id))
    return result.scalar_one_or_none()


async def list_products_by_vendor(db: AsyncSession, vendor_id: str):
    result = await db.execute(
        select(Product)
        .where(Product.vendor_id == vendor_id)
        .order_by(Product.created_at.desc())
    )
    return result.scalars().all()


async def create_product(db: AsyncSession, product: ProductCreate) -> Product:
    new_product = Product(
        id=str(uuid.uuid4()),
        vendor_id=product.vendor_id,
        name=product.name,
        image_url=product.image_url,
        description=product.description,
        price_range=product.price_range,
    )
    db.add(new_product)
    await db.commit()
    await db.refresh(new_product)
    return new_product


async def update_product(db: AsyncSession, product_id: str, updates: ProductUpdate) -> Optional[Product]:
    product = await get_product(db, product_id)
    if not product:
        return None

    # vendor_id is not part of ProductUpdate, so ownership never moves
    for key, value in updates.model_dump(exclude_unset=True).items():
        setattr(product, key, value)
    product.updated_at = datetime.utcnow()

    await db.commit()
    await db.refresh(product)
    return product


async def delete_product(db: AsyncSession, product_id: str) -> Optional[Product]:
    product = await get_product(db, product_id)
    if product:
        await db.delete(product)
        await db.commit()
    return product
