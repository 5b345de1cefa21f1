from datetime import datetime
from typing import Optional
import logging
import uuid

from sqlalchemy import or_
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.future import select

from app.core.errors import ConflictError
from app.models.vendor import Vendor
from app.schemas.vendor import VendorRegister, VendorUpdate

log = logging.getLogger(__name__)

# Profile fields a vendor may change about themselves. Rating aggregates and
# credentials are written elsewhere.
UPDATABLE_FIELDS = {
    "vendor_name",
    "owner_name",
    "contact_number",
    "email",
    "business_category",
    "city",
    "description",
    "logo_url",
}


def _escape_like(term: str) -> str:
    # search text is matched literally; % and _ are not wildcards
    return term.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")


async def get_vendor(db: AsyncSession, vendor_id: str) -> Optional[Vendor]:
    result = await db.execute(select(Vendor).where(Vendor.id == vendor_id))
    return result.scalar_one_or_none()


async def get_vendor_by_email(db: AsyncSession, email: str) -> Optional[Vendor]:
    result = await db.execute(select(Vendor).where(Vendor.email == email))
    return result.scalar_one_or_none()


async def list_vendors(db: AsyncSession, category: Optional[str] = None, search: Optional[str] = None):
    """All vendors, newest first, optionally narrowed by category and a name/city search."""
    query = select(Vendor)

    if category:
        query = query.where(Vendor.business_category == category)
    if search:
        pattern = f"%{_escape_like(search.strip())}%"
        query = query.where(
            or_(
                Vendor.vendor_name.ilike(pattern, escape="\\"),
                Vendor.city.ilike(pattern, escape="\\"),
            )
        )

    result = await db.execute(query.order_by(Vendor.created_at.desc()))
    return result.scalars().all()


async def create_vendor(db: AsyncSession, vendor: VendorRegister, password_hash: str) -> Vendor:
    data = vendor.model_dump(include=UPDATABLE_FIELDS)
    new_vendor = Vendor(
        id=str(uuid.uuid4()),
        password_hash=password_hash,
        avg_rating=0,
        total_reviews=0,
        **data,
    )
    db.add(new_vendor)
    try:
        await db.commit()
    except IntegrityError:
        # unique email tripped between the caller's check and the insert
        await db.rollback()
        raise ConflictError("Email already registered")
    await db.refresh(new_vendor)
    return new_vendor


async def update_vendor(db: AsyncSession, vendor_id: str, updates: VendorUpdate) -> Optional[Vendor]:
    vendor = await get_vendor(db, vendor_id)
    if not vendor:
        return None

    update_data = {
        key: value
        for key, value in updates.model_dump(exclude_unset=True).items()
        if key in UPDATABLE_FIELDS
    }

    new_email = update_data.get("email")
    if new_email and new_email != vendor.email:
        existing = await get_vendor_by_email(db, new_email)
        if existing and existing.id != vendor.id:
            raise ConflictError("Email already registered")

    for key, value in update_data.items():
        setattr(vendor, key, value)
    vendor.updated_at = datetime.utcnow()

    try:
        await db.commit()
    except IntegrityError:
        await db.rollback()
        raise ConflictError("Email already registered")
    await db.refresh(vendor)
    return vendor


async def delete_vendor(db: AsyncSession, vendor_id: str) -> Optional[Vendor]:
    """Delete a vendor; products, ratings and sessions go with it via ON DELETE CASCADE."""
    vendor = await get_vendor(db, vendor_id)
    if vendor:
        await db.delete(vendor)
        await db.commit()
        log.info("Deleted vendor %s", vendor_id)
    return vendor
