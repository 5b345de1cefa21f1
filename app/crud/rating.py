"""Rating storage.

Ratings are never updated. Creating or deleting one rebuilds the parent
vendor's aggregate in the same transaction, with the vendor row locked first
so two concurrent writes for the same vendor cannot each recompute from a
snapshot missing the other's rating.
"""
from typing import Optional
import logging
import uuid

from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.future import select

from app.models.rating import Rating
from app.models.vendor import Vendor
from app.schemas.rating import RatingCreate
from app.services.rating_aggregator import recompute_vendor_rating

log = logging.getLogger(__name__)


async def _lock_vendor(db: AsyncSession, vendor_id: str) -> Optional[Vendor]:
    # FOR UPDATE is dropped by dialects without row locks (SQLite serialises writers anyway)
    result = await db.execute(select(Vendor).where(Vendor.id == vendor_id).with_for_update())
    return result.scalar_one_or_none()


async def get_rating(db: AsyncSession, rating_id: str) -> Optional[Rating]:
    result = await db.execute(select(Rating).where(Rating.id == rating_id))
    return result.scalar_one_or_none()


async def list_ratings_by_vendor(db: AsyncSession, vendor_id: str):
    result = await db.execute(
        select(Rating)
        .where(Rating.vendor_id == vendor_id)
        .order_by(Rating.created_at.desc())
    )
    return result.scalars().all()


async def create_rating(db: AsyncSession, rating: RatingCreate) -> Optional[Rating]:
    """Insert a rating and refresh the vendor aggregate. Returns None if the vendor is gone."""
    try:
        vendor = await _lock_vendor(db, rating.vendor_id)
        if not vendor:
            await db.rollback()
            return None

        new_rating = Rating(
            id=str(uuid.uuid4()),
            vendor_id=vendor.id,
            client_name=rating.client_name,
            project_name=rating.project_name,
            rating=rating.rating,
            comments=rating.comments,
        )
        db.add(new_rating)
        await db.flush()

        avg_rating, total_reviews = await recompute_vendor_rating(db, vendor.id)
        await db.commit()
    except Exception:
        await db.rollback()
        raise

    log.info("Rating %s added for vendor %s (avg=%s, total=%s)", new_rating.id, vendor.id, avg_rating, total_reviews)
    await db.refresh(new_rating)
    return new_rating


async def delete_rating(db: AsyncSession, rating_id: str) -> Optional[Rating]:
    """Remove a rating and refresh the vendor aggregate. Returns the deleted rating or None."""
    try:
        rating = await get_rating(db, rating_id)
        if not rating:
            return None

        await _lock_vendor(db, rating.vendor_id)
        await db.delete(rating)
        await db.flush()

        avg_rating, total_reviews = await recompute_vendor_rating(db, rating.vendor_id)
        await db.commit()
    except Exception:
        await db.rollback()
        raise

    log.info("Rating %s removed from vendor %s (avg=%s, total=%s)", rating_id, rating.vendor_id, avg_rating, total_reviews)
    return rating
