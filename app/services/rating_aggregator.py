# app/services/rating_aggregator.py
"""Keeps ``Vendor.avg_rating`` / ``Vendor.total_reviews`` in step with the ratings table.

The aggregate is always rebuilt from the full rating set of a vendor rather
than adjusted incrementally. None of these functions commit: callers run them
inside the same transaction as the rating write so the derived fields are never
observed out of step with the ratings they summarise.
"""
import logging
from datetime import datetime
from decimal import Decimal, ROUND_HALF_UP
from typing import Iterable, Tuple

from sqlalchemy import update
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.future import select

from app.models.rating import Rating
from app.models.vendor import Vendor

log = logging.getLogger(__name__)

TWO_PLACES = Decimal("0.01")


def compute_aggregate(scores: Iterable[int]) -> Tuple[Decimal, int]:
    """Return ``(avg_rating, total_reviews)`` for a set of scores.

    The mean is rounded half-up to two decimals; an empty set averages to 0.
    """
    scores = list(scores)
    total_reviews = len(scores)
    if total_reviews == 0:
        return Decimal("0.00"), 0
    avg = (Decimal(sum(scores)) / Decimal(total_reviews)).quantize(TWO_PLACES, rounding=ROUND_HALF_UP)
    return avg, total_reviews


async def _fetch_scores(db: AsyncSession, vendor_id: str):
    result = await db.execute(select(Rating.rating).where(Rating.vendor_id == vendor_id))
    return result.scalars().all()


async def _write_aggregate(db: AsyncSession, vendor_id: str, avg_rating: Decimal, total_reviews: int):
    stmt = (
        update(Vendor)
        .where(Vendor.id == vendor_id)
        .values(avg_rating=avg_rating, total_reviews=total_reviews, updated_at=datetime.utcnow())
        .execution_options(synchronize_session="fetch")
    )
    await db.execute(stmt)


async def recompute_vendor_rating(db: AsyncSession, vendor_id: str) -> Tuple[Decimal, int]:
    """Rebuild and write back the aggregate for one vendor (no commit)."""
    avg_rating, total_reviews = compute_aggregate(await _fetch_scores(db, vendor_id))
    await _write_aggregate(db, vendor_id, avg_rating, total_reviews)
    log.debug("Vendor %s aggregate -> avg=%s total=%s", vendor_id, avg_rating, total_reviews)
    return avg_rating, total_reviews


async def recompute_all(db: AsyncSession) -> int:
    """Repair pass over every vendor (no commit). Returns how many vendors changed."""
    result = await db.execute(select(Vendor.id, Vendor.avg_rating, Vendor.total_reviews))
    changed = 0
    for vendor_id, old_avg, old_total in result.all():
        avg_rating, total_reviews = compute_aggregate(await _fetch_scores(db, vendor_id))
        if Decimal(old_avg or 0) == avg_rating and (old_total or 0) == total_reviews:
            continue
        await _write_aggregate(db, vendor_id, avg_rating, total_reviews)
        log.info("Repaired vendor %s: %s/%s -> %s/%s", vendor_id, old_avg, old_total, avg_rating, total_reviews)
        changed += 1
    return changed
