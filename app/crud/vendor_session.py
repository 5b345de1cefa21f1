from datetime import datetime, timedelta
from typing import Optional
import secrets

from sqlalchemy import delete
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.future import select

from app.models.vendor_session import VendorSession


async def create_session(db: AsyncSession, vendor_id: str, ttl_seconds: int) -> VendorSession:
    now = datetime.utcnow()
    session = VendorSession(
        sid=secrets.token_urlsafe(32),
        vendor_id=vendor_id,
        created_at=now,
        expires_at=now + timedelta(seconds=ttl_seconds),
    )
    db.add(session)
    await db.commit()
    return session


async def get_active_session(db: AsyncSession, sid: str) -> Optional[VendorSession]:
    result = await db.execute(
        select(VendorSession).where(
            VendorSession.sid == sid,
            VendorSession.expires_at > datetime.utcnow(),
        )
    )
    return result.scalar_one_or_none()


async def delete_session(db: AsyncSession, sid: str) -> None:
    await db.execute(delete(VendorSession).where(VendorSession.sid == sid))
    await db.commit()


async def purge_expired_sessions(db: AsyncSession) -> int:
    result = await db.execute(delete(VendorSession).where(VendorSession.expires_at <= datetime.utcnow()))
    await db.commit()
    return result.rowcount or 0
