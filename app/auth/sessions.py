# app/auth/sessions.py
import logging

from fastapi import Request
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.config import get_settings
from app.core.constants import SESSION_ID_KEY
from app.crud.vendor_session import create_session, delete_session

log = logging.getLogger(__name__)


async def start_session(request: Request, db: AsyncSession, vendor_id: str) -> str:
    """Bind the request's cookie to a fresh server-side session for ``vendor_id``.

    Call only after the vendor's credentials have been verified. Any session
    the cookie pointed at before is destroyed so ids are never reused across logins.
    """
    previous = request.session.get(SESSION_ID_KEY)
    if previous:
        await delete_session(db, previous)
    request.session.clear()

    session = await create_session(db, vendor_id, get_settings().session_ttl_seconds)
    request.session[SESSION_ID_KEY] = session.sid
    return session.sid


async def end_session(request: Request, db: AsyncSession) -> None:
    sid = request.session.get(SESSION_ID_KEY)
    if sid:
        await delete_session(db, sid)
    request.session.clear()
