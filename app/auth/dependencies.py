# auth/dependencies.py
"""Request identity and ownership checks.

``get_vendor_context`` is the single place a request's identity is resolved:
the signed cookie only carries an opaque session id, which is looked up in the
``vendor_sessions`` table. Handlers receive the result as a ``VendorContext``
and gate mutations through ``ensure_owner``.
"""
from dataclasses import dataclass
from typing import Optional
import logging

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.constants import SESSION_ID_KEY
from app.core.errors import Forbidden, Unauthenticated
from app.crud.vendor_session import get_active_session
from app.db import get_db

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class VendorContext:
    vendor_id: Optional[str] = None
    session_id: Optional[str] = None

    @property
    def is_authenticated(self) -> bool:
        return self.vendor_id is not None


ANONYMOUS = VendorContext()


async def get_vendor_context(request: Request, db: AsyncSession = Depends(get_db)) -> VendorContext:
    sid = request.session.get(SESSION_ID_KEY)
    context = ANONYMOUS
    if sid:
        session = await get_active_session(db, sid)
        if session:
            context = VendorContext(vendor_id=session.vendor_id, session_id=sid)
        else:
            # expired or destroyed server-side; drop the stale cookie payload
            request.session.pop(SESSION_ID_KEY, None)
    request.state.vendor_context = context
    return context


async def require_vendor(context: VendorContext = Depends(get_vendor_context)) -> VendorContext:
    if not context.is_authenticated:
        raise Unauthenticated()
    return context


def authorize(context: VendorContext, owner_id: Optional[str]) -> bool:
    """True when the session's vendor owns the resource."""
    return context.is_authenticated and owner_id is not None and context.vendor_id == owner_id


def ensure_owner(context: VendorContext, owner_id: Optional[str]) -> None:
    if not context.is_authenticated:
        raise Unauthenticated()
    if not authorize(context, owner_id):
        log.warning("Vendor %s denied access to resource owned by %s", context.vendor_id, owner_id)
        raise Forbidden()
