import logging

from fastapi import APIRouter, Depends, Request
from fastapi.responses import RedirectResponse
from sqlalchemy.ext.asyncio import AsyncSession

from app.auth.dependencies import VendorContext, get_vendor_context, require_vendor
from app.auth.passwords import dummy_verify, hash_password, verify_password
from app.auth.sessions import end_session, start_session
from app.core.errors import ConflictError, Unauthenticated
from app.crud.vendor import create_vendor, get_vendor, get_vendor_by_email
from app.db import get_db
from app.schemas.vendor import VendorLogin, VendorRead, VendorRegister

log = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["auth"])


@router.post("/vendors/register", response_model=VendorRead, status_code=201)
async def register_vendor(
    request: Request,
    vendor_in: VendorRegister,
    db: AsyncSession = Depends(get_db),
):
    """Create a vendor account and sign it in."""
    if await get_vendor_by_email(db, vendor_in.email):
        raise ConflictError("Email already registered")

    vendor = await create_vendor(db, vendor_in, hash_password(vendor_in.password))
    await start_session(request, db, vendor.id)
    log.info("Registered vendor %s", vendor.id)
    return vendor


@router.post("/vendors/login", response_model=VendorRead)
async def login_vendor(
    request: Request,
    credentials: VendorLogin,
    db: AsyncSession = Depends(get_db),
):
    vendor = await get_vendor_by_email(db, credentials.email)
    if vendor:
        valid = verify_password(credentials.password, vendor.password_hash)
    else:
        # unknown emails cost one bcrypt check too
        dummy_verify()
        valid = False

    # same message for unknown email and wrong password
    if not valid:
        log.info("Failed login attempt")
        raise Unauthenticated("Invalid email or password")

    await start_session(request, db, vendor.id)
    log.info("Vendor %s logged in", vendor.id)
    return vendor


@router.get("/logout")
async def logout_vendor(
    request: Request,
    context: VendorContext = Depends(get_vendor_context),
    db: AsyncSession = Depends(get_db),
):
    await end_session(request, db)
    if context.is_authenticated:
        log.info("Vendor %s logged out", context.vendor_id)
    return RedirectResponse(url="/", status_code=302)


@router.get("/auth/vendor", response_model=VendorRead)
async def current_vendor(
    context: VendorContext = Depends(require_vendor),
    db: AsyncSession = Depends(get_db),
):
    vendor = await get_vendor(db, context.vendor_id)
    if not vendor:
        raise Unauthenticated()
    return vendor
