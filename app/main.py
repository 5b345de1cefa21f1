### vendor-marketplace/app/main.py
import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from starlette.middleware.sessions import SessionMiddleware

from app.api import product_routes, rating_routes, vendor_routes
from app.auth import routes as auth_routes
from app.core.config import get_settings
from app.core.errors import register_exception_handlers
from app.db import create_db_and_tables

settings = get_settings()


def configure_logging(level: str = "INFO") -> None:
    logging.basicConfig(
        level=level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


configure_logging(settings.log_level)
log = logging.getLogger(__name__)

# Create the FastAPI app
app = FastAPI(
    title="Vendor Marketplace API",
    version="1.0.0",
    description="Vendor profiles, products and client ratings.",
)

# ✅ Session middleware: the signed cookie only carries an opaque session id
app.add_middleware(
    SessionMiddleware,
    secret_key=settings.session_secret,
    session_cookie=settings.session_cookie_name,
    max_age=settings.session_ttl_seconds,
    https_only=settings.session_cookie_secure or settings.is_production,
    same_site="lax",
)

# ✅ Allow frontend dev (CORS)
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_exception_handlers(app)


@app.on_event("startup")
async def on_startup():
    log.info("Starting DB setup...")
    await create_db_and_tables()


@app.get("/")
async def root():
    return {"status": "ok", "service": "vendor-marketplace"}


# ✅ Core app routers
app.include_router(auth_routes.router)
app.include_router(vendor_routes.router)
app.include_router(product_routes.router)
app.include_router(rating_routes.router)
