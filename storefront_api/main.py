# storefront_api/main.py
from contextlib import asynccontextmanager
import logging

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles

from storefront_api.core.config import get_settings
from storefront_api.core.errors import register_exception_handlers
from storefront_api.core.supabase_client import build_supabase
from storefront_api.database import build_engine, create_db_and_tables

# Routers
from storefront_api.routers.store import router as store_router
from storefront_api.routers.admin_auth import router as admin_auth_router
from storefront_api.routers.products import router as products_router
from storefront_api.routers.admin_products import router as admin_products_router
from storefront_api.routers.admin_stats import router as admin_stats_router

settings = get_settings()

logging.basicConfig(level=settings.LOG_LEVEL.upper())
logger = logging.getLogger("uvicorn")


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan handler.

    Startup:
      - Build the Supabase clients (service role + password flows).
      - If DATABASE_URL is set, verify DB connectivity and create tables.

    Shutdown:
      - Dispose of the bootstrap engine if one was opened.
    """
    app.state.supabase = build_supabase(settings)
    app.state.supabase_auth = build_supabase(settings)
    logger.info("✅ Startup: Supabase clients ready.")

    engine = None
    if settings.DATABASE_URL:
        logger.info("🔄 Startup: Connecting to Supabase Postgres...")
        try:
            engine = build_engine(settings.DATABASE_URL)
            create_db_and_tables(engine)
            logger.info("✅ Startup: DB connection OK, tables verified.")
        except Exception as e:
            logger.error(f"❌ Startup: DB connection FAILED: {e}")
            raise
    yield
    if engine is not None:
        engine.dispose()


app = FastAPI(
    title=settings.PROJECT_NAME,
    version="0.1.0",
    lifespan=lifespan,
)

register_exception_handlers(app)


# --- CORS configuration ---
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(store_router)
app.include_router(admin_auth_router)
app.include_router(products_router)
app.include_router(admin_products_router)
app.include_router(admin_stats_router)


@app.get("/health")
def health():
    """Health check endpoint."""
    return {"status": "ok", "service": "storefront-api"}


# Storefront (index.html) and admin panel (admin.html) pages.
# Mounted last so every API route above takes precedence.
if settings.STATIC_DIR.is_dir():
    app.mount("/", StaticFiles(directory=settings.STATIC_DIR, html=True), name="static")
else:
    logger.warning(f"⚠️ Static directory {settings.STATIC_DIR} not found; pages not served.")


def run() -> None:
    """Console entry point: `storefront-api`."""
    uvicorn.run(
        "storefront_api.main:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=False,
    )


if __name__ == "__main__":
    run()
