# storefront_api/database.py
from sqlalchemy.engine import Engine
from sqlmodel import SQLModel, create_engine

# ---------------------------------------------------------
# Direct Postgres connection (schema bootstrap only)
#
# All request-time reads and writes go through the Supabase client.
# This engine is only opened at startup, when DATABASE_URL is set,
# to make sure the users / products / orders tables exist.
#
# - sslmode=require   : enforce SSL against the Supabase pooler
# - pool_size=1       : keep only 1 connection to the Supabase pooler
# - max_overflow=0    : do not open extra connections beyond the pool
# - pool_pre_ping=True: validate connections before using them
# ---------------------------------------------------------


def _with_sslmode(db_url: str) -> str:
    """Append sslmode=require to Postgres URLs that don't set it."""
    if not db_url.startswith("postgres") or "sslmode=" in db_url:
        return db_url
    if "?" in db_url:
        return db_url + "&sslmode=require"
    return db_url + "?sslmode=require"


def build_engine(db_url: str) -> Engine:
    """
    Create an engine for the given URL.

    Pool limits only apply to Postgres; other URLs (e.g. sqlite in tests)
    use the dialect defaults.
    """
    db_url = _with_sslmode(db_url)
    if db_url.startswith("postgres"):
        return create_engine(
            db_url,
            echo=False,
            pool_pre_ping=True,
            pool_size=1,
            max_overflow=0,
        )
    return create_engine(db_url, echo=False)


def create_db_and_tables(engine: Engine) -> None:
    """
    Create all tables defined in SQLModel metadata if they do not exist.

    This is called once on application startup.
    """
    # Import models so SQLModel metadata is populated before create_all()
    from storefront_api.models import order as _order_models  # noqa: F401
    from storefront_api.models import product as _product_models  # noqa: F401
    from storefront_api.models import user as _user_models  # noqa: F401

    SQLModel.metadata.create_all(engine)
