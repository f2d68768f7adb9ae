# db/database.py
import logging

from sqlalchemy import create_engine, inspect, text
from sqlalchemy.orm import sessionmaker, scoped_session
from sqlalchemy.pool import StaticPool
from config.config import Config

logger = logging.getLogger(__name__)

# Create engine
engine_args = {}
if Config.DATABASE_URL.startswith("sqlite"):
    engine_args["connect_args"] = {"check_same_thread": False}
    if ":memory:" in Config.DATABASE_URL or Config.DATABASE_URL == "sqlite://":
        # one shared connection, otherwise every session sees an empty database
        engine_args["poolclass"] = StaticPool

engine = create_engine(Config.DATABASE_URL, echo=False, **engine_args)

# Session
SessionLocal = scoped_session(
    sessionmaker(autocommit=False, autoflush=False, bind=engine)
)


def init_db():
    """Create all tables if not exist (basic version)."""
    from models.employee import Base
    Base.metadata.create_all(bind=engine)


def drop_db():
    from models.employee import Base
    Base.metadata.drop_all(bind=engine)


# -------------------------------------------------------------
#           SAFE AUTO-MIGRATION (CREATE / PATCH)
# -------------------------------------------------------------
# Column DDL used when an older employees table is missing a column.
# NOT NULL columns get a default so existing rows stay valid.
REQUIRED_COLUMNS = {
    "id": "INTEGER",
    "name": "VARCHAR(255) NOT NULL DEFAULT ''",
    "email": "VARCHAR(255)",
    "mobile_no": "VARCHAR(20) NOT NULL DEFAULT ''",
    "skills": "TEXT NOT NULL DEFAULT '[]'",
    "status": "VARCHAR(7) NOT NULL DEFAULT 'active'",
    "deleted_at": "DATETIME",
    "created_at": "DATETIME",
    "updated_at": "DATETIME",
}


def auto_migrate():
    """
    Auto-creates missing tables AND auto-adds missing columns.
    Does NOT delete data. Safe for local & lightweight usage.
    """
    from models.employee import Base, Employee  # import models

    # 1) Ensure table exists
    Base.metadata.create_all(bind=engine)

    inspector = inspect(engine)
    existing_cols = [col["name"] for col in inspector.get_columns(Employee.__tablename__)]

    # 2) Add missing columns inside a transaction (engine.begin ensures commit)
    with engine.begin() as conn:
        for col_name, col_type in REQUIRED_COLUMNS.items():
            if col_name not in existing_cols:
                logger.warning("[AUTO-MIGRATE] Adding missing column: %s", col_name)
                conn.execute(text(f"ALTER TABLE {Employee.__tablename__} ADD COLUMN {col_name} {col_type}"))
                if col_name == "email":
                    # ALTER TABLE cannot add the UNIQUE constraint itself
                    conn.execute(text(
                        f"CREATE UNIQUE INDEX ix_{Employee.__tablename__}_email ON {Employee.__tablename__} (email)"
                    ))

    logger.info("[AUTO-MIGRATE] Schema verified/updated.")


def ping():
    """Raises if the database cannot run a trivial query."""
    with engine.connect() as conn:
        conn.execute(text("SELECT 1"))
