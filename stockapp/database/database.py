from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from stockapp.config import DATABASE_URL, DATABASE_ECHO
from stockapp.models.database_models import Base
from stockapp.utils.logging import get_logger

logger = get_logger(__name__)


def _engine_options(url: str) -> dict:
    if not url.startswith("sqlite"):
        return {"pool_pre_ping": True}

    options = {"connect_args": {"check_same_thread": False}}
    # in-memory sqlite lives on a single connection
    if url in ("sqlite://", "sqlite:///:memory:"):
        options["poolclass"] = StaticPool
    return options


engine = create_engine(DATABASE_URL, echo=DATABASE_ECHO, **_engine_options(DATABASE_URL))
sessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def init_db(bind=None):
    """Create missing tables on the given engine (the application engine by default)."""
    target = bind if bind is not None else engine
    logger.info("Creating tables on {}", target.url.render_as_string(hide_password=True))
    Base.metadata.create_all(target)


def get_db():
    db = sessionLocal()
    try:
        yield db
    finally:
        db.close()
