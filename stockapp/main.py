from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware

from .routes import health, product

from .config import API_PREFIX, CORS_ORIGINS, DATABASE_CREATE_TABLES, GZIP_MINIMUM_SIZE
from .database.database import init_db
from .utils.logging import get_logger

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    if DATABASE_CREATE_TABLES:
        init_db()
    logger.info("Stock API started")
    yield
    logger.info("Stock API stopped")


def create_app() -> FastAPI:
    app = FastAPI(title="Stock API", lifespan=lifespan)

    app.add_middleware(GZipMiddleware, minimum_size=GZIP_MINIMUM_SIZE)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(health.router)
    app.include_router(product.router, prefix=API_PREFIX)
    return app


app = create_app()
