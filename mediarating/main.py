# mediarating/main.py

import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from mediarating.core.config import get_settings
from mediarating.core.exceptions import register_exception_handlers
from mediarating.core.logger import configure_logging
from mediarating.api import api_router
from mediarating.database import engine, Base
import mediarating.models  # noqa: F401  registers the tables on Base.metadata

settings = get_settings()
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    configure_logging(settings.log_level)
    Base.metadata.create_all(bind=engine)
    logger.info("%s started (database: %s)", settings.app_name, engine.url.render_as_string(hide_password=True))

    yield

    engine.dispose()
    logger.info("%s stopped", settings.app_name)


app = FastAPI(
    title=settings.app_name,
    description="Media Ratings Platform",
    version="1.0.0",
    docs_url="/docs",
    openapi_url="/openapi.json",
    debug=settings.debug,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_exception_handlers(app)

app.include_router(api_router, prefix="/api")


@app.get("/")
def read_root():
    """Service root"""
    return {
        "service": settings.app_name,
        "description": "Media Ratings Platform",
        "version": "1.0.0",
        "docs": "/docs",
    }
