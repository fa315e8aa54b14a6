# Main application entry point
import os
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from . import __version__
from .api import auth_router, comments_router, health_router, notes_router
from .config import get_settings
from .core.exceptions import register_exception_handlers
from .core.logging import LoggingMiddleware, get_logger, setup_logging
from .database import create_tables

# Setup logging first
setup_logging()
logger = get_logger("main")

settings = get_settings()


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan events."""
    logger.info(
        "Starting NoteThread application",
        extra={"version": __version__, "environment": settings.environment, "debug": settings.debug},
    )

    # Allow tests to skip touching the real DB
    if os.getenv("NOTETHREAD_SKIP_LIFESPAN_DB") == "1":
        logger.info("Skipping DB table creation due to NOTETHREAD_SKIP_LIFESPAN_DB=1")
    else:
        try:
            await create_tables()
            logger.info("Database tables created/verified")
        except Exception as e:
            logger.error("Failed to create database tables", exc_info=e)
            raise

    yield

    logger.info("Shutting down NoteThread application")


app = FastAPI(
    title="NoteThread",
    description="Personal notes with comment threads",
    version=__version__,
    lifespan=lifespan,
)

register_exception_handlers(app)

# Add logging middleware
app.add_middleware(LoggingMiddleware)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=settings.cors_allow_credentials,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routers
app.include_router(auth_router, prefix="/api")
app.include_router(notes_router, prefix="/api")
app.include_router(comments_router, prefix="/api")
app.include_router(health_router, prefix="/api")


# Root endpoint
@app.get("/")
async def root():
    return {"message": "NoteThread API"}


# Basic unprefixed health endpoint
@app.get("/health")
async def basic_health():
    return {"status": "ok"}


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("notethread.main:app", host=settings.host, port=settings.port, reload=settings.debug)
