"""FastAPI application — main entry point."""

import os
import structlog
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.staticfiles import StaticFiles

from app.config import get_settings
from app.infrastructure.database import engine, Base
from app.core.logging import configure_logging
from app.core.middleware import setup_middleware
from app.core.exceptions import AppError, app_error_handler, global_exception_handler

# Import all models so SQLAlchemy knows about them
from app.domain.models.user import User
from app.domain.models.diary_entry import DiaryEntry

# Import routers
from app.interfaces.api.auth import router as auth_router
from app.interfaces.api.profile import router as profile_router
from app.interfaces.api.diary import router as diary_router

settings = get_settings()

# Configure logging immediately
configure_logging()
logger = structlog.get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan — startup and shutdown events."""
    logger.info("Starting Student Diary...", env=settings.ENVIRONMENT)

    # Create DB tables (dev only, use migrations in production)
    Base.metadata.create_all(bind=engine)
    os.makedirs(settings.UPLOAD_DIR, exist_ok=True)
    logger.info("Database tables created/verified")

    yield

    logger.info("Student Diary stopped")


app = FastAPI(
    title="Student Diary",
    description="API Backend — personal diary entries with account lockout and password reset",
    version="1.0.0",
    lifespan=lifespan,
)

setup_middleware(app)

app.add_exception_handler(AppError, app_error_handler)
app.add_exception_handler(Exception, global_exception_handler)

app.include_router(auth_router)
app.include_router(profile_router)
app.include_router(diary_router)

# Profile pictures are served from /uploads/profile-pictures/...
app.mount("/uploads", StaticFiles(directory=settings.UPLOAD_DIR, check_dir=False), name="uploads")


@app.get("/")
def root():
    return {
        "name": "Student Diary",
        "version": "1.0.0",
        "status": "running",
        "docs": "/docs",
    }


@app.get("/health")
def health():
    return {"status": "healthy"}
