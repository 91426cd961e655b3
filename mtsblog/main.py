"""FastAPI application entry point."""

import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from mtsblog.api import blogs, health, users
from mtsblog.api.errors import register_exception_handlers
from mtsblog.config import settings
from mtsblog.core.logging import setup_logging
from mtsblog.database.mongo import close_clients, connect
from mtsblog.middleware.request_logging import RequestLoggingMiddleware
from mtsblog.repositories import UserRepository

setup_logging(settings.LOG_LEVEL)

logger = logging.getLogger(__name__)

app = FastAPI(
    title=settings.APP_NAME,
    description="Blog documents and user accounts backed by MongoDB",
    version=settings.APP_VERSION,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Trace middleware for request logging and correlation
app.add_middleware(RequestLoggingMiddleware)

register_exception_handlers(app)

app.include_router(health.router, tags=["Health"])
app.include_router(blogs.router, tags=["Blogs"])
app.include_router(users.router, tags=["Users"])


@app.on_event("startup")
def startup_event():
    try:
        db = connect()
        UserRepository(db).ensure_indexes()
    except Exception:
        logger.exception("MongoDB connection error")
        raise


@app.on_event("shutdown")
def shutdown_event():
    close_clients()
