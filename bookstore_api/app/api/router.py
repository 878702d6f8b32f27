"""
Top‑level API router.

Aggregates the domain routers under a single router which
``main.create_app`` mounts under ``/api``.  The health check is
mounted separately at the application root.
"""

from fastapi import APIRouter

from .endpoints import books

router = APIRouter()

router.include_router(books.router, prefix="/books", tags=["books"])
