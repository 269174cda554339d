"""
Top‑level router of the demo service.

Paths are not versioned; browser clients of the demo call them
directly.  When a new endpoint module is added, include its router
here.
"""

from fastapi import APIRouter

from .endpoints import auth, health, pages, products

router = APIRouter()

router.include_router(health.router, tags=["health"])
router.include_router(pages.router, tags=["pages"])
# Product and inventory listings live under ``/api``.
router.include_router(products.router, prefix="/api", tags=["products"])
# ``/api/login`` serves both the login page (GET) and the credential
# check (POST).
router.include_router(auth.router, prefix="/api", tags=["auth"])
