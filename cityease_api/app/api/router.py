"""
Top‑level API router.

Aggregates the domain routers.  When a new domain is added, include
its router here.
"""

from fastapi import APIRouter

from .endpoints import auth, bookings, catalog, health, payments

router = APIRouter()

router.include_router(auth.router, prefix="/auth", tags=["auth"])
# Catalog routes define their own paths (/services, /professionals).
router.include_router(catalog.router, tags=["catalog"])
router.include_router(bookings.router, prefix="/bookings", tags=["bookings"])
router.include_router(payments.router, prefix="/payment", tags=["payments"])
router.include_router(health.router, tags=["health"])
