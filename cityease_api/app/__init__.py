"""
Application package initializer.

This package contains the main entrypoint for the API and its
submodules.  Each domain (auth, catalog, bookings, payments) exposes a
service in ``services`` and a router in ``api/endpoints``; the routers
are aggregated in ``api/router.py`` and mounted under ``/api``.
"""

from .main import app  # noqa: F401
