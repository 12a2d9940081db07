"""
Endpoint modules.

Each module defines an APIRouter for one domain (auth, catalog,
bookings, payments, health).  The routers are aggregated in
``api/router.py``.
"""
