"""
Pydantic schema definitions for API payloads.

Each domain (users, bookings, catalog, payments) defines its own
Pydantic models for request and response bodies.  Request models keep
every field optional: presence checks happen in the services so that a
missing field is reported as ``{"error": ...}`` with status 400.
"""
