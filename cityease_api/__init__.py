"""
Top‑level package for the CityEase booking API.

Makes ``cityease_api`` importable so that modules within ``app`` can be
referenced with fully qualified names like ``cityease_api.app.main``.

The package provides no public exports; all functionality lives in
submodules under ``app``.
"""

__all__ = []
