"""
Top‑level package for the RoomEase API.

This file makes ``roomease_api`` a Python package so that modules
within ``app`` can be imported using fully qualified names like
``roomease_api.app.main``.  The bundled seed data for the in‑memory
listing store lives in the ``data`` directory next to this file.

The package provides no public exports; all functionality lives in
submodules under ``app``.
"""

__all__ = []
