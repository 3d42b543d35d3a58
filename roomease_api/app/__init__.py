"""
Application package initializer.

This package contains the main entrypoint for the API and all of its
submodules.  The code is organised into layers: ``core`` (settings,
logging, security, errors and the SQLite connection helpers),
``stores`` (listing, user and booking storage backends), ``services``
(query, statistics, booking and user logic) and ``api`` (HTTP routes).
Services never touch a global store; they receive the stores they
need when constructed.
"""

from .main import app  # noqa: F401
