"""
Pydantic schema definitions for API payloads.

Each domain (properties, users, bookings, statistics) defines its own
Pydantic models for request and response bodies.  Python attributes
use snake_case; the JSON representation uses the camelCase aliases
the frontend expects.
"""
