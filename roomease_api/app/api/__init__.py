"""
API package containing the HTTP routes.

``deps`` exposes FastAPI dependencies that build services from the
stores attached to the running application.  ``v1`` holds the
``/api`` routes; ``system`` holds the unprefixed root and health
routes.
"""
