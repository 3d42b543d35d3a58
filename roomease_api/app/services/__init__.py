"""
Service layer abstraction.

Each service encapsulates business logic for a domain and receives the
stores it needs in its constructor, so the in‑memory and SQLite
backends can be swapped without changing API handlers.
"""
