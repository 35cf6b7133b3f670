"""
Core utilities shared across the users API.

This package hosts configuration helpers (env vars), logging setup and the
error taxonomy that routers use to build HTTP responses. Services and routers
should depend on these primitives instead of reading os.environ directly.
"""
