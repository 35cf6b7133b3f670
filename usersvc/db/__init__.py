"""Database helpers (MongoDB gateway)."""

from .connection import build_mongo_uri, connect

__all__ = ["build_mongo_uri", "connect"]
