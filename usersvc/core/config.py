"""
Configuration helpers for the users API.

Settings are read once from the environment (optionally populated from a local
.env file) so that the database gateway does not fetch os.environ directly.
"""

from dataclasses import dataclass
from functools import lru_cache
import os

from dotenv import load_dotenv

from .errors import ConfigurationError

# Fixed listen address; only the database comes from the environment.
HOST = "0.0.0.0"
PORT = 5050

APP_NAME = "users-api"
USERS_COLLECTION = "users"


@dataclass(frozen=True)
class Settings:
    """Typed view of environment variables."""

    mongo_user: str
    mongo_password: str
    mongo_host: str
    mongo_db: str


@lru_cache
def get_settings() -> Settings:
    """Read the current environment and build a Settings instance."""
    load_dotenv()

    def _required(name: str) -> str:
        value = (os.getenv(name) or "").strip()
        if not value:
            raise ConfigurationError(f"{name} not set in environment")
        return value

    return Settings(
        mongo_user=_required("MONGO_USER"),
        mongo_password=_required("MONGO_PASSWORD"),
        mongo_host=_required("MONGO_HOST"),
        mongo_db=_required("MONGO_DB"),
    )
