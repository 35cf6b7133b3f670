"""MongoDB gateway: builds the URI, verifies the server and hands out the users collection."""
from __future__ import annotations

from urllib.parse import quote_plus

from pymongo import MongoClient
from pymongo.collection import Collection
from pymongo.errors import PyMongoError

from usersvc.core.config import APP_NAME, USERS_COLLECTION, Settings
from usersvc.core.errors import DatabaseConnectionError
from usersvc.core.logger import get_logger

logger = get_logger(__name__)


def build_mongo_uri(settings: Settings) -> str:
    user = quote_plus(settings.mongo_user)
    password = quote_plus(settings.mongo_password)
    return (
        f"mongodb+srv://{user}:{password}@{settings.mongo_host}/"
        f"?retryWrites=true&w=majority&appName={APP_NAME}"
    )


def connect(settings: Settings) -> Collection:
    """
    Open a client and return the users collection of the configured database.

    Connectivity is checked with list_database_names() so an unreachable server
    fails here, at startup, instead of on the first request.

    Raises:
        DatabaseConnectionError: If the URI is invalid or the server is unreachable.
    """
    try:
        client = MongoClient(build_mongo_uri(settings))
    except PyMongoError as exc:
        logger.error("Failed to create MongoDB client: %s", exc)
        raise DatabaseConnectionError(f"Failed to create MongoDB client: {exc}") from exc

    try:
        client.list_database_names()
    except PyMongoError as exc:
        logger.error("Failed to connect to MongoDB: %s", exc)
        client.close()
        raise DatabaseConnectionError(f"Failed to connect to MongoDB: {exc}") from exc

    logger.info("Successfully connected to MongoDB!")
    return client[settings.mongo_db][USERS_COLLECTION]
