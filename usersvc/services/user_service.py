"""User create/list/update/delete use cases."""
from __future__ import annotations

from typing import Any, Mapping

from bson import ObjectId
from pymongo.errors import PyMongoError

from usersvc.core.errors import BadRequestError, NotFoundError, PersistenceError, ValidationError
from usersvc.core.logger import get_logger
from usersvc.domain.users import User, parse_user_id, validate
from usersvc.repositories.user_repository import UserRepository

logger = get_logger(__name__)


def _candidate(payload: Mapping[str, Any]) -> User:
    # _id is dropped here; clients never choose identifiers.
    return User(name=payload["name"], email=payload["email"], age=payload["age"])


class UserService:
    """Validates input, calls the repository and reports outcomes as values or exceptions."""

    def __init__(self, repository: UserRepository) -> None:
        self.repository = repository

    def _validated(self, payload: Mapping[str, Any]) -> User:
        user = _candidate(payload)
        errors = validate(user)
        if errors:
            logger.info("Validation failed: %s", errors)
            raise ValidationError(errors)
        return user

    def create_user(self, payload: Mapping[str, Any]) -> str:
        user = self._validated(payload)
        try:
            oid = self.repository.insert_user(user)
        except PyMongoError as exc:
            logger.error("Failed to create user: %s", exc)
            raise PersistenceError("Failed to create user") from exc
        logger.info("User created: %s", oid)
        return str(oid)

    def list_users(self) -> list[dict]:
        try:
            users = self.repository.list_users()
        except PyMongoError as exc:
            logger.error("Failed to fetch users: %s", exc)
            raise PersistenceError("Failed to fetch users") from exc
        logger.info("Fetched %s users", len(users))
        return [user.to_json() for user in users]

    def update_user(self, user_id: str, payload: Mapping[str, Any]) -> None:
        user = self._validated(payload)
        oid = self._parse_id(user_id)
        try:
            matched = self.repository.replace_fields(oid, user)
        except PyMongoError as exc:
            logger.error("Failed to update user: %s", exc)
            raise PersistenceError("Failed to update user") from exc
        if not matched:
            logger.info("User not found: %s", user_id)
            raise NotFoundError("User not found")
        logger.info("User updated: %s", user_id)

    def delete_user(self, user_id: str) -> None:
        oid = self._parse_id(user_id)
        try:
            deleted = self.repository.delete_user(oid)
        except PyMongoError as exc:
            logger.error("Failed to delete user: %s", exc)
            raise PersistenceError("Failed to delete user") from exc
        if not deleted:
            logger.info("User not found: %s", user_id)
            raise NotFoundError("User not found")
        logger.info("User deleted: %s", user_id)

    @staticmethod
    def _parse_id(user_id: str) -> ObjectId:
        try:
            return parse_user_id(user_id)
        except BadRequestError:
            logger.info("Invalid ID format: %s", user_id)
            raise
