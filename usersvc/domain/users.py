"""Domain helpers for the User entity: field rules and identifier parsing."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, Optional

from bson import ObjectId
from bson.errors import InvalidId
from email_validator import EmailNotValidError, validate_email

from usersvc.core.errors import BadRequestError

NAME_MIN_LENGTH = 3
AGE_MIN = 1
AGE_MAX = 120

NAME_MESSAGE = "Name must be at least 3 characters"
EMAIL_MESSAGE = "Email must be a valid email address"
AGE_MESSAGE = "Age must be between 1 and 120"


@dataclass
class User:
    name: str
    email: str
    age: int
    id: Optional[ObjectId] = None

    def to_document(self) -> dict:
        """Storage form. Never carries _id; the database assigns it."""
        return {"name": self.name, "email": self.email, "age": self.age}

    def to_json(self) -> dict:
        data: dict[str, Any] = {}
        if self.id is not None:
            data["_id"] = str(self.id)
        data.update(self.to_document())
        return data

    @classmethod
    def from_document(cls, doc: Mapping[str, Any]) -> "User":
        return cls(
            name=doc.get("name", ""),
            email=doc.get("email", ""),
            age=doc.get("age", 0),
            id=doc.get("_id"),
        )


def is_valid_email(value: str | None) -> bool:
    if not value:
        return False
    try:
        validate_email(value, check_deliverability=False)
    except EmailNotValidError:
        return False
    return True


def validate(candidate: User) -> dict[str, str]:
    """Return field -> reason for every failing field; empty when the user is valid."""
    errors: dict[str, str] = {}
    if len(candidate.name or "") < NAME_MIN_LENGTH:
        errors["name"] = NAME_MESSAGE
    if not is_valid_email(candidate.email):
        errors["email"] = EMAIL_MESSAGE
    if not AGE_MIN <= candidate.age <= AGE_MAX:
        errors["age"] = AGE_MESSAGE
    return errors


def parse_user_id(raw: str) -> ObjectId:
    """Convert a path segment into an ObjectId; only 24 hex digits are accepted."""
    if not isinstance(raw, str):
        raise BadRequestError("Invalid ID format")
    try:
        return ObjectId(raw)
    except InvalidId as exc:
        raise BadRequestError("Invalid ID format") from exc
