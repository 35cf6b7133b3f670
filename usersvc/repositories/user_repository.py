"""Data access helpers for the users collection."""
from __future__ import annotations

from bson import ObjectId
from pymongo.collection import Collection

from usersvc.domain.users import User


class UserRepository:
    """CRUD helpers wrapping the shared pymongo collection."""

    def __init__(self, collection: Collection) -> None:
        self.collection = collection

    def insert_user(self, user: User) -> ObjectId:
        result = self.collection.insert_one(user.to_document())
        return result.inserted_id

    def list_users(self) -> list[User]:
        return [User.from_document(doc) for doc in self.collection.find({})]

    def replace_fields(self, oid: ObjectId, user: User) -> int:
        """Overwrite name/email/age of the matching document; returns the matched count."""
        result = self.collection.update_one({"_id": oid}, {"$set": user.to_document()})
        return result.matched_count

    def delete_user(self, oid: ObjectId) -> int:
        result = self.collection.delete_one({"_id": oid})
        return result.deleted_count
