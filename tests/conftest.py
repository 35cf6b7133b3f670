from __future__ import annotations

import sys
from pathlib import Path
from types import SimpleNamespace

import pytest
from bson import ObjectId

# Garante que o pacote usersvc seja importável durante os testes locais
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))


class FakeCollection:
    """In-memory stand-in for the users collection with pymongo-shaped results."""

    def __init__(self) -> None:
        self.docs: list[dict] = []
        self.calls: list[str] = []
        self.error: Exception | None = None

    def _record(self, op: str) -> None:
        self.calls.append(op)
        if self.error is not None:
            raise self.error

    def _find_index(self, flt: dict) -> int | None:
        for idx, doc in enumerate(self.docs):
            if doc["_id"] == flt.get("_id"):
                return idx
        return None

    def insert_one(self, doc: dict):
        self._record("insert_one")
        stored = dict(doc)
        stored.setdefault("_id", ObjectId())
        self.docs.append(stored)
        return SimpleNamespace(inserted_id=stored["_id"])

    def find(self, flt: dict | None = None):
        self._record("find")
        return iter([dict(doc) for doc in self.docs])

    def update_one(self, flt: dict, update: dict):
        self._record("update_one")
        idx = self._find_index(flt)
        if idx is None:
            return SimpleNamespace(matched_count=0, modified_count=0)
        current = self.docs[idx]
        changes = update["$set"]
        modified = any(current.get(key) != value for key, value in changes.items())
        current.update(changes)
        return SimpleNamespace(matched_count=1, modified_count=int(modified))

    def delete_one(self, flt: dict):
        self._record("delete_one")
        idx = self._find_index(flt)
        if idx is None:
            return SimpleNamespace(deleted_count=0)
        del self.docs[idx]
        return SimpleNamespace(deleted_count=1)


@pytest.fixture()
def collection() -> FakeCollection:
    return FakeCollection()
