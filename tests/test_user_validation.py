from __future__ import annotations

import pytest
from bson import ObjectId

from usersvc.core.errors import BadRequestError
from usersvc.domain.users import (
    AGE_MESSAGE,
    EMAIL_MESSAGE,
    NAME_MESSAGE,
    User,
    parse_user_id,
    validate,
)


def test_valid_user_has_no_errors():
    assert validate(User(name="Alice", email="alice@example.com", age=30)) == {}


def test_short_name_is_reported():
    errors = validate(User(name="Al", email="a@b.com", age=30))
    assert errors == {"name": NAME_MESSAGE}
    assert NAME_MESSAGE == "Name must be at least 3 characters"


@pytest.mark.parametrize(
    "email",
    [
        "",
        "alice",
        "alice@",
        "@example.com",
        "alice example@x.com",
        "a@-b.com",
        ".alice@example.com",
        "a..b@example.com",
        "alice.@example.com",
    ],
)
def test_invalid_emails_are_rejected(email):
    assert validate(User(name="Alice", email=email, age=30)) == {"email": EMAIL_MESSAGE}


@pytest.mark.parametrize("age,ok", [(0, False), (1, True), (120, True), (121, False), (-5, False)])
def test_age_bounds_are_inclusive(age, ok):
    errors = validate(User(name="Alice", email="alice@example.com", age=age))
    assert (errors == {}) is ok
    if not ok:
        assert errors == {"age": AGE_MESSAGE}


def test_all_failures_are_collected():
    errors = validate(User(name="", email="nope", age=500))
    assert set(errors) == {"name", "email", "age"}


def test_to_json_omits_missing_id_and_renders_hex():
    user = User(name="Alice", email="alice@example.com", age=30)
    assert "_id" not in user.to_json()
    oid = ObjectId()
    stored = User.from_document({"_id": oid, "name": "Alice", "email": "alice@example.com", "age": 30})
    assert stored.to_json()["_id"] == str(oid)
    assert "_id" not in stored.to_document()


def test_parse_user_id_accepts_hex_and_rejects_garbage():
    assert parse_user_id("000000000000000000000000") == ObjectId("000000000000000000000000")
    for raw in ["not-an-id", "", "abc", "zzzzzzzzzzzzzzzzzzzzzzzz", None]:
        with pytest.raises(BadRequestError):
            parse_user_id(raw)
