from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field, StrictInt, StrictStr

from usersvc.core.errors import UserServiceError, ValidationError
from usersvc.services.user_service import UserService

router = APIRouter(prefix="/users", tags=["users"])


class UserPayload(BaseModel):
    """Request body for create/update. `_id` is accepted but never used; no type coercion."""

    id: Any = Field(default=None, alias="_id")
    name: StrictStr
    email: StrictStr
    age: StrictInt


def _get_user_service(request: Request) -> UserService:
    svc = getattr(getattr(request.app, "state", None), "user_service", None)
    if not svc:
        raise RuntimeError("UserService not configured")
    return svc


def _error_response(err: UserServiceError) -> JSONResponse:
    if isinstance(err, ValidationError):
        return JSONResponse(err.errors, status_code=err.status_code)
    return JSONResponse({"detail": err.message}, status_code=err.status_code)


@router.post("", status_code=201)
def create_user(payload: UserPayload, request: Request):
    svc = _get_user_service(request)
    try:
        user_id = svc.create_user(payload.model_dump(by_alias=True))
    except UserServiceError as exc:
        return _error_response(exc)
    return JSONResponse({"_id": user_id}, status_code=201)


@router.get("")
def get_users(request: Request):
    svc = _get_user_service(request)
    try:
        users = svc.list_users()
    except UserServiceError as exc:
        return _error_response(exc)
    return JSONResponse(users)


@router.put("/{user_id}")
def update_user(user_id: str, payload: UserPayload, request: Request):
    svc = _get_user_service(request)
    try:
        svc.update_user(user_id, payload.model_dump(by_alias=True))
    except UserServiceError as exc:
        return _error_response(exc)
    return {"message": "User updated"}


@router.delete("/{user_id}")
def delete_user(user_id: str, request: Request):
    svc = _get_user_service(request)
    try:
        svc.delete_user(user_id)
    except UserServiceError as exc:
        return _error_response(exc)
    return {"message": "User deleted"}
