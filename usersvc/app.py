"""Application factory and process entry point for the users API."""
from __future__ import annotations

import uvicorn
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pymongo.collection import Collection

from usersvc.core.config import HOST, PORT, get_settings
from usersvc.core.errors import ConfigurationError, DatabaseConnectionError
from usersvc.core.logger import get_logger
from usersvc.db.connection import connect
from usersvc.repositories.user_repository import UserRepository
from usersvc.routers import users as users_router
from usersvc.services.user_service import UserService

logger = get_logger(__name__)


def _jsonable_errors(exc: RequestValidationError) -> list[dict]:
    return [
        {"loc": list(err.get("loc", ())), "msg": err.get("msg", ""), "type": err.get("type", "")}
        for err in exc.errors()
    ]


async def _malformed_body(request: Request, exc: RequestValidationError) -> JSONResponse:
    # Body errors are answered with 400 like every other client error.
    errors = _jsonable_errors(exc)
    logger.info("Rejected request body on %s: %s", request.url.path, errors)
    return JSONResponse({"detail": errors}, status_code=400)


def create_app(collection: Collection) -> FastAPI:
    """Build the FastAPI app around an already-connected users collection."""
    app = FastAPI(title="Users API")
    app.state.user_service = UserService(UserRepository(collection))
    app.add_exception_handler(RequestValidationError, _malformed_body)
    app.include_router(users_router.router)
    return app


def main() -> None:
    logger.info("Starting server...")
    try:
        settings = get_settings()
        collection = connect(settings)
    except (ConfigurationError, DatabaseConnectionError) as exc:
        logger.error("Startup aborted: %s", exc)
        raise SystemExit(f"Failed to start server: {exc}") from exc
    app = create_app(collection)
    uvicorn.run(app, host=HOST, port=PORT)
