"""
FastAPI routers for the users API.

Each module exposes an APIRouter that is included by create_app(); endpoints
fetch their service from app.state and translate service errors into
responses.
"""
