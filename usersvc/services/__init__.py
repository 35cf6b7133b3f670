"""
Use cases for the users API.

Routers (FastAPI endpoints) call these services instead of touching the
collection directly; services raise UserServiceError subclasses that the
routers translate into HTTP responses.
"""
