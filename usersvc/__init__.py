"""User CRUD service backed by MongoDB."""
