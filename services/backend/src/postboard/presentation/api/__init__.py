"""REST API presentation layer for Postboard.

This package provides a FastAPI-based REST API for the Postboard application.

Structure:
    api/
    ├── app.py               # FastAPI application factory
    ├── config.py            # Settings access for request handlers
    ├── dependencies.py      # Dependency injection
    ├── exception_handlers.py # Error code to HTTP status mapping
    ├── routers/             # API route handlers
    └── schemas/             # Pydantic request/response schemas
"""

from postboard.presentation.api.app import create_app

__all__ = ["create_app"]
