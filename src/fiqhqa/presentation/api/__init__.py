"""REST API presentation layer for FiqhQA.

This package provides a FastAPI-based REST API for the FiqhQA backend.

Structure:
    api/
    ├── app.py                # FastAPI application factory
    ├── config.py             # API configuration
    ├── dependencies.py       # Dependency injection
    ├── exception_handlers.py # Error kind -> envelope mapping
    ├── middleware.py         # Trace id and request logging
    ├── routers/              # API route handlers
    └── schemas/              # Pydantic request/response models
"""

from fiqhqa.presentation.api.app import create_app

__all__ = ["create_app"]
