"""Common schemas shared across API endpoints."""

from typing import Any, Generic, Optional, TypeVar

from pydantic import BaseModel, ConfigDict, Field

T = TypeVar("T")


class ApiResponse(BaseModel, Generic[T]):
    """Envelope wrapping every response body."""

    status: int = Field(..., description="HTTP status code")
    message: str = Field(..., description="'ok' or an error message")
    data: Optional[T] = Field(None, description="Payload, null on errors")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {"status": 200, "message": "ok", "data": None},
        },
    )


def ok(data: Any = None) -> dict[str, Any]:
    """Build a success envelope."""
    return {"status": 200, "message": "ok", "data": data}


class HealthResponse(BaseModel):
    """Health check response schema."""

    status: str = Field(..., description="Health status")
    version: str = Field(..., description="API version")
