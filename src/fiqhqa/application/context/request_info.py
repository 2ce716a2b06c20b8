"""Request info for per-request trace and user identity."""

from __future__ import annotations

import uuid
from dataclasses import dataclass, replace
from typing import Optional


@dataclass(frozen=True)
class RequestInfo:
    """
    Immutable context for the current request.

    Created once per request by the presentation layer and passed
    explicitly as the first argument of every core call. ``user_id`` is
    set only after the bearer token has been verified.
    """

    trace_id: str
    user_id: Optional[int] = None

    @classmethod
    def create(cls, trace_id: Optional[str] = None) -> RequestInfo:
        return cls(trace_id=trace_id or str(uuid.uuid4()))

    def with_user(self, user_id: int) -> RequestInfo:
        return replace(self, user_id=user_id)

    @property
    def is_authenticated(self) -> bool:
        return self.user_id is not None

    def __str__(self) -> str:
        return f"RequestInfo({self.trace_id}, user={self.user_id})"
