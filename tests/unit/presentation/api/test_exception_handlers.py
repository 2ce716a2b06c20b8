"""Unit tests for the error kind to HTTP status mapping."""

from datetime import datetime, timezone

import pytest

from fiqhqa.domain.shared.exceptions import ErrorCode
from fiqhqa.domain.user import User
from fiqhqa.presentation.api.exception_handlers import (
    ERROR_CODE_TO_STATUS,
    GENERIC_MESSAGES,
)
from fiqhqa.presentation.api.schemas import ApiResponse, UserResponse, ok


class TestErrorMapping:
    def test_every_error_code_has_status_and_message(self):
        for code in ErrorCode:
            assert code in ERROR_CODE_TO_STATUS
            assert code in GENERIC_MESSAGES

    @pytest.mark.parametrize(
        ("code", "status_code"),
        [
            (ErrorCode.BAD_REQUEST, 400),
            (ErrorCode.INVALID_CREDENTIALS, 401),
            (ErrorCode.UNAUTHORIZED, 401),
            (ErrorCode.NOT_FOUND, 404),
            (ErrorCode.CONFLICT, 409),
            (ErrorCode.INTERNAL, 500),
        ],
    )
    def test_status_codes(self, code, status_code):
        assert ERROR_CODE_TO_STATUS[code] == status_code


class TestSchemas:
    def test_ok_envelope(self):
        assert ok() == {"status": 200, "message": "ok", "data": None}
        assert ok({"id": 1})["data"] == {"id": 1}

    def test_user_response_from_domain(self):
        created = datetime(2024, 1, 1, tzinfo=timezone.utc)
        user = User.reconstitute(1, "amina", "hash", "Amina", created, created)

        response = UserResponse.from_domain(user)

        assert response.model_dump() == {
            "id": 1,
            "username": "amina",
            "name": "Amina",
            "created_at": created,
            "updated_at": created,
        }

    def test_envelope_validates_payload(self):
        created = datetime(2024, 1, 1, tzinfo=timezone.utc)
        envelope = ApiResponse[UserResponse](
            status=200,
            message="ok",
            data={
                "id": 1,
                "username": "amina",
                "created_at": created,
                "updated_at": created,
            },
        )

        assert envelope.data.username == "amina"
        assert envelope.data.name is None
