"""Authentication router for login."""

from fastapi import APIRouter, status

from fiqhqa.application.dtos import LoginCommand
from fiqhqa.presentation.api.dependencies import AuthServiceDep, ReqInfo
from fiqhqa.presentation.api.schemas import (
    ApiResponse,
    LoginRequest,
    LoginResponse,
    UserResponse,
    ok,
)

router = APIRouter()


@router.post(
    "/login",
    summary="Authenticate user",
    response_model=ApiResponse[LoginResponse],
    responses={
        status.HTTP_200_OK: {"description": "Login successful"},
        status.HTTP_400_BAD_REQUEST: {"description": "Malformed request"},
        status.HTTP_401_UNAUTHORIZED: {"description": "Invalid credentials"},
    },
)
async def login(
    request: LoginRequest,
    info: ReqInfo,
    auth_service: AuthServiceDep,
) -> dict:
    """
    Authenticate with username and password.

    Returns a bearer access token and the user's public fields. Unknown
    usernames and wrong passwords produce the same error.
    """
    result = await auth_service.login(
        info,
        LoginCommand(username=request.username, password=request.password),
    )
    return ok(
        LoginResponse(
            access_token=result.access_token,
            token_type=result.token_type,
            expires_in=result.expires_in,
            user=UserResponse.from_domain(result.user),
        ),
    )
