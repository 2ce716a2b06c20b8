"""User router for registration and profile management."""

from fastapi import APIRouter, status

from fiqhqa.application.dtos import (
    AddUserCommand,
    ChangePasswordCommand,
    UpdateUserCommand,
)
from fiqhqa.presentation.api.dependencies import (
    AuthenticatedReqInfo,
    ReqInfo,
    UserServiceDep,
)
from fiqhqa.presentation.api.schemas import (
    AddUserRequest,
    ApiResponse,
    ChangePasswordRequest,
    UpdateUserRequest,
    UserResponse,
    ok,
)

router = APIRouter()


@router.post(
    "",
    summary="Register a new user",
    response_model=ApiResponse[UserResponse],
    responses={
        status.HTTP_400_BAD_REQUEST: {"description": "Invalid username or password"},
        status.HTTP_409_CONFLICT: {"description": "Username already registered"},
    },
)
async def add_user(
    request: AddUserRequest,
    info: ReqInfo,
    user_service: UserServiceDep,
) -> dict:
    user = await user_service.add(
        info,
        AddUserCommand(
            username=request.username,
            password=request.password,
            name=request.name,
        ),
    )
    return ok(UserResponse.from_domain(user))


@router.get(
    "/me",
    summary="Get current user",
    response_model=ApiResponse[UserResponse],
    responses={
        status.HTTP_401_UNAUTHORIZED: {"description": "Not authenticated"},
        status.HTTP_404_NOT_FOUND: {"description": "User no longer exists"},
    },
)
async def get_me(info: AuthenticatedReqInfo, user_service: UserServiceDep) -> dict:
    user = await user_service.get_by_id(info, info.user_id)
    return ok(UserResponse.from_domain(user))


@router.put(
    "/me",
    summary="Update current user's profile",
    response_model=ApiResponse[UserResponse],
    responses={
        status.HTTP_401_UNAUTHORIZED: {"description": "Not authenticated"},
        status.HTTP_404_NOT_FOUND: {"description": "User no longer exists"},
        status.HTTP_409_CONFLICT: {"description": "Username already registered"},
    },
)
async def update_me(
    request: UpdateUserRequest,
    info: AuthenticatedReqInfo,
    user_service: UserServiceDep,
) -> dict:
    user = await user_service.update(
        info,
        UpdateUserCommand(
            id=info.user_id,
            username=request.username,
            name=request.name,
        ),
    )
    return ok(UserResponse.from_domain(user))


@router.patch(
    "/me/password",
    summary="Change current user's password",
    response_model=ApiResponse[None],
    responses={
        status.HTTP_400_BAD_REQUEST: {"description": "New password too weak"},
        status.HTTP_401_UNAUTHORIZED: {
            "description": "Current password incorrect or not authenticated",
        },
    },
)
async def change_my_password(
    request: ChangePasswordRequest,
    info: AuthenticatedReqInfo,
    user_service: UserServiceDep,
) -> dict:
    await user_service.change_password(
        info,
        ChangePasswordCommand(
            id=info.user_id,
            current_password=request.current_password,
            new_password=request.new_password,
        ),
    )
    return ok()
