"""Request-scoped wiring for the HTTP layer.

Routers only see ``AuthServiceDep``, ``UserServiceDep`` and the two
``RequestInfo`` flavours. Everything below them (database, hashing,
token signing) is assembled here from the active settings, so tests
swap a single provider through ``app.dependency_overrides``.
"""

import logging
from typing import Annotated, Optional

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from fiqhqa.application.context import RequestInfo
from fiqhqa.application.ports import TransactionManager
from fiqhqa.application.services import AuthenticationService, UserService
from fiqhqa.infrastructure.persistence.sqlalchemy import (
    Database,
    SQLAlchemyTransactionManager,
)
from fiqhqa.presentation.api.config import get_api_settings
from fiqhqa_auth import JWTService, PasswordHashingService
from fiqhqa_config.settings import Settings

logger = logging.getLogger(__name__)

# auto_error off: a missing header must go through MissingTokenError
bearer_scheme = HTTPBearer(auto_error=False)

SettingsDep = Annotated[Settings, Depends(get_api_settings)]
BearerCredentials = Annotated[
    Optional[HTTPAuthorizationCredentials],
    Depends(bearer_scheme),
]


def get_database(request: Request) -> Database:
    """The database this app was built with, see ``create_app``."""
    return request.app.state.database


def get_transaction_manager(
    database: Annotated[Database, Depends(get_database)],
) -> TransactionManager:
    return SQLAlchemyTransactionManager(database.session_maker)


TransactionManagerDep = Annotated[
    TransactionManager,
    Depends(get_transaction_manager),
]


def get_password_service(settings: SettingsDep) -> PasswordHashingService:
    return PasswordHashingService(rounds=settings.password_hash_rounds)


def get_jwt_service(settings: SettingsDep) -> JWTService:
    return JWTService(
        secret_key=settings.jwt_secret_key.get_secret_value(),
        access_token_expire_minutes=settings.jwt_access_token_expire_minutes,
    )


PasswordServiceDep = Annotated[PasswordHashingService, Depends(get_password_service)]
JWTServiceDep = Annotated[JWTService, Depends(get_jwt_service)]


def get_authentication_service(
    transaction_manager: TransactionManagerDep,
    password_service: PasswordServiceDep,
    jwt_service: JWTServiceDep,
) -> AuthenticationService:
    return AuthenticationService(
        transaction_manager=transaction_manager,
        password_service=password_service,
        jwt_service=jwt_service,
    )


def get_user_service(
    transaction_manager: TransactionManagerDep,
    password_service: PasswordServiceDep,
) -> UserService:
    return UserService(
        transaction_manager=transaction_manager,
        password_service=password_service,
    )


AuthServiceDep = Annotated[AuthenticationService, Depends(get_authentication_service)]
UserServiceDep = Annotated[UserService, Depends(get_user_service)]


def get_request_info(request: Request) -> RequestInfo:
    """Anonymous request info carrying the trace id chosen by the middleware."""
    return RequestInfo.create(getattr(request.state, "trace_id", None))


ReqInfo = Annotated[RequestInfo, Depends(get_request_info)]


def get_authenticated_request_info(
    request: Request,
    info: ReqInfo,
    auth_service: AuthServiceDep,
    credentials: BearerCredentials,
) -> RequestInfo:
    """Resolve the caller from the bearer token.

    Raises ``MissingTokenError`` without a token and ``InvalidTokenError``
    for anything that does not verify. The user id is also stored on
    ``request.state`` for the access log.
    """
    token = credentials.credentials if credentials else None
    user_id = auth_service.verify_access_token(token)

    request.state.user_id = user_id
    return info.with_user(user_id)


AuthenticatedReqInfo = Annotated[RequestInfo, Depends(get_authenticated_request_info)]
