from typing import Callable, Optional
from fastapi import Depends, Request, Response
from fastapi.routing import APIRoute
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from fastapi.security.utils import get_authorization_scheme_param
from bestodo.auth.utils import PasswordHasher, TokenService, TokenError
from bestodo.errors import AuthenticationError
from bestodo.schemas.token import AuthenticatedUser
import logging

logger = logging.getLogger(__name__)

security = HTTPBearer(auto_error=False)


def get_token_service(request: Request) -> TokenService:
    return request.app.state.token_service


def get_password_hasher(request: Request) -> PasswordHasher:
    return request.app.state.password_hasher


def authenticate_token(token: Optional[str], token_service: TokenService) -> str:
    """
    Return the user id behind a bearer token.

    Every rejection carries the same message; the actual reason is only
    logged.
    """
    if not token:
        logger.debug("Rejected request without bearer token")
        raise AuthenticationError()

    try:
        return token_service.validate(token)
    except TokenError as e:
        logger.debug(f"Rejected bearer token: {e}")
        raise AuthenticationError()


def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
    token_service: TokenService = Depends(get_token_service),
) -> AuthenticatedUser:
    """Resolve the caller from the Authorization header"""
    token = credentials.credentials if credentials else None
    return AuthenticatedUser(id=authenticate_token(token, token_service))


class AuthGateRoute(APIRoute):
    """
    Route that rejects unauthenticated requests before FastAPI reads the
    body, so a missing token is a 401 even when the payload is malformed.
    """

    def get_route_handler(self) -> Callable:
        original_route_handler = super().get_route_handler()

        async def route_handler(request: Request) -> Response:
            scheme, token = get_authorization_scheme_param(request.headers.get("Authorization"))
            if scheme.lower() != "bearer":
                token = None
            authenticate_token(token, get_token_service(request))
            return await original_route_handler(request)

        return route_handler
