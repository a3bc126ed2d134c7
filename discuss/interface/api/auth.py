"""Request authentication helpers."""

from fastapi import HTTPException, status

from discuss.domain.service import JWTService
from discuss.util.jwt import TokenPayload


def pick_token(authorization: str | None, auth_token: str | None) -> str | None:
    """Pick the JWT from an ``Authorization: Bearer`` header, else the auth cookie."""
    if authorization:
        scheme, _, credentials = authorization.partition(" ")
        if scheme.lower() == "bearer" and credentials.strip():
            return credentials.strip()
    return auth_token


def optional_viewer(
    jwt_service: JWTService, authorization: str | None, auth_token: str | None
) -> str | None:
    """User ID of the caller, or None for anonymous or invalid credentials."""
    return jwt_service.get_user_id_from_token(pick_token(authorization, auth_token))


def require_user(
    jwt_service: JWTService,
    authorization: str | None,
    auth_token: str | None,
    action: str,
) -> TokenPayload:
    """Token payload of the caller.

    Raises:
        HTTPException: 401 if no valid token was sent
    """
    payload = jwt_service.get_payload_from_token(pick_token(authorization, auth_token))
    if not payload:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=f"Authentication required to {action}",
        )
    return payload
