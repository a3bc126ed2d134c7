"""JWT token utilities.

Tokens are minted by the external auth provider. We verify the signature
and read the subject (user id) from them.
"""

from datetime import datetime

import jwt
from pydantic import BaseModel

from discuss.config import AuthSettings


class TokenPayload(BaseModel):
    """JWT token payload."""

    sub: str  # User ID
    email: str | None = None
    exp: datetime
    user_metadata: dict = {}

    @property
    def user_id(self) -> str:
        """User ID carried in the subject claim."""
        return self.sub

    @property
    def username(self) -> str:
        """Display name: profile username, else the email local part, else the ID."""
        username = self.user_metadata.get("username")
        if username:
            return str(username)
        if self.email:
            return self.email.split("@", 1)[0]
        return self.sub


class JWTError(Exception):
    """JWT-related error."""

    pass


def create_token(
    user_id: str,
    settings: AuthSettings,
    expires_at: datetime,
    email: str | None = None,
    username: str | None = None,
) -> str:
    """Create a JWT token signed like the auth provider's tokens.

    Used by tests and local tooling.

    Args:
        user_id: User ID
        settings: Authentication settings
        expires_at: Expiry timestamp
        email: Optional email claim
        username: Optional profile username

    Returns:
        Encoded JWT token
    """
    payload: dict = {"sub": user_id, "exp": expires_at}
    if email:
        payload["email"] = email
    if username:
        payload["user_metadata"] = {"username": username}
    if settings.jwt_audience:
        payload["aud"] = settings.jwt_audience

    return jwt.encode(payload, settings.jwt_secret, algorithm=settings.jwt_algorithm)


def verify_token(token: str, settings: AuthSettings) -> TokenPayload:
    """Verify and decode a JWT token.

    Args:
        token: JWT token to verify
        settings: Authentication settings

    Returns:
        Token payload if valid

    Raises:
        JWTError: If token is invalid or expired
    """
    try:
        payload = jwt.decode(
            token,
            settings.jwt_secret,
            algorithms=[settings.jwt_algorithm],
            audience=settings.jwt_audience,
            options={"verify_aud": settings.jwt_audience is not None},
        )
        return TokenPayload(**payload)
    except jwt.ExpiredSignatureError:
        raise JWTError("Token has expired")
    except jwt.InvalidTokenError:
        raise JWTError("Invalid token")
