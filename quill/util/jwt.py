"""Session token helpers.

Session tokens are minted by the identity service and carried in a cookie;
this API only needs to check the signature and read the actor out of them.
``create_token`` signs tokens the same way for tooling and tests.
"""

from datetime import datetime, timedelta, timezone
from uuid import UUID

import jwt
from pydantic import BaseModel

from quill.config import AuthSettings


class TokenPayload(BaseModel):
    """Claims carried by a session token."""

    user_id: str
    handle: str
    exp: datetime

    @property
    def actor_id(self) -> UUID:
        """The ``user_id`` claim as a UUID.

        Raises:
            ValueError: If the claim is not a UUID
        """
        return UUID(self.user_id)


class JWTError(Exception):
    """Session token could not be accepted."""

    pass


def create_token(
    user_id: str,
    handle: str,
    settings: AuthSettings,
    expires_in: timedelta | None = None,
) -> str:
    """Sign a session token.

    Args:
        user_id: Actor ID
        handle: Actor handle
        settings: Authentication settings
        expires_in: Lifetime (defaults to ``settings.jwt_expiry_days``)

    Returns:
        Encoded token
    """
    lifetime = expires_in or timedelta(days=settings.jwt_expiry_days)
    claims = {
        "user_id": user_id,
        "handle": handle,
        "exp": datetime.now(timezone.utc) + lifetime,
    }
    return jwt.encode(claims, settings.jwt_secret, algorithm=settings.jwt_algorithm)


def verify_token(token: str, settings: AuthSettings) -> TokenPayload:
    """Check a session token's signature and expiry and return its claims.

    Raises:
        JWTError: If the token is expired, tampered with or malformed
    """
    try:
        claims = jwt.decode(
            token, settings.jwt_secret, algorithms=[settings.jwt_algorithm]
        )
    except jwt.ExpiredSignatureError:
        raise JWTError("Token has expired")
    except jwt.InvalidTokenError:
        raise JWTError("Invalid token")

    try:
        return TokenPayload.model_validate(claims)
    except ValueError:
        raise JWTError("Token is missing session claims")
