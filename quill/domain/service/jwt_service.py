"""JWT token domain service (identity resolver)."""

import logfire

from quill.config import AuthSettings
from quill.domain.value import UserId
from quill.util.jwt import JWTError, TokenPayload, create_token, verify_token

from .base import Service


class JWTService(Service):
    """Resolves the current actor from a session token."""

    def __init__(self, auth_settings: AuthSettings) -> None:
        """Initialize JWT service.

        Args:
            auth_settings: Authentication settings
        """
        self.auth_settings = auth_settings

    def create_token(self, user_id: str, handle: str) -> str:
        """Create JWT token for user.

        Args:
            user_id: User ID
            handle: User handle

        Returns:
            JWT token string
        """
        with logfire.span("jwt_service.create_token", user_id=user_id, handle=handle):
            token = create_token(user_id, handle, self.auth_settings)
            logfire.info("JWT token created", user_id=user_id, handle=handle)
            return token

    def verify_token(self, token: str) -> TokenPayload:
        """Verify JWT token and extract payload.

        Args:
            token: JWT token string

        Returns:
            Token payload

        Raises:
            JWTError: If token is invalid or expired
        """
        with logfire.span("jwt_service.verify_token"):
            try:
                payload = verify_token(token, self.auth_settings)
                logfire.info(
                    "JWT token verified", user_id=payload.user_id, handle=payload.handle
                )
                return payload
            except JWTError as e:
                logfire.warn("JWT token verification failed", error=str(e))
                raise

    def resolve_actor(self, token: str | None) -> UserId | None:
        """Resolve the current actor without raising.

        Missing, invalid, expired or malformed tokens all resolve to anonymous.

        Args:
            token: JWT token string (optional)

        Returns:
            Actor ID if the token is valid, None for anonymous
        """
        if not token:
            return None

        try:
            payload = self.verify_token(token)
            return UserId(payload.actor_id)
        except (JWTError, ValueError) as e:
            logfire.debug(
                "JWT verification failed, treating as anonymous", error=str(e)
            )
            return None
