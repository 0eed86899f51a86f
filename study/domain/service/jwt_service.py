"""JWT token domain service."""

import logfire

from study.config import AuthSettings
from study.util.jwt import JWTError, TokenPayload, decode_token, issue_token

from .base import Service


class JWTService(Service):
    """Domain service for identity tokens.

    The identity service signs tokens; this service verifies them and
    hands the already-authenticated identity to the routes.
    """

    def __init__(self, auth_settings: AuthSettings) -> None:
        """Initialize JWT service.

        Args:
            auth_settings: Authentication settings
        """
        self.auth_settings = auth_settings

    def create_token(self, user_id: str, email: str | None = None) -> str:
        """Create JWT token for user.

        Args:
            user_id: User ID
            email: User email

        Returns:
            JWT token string
        """
        with logfire.span("jwt_service.create_token", user_id=user_id):
            token = issue_token(user_id, email, self.auth_settings)
            logfire.info("JWT token created", user_id=user_id)
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
                payload = decode_token(token, self.auth_settings)
                logfire.info("JWT token verified", user_id=payload.user_id)
                return payload
            except JWTError as e:
                logfire.warn("JWT token verification failed", error=str(e))
                raise

    def get_identity_from_token(self, token: str | None) -> TokenPayload | None:
        """Extract the identity from a JWT token without raising exceptions.

        Args:
            token: JWT token string (optional)

        Returns:
            Token payload if token is valid, None if token is missing or invalid
        """
        if not token:
            return None

        try:
            return self.verify_token(token)
        except JWTError as e:
            # Invalid or expired token, treat as unauthenticated
            logfire.debug(
                "JWT verification failed, treating as unauthenticated", error=str(e)
            )
            return None

    def get_user_id_from_token(self, token: str | None) -> str | None:
        """Extract the user ID from a JWT token without raising exceptions."""
        identity = self.get_identity_from_token(token)
        return identity.user_id if identity else None
