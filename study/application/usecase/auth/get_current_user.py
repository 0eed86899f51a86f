"""Get current user use case."""

from uuid import UUID

from pydantic import BaseModel

from study.application.usecase.base import BaseUseCase
from study.domain.service import JWTService
from study.util.jwt import JWTError


class GetCurrentUserRequest(BaseModel):
    """Get current user request."""

    token: str  # JWT token from the identity service


class GetCurrentUserResponse(BaseModel):
    """Get current user response."""

    user_id: str
    email: str | None


class GetCurrentUserUseCase(BaseUseCase):
    """Use case for resolving the authenticated identity behind a token.

    Users live in the identity service, so the token's claims are the
    whole identity here.
    """

    def __init__(self, jwt_service: JWTService) -> None:
        """Initialize get current user use case.

        Args:
            jwt_service: JWT token domain service
        """
        self.jwt_service = jwt_service

    async def execute(self, request: GetCurrentUserRequest) -> GetCurrentUserResponse:
        """Execute get current user flow.

        Args:
            request: Request with JWT token

        Returns:
            Identity carried by the token

        Raises:
            JWTError: If token is invalid, expired or has a malformed subject
        """
        payload = self.jwt_service.verify_token(request.token)

        try:
            user_id = UUID(payload.user_id)
        except ValueError:
            raise JWTError("Invalid token subject")

        return GetCurrentUserResponse(user_id=str(user_id), email=payload.email)
