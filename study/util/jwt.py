"""Identity token utilities.

Tokens are signed by the campus identity service. This service verifies
them; ``issue_token`` exists for local development and tests.
"""

from datetime import datetime, timedelta, timezone

import jwt
from pydantic import BaseModel

from study.config import AuthSettings

REQUIRED_CLAIMS = ["user_id", "exp"]


class TokenPayload(BaseModel):
    """Claims carried by an identity token."""

    user_id: str
    email: str | None = None
    exp: datetime


class JWTError(Exception):
    """Identity token could not be trusted."""

    pass


def issue_token(user_id: str, email: str | None, settings: AuthSettings) -> str:
    """Sign an identity token the way the identity service does.

    Args:
        user_id: Subject user ID
        email: Subject email, if the identity service shares it
        settings: Authentication settings

    Returns:
        Encoded JWT
    """
    claims = {
        "user_id": user_id,
        "email": email,
        "exp": datetime.now(timezone.utc) + timedelta(days=settings.jwt_expiry_days),
    }
    if settings.jwt_issuer:
        claims["iss"] = settings.jwt_issuer

    return jwt.encode(claims, settings.jwt_secret, algorithm=settings.jwt_algorithm)


def decode_token(token: str, settings: AuthSettings) -> TokenPayload:
    """Verify an identity token's signature, expiry and issuer.

    Raises:
        JWTError: If the token is expired, forged, or missing claims
    """
    try:
        claims = jwt.decode(
            token,
            settings.jwt_secret,
            algorithms=[settings.jwt_algorithm],
            issuer=settings.jwt_issuer,
            leeway=settings.jwt_leeway_seconds,
            options={"require": REQUIRED_CLAIMS},
        )
    except jwt.ExpiredSignatureError:
        raise JWTError("Token has expired")
    except jwt.MissingRequiredClaimError as e:
        raise JWTError(f"Invalid token: missing {e.claim} claim")
    except jwt.InvalidIssuerError:
        raise JWTError("Invalid token issuer")
    except jwt.InvalidTokenError:
        raise JWTError("Invalid token")

    return TokenPayload(**claims)
