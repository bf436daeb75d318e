"""Bearer token encoding for StackIt principals.

Tokens are minted by the account service. The API only needs to decode
them; `issue_token` lets tests stand in for the account service.
"""

from datetime import datetime, timedelta, timezone
from uuid import UUID

import jwt
from pydantic import BaseModel, ValidationError

from stackit.config import AuthSettings


class TokenClaims(BaseModel):
    """Claims StackIt reads from a token."""

    sub: UUID
    role: str = "user"
    iat: datetime
    exp: datetime


class JWTError(Exception):
    """Token could not be decoded into claims."""

    pass


def issue_token(subject: UUID, role: str, settings: AuthSettings) -> str:
    """Sign a token for `subject` that expires after the configured days."""
    issued_at = datetime.now(timezone.utc)
    claims = {
        "sub": str(subject),
        "role": role,
        "iat": issued_at,
        "exp": issued_at + timedelta(days=settings.jwt_expiry_days),
    }
    return jwt.encode(claims, settings.jwt_secret, algorithm=settings.jwt_algorithm)


def decode_token(token: str, settings: AuthSettings) -> TokenClaims:
    """Check the signature and expiry of `token` and return its claims.

    Raises:
        JWTError: If the token is expired, tampered with or lacks a subject
    """
    try:
        raw = jwt.decode(
            token,
            settings.jwt_secret,
            algorithms=[settings.jwt_algorithm],
            options={"require": ["sub", "exp"]},
        )
    except jwt.ExpiredSignatureError as e:
        raise JWTError("Token has expired") from e
    except jwt.InvalidTokenError as e:
        raise JWTError(f"Invalid token: {e}") from e

    try:
        return TokenClaims.model_validate(raw)
    except ValidationError as e:
        raise JWTError("Token claims are malformed") from e
