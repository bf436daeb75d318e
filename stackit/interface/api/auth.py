"""Request authentication helpers shared by the routes."""

from fastapi import HTTPException, status

from stackit.domain.service import JWTService
from stackit.domain.value import Principal


def extract_token(auth_token: str | None, authorization: str | None) -> str | None:
    """Pick the JWT from the auth cookie, falling back to a Bearer header."""
    if auth_token:
        return auth_token
    if authorization and authorization.lower().startswith("bearer "):
        return authorization[7:].strip() or None
    return None


def optional_principal(
    jwt_service: JWTService,
    auth_token: str | None,
    authorization: str | None,
) -> Principal | None:
    """Resolve the caller, or None when unauthenticated."""
    return jwt_service.get_principal_from_token(
        extract_token(auth_token, authorization)
    )


def require_principal(
    jwt_service: JWTService,
    auth_token: str | None,
    authorization: str | None,
    detail: str = "Authentication required",
) -> Principal:
    """Resolve the caller or reject the request with 401."""
    principal = optional_principal(jwt_service, auth_token, authorization)
    if principal is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=detail,
        )
    return principal
