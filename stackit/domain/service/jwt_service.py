"""Principal resolution from bearer tokens."""

import logfire

from stackit.config import AuthSettings
from stackit.domain.value import Principal, Role, UserId
from stackit.util.jwt import JWTError, TokenClaims, decode_token, issue_token

from .base import Service


class JWTService(Service):
    """Turns the identity layer's tokens into principals.

    Once the signature checks out the claims are trusted as-is; the core
    never looks users up.
    """

    def __init__(self, auth_settings: AuthSettings) -> None:
        self.auth_settings = auth_settings

    def issue_token(self, user_id: UserId, role: Role = Role.USER) -> str:
        """Sign a token for a principal, as the account service would.

        The API never mints tokens itself; tests use this to authenticate.
        """
        token = issue_token(user_id, role.value, self.auth_settings)
        logfire.debug("Token issued", user_id=str(user_id), role=role.value)
        return token

    def decode(self, token: str) -> TokenClaims:
        """Decode a token.

        Raises:
            JWTError: If the token is invalid or expired
        """
        with logfire.span("jwt_service.decode"):
            return decode_token(token, self.auth_settings)

    def get_principal_from_token(self, token: str | None) -> Principal | None:
        """Resolve the acting principal, or None for a missing or bad token.

        An unknown role claim is treated like a bad token.
        """
        if not token:
            return None

        try:
            claims = self.decode(token)
            role = Role(claims.role)
        except (JWTError, ValueError) as e:
            logfire.debug("Rejected bearer token", error=str(e))
            return None

        return Principal(user_id=UserId(claims.sub), role=role)
