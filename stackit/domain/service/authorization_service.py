"""Authorization domain service.

One place for the two rules every write path relies on: the actor must be
allowed to participate at all, and some actions are reserved for the owner
of the resource.
"""

import logfire

from stackit.domain.error import ForbiddenError
from stackit.domain.value import Principal, UserId

from .base import Service


class AuthorizationService(Service):
    """Domain service for authorization checks."""

    def ensure_can_participate(self, principal: Principal, action: str) -> None:
        """Require a role that may write content or vote.

        Args:
            principal: Acting principal
            action: Action being attempted (for error messages)

        Raises:
            ForbiddenError: If the principal is a guest
        """
        if not principal.can_participate:
            logfire.warn(
                "Guest attempted write action",
                user_id=str(principal.user_id),
                role=principal.role.value,
                action=action,
            )
            raise ForbiddenError(str(principal.user_id), action)

    def ensure_owner(
        self,
        principal: Principal,
        action: str,
        resource: str,
        resource_id: str,
        owner_id: UserId,
    ) -> None:
        """Require the principal to own the resource.

        Ownership is decided on the server-side owner ID only; the
        principal's role grants no bypass.

        Args:
            principal: Acting principal
            action: Action being attempted
            resource: Resource kind (e.g. "question")
            resource_id: Resource ID
            owner_id: Owner recorded on the resource

        Raises:
            ForbiddenError: If the principal is not the owner
        """
        if principal.user_id != owner_id:
            logfire.warn(
                "Ownership check failed",
                action=action,
                resource=resource,
                resource_id=resource_id,
                user_id=str(principal.user_id),
                owner_id=str(owner_id),
            )
            raise ForbiddenError(
                str(principal.user_id), action, resource, resource_id
            )
