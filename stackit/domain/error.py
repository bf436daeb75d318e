"""Domain layer errors."""

from pydantic import ValidationError


class DomainError(Exception):
    """Base domain error."""

    pass


class InvalidInputError(DomainError):
    """Raised when a request carries a malformed value or misses a required field."""

    @classmethod
    def from_validation(cls, exc: ValidationError) -> "InvalidInputError":
        """Wrap an entity rejecting user-supplied values."""
        problems = "; ".join(
            f"{'.'.join(str(loc) for loc in err['loc'])}: {err['msg']}"
            for err in exc.errors()
        )
        return cls(f"Invalid input: {problems}")


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")


class ReferentialMismatchError(DomainError):
    """Raised when an answer does not belong to the question it was addressed through."""

    def __init__(self, answer_id: str, question_id: str):
        self.answer_id = answer_id
        self.question_id = question_id
        super().__init__(f"Answer {answer_id} does not belong to question {question_id}")


class ForbiddenError(DomainError):
    """Raised when the acting user may not perform an operation on a resource."""

    def __init__(
        self,
        user_id: str,
        action: str,
        resource: str | None = None,
        resource_id: str | None = None,
    ):
        self.user_id = user_id
        self.action = action
        self.resource = resource
        self.resource_id = resource_id
        target = f" {resource} {resource_id}" if resource else ""
        super().__init__(f"User {user_id} is not authorized to {action}{target}")


class AlreadyAcceptedError(DomainError):
    """Raised when a question already has an accepted answer."""

    def __init__(self, question_id: str, accepted_answer_id: str | None = None):
        self.question_id = question_id
        self.accepted_answer_id = accepted_answer_id
        super().__init__(f"Question {question_id} already has an accepted answer")


class ConflictError(DomainError):
    """Raised when the storage layer detects a concurrent write to the same record."""

    pass
