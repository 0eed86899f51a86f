"""Domain layer errors."""


class DomainError(Exception):
    """Base domain error."""

    pass


class ValidationError(DomainError):
    """Domain validation error."""

    pass


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")


class NotAuthorizedError(DomainError):
    """Raised when a user attempts an action reserved for someone else."""

    def __init__(self, action: str, resource: str, resource_id: str, user_id: str):
        self.action = action
        self.resource = resource
        self.resource_id = resource_id
        self.user_id = user_id
        super().__init__(
            f"User {user_id} is not authorized to {action} {resource} {resource_id}"
        )


class ConflictError(DomainError):
    """Raised when a write lost a race against a concurrent write.

    Acceptance transitions retry on this error; other callers surface it.
    """

    pass


class InvariantViolationError(DomainError):
    """Raised when a write would break a data invariant.

    Never caused by normal use. Indicates a defect in the atomicity of
    the write path and must not be silently corrected.
    """

    pass
