"""Domain layer errors."""


class DomainError(Exception):
    """Base domain error."""

    pass


class ValidationError(DomainError):
    """Domain validation error (malformed vote type, missing content, ...)."""

    pass


class NotAuthorizedError(DomainError):
    """Raised when an authenticated user acts on something they are not entitled to."""

    def __init__(self, action: str, resource: str, resource_id: str, user_id: str):
        self.action = action
        self.resource = resource
        self.resource_id = resource_id
        super().__init__(
            f"User {user_id} is not authorized to {action} {resource} {resource_id}"
        )


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")


class ConflictError(DomainError):
    """Raised when an operation would duplicate existing state."""

    pass


class RateLimitExceededError(DomainError):
    """Raised when an identity exceeds its request budget for an action."""

    def __init__(self, action: str, limit: int, window_seconds: int, retry_after: int):
        self.action = action
        self.limit = limit
        self.window_seconds = window_seconds
        self.retry_after = retry_after
        super().__init__(
            f"Too many {action} requests. Please try again in {retry_after} seconds."
        )
