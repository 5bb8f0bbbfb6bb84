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


class CascadeTimeoutError(DomainError):
    """Raised when a cascade delete does not finish before its deadline.

    Nothing is marked deleted when this is raised.
    """

    def __init__(self, comment_id: str, timeout: float):
        self.comment_id = comment_id
        self.timeout = timeout
        super().__init__(
            f"Cascade delete of comment {comment_id} exceeded {timeout}s deadline"
        )
