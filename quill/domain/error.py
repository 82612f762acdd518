"""Domain layer errors."""


class DomainError(Exception):
    """Base domain error."""

    pass


class UnauthorizedError(DomainError):
    """Raised when an operation requires an authenticated actor."""

    def __init__(self, message: str = "Authentication required"):
        super().__init__(message)


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")


class InvalidOperationError(DomainError):
    """Raised when a request violates a business rule.

    Examples: following yourself, posting a blank comment, replying to a reply.
    """

    def __init__(self, message: str):
        super().__init__(message)


class ConflictError(DomainError):
    """Raised by repositories when a uniqueness constraint rejects a write."""

    def __init__(self, message: str = "Duplicate record"):
        super().__init__(message)


class TransientStoreError(DomainError):
    """Raised by repositories when the store is temporarily unreachable.

    Eligible for a bounded retry; surfaced as a generic failure afterwards.
    """

    def __init__(self, message: str = "Store temporarily unavailable"):
        super().__init__(message)
