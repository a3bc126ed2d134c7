"""Domain layer errors."""


class DomainError(Exception):
    """Base domain error."""

    pass


class ValidationError(DomainError):
    """Domain validation error."""

    pass


class InvalidIdentifierError(ValidationError):
    """Raised when a client-supplied identifier is not a positive integer."""

    def __init__(self, resource: str, value: str):
        self.resource = resource
        self.value = value
        super().__init__(f"Invalid {resource} ID")


class NotAuthorizedError(DomainError):
    """Raised when a user attempts to change content they don't own."""

    def __init__(self, resource: str, resource_id: str, user_id: str):
        self.resource = resource
        super().__init__(
            f"User {user_id} is not authorized to modify {resource} {resource_id}"
        )


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")


class AggregationError(DomainError):
    """Raised when batched vote aggregation fails.

    Aggregation either fully succeeds or fully fails; no partial maps are
    ever returned to callers.
    """

    def __init__(self, target_type: str, cause: Exception):
        self.target_type = target_type
        self.cause = cause
        super().__init__(f"Vote aggregation failed for {target_type} targets")
