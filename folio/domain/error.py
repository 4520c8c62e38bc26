"""Domain layer errors."""


class DomainError(Exception):
    """Base domain error."""

    pass


class ValidationError(DomainError):
    """Malformed input, rejected before any store access."""

    pass


class SelfReferenceError(DomainError):
    """Raised when a user tries to follow themselves."""

    def __init__(self, user_id: int):
        self.user_id = user_id
        super().__init__(f"User {user_id} cannot follow themselves")


class AuthorizationError(DomainError):
    """Raised when a user attempts to mutate content they don't own."""

    def __init__(self, resource: str, resource_id: int, user_id: int):
        self.resource = resource
        self.resource_id = resource_id
        self.user_id = user_id
        super().__init__(
            f"User {user_id} is not authorized to modify {resource} {resource_id}"
        )


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")


class StoreUnavailableError(DomainError):
    """Raised when the durable store cannot be reached."""

    pass
