"""Domain-specific exceptions — framework-independent."""


class EntityNotFoundError(Exception):
    """Raised when a requested entity is not in its category's registry."""

    def __init__(self, entity_type: str, entity_name: str):
        self.entity_type = entity_type
        self.entity_name = entity_name
        super().__init__(f"{entity_type} '{entity_name}' not found")


class ValidationError(Exception):
    """Raised when user input fails a presence check (empty name, content, credentials)."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class NotAuthenticatedError(Exception):
    """Raised when an operation needs a session and none is stored."""

    def __init__(self, message: str = "Not authenticated"):
        self.message = message
        super().__init__(message)


class CorruptStateError(Exception):
    """Raised when stored session data cannot be parsed.

    The session keys have already been cleared when this is raised.
    """

    def __init__(self, key: str, reason: str):
        self.key = key
        self.reason = reason
        super().__init__(f"Stored '{key}' is corrupt: {reason}")
