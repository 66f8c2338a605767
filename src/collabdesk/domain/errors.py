"""Domain-specific exception classes for the collaboration inbox.

Each class maps to one failure category surfaced to callers.  Agent and
notification failures are recovered locally and have no exception class here.
"""

from collabdesk.domain.types import ChatState


class CollabDeskError(Exception):
    """Base class for all domain errors."""


class InvalidInputError(CollabDeskError):
    """Raised when required input is missing or malformed."""


class NotFoundError(CollabDeskError):
    """Raised when a referenced record does not exist.

    Attributes:
        entity: The kind of record that was looked up (e.g. ``"inquiry"``).
        key: The identifier that was not found.
    """

    def __init__(self, entity: str, key: str) -> None:
        self.entity = entity
        self.key = key
        super().__init__(f"{entity.capitalize()} not found")


class UnauthorizedError(CollabDeskError):
    """Raised when the acting identity does not own the resource."""

    def __init__(self, message: str = "Unauthorized") -> None:
        super().__init__(message)


class ConflictError(CollabDeskError):
    """Raised when an operation is invalid for the record's current state."""


class UsernameTakenError(ConflictError):
    """Raised when another influencer already holds the requested username."""

    def __init__(self, message: str = "Username already taken") -> None:
        super().__init__(message)


class InvalidTransitionError(ConflictError):
    """Raised when a chat event is not allowed from the current chat state.

    Attributes:
        current_state: The chat state when the event was attempted.
        event: The event that was rejected.
    """

    def __init__(
        self,
        current_state: ChatState,
        event: str,
        message: str | None = None,
    ) -> None:
        self.current_state = current_state
        self.event = event
        super().__init__(
            message or f"Cannot apply event '{event}' in chat state '{current_state}'"
        )


class ChatClosedError(InvalidTransitionError):
    """Raised when posting to, or closing, a conversation that is already closed."""

    def __init__(self, event: str) -> None:
        message = (
            "This conversation is already closed"
            if event == "close"
            else "This conversation has been closed"
        )
        super().__init__(ChatState.CLOSED, event, message)


class StorageError(CollabDeskError):
    """Raised when a repository operation fails."""
