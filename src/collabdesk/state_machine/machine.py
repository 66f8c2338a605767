"""ChatStateMachine class with trigger, history, and valid_events."""

from __future__ import annotations

from collabdesk.domain.errors import ChatClosedError, InvalidTransitionError
from collabdesk.domain.types import ChatState
from collabdesk.state_machine.transitions import TERMINAL_STATES, TRANSITIONS


class ChatStateMachine:
    """Finite state machine governing an inquiry's chat sub-state.

    The machine is rebuilt from the persisted ``chat_active`` flag for every
    operation; it validates the event before any side effect happens.

    Usage::

        sm = ChatStateMachine.for_inquiry(chat_active=True)
        sm.trigger("post_message")   # -> OPEN
        sm.trigger("close")          # -> CLOSED (terminal)
        sm.trigger("post_message")   # raises ChatClosedError
    """

    def __init__(self, initial_state: ChatState = ChatState.OPEN) -> None:
        self._state: ChatState = initial_state
        self._history: list[tuple[ChatState, str, ChatState]] = []

    @classmethod
    def for_inquiry(cls, chat_active: bool) -> ChatStateMachine:
        """Return a machine positioned at the state implied by *chat_active*."""
        return cls(ChatState.OPEN if chat_active else ChatState.CLOSED)

    @property
    def state(self) -> ChatState:
        """Return the current chat state."""
        return self._state

    @property
    def is_terminal(self) -> bool:
        """Return True once the chat is closed."""
        return self._state in TERMINAL_STATES

    @property
    def history(self) -> list[tuple[ChatState, str, ChatState]]:
        """Return a copy of the ``(from_state, event, to_state)`` history."""
        return list(self._history)

    def trigger(self, event: str) -> ChatState:
        """Apply an event to the current state and transition.

        Args:
            event: The event string (e.g. ``"close"``).

        Returns:
            The new state after the transition.

        Raises:
            ChatClosedError: If the chat is already closed.
            InvalidTransitionError: If the event is unknown for the state.
        """
        if self.is_terminal:
            raise ChatClosedError(event)

        key = (self._state, event)
        if key not in TRANSITIONS:
            raise InvalidTransitionError(self._state, event)

        old_state = self._state
        new_state = TRANSITIONS[key]
        self._history.append((old_state, event, new_state))
        self._state = new_state
        return new_state

    def get_valid_events(self) -> list[str]:
        """Return a sorted list of events valid from the current state."""
        if self.is_terminal:
            return []
        return sorted(event for state, event in TRANSITIONS if state == self._state)
