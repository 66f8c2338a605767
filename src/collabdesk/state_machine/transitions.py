"""Transition map defining all valid (chat state, event) -> chat state mappings."""

from enum import StrEnum

from collabdesk.domain.types import ChatState


class ChatEvent(StrEnum):
    """Events that act on an inquiry's chat."""

    POST_MESSAGE = "post_message"
    CLOSE = "close"


# Any pair not in this dict is an invalid transition.
TRANSITIONS: dict[tuple[ChatState, str], ChatState] = {
    (ChatState.OPEN, ChatEvent.POST_MESSAGE): ChatState.OPEN,
    (ChatState.OPEN, ChatEvent.CLOSE): ChatState.CLOSED,
}

# Closing is one-way: a closed chat never reopens.
TERMINAL_STATES: frozenset[ChatState] = frozenset({ChatState.CLOSED})
