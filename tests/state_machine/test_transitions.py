"""Tests for the chat transition map."""

from collabdesk.domain.types import ChatState
from collabdesk.state_machine.transitions import TERMINAL_STATES, TRANSITIONS, ChatEvent


def test_exactly_two_transitions() -> None:
    assert TRANSITIONS == {
        (ChatState.OPEN, ChatEvent.POST_MESSAGE): ChatState.OPEN,
        (ChatState.OPEN, ChatEvent.CLOSE): ChatState.CLOSED,
    }


def test_closed_is_terminal() -> None:
    assert TERMINAL_STATES == frozenset({ChatState.CLOSED})


def test_no_transition_leaves_closed() -> None:
    assert not any(state == ChatState.CLOSED for state, _ in TRANSITIONS)


def test_event_values() -> None:
    assert [e.value for e in ChatEvent] == ["post_message", "close"]
