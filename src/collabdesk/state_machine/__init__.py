"""Chat state machine with transition validation."""

from collabdesk.state_machine.machine import ChatStateMachine
from collabdesk.state_machine.transitions import TERMINAL_STATES, TRANSITIONS, ChatEvent

__all__ = [
    "ChatEvent",
    "ChatStateMachine",
    "TERMINAL_STATES",
    "TRANSITIONS",
]
