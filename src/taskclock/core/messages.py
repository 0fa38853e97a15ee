"""Messages fed into the controller and commands it hands back.

Messages describe something that happened (a key press, a submitted task,
a timer tick).  Commands describe something the host must do (deliver a
message later, focus or clear the text-entry field, exit).  Both are plain
frozen values so a transition can be replayed in a test without a terminal.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

# ---------------------------------------------------------------------------
# Messages
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class KeyPress:
    """A bound key pressed in the terminal, named the way the host names it
    (``"n"``, ``"ctrl+c"``)."""

    key: str


@dataclass(frozen=True)
class SubmitTask:
    """The text-entry field's contents at the moment ``a`` was pressed."""

    text: str


@dataclass(frozen=True)
class Tick:
    """One countdown step for the timer identified by *timer_id*."""

    timer_id: int
    tag: int


@dataclass(frozen=True)
class StartStop:
    """Lifecycle message that switches a timer between running and paused."""

    timer_id: int
    running: bool


@dataclass(frozen=True)
class TimedOut:
    """Emitted once, by the tick that brings a timer to zero."""

    timer_id: int


Message = Union[KeyPress, SubmitTask, Tick, StartStop, TimedOut]

# ---------------------------------------------------------------------------
# Commands
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Deliver:
    """Feed *message* back into ``update`` after *delay* seconds."""

    message: Message
    delay: float = 0.0


@dataclass(frozen=True)
class FocusEntry:
    """Focus the text-entry field, which starts its cursor blinking."""


@dataclass(frozen=True)
class ClearEntry:
    """Empty the text-entry field."""


@dataclass(frozen=True)
class Quit:
    """Stop dispatching and terminate the process."""


Command = Union[Deliver, FocusEntry, ClearEntry, Quit]
