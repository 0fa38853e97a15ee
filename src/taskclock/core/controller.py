"""Interaction controller — the task/timer state machine.

``update`` is a pure function from ``(Model, message)`` to
``(Model, commands)``.  The host owns the only ``Model`` value and swaps it
for whatever ``update`` returns.  The text-entry field and the viewport are
toolkit widgets; the model only records what the viewport should show.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Tuple

from taskclock.config import TASK_CHAR_LIMIT, TICK_INTERVAL_MS, TIMEOUT_MS, WELCOME_TEXT
from taskclock.core.keys import KeyMap, short_help_view
from taskclock.core.messages import (
    ClearEntry,
    Command,
    FocusEntry,
    KeyPress,
    Message,
    Quit,
    StartStop,
    SubmitTask,
    Tick,
    TimedOut,
)
from taskclock.core.timer import Timer, new_timer

logger = logging.getLogger(__name__)

DONE_TEXT = "All done!"


class Mode(Enum):
    """Top-level interaction state."""

    TASK_ENTRY = "task-entry"
    TIMER_ACTIVE = "timer-active"
    QUITTING = "quitting"


@dataclass(frozen=True)
class Model:
    """Everything the screen shows, as one immutable value.

    ``viewport`` is the text of the scroll viewport: the welcome line until
    a task is submitted, then the task itself.
    """

    timer: Timer = field(default_factory=Timer)
    keymap: KeyMap = field(default_factory=KeyMap)
    task: str = ""
    viewport: str = WELCOME_TEXT
    started: bool = False
    quitting: bool = False

    @property
    def mode(self) -> Mode:
        if self.quitting:
            return Mode.QUITTING
        if self.started:
            return Mode.TIMER_ACTIVE
        return Mode.TASK_ENTRY


Result = Tuple[Model, Tuple[Command, ...]]


def init() -> Result:
    """Build the starting model: task entry, idle timer, focused text field."""
    return Model(), (FocusEntry(),)


def update(model: Model, msg: Message) -> Result:
    """Apply one message and return the next model and its follow-up commands."""
    if model.quitting:
        return model, ()

    if isinstance(msg, (Tick, StartStop)):
        return _update_timer(model, msg)

    if isinstance(msg, TimedOut):
        if msg.timer_id == model.timer.id:
            logger.info("Timer %d timed out on task %r", msg.timer_id, model.task)
        return model, ()

    if isinstance(msg, SubmitTask):
        task = msg.text[:TASK_CHAR_LIMIT]
        logger.debug("Task submitted: %r", task)
        return replace(model, task=task, viewport=task), (ClearEntry(),)

    if isinstance(msg, KeyPress):
        return _handle_key(model, msg)

    return model, ()


def view(model: Model) -> str:
    """Render the model as a block of text.

    Before the first timer this is the viewport text; the host draws the
    text-entry field one blank line below it.
    """
    if not model.started:
        return model.viewport

    s = DONE_TEXT if model.timer.timed_out() else model.timer.view()
    s += "\n"
    if model.quitting:
        return s
    s = "Working on task: " + model.viewport + "\n" + "Remaining time: " + s
    return s + _help_view(model)


# ---------------------------------------------------------------------------
# Private helpers
# ---------------------------------------------------------------------------


def _help_view(model: Model) -> str:
    return "\n" + short_help_view(model.keymap.short_help())


def _update_timer(model: Model, msg: Message) -> Result:
    timer, cmds = model.timer.update(msg)
    if msg.timer_id == timer.id:
        model = replace(model, keymap=model.keymap.with_running(timer.running()))
    return replace(model, timer=timer), cmds


def _handle_key(model: Model, msg: KeyPress) -> Result:
    keymap, key = model.keymap, msg.key

    if keymap.new_timer.matches(key):
        timer = new_timer(model.timer.id + 1, TIMEOUT_MS, TICK_INTERVAL_MS)
        logger.debug("Starting timer %d for task %r", timer.id, model.task)
        return replace(model, timer=timer, started=True), timer.start()

    if keymap.quit.matches(key):
        logger.debug("Quit requested with %r", key)
        return replace(model, quitting=True), (Quit(),)

    if keymap.reset.matches(key):
        return replace(model, timer=model.timer.reset()), ()

    if keymap.start.matches(key) or keymap.stop.matches(key):
        if not model.started:
            return model, ()
        logger.debug("Toggling timer %d (running=%s)", model.timer.id, model.timer.running())
        return model, model.timer.toggle()

    # ``a`` arrives as SubmitTask; every other key belongs to the focused widget.
    return model, ()
