"""Textual host for the task timer.

The app holds the current ``Model``, turns the bound keys into controller
messages, runs the commands that ``update`` returns and redraws the screen
from ``view``.  Keys that are not bound fall through to the focused
``Input``; the arrow and page keys scroll the task viewport.
"""

from __future__ import annotations

import logging
from functools import partial
from typing import Iterable, Optional

from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Vertical, VerticalScroll
from textual.widgets import Input, Static

from taskclock.config import ENTRY_WIDTH, TASK_CHAR_LIMIT, VIEWPORT_HEIGHT, VIEWPORT_WIDTH
from taskclock.core import controller
from taskclock.core.controller import Model
from taskclock.core.messages import (
    ClearEntry,
    Command,
    Deliver,
    FocusEntry,
    KeyPress,
    Message,
    Quit,
    SubmitTask,
)

logger = logging.getLogger(__name__)

SESSION_KEYS = ("n", "s", "r", "a", "q", "ctrl+c")


class TaskInput(Input):
    """The text-entry field.  Session keys are left to the app bindings."""

    def check_consume_key(self, key: str, character: Optional[str] = None) -> bool:
        # Input claims every printable character ahead of priority bindings.
        if key in SESSION_KEYS:
            return False
        return super().check_consume_key(key, character)


class TextView(Static):
    """A Static showing plain text, kept readable as ``plain_text``."""

    def __init__(self, text: str = "", **kwargs) -> None:
        super().__init__(text, markup=False, **kwargs)
        self.plain_text = text

    def update(self, text: str = "") -> None:
        self.plain_text = text
        super().update(text)


class TaskClockApp(App):
    """Single-screen app: task entry first, then the countdown."""

    TITLE = "taskclock"

    CSS = f"""
    Screen {{
        padding: 1 2;
    }}
    #viewport {{
        width: {VIEWPORT_WIDTH};
        height: {VIEWPORT_HEIGHT};
    }}
    #entry {{
        width: {ENTRY_WIDTH};
        margin-top: 1;
    }}
    #view {{
        display: none;
    }}
    """

    # TaskInput declines these keys, so the bindings always fire.  ctrl+c
    # replaces Textual's own shortcut.
    BINDINGS = [
        Binding(key, f"session_key('{key}')", show=False, priority=True) for key in SESSION_KEYS
    ] + [
        Binding("up", "scroll_viewport('up')", show=False),
        Binding("down", "scroll_viewport('down')", show=False),
        Binding("pageup", "scroll_viewport('page_up')", show=False),
        Binding("pagedown", "scroll_viewport('page_down')", show=False),
    ]

    def __init__(self, model: Optional[Model] = None, **kwargs) -> None:
        super().__init__(**kwargs)
        if model is None:
            self._model, self._initial_commands = controller.init()
        else:
            self._model, self._initial_commands = model, ()
        self.failure: Optional[BaseException] = None

    @property
    def model(self) -> Model:
        return self._model

    def compose(self) -> ComposeResult:
        with Vertical(id="task-entry"):
            with VerticalScroll(id="viewport"):
                yield TextView(self._model.viewport, id="task")
            yield TaskInput(id="entry", max_length=TASK_CHAR_LIMIT)
        yield TextView(id="view")

    def on_mount(self) -> None:
        """Called when app is mounted."""
        self._redraw()
        self._run_commands(self._initial_commands)

    def action_session_key(self, key: str) -> None:
        """Forward a session key to the controller."""
        if self._model.keymap.new_task.matches(key):
            self.deliver(SubmitTask(self.query_one("#entry", TaskInput).value))
        else:
            self.deliver(KeyPress(key))

    def action_scroll_viewport(self, direction: str) -> None:
        getattr(self.query_one("#viewport", VerticalScroll), f"scroll_{direction}")()

    def deliver(self, msg: Message) -> None:
        """Feed one message through the controller and act on the result."""
        if self._model.quitting:
            return
        self._model, commands = controller.update(self._model, msg)
        self._redraw()
        self._run_commands(commands)

    def _handle_exception(self, error: Exception) -> None:
        # Private hook, same signature from Textual 1.0 through 8.2.  Keeps the
        # first failure so the CLI can report it after run() returns.
        if self.failure is None:
            self.failure = error
        super()._handle_exception(error)

    def _redraw(self) -> None:
        started = self._model.started
        self.query_one("#task", TextView).update(self._model.viewport)
        self.query_one("#task-entry", Vertical).display = not started
        view = self.query_one("#view", TextView)
        view.display = started
        if started:
            view.update(controller.view(self._model))

    def _run_commands(self, commands: Iterable[Command]) -> None:
        for command in commands:
            if isinstance(command, Quit):
                logger.debug("Exiting")
                self.exit()
            elif isinstance(command, FocusEntry):
                self.query_one("#entry", TaskInput).focus()
            elif isinstance(command, ClearEntry):
                self.query_one("#entry", TaskInput).value = ""
            elif isinstance(command, Deliver):
                callback = partial(self.deliver, command.message)
                if command.delay > 0:
                    self.set_timer(command.delay, callback)
                else:
                    self.call_later(callback)
