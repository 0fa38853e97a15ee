"""Key bindings and the one-line help renderer."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Iterable, Tuple

from taskclock.config import HELP_SEPARATOR


@dataclass(frozen=True)
class KeyBinding:
    """One or more keys sharing an action, plus the text shown in the help line."""

    keys: Tuple[str, ...]
    help_key: str
    help_desc: str
    enabled: bool = True

    def matches(self, key: str) -> bool:
        """Return True if *key* triggers this binding and the binding is enabled."""
        return self.enabled and key in self.keys

    def set_enabled(self, enabled: bool) -> KeyBinding:
        return replace(self, enabled=enabled)


def binding(*keys: str, help_text: Tuple[str, str]) -> KeyBinding:
    help_key, help_desc = help_text
    return KeyBinding(keys=keys, help_key=help_key, help_desc=help_desc)


@dataclass(frozen=True)
class KeyMap:
    """The fixed bindings of the timer screen.

    ``start`` and ``stop`` are both bound to ``s``.  Only one of them is
    enabled at a time, so the help line reads "s start" while the timer is
    paused and "s stop" while it runs.
    """

    start: KeyBinding = field(
        default_factory=lambda: binding("s", help_text=("s", "start")).set_enabled(False)
    )
    stop: KeyBinding = field(default_factory=lambda: binding("s", help_text=("s", "stop")))
    reset: KeyBinding = field(default_factory=lambda: binding("r", help_text=("r", "reset")))
    quit: KeyBinding = field(
        default_factory=lambda: binding("q", "ctrl+c", help_text=("q", "quit"))
    )
    new_timer: KeyBinding = field(default_factory=lambda: binding("n", help_text=("n", "new")))
    new_task: KeyBinding = field(
        default_factory=lambda: binding("a", help_text=("a", "add new task"))
    )

    def with_running(self, running: bool) -> KeyMap:
        """Enable ``stop`` while the timer runs and ``start`` while it does not."""
        return replace(
            self,
            start=self.start.set_enabled(not running),
            stop=self.stop.set_enabled(running),
        )

    def short_help(self) -> Tuple[KeyBinding, ...]:
        return (self.start, self.stop, self.reset, self.quit, self.new_timer, self.new_task)


def short_help_view(bindings: Iterable[KeyBinding]) -> str:
    """Render the enabled *bindings* as ``"key desc"`` pairs on one line."""
    return HELP_SEPARATOR.join(
        f"{b.help_key} {b.help_desc}" for b in bindings if b.enabled
    )
