"""Timer core — an immutable countdown timer driven by tick messages."""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum
from typing import Tuple

from taskclock.config import TICK_INTERVAL_MS, TIMEOUT_MS
from taskclock.core.messages import Command, Deliver, Message, StartStop, Tick, TimedOut


class TimerState(Enum):
    """Possible states of the timer."""

    IDLE = "idle"
    RUNNING = "running"
    PAUSED = "paused"
    TIMED_OUT = "timed-out"


def format_remaining(milliseconds: int) -> str:
    """Format *milliseconds* as ``S.mmms`` or, from one minute up, ``MmSS.mmms``."""
    minutes, rest = divmod(max(milliseconds, 0), 60_000)
    if minutes:
        return f"{minutes}m{rest / 1000:06.3f}s"
    return f"{rest / 1000:.3f}s"


@dataclass(frozen=True)
class Timer:
    """A countdown that loses one *interval_ms* per accepted :class:`Tick`.

    The timer never reads a clock.  Progress comes only from ``Tick``
    messages, which the host delivers ``interval_ms`` apart.  Every start or
    stop bumps ``tag``; a tick carrying an old tag belongs to a chain that
    has been superseded and is dropped.
    """

    id: int = 0
    duration_ms: int = TIMEOUT_MS
    timeout_ms: int = TIMEOUT_MS
    interval_ms: int = TICK_INTERVAL_MS
    is_running: bool = False
    started: bool = False
    tag: int = 0

    # -- queries -------------------------------------------------------------

    def timed_out(self) -> bool:
        return self.timeout_ms <= 0

    def running(self) -> bool:
        return self.is_running and not self.timed_out()

    def state(self) -> TimerState:
        """Return the current timer state."""
        if not self.started:
            return TimerState.IDLE
        if self.timed_out():
            return TimerState.TIMED_OUT
        if self.is_running:
            return TimerState.RUNNING
        return TimerState.PAUSED

    def view(self) -> str:
        return format_remaining(self.timeout_ms)

    # -- commands ------------------------------------------------------------

    def start(self) -> Tuple[Command, ...]:
        """Request that the timer start running."""
        return self._start_stop(True)

    def stop(self) -> Tuple[Command, ...]:
        """Request that the timer pause."""
        return self._start_stop(False)

    def toggle(self) -> Tuple[Command, ...]:
        """Request the opposite of the current running state."""
        return self._start_stop(not self.running())

    def reset(self) -> Timer:
        """Restore the duration the timer was built with, leaving the running flag alone."""
        return replace(self, timeout_ms=self.duration_ms)

    # -- transitions ---------------------------------------------------------

    def update(self, msg: Message) -> Tuple[Timer, Tuple[Command, ...]]:
        """Apply a lifecycle or tick message addressed to this timer."""
        if isinstance(msg, StartStop):
            if msg.timer_id != self.id:
                return self, ()
            running = msg.running and not self.timed_out()
            timer = replace(self, is_running=running, started=True, tag=self.tag + 1)
            if not running:
                return timer, ()
            return timer, (timer._next_tick(),)

        if isinstance(msg, Tick):
            if msg.timer_id != self.id or msg.tag != self.tag or not self.running():
                return self, ()
            timer = replace(self, timeout_ms=self.timeout_ms - self.interval_ms, tag=self.tag + 1)
            if timer.timed_out():
                # The chain ends here; nothing reschedules a tick.
                timer = replace(timer, timeout_ms=0, is_running=False)
                return timer, (Deliver(TimedOut(self.id)),)
            return timer, (timer._next_tick(),)

        return self, ()

    # -- private helpers -----------------------------------------------------

    def _start_stop(self, running: bool) -> Tuple[Command, ...]:
        return (Deliver(StartStop(self.id, running)),)

    def _next_tick(self) -> Deliver:
        return Deliver(Tick(self.id, self.tag), self.interval_ms / 1000)


def new_timer(
    timer_id: int, timeout_ms: int = TIMEOUT_MS, interval_ms: int = TICK_INTERVAL_MS
) -> Timer:
    """Create an idle timer with the full duration."""
    if interval_ms <= 0:
        raise ValueError(f"interval_ms must be positive, got {interval_ms}")
    return Timer(
        id=timer_id, duration_ms=timeout_ms, timeout_ms=timeout_ms, interval_ms=interval_ms
    )
