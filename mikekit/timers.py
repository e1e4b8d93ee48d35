"""A simulated timer manager driven by explicit time advancement."""

from __future__ import annotations

import itertools
from dataclasses import dataclass
from typing import Any, Callable, Optional

__all__ = ["TimerHandle", "TimerState", "TimerManager"]

Callback = Callable[[], Any]


@dataclass(frozen=True)
class TimerHandle:
    """Opaque identifier of a timer set on a TimerManager."""

    id: int


@dataclass(frozen=True)
class TimerState:
    """Snapshot of a timer: whether it exists, seconds elapsed and seconds left.

    Both times are -1 for a timer that does not exist.
    """

    exists: bool
    elapsed: float
    remaining: float


@dataclass
class _Timer:
    callback: Callback
    rate: float
    expire_time: float
    executing: bool = False


class TimerManager:
    """One-shot timers that fire, in order of expiry, as time is advanced."""

    def __init__(self) -> None:
        self._timers: dict[TimerHandle, _Timer] = {}
        self._ids = itertools.count(1)
        self._now = 0.0

    @property
    def now(self) -> float:
        """Current time of the manager in seconds."""
        return self._now

    def __len__(self) -> int:
        return len(self._timers)

    def set_timer(self, callback: Callback, delay: float) -> TimerHandle:
        """Start a one-shot timer that calls callback after delay seconds."""
        if delay <= 0.0:
            raise ValueError(f"timer delay must be positive, got {delay}")
        handle = TimerHandle(next(self._ids))
        self._timers[handle] = _Timer(callback, delay, self._now + delay)
        return handle

    def clear_timer(self, handle: Optional[TimerHandle]) -> None:
        """Stop a timer; clearing an unknown or missing handle does nothing."""
        if handle is not None:
            self._timers.pop(handle, None)

    def _find(self, handle: Optional[TimerHandle]) -> Optional[_Timer]:
        if handle is None:
            return None
        return self._timers.get(handle)

    def exists(self, handle: Optional[TimerHandle]) -> bool:
        """True if the handle refers to a pending or executing timer."""
        return self._find(handle) is not None

    def elapsed(self, handle: Optional[TimerHandle]) -> float:
        """Seconds since the timer started, or -1 if it does not exist."""
        timer = self._find(handle)
        if timer is None:
            return -1.0
        if timer.executing:
            return timer.rate
        return timer.rate - (timer.expire_time - self._now)

    def remaining(self, handle: Optional[TimerHandle]) -> float:
        """Seconds until the timer fires, or -1 if it does not exist."""
        timer = self._find(handle)
        if timer is None:
            return -1.0
        if timer.executing:
            return 0.0
        return timer.expire_time - self._now

    def state(self, handle: Optional[TimerHandle]) -> TimerState:
        """Existence, elapsed and remaining time of a timer in one snapshot."""
        return TimerState(self.exists(handle), self.elapsed(handle), self.remaining(handle))

    def advance(self, delta: float) -> None:
        """Move time forward by delta seconds, firing every timer that expires."""
        if delta < 0.0:
            raise ValueError(f"cannot advance time by a negative amount: {delta}")
        target = self._now + delta
        while True:
            due = [
                (timer.expire_time, handle.id, handle, timer)
                for handle, timer in self._timers.items()
                if not timer.executing and timer.expire_time <= target
            ]
            if not due:
                break
            expire_time, _, handle, timer = min(due, key=lambda item: (item[0], item[1]))
            self._now = max(self._now, expire_time)
            timer.executing = True
            try:
                timer.callback()
            finally:
                if self._timers.get(handle) is timer:
                    del self._timers[handle]
        self._now = target