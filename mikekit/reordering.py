"""A component that periodically teleports a scene target back to a saved transform."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import ClassVar, Optional

from mikekit.events import Event
from mikekit.geometry import Rotator, Vector
from mikekit.timers import TimerHandle, TimerManager, TimerState

__all__ = ["Mobility", "Transform", "SceneTarget", "ReorderingComponent"]


class Mobility(enum.Enum):
    """How freely a scene object may move at runtime."""

    STATIC = "static"
    STATIONARY = "stationary"
    MOVABLE = "movable"


@dataclass(frozen=True)
class Transform:
    """Location, rotation and scale of an object in the world."""

    location: Vector = Vector()
    rotation: Rotator = Rotator()
    scale: Vector = Vector(1.0, 1.0, 1.0)


@dataclass
class SceneTarget:
    """A scene object with a world transform and a mobility."""

    transform: Transform = field(default_factory=Transform)
    mobility: Mobility = Mobility.MOVABLE


_NO_TIMER = TimerState(False, -1.0, -1.0)


class ReorderingComponent:
    """Teleports its target to a saved destination after a cooldown and a delay.

    Once a target is set a cooldown timer starts; when it runs out
    ``on_reordering`` fires and a delay timer starts; when that runs out
    the target is moved (if movable) and the cooldown starts again.
    """

    DEFAULT_REORDER_DELAY: ClassVar[float] = 0.01

    def __init__(self, timer_manager: Optional[TimerManager] = None) -> None:
        self.timer_manager = timer_manager
        self.initialize_at_begin_play = True
        self.save_position_at_begin_play = True
        self.reorder_delay = 5.0
        self.reorder_cooldown = 10.0

        self.on_reorder_destination_changed = Event()
        self.on_reordered = Event()
        self.on_pre_reordered = Event()
        self.on_reorder_failed = Event()
        self.on_reorder_interrupted = Event()
        self.on_reordering = Event()

        self._destination = Transform()
        self._target: Optional[SceneTarget] = None
        self._delay_handle: Optional[TimerHandle] = None
        self._cooldown_handle: Optional[TimerHandle] = None

    @property
    def reorder_destination(self) -> Transform:
        """The transform the target is moved to on reorder."""
        return self._destination

    @property
    def target(self) -> Optional[SceneTarget]:
        """The scene object being reordered, if any."""
        return self._target

    def begin_play(self, owner_root: Optional[SceneTarget]) -> None:
        """Initialize from the owner's root object according to the configuration."""
        if self.initialize_at_begin_play:
            self.set_target(owner_root, self.save_position_at_begin_play)
        elif self.save_position_at_begin_play:
            self.save_current_location()

    def _timer_state(self, handle: Optional[TimerHandle]) -> TimerState:
        if self.timer_manager is None:
            return _NO_TIMER
        return self.timer_manager.state(handle)

    def is_reordering(self) -> TimerState:
        """State of the delay timer that precedes the move."""
        return self._timer_state(self._delay_handle)

    def is_on_cooldown(self) -> TimerState:
        """State of the cooldown timer."""
        return self._timer_state(self._cooldown_handle)

    def set_target(self, new_target: Optional[SceneTarget], save_location: bool) -> None:
        """Change the target; a new target restarts the cooldown."""
        if self._target is not new_target:
            self._target = new_target
            if save_location:
                self.save_current_location()
            self.restart_cooldown()
        elif save_location:
            self.save_current_location()

    def save_current_location(self) -> None:
        """Save the target's current transform as the destination."""
        if self._target is not None:
            self.save_location(self._target.transform)

    def save_location(self, transform: Transform) -> None:
        """Set the destination, announcing the old and new values."""
        self.on_reorder_destination_changed.broadcast(self._destination, transform)
        self._destination = transform

    def _clear_timers(self, manager: TimerManager) -> None:
        manager.clear_timer(self._cooldown_handle)
        manager.clear_timer(self._delay_handle)
        self._cooldown_handle = None
        self._delay_handle = None

    def restart_cooldown(self) -> None:
        """Cancel pending timers and start the cooldown again."""
        manager = self.timer_manager
        if manager is None:
            return
        self._clear_timers(manager)
        if self._target is None:
            return
        if self.reorder_cooldown <= 0.0:
            self._on_cooldown_over()
        else:
            self._cooldown_handle = manager.set_timer(self._on_cooldown_over, self.reorder_cooldown)

    def _on_cooldown_over(self) -> None:
        self.on_reordering.broadcast(self._destination)

        # With no cooldown and no delay the cycle would never yield.
        if self.reorder_delay <= 0.0 and self.reorder_cooldown <= 0.0:
            self.reorder_delay = self.DEFAULT_REORDER_DELAY

        manager = self.timer_manager
        if manager is None:
            return
        self._clear_timers(manager)
        if self._target is None:
            return
        if self.reorder_delay <= 0.0:
            self.on_reorder()
        else:
            self._delay_handle = manager.set_timer(self.on_reorder, self.reorder_delay)

    def on_reorder(self) -> None:
        """Move the target to the destination now, then restart the cooldown."""
        if self.is_reordering().remaining > 0.0:
            self.on_reorder_interrupted.broadcast()
        target = self._target
        if target is not None:
            if target.mobility is Mobility.MOVABLE:
                self.on_pre_reordered.broadcast()
                target.transform = self._destination
                self.on_reordered.broadcast()
            else:
                self.on_reorder_failed.broadcast()
        self.restart_cooldown()