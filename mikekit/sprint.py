"""A component that boosts a character's speed and acceleration while sprinting forward."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Optional

from mikekit.geometry import Vector
from mikekit.mathlib import incremental_value, is_moving_forward_xy

__all__ = ["CharacterMovement", "SprintComponent"]


@dataclass
class CharacterMovement:
    """Movement state of a character.

    ``forward`` and ``right`` are the facing directions of the owning actor;
    ``attached`` is False when the movement has no owner to take them from.
    """

    max_walk_speed: float = 600.0
    max_acceleration: float = 2048.0
    velocity: Vector = field(default_factory=Vector)
    forward: Vector = field(default_factory=lambda: Vector(1.0, 0.0, 0.0))
    right: Vector = field(default_factory=lambda: Vector(0.0, 1.0, 0.0))
    attached: bool = True


class SprintComponent:
    """Raises walk speed and acceleration of a character while it sprints forward.

    The boost is scaled by how closely the velocity follows the facing
    direction; moving outside the forward tolerance restores the saved stats.
    """

    def __init__(self) -> None:
        self.speed_multiplier_increment = 0.5
        self.acceleration_multiplier_increment = 0.5
        self.forward_angle_tolerance = 90.0
        self.initialize_at_begin_play = True
        self._movement: Optional[CharacterMovement] = None
        self._enabled = True
        self._original_acceleration = 0.0
        self._original_speed = 0.0
        self._active = False

    @property
    def enabled(self) -> bool:
        """True if sprinting may be started."""
        return self._enabled

    @property
    def sprint_active(self) -> bool:
        """True while a sprint is ongoing, even when not currently moving forward."""
        return self._active

    @property
    def character_movement(self) -> Optional[CharacterMovement]:
        """The movement being driven, if any."""
        return self._movement

    def begin_play(self, owner_movement: Optional[CharacterMovement]) -> None:
        """Initialize with the owner's movement if configured to do so."""
        if self.initialize_at_begin_play:
            self.initialize(owner_movement, True)

    def initialize(self, movement: Optional[CharacterMovement], enabled: bool) -> None:
        """Stop any sprint and start driving the given movement."""
        self.stop_sprint()
        self._movement = movement
        if movement is not None:
            self.set_saved_movement_stats(movement.max_walk_speed, movement.max_acceleration)
            self.set_enabled(enabled)

    def start_sprint(self) -> None:
        """Start sprinting if enabled and not already sprinting."""
        if self._enabled and not self._active:
            self._active = True
            if self._movement is not None:
                self.set_saved_movement_stats(
                    self._movement.max_walk_speed, self._movement.max_acceleration
                )

    def stop_sprint(self) -> None:
        """Stop sprinting and restore the saved stats."""
        if self._active:
            self._active = False
            self._apply_saved_stats()

    def set_enabled(self, enabled: bool) -> None:
        """Enable or disable sprinting; disabling stops any sprint."""
        self._enabled = enabled
        if not enabled:
            self.stop_sprint()

    def _apply_saved_stats(self) -> None:
        if self._movement is not None:
            self._movement.max_walk_speed = self._original_speed
            self._movement.max_acceleration = self._original_acceleration

    def set_saved_movement_stats(self, max_walk_speed: float, max_acceleration: float) -> None:
        """Save the stats restored when not sprinting."""
        self._original_speed = max_walk_speed
        self._original_acceleration = max_acceleration

    def saved_movement_stats(self) -> tuple[float, float]:
        """The saved (max walk speed, max acceleration)."""
        return self._original_speed, self._original_acceleration

    def max_acceleration(self) -> float:
        """Highest acceleration reachable while sprinting."""
        if self._active or self._movement is None:
            base = self._original_acceleration
        else:
            base = self._movement.max_acceleration
        return incremental_value(base, self.acceleration_multiplier_increment, 1.0)

    def max_walk_speed(self) -> float:
        """Highest walk speed reachable while sprinting."""
        if self._active or self._movement is None:
            base = self._original_speed
        else:
            base = self._movement.max_walk_speed
        return incremental_value(base, self.speed_multiplier_increment, 1.0)

    def moving_forward(self) -> tuple[bool, float]:
        """Whether the character moves forward, and the cosine of its angle to forward.

        The cosine is 1 when moving straight ahead and -1 straight back;
        without an attached movement the result is (False, -1).
        """
        movement = self._movement
        if movement is None or not movement.attached:
            return False, -1.0
        check = is_moving_forward_xy(
            self.forward_angle_tolerance,
            self.forward_angle_tolerance,
            movement.forward,
            movement.right,
            movement.velocity,
        )
        return check.moving_forward, math.cos(math.radians(check.forward_angle))

    def tick(self, delta: float) -> None:
        """Update the character's stats for this frame while sprinting."""
        if not self._active:
            return
        movement = self._movement
        if movement is None:
            self.stop_sprint()
            return
        forward, dot = self.moving_forward()
        if forward:
            movement.max_walk_speed = incremental_value(
                self._original_speed, self.speed_multiplier_increment, dot
            )
            movement.max_acceleration = incremental_value(
                self._original_acceleration, self.acceleration_multiplier_increment, dot
            )
            return
        self._apply_saved_stats()