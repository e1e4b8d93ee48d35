"""A component that tracks health, damage, death and revival."""

from __future__ import annotations

from typing import Any, Optional

from mikekit.events import Event

__all__ = ["MIN_MAX_HEALTH", "HealthComponent"]

MIN_MAX_HEALTH = 0.01


class HealthComponent:
    """Tracks current and maximum health and announces damage, death and revival.

    If a damage event is given it is bound to ``take_damage`` on
    ``begin_play`` and unbound on ``destroy``.
    """

    def __init__(
        self,
        max_health: float = 100.0,
        start_at_max_health: bool = True,
        damage_event: Optional[Event] = None,
    ) -> None:
        self.start_at_max_health = start_at_max_health
        self._max_health = max(MIN_MAX_HEALTH, max_health)
        self._current_health = MIN_MAX_HEALTH
        self._damage_event = damage_event
        self.on_death = Event()
        self.on_revive = Event()
        self.on_damage = Event()

    @property
    def current_health(self) -> float:
        """The current health value."""
        return self._current_health

    @property
    def max_health(self) -> float:
        """The current maximum health value."""
        return self._max_health

    @property
    def health_normalized(self) -> float:
        """Current health as a fraction of maximum health."""
        return self._current_health / self._max_health

    @property
    def is_alive(self) -> bool:
        """True while current health is above zero."""
        return self._current_health > 0.0

    def begin_play(self) -> None:
        """Fill health if configured and start listening for damage."""
        if self.start_at_max_health:
            self.set_current_health(self._max_health)
        if self._damage_event is not None:
            self._damage_event.add(self.take_damage)

    def destroy(self) -> None:
        """Stop listening for damage."""
        if self._damage_event is not None:
            self._damage_event.remove(self.take_damage)

    def set_current_health(self, new_health: float) -> None:
        """Set health, capped at the maximum, announcing death or revival."""
        previous = self._current_health
        self._current_health = min(new_health, self._max_health)
        if previous > 0.0 and self._current_health <= 0.0:
            self.on_death.broadcast()
            return
        if previous <= 0.0 and self._current_health > 0.0:
            self.on_revive.broadcast()

    def set_max_health(self, new_max_health: float) -> None:
        """Set maximum health, capping current health to it."""
        self._max_health = max(MIN_MAX_HEALTH, new_max_health)
        self.set_current_health(self._current_health)

    def set_max_health_keeping_ratio(self, new_max_health: float) -> None:
        """Set maximum health while keeping the current health fraction."""
        ratio = self.health_normalized
        self._max_health = max(MIN_MAX_HEALTH, new_max_health)
        self.set_current_health(ratio * self._max_health)

    def take_damage(
        self,
        damaged_actor: Any,
        damage: float,
        damage_type: Any,
        instigator: Any,
        causer: Any,
    ) -> None:
        """Subtract damage from health and announce it."""
        self.set_current_health(self._current_health - damage)
        self.on_damage.broadcast(damaged_actor, damage, damage_type, instigator, causer)