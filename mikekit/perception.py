"""An AI perception component whose sight and hearing senses can be changed at runtime."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Optional, Union

from mikekit.events import Event

__all__ = [
    "Affiliation",
    "SenseKind",
    "HearingConfig",
    "SightConfig",
    "PerceptionComponent",
]


class Affiliation(enum.Flag):
    """Which kinds of actors a sense detects."""

    NONE = 0
    ENEMIES = enum.auto()
    FRIENDLIES = enum.auto()
    NEUTRALS = enum.auto()
    ALL = ENEMIES | FRIENDLIES | NEUTRALS


class SenseKind(enum.Enum):
    """The senses a perception component may hold."""

    SIGHT = "sight"
    HEARING = "hearing"


@dataclass
class HearingConfig:
    """Configuration of the hearing sense."""

    hearing_range: float = 800.0
    detection: Affiliation = Affiliation.ALL


@dataclass
class SightConfig:
    """Configuration of the sight sense."""

    sight_radius: float = 1300.0
    lose_sight_radius: float = 1800.0
    peripheral_vision_angle: float = 60.0
    detection: Affiliation = Affiliation.ALL


SenseConfig = Union[HearingConfig, SightConfig]


class PerceptionComponent:
    """Holds sight and hearing configurations and lets them be tuned.

    Every change broadcasts ``on_senses_updated`` so listeners can refresh.
    Accessing or changing a sense that is not configured raises LookupError.
    """

    def __init__(self, with_sight: bool = True, with_hearing: bool = True) -> None:
        self._configs: dict[SenseKind, SenseConfig] = {}
        if with_hearing:
            self._configs[SenseKind.HEARING] = HearingConfig()
        if with_sight:
            self._configs[SenseKind.SIGHT] = SightConfig()
        self.dominant_sense = SenseKind.SIGHT
        self.on_senses_updated = Event()

    def sense_config(self, kind: SenseKind) -> Optional[SenseConfig]:
        """The configuration of the given sense, or None if it is not configured."""
        return self._configs.get(kind)

    @property
    def hearing_config(self) -> Optional[HearingConfig]:
        """The hearing configuration, if any."""
        config = self._configs.get(SenseKind.HEARING)
        return config if isinstance(config, HearingConfig) else None

    @property
    def sight_config(self) -> Optional[SightConfig]:
        """The sight configuration, if any."""
        config = self._configs.get(SenseKind.SIGHT)
        return config if isinstance(config, SightConfig) else None

    def _sight(self) -> SightConfig:
        config = self.sight_config
        if config is None:
            raise LookupError("sight sense is not configured")
        return config

    def _hearing(self) -> HearingConfig:
        config = self.hearing_config
        if config is None:
            raise LookupError("hearing sense is not configured")
        return config

    @property
    def sight_range(self) -> float:
        """Radius within which sight detects."""
        return self._sight().sight_radius

    @property
    def hearing_range(self) -> float:
        """Range within which hearing detects."""
        return self._hearing().hearing_range

    @property
    def peripheral_vision_angle(self) -> float:
        """Half angle of the sight cone in degrees."""
        return self._sight().peripheral_vision_angle

    def set_sight_range(self, sight_radius: float) -> None:
        """Set the sight radius, keeping the gap to the lose-sight radius."""
        config = self._sight()
        lose_range = config.lose_sight_radius - config.sight_radius
        config.sight_radius = sight_radius
        config.lose_sight_radius = sight_radius + lose_range
        self.on_senses_updated.broadcast()

    def set_hearing_range(self, hearing_range: float) -> None:
        """Set the hearing range."""
        self._hearing().hearing_range = hearing_range
        self.on_senses_updated.broadcast()

    def set_peripheral_vision_angle(self, angle: float) -> None:
        """Set the peripheral vision angle in degrees."""
        self._sight().peripheral_vision_angle = angle
        self.on_senses_updated.broadcast()