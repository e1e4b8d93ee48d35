"""Settings for playing a sound and reporting it as a noise event."""

from __future__ import annotations

from dataclasses import asdict, dataclass, fields
from typing import Any, Mapping, Optional

__all__ = ["PlaySoundData"]


@dataclass
class PlaySoundData:
    """What sound to play, from when, and how loud a noise it makes.

    ``sound`` is a path to the sound asset and ``tag`` labels the noise
    event; None stands for no sound and no tag.
    """

    sound: Optional[str] = None
    start_time: float = 0.0
    perform_noise: bool = False
    loudness: float = 1.0
    max_range: float = 0.0
    tag: Optional[str] = None

    def to_dict(self) -> dict[str, Any]:
        """Plain dictionary of every field."""
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> PlaySoundData:
        """Build from a mapping; missing keys take their defaults.

        Raises ValueError for keys that are not fields.
        """
        known = {f.name for f in fields(cls)}
        unknown = set(data) - known
        if unknown:
            raise ValueError(f"unknown play sound fields: {', '.join(sorted(unknown))}")
        result = cls(**dict(data))
        result.start_time = float(result.start_time)
        result.loudness = float(result.loudness)
        result.max_range = float(result.max_range)
        result.perform_noise = bool(result.perform_noise)
        return result