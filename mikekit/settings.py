"""Process-wide gameplay switches and angle conversion factors."""

from __future__ import annotations

import math
from dataclasses import dataclass

__all__ = ["DEFAULT_NEAR_CLIP_PLANE", "GlobalSettings"]

DEFAULT_NEAR_CLIP_PLANE = 10.0

_RAD_TO_DEG = 180.0 / math.pi
_DEG_TO_RAD = math.pi / 180.0


@dataclass
class GlobalSettings:
    """Debug and 3D pathfinding switches plus the near clip plane distance."""

    debug_enabled: bool = False
    pathfinding_3d_enabled: bool = False
    near_clip_plane: float = DEFAULT_NEAR_CLIP_PLANE

    def reset(self) -> None:
        """Restore every setting to its default."""
        self.debug_enabled = False
        self.pathfinding_3d_enabled = False
        self.near_clip_plane = DEFAULT_NEAR_CLIP_PLANE

    def radians_to_degrees_multiplier(self) -> float:
        """Factor that converts an angle from radians to degrees."""
        return _RAD_TO_DEG

    def degrees_to_radians_multiplier(self) -> float:
        """Factor that converts an angle from degrees to radians."""
        return _DEG_TO_RAD