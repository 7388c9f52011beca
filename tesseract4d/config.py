import math
from dataclasses import dataclass, fields
from typing import Any, Mapping, Tuple

from .errors import InvalidConfiguration


@dataclass
class EngineConfig:
    # geometry / motion
    edge_length: float = 1.0
    rotation_speed: float = 20.0  # degrees per second
    # display
    line_width: float = 0.05
    width: int = 800
    height: int = 600
    scale: float = 100
    fps: int = 60
    background: Tuple[int, int, int] = (0, 0, 0)
    line_color: Tuple[int, int, int] = (255, 255, 255)
    count: int = 1
    log_level: str = "INFO"

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "EngineConfig":
        """Build a config from a mapping; unknown keys are ignored."""
        known = {f.name for f in fields(cls)}
        values = {k: v for k, v in data.items() if k in known and v is not None}
        for key in ("background", "line_color"):
            if key in values:
                values[key] = tuple(values[key])
        return cls(**values)

    def validate(self) -> "EngineConfig":
        if not math.isfinite(self.edge_length):
            raise InvalidConfiguration(f"edge_length must be finite, got {self.edge_length!r}")
        if not math.isfinite(self.rotation_speed):
            raise InvalidConfiguration(f"rotation_speed must be finite, got {self.rotation_speed!r}")
        if self.width <= 0 or self.height <= 0:
            raise InvalidConfiguration(f"window size must be positive, got {self.width}x{self.height}")
        if self.scale <= 0:
            raise InvalidConfiguration(f"scale must be positive, got {self.scale}")
        if self.fps <= 0:
            raise InvalidConfiguration(f"fps must be positive, got {self.fps}")
        if self.count < 1:
            raise InvalidConfiguration(f"count must be at least 1, got {self.count}")
        return self
