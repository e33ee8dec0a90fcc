"""Immutable physics and render-scale settings passed into the engine."""

import math
from dataclasses import dataclass

from .errors import ConfigurationError

RADIUS_MODES = ("linear", "cbrt")


def _require_positive(name: str, value: float) -> float:
    value = float(value)
    if not math.isfinite(value) or value <= 0.0:
        raise ConfigurationError(f"{name} must be a positive finite number, got {value!r}")
    return value


@dataclass(frozen=True)
class PhysicsConfig:
    """
    Engine constants.

    Attributes:
        G: Gravitational constant (SI)
        time_step: Fixed integration step in seconds
    """
    G: float = 6.67430e-11
    time_step: float = 43200.0

    def __post_init__(self):
        object.__setattr__(self, "G", _require_positive("G", self.G))
        object.__setattr__(self, "time_step", _require_positive("time_step", self.time_step))

    @classmethod
    def from_config(cls, cfg: dict) -> "PhysicsConfig":
        """Build from a PHYSICS-style dict, falling back to defaults for missing keys."""
        return cls(
            G=cfg.get("G", cls.G),
            time_step=cfg.get("time_step", cls.time_step),
        )

    def with_time_step(self, time_step: float) -> "PhysicsConfig":
        return PhysicsConfig(G=self.G, time_step=time_step)


@dataclass(frozen=True)
class RenderScale:
    """Divisors that convert meters to render units."""
    position_scale: float = 5e10
    radius_scale: float = 1e7
    radius_mode: str = "linear"

    def __post_init__(self):
        object.__setattr__(self, "position_scale", _require_positive("position_scale", self.position_scale))
        object.__setattr__(self, "radius_scale", _require_positive("radius_scale", self.radius_scale))
        if self.radius_mode not in RADIUS_MODES:
            raise ConfigurationError(
                f"radius_mode must be one of {RADIUS_MODES}, got {self.radius_mode!r}"
            )

    @classmethod
    def from_config(cls, cfg: dict) -> "RenderScale":
        return cls(
            position_scale=cfg.get("position_scale", cls.position_scale),
            radius_scale=cfg.get("radius_scale", cls.radius_scale),
            radius_mode=cfg.get("radius_mode", cls.radius_mode),
        )
