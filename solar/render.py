"""Read-only per-frame state handed to the renderer."""

import numpy as np
from dataclasses import dataclass
from typing import Tuple

from .bodies import BodyRegistry, Color
from .constants import RenderScale


def _frozen(array: np.ndarray) -> np.ndarray:
    array = np.array(array, copy=True)
    array.flags.writeable = False
    return array


@dataclass(frozen=True)
class FrameSnapshot:
    """
    Body state after the frame's integration step.

    Attributes:
        positions: (N, 3) float64 meters, anchor row is zero
        radii: (N,) float64 physical radii in meters
        is_anchor: (N,) bool mask, True at index 0 only
        names: Body labels in registry order
        colors: RGBA per body
        frame: Host frame counter when captured
        sim_time: Simulated seconds since start
        outer_orbit_radius: Largest starting orbiter distance in meters
    """
    positions: np.ndarray
    radii: np.ndarray
    is_anchor: np.ndarray
    names: Tuple[str, ...]
    colors: Tuple[Color, ...]
    frame: int = 0
    sim_time: float = 0.0
    outer_orbit_radius: float = 0.0

    @classmethod
    def capture(cls, registry: BodyRegistry, frame: int = 0, sim_time: float = 0.0) -> "FrameSnapshot":
        return cls(
            positions=_frozen(registry.all_positions()),
            radii=_frozen(registry.all_radii()),
            is_anchor=_frozen(registry.anchor_mask()),
            names=registry.names,
            colors=registry.colors,
            frame=frame,
            sim_time=sim_time,
            outer_orbit_radius=registry.outer_orbit_radius,
        )

    def __len__(self) -> int:
        return len(self.names)

    @property
    def max_orbit_radius(self) -> float:
        return float(np.max(np.linalg.norm(self.positions, axis=1)))

    def to_render_space(self, scale: RenderScale) -> Tuple[np.ndarray, np.ndarray]:
        """
        Convert to float32 render units.

        Returns:
            (positions / position_scale, scaled radii)
        """
        positions = (self.positions / scale.position_scale).astype(np.float32)
        if scale.radius_mode == "cbrt":
            radii = np.cbrt(self.radii) / scale.radius_scale
        else:
            radii = self.radii / scale.radius_scale
        return positions, radii.astype(np.float32)

    def camera_distance(self, scale: RenderScale) -> float:
        """
        Default viewing distance that frames the outermost orbit. Uses the
        starting radius so the framing stays put while bodies move.
        """
        return 3.0 * self.outer_orbit_radius / scale.position_scale
