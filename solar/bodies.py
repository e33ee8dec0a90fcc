"""
Body registry for the gravity engine.

The anchor (the star) is kept apart from the orbiting bodies: it is a fixed
reference at the origin and never takes part in integration. Orbiters are
stored as flat float64 arrays so the integration kernels can work on them
directly.

Index 0 of the registry is always the anchor; index k >= 1 is orbiter k-1.
"""

import math
import numpy as np
from dataclasses import dataclass, field
from typing import List, Sequence, Tuple

from .errors import ConfigurationError

Color = Tuple[float, float, float, float]

DEFAULT_COLOR: Color = (1.0, 1.0, 1.0, 1.0)


def _read_only(array, shape) -> np.ndarray:
    array = np.array(array, dtype=np.float64).reshape(shape)
    array.flags.writeable = False
    return array


@dataclass
class Body:
    """
    A single celestial body as seen by external callers.

    Attributes:
        name: Display label
        mass: Mass in kg
        radius: Physical radius in meters
        position: 3D position in meters, anchor-centered frame
        velocity: 3D velocity in m/s
        is_anchor: True only for the fixed reference body
        color: RGBA tuple (0-1 range) for the renderer
    """
    name: str
    mass: float
    radius: float
    position: np.ndarray = field(default_factory=lambda: np.zeros(3))
    velocity: np.ndarray = field(default_factory=lambda: np.zeros(3))
    is_anchor: bool = False
    color: Color = DEFAULT_COLOR

    @property
    def speed(self) -> float:
        return float(np.linalg.norm(self.velocity))

    @property
    def distance(self) -> float:
        """Distance from the anchor in meters."""
        return float(np.linalg.norm(self.position))


@dataclass(frozen=True)
class BodyDescriptor:
    """Static configuration row for one body."""
    name: str
    mass: float
    orbit_radius: float
    radius: float
    inclination: float = 0.0
    color: Color = DEFAULT_COLOR

    @classmethod
    def from_dict(cls, row: dict) -> "BodyDescriptor":
        return cls(
            name=str(row.get("name", "")),
            mass=float(row["mass"]),
            orbit_radius=float(row.get("orbit_radius", 0.0)),
            radius=float(row["radius"]),
            inclination=float(row.get("inclination", 0.0)),
            color=tuple(row.get("color", DEFAULT_COLOR)),
        )


@dataclass(frozen=True)
class Anchor:
    """The fixed reference body. Position and velocity are always zero."""
    name: str
    mass: float
    radius: float
    color: Color = DEFAULT_COLOR

    @property
    def position(self) -> np.ndarray:
        return np.zeros(3, dtype=np.float64)

    @property
    def velocity(self) -> np.ndarray:
        return np.zeros(3, dtype=np.float64)


def validate_descriptors(descriptors: Sequence[BodyDescriptor]):
    """Reject body tables the engine cannot run. Raises ConfigurationError."""
    if len(descriptors) == 0:
        raise ConfigurationError("Body table is empty; an anchor body is required")

    for index, desc in enumerate(descriptors):
        label = f"body {index} ({desc.name or 'unnamed'})"
        values = (desc.mass, desc.radius, desc.orbit_radius, desc.inclination)
        if not all(math.isfinite(v) for v in values):
            raise ConfigurationError(f"{label}: all parameters must be finite")
        if desc.mass <= 0.0:
            raise ConfigurationError(f"{label}: mass must be positive, got {desc.mass}")
        if desc.radius <= 0.0:
            raise ConfigurationError(f"{label}: radius must be positive, got {desc.radius}")
        if desc.orbit_radius < 0.0:
            raise ConfigurationError(f"{label}: orbit_radius must be non-negative, got {desc.orbit_radius}")


class BodyRegistry:
    """
    Ordered, fixed-size collection of one anchor plus orbiting bodies.

    Orbiter positions and velocities change only through commit(), which the
    integrator calls once per step with the complete new state. All four state
    arrays are read-only copies; callers never hold a writable alias.

    outer_orbit_radius is the largest starting orbiter distance. It is fixed at
    construction and used to frame the camera.
    """

    def __init__(self, anchor: Anchor, names: Sequence[str], masses, radii,
                 positions, velocities, colors: Sequence[Color] = None,
                 outer_orbit_radius: float = None):
        n = len(names)
        self.anchor = anchor
        self._names: Tuple[str, ...] = tuple(names)
        self._colors: Tuple[Color, ...] = tuple(colors) if colors is not None else (DEFAULT_COLOR,) * n

        self._masses = _read_only(masses, n)
        self._radii = _read_only(radii, n)
        self._positions = _read_only(positions, (n, 3))
        self._velocities = _read_only(velocities, (n, 3))

        if outer_orbit_radius is None:
            outer_orbit_radius = self.max_orbit_radius
        self.outer_orbit_radius = float(outer_orbit_radius)

        if len(self._colors) != n:
            raise ValueError(f"Expected {n} colors, got {len(self._colors)}")

    # ------------------------------------------------------------------
    # Orbiter state (flat arrays)
    # ------------------------------------------------------------------

    @property
    def num_orbiters(self) -> int:
        return len(self._names)

    @property
    def positions(self) -> np.ndarray:
        return self._positions

    @property
    def velocities(self) -> np.ndarray:
        return self._velocities

    @property
    def masses(self) -> np.ndarray:
        return self._masses

    @property
    def radii(self) -> np.ndarray:
        return self._radii

    def commit(self, positions: np.ndarray, velocities: np.ndarray):
        """Replace all orbiter state at once. The arrays are copied."""
        shape = self._positions.shape
        if positions.shape != shape or velocities.shape != shape:
            raise ValueError(
                f"State shape mismatch: expected {shape}, "
                f"got {positions.shape} and {velocities.shape}"
            )
        self._positions = _read_only(positions, shape)
        self._velocities = _read_only(velocities, shape)

    # ------------------------------------------------------------------
    # Whole-registry view (anchor at index 0)
    # ------------------------------------------------------------------

    def __len__(self) -> int:
        return self.num_orbiters + 1

    def __getitem__(self, index: int) -> Body:
        """Return a copy of the body at the given registry index."""
        count = len(self)
        if index < 0:
            index += count
        if not 0 <= index < count:
            raise IndexError(f"Body index {index} out of range for {count} bodies")

        if index == 0:
            return Body(
                name=self.anchor.name,
                mass=self.anchor.mass,
                radius=self.anchor.radius,
                position=self.anchor.position,
                velocity=self.anchor.velocity,
                is_anchor=True,
                color=self.anchor.color,
            )

        k = index - 1
        return Body(
            name=self._names[k],
            mass=float(self._masses[k]),
            radius=float(self._radii[k]),
            position=self._positions[k].copy(),
            velocity=self._velocities[k].copy(),
            is_anchor=False,
            color=self._colors[k],
        )

    def __iter__(self):
        for index in range(len(self)):
            yield self[index]

    @property
    def names(self) -> Tuple[str, ...]:
        return (self.anchor.name,) + self._names

    @property
    def colors(self) -> Tuple[Color, ...]:
        return (self.anchor.color,) + self._colors

    @property
    def max_orbit_radius(self) -> float:
        """Largest current orbiter distance from the anchor (0 with no orbiters)."""
        if self.num_orbiters == 0:
            return 0.0
        return float(np.max(np.linalg.norm(self._positions, axis=1)))

    def all_positions(self) -> np.ndarray:
        """(N, 3) positions including the anchor row at index 0."""
        return np.vstack([self.anchor.position, self._positions])

    def all_radii(self) -> np.ndarray:
        return np.concatenate([[self.anchor.radius], self._radii])

    def anchor_mask(self) -> np.ndarray:
        mask = np.zeros(len(self), dtype=np.bool_)
        mask[0] = True
        return mask

    def copy(self) -> "BodyRegistry":
        return BodyRegistry(
            self.anchor,
            self._names,
            self._masses,
            self._radii,
            self._positions,
            self._velocities,
            self._colors,
            self.outer_orbit_radius,
        )

    def __repr__(self) -> str:
        return f"BodyRegistry(anchor={self.anchor.name!r}, orbiters={list(self._names)})"
