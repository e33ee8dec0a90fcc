"""
Initial conditions for circular orbits around the anchor body.

Each orbiter starts on the +x axis at its effective orbit radius, moving along
+z at circular speed. Both vectors are then tilted by the body's inclination
about the z axis, so the orbit's line of nodes lies along z and the velocity
stays tangent to the tilted circle.
"""

import math
import numpy as np
from typing import Sequence, Tuple

from .bodies import Anchor, BodyDescriptor, BodyRegistry, validate_descriptors
from .constants import PhysicsConfig

# Closest allowed start distance, in units of the summed radii
MIN_SEPARATION_FACTOR = 1.5

INCLINATION_AXIS = np.array([0.0, 0.0, 1.0])


def effective_orbit_radius(orbit_radius: float, anchor_radius: float, body_radius: float) -> float:
    """Nominal orbit radius raised to the minimum separation floor."""
    min_distance = (anchor_radius + body_radius) * MIN_SEPARATION_FACTOR
    return max(orbit_radius, min_distance)


def circular_speed(anchor_mass: float, radius: float, G: float) -> float:
    """Speed of a circular orbit around a dominant mass."""
    return math.sqrt(G * anchor_mass / radius)


def inclination_matrix(inclination_deg: float) -> np.ndarray:
    """Rotation by the inclination angle about INCLINATION_AXIS."""
    angle = math.radians(inclination_deg)
    c = math.cos(angle)
    s = math.sin(angle)
    return np.array([
        [c, -s, 0.0],
        [s, c, 0.0],
        [0.0, 0.0, 1.0],
    ], dtype=np.float64)


def circular_orbit(
    anchor_mass: float,
    anchor_radius: float,
    orbit_radius: float,
    body_radius: float,
    inclination_deg: float,
    G: float,
) -> Tuple[np.ndarray, np.ndarray]:
    """
    Compute the starting state of one orbiter.

    Args:
        anchor_mass: Mass of the central body (kg)
        anchor_radius: Physical radius of the central body (m)
        orbit_radius: Requested orbit radius (m), raised to the separation floor
        body_radius: Physical radius of the orbiter (m)
        inclination_deg: Tilt of the orbital plane in degrees
        G: Gravitational constant

    Returns:
        (position, velocity) float64 3-vectors
    """
    r_eff = effective_orbit_radius(orbit_radius, anchor_radius, body_radius)
    speed = circular_speed(anchor_mass, r_eff, G)

    position = np.array([r_eff, 0.0, 0.0], dtype=np.float64)
    velocity = np.array([0.0, 0.0, speed], dtype=np.float64)

    rotation = inclination_matrix(inclination_deg)
    return rotation @ position, rotation @ velocity


def build_registry(descriptors: Sequence[BodyDescriptor], physics: PhysicsConfig) -> BodyRegistry:
    """
    Create the registry: anchor from the first row, then one circular orbit per
    remaining row. Raises ConfigurationError for an invalid table.
    """
    validate_descriptors(descriptors)

    head = descriptors[0]
    anchor = Anchor(name=head.name, mass=head.mass, radius=head.radius, color=head.color)

    orbiters = descriptors[1:]
    n = len(orbiters)
    positions = np.zeros((n, 3), dtype=np.float64)
    velocities = np.zeros((n, 3), dtype=np.float64)

    for k, desc in enumerate(orbiters):
        positions[k], velocities[k] = circular_orbit(
            anchor.mass,
            anchor.radius,
            desc.orbit_radius,
            desc.radius,
            desc.inclination,
            physics.G,
        )

    return BodyRegistry(
        anchor,
        names=[d.name for d in orbiters],
        masses=[d.mass for d in orbiters],
        radii=[d.radius for d in orbiters],
        positions=positions,
        velocities=velocities,
        colors=[d.color for d in orbiters],
    )
