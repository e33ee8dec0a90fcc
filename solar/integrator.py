"""
Fixed-step gravity integrator.

Direct O(n^2) pairwise summation with semi-implicit (symplectic) Euler:
velocity is kicked first, then the new velocity drifts the position.

Key properties:
- The anchor is a fixed point mass at the origin; it pulls on every orbiter but
  is never moved
- Every step reads only the state at t and writes fresh arrays for t + dt,
  which the registry commits together
- No softening: a zero separation is reported as DegenerateConfigurationError
- Kernels are compiled without fastmath/parallel so replays are bit-identical
"""

import math
import numpy as np
from numba import njit

from .bodies import BodyRegistry
from .constants import PhysicsConfig
from .errors import DegenerateConfigurationError

# Sentinel returned by the kernels when every pair is well separated
NO_DEGENERACY = -2
ANCHOR_INDEX = -1


# ============================================================================
# KERNELS
# ============================================================================

@njit(cache=True)
def compute_accelerations(
    positions: np.ndarray,
    masses: np.ndarray,
    anchor_mass: float,
    G: float,
    accelerations: np.ndarray,
    num_bodies: int,
) -> tuple:
    """
    Net gravitational acceleration on every orbiter.

    a_i = G*M*(0 - p_i)/|p_i|^3 + sum_{j != i} G*m_j*(p_j - p_i)/|p_j - p_i|^3

    Returns (i, j) of the first coincident pair found, with j == ANCHOR_INDEX
    for an orbiter sitting on the anchor, or (NO_DEGENERACY, NO_DEGENERACY).
    """
    for i in range(num_bodies):
        px = positions[i, 0]
        py = positions[i, 1]
        pz = positions[i, 2]

        # Anchor term first (index 0 in the full registry)
        dx = -px
        dy = -py
        dz = -pz
        dist_sq = dx * dx + dy * dy + dz * dz
        if dist_sq == 0.0:
            return i, ANCHOR_INDEX
        dist = math.sqrt(dist_sq)
        factor = G * anchor_mass / (dist_sq * dist)
        ax = dx * factor
        ay = dy * factor
        az = dz * factor

        for j in range(num_bodies):
            if i == j:
                continue

            dx = positions[j, 0] - px
            dy = positions[j, 1] - py
            dz = positions[j, 2] - pz
            dist_sq = dx * dx + dy * dy + dz * dz
            if dist_sq == 0.0:
                return i, j
            dist = math.sqrt(dist_sq)
            factor = G * masses[j] / (dist_sq * dist)

            ax += dx * factor
            ay += dy * factor
            az += dz * factor

        accelerations[i, 0] = ax
        accelerations[i, 1] = ay
        accelerations[i, 2] = az

    return NO_DEGENERACY, NO_DEGENERACY


@njit(cache=True)
def symplectic_euler_update(
    positions: np.ndarray,
    velocities: np.ndarray,
    accelerations: np.ndarray,
    new_positions: np.ndarray,
    new_velocities: np.ndarray,
    dt: float,
    num_bodies: int,
):
    """Kick velocities, then drift positions with the kicked velocities."""
    for i in range(num_bodies):
        for d in range(3):
            v = velocities[i, d] + accelerations[i, d] * dt
            new_velocities[i, d] = v
            new_positions[i, d] = positions[i, d] + v * dt


# ============================================================================
# INTEGRATOR
# ============================================================================

_warmed_up = False


def _warmup_numba():
    """Pre-compile the kernels with a tiny system."""
    n = 2
    pos = np.array([[1.0, 0.0, 0.0], [0.0, 2.0, 0.0]], dtype=np.float64)
    vel = np.zeros((n, 3), dtype=np.float64)
    mass = np.ones(n, dtype=np.float64)
    acc = np.zeros((n, 3), dtype=np.float64)
    new_pos = np.zeros((n, 3), dtype=np.float64)
    new_vel = np.zeros((n, 3), dtype=np.float64)

    compute_accelerations(pos, mass, 1.0, 1.0, acc, n)
    symplectic_euler_update(pos, vel, acc, new_pos, new_vel, 0.01, n)


class GravityIntegrator:
    """
    Advances a BodyRegistry by one fixed time step per call.

    G and the time step come from the PhysicsConfig given at construction;
    step() takes nothing but the registry.
    """

    def __init__(self, physics: PhysicsConfig = None):
        global _warmed_up
        self.physics = physics if physics is not None else PhysicsConfig()
        self.G = self.physics.G
        self.dt = self.physics.time_step

        if not _warmed_up:
            _warmup_numba()
            _warmed_up = True
            print(f"[Integrator] Kernels ready (G={self.G:.5e}, dt={self.dt:g}s)")

    def accelerations(self, registry: BodyRegistry) -> np.ndarray:
        """
        Accelerations of all orbiters at the registry's current state.
        Raises DegenerateConfigurationError if two bodies coincide.
        """
        n = registry.num_orbiters
        acc = np.zeros((n, 3), dtype=np.float64)
        if n == 0:
            return acc

        i, j = compute_accelerations(
            registry.positions,
            registry.masses,
            registry.anchor.mass,
            self.G,
            acc,
            n,
        )
        if i != NO_DEGENERACY:
            # Registry indices: anchor is 0, orbiter k is k + 1
            body_b = 0 if j == ANCHOR_INDEX else j + 1
            raise DegenerateConfigurationError(
                i + 1, body_b,
                f"{registry.names[i + 1]} and {registry.names[body_b]} are coincident; "
                "gravitational force is undefined"
            )
        return acc

    def step(self, registry: BodyRegistry):
        """Advance the registry by one time step. State is unchanged on error."""
        n = registry.num_orbiters
        if n == 0:
            return

        acc = self.accelerations(registry)

        new_positions = np.empty((n, 3), dtype=np.float64)
        new_velocities = np.empty((n, 3), dtype=np.float64)
        symplectic_euler_update(
            registry.positions,
            registry.velocities,
            acc,
            new_positions,
            new_velocities,
            self.dt,
            n,
        )

        registry.commit(new_positions, new_velocities)

    def advance(self, registry: BodyRegistry, steps: int):
        """Run several consecutive steps."""
        if steps < 0:
            raise ValueError(f"steps must be non-negative, got {steps}")
        for _ in range(steps):
            self.step(registry)
