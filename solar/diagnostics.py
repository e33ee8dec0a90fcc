"""
Conserved-quantity diagnostics.

With the anchor held fixed, total energy (orbiter kinetic energy plus anchor
and mutual potential energy) and total angular momentum about the origin are
conserved by the exact dynamics. Symplectic Euler keeps the energy error
bounded and preserves angular momentum up to rounding, so drift in either is a
direct health check on a run.
"""

import numpy as np
from dataclasses import dataclass
from typing import Tuple

from .bodies import BodyRegistry


def kinetic_energy(registry: BodyRegistry) -> float:
    v_sq = np.sum(registry.velocities * registry.velocities, axis=1)
    return float(0.5 * np.sum(registry.masses * v_sq))


def potential_energy(registry: BodyRegistry, G: float) -> float:
    positions = registry.positions
    masses = registry.masses
    n = registry.num_orbiters

    anchor_dist = np.linalg.norm(positions, axis=1)
    energy = -float(np.sum(G * registry.anchor.mass * masses / anchor_dist))

    for i in range(n - 1):
        r = np.linalg.norm(positions[i + 1:] - positions[i], axis=1)
        energy -= float(np.sum(G * masses[i] * masses[i + 1:] / r))
    return energy


def total_energy(registry: BodyRegistry, G: float) -> float:
    return kinetic_energy(registry) + potential_energy(registry, G)


def angular_momentum(registry: BodyRegistry) -> np.ndarray:
    """Total angular momentum about the origin (kg m^2 / s)."""
    if registry.num_orbiters == 0:
        return np.zeros(3, dtype=np.float64)
    L = np.cross(registry.positions, registry.velocities) * registry.masses[:, None]
    return L.sum(axis=0)


@dataclass(frozen=True)
class Diagnostics:
    step: int
    sim_time: float
    kinetic: float
    potential: float
    total: float
    angular_momentum: Tuple[float, float, float]

    @classmethod
    def measure(cls, registry: BodyRegistry, G: float, step: int = 0, sim_time: float = 0.0) -> "Diagnostics":
        kinetic = kinetic_energy(registry)
        potential = potential_energy(registry, G)
        L = angular_momentum(registry)
        return cls(
            step=step,
            sim_time=sim_time,
            kinetic=kinetic,
            potential=potential,
            total=kinetic + potential,
            angular_momentum=(float(L[0]), float(L[1]), float(L[2])),
        )

    def relative_drift(self, reference: "Diagnostics") -> Tuple[float, float]:
        """(energy drift, angular momentum drift) relative to a reference record."""
        energy_drift = 0.0
        if reference.total != 0.0:
            energy_drift = abs(self.total - reference.total) / abs(reference.total)

        L_ref = np.asarray(reference.angular_momentum)
        L_now = np.asarray(self.angular_momentum)
        L_mag = np.linalg.norm(L_ref)
        momentum_drift = 0.0
        if L_mag != 0.0:
            momentum_drift = float(np.linalg.norm(L_now - L_ref) / L_mag)
        return energy_drift, momentum_drift


class EnergyMonitor:
    """Tracks drift of the conserved quantities against the first measurement."""

    def __init__(self, registry: BodyRegistry, G: float):
        self.G = G
        self.initial = Diagnostics.measure(registry, G)
        self.latest = self.initial
        self.max_energy_drift = 0.0
        self.max_momentum_drift = 0.0

    def check(self, registry: BodyRegistry, step: int = 0, sim_time: float = 0.0) -> Diagnostics:
        self.latest = Diagnostics.measure(registry, self.G, step, sim_time)
        energy_drift, momentum_drift = self.latest.relative_drift(self.initial)
        self.max_energy_drift = max(self.max_energy_drift, energy_drift)
        self.max_momentum_drift = max(self.max_momentum_drift, momentum_drift)
        return self.latest
