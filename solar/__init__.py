"""Newtonian gravity engine for a small anchored planetary system."""

from .errors import SolarError, ConfigurationError, DegenerateConfigurationError
from .constants import PhysicsConfig, RenderScale
from .bodies import Anchor, Body, BodyDescriptor, BodyRegistry
from .initializer import build_registry, circular_orbit, effective_orbit_radius
from .integrator import GravityIntegrator
from .diagnostics import Diagnostics, EnergyMonitor
from .render import FrameSnapshot
from .simulation import SolarSystemSimulation, load_descriptors

__all__ = [
    "SolarError",
    "ConfigurationError",
    "DegenerateConfigurationError",
    "PhysicsConfig",
    "RenderScale",
    "Anchor",
    "Body",
    "BodyDescriptor",
    "BodyRegistry",
    "build_registry",
    "circular_orbit",
    "effective_orbit_radius",
    "GravityIntegrator",
    "Diagnostics",
    "EnergyMonitor",
    "FrameSnapshot",
    "SolarSystemSimulation",
    "load_descriptors",
]
