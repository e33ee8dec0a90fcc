import pytest

from config import solar as solar_config
from solar import BodyDescriptor, GravityIntegrator, PhysicsConfig, build_registry, load_descriptors

SUN_MASS = 1.98847e30
SUN_RADIUS = 7.9634e7
EARTH_MASS = 5.9724e24
EARTH_RADIUS = 6.3710e5
AU = 1.5e11


@pytest.fixture
def physics():
    return PhysicsConfig.from_config(solar_config.PHYSICS)


@pytest.fixture
def integrator(physics):
    return GravityIntegrator(physics)


@pytest.fixture
def sun():
    return BodyDescriptor("Sun", SUN_MASS, 0.0, SUN_RADIUS)


@pytest.fixture
def earth_sun(sun):
    return [sun, BodyDescriptor("Earth", EARTH_MASS, AU, EARTH_RADIUS, 0.0)]


@pytest.fixture
def earth_sun_registry(earth_sun, physics):
    return build_registry(earth_sun, physics)


@pytest.fixture
def solar_descriptors():
    return load_descriptors(solar_config.BODIES)


@pytest.fixture
def solar_registry(solar_descriptors, physics):
    return build_registry(solar_descriptors, physics)
