import math

import numpy as np
import pytest

from solar import BodyDescriptor, ConfigurationError, build_registry, circular_orbit, effective_orbit_radius
from solar.initializer import MIN_SEPARATION_FACTOR

from .conftest import AU, EARTH_MASS, EARTH_RADIUS, SUN_MASS, SUN_RADIUS

G = 6.67430e-11


def test_effective_radius_keeps_large_orbits():
    assert effective_orbit_radius(AU, SUN_RADIUS, EARTH_RADIUS) == AU


@pytest.mark.parametrize("requested", [0.0, 1e6, 1e8])
def test_small_orbit_is_raised_to_separation_floor(requested):
    floor = MIN_SEPARATION_FACTOR * (SUN_RADIUS + 1e7)
    position, _ = circular_orbit(SUN_MASS, SUN_RADIUS, requested, 1e7, 0.0, G)

    assert np.linalg.norm(position) == pytest.approx(floor, rel=1e-15)
    assert floor == pytest.approx(1.5 * (SUN_RADIUS + 1e7))


def test_floor_applies_before_speed():
    floor = 1.5 * (SUN_RADIUS + EARTH_RADIUS)
    _, velocity = circular_orbit(SUN_MASS, SUN_RADIUS, 0.0, EARTH_RADIUS, 0.0, G)
    assert np.linalg.norm(velocity) == pytest.approx(math.sqrt(G * SUN_MASS / floor), rel=1e-14)


@pytest.mark.parametrize("inclination", [0.0, 7.0, 33.3, 90.0, -45.0, 400.0])
def test_initial_orbit_is_circular(inclination):
    position, velocity = circular_orbit(SUN_MASS, SUN_RADIUS, AU, EARTH_RADIUS, inclination, G)
    r = np.linalg.norm(position)
    v = np.linalg.norm(velocity)

    # Centripetal requirement matches gravity
    assert v * v / r == pytest.approx(G * SUN_MASS / r ** 2, rel=1e-12)
    # Velocity is tangent to the orbit
    assert abs(np.dot(position, velocity)) <= 1e-12 * r * v


def test_zero_inclination_stays_in_reference_plane():
    position, velocity = circular_orbit(SUN_MASS, SUN_RADIUS, AU, EARTH_RADIUS, 0.0, G)

    assert position[1] == 0.0
    assert velocity[1] == 0.0
    np.testing.assert_array_equal(position, [AU, 0.0, 0.0])


def test_ninety_degree_inclination():
    flat_position, _ = circular_orbit(SUN_MASS, SUN_RADIUS, AU, EARTH_RADIUS, 0.0, G)
    position, velocity = circular_orbit(SUN_MASS, SUN_RADIUS, AU, EARTH_RADIUS, 90.0, G)

    # The radius has swung a quarter turn from +x to +y
    assert flat_position[0] == pytest.approx(AU)
    assert abs(position[0]) < 1e-9 * AU
    assert position[1] == pytest.approx(AU)
    assert np.dot(position, flat_position) == pytest.approx(0.0, abs=1e-9 * AU * AU)
    # Velocity lies on the rotation axis and is unchanged
    np.testing.assert_allclose(velocity, [0.0, 0.0, math.sqrt(G * SUN_MASS / AU)], rtol=1e-15, atol=1e-12)


def test_earth_sun_initial_speed():
    _, velocity = circular_orbit(SUN_MASS, SUN_RADIUS, AU, EARTH_RADIUS, 0.0, 6.6743e-11)
    speed = np.linalg.norm(velocity)

    assert speed == pytest.approx(math.sqrt(6.6743e-11 * SUN_MASS / AU), rel=1e-14)
    assert speed == pytest.approx(29750.0, rel=1e-3)


def test_build_registry_puts_anchor_first(solar_registry, solar_descriptors):
    assert len(solar_registry) == 9
    assert solar_registry.names == tuple(d.name for d in solar_descriptors)

    anchor = solar_registry[0]
    assert anchor.is_anchor
    assert anchor.mass == solar_descriptors[0].mass
    np.testing.assert_array_equal(anchor.position, np.zeros(3))
    np.testing.assert_array_equal(anchor.velocity, np.zeros(3))
    assert not any(body.is_anchor for body in list(solar_registry)[1:])


def test_build_registry_ignores_anchor_orbit_radius(physics):
    table = [
        BodyDescriptor("Star", SUN_MASS, 9e11, SUN_RADIUS),
        BodyDescriptor("Planet", EARTH_MASS, AU, EARTH_RADIUS),
    ]
    registry = build_registry(table, physics)
    np.testing.assert_array_equal(registry[0].position, np.zeros(3))


def test_empty_table_is_rejected(physics):
    with pytest.raises(ConfigurationError, match="empty"):
        build_registry([], physics)


@pytest.mark.parametrize("field, value", [
    ("mass", 0.0),
    ("mass", -1.0),
    ("radius", 0.0),
    ("orbit_radius", -5.0),
    ("inclination", float("nan")),
])
def test_invalid_rows_are_rejected(physics, field, value):
    row = {"name": "Bad", "mass": EARTH_MASS, "orbit_radius": AU, "radius": EARTH_RADIUS, "inclination": 0.0}
    row[field] = value
    table = [BodyDescriptor("Sun", SUN_MASS, 0.0, SUN_RADIUS), BodyDescriptor.from_dict(row)]

    with pytest.raises(ConfigurationError, match="body 1"):
        build_registry(table, physics)


def test_configuration_error_is_a_value_error(physics):
    with pytest.raises(ValueError):
        build_registry([BodyDescriptor("Sun", -1.0, 0.0, SUN_RADIUS)], physics)
