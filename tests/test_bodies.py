import numpy as np
import pytest

from solar import Anchor, BodyDescriptor, BodyRegistry


def make_registry():
    return BodyRegistry(
        Anchor("Star", 2e30, 7e8, (1.0, 0.8, 0.0, 1.0)),
        names=["Inner", "Outer"],
        masses=[1e24, 2e24],
        radii=[1e6, 2e6],
        positions=[[1e11, 0.0, 0.0], [0.0, 0.0, 2e11]],
        velocities=[[0.0, 0.0, 3e4], [2e4, 0.0, 0.0]],
    )


def test_anchor_is_index_zero():
    registry = make_registry()
    assert len(registry) == 3
    assert registry.names == ("Star", "Inner", "Outer")
    assert registry[0].is_anchor
    assert registry[0].color == (1.0, 0.8, 0.0, 1.0)
    assert registry[-1].name == "Outer"


def test_out_of_range_index_raises():
    registry = make_registry()
    with pytest.raises(IndexError):
        registry[3]
    with pytest.raises(IndexError):
        registry[-4]


def test_body_access_returns_copies():
    registry = make_registry()
    body = registry[1]
    body.position[0] = 0.0
    assert registry.positions[0, 0] == 1e11

    anchor = registry[0]
    anchor.position[:] = 5.0
    np.testing.assert_array_equal(registry.anchor.position, np.zeros(3))


def test_masses_and_radii_are_read_only():
    registry = make_registry()
    with pytest.raises(ValueError):
        registry.masses[0] = 1.0
    with pytest.raises(ValueError):
        registry.radii[0] = 1.0


def test_orbiter_state_is_read_only():
    registry = make_registry()
    with pytest.raises(ValueError):
        registry.positions[0] = 0.0
    with pytest.raises(ValueError):
        registry.velocities[1, 2] = 0.0
    assert registry.positions[0, 0] == 1e11


def test_commit_does_not_alias_caller_arrays():
    registry = make_registry()
    new_positions = np.ones((2, 3))
    new_velocities = np.zeros((2, 3))
    registry.commit(new_positions, new_velocities)

    new_positions[0, 0] = 123.0
    new_velocities[0, 0] = 123.0
    assert registry.positions[0, 0] == 1.0
    assert registry.velocities[0, 0] == 0.0
    with pytest.raises(ValueError):
        registry.positions[0, 0] = 5.0


def test_outer_orbit_radius_is_fixed_at_construction():
    registry = make_registry()
    registry.commit(np.full((2, 3), 1e12), np.zeros((2, 3)))
    assert registry.outer_orbit_radius == pytest.approx(2e11)
    assert registry.copy().outer_orbit_radius == pytest.approx(2e11)


def test_commit_replaces_state_and_checks_shape():
    registry = make_registry()
    new_positions = np.ones((2, 3))
    new_velocities = np.zeros((2, 3))
    registry.commit(new_positions, new_velocities)
    np.testing.assert_array_equal(registry.positions, new_positions)

    with pytest.raises(ValueError, match="shape"):
        registry.commit(np.ones((3, 3)), np.zeros((3, 3)))


def test_copy_is_independent():
    registry = make_registry()
    clone = registry.copy()
    clone.commit(np.zeros((2, 3)), np.zeros((2, 3)))
    assert registry.positions[0, 0] == 1e11
    assert clone.names == registry.names


def test_whole_registry_views():
    registry = make_registry()
    positions = registry.all_positions()
    assert positions.shape == (3, 3)
    np.testing.assert_array_equal(positions[0], np.zeros(3))
    np.testing.assert_array_equal(registry.all_radii(), [7e8, 1e6, 2e6])
    np.testing.assert_array_equal(registry.anchor_mask(), [True, False, False])
    assert registry.max_orbit_radius == pytest.approx(2e11)


def test_body_helpers():
    body = make_registry()[1]
    assert body.distance == pytest.approx(1e11)
    assert body.speed == pytest.approx(3e4)


def test_descriptor_from_dict_defaults():
    desc = BodyDescriptor.from_dict({"mass": 1.0, "radius": 2.0})
    assert desc.orbit_radius == 0.0
    assert desc.inclination == 0.0
    assert desc.color == (1.0, 1.0, 1.0, 1.0)
