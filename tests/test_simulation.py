import numpy as np
import pytest

from config import solar as solar_config
from solar import PhysicsConfig, SolarSystemSimulation, load_descriptors


@pytest.fixture
def simulation():
    return SolarSystemSimulation()


def test_defaults_come_from_config(simulation):
    assert simulation.num_bodies == len(solar_config.BODIES)
    assert simulation.physics == PhysicsConfig.from_config(solar_config.PHYSICS)
    assert simulation.select(0).name == solar_config.BODIES[0]["name"]


def test_update_runs_one_fixed_step_per_frame(simulation):
    start = simulation.snapshot().positions.copy()

    # Frame time from the host does not change the physics step
    simulation.update(0.5)
    simulation.update(0.001)

    assert simulation.frame == 2
    assert simulation.steps == 2
    assert simulation.sim_time == 2 * simulation.physics.time_step
    assert not np.array_equal(simulation.snapshot().positions, start)


def test_paused_simulation_does_not_advance(simulation):
    simulation.toggle_pause()
    before = simulation.snapshot().positions.copy()
    simulation.run(5)

    assert simulation.frame == 0
    np.testing.assert_array_equal(simulation.snapshot().positions, before)

    assert simulation.toggle_pause() is False
    simulation.run(1)
    assert simulation.frame == 1


def test_reset_restores_initial_state(simulation):
    initial = simulation.snapshot()
    simulation.run(20)
    simulation.reset()

    assert simulation.frame == 0
    assert simulation.sim_time == 0.0
    np.testing.assert_array_equal(simulation.snapshot().positions, initial.positions)


def test_steps_per_frame():
    sim = SolarSystemSimulation(load_descriptors(), steps_per_frame=4)
    sim.update()
    assert sim.frame == 1
    assert sim.steps == 4

    with pytest.raises(ValueError):
        SolarSystemSimulation(steps_per_frame=0)


def test_snapshot_reports_frame_and_time(simulation):
    simulation.run(3)
    snapshot = simulation.snapshot()
    assert snapshot.frame == 3
    assert snapshot.sim_time == pytest.approx(3 * 43200.0)
    assert snapshot.names == simulation.registry.names


def test_diagnostics_track_steps(simulation):
    simulation.run(2)
    record = simulation.diagnostics()
    assert record.step == 2
    assert record.total < 0.0


def test_select_out_of_range(simulation):
    with pytest.raises(IndexError):
        simulation.select(len(solar_config.BODIES))
