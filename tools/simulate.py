"""
Headless Solar System Runner
============================

Advances a body table for a number of fixed steps and reports conservation
drift along the way. Useful for checking a configuration before handing it to
a renderer.

Usage:
    python -m tools.simulate                           # Reference system, 1 year
    python -m tools.simulate --preset earth_sun        # Named preset
    python -m tools.simulate --preset-id 2             # Preset by menu index
    python -m tools.simulate --years 10                # Simulated duration
    python -m tools.simulate --steps 5000 --dt 3600    # Explicit step count and step size
    python -m tools.simulate --list                    # List presets
"""

import sys
import time
import argparse
from datetime import timedelta

from config import solar as solar_config
from solar import (
    DegenerateConfigurationError,
    EnergyMonitor,
    PhysicsConfig,
    RenderScale,
    SolarError,
    SolarSystemSimulation,
    load_descriptors,
)
from tools.presets import PRESETS, get_preset_by_index, get_preset_config, print_preset_menu

SECONDS_PER_DAY = 86400.0
SECONDS_PER_YEAR = 365.25 * SECONDS_PER_DAY


def format_time(seconds: float) -> str:
    """Format wall-clock seconds - stays in seconds until 90s."""
    if seconds < 1.0:
        return f"{seconds*1000:.0f}ms"
    if seconds < 90:
        return f"{seconds:.1f}s"
    return str(timedelta(seconds=int(seconds)))


def years_to_steps(years: float, time_step: float) -> int:
    return max(0, int(round(years * SECONDS_PER_YEAR / time_step)))


def print_report(step: int, total: int, monitor: EnergyMonitor, sim_time: float):
    energy_drift, momentum_drift = monitor.latest.relative_drift(monitor.initial)
    pct = step / total * 100 if total else 100.0
    print(f"  {pct:5.1f}% | Step {step:>7d}/{total} | "
          f"Day {sim_time / SECONDS_PER_DAY:9.1f} | "
          f"dE/E {energy_drift:.3e} | dL/L {momentum_drift:.3e}")


def print_body_table(simulation: SolarSystemSimulation, scale: RenderScale):
    snapshot = simulation.snapshot()
    positions, radii = snapshot.to_render_space(scale)

    print(f"\n  {'Body':<10} {'x':>10} {'y':>10} {'z':>10} {'radius':>9}   (render units)")
    print(f"  {'-' * 56}")
    for name, pos, radius in zip(snapshot.names, positions, radii):
        print(f"  {name:<10} {pos[0]:10.3f} {pos[1]:10.3f} {pos[2]:10.3f} {radius:9.4f}")


def run(preset: dict, steps: int, report_every: int, physics: PhysicsConfig) -> EnergyMonitor:
    """Advance a preset and return its drift monitor. Raises SolarError on failure."""
    simulation = SolarSystemSimulation(load_descriptors(preset["bodies"]), physics, steps_per_frame=1)
    monitor = EnergyMonitor(simulation.registry, physics.G)
    scale = RenderScale.from_config(solar_config.RENDER)

    print(f"[Simulate] {preset['name']}: {steps:,} steps of {physics.time_step:g}s "
          f"({steps * physics.time_step / SECONDS_PER_YEAR:.2f} years)")

    start = time.time()
    for step in range(1, steps + 1):
        simulation.update()
        if step % report_every == 0 or step == steps:
            monitor.check(simulation.registry, step, simulation.sim_time)
            print_report(step, steps, monitor, simulation.sim_time)

    elapsed = time.time() - start
    print(f"\n[Simulate] Done in {format_time(elapsed)}")
    print(f"[Simulate] Max drift: energy {monitor.max_energy_drift:.3e}, "
          f"angular momentum {monitor.max_momentum_drift:.3e}")
    print_body_table(simulation, scale)
    return monitor


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Headless solar system simulation")
    parser.add_argument("--list", action="store_true", help="List available presets")
    parser.add_argument("--preset", type=str, default="solar_system", help="Preset by name (default: solar_system)")
    parser.add_argument("--preset-id", type=int, help="Preset by menu index")
    parser.add_argument("--steps", "-s", type=int, help="Number of integration steps")
    parser.add_argument("--years", "-y", type=float, help="Simulated duration in years (overrides --steps)")
    parser.add_argument("--dt", type=float, help="Override time step in seconds")
    parser.add_argument("--report-every", type=int, default=solar_config.SIMULATION["report_interval"],
                        help="Steps between drift reports")
    args = parser.parse_args(argv)

    if args.list:
        print_preset_menu()
        return 0

    if args.preset_id is not None:
        key, _ = get_preset_by_index(args.preset_id)
        if key is None:
            print(f"[Simulate] Invalid preset index: {args.preset_id}")
            return 1
        preset = get_preset_config(key)
        print(f"[Simulate] Using preset [{args.preset_id}]: {preset['name']}")
    else:
        preset = get_preset_config(args.preset)
        if preset is None:
            print(f"[Simulate] Unknown preset: {args.preset}")
            print("[Simulate] Available presets:")
            for key in sorted(PRESETS.keys()):
                print(f"  - {key}")
            return 1

    try:
        physics = PhysicsConfig.from_config(solar_config.PHYSICS)
        if args.dt is not None:
            physics = physics.with_time_step(args.dt)
            print(f"[Simulate] Override: dt={args.dt:g}s")

        if args.years is not None:
            steps = years_to_steps(args.years, physics.time_step)
        elif args.steps is not None:
            steps = args.steps
        else:
            steps = years_to_steps(1.0, physics.time_step)

        if steps < 0:
            print(f"[Simulate] Error: step count must be non-negative, got {steps}")
            return 1
        report_every = max(1, args.report_every)

        run(preset, steps, report_every, physics)
    except DegenerateConfigurationError as e:
        print(f"[Simulate] Error: degenerate configuration between bodies {e.body_a} and {e.body_b}: {e}")
        return 1
    except SolarError as e:
        print(f"[Simulate] Error: {e}")
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
